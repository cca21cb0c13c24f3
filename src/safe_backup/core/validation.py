"""Path validation for user-supplied file names.

Every operation passes its input through ``validate_path`` before any
filesystem access. A name is accepted only when it is non-empty,
relative, free of ``..`` segments and not ending in a separator. The
accepted name is anchored at the context's working directory without
resolving symlinks. Backslashes count as separators in both checks.
"""

from pathlib import Path, PurePath

from safe_backup.context import OperationContext
from safe_backup.exceptions import InvalidInputError
from safe_backup.logger import get_logger

logger = get_logger(__name__)

_PARENT_SEGMENT = ".."
_SEPARATORS = ("/", "\\")


def _has_parent_segment(name: str) -> bool:
    """Return True if any slash-delimited segment of name is ``..``."""
    normalized = name.replace("\\", "/")
    return _PARENT_SEGMENT in normalized.split("/")


def validate_path(name: str, context: OperationContext) -> Path:
    """Validate a file name and anchor it at the working directory.

    Args:
        name: File name as typed by the user
        context: Operation context providing the working directory

    Returns:
        Absolute path of the trimmed name inside ``context.cwd``

    Raises:
        InvalidInputError: If the name is empty, absolute, contains a
            parent-directory traversal, or ends with a path separator

    """
    trimmed = name.strip()
    if not trimmed:
        raise InvalidInputError("empty file name")
    if PurePath(trimmed).is_absolute():
        raise InvalidInputError("absolute paths not allowed", target=trimmed)
    if _has_parent_segment(trimmed):
        logger.warning("Rejected traversal attempt: %s", trimmed)
        raise InvalidInputError(
            "parent traversal not allowed", target=trimmed
        )
    if trimmed.endswith(_SEPARATORS):
        raise InvalidInputError("not a file name", target=trimmed)

    candidate = context.cwd / trimmed
    logger.debug("Validated %s -> %s", trimmed, candidate)
    return candidate


def base_name(name: str) -> str:
    """Return the final path segment of a file name.

    Args:
        name: File name, optionally with directory components

    Returns:
        Final segment, including its extension

    Raises:
        InvalidInputError: If there is no usable final segment

    """
    segment = PurePath(name.strip()).name
    if segment in ("", ".", _PARENT_SEGMENT):
        raise InvalidInputError("invalid file name", target=name)
    return segment
