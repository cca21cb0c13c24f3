"""Locate the most recent backup of an original file.

Timestamped backups are discovered by scanning the working directory
(non-recursively). When none exist the plain ``<stem>.bak`` artifact is
used as a fallback.
"""

from pathlib import Path

from safe_backup.context import OperationContext
from safe_backup.core.naming import (
    BackupKind,
    classify_backup_name,
    plain_backup_path,
)
from safe_backup.core.validation import base_name
from safe_backup.exceptions import BackupIOError, BackupNotFoundError
from safe_backup.logger import get_logger

logger = get_logger(__name__)


def list_timestamped_backups(
    original: str, context: OperationContext
) -> list[tuple[int, Path]]:
    """List timestamped backups of an original file, newest first.

    Entries are matched on the ``<basename>.`` prefix, so
    ``report.txt.100.bak`` is also a backup of ``report``. Entries whose
    names do not end in a numeric ``.<ts>.bak`` are skipped. Equal
    timestamps are ordered by file name so the result does not depend on
    directory enumeration order.

    Args:
        original: Original file name
        context: Operation context providing the working directory

    Returns:
        List of (timestamp, path) pairs sorted newest first

    Raises:
        InvalidInputError: If original has no final path segment
        BackupIOError: If the working directory cannot be listed

    """
    prefix = f"{base_name(original)}."
    found: list[tuple[int, Path]] = []
    try:
        entries = list(context.cwd.iterdir())
    except OSError as e:
        msg = f"cannot list {context.cwd}: {e}"
        raise BackupIOError(msg) from e

    for entry in entries:
        if not entry.name.startswith(prefix) or not entry.is_file():
            continue
        parsed = classify_backup_name(entry.name)
        if (
            parsed.kind is BackupKind.TIMESTAMPED
            and parsed.timestamp is not None
        ):
            found.append((parsed.timestamp, entry))

    found.sort(key=lambda item: (-item[0], item[1].name))
    return found


def find_latest_backup(original: str, context: OperationContext) -> Path:
    """Return the newest backup of an original file.

    Args:
        original: Original file name
        context: Operation context providing the working directory

    Returns:
        Path of the newest timestamped backup, or of the plain backup
        when no timestamped backup exists

    Raises:
        InvalidInputError: If original has no final path segment
        BackupNotFoundError: If no backup of any kind exists

    """
    backups = list_timestamped_backups(original, context)
    if backups:
        timestamp, latest = backups[0]
        logger.debug(
            "Latest backup of %s: %s (ts=%d)", original, latest.name, timestamp
        )
        return latest

    plain = plain_backup_path(original, context)
    if plain.exists():
        logger.debug("Falling back to plain backup: %s", plain.name)
        return plain

    raise BackupNotFoundError("no backup file found", target=original)
