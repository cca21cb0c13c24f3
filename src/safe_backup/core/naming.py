"""Backup artifact naming.

Two artifacts are produced for an original file, both siblings in the
working directory:

- ``<basename>.<unix-seconds>.bak``: one per backup, never rewritten
- ``<stem>.bak``: the most recent backup, rewritten on every backup

``classify_backup_name`` turns a file name back into a tagged outcome so
callers branch on the kind instead of slicing strings.
"""

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePath

from safe_backup.constants import BACKUP_SUFFIX, MAX_TIMESTAMP
from safe_backup.context import OperationContext
from safe_backup.core.validation import base_name

_DIGITS = re.compile(r"[0-9]+")


class BackupKind(Enum):
    """Kinds of file names recognised by ``classify_backup_name``."""

    TIMESTAMPED = "timestamped"
    PLAIN = "plain"
    NOT_BACKUP = "not_backup"


@dataclass(frozen=True, slots=True)
class ParsedBackupName:
    """Outcome of classifying a file name.

    Attributes:
        kind: Which naming form matched
        name: The classified file name
        original: Original file name (timestamped backups only)
        timestamp: Embedded Unix seconds (timestamped backups only)
        stem: Stem of the original (plain backups only)

    """

    kind: BackupKind
    name: str
    original: str | None = None
    timestamp: int | None = None
    stem: str | None = None


def parse_timestamp(segment: str) -> int | None:
    """Parse an unsigned integer timestamp segment.

    Returns:
        The integer value, or None if segment is not all ASCII digits or
        does not fit in 64 bits

    """
    if not _DIGITS.fullmatch(segment):
        return None
    value = int(segment)
    if value > MAX_TIMESTAMP:
        return None
    return value


def classify_backup_name(file_name: str) -> ParsedBackupName:
    """Classify a bare file name as a timestamped, plain, or non-backup.

    Only the final dot-delimited segment before ``.bak`` is considered a
    timestamp, so dots inside the original name are preserved.

    Args:
        file_name: Base file name (no directory components)

    Returns:
        Tagged classification result

    """
    if not file_name.endswith(BACKUP_SUFFIX):
        return ParsedBackupName(BackupKind.NOT_BACKUP, file_name)

    body = file_name.removesuffix(BACKUP_SUFFIX)
    original, dot, segment = body.rpartition(".")
    if dot and original:
        timestamp = parse_timestamp(segment)
        if timestamp is not None:
            return ParsedBackupName(
                BackupKind.TIMESTAMPED,
                file_name,
                original=original,
                timestamp=timestamp,
            )

    if body:
        return ParsedBackupName(BackupKind.PLAIN, file_name, stem=body)
    return ParsedBackupName(BackupKind.NOT_BACKUP, file_name)


def timestamped_name(original: str, timestamp: int) -> str:
    """Return ``<basename>.<timestamp>.bak`` for an original file name.

    Raises:
        InvalidInputError: If original has no final path segment

    """
    return f"{base_name(original)}.{timestamp}{BACKUP_SUFFIX}"


def plain_name(original: str) -> str:
    """Return ``<stem>.bak`` for an original file name.

    Raises:
        InvalidInputError: If original has no final path segment

    """
    stem = PurePath(base_name(original)).stem
    return f"{stem}{BACKUP_SUFFIX}"


def timestamped_backup_path(
    original: str, timestamp: int, context: OperationContext
) -> Path:
    """Return the timestamped backup destination in the working directory."""
    return context.cwd / timestamped_name(original, timestamp)


def plain_backup_path(original: str, context: OperationContext) -> Path:
    """Return the plain backup destination in the working directory."""
    return context.cwd / plain_name(original)
