"""Restore target resolution.

Decides which backup artifact to read and where to write it, for either
input form:

- A backup name (``*.bak``): restored from that exact file. A
  timestamped backup goes back to its original name; a plain backup goes
  to ``<stem>.restored.<now>`` so it never overwrites anything.
- An original name: restored from the newest backup located for it,
  written back under the original's base name.
"""

from dataclasses import dataclass
from pathlib import Path

from safe_backup.constants import BACKUP_SUFFIX, RESTORED_MARKER
from safe_backup.context import OperationContext
from safe_backup.core.locator import find_latest_backup
from safe_backup.core.naming import BackupKind, classify_backup_name
from safe_backup.core.validation import base_name, validate_path
from safe_backup.exceptions import BackupNotFoundError, InvalidInputError
from safe_backup.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class RestorePlan:
    """Source and destination of a restore.

    Attributes:
        source: Backup artifact to copy from
        destination: File to write, always in the working directory
        kind: Naming form of the source backup

    """

    source: Path
    destination: Path
    kind: BackupKind


def _plan_from_backup_name(
    trimmed: str, context: OperationContext
) -> RestorePlan:
    source = validate_path(trimmed, context)
    if not source.exists():
        raise BackupNotFoundError("backup file not found", target=trimmed)

    parsed = classify_backup_name(base_name(trimmed))
    match parsed.kind:
        case BackupKind.TIMESTAMPED if parsed.original:
            destination = context.cwd / parsed.original
        case BackupKind.PLAIN if parsed.stem:
            destination = (
                context.cwd
                / f"{parsed.stem}.{RESTORED_MARKER}.{context.now()}"
            )
        case _:
            raise InvalidInputError("unparseable backup name", target=trimmed)

    return RestorePlan(source, destination, parsed.kind)


def _plan_from_original_name(
    trimmed: str, context: OperationContext
) -> RestorePlan:
    validate_path(trimmed, context)
    source = find_latest_backup(trimmed, context)
    destination = context.cwd / base_name(trimmed)
    kind = classify_backup_name(source.name).kind
    return RestorePlan(source, destination, kind)


def resolve_restore(name: str, context: OperationContext) -> RestorePlan:
    """Resolve the backup to read and the file to write for a restore.

    Args:
        name: Backup file name or original file name
        context: Operation context providing cwd and clock

    Returns:
        RestorePlan with absolute source and destination paths

    Raises:
        InvalidInputError: If the name fails validation or is a
            ``.bak`` name that matches no backup naming form
        BackupNotFoundError: If the named backup does not exist or no
            backup can be located for the original

    """
    trimmed = name.strip()
    if trimmed.endswith(BACKUP_SUFFIX):
        plan = _plan_from_backup_name(trimmed, context)
    else:
        plan = _plan_from_original_name(trimmed, context)

    logger.debug(
        "Restore plan for %s: %s -> %s (%s)",
        trimmed,
        plan.source.name,
        plan.destination.name,
        plan.kind.value,
    )
    return plan
