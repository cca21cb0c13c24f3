"""BackupService orchestrating backup, restore and delete.

This module provides the operation façade:
- Validating the user-supplied name before touching the filesystem
- Creating the timestamped and plain backup artifacts
- Restoring from a resolved backup
- Deleting a validated file
- Recording every success in the activity log
"""

from pathlib import Path
from typing import TYPE_CHECKING

from safe_backup.constants import (
    ACTION_BACKUP,
    ACTION_DELETE,
    ACTION_RESTORE,
)
from safe_backup.context import OperationContext
from safe_backup.core.activity import ActivityLog
from safe_backup.core.file_ops import FileOperations
from safe_backup.core.naming import (
    plain_backup_path,
    timestamped_backup_path,
)
from safe_backup.core.restore import resolve_restore
from safe_backup.core.validation import validate_path
from safe_backup.exceptions import BackupNotFoundError, InvalidInputError
from safe_backup.logger import get_logger
from safe_backup.types import ActivityRecord

if TYPE_CHECKING:
    from safe_backup.config import ConfigManager

logger = get_logger(__name__)


def _require_regular_file(path: Path, name: str, what: str) -> None:
    if not path.exists():
        raise BackupNotFoundError(f"{what} does not exist", target=name)
    if not path.is_file():
        raise InvalidInputError("not a regular file", target=name)


class BackupService:
    """Service for backing up, restoring and deleting working-dir files."""

    def __init__(
        self,
        context: OperationContext,
        activity_log: ActivityLog,
        file_ops: FileOperations | None = None,
    ) -> None:
        """Initialize backup service with dependencies.

        Args:
            context: Working directory, clock and user for this session
            activity_log: Log that records successful operations
            file_ops: File operations helper (created if None)

        """
        self.context = context
        self.activity_log = activity_log
        self.file_ops = file_ops or FileOperations()

    @classmethod
    def create_default(
        cls,
        config_manager: "ConfigManager | None" = None,
        context: OperationContext | None = None,
    ) -> "BackupService":
        """Create BackupService with default dependencies.

        Args:
            config_manager: Optional configuration manager
                (creates new if None)
            context: Optional context (built from the environment if None)

        Returns:
            Configured BackupService instance

        """
        if config_manager is None:
            # Import here to avoid circular dependency
            from safe_backup.config import ConfigManager  # noqa: PLC0415

            config_manager = ConfigManager()

        context = context or OperationContext.from_environment()
        settings = config_manager.load_settings()
        log_path = validate_path(settings["activity"]["log_file"], context)
        return cls(context, ActivityLog(log_path, context))

    def backup(self, name: str) -> Path:
        """Back up a file to its timestamped and plain artifacts.

        Args:
            name: File name relative to the working directory

        Returns:
            Path of the timestamped backup artifact

        Raises:
            InvalidInputError: If the name fails validation
            BackupNotFoundError: If the source file does not exist
            BackupIOError: If copying or logging fails

        """
        source = validate_path(name, self.context)
        _require_regular_file(source, name, "source file")

        timestamp = self.context.now()
        ts_backup = timestamped_backup_path(name, timestamp, self.context)
        plain_backup = plain_backup_path(name, self.context)

        self.file_ops.copy_file(source, ts_backup)
        if plain_backup == source:
            # Backing up "<stem>.bak" itself; it already is the plain copy
            logger.debug("Plain backup is the source: %s", source.name)
        else:
            self.file_ops.copy_file(source, plain_backup)
        self.activity_log.record(ACTION_BACKUP, name)

        logger.info("Backup created: %s", ts_backup.name)
        return ts_backup

    def restore(self, name: str) -> Path:
        """Restore a file from a backup name or an original name.

        Args:
            name: Backup file name (``*.bak``) or original file name

        Returns:
            Path of the restored file

        Raises:
            InvalidInputError: If the name fails validation or cannot be
                parsed as a backup name
            BackupNotFoundError: If no suitable backup exists
            BackupIOError: If copying or logging fails

        """
        plan = resolve_restore(name, self.context)
        self.file_ops.copy_file(plan.source, plan.destination)
        self.activity_log.record(ACTION_RESTORE, name)

        logger.info(
            "Restored %s from %s", plan.destination.name, plan.source.name
        )
        return plan.destination

    def delete(self, name: str) -> None:
        """Delete a validated file from the working directory.

        Args:
            name: File name relative to the working directory

        Raises:
            InvalidInputError: If the name fails validation
            BackupNotFoundError: If the file does not exist
            BackupIOError: If removal or logging fails

        """
        target = validate_path(name, self.context)
        _require_regular_file(target, name, "file")

        self.file_ops.remove_file(target)
        self.activity_log.record(ACTION_DELETE, name)
        logger.info("Deleted: %s", target.name)

    def history(self) -> list[ActivityRecord]:
        """Return activity log records, oldest first."""
        return self.activity_log.read_records()
