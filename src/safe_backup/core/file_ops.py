"""File operations for backup, restore and delete.

Thin wrappers over shutil/pathlib that report failures as
``BackupIOError`` so callers only need to handle safe-backup errors.
"""

import shutil
from pathlib import Path

from safe_backup.exceptions import BackupIOError
from safe_backup.logger import get_logger

logger = get_logger(__name__)


class FileOperations:
    """File system operations utility."""

    def copy_file(self, source: Path, destination: Path) -> Path:
        """Copy file contents from source to destination.

        An existing destination is overwritten. Parent directories are
        never created.

        Args:
            source: File to read
            destination: File to write

        Returns:
            Destination path

        Raises:
            BackupIOError: If reading or writing fails

        """
        logger.debug("Copying file: %s -> %s", source.name, destination.name)
        try:
            shutil.copyfile(source, destination)
        except OSError as e:
            msg = f"cannot copy {source.name} to {destination.name}: {e}"
            raise BackupIOError(msg) from e
        return destination

    def remove_file(self, path: Path) -> None:
        """Remove a single file.

        Args:
            path: File to delete

        Raises:
            BackupIOError: If the file cannot be removed

        """
        logger.debug("Removing file: %s", path)
        try:
            path.unlink()
        except OSError as e:
            msg = f"cannot remove {path.name}: {e}"
            raise BackupIOError(msg) from e
