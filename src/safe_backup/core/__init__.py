"""Core backup logic: validation, naming, location and restore.

Public API:
    - validate_path: Reject unsafe names and anchor them at the cwd
    - classify_backup_name: Tag a file name as timestamped/plain/other
    - find_latest_backup: Newest backup of an original file
    - resolve_restore: Source and destination of a restore
    - BackupService: Backup, restore and delete façade
"""

from safe_backup.core.activity import ActivityLog
from safe_backup.core.locator import (
    find_latest_backup,
    list_timestamped_backups,
)
from safe_backup.core.naming import (
    BackupKind,
    ParsedBackupName,
    classify_backup_name,
    plain_name,
    timestamped_name,
)
from safe_backup.core.restore import RestorePlan, resolve_restore
from safe_backup.core.service import BackupService
from safe_backup.core.validation import base_name, validate_path

__all__ = [
    "ActivityLog",
    "BackupKind",
    "BackupService",
    "ParsedBackupName",
    "RestorePlan",
    "base_name",
    "classify_backup_name",
    "find_latest_backup",
    "list_timestamped_backups",
    "plain_name",
    "resolve_restore",
    "timestamped_name",
    "validate_path",
]
