"""Append-only activity log.

Each successful operation appends one compact JSON object per line
(wrapped here):

    {"ts":1700000000,"user":"alice","action":"backup",
     "file":"notes.md","result":"ok"}

``file`` is the name exactly as the user supplied it, not the resolved
path. Records are only written on success.
"""

from pathlib import Path

import orjson

from safe_backup.constants import ACTIONS, RESULT_OK
from safe_backup.context import OperationContext
from safe_backup.exceptions import ActivityLogError, BackupIOError
from safe_backup.logger import get_logger
from safe_backup.types import ActivityRecord

logger = get_logger(__name__)


class ActivityLog:
    """Writer and reader for the activity log file."""

    def __init__(self, path: Path, context: OperationContext) -> None:
        """Initialize activity log.

        Args:
            path: Log file location
            context: Context supplying the clock and acting user

        """
        self.path = path
        self.context = context

    def record(
        self, action: str, file_name: str, result: str = RESULT_OK
    ) -> ActivityRecord:
        """Append one record to the log.

        Args:
            action: One of backup, restore, delete
            file_name: Name argument as supplied by the user
            result: Outcome marker

        Returns:
            The record that was written

        Raises:
            ValueError: If action is not a known action
            ActivityLogError: If the log file cannot be written

        """
        if action not in ACTIONS:
            msg = f"Unknown activity action: {action}"
            raise ValueError(msg)

        entry: ActivityRecord = {
            "ts": self.context.now(),
            "user": self.context.user,
            "action": action,
            "file": file_name,
            "result": result,
        }
        try:
            with self.path.open("ab") as f:
                f.write(orjson.dumps(entry) + b"\n")
        except OSError as e:
            logger.exception("Failed to append to %s", self.path)
            raise ActivityLogError(str(e), target=self.path.name) from e

        logger.debug("Activity recorded: %s %s", action, file_name)
        return entry

    def read_records(self) -> list[ActivityRecord]:
        """Read all records back, oldest first.

        Lines that are not valid JSON objects are skipped with a warning.

        Raises:
            BackupIOError: If the log file exists but cannot be read

        """
        if not self.path.exists():
            return []

        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise BackupIOError(str(e), target=self.path.name) from e

        records: list[ActivityRecord] = []
        for lineno, line in enumerate(raw.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                data = orjson.loads(line)
            except orjson.JSONDecodeError as e:
                logger.warning(
                    "Skipping corrupted line %d in %s: %s",
                    lineno,
                    self.path,
                    e,
                )
                continue
            if isinstance(data, dict):
                records.append(data)
        return records
