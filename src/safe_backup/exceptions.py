"""Exception classes for safe-backup operations."""


class SafeBackupError(Exception):
    """Base exception for safe-backup operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional file name the failure relates to.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class InvalidInputError(SafeBackupError):
    """Raised when a file name is empty, absolute, or escapes the cwd."""

    error_prefix = "Invalid input"


class BackupNotFoundError(SafeBackupError):
    """Raised when a source file or backup artifact does not exist."""

    error_prefix = "Not found"


class BackupIOError(SafeBackupError):
    """Raised when copying, removing, or reading a file fails."""

    error_prefix = "I/O error"


class ActivityLogError(BackupIOError):
    """Raised when the activity log cannot be appended to."""

    error_prefix = "Activity log write failed"


class ConfigurationError(SafeBackupError):
    """Raised when settings or logging cannot be configured."""

    error_prefix = "Configuration error"
