"""Tests for exception classes."""

import pytest

from safe_backup.exceptions import (
    ActivityLogError,
    BackupIOError,
    BackupNotFoundError,
    ConfigurationError,
    InvalidInputError,
    SafeBackupError,
)


class TestSafeBackupError:
    """Test base error formatting."""

    def test_basic_initialization(self):
        """Test error without a target."""
        error = SafeBackupError("Test error")
        assert error.message == "Test error"
        assert error.target is None
        assert str(error) == "Operation failed: Test error"

    def test_initialization_with_target(self):
        """Test error with a target."""
        error = SafeBackupError("boom", target="notes.md")
        assert str(error) == "Operation failed for 'notes.md': boom"

    def test_empty_target_is_omitted(self):
        """Test that an empty target is treated like no target."""
        assert str(SafeBackupError("boom", target="")) == (
            "Operation failed: boom"
        )


@pytest.mark.parametrize(
    ("error_cls", "prefix"),
    [
        (InvalidInputError, "Invalid input"),
        (BackupNotFoundError, "Not found"),
        (BackupIOError, "I/O error"),
        (ActivityLogError, "Activity log write failed"),
        (ConfigurationError, "Configuration error"),
    ],
)
def test_error_prefixes(error_cls, prefix):
    """Test each error kind carries its own prefix."""
    error = error_cls("details", target="f.txt")
    assert isinstance(error, SafeBackupError)
    assert str(error) == f"{prefix} for 'f.txt': details"


def test_activity_log_error_is_io_error():
    """Test that logging failures are reported as I/O failures."""
    with pytest.raises(BackupIOError):
        raise ActivityLogError("disk full", target="logfile.txt")
