"""Command-line interface for safe-backup."""

from safe_backup.cli.runner import CLIRunner

__all__ = ["CLIRunner"]
