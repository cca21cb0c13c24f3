"""CLI argument parser for safe-backup.

Handles parsing of command-line arguments. Running without a subcommand
starts the interactive prompt.
"""

import argparse
from argparse import Namespace
from collections.abc import Sequence

from safe_backup.constants import ACTION_BACKUP, ACTION_DELETE, ACTION_RESTORE


class CLIParser:
    """Command-line argument parser for safe-backup."""

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:])

        Returns:
            Parsed arguments namespace; ``command`` is None when no
            subcommand was given

        """
        parser = self._create_main_parser()
        self._add_global_options(parser)
        self._add_subcommands(parser)
        return parser.parse_args(argv)

    def _create_main_parser(self) -> argparse.ArgumentParser:
        return argparse.ArgumentParser(
            prog="safe-backup",
            description="Safe backup, restore and delete of files in the "
            "current directory",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Interactive prompt (type exit or quit to leave)
  %(prog)s

  # Create report.txt.<unix-seconds>.bak and report.bak
  %(prog)s backup report.txt

  # Restore report.txt from its newest backup
  %(prog)s restore report.txt

  # Restore from a specific backup
  %(prog)s restore report.txt.1700000000.bak
  %(prog)s restore report.bak      # writes report.restored.<now>

  # Delete a file and show the activity log
  %(prog)s delete report.txt
  %(prog)s history
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        """Add --version and --verbose to the main parser."""
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show safe-backup version and exit",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Print debug messages to the console",
        )

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )

        file_commands = {
            ACTION_BACKUP: "Back up a file to timestamped and plain copies",
            ACTION_RESTORE: "Restore a file from a backup or original name",
            ACTION_DELETE: "Delete a file in the current directory",
        }
        for command, help_text in file_commands.items():
            sub = subparsers.add_parser(command, help=help_text)
            sub.add_argument("file", help="File name relative to the cwd")

        subparsers.add_parser("history", help="Show the activity log")
