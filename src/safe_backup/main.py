"""Main CLI entry point for safe-backup.

This module provides the minimal entry point for the command-line
interface, delegating all functionality to CLIRunner.
"""

import sys

from safe_backup.cli import CLIRunner
from safe_backup.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Run the CLI application and exit with its status."""
    logger.debug("CLI started")
    try:
        status = CLIRunner().run()
    except KeyboardInterrupt:
        logger.info("CLI cancelled by user")
        sys.exit(1)
    except Exception:
        logger.exception("❌ Unexpected error")
        sys.exit(1)
    sys.exit(status)


if __name__ == "__main__":
    main()
