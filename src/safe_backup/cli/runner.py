"""CLI runner for safe-backup.

Loads settings, configures logging, builds the BackupService and routes
parsed arguments to a one-shot command or the interactive prompt.
"""

from argparse import Namespace
from collections.abc import Callable, Sequence
from datetime import datetime

from safe_backup import __version__
from safe_backup.cli.interactive import InteractiveSession, run_file_command
from safe_backup.cli.parser import CLIParser
from safe_backup.config import ConfigManager
from safe_backup.context import OperationContext
from safe_backup.core import BackupService
from safe_backup.exceptions import ConfigurationError, SafeBackupError
from safe_backup.logger import (
    get_logger,
    setup_file_logging,
    update_logger_from_config,
)
from safe_backup.logger.config import apply_levels
from safe_backup.logger.state import get_state

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(
        self,
        config_manager: ConfigManager | None = None,
        context: OperationContext | None = None,
        input_func: Callable[[str], str] = input,
        print_func: Callable[..., None] = print,
    ) -> None:
        """Initialize CLI runner with shared dependencies.

        Args:
            config_manager: Configuration manager (created if None)
            context: Operation context (built from the environment if None)
            input_func: Prompt reader for the interactive session
            print_func: Output writer

        """
        self.config_manager = config_manager or ConfigManager()
        self.context = context
        self.input_func = input_func
        self.print_func = print_func

    def _setup_logging(self, *, verbose: bool) -> None:
        """Apply settings file log levels and enable file logging."""
        settings = self.config_manager.load_settings()
        try:
            setup_file_logging(file_level=settings["log_level"])
        except ConfigurationError as e:
            # Diagnostics only; operations still work without a log file
            logger.warning("%s", e)
        update_logger_from_config(settings)
        if verbose:
            apply_levels(get_state(), "DEBUG", settings["log_level"])

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Run the CLI application.

        Args:
            argv: Command-line arguments (defaults to sys.argv[1:])

        Returns:
            Process exit status

        """
        args = CLIParser().parse_args(argv)

        if args.version:
            self.print_func(__version__)
            return EXIT_OK

        try:
            self._setup_logging(verbose=args.verbose)
            service = BackupService.create_default(
                self.config_manager, self.context
            )
            return self._execute_command(service, args)
        except KeyboardInterrupt:
            self.print_func("\n⏹️  Operation cancelled by user")
            return EXIT_FAILURE
        except SafeBackupError as e:
            logger.debug("Command failed: %s", e)
            self.print_func(f"❌ {e}")
            return EXIT_FAILURE

    def _execute_command(self, service: BackupService, args: Namespace) -> int:
        """Execute the parsed command.

        Raises:
            SafeBackupError: If the command fails

        """
        match args.command:
            case None:
                InteractiveSession(
                    service, self.input_func, self.print_func
                ).run()
            case "history":
                self._print_history(service)
            case command:
                run_file_command(service, command, args.file, self.print_func)
        return EXIT_OK

    def _print_history(self, service: BackupService) -> None:
        records = service.history()
        if not records:
            self.print_func("No activity recorded.")
            return
        for record in records:
            when = datetime.fromtimestamp(record.get("ts", 0)).astimezone()
            self.print_func(
                f"{when:%Y-%m-%d %H:%M:%S}  {record.get('user', '?'):<12} "
                f"{record.get('action', '?'):<8} {record.get('file', '')}  "
                f"{record.get('result', '')}"
            )
