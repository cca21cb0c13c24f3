"""Interactive prompt loop.

Reads a file name, then a command, and dispatches to BackupService.
Errors are printed and the loop continues; only ``exit``/``quit`` (or
end of input) ends the session.
"""

from collections.abc import Callable

from safe_backup.constants import (
    ACTION_BACKUP,
    ACTION_DELETE,
    ACTION_RESTORE,
    EXIT_WORDS,
    PROMPT_COMMAND,
    PROMPT_FILENAME,
)
from safe_backup.core import BackupService, validate_path
from safe_backup.exceptions import SafeBackupError
from safe_backup.logger import get_logger

logger = get_logger(__name__)


def run_file_command(
    service: BackupService,
    command: str,
    name: str,
    print_func: Callable[..., None] = print,
) -> None:
    """Run backup, restore or delete on one file and print the result.

    Raises:
        SafeBackupError: If the operation fails
        KeyError: If command is not one of the file commands

    """
    match command:
        case "backup":
            path = service.backup(name)
            print_func(f"Your backup created: {path.name}")
        case "restore":
            path = service.restore(name)
            print_func(f"Your file has been restored: {path.name}")
        case "delete":
            service.delete(name)
            print_func(f"Deleted: {name.strip()}")
        case _:
            raise KeyError(command)


class InteractiveSession:
    """Prompt loop over a BackupService."""

    commands = (ACTION_BACKUP, ACTION_RESTORE, ACTION_DELETE)

    def __init__(
        self,
        service: BackupService,
        input_func: Callable[[str], str] = input,
        print_func: Callable[..., None] = print,
    ) -> None:
        """Initialize the session.

        Args:
            service: Service that performs the operations
            input_func: Prompt reader (replaced in tests)
            print_func: Output writer (replaced in tests)

        """
        self.service = service
        self.input_func = input_func
        self.print_func = print_func

    def _prompt(self, text: str) -> str | None:
        """Read one trimmed line, or None at end of input."""
        try:
            return self.input_func(text).strip()
        except EOFError:
            return None

    def _error(self, message: object) -> None:
        self.print_func(f"❌ {message}")

    def run(self) -> None:
        """Run the loop until an exit word or end of input."""
        logger.debug(
            "Interactive session started in %s", self.service.context.cwd
        )
        while True:
            filename = self._prompt(PROMPT_FILENAME)
            if filename is None or filename.lower() in EXIT_WORDS:
                self.print_func("Bye.")
                break

            try:
                validate_path(filename, self.service.context)
            except SafeBackupError as e:
                self._error(e)
                continue

            command = self._prompt(PROMPT_COMMAND)
            if command is None:
                self.print_func("Bye.")
                break

            self.handle(filename, command.lower())
            self.print_func()

    def handle(self, filename: str, command: str) -> bool:
        """Dispatch one command and print its outcome.

        Returns:
            True if the command succeeded

        """
        if command not in self.commands:
            self._error(f"unknown command: {command}")
            return False

        try:
            run_file_command(self.service, command, filename, self.print_func)
        except SafeBackupError as e:
            logger.debug("%s %s failed: %s", command, filename, e)
            self._error(e)
            return False
        return True
