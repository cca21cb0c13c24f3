"""Main logger module providing public API functions.

- setup_logging(): Configure the root logger once and return a logger
- get_logger(): Convenience wrapper used by every module
- flush_all_handlers(): Ensure pending records are written
- setup_file_logging(): Enable the rotating log file after startup
- clear_logger_state(): Reset global logger state for tests
"""

import atexit
import contextlib
import logging
from pathlib import Path

from safe_backup.constants import LOGGER_ROOT_NAME
from safe_backup.logger.config import load_log_settings
from safe_backup.logger.handlers import create_file_handler, setup_root_logger
from safe_backup.logger.state import get_state


def flush_all_handlers() -> None:
    """Flush every handler owned by the root logger."""
    for handler in get_state().handlers:
        with contextlib.suppress(OSError, ValueError):
            # Handler already closed
            handler.flush()


def _cleanup_logging() -> None:
    """Flush and close handlers on application exit."""
    state = get_state()
    for handler in state.handlers:
        handler.close()


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = LOGGER_ROOT_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Configure logging and return the named logger.

    The root ``safe_backup`` logger is initialized exactly once; later
    calls only look up the requested logger.

    Handler Configuration:
        - Console: StreamHandler to stdout with hybrid formatting
        - File: RotatingFileHandler (1 MB, 3 rotated files)

    Args:
        name: Logger name, typically __name__
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level ("DEBUG", "INFO")
        log_file: Path to log file
            (default: ~/.config/safe-backup/logs/safe-backup.log)
        enable_file_logging: Whether to enable file logging

    Returns:
        Logger instance

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            if console_level is None or file_level is None or log_file is None:
                cfg_console, cfg_file, cfg_path = load_log_settings()
                console_level = console_level or cfg_console
                file_level = file_level or cfg_file
                log_file = log_file or cfg_path

            setup_root_logger(
                state,
                console_level,
                file_level,
                log_file,
                enable_file_logging,
            )

    return logging.getLogger(name)


def get_logger(
    name: str = LOGGER_ROOT_NAME,
    enable_file_logging: bool = False,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Get a logger in the ``safe_backup`` hierarchy.

    Module-level loggers are created at import time, before any settings
    are known, so file logging stays off until the CLI calls
    ``setup_logging`` with ``enable_file_logging=True``.

    Best Practice:
        >>> logger = get_logger(__name__)
        >>> logger.info("Backup created: %s", name)

    Args:
        name: Logger name, typically __name__ for module loggers
        enable_file_logging: Whether to enable file logging if this call
            initializes the root logger

    Returns:
        Configured logger instance

    """
    return setup_logging(name=name, enable_file_logging=enable_file_logging)


def setup_file_logging(
    log_file: Path | None = None, file_level: str | None = None
) -> logging.Logger:
    """Attach the rotating file handler to an initialized root logger.

    Does nothing if file logging is already enabled.

    Args:
        log_file: Path to log file (default from load_log_settings)
        file_level: File log level (default from load_log_settings)

    Returns:
        The root safe_backup logger

    Raises:
        ConfigurationError: If the log file cannot be opened

    """
    root_logger = setup_logging()
    state = get_state()
    with state.lock:
        if state.file_handler is None:
            _, cfg_file, cfg_path = load_log_settings()
            state.file_handler = create_file_handler(
                log_file or cfg_path, file_level or cfg_file
            )
            root_logger.addHandler(state.file_handler)
    return root_logger


def clear_logger_state() -> None:
    """Clear global logger state for testing purposes.

    Closes and detaches the root handlers and resets state flags so the
    next ``setup_logging`` call starts from scratch. Module-level loggers
    stay registered so existing references keep propagating.

    Warning:
        This function is intended for testing only.

    """
    state = get_state()
    with state.lock:
        root_logger = logging.getLogger(LOGGER_ROOT_NAME)
        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)
        state.console_handler = None
        state.file_handler = None
        state.root_initialized = False
        state.config_applied = False

        for logger_name in list(logging.Logger.manager.loggerDict.keys()):
            if logger_name.startswith("test-"):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    handler.close()
                    log_instance.removeHandler(handler)
                del logging.Logger.manager.loggerDict[logger_name]
