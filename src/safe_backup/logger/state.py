"""Logger state management module.

Holds the singleton that records whether the root ``safe_backup``
logger has been configured and which handlers it owns.
"""

import logging
import threading


class _LoggerState:
    """Container for logger state (avoids module-level mutable globals).

    Attributes:
        lock: Thread lock for singleton initialization
        root_initialized: Whether root logger has been set up
        config_applied: Whether settings file levels have been applied
        console_handler: Handler writing to stdout
        file_handler: Rotating file handler, if file logging is enabled

    """

    def __init__(self) -> None:
        """Initialize logger state."""
        self.lock = threading.Lock()
        self.root_initialized = False
        self.config_applied = False
        self.console_handler: logging.Handler | None = None
        self.file_handler: logging.Handler | None = None

    @property
    def handlers(self) -> list[logging.Handler]:
        """Handlers currently owned by the root logger."""
        return [
            h for h in (self.console_handler, self.file_handler) if h
        ]


_state = _LoggerState()


def get_state() -> _LoggerState:
    """Get the global logger state singleton."""
    return _state
