"""Explicit ambient context for backup operations.

The working directory, wall clock and acting user are passed around in
an ``OperationContext`` instead of being read from the process at each
call site, so the validator, resolvers and activity log stay pure
functions of their arguments.
"""

import getpass
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path


def unix_now() -> int:
    """Return the current Unix time in whole seconds."""
    return int(time.time())


@dataclass(frozen=True)
class OperationContext:
    """Working directory, clock and user identity for one session.

    Attributes:
        cwd: Directory every candidate path is anchored to
        user: Name recorded in activity log entries
        clock: Callable returning Unix-epoch seconds

    """

    cwd: Path
    user: str
    clock: Callable[[], int] = field(default=unix_now, compare=False)

    @classmethod
    def from_environment(cls) -> "OperationContext":
        """Build a context from the running process.

        Returns:
            Context anchored at the current working directory

        """
        try:
            user = getpass.getuser()
        except (OSError, KeyError):
            # No login name in the environment or password database
            user = "unknown"
        return cls(cwd=Path.cwd(), user=user)

    def now(self) -> int:
        """Return the context clock's current timestamp."""
        return self.clock()
