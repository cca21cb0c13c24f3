"""Fixtures for CLI tests."""

from collections.abc import Iterable

import pytest

from safe_backup.context import OperationContext
from safe_backup.core import ActivityLog, BackupService


class ScriptedIO:
    """Feeds canned answers to prompts and records printed lines."""

    def __init__(self, answers: Iterable[str] = ()) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def print(self, *args: object) -> None:
        self.lines.append(" ".join(str(a) for a in args))

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def scripted_io():
    """Provide a factory for ScriptedIO."""
    return ScriptedIO


@pytest.fixture
def service(context: OperationContext) -> BackupService:
    """Create BackupService writing its activity log into the workdir."""
    return BackupService(
        context, ActivityLog(context.cwd / "logfile.txt", context)
    )
