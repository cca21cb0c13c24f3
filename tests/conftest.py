"""Pytest configuration and fixtures for safe-backup tests."""

import logging
from pathlib import Path

import pytest

from safe_backup.context import OperationContext


class FakeClock:
    """Settable clock returning Unix seconds."""

    def __init__(self, now: int = 1_700_000_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture(autouse=True)
def isolate_user_dirs(tmp_path_factory, monkeypatch):
    """Keep settings and diagnostic logs out of the real home directory."""
    base = tmp_path_factory.mktemp("safe-backup-home")
    monkeypatch.setenv("SAFE_BACKUP_CONFIG_DIR", str(base / "config"))
    monkeypatch.setenv("SAFE_BACKUP_LOG_DIR", str(base / "logs"))
    return base


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("safe_backup"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


@pytest.fixture
def clock() -> FakeClock:
    """Provide a clock fixed at 1700000000."""
    return FakeClock()


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Provide an empty working directory."""
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def context(workdir: Path, clock: FakeClock) -> OperationContext:
    """Provide an OperationContext anchored at workdir."""
    return OperationContext(cwd=workdir, user="tester", clock=clock)
