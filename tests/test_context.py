"""Tests for OperationContext."""

import getpass
from pathlib import Path

from safe_backup.context import OperationContext, unix_now


def test_now_uses_injected_clock(tmp_path: Path):
    """Test that now() delegates to the clock callable."""
    ctx = OperationContext(cwd=tmp_path, user="alice", clock=lambda: 42)
    assert ctx.now() == 42


def test_default_clock_returns_int(tmp_path: Path):
    """Test the default clock returns whole seconds."""
    ctx = OperationContext(cwd=tmp_path, user="alice")
    assert isinstance(ctx.now(), int)
    assert abs(ctx.now() - unix_now()) <= 1


def test_from_environment(monkeypatch, tmp_path: Path):
    """Test that the environment context uses cwd and login name."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(getpass, "getuser", lambda: "bob")

    ctx = OperationContext.from_environment()

    assert ctx.cwd == Path.cwd()
    assert ctx.user == "bob"


def test_from_environment_without_user(monkeypatch, tmp_path: Path):
    """Test fallback user name when no login name is available."""

    def no_user() -> str:
        raise OSError("No username set in the environment")

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(getpass, "getuser", no_user)

    assert OperationContext.from_environment().user == "unknown"
