"""Tests for CLIParser."""

import pytest

from safe_backup.cli.parser import CLIParser


@pytest.fixture
def cli_parser() -> CLIParser:
    """Fixture providing a CLIParser instance."""
    return CLIParser()


def test_no_command_means_interactive(cli_parser):
    args = cli_parser.parse_args([])
    assert args.command is None
    assert not args.version
    assert not args.verbose


@pytest.mark.parametrize("command", ["backup", "restore", "delete"])
def test_file_commands(cli_parser, command):
    args = cli_parser.parse_args([command, "report.txt"])
    assert args.command == command
    assert args.file == "report.txt"


def test_file_command_requires_file(cli_parser):
    with pytest.raises(SystemExit):
        cli_parser.parse_args(["backup"])


def test_history(cli_parser):
    assert cli_parser.parse_args(["history"]).command == "history"


def test_global_flags(cli_parser):
    args = cli_parser.parse_args(["--verbose", "--version"])
    assert args.verbose
    assert args.version


def test_unknown_command(cli_parser):
    with pytest.raises(SystemExit):
        cli_parser.parse_args(["rename", "a.txt"])
