"""Tests for the interactive prompt loop."""

from pathlib import Path

from safe_backup.cli.interactive import InteractiveSession
from safe_backup.constants import PROMPT_COMMAND, PROMPT_FILENAME


def _run(service, scripted_io, answers):
    io = scripted_io(answers)
    InteractiveSession(service, io.input, io.print).run()
    return io


def test_exit_words_end_session(service, scripted_io):
    for word in ("exit", "QUIT", " Exit "):
        io = _run(service, scripted_io, [word])
        assert io.lines == ["Bye."]
        assert io.prompts == [PROMPT_FILENAME]


def test_end_of_input_ends_session(service, scripted_io):
    io = _run(service, scripted_io, [])
    assert io.lines == ["Bye."]


def test_backup_restore_delete(service, scripted_io, workdir: Path, clock):
    clock.now = 1000
    (workdir / "notes.md").write_text("milk")

    io = _run(
        service,
        scripted_io,
        [
            "notes.md", "backup",
            "notes.md", "DELETE",
            "notes.md", "Restore",
            "exit",
        ],
    )

    assert "Your backup created: notes.md.1000.bak" in io.lines
    assert "Deleted: notes.md" in io.lines
    assert "Your file has been restored: notes.md" in io.lines
    assert io.lines[-1] == "Bye."
    assert (workdir / "notes.md").read_text() == "milk"
    assert io.prompts[:2] == [PROMPT_FILENAME, PROMPT_COMMAND]


def test_invalid_name_reprompts_without_command(service, scripted_io):
    io = _run(service, scripted_io, ["../etc/passwd", "exit"])

    assert io.prompts == [PROMPT_FILENAME, PROMPT_FILENAME]
    assert io.lines[0].startswith("❌ Invalid input")
    assert io.lines[-1] == "Bye."


def test_unknown_command_continues(service, scripted_io):
    io = _run(service, scripted_io, ["a.txt", "rename", "exit"])

    assert "❌ unknown command: rename" in io.lines
    assert io.lines[-1] == "Bye."


def test_errors_continue_loop(service, scripted_io, workdir: Path):
    io = _run(
        service,
        scripted_io,
        ["missing.txt", "delete", "missing.txt", "restore", "exit"],
    )

    errors = [line for line in io.lines if line.startswith("❌")]
    assert len(errors) == 2
    assert "Not found" in errors[0]
    assert "no backup file found" in errors[1]
    assert io.lines[-1] == "Bye."
    assert not (workdir / "logfile.txt").exists()


def test_end_of_input_at_command_prompt(service, scripted_io):
    io = _run(service, scripted_io, ["a.txt"])
    assert io.prompts == [PROMPT_FILENAME, PROMPT_COMMAND]
    assert io.lines == ["Bye."]
