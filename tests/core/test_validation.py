"""Tests for path validation."""

from pathlib import Path

import pytest

from safe_backup.context import OperationContext
from safe_backup.core.validation import base_name, validate_path
from safe_backup.exceptions import InvalidInputError


class TestValidatePath:
    """Tests for validate_path function."""

    @pytest.mark.parametrize(
        "name",
        ["report.txt", "notes.md", "sub/notes.md", "file..txt", ".hidden"],
    )
    def test_relative_names_anchor_at_cwd(
        self, name: str, context: OperationContext
    ) -> None:
        """Test accepted names are joined onto the working directory."""
        result = validate_path(name, context)
        assert result == context.cwd / name
        assert str(result) == f"{context.cwd}/{name}"

    def test_input_is_trimmed(self, context: OperationContext) -> None:
        """Test surrounding whitespace is removed."""
        assert validate_path("  report.txt \n", context) == (
            context.cwd / "report.txt"
        )

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_empty_rejected(
        self, name: str, context: OperationContext
    ) -> None:
        """Test empty and whitespace-only names are rejected."""
        with pytest.raises(InvalidInputError, match="empty file name"):
            validate_path(name, context)

    @pytest.mark.parametrize("name", ["/etc/passwd", "/tmp/x.txt", " /abs"])
    def test_absolute_rejected(
        self, name: str, context: OperationContext
    ) -> None:
        """Test absolute paths are rejected."""
        with pytest.raises(InvalidInputError, match="absolute"):
            validate_path(name, context)

    @pytest.mark.parametrize(
        "name",
        [
            "../secret.txt",
            "a/../b.txt",
            "./../x",
            "..\\secret.txt",
            "a\\..\\b",
            "..",
            "a/..",
        ],
    )
    def test_traversal_rejected(
        self, name: str, context: OperationContext
    ) -> None:
        """Test parent-directory traversal is rejected in any position."""
        with pytest.raises(InvalidInputError, match="traversal"):
            validate_path(name, context)

    @pytest.mark.parametrize("name", ["notes.md/", "sub/", "notes.md\\"])
    def test_trailing_separator_rejected(
        self, name: str, context: OperationContext
    ) -> None:
        """Test names ending in a separator are not collapsed to a file."""
        with pytest.raises(InvalidInputError, match="not a file name"):
            validate_path(name, context)

    def test_rejection_touches_nothing(
        self, context: OperationContext
    ) -> None:
        """Test a rejected name leaves the working directory untouched."""
        with pytest.raises(InvalidInputError):
            validate_path("../outside.txt", context)
        assert list(context.cwd.iterdir()) == []

    def test_symlinks_are_not_resolved(
        self, context: OperationContext, tmp_path: Path
    ) -> None:
        """Test the returned path is not canonicalized."""
        target = tmp_path / "elsewhere.txt"
        target.write_text("x")
        (context.cwd / "link.txt").symlink_to(target)

        assert validate_path("link.txt", context) == context.cwd / "link.txt"


class TestBaseName:
    """Tests for base_name function."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("report.txt", "report.txt"),
            ("dir/report.txt", "report.txt"),
            (" archive.tar.gz ", "archive.tar.gz"),
            ("noext", "noext"),
        ],
    )
    def test_final_segment(self, name: str, expected: str) -> None:
        """Test the final path segment is returned with its extension."""
        assert base_name(name) == expected

    @pytest.mark.parametrize("name", ["", "/", ".", "..", "  "])
    def test_no_segment(self, name: str) -> None:
        """Test inputs without a usable final segment are rejected."""
        with pytest.raises(InvalidInputError, match="invalid file name"):
            base_name(name)
