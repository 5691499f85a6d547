"""Tests for the CLI interface."""

import pytest
from rich.console import Console
from typer.testing import CliRunner

from markstyle import cli
from markstyle.cli import app


runner = CliRunner()


@pytest.fixture(autouse=True)
def wide_console(monkeypatch: pytest.MonkeyPatch):
    """Render tables wide enough that cells are not wrapped."""
    monkeypatch.setattr(cli, "console", Console(width=200))


class TestCLI:
    """Tests for CLI commands."""

    def test_version_flag(self):
        """Test --version flag."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "markstyle v" in result.stdout

    def test_help_flag(self):
        """Test --help flag."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "resolve" in result.stdout

    def test_resolve_list_bold(self):
        """Test resolving a list variant."""
        result = runner.invoke(app, ["resolve", "list", "bold"])

        assert result.exit_code == 0
        assert "LIST_BOLD" in result.stdout
        assert "Helvetica-Bold 16pt" in result.stdout
        assert "indent 4" in result.stdout

    def test_resolve_invalid_combination(self):
        """Test an invalid combination resolves to the default style."""
        result = runner.invoke(app, ["resolve", "header1", "bold"])

        assert result.exit_code == 0
        assert "HEADER1|BOLD" in result.stdout
        assert "Helvetica 16pt" in result.stdout

    def test_resolve_inline_header(self):
        """Test --inline shrinks headers to body size."""
        result = runner.invoke(app, ["resolve", "header1", "--inline"])

        assert result.exit_code == 0
        assert "Helvetica-Bold 16pt" in result.stdout
        assert "28pt" not in result.stdout

    def test_resolve_unknown_tag(self):
        """Test an unknown tag name is an error."""
        result = runner.invoke(app, ["resolve", "blink"])

        assert result.exit_code == 1
        assert "Unknown markdown tag" in result.stdout

    def test_table(self):
        """Test the table lists every valid tag."""
        result = runner.invoke(app, ["table"])

        assert result.exit_code == 0
        for name in ("NONE", "HEADER3", "LIST_PREFIX", "LIST_BOLD_ITALIC", "LIST_CODE"):
            assert name in result.stdout
        assert "Courier 16pt" in result.stdout
