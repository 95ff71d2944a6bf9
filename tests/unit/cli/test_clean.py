"""Unit tests for the clean command.

Tests for docsweep clean and the global CLI options.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
from docsweep import __version__
from docsweep.cli.display import COMPLETION_MESSAGE
from docsweep.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestCleanCommand:
    """Tests for docsweep clean command."""

    def test_clean_sweeps_working_directory(
        self, docs_tree: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Clean promotes localized files under the current directory."""
        monkeypatch.chdir(docs_tree)

        result = runner.invoke(app, ["clean"])

        assert result.exit_code == 0
        assert (docs_tree / "intro.mdx").read_text() == "intro zh"
        assert not (docs_tree / "guide.mdx").exists()
        assert not list(docs_tree.rglob("*-zh.mdx"))

    def test_clean_prints_progress(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """One line per deleted and renamed file, then the completion line."""
        (tmp_path / "guide.mdx").write_text("guide en")
        (tmp_path / "intro-zh.mdx").write_text("intro zh")
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["clean"])

        assert result.exit_code == 0
        assert f"Deleted {tmp_path.resolve() / 'guide.mdx'}" in result.output
        assert "Renamed" in result.output
        assert str(tmp_path.resolve() / "intro.mdx") in result.output
        assert "1 deleted, 1 renamed" in result.output
        assert result.output.rstrip().endswith(COMPLETION_MESSAGE)

    def test_clean_no_mdx_files(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A tree without .mdx files still completes normally."""
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["clean"])

        assert result.exit_code == 0
        assert "No .mdx files found" in result.output
        assert COMPLETION_MESSAGE in result.output

    def test_clean_failure_exits_zero(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        fail_unlink: Callable[..., Any],
    ) -> None:
        """Per-file failures are reported without changing the exit code."""
        (tmp_path / "guide.mdx").write_text("guide en")
        (tmp_path / "intro-zh.mdx").write_text("intro zh")
        monkeypatch.chdir(tmp_path)

        with fail_unlink("guide.mdx"):
            result = runner.invoke(app, ["clean"])

        assert result.exit_code == 0
        assert "Failed to delete" in result.output
        assert "1 succeeded, 1 failed" in result.output
        assert (tmp_path / "intro.mdx").read_text() == "intro zh"
        assert COMPLETION_MESSAGE in result.output

    def test_clean_quiet_hides_success_lines(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """--quiet keeps only errors and the completion line."""
        (tmp_path / "guide.mdx").write_text("guide en")
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["--quiet", "clean"])

        assert result.exit_code == 0
        assert "Deleted" not in result.output
        assert COMPLETION_MESSAGE in result.output
        assert not (tmp_path / "guide.mdx").exists()

    def test_clean_traversal_error_exits_one(self, tmp_path: Path) -> None:
        """An unreadable root aborts with exit code 1."""
        missing = tmp_path / "missing"

        with patch("docsweep.cli.commands.clean.get_project_root", return_value=missing):
            result = runner.invoke(app, ["clean"])

        assert result.exit_code == 1
        assert "Cannot read documentation tree" in result.output
        assert COMPLETION_MESSAGE not in result.output


class TestMainApp:
    """Tests for global options."""

    def test_version(self) -> None:
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_args_shows_help(self) -> None:
        """Running without a command shows help."""
        result = runner.invoke(app, [])

        assert "clean" in result.output

    def test_verbose_configures_debug_logging(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """--verbose passes verbose=True to the logging setup."""
        monkeypatch.chdir(tmp_path)

        with patch("docsweep.cli.main.configure_logging") as mock_configure:
            result = runner.invoke(app, ["--verbose", "clean"])

        assert result.exit_code == 0
        mock_configure.assert_called_once_with(verbose=True)
