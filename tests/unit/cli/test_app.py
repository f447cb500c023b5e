"""Tests for the main CLI application."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from foundationhelpers import __version__
from foundationhelpers.cli.app import app
from foundationhelpers.cli.context import CLIContext

runner = CliRunner()

pytestmark = pytest.mark.usefixtures("isolated_home")


class TestMainApp:
    """Tests for the top-level callback and options."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"foundationhelpers {__version__}" in result.output

    def test_no_args_shows_help(self) -> None:
        result = runner.invoke(app, [])

        assert "match" in result.output
        assert "prefs" in result.output

    def test_quiet_flag_sets_context(self) -> None:
        runner.invoke(app, ["-q", "match", "distance", "a", "b"])

        assert CLIContext.get().quiet is True

    def test_verbose_flag_sets_context(self) -> None:
        runner.invoke(app, ["-v", "match", "distance", "a", "b"])

        assert CLIContext.get().verbose is True
