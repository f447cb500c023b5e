"""Tests for CLI formatter functions."""

from __future__ import annotations

from unittest.mock import patch

from rich.panel import Panel
from rich.table import Table

from foundationhelpers.cli.context import CLIContext
from foundationhelpers.cli.formatters import (
    format_value,
    print_config,
    print_did_you_mean,
    print_info,
    print_preferences_table,
)


class TestPrintInfo:
    """Tests for print_info function."""

    def setup_method(self) -> None:
        """Reset context before each test."""
        CLIContext.reset()

    def teardown_method(self) -> None:
        """Reset context after each test."""
        CLIContext.reset()

    def test_prints_message_normally(self) -> None:
        """Should print message when not in quiet mode."""
        with patch("foundationhelpers.cli.formatters.console") as mock_console:
            print_info("Test message")
            mock_console.print.assert_called_once()
            assert "Test message" in mock_console.print.call_args[0][0]

    def test_suppressed_in_quiet_mode(self) -> None:
        """Should not print when quiet."""
        CLIContext.get().quiet = True
        with patch("foundationhelpers.cli.formatters.console") as mock_console:
            print_info("Test message")
            mock_console.print.assert_not_called()


class TestPrintDidYouMean:
    """Tests for print_did_you_mean function."""

    def test_no_suggestions_prints_nothing(self) -> None:
        with patch("foundationhelpers.cli.formatters.console") as mock_console:
            print_did_you_mean([])
            mock_console.print.assert_not_called()

    def test_prints_each_suggestion(self) -> None:
        with patch("foundationhelpers.cli.formatters.console") as mock_console:
            print_did_you_mean(["launchCount", "username"])
            printed = " ".join(
                str(call.args[0])
                for call in mock_console.print.call_args_list
                if call.args
            )
            assert "Did you mean?" in printed
            assert "launchCount" in printed
            assert "username" in printed


class TestPreferencesTable:
    """Tests for print_preferences_table function."""

    def setup_method(self) -> None:
        CLIContext.reset()

    def teardown_method(self) -> None:
        CLIContext.reset()

    def test_empty_prints_info(self) -> None:
        with patch("foundationhelpers.cli.formatters.console") as mock_console:
            print_preferences_table({})
            assert "No preferences" in mock_console.print.call_args[0][0]

    def test_prints_table(self) -> None:
        with patch("foundationhelpers.cli.formatters.console") as mock_console:
            print_preferences_table({"b": 1, "a": "x"})
            table = mock_console.print.call_args[0][0]
            assert isinstance(table, Table)
            assert table.row_count == 2


class TestPrintConfig:
    """Tests for print_config function."""

    def test_prints_panel(self) -> None:
        with patch("foundationhelpers.cli.formatters.console") as mock_console:
            print_config(max_distance=3, case_sensitive=False, path="/tmp/c.json")
            panel = mock_console.print.call_args[0][0]
            assert isinstance(panel, Panel)
            assert "3" in str(panel.renderable)
            assert "no" in str(panel.renderable)


class TestFormatValue:
    """Tests for format_value function."""

    def test_json_rendering(self) -> None:
        assert format_value("ada") == '"ada"'
        assert format_value(3) == "3"
        assert format_value(True) == "true"
        assert format_value({"a": [1]}) == '{"a": [1]}'
