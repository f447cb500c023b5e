"""Tests for preferences CLI commands."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from typer.testing import CliRunner

from foundationhelpers.cli.app import app

if TYPE_CHECKING:
    from pathlib import Path

runner = CliRunner()


def _stored(home: Path) -> dict[str, object]:
    return json.loads((home / "preferences.json").read_text(encoding="utf-8"))


class TestPrefsSetGet:
    """Tests for 'prefs set' and 'prefs get'."""

    def test_set_parses_json(self, isolated_home: Path) -> None:
        result = runner.invoke(app, ["prefs", "set", "launchCount", "3"])

        assert result.exit_code == 0, result.output
        assert _stored(isolated_home) == {"launchCount": 3}

    def test_set_falls_back_to_string(self, isolated_home: Path) -> None:
        runner.invoke(app, ["prefs", "set", "username", "ada"])

        assert _stored(isolated_home) == {"username": "ada"}

    def test_set_raw(self, isolated_home: Path) -> None:
        runner.invoke(app, ["prefs", "set", "lastAppVersion", "1.0", "--raw"])

        assert _stored(isolated_home) == {"lastAppVersion": "1.0"}

    def test_get_prints_json(self, isolated_home: Path) -> None:
        runner.invoke(app, ["prefs", "set", "enableDebugMode", "true"])

        result = runner.invoke(app, ["prefs", "get", "enableDebugMode"])

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "true"

    def test_get_missing_suggests_well_known_key(self, isolated_home: Path) -> None:
        result = runner.invoke(app, ["prefs", "get", "launchCont"])

        assert result.exit_code == 1
        assert "No preference" in result.output
        assert "Did you mean?" in result.output
        assert "launchCount" in result.output

    def test_get_missing_suggests_stored_key(self, isolated_home: Path) -> None:
        runner.invoke(app, ["prefs", "set", "favouriteColour", "blue"])

        result = runner.invoke(app, ["prefs", "get", "favoriteColor"])

        assert result.exit_code == 1
        assert "favouriteColour" in result.output


class TestPrefsUnset:
    """Tests for 'prefs unset'."""

    def test_removes_key(self, isolated_home: Path) -> None:
        runner.invoke(app, ["prefs", "set", "username", "ada"])

        result = runner.invoke(app, ["prefs", "unset", "username"])

        assert result.exit_code == 0, result.output
        assert _stored(isolated_home) == {}

    def test_missing_key_exits_1(self, isolated_home: Path) -> None:
        result = runner.invoke(app, ["prefs", "unset", "username"])

        assert result.exit_code == 1


class TestPrefsListing:
    """Tests for 'prefs list' and 'prefs keys'."""

    def test_list_empty(self, isolated_home: Path) -> None:
        result = runner.invoke(app, ["prefs", "list"])

        assert result.exit_code == 0, result.output
        assert "No preferences stored" in result.output

    def test_list_shows_values(self, isolated_home: Path) -> None:
        runner.invoke(app, ["prefs", "set", "username", "ada"])

        result = runner.invoke(app, ["prefs", "list"])

        assert result.exit_code == 0, result.output
        assert "username" in result.output
        assert '"ada"' in result.output

    def test_keys_lists_well_known_keys(self, isolated_home: Path) -> None:
        result = runner.invoke(app, ["prefs", "keys"])

        assert result.exit_code == 0, result.output
        assert "hasSeenOnboarding" in result.output
        assert "notificationsEnabled" in result.output
