"""Tests for fuzzy matching CLI commands."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
from typer.testing import CliRunner

from foundationhelpers.cli.app import app

if TYPE_CHECKING:
    from pathlib import Path

runner = CliRunner()

pytestmark = pytest.mark.usefixtures("isolated_home")


class TestMatchDistance:
    """Tests for 'match distance'."""

    def test_prints_distance(self) -> None:
        result = runner.invoke(app, ["match", "distance", "kitten", "sitting"])

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "3"

    def test_empty_string(self) -> None:
        result = runner.invoke(app, ["match", "distance", "", "test"])

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "4"


class TestMatchClosest:
    """Tests for 'match closest'."""

    def test_finds_closest(self) -> None:
        result = runner.invoke(
            app, ["match", "closest", "appl", "apple", "banana", "cherry"]
        )

        assert result.exit_code == 0, result.output
        assert result.output.strip().splitlines()[-1] == "apple"

    def test_quiet_prints_only_match(self) -> None:
        result = runner.invoke(
            app, ["-q", "match", "closest", "bananna", "apple", "banana"]
        )

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "banana"

    def test_no_match_exits_1(self) -> None:
        result = runner.invoke(
            app, ["match", "closest", "xyz", "apple", "banana", "cherry"]
        )

        assert result.exit_code == 1
        assert "No match" in result.output

    def test_max_distance_option(self) -> None:
        result = runner.invoke(
            app, ["-q", "match", "closest", "ap", "apple", "--max-distance", "3"]
        )

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "apple"

    def test_negative_max_distance_rejected(self) -> None:
        result = runner.invoke(
            app, ["match", "closest", "a", "a", "--max-distance=-1"]
        )

        assert result.exit_code == 2

    def test_uses_configured_max_distance(self, isolated_home: Path) -> None:
        isolated_home.mkdir(parents=True)
        (isolated_home / "config.json").write_text(
            json.dumps({"version": "1", "max_distance": 0}), encoding="utf-8"
        )

        result = runner.invoke(app, ["match", "closest", "appl", "apple"])

        assert result.exit_code == 1

    def test_case_insensitive_config(self, isolated_home: Path) -> None:
        isolated_home.mkdir(parents=True)
        (isolated_home / "config.json").write_text(
            json.dumps({"version": "1", "case_sensitive": False}), encoding="utf-8"
        )

        result = runner.invoke(app, ["-q", "match", "closest", "APPLE", "Apple"])

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "Apple"

    def test_tie_goes_to_first_candidate(self) -> None:
        result = runner.invoke(app, ["-q", "match", "closest", "mat", "hat", "bat"])

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "hat"
