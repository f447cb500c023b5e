"""Shared test fixtures for foundationhelpers tests."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
import structlog

from foundationhelpers.cli.context import CLIContext
from foundationhelpers.infrastructure.paths import HOME_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None]:
    """Undo logging configuration made by CLI invocations."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def isolated_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path]:
    """Point storage at a temporary directory and reset CLI state.

    Returns the storage base directory.
    """
    home = temp_dir / ".foundationhelpers"
    monkeypatch.setenv(HOME_ENV_VAR, str(home))
    CLIContext.reset()
    yield home
    CLIContext.reset()
