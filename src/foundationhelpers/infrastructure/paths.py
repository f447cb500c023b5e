"""Path resolution for foundationhelpers storage."""

from __future__ import annotations

import os
from pathlib import Path

__all__ = [
    "HOME_ENV_VAR",
    "PathResolver",
]

# Overrides the storage base directory when set
HOME_ENV_VAR = "FOUNDATIONHELPERS_HOME"


class PathResolver:
    """Resolves paths for foundationhelpers storage.

    Storage layout:
        ~/.foundationhelpers/
        ├── config.json
        └── preferences.json
    """

    def __init__(self, base: Path | None = None) -> None:
        """Initialize path resolver.

        Args:
            base: Base directory for storage. Defaults to $FOUNDATIONHELPERS_HOME
                or ~/.foundationhelpers.
        """
        if base is None:
            env_home = os.environ.get(HOME_ENV_VAR)
            base = Path(env_home) if env_home else Path.home() / ".foundationhelpers"
        self.base = base

    def global_config(self) -> Path:
        """Path to global configuration file."""
        return self.base / "config.json"

    def preferences(self) -> Path:
        """Path to the persisted preferences store."""
        return self.base / "preferences.json"
