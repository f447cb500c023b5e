"""CLI context state management."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from foundationhelpers.infrastructure.paths import PathResolver

if TYPE_CHECKING:
    from foundationhelpers.infrastructure.config import GlobalConfig

__all__ = ["CLIContext"]


@dataclass
class CLIContext:
    """Global CLI context for verbosity, paths and config.

    Uses singleton pattern to share state across all CLI commands.

    Note: Mutable dataclass to allow setting verbose/quiet flags at runtime.
    Assumes single-threaded CLI environment.
    """

    verbose: bool = False
    quiet: bool = False
    resolver: PathResolver | None = None
    config: GlobalConfig | None = None

    _instance: ClassVar[CLIContext | None] = None

    @classmethod
    def get(cls) -> CLIContext:
        """Get the singleton CLI context instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_resolver(self) -> PathResolver:
        """Get the path resolver, creating it on first access."""
        if self.resolver is None:
            self.resolver = PathResolver()
        return self.resolver

    def get_config(self) -> GlobalConfig:
        """Get global config, loading and caching on first access.

        Returns:
            Loaded or default GlobalConfig instance.
        """
        if self.config is None:
            from foundationhelpers.infrastructure.config import load_global_config

            self.config = load_global_config(self.get_resolver())

        return self.config

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance.

        Useful for testing to ensure clean state.
        """
        cls._instance = None
