"""Global configuration persistence.

Handles reading and writing global config.json with schema versioning.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

import structlog

from foundationhelpers.infrastructure.jsonfile import (
    JSONFileError,
    decode_file,
    encode_file,
)
from foundationhelpers.infrastructure.paths import PathResolver
from foundationhelpers.infrastructure.similarity import DEFAULT_MAX_DISTANCE

__all__ = [
    "ConfigError",
    "GlobalConfig",
    "load_global_config",
    "save_global_config",
]

logger = structlog.get_logger()

# Current schema version - increment when making breaking changes
# v1: Initial schema with max_distance and case_sensitive
SCHEMA_VERSION = "1"


class ConfigError(Exception):
    """Raised when configuration operations fail."""


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration for foundationhelpers.

    Attributes:
        max_distance: Default tolerance for closest-match lookups in the CLI.
        case_sensitive: When false, the CLI lowercases inputs before matching.
    """

    max_distance: int = DEFAULT_MAX_DISTANCE
    case_sensitive: bool = True

    def __post_init__(self) -> None:
        if self.max_distance < 0:
            raise ValueError(
                f"max_distance must be non-negative, got {self.max_distance}"
            )


def save_global_config(
    config: GlobalConfig, resolver: PathResolver | None = None
) -> None:
    """Save global configuration to a JSON file.

    Args:
        config: Configuration to save.
        resolver: Path resolver (defaults to a fresh PathResolver).

    Raises:
        ConfigError: If saving fails.
    """
    if resolver is None:
        resolver = PathResolver()

    path = resolver.global_config()
    try:
        encode_file(_config_to_dict(config), path)
    except JSONFileError as e:
        raise ConfigError(f"Failed to save config: {e}") from e

    logger.debug("config_saved", path=str(path))


def load_global_config(resolver: PathResolver | None = None) -> GlobalConfig:
    """Load global configuration from a JSON file.

    Returns default config if the file doesn't exist or is invalid.

    Args:
        resolver: Path resolver (defaults to a fresh PathResolver).

    Returns:
        GlobalConfig instance (uses defaults if file missing or invalid).
    """
    if resolver is None:
        resolver = PathResolver()

    path = resolver.global_config()
    data = decode_file(path)

    if data is None:
        return GlobalConfig()

    if not isinstance(data, dict):
        logger.warning("config_not_an_object", path=str(path))
        return GlobalConfig()

    version = data.get("version")
    if version and version != SCHEMA_VERSION:
        logger.warning(
            "config_version_mismatch",
            path=str(path),
            expected=SCHEMA_VERSION,
            found=version,
        )
        # Still try to load - be forward-compatible

    try:
        return _dict_to_config(data)
    except (TypeError, ValueError) as e:
        logger.warning("config_parse_error", path=str(path), error=str(e))
        return GlobalConfig()


def _config_to_dict(config: GlobalConfig) -> dict[str, Any]:
    """Convert config to JSON-serializable dict with version field."""
    data = asdict(config)
    data["version"] = SCHEMA_VERSION
    return data


def _dict_to_config(data: dict[str, Any]) -> GlobalConfig:
    """Convert dict to GlobalConfig.

    Raises:
        TypeError: If a field has an invalid type.
        ValueError: If a field has an invalid value.
    """
    max_distance = data.get("max_distance", DEFAULT_MAX_DISTANCE)
    case_sensitive = data.get("case_sensitive", True)

    # bool is an int subclass, reject it explicitly
    if not isinstance(max_distance, int) or isinstance(max_distance, bool):
        raise TypeError(f"max_distance must be an integer, got {max_distance!r}")
    if not isinstance(case_sensitive, bool):
        raise TypeError(f"case_sensitive must be a boolean, got {case_sensitive!r}")

    return GlobalConfig(max_distance=max_distance, case_sensitive=case_sensitive)
