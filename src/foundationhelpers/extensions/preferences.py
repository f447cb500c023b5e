"""Persisted key-value preferences.

PreferenceKey lists the well-known keys so callers avoid typos.
PreferencesStore keeps the values in a single JSON object on disk.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any

import structlog

from foundationhelpers.infrastructure.jsonfile import (
    JSONFileError,
    decode_file,
    encode_file,
)
from foundationhelpers.infrastructure.similarity import (
    DEFAULT_MAX_DISTANCE,
    closest_match_in_enum,
)

if TYPE_CHECKING:
    from pathlib import Path

__all__ = [
    "PreferenceKey",
    "PreferencesError",
    "PreferencesStore",
]

logger = structlog.get_logger()


class PreferencesError(Exception):
    """Raised when preferences cannot be persisted."""


class PreferenceKey(StrEnum):
    """Well-known preference keys."""

    # App state
    HAS_SEEN_ONBOARDING = "hasSeenOnboarding"
    IS_FIRST_LAUNCH = "isFirstLaunch"
    LAST_APP_VERSION = "lastAppVersion"
    LAST_BUILD_NUMBER = "lastBuildNumber"
    LAST_LAUNCH_DATE = "lastLaunchDate"
    LAST_OPENED_TAB = "lastOpenedTab"
    LAST_UPDATE_CHECK = "lastUpdateCheck"
    LAUNCH_COUNT = "launchCount"
    SAVED_SEARCH_FILTERS = "savedSearchFilters"

    # Feature flags
    ENABLE_ALPHA_FEATURES = "enableAlphaFeatures"
    ENABLE_BETA_FEATURES = "enableBetaFeatures"
    ENABLE_DEBUG_MODE = "enableDebugMode"
    ENABLE_DEMO_MODE = "enableDemoMode"
    ENABLE_TESTING_MODE = "enableTestingMode"

    # User authentication
    IS_LOGGED_IN = "isLoggedIn"
    LAST_LOGIN_DATE = "lastLoginDate"
    SESSION_TOKEN = "sessionToken"

    # User preferences
    APPEARANCE_MODE = "appearanceMode"
    AUTO_LOGIN = "autoLogin"
    BROWSER = "browser"
    LANGUAGE = "language"
    NOTIFICATIONS_ENABLED = "notificationsEnabled"

    # User profile
    EMAIL = "email"
    PHONE_NUMBER = "phoneNumber"
    USERNAME = "username"


class PreferencesStore:
    """JSON-backed preferences store.

    Values are loaded lazily on first access. Every set/remove rewrites the
    file. A missing or corrupt file reads as an empty store.
    """

    def __init__(self, path: Path) -> None:
        """Initialize the store.

        Args:
            path: Location of the preferences JSON file.
        """
        self.path = path
        self._values: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any]:
        if self._values is None:
            data = decode_file(self.path)
            if isinstance(data, dict):
                self._values = data
            else:
                if data is not None:
                    logger.warning("preferences_not_an_object", path=str(self.path))
                self._values = {}
        return self._values

    def _save(self, values: dict[str, Any]) -> None:
        """Write values to disk, then adopt them as the current state."""
        try:
            encode_file(values, self.path)
        except JSONFileError as e:
            raise PreferencesError(f"Failed to save preferences: {e}") from e
        self._values = values

    def get(self, key: str, default: Any = None) -> Any:
        """Value stored under key, or default."""
        return self._load().get(str(key), default)

    def set(self, key: str, value: Any) -> None:
        """Store value under key and persist.

        The store is left unchanged when the write fails.

        Raises:
            PreferencesError: If the store cannot be written.
        """
        self._save({**self._load(), str(key): value})
        logger.debug("preference_set", key=str(key))

    def remove(self, key: str) -> bool:
        """Remove key and persist.

        Returns:
            True if the key existed.

        Raises:
            PreferencesError: If the store cannot be written.
        """
        values = self._load()
        if str(key) not in values:
            return False
        self._save({k: v for k, v in values.items() if k != str(key)})
        logger.debug("preference_removed", key=str(key))
        return True

    def contains(self, key: str) -> bool:
        """True if a value is stored under key."""
        return str(key) in self._load()

    def keys(self) -> list[str]:
        """Stored keys, sorted."""
        return sorted(self._load())

    def as_dict(self) -> dict[str, Any]:
        """Copy of all stored values."""
        return dict(self._load())

    @staticmethod
    def suggest_key(
        text: str, *, max_distance: int = DEFAULT_MAX_DISTANCE
    ) -> PreferenceKey | None:
        """Closest well-known key to text, for "did you mean" hints."""
        return closest_match_in_enum(text, PreferenceKey, max_distance=max_distance)
