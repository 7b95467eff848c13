"""
Eco Poker - Storage Client

Cached factories for the local storage managers.
"""

from functools import lru_cache

from src.config.settings import get_settings
from src.database.hall_of_fame import HallOfFameManager
from src.database.preferences import PreferencesManager, default_preferences


@lru_cache(maxsize=1)
def get_hall_of_fame_manager() -> HallOfFameManager:
    """Create and cache the hall of fame manager."""
    settings = get_settings()
    return HallOfFameManager(settings.hall_of_fame_path)


@lru_cache(maxsize=1)
def get_preferences_manager() -> PreferencesManager:
    """Create and cache the preferences manager."""
    settings = get_settings()
    return PreferencesManager(settings.preferences_path, default_preferences(settings))
