"""
Eco Poker Storage Layer.

Local JSON persistence for the hall of fame and user preferences.
"""

from src.database.client import get_hall_of_fame_manager, get_preferences_manager
from src.database.hall_of_fame import HallOfFameManager
from src.database.models import HallOfFameEntry, Preferences
from src.database.preferences import PreferencesManager

__all__ = [
    "get_hall_of_fame_manager",
    "get_preferences_manager",
    "HallOfFameEntry",
    "HallOfFameManager",
    "Preferences",
    "PreferencesManager",
]
