"""
Eco Poker - Preferences Manager

Loads user preferences once at start and writes them back whenever they
change. Defaults come from application settings.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from src.config.settings import Settings
from src.database.models import Preferences

logger = logging.getLogger(__name__)


def default_preferences(settings: Settings) -> Preferences:
    """Preferences seeded from the environment-level settings."""
    return Preferences(
        sound_enabled=settings.enable_sounds,
        combo_sound_enabled=settings.enable_combo_sounds,
        music_enabled=settings.enable_music,
        dark_mode=settings.dark_mode,
    )


class PreferencesManager:
    """Manages the preferences JSON file."""

    def __init__(self, path: Path | str, defaults: Preferences | None = None) -> None:
        self.path = Path(path)
        self.defaults = defaults or Preferences()

    def load(self) -> Preferences:
        """Read stored preferences, falling back to defaults."""
        if not self.path.exists():
            return self.defaults
        try:
            return Preferences.model_validate_json(self.path.read_bytes())
        except (OSError, ValidationError):
            logger.warning("Ignoring unreadable preferences at %s", self.path, exc_info=True)
            return self.defaults

    def save(self, preferences: Preferences) -> Preferences:
        """Persist preferences and return them."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(preferences.model_dump_json(indent=2), encoding="utf-8")
        logger.debug("Saved preferences to %s", self.path)
        return preferences
