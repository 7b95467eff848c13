"""
Eco Poker - Preferences Tests

Tests for loading and saving user preferences.
"""

import pytest
from pydantic import ValidationError

from src.config.settings import Settings
from src.database.models import Preferences
from src.database.preferences import PreferencesManager, default_preferences


@pytest.fixture
def manager(tmp_path) -> PreferencesManager:
    return PreferencesManager(tmp_path / "preferences.json")


class TestPreferencesModel:
    """Tests for the Preferences model."""

    def test_defaults(self):
        prefs = Preferences()
        assert prefs.sound_enabled is True
        assert prefs.combo_sound_enabled is True
        assert prefs.music_enabled is False
        assert prefs.dark_mode is False

    @pytest.mark.parametrize("volume", [-1, 101])
    def test_volume_bounds(self, volume):
        with pytest.raises(ValidationError):
            Preferences(music_volume=volume)


class TestDefaultPreferences:
    """Defaults follow the application settings."""

    def test_from_settings(self):
        settings = Settings(enable_sounds=False, enable_music=True, dark_mode=True)
        prefs = default_preferences(settings)
        assert prefs.sound_enabled is False
        assert prefs.music_enabled is True
        assert prefs.dark_mode is True


class TestPreferencesManager:
    """Tests for PreferencesManager load and save."""

    def test_missing_file_returns_defaults(self, manager):
        assert manager.load() == Preferences()

    def test_custom_defaults(self, tmp_path):
        defaults = Preferences(dark_mode=True)
        manager = PreferencesManager(tmp_path / "missing.json", defaults=defaults)
        assert manager.load() == defaults

    def test_save_and_load(self, manager):
        prefs = Preferences(sound_enabled=False, dark_mode=True, sound_volume=80)
        assert manager.save(prefs) == prefs
        assert manager.load() == prefs

    def test_save_creates_directory(self, tmp_path):
        manager = PreferencesManager(tmp_path / "nested" / "preferences.json")
        manager.save(Preferences())
        assert manager.path.exists()

    def test_invalid_file_falls_back(self, manager):
        manager.path.write_text('{"sound_volume": 500}', encoding="utf-8")
        assert manager.load() == Preferences()
