"""Settings page — audio and display preferences."""

from __future__ import annotations

import streamlit as st

from src.database.client import get_preferences_manager
from src.database.models import Preferences


def render_settings_page(preferences: Preferences) -> Preferences:
    """Render the preferences form and persist any change.

    Returns:
        The preferences in effect after this render.
    """
    st.header("Settings")

    sound_enabled = st.toggle("Sound effects", value=preferences.sound_enabled)
    combo_sound_enabled = st.toggle(
        "Combo sounds",
        value=preferences.combo_sound_enabled,
        disabled=not sound_enabled,
    )
    music_enabled = st.toggle(
        "Background music",
        value=preferences.music_enabled,
        disabled=not sound_enabled,
    )
    sound_volume = st.slider(
        "SFX volume", 0, 100, preferences.sound_volume, format="%d%%"
    )
    music_volume = st.slider(
        "Music volume", 0, 100, preferences.music_volume, format="%d%%"
    )
    dark_mode = st.toggle("Dark mode", value=preferences.dark_mode)

    updated = Preferences(
        sound_enabled=sound_enabled,
        combo_sound_enabled=combo_sound_enabled,
        music_enabled=music_enabled,
        dark_mode=dark_mode,
        music_volume=music_volume,
        sound_volume=sound_volume,
    )

    if updated != preferences:
        get_preferences_manager().save(updated)
        st.session_state["preferences"] = updated
        st.rerun()

    return updated
