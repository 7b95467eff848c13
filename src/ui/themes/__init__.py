"""Eco theme for Eco Poker."""

from src.ui.themes.animations import load_css
from src.ui.themes.sounds import (
    play_combo_sfx,
    play_sfx,
    render_audio_system,
)

__all__ = [
    "load_css",
    "play_combo_sfx",
    "play_sfx",
    "render_audio_system",
]
