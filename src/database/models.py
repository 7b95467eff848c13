"""
Eco Poker - Storage Models

Pydantic models for the locally stored hall of fame and user preferences.
"""

from datetime import date

from pydantic import BaseModel, Field


class HallOfFameEntry(BaseModel):
    """One player's final result in a completed game."""

    name: str = Field(min_length=1, max_length=20)
    score: int
    rounds: int
    played_on: date

    model_config = {"frozen": True}


class Preferences(BaseModel):
    """Per-user audio and display preferences."""

    sound_enabled: bool = True
    combo_sound_enabled: bool = True
    music_enabled: bool = False
    dark_mode: bool = False
    music_volume: int = Field(default=25, ge=0, le=100)
    sound_volume: int = Field(default=50, ge=0, le=100)
