"""
Eco Poker - Application Settings

Loads configuration from environment variables using Pydantic Settings.
On Streamlit Cloud, bridges st.secrets into env vars so Pydantic can read them.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

_ENV_PREFIX = "ECOPOKER_"
_SECRET_KEYS = (
    "DEBUG",
    "LOG_LEVEL",
    "DATA_DIR",
    "ENABLE_SOUNDS",
    "ENABLE_COMBO_SOUNDS",
    "ENABLE_MUSIC",
    "DARK_MODE",
)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _load_streamlit_secrets() -> None:
    """Bridge Streamlit Cloud secrets into environment variables."""
    try:
        import streamlit as st

        for key in _SECRET_KEYS:
            env_key = _ENV_PREFIX + key
            if env_key not in os.environ and key in st.secrets:
                os.environ[env_key] = str(st.secrets[key])
    except Exception:
        # No secrets file outside Streamlit Cloud
        pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Storage
    data_dir: Path = Path(".ecopoker")

    # Game
    default_total_rounds: int = 5
    max_rolls: int = Field(default=3, ge=1)

    # Audio and display defaults (user preferences override these)
    enable_sounds: bool = True
    enable_combo_sounds: bool = True
    enable_music: bool = False
    dark_mode: bool = False

    model_config = {
        "env_prefix": _ENV_PREFIX,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def hall_of_fame_path(self) -> Path:
        return self.data_dir / "hall_of_fame.json"

    @property
    def preferences_path(self) -> Path:
        return self.data_dir / "preferences.json"

    @property
    def effective_log_level(self) -> int:
        if self.debug:
            return logging.DEBUG
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    _load_streamlit_secrets()
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Configure the root logger from settings. Safe to call on every rerun."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.effective_log_level, format=_LOG_FORMAT)
    logging.getLogger("src").setLevel(settings.effective_log_level)
