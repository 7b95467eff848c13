"""Home page — splash screen and game setup (players and rounds)."""

from __future__ import annotations

import streamlit as st

from src.config.settings import get_settings
from src.database.models import Preferences
from src.engine.base import MAX_PLAYERS, ROUND_OPTIONS, GameConfig
from src.engine.eco_poker import EcoPokerEngine
from src.engine.validators import validate_player_names
from src.ui.themes.sounds import play_sfx


def render_splash_page(preferences: Preferences) -> None:
    """Render the splash screen."""
    st.title("Eco Poker")
    st.caption("The green player's handbook — roll clean, avoid fossil.")

    if st.button("Start Mission", type="primary", use_container_width=True):
        play_sfx("click", preferences)
        st.session_state["page"] = "setup"
        st.rerun()


def render_setup_page(preferences: Preferences) -> None:
    """Render player registration and round selection."""
    ss = st.session_state
    settings = get_settings()
    ss.setdefault("setup_players", [])
    default_rounds = settings.default_total_rounds
    if default_rounds not in ROUND_OPTIONS:
        default_rounds = ROUND_OPTIONS[1]
    ss.setdefault("setup_rounds", default_rounds)

    st.header("New Energy Campaign")

    ss["setup_rounds"] = st.radio(
        "Rounds",
        options=ROUND_OPTIONS,
        index=ROUND_OPTIONS.index(ss["setup_rounds"]),
        horizontal=True,
    )

    players: list[str] = ss["setup_players"]

    with st.form("add_player", clear_on_submit=True):
        name = st.text_input("Player name", max_chars=20)
        submitted = st.form_submit_button(
            "Add Player", disabled=len(players) >= MAX_PLAYERS
        )
    if submitted:
        try:
            ss["setup_players"] = list(validate_player_names([*players, name]))
            play_sfx("click", preferences)
            st.rerun()
        except ValueError as exc:
            st.error(str(exc))

    for i, player_name in enumerate(players):
        col_name, col_remove = st.columns([4, 1])
        col_name.markdown(f"**{i + 1}.** {player_name}")
        if col_remove.button("Remove", key=f"remove_player_{i}"):
            players.pop(i)
            st.rerun()

    st.divider()

    if st.button(
        "Start Game",
        type="primary",
        use_container_width=True,
        disabled=not players,
    ):
        try:
            config = GameConfig(
                player_names=tuple(players),
                total_rounds=ss["setup_rounds"],
                max_rolls=settings.max_rolls,
            )
        except ValueError as exc:
            st.error(str(exc))
            return
        ss["game_state"] = EcoPokerEngine.new_game(config)
        ss.pop("_hall_recorded", None)
        ss.pop("_last_combo_roll", None)
        ss["page"] = "game"
        play_sfx("success", preferences)
        st.rerun()
