"""Results page — final impact report and hall of fame entry."""

from __future__ import annotations

import html
import logging

import streamlit as st

from src.database.client import get_hall_of_fame_manager
from src.database.models import Preferences
from src.engine.base import GameState, Player
from src.engine.eco_poker import EcoPokerEngine
from src.ui.themes.animations import render_victory_animation
from src.ui.themes.sounds import play_sfx

logger = logging.getLogger(__name__)


def standing_row_html(rank: int, player: Player, is_winner: bool) -> str:
    """One final-standings row; the player name is HTML-escaped."""
    style = "font-weight:700;" if is_winner else ""
    return (
        f'<div class="player-row" style="{style}">'
        f'<span class="name">{rank}. {html.escape(player.name)}</span>'
        f'<span class="score">{player.score} pts</span>'
        f"</div>"
    )


def render_results_page(preferences: Preferences) -> None:
    """Render the results / victory page."""
    ss = st.session_state
    state: GameState | None = ss.get("game_state")

    if state is None or not state.is_game_over:
        ss["page"] = "game" if state is not None else "setup"
        st.rerun()
        return

    if not ss.get("_hall_recorded"):
        try:
            get_hall_of_fame_manager().record_game(state.players, state.total_rounds)
        except OSError:
            logger.exception("Could not save the hall of fame")
            st.warning("The hall of fame could not be saved.")
        ss["_hall_recorded"] = True
        play_sfx("success", preferences)

    winners = EcoPokerEngine.winners(state)
    render_victory_animation(" & ".join(p.name for p in winners))

    st.subheader("Impact Report — Final Standings")

    for rank, player in enumerate(state.standings, 1):
        st.markdown(
            standing_row_html(rank, player, player in winners),
            unsafe_allow_html=True,
        )

    st.divider()

    col1, col2 = st.columns(2)

    with col1:
        if st.button("Play Again", type="primary", use_container_width=True):
            _play_again(state)

    with col2:
        if st.button("New Campaign", use_container_width=True):
            _new_campaign()


def _play_again(state: GameState) -> None:
    """Restart with the same players and round count."""
    ss = st.session_state
    ss["setup_players"] = [p.name for p in state.players]
    ss["setup_rounds"] = state.total_rounds
    for key in ("game_state", "_hall_recorded", "_last_combo_roll", "_last_turn_points"):
        ss.pop(key, None)
    ss["page"] = "setup"
    st.rerun()


def _new_campaign() -> None:
    """Clear players and go back to setup."""
    ss = st.session_state
    for key in (
        "game_state", "setup_players", "_hall_recorded",
        "_last_combo_roll", "_last_turn_points",
    ):
        ss.pop(key, None)
    ss["page"] = "setup"
    st.rerun()
