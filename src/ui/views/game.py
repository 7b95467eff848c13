"""Game page — the main play area with dice, controls, and live ranking."""

from __future__ import annotations

import logging

import streamlit as st

from src.database.models import Preferences
from src.engine.base import GameState, HandResult
from src.engine.eco_poker import EcoPokerEngine
from src.ui.components.dice_tray import render_dice_tray
from src.ui.components.hand_summary import render_base_math, render_hand_summary
from src.ui.components.scoreboard import render_scoreboard
from src.ui.components.turn_controls import render_turn_controls
from src.ui.themes.animations import render_combo_popup, render_score_popup
from src.ui.themes.sounds import play_combo_sfx, play_sfx

logger = logging.getLogger(__name__)


def _turn_key(state: GameState) -> str:
    return f"{state.current_round}-{state.active_player_index}"


def combo_roll_id(state: GameState, hand: HandResult) -> str | None:
    """Identify the roll that landed a named combo, or None.

    Holding dice keeps the id, so the popup and sound fire once per roll.
    """
    if state.roll_count == 0 or not hand.is_named_combo:
        return None
    return f"{_turn_key(state)}-{state.roll_count}"


def render_game_page(preferences: Preferences) -> None:
    """Render the main game page."""
    ss = st.session_state
    state: GameState | None = ss.get("game_state")

    if state is None:
        ss["page"] = "setup"
        st.rerun()
        return

    if state.is_game_over:
        ss["page"] = "results"
        st.rerun()
        return

    hand = EcoPokerEngine.evaluate(state)
    turn_key = _turn_key(state)

    game_col, score_col = st.columns([3, 1])

    with score_col:
        render_scoreboard(state)
        if st.button("Restart Campaign", use_container_width=True):
            ss["_confirm_restart"] = True
        if ss.get("_confirm_restart"):
            st.warning("Restart the energy campaign?")
            yes, no = st.columns(2)
            if yes.button("Yes", key="restart_yes", use_container_width=True):
                _restart()
            if no.button("No", key="restart_no", use_container_width=True):
                ss.pop("_confirm_restart", None)
                st.rerun()

    with game_col:
        st.subheader(f"{state.active_player.name}'s turn")
        st.caption(
            f"Round {state.current_round} of {state.total_rounds} — "
            f"roll {state.roll_count} of {state.max_rolls}"
        )

        # Combo popup once per roll
        roll_id = combo_roll_id(state, hand)
        if roll_id is not None and ss.get("_last_combo_roll") != roll_id:
            ss["_last_combo_roll"] = roll_id
            render_combo_popup(hand.combo)
            play_combo_sfx(hand.combo, preferences)

        can_hold = state.roll_count > 0 and not state.is_turn_finished
        toggled = render_dice_tray(
            state.dice, state.held, state.roll_count, can_hold, turn_key
        )
        if toggled:
            try:
                for index in toggled:
                    state = EcoPokerEngine.toggle_hold(state, index)
            except ValueError as exc:
                st.error(str(exc))
                return
            ss["game_state"] = state
            play_sfx("hold", preferences)
            st.rerun()

        action = render_turn_controls(state, hand, turn_key)

        if action == "roll":
            _handle_roll(state, preferences)
        elif action == "end_turn":
            _handle_end_turn(state, preferences)

        render_hand_summary(hand)
        render_base_math(hand)

        last_points = ss.get("_last_turn_points")
        if last_points is not None:
            render_score_popup(last_points)


def _handle_roll(state: GameState, preferences: Preferences) -> None:
    ss = st.session_state
    try:
        ss["game_state"] = EcoPokerEngine.roll(state)
    except ValueError as exc:
        st.error(str(exc))
        return
    ss.pop("_last_turn_points", None)
    play_sfx("roll", preferences)
    st.rerun()


def _handle_end_turn(state: GameState, preferences: Preferences) -> None:
    ss = st.session_state
    try:
        new_state, hand = EcoPokerEngine.end_turn(state)
    except ValueError as exc:
        st.error(str(exc))
        return
    ss["game_state"] = new_state
    ss["_last_turn_points"] = hand.score
    play_sfx("success", preferences)
    if new_state.is_game_over:
        ss["page"] = "results"
    st.rerun()


def _restart() -> None:
    ss = st.session_state
    logger.info("Campaign restarted by the players")
    for key in ("game_state", "_confirm_restart", "_last_combo_roll", "_last_turn_points", "_hall_recorded"):
        ss.pop(key, None)
    ss["page"] = "setup"
    st.rerun()
