"""Turn control buttons — Roll and Confirm Turn."""

from __future__ import annotations

import streamlit as st

from src.engine.base import GameState, HandResult


def render_turn_controls(state: GameState, hand: HandResult, turn_key: str) -> str | None:
    """Render contextual turn-action buttons.

    Returns:
        ``"roll"``, ``"end_turn"``, or ``None`` if no action taken.
    """
    rolls_left = state.max_rolls - state.roll_count

    if state.is_turn_finished:
        st.caption("No rolls left — confirm your turn.")

    cols = st.columns(2)

    with cols[0]:
        if state.roll_count == 0:
            roll_label = "Roll Dice"
        else:
            roll_label = f"Roll Again ({rolls_left} left)"

        if st.button(
            roll_label,
            key=f"btn_roll_{turn_key}_{state.roll_count}",
            use_container_width=True,
            disabled=not state.can_roll,
            type="primary",
        ):
            return "roll"

    with cols[1]:
        confirm_label = "Confirm Turn"
        if state.can_end_turn:
            confirm_label = f"Confirm {hand.score} pts"

        if st.button(
            confirm_label,
            key=f"btn_confirm_{turn_key}_{state.roll_count}",
            use_container_width=True,
            disabled=not state.can_end_turn,
        ):
            return "end_turn"

    return None
