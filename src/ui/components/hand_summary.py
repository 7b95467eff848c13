"""Hand summary component — combo, impact and the clean/fossil base math."""

from __future__ import annotations

import streamlit as st

from src.engine.base import CLEAN_POINTS, FOSSIL_PENALTY, HandResult


def render_hand_summary(hand: HandResult) -> None:
    """Render the current hand's combo, score and explanation lines."""
    impact_class = "impact negative" if hand.score < 0 else "impact"
    st.markdown(
        '<div class="hand-summary">'
        f"<div><strong>{hand.combo_label}</strong></div>"
        f'<div class="{impact_class}">{hand.score} pts</div>'
        "</div>",
        unsafe_allow_html=True,
    )
    for line in hand.explanation[1:]:
        st.caption(line)


def render_base_math(hand: HandResult) -> None:
    """Render the mixed-energy formula for the current dice."""
    with st.expander("Eco calculator"):
        col1, col2 = st.columns(2)
        col1.metric(f"Clean bonus ({hand.clean_count}x)", f"+{hand.clean_count * CLEAN_POINTS}")
        col2.metric(f"Fossil fine ({hand.fossil_count}x)", f"-{hand.fossil_count * FOSSIL_PENALTY}")
        st.metric("Base balance", f"{hand.mixed_score} pts")
        if hand.is_named_combo and hand.score != hand.mixed_score:
            st.caption(f"{hand.combo_label} overrides the base balance with {hand.score} pts.")
