"""Ranking page — current game standings and the hall of fame."""

from __future__ import annotations

import html

import streamlit as st

from src.database.client import get_hall_of_fame_manager
from src.database.models import HallOfFameEntry
from src.engine.base import ROUND_OPTIONS, GameState


def hall_entry_markdown(rank: int, entry: HallOfFameEntry) -> str:
    """Markdown line for a hall of fame entry; the stored name is HTML-escaped."""
    return (
        f"**{rank}.** {html.escape(entry.name)} — {entry.score} pts "
        f"<span style='color:var(--text-secondary)'>"
        f"({entry.played_on.strftime('%d %b')})</span>"
    )


def render_ranking_page() -> None:
    """Render current standings and the hall of fame per round category."""
    current_tab, hall_tab = st.tabs(["Current Game", "Hall of Fame"])

    with current_tab:
        state: GameState | None = st.session_state.get("game_state")
        if state is None:
            st.info("No game in progress.")
        else:
            for rank, player in enumerate(state.standings, 1):
                st.markdown(f"**{rank}.** {player.name} — {player.score} pts")

    with hall_tab:
        category = st.radio(
            "Rounds",
            options=ROUND_OPTIONS,
            index=ROUND_OPTIONS.index(5),
            horizontal=True,
            key="hall_filter",
        )
        entries = get_hall_of_fame_manager().top(category)
        if not entries:
            st.info(f"No {category}-round games recorded yet.")
            return
        for rank, entry in enumerate(entries, 1):
            st.markdown(hall_entry_markdown(rank, entry), unsafe_allow_html=True)
