"""Scoreboard component — live ranking and turn indicator."""

from __future__ import annotations

import html

import streamlit as st

from src.engine.base import GameState


def scoreboard_html(state: GameState) -> str:
    """Build the live ranking markup. Player names are HTML-escaped."""
    active = state.active_player
    parts = ['<div class="scoreboard">']
    parts.append(
        f'<div class="scoreboard-title">Live Ranking &mdash; '
        f"Round {state.current_round}/{state.total_rounds}</div>"
    )

    for rank, player in enumerate(state.standings, 1):
        row_classes = ["player-row"]
        indicator = ""
        if player is active and not state.is_game_over:
            row_classes.append("active")
            indicator = "&#9889; "

        parts.append(
            f'<div class="{" ".join(row_classes)}">'
            f'<span class="name">{rank}. {indicator}{html.escape(player.name)}</span>'
            f'<span class="score">{player.score}</span>'
            f"</div>"
        )

    parts.append("</div>")
    return "".join(parts)


def render_scoreboard(state: GameState) -> None:
    """Render the live ranking, best score first, highlighting the active player."""
    st.markdown(scoreboard_html(state), unsafe_allow_html=True)
