"""CSS injection and HTML animation helpers for the eco theme."""

import html
from pathlib import Path

import streamlit as st

from src.engine.base import Combo


def load_css(dark_mode: bool = False) -> None:
    """Inject the eco CSS theme, plus the dark overrides when enabled."""
    themes_dir = Path(__file__).parent
    css_text = (themes_dir / "eco.css").read_text(encoding="utf-8")
    if dark_mode:
        css_text += (themes_dir / "eco_dark.css").read_text(encoding="utf-8")
    st.markdown(f"<style>{css_text}</style>", unsafe_allow_html=True)


def render_combo_popup(combo: Combo) -> None:
    """Render the combo banner shown after a roll lands a named combination."""
    css_class = "combo-popup"
    if combo is Combo.DIRTY_ENERGY:
        css_class += " dirty"
    elif combo is Combo.BLACKOUT:
        css_class += " blackout"
    st.markdown(
        f'<div class="{css_class}">{combo.label}!</div>',
        unsafe_allow_html=True,
    )


def render_victory_animation(name: str) -> None:
    """Render the victory overlay with glow animation."""
    st.markdown(
        '<div class="victory-overlay">'
        '<span class="trophy">&#127942;</span>'
        f"<h1>{html.escape(name)} leads the transition!</h1>"
        "<p>Sustainability leader of the campaign.</p>"
        "</div>",
        unsafe_allow_html=True,
    )


def render_score_popup(points: int) -> None:
    """Render an animated score popup."""
    sign = "+" if points >= 0 else ""
    css_class = "score-popup" if points >= 0 else "score-popup negative"
    st.markdown(
        f'<div class="{css_class}">{sign}{points}</div>',
        unsafe_allow_html=True,
    )
