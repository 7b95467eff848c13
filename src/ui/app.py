"""Eco Poker — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st

from src.config.settings import configure_logging
from src.database.client import get_preferences_manager
from src.database.models import Preferences

_TABS = ("Play", "Ranking", "Rules", "Settings")


def _load_preferences() -> Preferences:
    """Load preferences once per session; later changes live in session state."""
    if "preferences" not in st.session_state:
        st.session_state["preferences"] = get_preferences_manager().load()
    return st.session_state["preferences"]


def _render_play(preferences: Preferences) -> None:
    page = st.session_state["page"]

    # Lazy imports to avoid circular deps
    if page == "splash":
        from src.ui.views.home import render_splash_page
        render_splash_page(preferences)
    elif page == "setup":
        from src.ui.views.home import render_setup_page
        render_setup_page(preferences)
    elif page == "game":
        from src.ui.views.game import render_game_page
        render_game_page(preferences)
    elif page == "results":
        from src.ui.views.results import render_results_page
        render_results_page(preferences)
    else:
        st.session_state["page"] = "splash"
        st.rerun()


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Eco Poker",
        page_icon="🌱",
        layout="wide",
        initial_sidebar_state="collapsed",
    )
    configure_logging()

    preferences = _load_preferences()

    from src.ui.themes import load_css, render_audio_system
    load_css(preferences.dark_mode)

    st.session_state.setdefault("page", "splash")

    with st.sidebar:
        tab = st.radio("Navigation", _TABS, key="_nav", label_visibility="collapsed")

    if tab == "Play":
        _render_play(preferences)
    elif tab == "Ranking":
        from src.ui.views.ranking import render_ranking_page
        render_ranking_page()
    elif tab == "Rules":
        from src.ui.views.rules import render_rules_page
        render_rules_page()
    else:
        from src.ui.views.settings import render_settings_page
        preferences = render_settings_page(preferences)

    render_audio_system(preferences)


if __name__ == "__main__":
    main()
