"""Page renderers for Eco Poker."""

from src.ui.views.game import render_game_page
from src.ui.views.home import render_setup_page, render_splash_page
from src.ui.views.ranking import render_ranking_page
from src.ui.views.results import render_results_page
from src.ui.views.rules import render_rules_page
from src.ui.views.settings import render_settings_page

__all__ = [
    "render_game_page",
    "render_ranking_page",
    "render_results_page",
    "render_rules_page",
    "render_settings_page",
    "render_setup_page",
    "render_splash_page",
]
