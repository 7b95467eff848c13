"""UI components for Eco Poker."""

from src.ui.components.dice_tray import render_dice_tray
from src.ui.components.hand_summary import render_base_math, render_hand_summary
from src.ui.components.scoreboard import render_scoreboard
from src.ui.components.turn_controls import render_turn_controls

__all__ = [
    "render_base_math",
    "render_dice_tray",
    "render_hand_summary",
    "render_scoreboard",
    "render_turn_controls",
]
