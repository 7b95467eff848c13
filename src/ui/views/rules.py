"""Rules page — the combination table, rendered from the scoring rules."""

from __future__ import annotations

import streamlit as st

from src.engine.base import CLEAN_POINTS, FOSSIL_PENALTY, MAX_ROLLS
from src.engine.hand_evaluator import RULES

_INTRO = f"""\
**Goal:** Build the cleanest energy mix over the campaign.

- Roll **6 energy dice** up to **{MAX_ROLLS} times** per turn
- **Hold** the dice you want to keep between rolls
- **Confirm** to bank the hand's score and pass the dice on
- Clean: Solar, Hydro, Wind (+{CLEAN_POINTS} each in the base balance)
- Fossil: Coal, Gas, Oil (-{FOSSIL_PENALTY} each in the base balance)

Combinations are checked top to bottom; the first match scores.
"""


def render_rules_page() -> None:
    """Render the rules and the combination hierarchy."""
    st.header("Player's Manual")
    st.markdown(_INTRO)

    rows = ["| # | Combo | Requirement | Points |", "|---|---|---|---|"]
    for i, rule in enumerate(RULES, 1):
        if rule.points is None:
            points = f"+{CLEAN_POINTS}/clean, -{FOSSIL_PENALTY}/fossil"
        elif rule.points > 0:
            points = f"+{rule.points}"
        else:
            points = str(rule.points)
        rows.append(f"| {i} | {rule.combo.label} | {rule.requirement} | {points} |")
    st.markdown("\n".join(rows))
