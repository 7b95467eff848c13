"""Dice tray component — renders energy dice with hold controls."""

from __future__ import annotations

import streamlit as st

from src.engine.base import DieVector, EnergyFace

_FACE_ICONS: dict[EnergyFace, str] = {
    EnergyFace.SOLAR: "&#9728;",
    EnergyFace.HYDRO: "&#128167;",
    EnergyFace.WIND: "&#127788;",
    EnergyFace.COAL: "&#128293;",
    EnergyFace.GAS: "&#9889;",
    EnergyFace.OIL: "&#9981;",
}


def render_dice_tray(
    dice: DieVector,
    held: tuple[bool, ...],
    roll_count: int,
    can_hold: bool,
    turn_key: str,
) -> set[int]:
    """Render the six dice and their hold buttons.

    Args:
        dice: Current faces (``None`` = not rolled yet).
        held: Hold flag per die.
        roll_count: Rolls taken this turn (used in button keys).
        can_hold: Whether hold buttons are enabled.
        turn_key: Unique key for the current turn, keeps widget keys distinct.

    Returns:
        Set of indices whose hold flag the player toggled.
    """
    html_parts = ['<div class="dice-tray">']
    for face, is_held in zip(dice, held):
        if face is None:
            html_parts.append('<div class="die empty"><span class="icon">?</span></div>')
            continue
        classes = ["die", face.name.lower()]
        if is_held:
            classes.append("held")
        html_parts.append(
            f'<div class="{" ".join(classes)}">'
            f'<span class="icon">{_FACE_ICONS[face]}</span>{face.value}</div>'
        )
    html_parts.append("</div>")
    st.markdown("".join(html_parts), unsafe_allow_html=True)

    toggled: set[int] = set()
    if roll_count == 0:
        return toggled

    cols = st.columns(len(dice))
    for i, col in enumerate(cols):
        with col:
            label = "Held" if held[i] else "Hold"
            key = f"hold_{i}_{turn_key}_r{roll_count}"
            if st.button(
                label,
                key=key,
                use_container_width=True,
                disabled=not can_hold or dice[i] is None,
                type="primary" if held[i] else "secondary",
            ):
                toggled.add(i)

    return toggled
