"""
Eco Poker - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Sequence

from src.engine.base import (
    DICE_COUNT,
    MAX_NAME_LENGTH,
    MAX_PLAYERS,
    ROUND_OPTIONS,
    DieVector,
    EnergyFace,
)


def validate_die_vector(faces: Sequence[EnergyFace | None]) -> DieVector:
    """
    Validate and normalize a die vector.

    Args:
        faces: Six slots, each an EnergyFace or None (unset)

    Returns:
        Validated faces as a tuple

    Raises:
        ValueError: If the length is wrong or a slot holds an unknown value
    """
    faces_tuple = tuple(faces)

    if len(faces_tuple) != DICE_COUNT:
        raise ValueError(f"Exactly {DICE_COUNT} dice required, got {len(faces_tuple)}.")

    for i, face in enumerate(faces_tuple):
        if face is not None and not isinstance(face, EnergyFace):
            raise ValueError(
                f"Die at index {i} must be an EnergyFace or None, got {face!r}."
            )

    return faces_tuple


def validate_held_flags(held: Sequence[bool]) -> tuple[bool, ...]:
    """
    Validate hold flags for a die vector.

    Raises:
        ValueError: If the length is wrong or a flag is not a bool
    """
    held_tuple = tuple(held)

    if len(held_tuple) != DICE_COUNT:
        raise ValueError(f"Exactly {DICE_COUNT} hold flags required, got {len(held_tuple)}.")

    for i, flag in enumerate(held_tuple):
        if not isinstance(flag, bool):
            raise ValueError(f"Hold flag at index {i} must be a bool, got {type(flag).__name__}.")

    return held_tuple


def validate_hold_index(index: int) -> int:
    """
    Validate the index of a die to hold or release.

    Raises:
        ValueError: If the index is out of range
    """
    if not isinstance(index, int) or isinstance(index, bool):
        raise ValueError(f"Die index must be an integer, got {type(index).__name__}.")

    if not (0 <= index < DICE_COUNT):
        raise ValueError(
            f"Die index {index} is out of range. Must be between 0 and {DICE_COUNT - 1}."
        )

    return index


def validate_player_names(names: Sequence[str]) -> tuple[str, ...]:
    """
    Validate and normalize player names.

    Names are stripped of surrounding whitespace.

    Args:
        names: Player names in turn order

    Returns:
        Stripped names as a tuple

    Raises:
        ValueError: If there are no players, too many, or a name is invalid
    """
    if isinstance(names, str):
        raise ValueError("Player names must be a sequence of strings, not a single string.")

    cleaned: list[str] = []
    for i, name in enumerate(names):
        if not isinstance(name, str):
            raise ValueError(f"Player name at index {i} must be a string, got {type(name).__name__}.")
        stripped = name.strip()
        if not stripped:
            raise ValueError(f"Player name at index {i} cannot be blank.")
        if len(stripped) > MAX_NAME_LENGTH:
            raise ValueError(
                f"Player name '{stripped}' is longer than {MAX_NAME_LENGTH} characters."
            )
        if stripped.casefold() in (c.casefold() for c in cleaned):
            raise ValueError(f"Player name '{stripped}' is already taken.")
        cleaned.append(stripped)

    if not cleaned:
        raise ValueError("At least 1 player required.")

    if len(cleaned) > MAX_PLAYERS:
        raise ValueError(f"At most {MAX_PLAYERS} players allowed, got {len(cleaned)}.")

    return tuple(cleaned)


def validate_total_rounds(rounds: int) -> int:
    """
    Validate the number of rounds for a game.

    Raises:
        ValueError: If rounds is not one of the supported categories
    """
    if not isinstance(rounds, int) or isinstance(rounds, bool):
        raise ValueError(f"Total rounds must be an integer, got {type(rounds).__name__}.")

    if rounds not in ROUND_OPTIONS:
        raise ValueError(f"Total rounds must be one of {ROUND_OPTIONS}, got {rounds}.")

    return rounds
