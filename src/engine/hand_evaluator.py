"""
Eco Poker - Hand Evaluator

Scores the six current dice against a fixed hierarchy of combinations that
rewards clean energy and penalizes fossil energy. Evaluation is a pure
function: no I/O, no randomness, no stored state.

Scoring Rules (first match wins):
    1.  Six identical clean faces: 1,000 (CLEAN POWER)
    2.  Six clean faces, any mix: 600 (CLEAN FLUSH TOTAL)
    3.  Five identical clean faces: 400 (FIVE CLEAN)
    4.  Two clean triples: 300 (FULL HOUSE VERDE)
    5.  Solar + Hydro + Wind present: 200 (STRAIGHT ENERGÉTICO)
    6.  Four identical clean faces: 100 (FOUR CLEAN)
    7.  Three identical clean faces: 60 (THREE CLEAN)
    8.  Two clean pairs: 40 (TWO PAIR VERDE)
    9.  One clean pair: 20 (ONE PAIR CLEAN)
    10. Six fossil faces: 0 (BLACKOUT)
    11. Four or more fossil faces: -100 (DIRTY ENERGY)
    12. Anything else: 15 x clean - 20 x fossil (MIXED ENERGY)
"""

from collections import Counter
from dataclasses import dataclass
from typing import Callable, Sequence

from src.engine.base import (
    CLEAN_FACES,
    CLEAN_POINTS,
    DICE_COUNT,
    FOSSIL_PENALTY,
    Combo,
    EnergyFace,
    HandResult,
    mixed_energy_score,
)
from src.engine.validators import validate_die_vector

NO_ROLL_MESSAGE = "Roll the dice to start"


@dataclass(frozen=True)
class HandProfile:
    """
    Counts derived from the rolled dice that the rules inspect.

    Attributes:
        faces: The rolled (non-empty) faces
        clean_count: Number of clean faces
        fossil_count: Number of fossil faces
        max_freq: Highest count of a single face
        max_face: Face with the highest count (tie: lower ordinal)
        second_freq: Next highest count (0 if fewer than two distinct faces)
        second_face: Face with the second highest count, if any
    """
    faces: tuple[EnergyFace, ...]
    clean_count: int
    fossil_count: int
    max_freq: int
    max_face: EnergyFace | None
    second_freq: int
    second_face: EnergyFace | None

    @property
    def is_full_hand(self) -> bool:
        return len(self.faces) == DICE_COUNT


@dataclass(frozen=True)
class ComboRule:
    """One row of the scoring table."""
    combo: Combo
    points: int | None  # None = scored by the mixed-energy formula
    requirement: str
    matches: Callable[[HandProfile], bool]

    def score(self, profile: HandProfile) -> int:
        if self.points is None:
            return mixed_energy_score(profile.clean_count, profile.fossil_count)
        return self.points


def _is_clean(face: EnergyFace | None) -> bool:
    return face is not None and face.is_clean


def _of_a_kind(count: int) -> Callable[[HandProfile], bool]:
    def matches(p: HandProfile) -> bool:
        return p.max_freq == count and _is_clean(p.max_face)
    return matches


def _two_sets(count: int) -> Callable[[HandProfile], bool]:
    def matches(p: HandProfile) -> bool:
        return (
            p.max_freq == count
            and p.second_freq == count
            and _is_clean(p.max_face)
            and _is_clean(p.second_face)
        )
    return matches


def _all_clean(p: HandProfile) -> bool:
    return p.is_full_hand and p.clean_count == DICE_COUNT


def _all_fossil(p: HandProfile) -> bool:
    return p.is_full_hand and p.fossil_count == DICE_COUNT


def _straight(p: HandProfile) -> bool:
    return CLEAN_FACES.issubset(p.faces)


def _dirty(p: HandProfile) -> bool:
    return p.fossil_count >= 4


RULES: tuple[ComboRule, ...] = (
    ComboRule(Combo.CLEAN_POWER, 1000, "6 identical clean", _of_a_kind(6)),
    ComboRule(Combo.CLEAN_FLUSH_TOTAL, 600, "6 clean (any mix)", _all_clean),
    ComboRule(Combo.FIVE_CLEAN, 400, "5 identical clean", _of_a_kind(5)),
    ComboRule(Combo.FULL_HOUSE_VERDE, 300, "3 + 3 identical clean", _two_sets(3)),
    ComboRule(Combo.STRAIGHT_ENERGETICO, 200, "Solar + Hydro + Wind", _straight),
    ComboRule(Combo.FOUR_CLEAN, 100, "4 identical clean", _of_a_kind(4)),
    ComboRule(Combo.THREE_CLEAN, 60, "3 identical clean", _of_a_kind(3)),
    ComboRule(Combo.TWO_PAIR_VERDE, 40, "2 + 2 identical clean", _two_sets(2)),
    ComboRule(Combo.ONE_PAIR_CLEAN, 20, "2 identical clean", _of_a_kind(2)),
    ComboRule(Combo.BLACKOUT, 0, "6 fossil", _all_fossil),
    ComboRule(Combo.DIRTY_ENERGY, -100, "4+ fossil", _dirty),
    ComboRule(Combo.MIXED_ENERGY, None, "Clean + fossil mix", lambda p: True),
)

_RULES_BY_COMBO: dict[Combo, ComboRule] = {rule.combo: rule for rule in RULES}


def rule_for(combo: Combo) -> ComboRule:
    """Look up the scoring rule for a combination."""
    try:
        return _RULES_BY_COMBO[combo]
    except KeyError:
        raise ValueError(f"{combo.name} has no scoring rule.") from None


def frequency_table(faces: Sequence[EnergyFace]) -> tuple[tuple[EnergyFace, int], ...]:
    """
    Count each face and order by count, highest first.

    Ties are broken by enumeration order: the face declared first wins.

    Args:
        faces: Rolled faces (no unset slots)

    Returns:
        (face, count) pairs, most frequent first
    """
    counts = Counter(faces)
    return tuple(sorted(counts.items(), key=lambda item: (-item[1], item[0].ordinal)))


def build_profile(faces: Sequence[EnergyFace]) -> HandProfile:
    """Derive the counts the scoring rules inspect."""
    faces_tuple = tuple(faces)
    table = frequency_table(faces_tuple)
    clean_count = sum(1 for face in faces_tuple if face.is_clean)

    max_face, max_freq = table[0] if table else (None, 0)
    second_face, second_freq = table[1] if len(table) > 1 else (None, 0)

    return HandProfile(
        faces=faces_tuple,
        clean_count=clean_count,
        fossil_count=len(faces_tuple) - clean_count,
        max_freq=max_freq,
        max_face=max_face,
        second_freq=second_freq,
        second_face=second_face,
    )


def match_rule(profile: HandProfile) -> ComboRule:
    """Return the highest-precedence rule the profile satisfies."""
    return next(rule for rule in RULES if rule.matches(profile))


def evaluate(faces: Sequence[EnergyFace | None]) -> HandResult:
    """
    Evaluate the current dice.

    Unset slots (None) are ignored. When nothing has been rolled yet the
    result is the "no roll yet" sentinel scoring 0.

    Args:
        faces: Six slots, each an EnergyFace or None

    Returns:
        HandResult with score, combo, counts and explanation

    Raises:
        ValueError: If the vector is not six slots or holds an unknown value
    """
    rolled = [face for face in validate_die_vector(faces) if face is not None]

    if not rolled:
        return HandResult(
            score=0,
            combo=Combo.NO_ROLL,
            clean_count=0,
            fossil_count=0,
            mixed_score=0,
            explanation=(NO_ROLL_MESSAGE,),
        )

    profile = build_profile(rolled)
    rule = match_rule(profile)
    score = rule.score(profile)
    mixed = mixed_energy_score(profile.clean_count, profile.fossil_count)

    return HandResult(
        score=score,
        combo=rule.combo,
        clean_count=profile.clean_count,
        fossil_count=profile.fossil_count,
        mixed_score=mixed,
        explanation=(
            f"Combo: {rule.combo.label}",
            f"Impact: {score} pts",
            f"Clean mix: {profile.clean_count}",
            f"Fossil mix: {profile.fossil_count}",
            f"Base math: +{CLEAN_POINTS * profile.clean_count} clean, "
            f"-{FOSSIL_PENALTY * profile.fossil_count} fossil = {mixed} pts",
        ),
    )
