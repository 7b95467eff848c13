"""
Eco Poker - Hand Evaluator Tests

Tests for the combination table, its precedence, and tie-breaks.
"""

import pytest

from src.engine.base import Combo, EnergyFace, HandResult
from src.engine.hand_evaluator import (
    NO_ROLL_MESSAGE,
    RULES,
    build_profile,
    evaluate,
    frequency_table,
    rule_for,
)

SOLAR = EnergyFace.SOLAR
HYDRO = EnergyFace.HYDRO
WIND = EnergyFace.WIND
COAL = EnergyFace.COAL
GAS = EnergyFace.GAS
OIL = EnergyFace.OIL


# === No Roll Yet ===


class TestNoRoll:
    """Tests for the all-unset sentinel."""

    def test_all_unset_scores_zero(self):
        result = evaluate((None,) * 6)
        assert result.score == 0
        assert result.combo == Combo.NO_ROLL
        assert result.combo_label == "no roll yet"

    def test_all_unset_zero_counts(self):
        result = evaluate((None,) * 6)
        assert result.clean_count == 0
        assert result.fossil_count == 0
        assert result.mixed_score == 0

    def test_all_unset_prompts_roll(self):
        result = evaluate((None,) * 6)
        assert result.explanation == (NO_ROLL_MESSAGE,)

    def test_not_a_named_combo(self):
        assert evaluate((None,) * 6).is_named_combo is False


# === Combination Table ===


class TestCombinations:
    """Every combination from the shared fixture table."""

    @pytest.mark.parametrize("name", [
        "clean_power", "clean_flush", "five_clean", "straight", "four_clean",
        "three_clean", "two_pair", "one_pair", "blackout", "dirty", "mixed",
    ])
    def test_scored_hand(self, scored_hands, name):
        faces, expected_score, expected_combo = scored_hands[name]
        result = evaluate(faces)
        assert result.combo == expected_combo
        assert result.score == expected_score

    def test_six_solar_is_clean_power(self):
        result = evaluate((SOLAR,) * 6)
        assert result.score == 1000
        assert result.combo_label == "CLEAN POWER"

    @pytest.mark.parametrize("face", [SOLAR, HYDRO, WIND])
    def test_any_clean_six_of_a_kind(self, face):
        assert evaluate((face,) * 6).combo == Combo.CLEAN_POWER

    def test_clean_flush_any_mix(self):
        result = evaluate((SOLAR, SOLAR, HYDRO, HYDRO, WIND, WIND))
        assert result.score == 600
        assert result.combo_label == "CLEAN FLUSH TOTAL"

    def test_five_clean_with_fossil_die(self):
        result = evaluate((SOLAR, SOLAR, SOLAR, SOLAR, SOLAR, COAL))
        assert result.score == 400
        assert result.combo_label == "FIVE CLEAN"

    def test_straight_outranks_mixed_fallback(self):
        result = evaluate((SOLAR, HYDRO, WIND, COAL, COAL, GAS))
        assert result.score == 200
        assert result.combo_label == "STRAIGHT ENERGÉTICO"
        assert result.mixed_score == -15

    def test_straight_with_fossil_triple(self):
        result = evaluate((SOLAR, HYDRO, WIND, COAL, COAL, COAL))
        assert result.combo == Combo.STRAIGHT_ENERGETICO

    @pytest.mark.parametrize("face", [COAL, GAS, OIL])
    def test_fossil_six_of_a_kind_is_blackout(self, face):
        result = evaluate((face,) * 6)
        assert result.score == 0
        assert result.combo_label == "BLACKOUT"

    def test_mixed_fossil_six_is_blackout(self):
        result = evaluate((COAL, COAL, GAS, GAS, OIL, OIL))
        assert result.combo == Combo.BLACKOUT
        assert result.score == 0

    def test_blackout_milder_than_dirty_energy(self):
        blackout = evaluate((COAL,) * 6)
        dirty = evaluate((COAL, COAL, GAS, OIL, SOLAR, HYDRO))
        assert blackout.score > dirty.score

    def test_dirty_energy_regardless_of_clean_dice(self):
        result = evaluate((COAL, COAL, GAS, OIL, SOLAR, HYDRO))
        assert result.score == -100
        assert result.combo_label == "DIRTY ENERGY"

    def test_five_fossil_is_dirty(self):
        result = evaluate((COAL, GAS, OIL, COAL, GAS, WIND))
        assert result.combo == Combo.DIRTY_ENERGY

    def test_fossil_triple_not_three_clean(self):
        # Coal leads the table, so no clean rule applies
        result = evaluate((COAL, COAL, COAL, SOLAR, SOLAR, HYDRO))
        assert result.combo == Combo.MIXED_ENERGY
        assert result.score == 15 * 3 - 20 * 3

    def test_two_pair_needs_both_pairs_clean(self):
        result = evaluate((SOLAR, SOLAR, COAL, COAL, HYDRO, GAS))
        assert result.combo == Combo.ONE_PAIR_CLEAN


# === Precedence Conflicts ===


class TestPrecedence:
    """Hands that satisfy several rules score by the first in the table."""

    def test_two_clean_triples_are_a_clean_flush(self):
        result = evaluate((SOLAR, SOLAR, SOLAR, HYDRO, HYDRO, HYDRO))
        assert result.combo == Combo.CLEAN_FLUSH_TOTAL
        assert result.score == 600

    def test_clean_and_fossil_triples_not_full_house(self):
        result = evaluate((SOLAR, SOLAR, SOLAR, COAL, COAL, COAL))
        assert result.combo == Combo.THREE_CLEAN
        assert result.score == 60

    def test_four_of_a_kind_with_straight_is_flush(self):
        result = evaluate((SOLAR, SOLAR, SOLAR, SOLAR, HYDRO, WIND))
        assert result.combo == Combo.CLEAN_FLUSH_TOTAL

    def test_full_house_rule_matches_two_clean_triples(self):
        profile = build_profile((SOLAR, SOLAR, SOLAR, HYDRO, HYDRO, HYDRO))
        assert rule_for(Combo.FULL_HOUSE_VERDE).matches(profile) is True

    def test_full_house_rule_rejects_fossil_triple(self):
        profile = build_profile((SOLAR, SOLAR, SOLAR, COAL, COAL, COAL))
        assert rule_for(Combo.FULL_HOUSE_VERDE).matches(profile) is False

    def test_straight_rule_ranks_above_four_clean(self):
        combos = [rule.combo for rule in RULES]
        assert combos.index(Combo.STRAIGHT_ENERGETICO) < combos.index(Combo.FOUR_CLEAN)

    def test_five_clean_outranks_dirty_energy(self):
        result = evaluate((WIND, WIND, WIND, WIND, WIND, OIL))
        assert result.combo == Combo.FIVE_CLEAN


# === Frequency Tie-Break ===


class TestFrequencyTieBreak:
    """Faces with equal counts are ordered by enumeration order."""

    def test_highest_count_first(self):
        table = frequency_table((COAL, COAL, COAL, SOLAR))
        assert table[0] == (COAL, 3)
        assert table[1] == (SOLAR, 1)

    def test_tie_lower_ordinal_wins(self):
        table = frequency_table((OIL, OIL, WIND, WIND))
        assert table[0] == (WIND, 2)
        assert table[1] == (OIL, 2)

    def test_tie_independent_of_input_order(self):
        a = frequency_table((COAL, COAL, SOLAR, SOLAR, GAS, OIL))
        b = frequency_table((SOLAR, OIL, COAL, GAS, SOLAR, COAL))
        assert a == b

    def test_clean_pair_wins_tie_against_fossil_pair(self):
        # Solar is declared before Coal, so the clean pair leads
        result = evaluate((SOLAR, SOLAR, COAL, COAL, GAS, OIL))
        assert result.combo == Combo.ONE_PAIR_CLEAN
        assert result.score == 20

    def test_profile_second_face(self):
        profile = build_profile((HYDRO, HYDRO, WIND, WIND, GAS, GAS))
        assert profile.max_face == HYDRO
        assert profile.second_face == WIND
        assert profile.second_freq == 2

    def test_profile_single_distinct_face(self):
        profile = build_profile((GAS,) * 6)
        assert profile.second_face is None
        assert profile.second_freq == 0


# === Partially Rolled Vectors ===


class TestPartialVector:
    """Unset slots are ignored rather than counted."""

    def test_unset_slots_excluded_from_counts(self):
        result = evaluate((SOLAR, HYDRO, COAL, GAS, None, None))
        assert result.clean_count == 2
        assert result.fossil_count == 2

    def test_partial_mixed_energy(self):
        result = evaluate((SOLAR, HYDRO, COAL, GAS, None, None))
        assert result.combo == Combo.MIXED_ENERGY
        assert result.score == 15 * 2 - 20 * 2

    def test_partial_all_clean_is_not_flush(self):
        result = evaluate((SOLAR, SOLAR, SOLAR, SOLAR, SOLAR, None))
        assert result.combo == Combo.FIVE_CLEAN

    def test_partial_all_fossil_is_not_blackout(self):
        result = evaluate((COAL, COAL, GAS, OIL, OIL, None))
        assert result.combo == Combo.DIRTY_ENERGY

    def test_single_die(self):
        result = evaluate((None, None, WIND, None, None, None))
        assert result.combo == Combo.MIXED_ENERGY
        assert result.score == 15


# === Result Shape ===


class TestHandResult:
    """Tests for the fields and explanation of a HandResult."""

    @pytest.mark.parametrize("name", [
        "clean_power", "five_clean", "straight", "blackout", "dirty", "mixed",
    ])
    def test_mixed_score_always_linear(self, scored_hands, name):
        faces, _, _ = scored_hands[name]
        result = evaluate(faces)
        assert result.mixed_score == 15 * result.clean_count - 20 * result.fossil_count

    def test_mixed_score_differs_when_combo_fires(self):
        result = evaluate((SOLAR,) * 6)
        assert result.score == 1000
        assert result.mixed_score == 90

    def test_explanation_contents(self):
        result = evaluate((COAL, COAL, GAS, OIL, SOLAR, HYDRO))
        assert result.explanation[0] == "Combo: DIRTY ENERGY"
        assert result.explanation[1] == "Impact: -100 pts"
        assert result.explanation[2] == "Clean mix: 2"
        assert result.explanation[3] == "Fossil mix: 4"

    def test_idempotent(self):
        faces = (SOLAR, HYDRO, WIND, COAL, COAL, GAS)
        assert evaluate(faces) == evaluate(faces)

    def test_result_is_frozen(self):
        result = evaluate((SOLAR,) * 6)
        with pytest.raises(AttributeError):
            result.score = 0

    def test_accepts_list(self):
        assert isinstance(evaluate([SOLAR] * 6), HandResult)

    def test_named_combo_flag(self):
        assert evaluate((SOLAR,) * 6).is_named_combo is True
        assert evaluate((COAL, COAL, COAL, SOLAR, SOLAR, HYDRO)).is_named_combo is False


# === Invalid Input ===


class TestInvalidInput:
    """Unknown values fail fast instead of being counted."""

    def test_string_face_rejected(self):
        with pytest.raises(ValueError, match="index 2"):
            evaluate((SOLAR, HYDRO, "Solar", COAL, GAS, OIL))

    def test_integer_face_rejected(self):
        with pytest.raises(ValueError, match="EnergyFace"):
            evaluate((1, 2, 3, 4, 5, 6))

    @pytest.mark.parametrize("length", [0, 5, 7])
    def test_wrong_length_rejected(self, length):
        with pytest.raises(ValueError, match="Exactly 6 dice"):
            evaluate((SOLAR,) * length)


# === Rule Table ===


class TestRuleTable:
    """Tests for the externalized rule table."""

    def test_twelve_rules(self):
        assert len(RULES) == 12

    def test_every_named_combo_has_a_rule(self):
        assert {rule.combo for rule in RULES} == set(Combo) - {Combo.NO_ROLL}

    def test_fallback_is_last(self):
        assert RULES[-1].combo == Combo.MIXED_ENERGY
        assert RULES[-1].points is None

    def test_points_in_table_order(self):
        points = [rule.points for rule in RULES]
        assert points == [1000, 600, 400, 300, 200, 100, 60, 40, 20, 0, -100, None]

    def test_no_roll_has_no_rule(self):
        with pytest.raises(ValueError, match="NO_ROLL"):
            rule_for(Combo.NO_ROLL)
