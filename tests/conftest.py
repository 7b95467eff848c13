"""
Eco Poker - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import random

import pytest

from src.engine.base import Combo, EnergyFace, GameConfig

SOLAR = EnergyFace.SOLAR
HYDRO = EnergyFace.HYDRO
WIND = EnergyFace.WIND
COAL = EnergyFace.COAL
GAS = EnergyFace.GAS
OIL = EnergyFace.OIL


# =============================================================================
# HAND EVALUATION TEST DATA
# =============================================================================

@pytest.fixture
def scored_hands() -> dict[str, tuple[tuple[EnergyFace, ...], int, Combo]]:
    """
    One hand per combination with its expected score.

    Returns:
        Dict mapping name to (faces, expected_score, expected_combo)
    """
    return {
        "clean_power": ((SOLAR,) * 6, 1000, Combo.CLEAN_POWER),
        "clean_flush": ((SOLAR, SOLAR, HYDRO, HYDRO, WIND, WIND), 600, Combo.CLEAN_FLUSH_TOTAL),
        "five_clean": ((SOLAR, SOLAR, SOLAR, SOLAR, SOLAR, COAL), 400, Combo.FIVE_CLEAN),
        "straight": ((SOLAR, HYDRO, WIND, COAL, COAL, GAS), 200, Combo.STRAIGHT_ENERGETICO),
        "four_clean": ((WIND, WIND, WIND, WIND, COAL, GAS), 100, Combo.FOUR_CLEAN),
        "three_clean": ((HYDRO, HYDRO, HYDRO, COAL, GAS, OIL), 60, Combo.THREE_CLEAN),
        "two_pair": ((SOLAR, SOLAR, HYDRO, HYDRO, COAL, GAS), 40, Combo.TWO_PAIR_VERDE),
        "one_pair": ((WIND, WIND, SOLAR, COAL, GAS, OIL), 20, Combo.ONE_PAIR_CLEAN),
        "blackout": ((COAL,) * 6, 0, Combo.BLACKOUT),
        "dirty": ((COAL, COAL, GAS, OIL, SOLAR, HYDRO), -100, Combo.DIRTY_ENERGY),
        "mixed": ((COAL, COAL, COAL, SOLAR, SOLAR, HYDRO), -15, Combo.MIXED_ENERGY),
    }


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source for rolls."""
    return random.Random(1234)


# =============================================================================
# GAME STATE FIXTURES
# =============================================================================

@pytest.fixture
def two_player_config() -> GameConfig:
    """Two players, three rounds."""
    return GameConfig(player_names=("Ana", "Rui"), total_rounds=3)


@pytest.fixture
def solo_config() -> GameConfig:
    """Single player, three rounds."""
    return GameConfig(player_names=("Ana",), total_rounds=3)
