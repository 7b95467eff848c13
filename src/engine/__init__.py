"""
Eco Poker Game Engine.

Pure Python game logic with zero UI/storage dependencies.
Handles dice rolling, holding, hand evaluation and turn progression.
"""

from src.engine.base import (
    CLEAN_FACES,
    FOSSIL_FACES,
    Combo,
    DieVector,
    EnergyCategory,
    EnergyFace,
    GameConfig,
    GameState,
    HandResult,
    Player,
)
from src.engine.eco_poker import EcoPokerEngine
from src.engine.hand_evaluator import RULES, ComboRule, evaluate

__all__ = [
    # Data Classes
    "GameConfig",
    "GameState",
    "HandResult",
    "Player",
    "ComboRule",
    # Enums
    "Combo",
    "EnergyCategory",
    "EnergyFace",
    # Constants
    "CLEAN_FACES",
    "FOSSIL_FACES",
    "RULES",
    "DieVector",
    # Engine
    "EcoPokerEngine",
    "evaluate",
]
