"""
Eco Poker - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. All classes are immutable (frozen dataclasses) so a fresh
value replaces the old one on every change.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

DICE_COUNT = 6
MAX_ROLLS = 3
ROUND_OPTIONS = (3, 5, 10, 15)
DEFAULT_TOTAL_ROUNDS = 5
MAX_PLAYERS = 8
MAX_NAME_LENGTH = 20

CLEAN_POINTS = 15
FOSSIL_PENALTY = 20


class EnergyCategory(Enum):
    """Category every energy face belongs to."""
    CLEAN = "clean"
    FOSSIL = "fossil"


class EnergyFace(Enum):
    """
    The six faces of an Eco Poker die.

    Declaration order is the enumeration order used for random draws and for
    breaking frequency ties (lower ordinal wins).
    """
    SOLAR = "Solar"
    HYDRO = "Hydro"
    WIND = "Wind"
    COAL = "Coal"
    GAS = "Gas"
    OIL = "Oil"

    @property
    def category(self) -> EnergyCategory:
        if self in CLEAN_FACES:
            return EnergyCategory.CLEAN
        return EnergyCategory.FOSSIL

    @property
    def is_clean(self) -> bool:
        return self.category is EnergyCategory.CLEAN

    @property
    def is_fossil(self) -> bool:
        return self.category is EnergyCategory.FOSSIL

    @property
    def ordinal(self) -> int:
        """Position of the face in declaration order."""
        return _FACE_ORDER[self]

    @property
    def base_points(self) -> int:
        """Contribution of this face to the mixed-energy formula."""
        return CLEAN_POINTS if self.is_clean else -FOSSIL_PENALTY


CLEAN_FACES: frozenset[EnergyFace] = frozenset(
    {EnergyFace.SOLAR, EnergyFace.HYDRO, EnergyFace.WIND}
)
FOSSIL_FACES: frozenset[EnergyFace] = frozenset(
    {EnergyFace.COAL, EnergyFace.GAS, EnergyFace.OIL}
)
_FACE_ORDER: dict[EnergyFace, int] = {face: i for i, face in enumerate(EnergyFace)}

# Six slots, None = not rolled yet this turn
DieVector = tuple[Optional[EnergyFace], ...]


class Combo(Enum):
    """Named scoring combinations, in descending precedence."""
    CLEAN_POWER = "CLEAN POWER"
    CLEAN_FLUSH_TOTAL = "CLEAN FLUSH TOTAL"
    FIVE_CLEAN = "FIVE CLEAN"
    FULL_HOUSE_VERDE = "FULL HOUSE VERDE"
    STRAIGHT_ENERGETICO = "STRAIGHT ENERGÉTICO"
    FOUR_CLEAN = "FOUR CLEAN"
    THREE_CLEAN = "THREE CLEAN"
    TWO_PAIR_VERDE = "TWO PAIR VERDE"
    ONE_PAIR_CLEAN = "ONE PAIR CLEAN"
    BLACKOUT = "BLACKOUT"
    DIRTY_ENERGY = "DIRTY ENERGY"
    MIXED_ENERGY = "MIXED ENERGY"
    NO_ROLL = "no roll yet"

    @property
    def label(self) -> str:
        return self.value


def mixed_energy_score(clean_count: int, fossil_count: int) -> int:
    """Base math shown for every hand: +15 per clean face, -20 per fossil face."""
    return CLEAN_POINTS * clean_count - FOSSIL_PENALTY * fossil_count


@dataclass(frozen=True)
class HandResult:
    """
    Evaluation of the current dice.

    Attributes:
        score: Points awarded by the matched combination (can be negative)
        combo: The combination that matched
        clean_count: Number of clean faces among the rolled dice
        fossil_count: Number of fossil faces among the rolled dice
        mixed_score: The mixed-energy formula, always computed
        explanation: Human-readable breakdown lines
    """
    score: int
    combo: Combo
    clean_count: int
    fossil_count: int
    mixed_score: int
    explanation: tuple[str, ...]

    @property
    def combo_label(self) -> str:
        return self.combo.label

    @property
    def is_named_combo(self) -> bool:
        """True when a named combination (not the fallback) matched."""
        return self.combo not in (Combo.MIXED_ENERGY, Combo.NO_ROLL)

    def __str__(self) -> str:
        return "\n".join(self.explanation)


@dataclass(frozen=True)
class Player:
    """A player and their running total."""
    name: str
    score: int = 0


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a game session.

    Attributes:
        player_names: Names in turn order
        total_rounds: Rounds to play (3, 5, 10 or 15)
        max_rolls: Rolls allowed per turn
    """
    player_names: tuple[str, ...]
    total_rounds: int = DEFAULT_TOTAL_ROUNDS
    max_rolls: int = MAX_ROLLS

    def __post_init__(self) -> None:
        """Validate configuration."""
        # Imported here, validators depends on this module
        from src.engine.validators import validate_player_names, validate_total_rounds

        object.__setattr__(self, "player_names", validate_player_names(self.player_names))
        validate_total_rounds(self.total_rounds)
        if not isinstance(self.max_rolls, int) or self.max_rolls < 1:
            raise ValueError(f"Max rolls must be a positive integer, got {self.max_rolls}.")


def _empty_dice() -> DieVector:
    return (None,) * DICE_COUNT


def _no_holds() -> tuple[bool, ...]:
    return (False,) * DICE_COUNT


@dataclass(frozen=True)
class GameState:
    """
    Complete state of a game in progress.

    Attributes:
        players: Players in turn order with their totals
        active_player_index: Index of the player whose turn it is
        roll_count: Rolls taken this turn
        max_rolls: Rolls allowed per turn
        current_round: 1-based round number
        total_rounds: Number of rounds in the game
        dice: Current die faces (None = unset)
        held: Hold flag per die
        is_game_over: Whether the last round has been played
    """
    players: tuple[Player, ...]
    active_player_index: int = 0
    roll_count: int = 0
    max_rolls: int = MAX_ROLLS
    current_round: int = 1
    total_rounds: int = DEFAULT_TOTAL_ROUNDS
    dice: DieVector = field(default_factory=_empty_dice)
    held: tuple[bool, ...] = field(default_factory=_no_holds)
    is_game_over: bool = False

    @property
    def active_player(self) -> Player:
        return self.players[self.active_player_index]

    @property
    def is_turn_finished(self) -> bool:
        """No rolls left this turn."""
        return self.roll_count >= self.max_rolls

    @property
    def can_roll(self) -> bool:
        return not self.is_game_over and not self.is_turn_finished

    @property
    def can_end_turn(self) -> bool:
        return not self.is_game_over and self.roll_count > 0

    @property
    def held_indices(self) -> frozenset[int]:
        return frozenset(i for i, is_held in enumerate(self.held) if is_held)

    @property
    def standings(self) -> tuple[Player, ...]:
        """Players sorted by score, best first (ties keep turn order)."""
        return tuple(sorted(self.players, key=lambda p: p.score, reverse=True))
