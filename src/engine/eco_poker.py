"""
Eco Poker - Game Engine

Turn and round management for the energy dice game. Each turn a player
rolls six dice up to three times, holding any dice they want to keep
between rolls, then confirms the turn to bank the hand's score.

All methods are stateless class methods operating on immutable data.
"""

import logging
import random
from dataclasses import replace

from src.engine.base import (
    DICE_COUNT,
    DieVector,
    EnergyFace,
    GameConfig,
    GameState,
    HandResult,
    Player,
)
from src.engine.hand_evaluator import evaluate
from src.engine.validators import validate_die_vector, validate_held_flags, validate_hold_index

logger = logging.getLogger(__name__)

FACES: tuple[EnergyFace, ...] = tuple(EnergyFace)


class EcoPokerEngine:
    """
    Stateless engine for Eco Poker.

    All methods are class methods operating on immutable data.
    State is passed in and returned, never stored.
    """

    NUM_DICE = DICE_COUNT

    @classmethod
    def new_game(cls, config: GameConfig) -> GameState:
        """
        Start a game with every player at zero.

        Args:
            config: Validated game configuration

        Returns:
            GameState for round 1, first player, nothing rolled
        """
        logger.info(
            "New game: %d player(s), %d round(s)",
            len(config.player_names),
            config.total_rounds,
        )
        return GameState(
            players=tuple(Player(name=name) for name in config.player_names),
            max_rolls=config.max_rolls,
            total_rounds=config.total_rounds,
        )

    @classmethod
    def roll_dice(
        cls,
        current: DieVector | None = None,
        held: tuple[bool, ...] | None = None,
        rng: random.Random | None = None,
    ) -> DieVector:
        """
        Roll every die that is unset or not held.

        Args:
            current: Current faces (None = all unset)
            held: Hold flag per die (None = nothing held)
            rng: Random source; pass a seeded ``random.Random`` for
                reproducible rolls

        Returns:
            New die vector; held dice with a value keep it
        """
        current = validate_die_vector(current or (None,) * cls.NUM_DICE)
        held = validate_held_flags(held or (False,) * cls.NUM_DICE)
        source = rng if rng is not None else random

        return tuple(
            face if (is_held and face is not None) else source.choice(FACES)
            for face, is_held in zip(current, held)
        )

    @classmethod
    def roll(cls, state: GameState, rng: random.Random | None = None) -> GameState:
        """
        Roll the unheld dice for the active player.

        Raises:
            ValueError: If the game is over or no rolls are left this turn
        """
        if state.is_game_over:
            raise ValueError("The game is over.")
        if state.is_turn_finished:
            raise ValueError(f"No rolls left this turn (maximum {state.max_rolls}).")

        dice = cls.roll_dice(state.dice, state.held, rng)
        logger.debug(
            "%s roll %d: %s",
            state.active_player.name,
            state.roll_count + 1,
            ", ".join(face.value for face in dice),
        )
        return replace(state, dice=dice, roll_count=state.roll_count + 1)

    @classmethod
    def toggle_hold(cls, state: GameState, index: int) -> GameState:
        """
        Hold or release a die.

        Holding is only possible after the first roll and while rolls
        remain this turn.

        Raises:
            ValueError: If the index is invalid or holding is not allowed now
        """
        validate_hold_index(index)
        if state.is_game_over:
            raise ValueError("The game is over.")
        if state.roll_count == 0:
            raise ValueError("Roll the dice before holding any.")
        if state.is_turn_finished:
            raise ValueError("No rolls left this turn, holding has no effect.")
        if state.dice[index] is None:
            raise ValueError(f"Die {index} has not been rolled.")

        held = list(state.held)
        held[index] = not held[index]
        return replace(state, held=tuple(held))

    @classmethod
    def evaluate(cls, state: GameState) -> HandResult:
        """Score the active player's current dice."""
        return evaluate(state.dice)

    @classmethod
    def end_turn(cls, state: GameState) -> tuple[GameState, HandResult]:
        """
        Confirm the active player's hand and pass the dice on.

        The hand score is added to the active player's total. After the
        last player the round advances; after the last round the game ends.

        Returns:
            Tuple of (new_state, scored_hand)

        Raises:
            ValueError: If the game is over or nothing was rolled this turn
        """
        if state.is_game_over:
            raise ValueError("The game is over.")
        if state.roll_count == 0:
            raise ValueError("Roll the dice before confirming the turn.")

        hand = cls.evaluate(state)
        active = state.active_player
        players = list(state.players)
        players[state.active_player_index] = replace(active, score=active.score + hand.score)

        next_index = state.active_player_index + 1
        next_round = state.current_round
        is_game_over = False

        if next_index >= len(players):
            next_index = 0
            next_round += 1
            if next_round > state.total_rounds:
                is_game_over = True
                next_round = state.total_rounds

        logger.debug(
            "%s confirmed %s for %d pts (total %d)",
            active.name,
            hand.combo_label,
            hand.score,
            players[state.active_player_index].score,
        )
        if is_game_over:
            logger.info("Game over after %d round(s)", state.total_rounds)

        new_state = replace(
            state,
            players=tuple(players),
            active_player_index=next_index,
            current_round=next_round,
            roll_count=0,
            dice=(None,) * cls.NUM_DICE,
            held=(False,) * cls.NUM_DICE,
            is_game_over=is_game_over,
        )
        return new_state, hand

    @classmethod
    def winners(cls, state: GameState) -> tuple[Player, ...]:
        """Players sharing the highest score."""
        if not state.players:
            return ()
        best = max(p.score for p in state.players)
        return tuple(p for p in state.players if p.score == best)
