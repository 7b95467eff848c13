"""
Eco Poker - Hall of Fame Manager

Keeps the best final scores of completed games in a local JSON file.
Scores are ranked per round category (3, 5, 10 or 15 rounds) and only the
top entries of each category are kept.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Iterable

from pydantic import TypeAdapter, ValidationError

from src.database.models import HallOfFameEntry
from src.engine.base import ROUND_OPTIONS, Player

logger = logging.getLogger(__name__)

MAX_ENTRIES_PER_CATEGORY = 20

_ENTRIES = TypeAdapter(list[HallOfFameEntry])


class HallOfFameManager:
    """Manages hall of fame records in a JSON file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> list[HallOfFameEntry]:
        """Read all entries. A missing or unreadable file yields an empty list."""
        if not self.path.exists():
            return []
        try:
            return _ENTRIES.validate_json(self.path.read_bytes())
        except (OSError, ValidationError):
            logger.warning("Ignoring unreadable hall of fame at %s", self.path, exc_info=True)
            return []

    def save(self, entries: Iterable[HallOfFameEntry]) -> None:
        """Overwrite the stored entries."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_bytes(_ENTRIES.dump_json(list(entries), indent=2))

    def record_game(
        self,
        players: Iterable[Player],
        rounds: int,
        played_on: date | None = None,
    ) -> list[HallOfFameEntry]:
        """
        Add the final scores of a finished game.

        Args:
            players: Players with their final totals
            rounds: Number of rounds the game lasted
            played_on: Date of the game (defaults to today)

        Returns:
            The stored entries after ranking and capping
        """
        played_on = played_on or date.today()
        entries = self.load()
        new_entries = [
            HallOfFameEntry(name=p.name, score=p.score, rounds=rounds, played_on=played_on)
            for p in players
        ]
        entries.extend(new_entries)

        ranked = sorted(entries, key=lambda e: e.score, reverse=True)
        kept: list[HallOfFameEntry] = []
        for category in ROUND_OPTIONS:
            kept.extend(
                [e for e in ranked if e.rounds == category][:MAX_ENTRIES_PER_CATEGORY]
            )

        self.save(kept)
        logger.info(
            "Recorded %d hall of fame entr%s for %d-round games",
            len(new_entries),
            "y" if len(new_entries) == 1 else "ies",
            rounds,
        )
        return kept

    def top(self, rounds: int, limit: int = MAX_ENTRIES_PER_CATEGORY) -> list[HallOfFameEntry]:
        """Best entries for a round category, highest score first."""
        entries = [e for e in self.load() if e.rounds == rounds]
        return sorted(entries, key=lambda e: e.score, reverse=True)[:limit]

    def clear(self) -> None:
        """Remove every stored entry."""
        if self.path.exists():
            self.path.unlink()
            logger.info("Cleared hall of fame at %s", self.path)
