"""Scripted heuristic opponent: win, block, take the centre, else random."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence, Tuple
import logging
import random

from .game import CENTER_SQUARE, COMPUTER_MARKER, COMPUTER_NAMES, Board, Marker
from .players import PlayerRecord

logger = logging.getLogger(__name__)


@dataclass
class HeuristicComputer:
    """Computer player following a fixed one-ply priority chain.

    Strategies are tried in order and the first that applies commits the move:
      1. offense - complete one of our own lines
      2. defense - block the opponent's line
      3. centre  - take the centre square if it is free
      4. random  - any unmarked square, chosen with ``rng``

    The chain is beatable; a human who sets up a fork wins.
    """

    record: PlayerRecord
    rng: random.Random = field(default_factory=random.Random, repr=False)
    center: int = CENTER_SQUARE

    @classmethod
    def create(
        cls,
        rng: random.Random,
        marker: Marker = COMPUTER_MARKER,
        names: Sequence[str] = COMPUTER_NAMES,
        center: int = CENTER_SQUARE,
    ) -> "HeuristicComputer":
        """Build a computer with a name drawn from ``names`` using ``rng``."""
        name = rng.choice(list(names))
        return cls(record=PlayerRecord(name=name, marker=marker), rng=rng, center=center)

    # ---- public API ----

    def choose(self, board: Board, opponent_marker: Marker) -> int:
        available = board.unmarked_positions()
        if not available:
            raise RuntimeError("No valid moves available")

        strategies: Sequence[Tuple[str, Callable[[], Optional[int]]]] = (
            ("offense", lambda: board.immediate_threat(self.record.marker)),
            ("defense", lambda: board.immediate_threat(opponent_marker)),
            ("center", lambda: self._center_move(available)),
        )
        for strategy, candidate in strategies:
            square = candidate()
            if square is not None:
                logger.debug("%s plays %s at %d", self.record.name, strategy, square)
                return square

        square = self.rng.choice(available)
        logger.debug("%s plays random at %d", self.record.name, square)
        return square

    def move(self, board: Board, opponent_marker: Marker) -> int:
        square = self.choose(board, opponent_marker)
        board.set(square, self.record.marker)
        return square

    # ---- helpers ----

    def _center_move(self, available: Sequence[int]) -> Optional[int]:
        return self.center if self.center in available else None
