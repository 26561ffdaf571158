"""Player records and the move-selection interface shared by both sides."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol
import logging

from .game import Board, Marker
from .ui import IOPort, joinor

logger = logging.getLogger(__name__)


@dataclass
class PlayerRecord:
    name: str
    marker: Marker
    score: int = 0

    def tally_win(self) -> None:
        self.score += 1
        logger.debug("%s now has %d win(s)", self.name, self.score)


class MoveSelector(Protocol):
    """Anything that can take a turn: places one mark and returns where."""

    record: PlayerRecord

    def move(self, board: Board, opponent_marker: Marker) -> int: ...


@dataclass
class HumanInput:
    """Human side of the game, reading square choices from an I/O port."""

    record: PlayerRecord
    port: IOPort

    def move(self, board: Board, opponent_marker: Marker) -> int:
        square = self.pick_square(board)
        board.set(square, self.record.marker)
        return square

    def pick_square(self, board: Board) -> int:
        available = board.unmarked_positions()
        if not available:
            raise RuntimeError("No valid moves available")
        self.port.write_line(f"Choose a square ({joinor(available)}): ")
        while True:
            answer = self.port.read_line().strip()
            if not answer.isdecimal():
                self.port.write_line("Sorry, please only input whole numbers")
            elif int(answer) in available:
                return int(answer)
            else:
                self.port.write_line("Sorry, that's not a valid choice")
