"""Core rules for console tic-tac-toe: the board, its lines, and rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple
import logging

logger = logging.getLogger(__name__)

Marker = str  # a single printable character

EMPTY = " "
POSITIONS: Tuple[int, ...] = tuple(range(1, 10))
CENTER_SQUARE = 5
COMPUTER_MARKER: Marker = "O"
COMPUTER_NAMES: Tuple[str, ...] = ("R2D2", "Sonny", "Number 5")

# Scan order matters: rows, then columns, then diagonals.
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (1, 2, 3),
    (4, 5, 6),
    (7, 8, 9),
    (1, 4, 7),
    (2, 5, 8),
    (3, 6, 9),
    (1, 5, 9),
    (3, 5, 7),
)


def render_grid(labels: Mapping[int, str]) -> List[str]:
    """Return the 3x3 ASCII grid with ``labels[position]`` in each cell."""

    def row(a: int, b: int, c: int) -> List[str]:
        return [
            "     |     |",
            f"  {labels[a]}  |  {labels[b]}  |  {labels[c]}",
            "     |     |",
        ]

    separator = "-----+-----+-----"
    return row(1, 2, 3) + [separator] + row(4, 5, 6) + [separator] + row(7, 8, 9)


# ---------- Board ----------


@dataclass
class Board:
    # position (1..9) -> marker, EMPTY for unmarked
    _cells: Dict[int, str] = field(
        default_factory=lambda: {pos: EMPTY for pos in POSITIONS},
        init=False,
        repr=False,
    )

    def set(self, position: int, marker: Marker) -> None:
        if position not in self._cells:
            raise ValueError(f"Position {position!r} is off the board")
        if len(marker) != 1 or marker == EMPTY:
            raise ValueError(f"Invalid marker {marker!r}")
        if self._cells[position] != EMPTY:
            raise ValueError("Cell already occupied")
        self._cells[position] = marker
        logger.debug("Marked %s at %d", marker, position)

    def marker_at(self, position: int) -> Optional[Marker]:
        value = self._cells[position]
        return None if value == EMPTY else value

    def unmarked_positions(self) -> List[int]:
        return [pos for pos in POSITIONS if self._cells[pos] == EMPTY]

    def is_full(self) -> bool:
        return not self.unmarked_positions()

    def winning_marker(self) -> Optional[Marker]:
        """Marker of the first fully matching line in scan order, if any."""
        for a, b, c in WINNING_LINES:
            v = self._cells[a]
            if v != EMPTY and v == self._cells[b] == self._cells[c]:
                return v
        return None

    def has_winner(self) -> bool:
        return self.winning_marker() is not None

    def immediate_threat(self, marker: Marker) -> Optional[int]:
        """
        Empty position that would complete a line for ``marker``.

        Works for offense (pass your own marker) and defense (pass the
        opponent's). Only the first qualifying line in scan order counts.
        """
        for line in WINNING_LINES:
            trio = [self._cells[pos] for pos in line]
            if EMPTY not in trio:
                continue
            if trio.count(marker) == 2 and trio.count(EMPTY) == 1:
                return line[trio.index(EMPTY)]
        return None

    def reset(self) -> None:
        for pos in POSITIONS:
            self._cells[pos] = EMPTY

    def render(self) -> List[str]:
        return render_grid(self._cells)
