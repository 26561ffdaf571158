"""Shared fixtures for the tic-tac-toe tests."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List

import pytest

from tictactoe.ai import HeuristicComputer
from tictactoe.config import GameConfig
from tictactoe.game import Board
from tictactoe.match import MatchController
from tictactoe.players import HumanInput, PlayerRecord
from tictactoe.ui import ScriptedPort


@dataclass
class ScriptedSelector:
    """Plays a fixed list of squares, for driving the controller in tests."""

    record: PlayerRecord
    squares: List[int] = field(default_factory=list)

    def move(self, board: Board, opponent_marker: str) -> int:
        square = self.squares.pop(0)
        board.set(square, self.record.marker)
        return square


def fill(board: Board, layout: str) -> Board:
    """Mark ``board`` from a 9-character string, '.' meaning empty."""
    for pos, marker in enumerate(layout, start=1):
        if marker != ".":
            board.set(pos, marker)
    return board


@pytest.fixture
def port() -> ScriptedPort:
    return ScriptedPort()


@pytest.fixture
def computer() -> HeuristicComputer:
    return HeuristicComputer(
        record=PlayerRecord(name="Sonny", marker="O"), rng=random.Random(7)
    )


@pytest.fixture
def make_controller(port, computer):
    def build(inputs=(), **config) -> MatchController:
        port.inputs.extend(inputs)
        human = HumanInput(record=PlayerRecord(name="Ana", marker="X"), port=port)
        return MatchController(
            human=human,
            computer=computer,
            port=port,
            config=GameConfig(**config),
        )

    return build
