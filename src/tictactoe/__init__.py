"""Console tic-tac-toe exposing the board, the computer opponent, and match flow."""

from .ai import HeuristicComputer
from .config import GameConfig
from .game import Board
from .match import MatchController, Phase
from .players import HumanInput, MoveSelector, PlayerRecord
from .shell import GameShell
from .ui import ConsolePort, ScriptedPort

__all__ = [
    "Board",
    "ConsolePort",
    "GameConfig",
    "GameShell",
    "HeuristicComputer",
    "HumanInput",
    "MatchController",
    "MoveSelector",
    "Phase",
    "PlayerRecord",
    "ScriptedPort",
]
