"""Interactive walkthrough of the rules, numbering, and ways to win."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Tuple
import logging

from .game import POSITIONS, Board, render_grid
from .players import HumanInput, PlayerRecord
from .ui import IOPort, write_lines

logger = logging.getLogger(__name__)

TUTORIAL_MARKER = "X"

WIN_EXAMPLES: Sequence[Tuple[str, Tuple[int, int, int]]] = (
    ("You can get three in a row horizontally:", (1, 2, 3)),
    ("You can get three in a row vertically:", (2, 5, 8)),
    ("Or you can get three in a row diagonally:", (1, 5, 9)),
)


@dataclass
class Tutorial:
    port: IOPort
    board: Board = field(default_factory=Board)

    def play(self) -> None:
        logger.debug("Starting tutorial")
        self.display_welcome_message()
        self.display_instructions()
        self.move_tutorial()
        self.display_winning_conditions()
        self.display_goodbye_message()

    def display_welcome_message(self) -> None:
        self.port.clear()
        self.port.write_line("Welcome to the Tic Tac Toe tutorial!")
        self.port.pause()

    def display_instructions(self) -> None:
        self.port.clear()
        self.port.write_line(
            "Tic Tac Toe is a 2-player board game played on a 3x3 grid."
        )
        self.port.write_line("Players take turns marking a square.")
        self.port.write_line("The first player to mark 3 squares in a row wins.")
        self.port.pause()

    def move_tutorial(self) -> None:
        self.port.clear()
        self.port.write_line("The board is numbered, like so...")
        self.port.write_line("")
        write_lines(self.port, render_grid({pos: str(pos) for pos in POSITIONS}))
        self.port.write_line("Next, we'll practice placing moves on the board")
        self.port.pause()
        self.practice_entering_numbers()

    def practice_entering_numbers(self) -> None:
        """Let the human place marks until the board fills or they type 'exit'."""
        self.board.reset()
        student = HumanInput(
            record=PlayerRecord(name="You", marker=TUTORIAL_MARKER), port=self.port
        )
        self.display_board()
        while True:
            student.move(self.board, opponent_marker="")
            self.display_board()
            if self.board.is_full():
                self.port.pause()
                return
            self.port.write_line("Hit 'enter' to continue or type 'exit' to move on")
            if self.port.read_line().strip().lower() == "exit":
                return

    def display_winning_conditions(self) -> None:
        self.port.clear()
        self.port.write_line("There are three ways you can win:")
        self.port.pause()
        for message, line in WIN_EXAMPLES:
            self.port.clear()
            self.board.reset()
            self.port.write_line(message)
            for pos in line:
                self.board.set(pos, TUTORIAL_MARKER)
            write_lines(self.port, self.board.render())
            self.port.pause()

    def display_goodbye_message(self) -> None:
        self.port.write_line("That concludes this tutorial!")
        self.port.write_line("Good luck!")
        self.port.pause()

    def display_board(self) -> None:
        self.port.clear()
        self.port.write_line("")
        write_lines(self.port, self.board.render())
        self.port.write_line("")
