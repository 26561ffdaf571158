"""Round and match flow: turn order, scoring, and the ultimate winner."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple
import logging

from .ai import HeuristicComputer
from .config import GameConfig
from .game import Board, Marker
from .players import HumanInput, MoveSelector, PlayerRecord
from .ui import IOPort, ask_first_mover, ask_yes_no, write_lines

logger = logging.getLogger(__name__)


class Phase(Enum):
    CHOOSING_FIRST_MOVER = "choosing_first_mover"
    ROUND_IN_PROGRESS = "round_in_progress"
    ROUND_RESOLVED = "round_resolved"
    NEXT_ROUND = "next_round"
    MATCH_OVER = "match_over"


@dataclass
class MatchController:
    """Owns the board and both players for the duration of a match."""

    human: HumanInput
    computer: HeuristicComputer
    port: IOPort
    config: GameConfig = field(default_factory=GameConfig)
    board: Board = field(default_factory=Board)
    phase: Phase = Phase.CHOOSING_FIRST_MOVER
    first_marker: Optional[Marker] = None
    current_marker: Optional[Marker] = None

    def __post_init__(self) -> None:
        if self.human.record.marker == self.computer.record.marker:
            raise ValueError("Players must use different markers")

    # ---- state machine ----

    def setup_first_move(self) -> Marker:
        """Fix who opens each round of this match."""
        self._enter(Phase.CHOOSING_FIRST_MOVER)
        policy = self.config.first_mover
        if policy == "choose":
            human_first = ask_first_mover(self.port)
        else:
            human_first = policy == "human"
        self.first_marker = (
            self.human.record.marker if human_first else self.computer.record.marker
        )
        self.current_marker = self.first_marker
        logger.debug("First mover for this match: %s", self.first_marker)
        return self.first_marker

    def reset_round(self) -> None:
        if self.first_marker is None:
            raise RuntimeError("First mover has not been chosen")
        self.board.reset()
        self.current_marker = self.first_marker

    def reset_match(self) -> None:
        self.board.reset()
        self.human.record.score = 0
        self.computer.record.score = 0
        self.first_marker = None
        self.current_marker = None
        self._enter(Phase.CHOOSING_FIRST_MOVER)

    def play_turn(self) -> int:
        """Let the side to move place one mark, then pass the turn."""
        mover, opponent = self._sides()
        square = mover.move(self.board, opponent.record.marker)
        self.current_marker = opponent.record.marker
        return square

    def round_over(self) -> bool:
        return self.board.has_winner() or self.board.is_full()

    def play_round(self) -> Optional[Marker]:
        """Play one board to completion; returns the winning marker or None."""
        self.reset_round()
        self._enter(Phase.ROUND_IN_PROGRESS)
        self.port.clear()
        self.display_board()
        while True:
            self.play_turn()
            if self.round_over():
                break
            if self.human_turn():
                self.port.clear()
                self.display_board()
        winner = self.resolve_round()
        self.display_result()
        return winner

    def resolve_round(self) -> Optional[Marker]:
        """Credit the round's winner; ties leave the scores alone."""
        self._enter(Phase.ROUND_RESOLVED)
        winner = self.board.winning_marker()
        record = self.record_for(winner)
        if record is not None:
            record.tally_win()
        logger.debug("Round resolved: %s", winner or "tie")
        return winner

    def play_match(self) -> Optional[PlayerRecord]:
        """Play rounds until someone reaches ``max_wins`` or the human stops."""
        if self.first_marker is None:
            self.setup_first_move()
        while True:
            self.play_round()
            if self.max_wins_achieved():
                self._enter(Phase.MATCH_OVER)
                self.display_ultimate_winner()
                return self.ultimate_winner()
            if not ask_yes_no(self.port, "Would you like to play another round?"):
                self._enter(Phase.MATCH_OVER)
                return None
            self._enter(Phase.NEXT_ROUND)
            self.port.write_line("Let's play again!")
            self.port.write_line("")

    # ---- queries ----

    def human_turn(self) -> bool:
        return self.current_marker == self.human.record.marker

    def max_wins_achieved(self) -> bool:
        target = self.config.max_wins
        return (
            self.human.record.score >= target
            or self.computer.record.score >= target
        )

    def ultimate_winner(self) -> Optional[PlayerRecord]:
        if not self.max_wins_achieved():
            return None
        return self.record_for(self.board.winning_marker())

    def record_for(self, marker: Optional[Marker]) -> Optional[PlayerRecord]:
        for record in (self.human.record, self.computer.record):
            if marker is not None and record.marker == marker:
                return record
        return None

    # ---- display ----

    def display_board(self) -> None:
        human, computer = self.human.record, self.computer.record
        self.port.write_line(
            f"You're a {human.marker}. {computer.name} is a {computer.marker}."
        )
        self.port.write_line("")
        write_lines(self.port, self.board.render())
        self.port.write_line("")

    def display_result(self) -> None:
        self.port.clear()
        self.display_board()
        winner = self.record_for(self.board.winning_marker())
        if winner is None:
            self.port.write_line("It's a tie!")
        else:
            self.port.write_line(f"{winner.name} won!")
        self.display_scoreboard()

    def display_scoreboard(self) -> None:
        self.port.write_line("")
        self.port.write_line("------Scoreboard------")
        self.port.write_line(
            f"Human: {self.human.record.score}   "
            f"Computer: {self.computer.record.score}"
        )
        if not self.max_wins_achieved():
            self.port.write_line(
                f"First to {self.config.max_wins} is the ultimate winner!"
            )
        self.port.write_line("")

    def display_ultimate_winner(self) -> None:
        winner = self.ultimate_winner()
        if winner is self.human.record:
            self.port.write_line(
                f"Congratulations, {winner.name} is the ULTIMATE WINNER!"
            )
        elif winner is self.computer.record:
            self.port.write_line(f"{winner.name} is the ULTIMATE WINNER")
            self.port.write_line("Better luck next time!")

    # ---- helpers ----

    def _sides(self) -> Tuple[MoveSelector, MoveSelector]:
        if self.current_marker is None:
            raise RuntimeError("First mover has not been chosen")
        if self.board.is_full():
            raise RuntimeError("No valid moves available")
        if self.human_turn():
            return self.human, self.computer
        return self.computer, self.human

    def _enter(self, phase: Phase) -> None:
        logger.debug("Phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase
