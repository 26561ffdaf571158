"""Whole-session flow: greeting, tutorial, marker choice, and repeated matches."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
import logging
import random

from .ai import HeuristicComputer
from .config import GameConfig
from .match import MatchController
from .players import HumanInput, PlayerRecord
from .tutorial import Tutorial
from .ui import IOPort, ask_marker, ask_name, ask_yes_no

logger = logging.getLogger(__name__)


@dataclass
class GameShell:
    port: IOPort
    config: GameConfig = field(default_factory=GameConfig)
    rng: Optional[random.Random] = field(default=None, repr=False)
    controller: Optional[MatchController] = field(default=None, init=False)

    def run(self) -> None:
        rng = self.rng if self.rng is not None else self.config.make_rng()
        computer = HeuristicComputer.create(
            rng,
            marker=self.config.computer_marker,
            names=self.config.computer_names,
            center=self.config.center_square,
        )
        name = ask_name(self.port)
        self.display_welcome_message(name)
        if ask_yes_no(self.port, "Would you like to enter a tutorial?"):
            Tutorial(self.port).play()
        self.port.clear()
        marker = ask_marker(self.port, computer.record.marker)
        human = HumanInput(
            record=PlayerRecord(name=name, marker=marker), port=self.port
        )

        self.controller = MatchController(
            human=human, computer=computer, port=self.port, config=self.config
        )
        while True:
            self.controller.setup_first_move()
            self.display_wins_needed()
            winner = self.controller.play_match()
            logger.info(
                "Match finished, ultimate winner: %s", winner.name if winner else None
            )
            if not ask_yes_no(self.port, "Would you like to play a new game?"):
                break
            self.controller.reset_match()
            self.port.clear()
        self.display_goodbye_message()

    def display_welcome_message(self, name: str) -> None:
        self.port.clear()
        self.port.write_line(f"Hello {name}, welcome to Tic Tac Toe!")

    def display_wins_needed(self) -> None:
        self.port.write_line("")
        self.port.write_line("You can quit after the end of each round")
        self.port.write_line("OR you can try to continue until someone")
        self.port.write_line(
            f"wins {self.config.max_wins} times and is crowned the ULTIMATE WINNER"
        )
        self.port.pause()

    def display_goodbye_message(self) -> None:
        self.port.write_line("Thanks for playing Tic Tac Toe! Goodbye!")
