"""Text I/O for the game: console and scripted ports plus retrying prompts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Protocol, Sequence

from pydantic import ValidationError
from rich.console import Console

from .config import HumanProfile, first_error


class IOPort(Protocol):
    """Line-oriented input/output used by everything that talks to the human."""

    def read_line(self) -> str: ...

    def write_line(self, text: str = "") -> None: ...

    def clear(self) -> None: ...

    def pause(self) -> None: ...


@dataclass
class ConsolePort:
    """Terminal port backed by a rich ``Console``."""

    console: Console = field(
        default_factory=lambda: Console(highlight=False), repr=False
    )
    clear_screen: bool = True

    def read_line(self) -> str:
        return self.console.input(markup=False)

    def write_line(self, text: str = "") -> None:
        # Markers such as "[" must print verbatim.
        self.console.print(text, markup=False, emoji=False)

    def clear(self) -> None:
        if self.clear_screen:
            self.console.clear()

    def pause(self) -> None:
        self.write_line("(Press enter to continue)")
        self.read_line()


@dataclass
class ScriptedPort:
    """Headless port: answers come from ``inputs``, output is collected."""

    inputs: List[str] = field(default_factory=list)
    output: List[str] = field(default_factory=list)
    clears: int = 0

    def read_line(self) -> str:
        if not self.inputs:
            raise EOFError("Scripted input exhausted")
        return self.inputs.pop(0)

    def write_line(self, text: str = "") -> None:
        self.output.extend(text.split("\n"))

    def clear(self) -> None:
        self.clears += 1

    def pause(self) -> None:
        self.write_line("(Press enter to continue)")
        self.read_line()

    @property
    def text(self) -> str:
        return "\n".join(self.output)


def write_lines(port: IOPort, lines: Iterable[str]) -> None:
    for line in lines:
        port.write_line(line)


def joinor(items: Sequence[object], delimiter: str = ", ", last: str = "or") -> str:
    """``[1, 2, 3]`` -> ``"1, 2 or 3"``."""
    words = [str(item) for item in items]
    if len(words) <= 1:
        return "".join(words)
    if len(words) == 2:
        return f"{words[0]} {last} {words[1]}"
    return f"{delimiter.join(words[:-1])} {last} {words[-1]}"


def ask_yes_no(port: IOPort, question: str) -> bool:
    port.write_line(f"{question} (y/n)")
    while True:
        answer = port.read_line().strip().lower()
        if answer in ("y", "n"):
            return answer == "y"
        port.write_line("Sorry, please only enter 'y' or 'n'")


def ask_name(port: IOPort) -> str:
    port.write_line("What is your name?")
    while True:
        try:
            profile = HumanProfile(name=port.read_line().strip())
        except ValidationError as exc:
            port.write_line(first_error(exc))
            continue
        return profile.name or ""


def ask_marker(port: IOPort, computer_marker: str) -> str:
    port.write_line("Please choose one character to be your marker")
    port.write_line(
        f"(The computer's marker is '{computer_marker}' so don't pick that)"
    )
    while True:
        # Only the line ending is stripped; a lone space must be refused.
        choice = port.read_line().rstrip("\r\n")
        try:
            profile = HumanProfile.model_validate(
                {"marker": choice}, context={"computer_marker": computer_marker}
            )
        except ValidationError as exc:
            port.write_line(first_error(exc))
            continue
        return profile.marker or ""


def ask_first_mover(port: IOPort) -> bool:
    """True if the human goes first, False if second."""
    port.write_line("")
    port.write_line("Would you like to go first or second?")
    port.write_line("Enter '1' to go first or '2' to go second")
    while True:
        choice = port.read_line().strip()
        if choice in ("1", "2"):
            return choice == "1"
        port.write_line("")
        port.write_line("Sorry, please input either '1' or '2'")
