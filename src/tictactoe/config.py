"""Validated settings for a tic-tac-toe session and the human's profile."""

from __future__ import annotations

from typing import Literal, Mapping, Optional, Tuple
import logging
import os
import random

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from .game import CENTER_SQUARE, COMPUTER_MARKER, COMPUTER_NAMES

ENV_PREFIX = "TICTACTOE_"
FirstMover = Literal["human", "computer", "choose"]


def _check_marker(value: str) -> str:
    if len(value) != 1:
        raise ValueError("I'm sorry, your marker must be one character")
    if value == " ":
        raise ValueError("Your marker cannot be a space")
    if not value.isprintable():
        raise ValueError("I'm sorry, your marker must be a printable character")
    return value


def first_error(exc: ValidationError) -> str:
    """Human-readable message for the first problem in ``exc``."""
    error = exc.errors()[0]
    original = error.get("ctx", {}).get("error")
    return str(original) if original is not None else error["msg"]


class GameConfig(BaseModel):
    """Session settings; all have defaults and none come from the command line."""

    model_config = ConfigDict(frozen=True)

    computer_marker: str = Field(
        default=COMPUTER_MARKER, description="The computer's fixed marker"
    )
    center_square: int = Field(default=CENTER_SQUARE, ge=1, le=9)
    max_wins: int = Field(
        default=2,
        ge=1,
        description="Round wins needed to become the ultimate winner",
    )
    first_mover: FirstMover = "choose"
    seed: Optional[int] = None
    computer_names: Tuple[str, ...] = COMPUTER_NAMES
    clear_screen: bool = True
    log_level: str = "WARNING"

    @field_validator("computer_marker")
    @classmethod
    def ensure_single_character(cls, value: str) -> str:
        return _check_marker(value)

    @field_validator("computer_names")
    @classmethod
    def ensure_names(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if not value or any(not name.strip() for name in value):
            raise ValueError("At least one non-empty computer name is required")
        return value

    @field_validator("log_level")
    @classmethod
    def ensure_known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {value!r}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GameConfig":
        """Build a config from ``TICTACTOE_*`` variables, falling back to defaults."""
        environ = os.environ if environ is None else environ
        fields = {
            "computer_marker": "COMPUTER_MARKER",
            "center_square": "CENTER",
            "max_wins": "MAX_WINS",
            "first_mover": "FIRST_MOVER",
            "seed": "SEED",
            "clear_screen": "CLEAR",
            "log_level": "LOG_LEVEL",
        }
        values = {
            name: environ[ENV_PREFIX + suffix]
            for name, suffix in fields.items()
            if environ.get(ENV_PREFIX + suffix, "") != ""
        }
        if "first_mover" in values:
            values["first_mover"] = values["first_mover"].lower()
        return cls.model_validate(values)

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)


class HumanProfile(BaseModel):
    """The human's answers to the name and marker prompts.

    Pass ``context={"computer_marker": ...}`` when validating so the marker
    can be checked against the computer's.
    """

    name: Optional[str] = None
    marker: Optional[str] = None

    @field_validator("name")
    @classmethod
    def ensure_name(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError("Sorry, you have to input something")
        return value

    @field_validator("marker")
    @classmethod
    def ensure_marker(cls, value: Optional[str], info: ValidationInfo) -> Optional[str]:
        if value is None:
            return value
        value = _check_marker(value)
        computer_marker = (info.context or {}).get("computer_marker")
        if computer_marker is not None and value.upper() == computer_marker.upper():
            raise ValueError("I'm sorry, that's the computer's marker")
        return value
