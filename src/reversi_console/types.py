from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

BOARD_SIZE = 8


class Side(Enum):
    DARK = "DARK"
    LIGHT = "LIGHT"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def opponent(self) -> "Side":
        return Side.LIGHT if self is Side.DARK else Side.DARK


# Side to move, or None once neither side has a legal move.
State = Optional[Side]


@dataclass(frozen=True)
class Coord:
    row: int
    col: int

    def __post_init__(self):
        if not (0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE):
            raise ValueError(f"Coordinate out of range: ({self.row}, {self.col})")

    def __str__(self) -> str:
        return f"{chr(ord('a') + self.col)}{self.row + 1}"


class UserCommand(Enum):
    NEW_GAME = "NEW_GAME"
    HUMAN_PLAYER = "HUMAN_PLAYER"
    AI_WEAK = "AI_WEAK"
    AI_MEDIUM = "AI_MEDIUM"
    AI_STRONG = "AI_STRONG"
    HELP = "HELP"
    CREDITS = "CREDITS"
    QUIT = "QUIT"


class OtherAction(Enum):
    HELP = "HELP"
    QUIT = "QUIT"


@dataclass(frozen=True)
class Move:
    coord: Coord


@dataclass(frozen=True)
class Undo:
    pass


@dataclass(frozen=True)
class Other:
    action: OtherAction


PlayerAction = Union[Move, Undo, Other]
