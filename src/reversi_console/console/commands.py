from __future__ import annotations

from typing import Optional

from reversi_console.config import get_glyphs
from reversi_console.console.prompt import ask, normalize
from reversi_console.errors import GameOverError
from reversi_console.protocol.constants import (
    IN_GAME_COMMANDS,
    MAIN_MENU_COMMANDS,
    PLAYER_COMMANDS,
    Prompt,
)
from reversi_console.protocol.interface import TurnAuthority
from reversi_console.types import Coord, Move, PlayerAction, Side, UserCommand


def interpret_main_menu(text: str) -> Optional[UserCommand]:
    return MAIN_MENU_COMMANDS.get(normalize(text))


def interpret_player_choice(text: str) -> Optional[UserCommand]:
    return PLAYER_COMMANDS.get(normalize(text))


def parse_coord(text: str) -> Optional[Coord]:
    """Pick a coordinate out of free text.

    Digits 1-8 set the row and letters a-h set the column, wherever they
    appear and in either order, so "c4", "4C" and "move c 4!" all mean the
    same cell. A later digit or letter replaces an earlier one ("a14" is
    row 3). Returns None unless both a row and a column were seen.
    """
    row: Optional[int] = None
    col: Optional[int] = None
    for char in normalize(text):
        if "1" <= char <= "8":
            row = ord(char) - ord("1")
        elif "a" <= char <= "h":
            col = ord(char) - ord("a")
    if row is None or col is None:
        return None
    return Coord(row, col)


def validate_move(turn: TurnAuthority, coord: Coord) -> bool:
    return turn.check_move(coord)


def interpret_move(text: str, turn: TurnAuthority) -> Optional[PlayerAction]:
    normalized = normalize(text)
    action = IN_GAME_COMMANDS.get(normalized)
    if action is not None:
        return action
    coord = parse_coord(normalized)
    if coord is None or not validate_move(turn, coord):
        return None
    return Move(coord)


def input_main_menu() -> UserCommand:
    return ask(Prompt.MAIN_MENU, interpret_main_menu, Prompt.INVALID_COMMAND)


def choose_new_player(side: Side) -> UserCommand:
    prompt = Prompt.PLAYER.format(glyph=get_glyphs().disk(side), side=side.label)
    return ask(prompt, interpret_player_choice, Prompt.INVALID_COMMAND)


def human_make_move(turn: TurnAuthority) -> PlayerAction:
    """Ask the side to move for a move or a command.

    Malformed and illegal coordinates get the same reprompt.
    """
    side = turn.get_state()
    if side is None:
        raise GameOverError("No side is left to move")
    prompt = Prompt.MOVES.format(glyph=get_glyphs().disk(side), side=side.label)
    return ask(prompt, lambda text: interpret_move(text, turn), Prompt.ILLEGAL_MOVE)
