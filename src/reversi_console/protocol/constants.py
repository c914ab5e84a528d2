from typing import Dict

from reversi_console.types import Other, OtherAction, PlayerAction, Undo, UserCommand


class Prompt:
    MAIN_MENU = "\tInsert input: "
    INVALID_COMMAND = "\tInvalid command! Try again: "
    ILLEGAL_MOVE = "\tIllegal move, try again: "
    PLAYER = "\t{glyph} {side:<5} player: "  # e.g. "● Dark  player: "
    MOVES = "\t{glyph} {side:<5} moves: "    # also used to report a move


MAIN_MENU_COMMANDS: Dict[str, UserCommand] = {
    "n": UserCommand.NEW_GAME,
    "new game": UserCommand.NEW_GAME,
    "h": UserCommand.HELP,
    "help": UserCommand.HELP,
    "c": UserCommand.CREDITS,
    "credits": UserCommand.CREDITS,
    "q": UserCommand.QUIT,
    "quit": UserCommand.QUIT,
    "exit": UserCommand.QUIT,
}

PLAYER_COMMANDS: Dict[str, UserCommand] = {
    "h": UserCommand.HUMAN_PLAYER,
    "human": UserCommand.HUMAN_PLAYER,
    "player": UserCommand.HUMAN_PLAYER,
    "human player": UserCommand.HUMAN_PLAYER,
    "w": UserCommand.AI_WEAK,
    "weak": UserCommand.AI_WEAK,
    "weak ai": UserCommand.AI_WEAK,
    "m": UserCommand.AI_MEDIUM,
    "medium": UserCommand.AI_MEDIUM,
    "medium ai": UserCommand.AI_MEDIUM,
    "s": UserCommand.AI_STRONG,
    "strong": UserCommand.AI_STRONG,
    "strong ai": UserCommand.AI_STRONG,
    "q": UserCommand.QUIT,
    "quit": UserCommand.QUIT,
    "exit": UserCommand.QUIT,
}

# In-game words; anything else is treated as a coordinate.
IN_GAME_COMMANDS: Dict[str, PlayerAction] = {
    "h": Other(OtherAction.HELP),
    "help": Other(OtherAction.HELP),
    "u": Undo(),
    "undo": Undo(),
    "q": Other(OtherAction.QUIT),
    "quit": Other(OtherAction.QUIT),
}
