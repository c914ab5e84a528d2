from __future__ import annotations

from reversi_console.config import get_glyphs
from reversi_console.protocol.constants import Prompt
from reversi_console.types import Coord, Side, State
from reversi_console.version import __version__ as VERSION

INTRO = """

\t-------------------------
\t-------- REVERSI --------
\t-------------------------
\t  a simple Reversi game
\t   for your terminal"""

MAIN_MENU = """

\t-------------------------
\t------- MAIN MENU -------
\t-------------------------
\tn - New match
\th - Help
\tc - Credits
\tq - Quit Reversi
\t-------------------------"""

NEW_PLAYER_MENU = """

\t-------------------------
\t---- CHOOSE A PLAYER ----
\t-------------------------
\th - Human Player
\tw - Weak   AI
\tm - Medium AI
\ts - Strong AI
\tq - Quit match
\t-------------------------"""

COMMANDS_INFO = """

\tStarting new game...
\tType a cell's coordinates to place your disk there.
\tExample: "c4" (or "C4", "4c", "4C", etc...).
\tType 'help' or 'h' to display a help message.
\tType 'undo' or 'u' to undo the last move.
\tType 'quit' or 'q' to abandon the game."""

RULES = (
    "\n\n"
    "\t-------------------------\n"
    "\t-------- REVERSI --------\n"
    "\t-------------------------\n"
    "\tReversi is a board game where two players compete against each other. "
    "The game is played on a 8x8 board, just like chess but for the squares' colour which is always green. "
    "There are 64 identical pieces called disks, which are white on one side and black on the other. "
    "A player is Dark, using disks' black side, and the other one is Light, using disks' white side. "
    "The game starts with four disks already placed at the centre of the board, two for each side. "
    "Dark moves first.\n\n"
    "\tLet's say it's Dark's turn, for simplicity's sake, as for Light the rules are just the same. "
    "Dark has to place a disk in a free square of the board, with the black side facing up. "
    "Whenever the newly placed black disk and any other previously placed black disk enclose a sequence "
    "of white disks (horizontal, vertical or diagonal and of any length), all of those flip and turn black. "
    "It is mandatory to place the new disk such that at least a white disk is flipped, "
    "otherwise the move is not valid.\n\n"
    "\tUsually players' turn alternate, passing from one to the other. "
    "When a player cannot play any legal move, the turn goes back to the other player, "
    "thus allowing the same player to play consecutive turns. "
    "When neither player can play a legal move, the game ends. "
    "Usually, this happens when the board is completely filled up with disks (for a total of 60 turns). "
    "Games also happen sometimes to end before that, leaving empty squares on the board.\n\n"
    "\tWhen the game ends, the player with more disks turned to its side wins. "
    "Ties are possible as well, if both player have the same number of disks.\n"
    "\t-------------------------\n"
)

HOW_TO_PLAY = (
    "\n\n"
    "\t-------------------------\n"
    "\t------ HOW TO PLAY ------\n"
    "\t-------------------------\n"
    "\tTo play you first have to choose who is playing on each side, Dark and Light. "
    "You can choose a human player or an AI. "
    "Choose human for both players and challenge a friend, or test your skills against an AI, "
    "or even relax as you watch two AIs competing against each other: all combinations are possible!\n\n"
    "\tAs a human player, you move by entering the coordinates (a letter and a number) of the square "
    "you want to place your disk on, e.g. all of 'c4', 'C4', '4c' and '4C' are valid and equivalent "
    "coordinates. For your ease of use, all legal moves are marked on the board by {legal_move}.\n\n"
    "\tFurthermore, on your turn you can also input special commands: 'undo' (or 'u') to undo your "
    "last move (and yes, you can 'undo' as many times as you like), 'help' (or 'h') to see this help "
    "message again, and 'quit' (or 'q') to quit the game.\n"
    "\t-------------------------"
)

CREDITS = """

\t-------------------------
\t-------- CREDITS --------
\t-------------------------
\tReversi v. {version}{edition}
\tReleased under MIT license
\t-------------------------"""


def _edition_suffix() -> str:
    edition = get_glyphs().edition
    return f" {edition}" if edition else ""


def intro():
    print(INTRO)
    edition = get_glyphs().edition
    if edition:
        print(f"\t  {edition}")
    print(f"\t        v. {VERSION}")


def main_menu():
    print(MAIN_MENU)


def new_player_menu():
    print(NEW_PLAYER_MENU)


def commands_info():
    print(COMMANDS_INFO)


def show_help():
    glyphs = get_glyphs()
    if glyphs.legal_move.strip():
        marker = f"'{glyphs.legal_move}'"
    else:
        marker = "a blank square"
    print(RULES)
    print(HOW_TO_PLAY.format(legal_move=marker))


def show_credits():
    print(CREDITS.format(version=VERSION, edition=_edition_suffix()))


def format_move(side: Side, coord: Coord) -> str:
    prompt = Prompt.MOVES.format(glyph=get_glyphs().disk(side), side=side.label)
    return f"{prompt}{coord}"


def format_quitting(state: State) -> str:
    if state is Side.DARK:
        return "\tDark is running away, the coward!"
    if state is Side.LIGHT:
        return "\tLight is running away, the coward!"
    return "\n\tGoodbye!"


def format_no_undo(side: Side) -> str:
    return f"\tThere is no move {side.label} can undo."


def move_message(side: Side, coord: Coord):
    print(format_move(side, coord))


def quitting_message(state: State):
    """Last words before a side abandons the match, or before leaving the menu."""
    print(format_quitting(state))


def no_undo_message(side: Side):
    print(format_no_undo(side))
