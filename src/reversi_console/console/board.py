from __future__ import annotations

from typing import List, Optional

from reversi_console.config import GlyphSet, get_glyphs
from reversi_console.protocol.interface import TurnAuthority
from reversi_console.types import BOARD_SIZE, Coord, Side, State

COLUMN_LABELS = " ".join(chr(ord("A") + c) for c in range(BOARD_SIZE))


def determine_winner(score_dark: int, score_light: int) -> Optional[Side]:
    """Return the side with more disks, or None on a tie."""
    if score_dark > score_light:
        return Side.DARK
    if score_light > score_dark:
        return Side.LIGHT
    return None


def cell_glyph(turn: TurnAuthority, coord: Coord, glyphs: GlyphSet, game_over: bool) -> str:
    occupant = turn.get_cell(coord)
    if occupant is not None:
        return glyphs.disk(occupant)
    if not game_over and turn.check_move(coord):
        return glyphs.legal_move
    return glyphs.empty


def render_grid(turn: TurnAuthority, glyphs: GlyphSet, game_over: bool) -> str:
    lines: List[str] = [f"\n\t   {COLUMN_LABELS}\n"]
    for row in range(BOARD_SIZE):
        cells = "".join(
            cell_glyph(turn, Coord(row, col), glyphs, game_over) + " "
            for col in range(BOARD_SIZE)
        )
        lines.append(f"\t{row + 1}  {cells} {row + 1}\n")
    lines.append(f"\t   {COLUMN_LABELS}\n")
    return "".join(lines)


def render_status(turn: TurnAuthority, glyphs: GlyphSet, state: State) -> str:
    score_dark, score_light = turn.get_score()
    if state is Side.DARK:
        arrow = "<<<"
    elif state is Side.LIGHT:
        arrow = ">>>"
    else:
        arrow = "   "
    text = f"\t    {score_dark:>2} {glyphs.dark} {arrow} {glyphs.light} {score_light:<2}\n\n"
    if state is None:
        winner = determine_winner(score_dark, score_light)
        if winner is None:
            text += "\tTie!\n"
        else:
            text += f"\t{glyphs.disk(winner)} {winner.label} wins!\n"
    return text


def render_board(turn: TurnAuthority) -> str:
    """Draw the board, the score line and, once the game is over, the result.

    While a side is to move, empty cells where it may play get the legal
    move marker and the arrow points at that side's score. Once the game
    is over no legality is queried and a verdict line is appended.
    """
    glyphs = get_glyphs()
    state = turn.get_state()
    return render_grid(turn, glyphs, state is None) + "\n" + render_status(turn, glyphs, state)


def draw_board(turn: TurnAuthority):
    print(render_board(turn), end="")
