"""Shared pytest fixtures: a scriptable turn authority and stdin helpers."""

from __future__ import annotations

import io
from collections.abc import Callable, Iterator
from typing import Dict, Iterable, Optional, Set, Tuple

import pytest

from reversi_console import config
from reversi_console.protocol.interface import TurnAuthority
from reversi_console.types import Coord, Side, State


class FakeTurn(TurnAuthority):
    """Turn authority that answers from fixed tables instead of game rules."""

    def __init__(
        self,
        state: State = Side.DARK,
        cells: Optional[Dict[Coord, Side]] = None,
        legal: Iterable[Coord] = (),
        score: Tuple[int, int] = (2, 2),
    ):
        self.state = state
        self.cells = dict(cells or {})
        self.legal: Set[Coord] = set(legal)
        self.score = score
        self.checked: list[Coord] = []

    def get_state(self) -> State:
        return self.state

    def get_score(self) -> Tuple[int, int]:
        return self.score

    def get_cell(self, coord: Coord) -> Optional[Side]:
        return self.cells.get(coord)

    def check_move(self, coord: Coord) -> bool:
        self.checked.append(coord)
        return coord in self.legal


def opening_cells() -> Dict[Coord, Side]:
    return {
        Coord(3, 3): Side.LIGHT,
        Coord(4, 4): Side.LIGHT,
        Coord(3, 4): Side.DARK,
        Coord(4, 3): Side.DARK,
    }


@pytest.fixture
def opening_turn() -> FakeTurn:
    return FakeTurn(
        state=Side.DARK,
        cells=opening_cells(),
        legal=[Coord(2, 3), Coord(3, 2), Coord(4, 5), Coord(5, 4)],
    )


@pytest.fixture
def feed_stdin(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    """Replace stdin with the given lines."""

    def _feed(*lines: str) -> None:
        text = "".join(f"{line}\n" for line in lines)
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return _feed


@pytest.fixture(autouse=True)
def _symbols_profile() -> Iterator[None]:
    """Run every test with the symbol glyphs unless it configures otherwise."""
    config.configure("symbols")
    yield
    config._active = None
