from abc import ABC, abstractmethod
from typing import Optional, Tuple

from reversi_console.types import Coord, Side, State


class TurnAuthority(ABC):
    """
    Abstract base class for whatever owns the board and the turn order.
    The console layer only queries it; game rules, flipping and score
    counting all live behind this interface.
    """

    @abstractmethod
    def get_state(self) -> State:
        """Return the side to move, or None if the game has ended."""
        pass

    @abstractmethod
    def get_score(self) -> Tuple[int, int]:
        """Return the disk counts as (dark, light)."""
        pass

    @abstractmethod
    def get_cell(self, coord: Coord) -> Optional[Side]:
        """Return the side occupying the cell, or None if it is empty."""
        pass

    @abstractmethod
    def check_move(self, coord: Coord) -> bool:
        """Return True if the side to move may place a disk at coord."""
        pass
