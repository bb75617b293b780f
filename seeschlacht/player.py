"""The state one player keeps while shooting at the opponent's board."""

from __future__ import annotations

from dataclasses import dataclass

from seeschlacht.board import WATER
from seeschlacht.grid import Grid


@dataclass
class Player:
    """A player, the opponent's board they fire at and their progress so far.

    ``last_y`` and ``last_x`` hold the board cell of the latest shot, so the
    aiming cursor can start there on the next turn.
    """

    number: int
    ship_count: int
    board: Grid
    last_x: int = 0
    last_y: int = 0
    attempts: int = 0

    @classmethod
    def create(cls, number: int, rows: int, cols: int, ship_count: int) -> Player:
        """Return a player with an empty ``rows`` x ``cols`` board to fire at."""
        return cls(number=number, ship_count=ship_count, board=Grid(rows, cols, WATER))