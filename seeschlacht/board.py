"""Ship placement, shots and sinking on a battleship board.

Cell encoding: 0 is water, ``n > 0`` is an untouched part of ship ``n``,
``-n`` is a hit part of ship ``n``, ``MISS`` is a shot into water and
``SUNK`` marks a part of a sunk ship.
"""

from __future__ import annotations

import random
from enum import Enum, IntEnum
from typing import Protocol

from seeschlacht.grid import Grid

SHIP_SIZE = 5
MIN_COLS = 10
MAX_COLS = 26
MIN_ROWS = 10
MAX_ROWS = 20
MIN_SHIPS = 1
MAX_SHIPS = 9

WATER = 0
MISS = -333
SUNK = -1000


class _Rng(Protocol):
    def randrange(self, stop: int) -> int: ...


class Direction(IntEnum):
    """Direction in which a ship extends from its stern."""

    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4

    @property
    def step(self) -> tuple[int, int]:
        return {
            Direction.UP: (-1, 0),
            Direction.DOWN: (1, 0),
            Direction.LEFT: (0, -1),
            Direction.RIGHT: (0, 1),
        }[self]


class ShotResult(Enum):
    """Outcome of firing at a cell."""

    HIT = 1
    MISS = 0
    REPEATED = -1


class PlacementError(Exception):
    """A ship would leave the board or overlap another ship."""


def _ship_cells(y: int, x: int, direction: Direction) -> list[tuple[int, int]]:
    dy, dx = direction.step
    return [(y + dy * i, x + dx * i) for i in range(SHIP_SIZE)]


def _try_fill(grid: Grid, cells: list[tuple[int, int]], ship_number: int) -> bool:
    free = all(
        0 <= cy < grid.rows and 0 <= cx < grid.cols and grid[cy, cx] == WATER
        for cy, cx in cells
    )
    if free:
        for cell in cells:
            grid[cell] = ship_number
    return free


def place_ship(grid: Grid, y: int, x: int, direction: Direction | int, ship_number: int) -> None:
    """Place ship ``ship_number`` with its stern at ``(y, x)``.

    Raises PlacementError if the direction is unknown, the ship leaves the
    board or it overlaps another ship; the grid is then left unchanged.
    """
    try:
        heading = Direction(direction)
    except ValueError:
        raise PlacementError(f"unknown direction {direction!r}") from None
    if not _try_fill(grid, _ship_cells(y, x, heading), ship_number):
        raise PlacementError(
            f"ship {ship_number} does not fit at ({y}, {x}) heading {heading.name}"
        )


def place_random_vertical(grid: Grid, ship_number: int, rng: _Rng | None = None) -> bool:
    """Try once to place a ship upwards from a random cell; return whether it fit."""
    source = random if rng is None else rng
    x = source.randrange(grid.cols)
    y = source.randrange(grid.rows)
    return _try_fill(grid, _ship_cells(y, x, Direction.UP), ship_number)


def place_random_horizontal(grid: Grid, ship_number: int, rng: _Rng | None = None) -> bool:
    """Try once to place a ship rightwards from a random cell; return whether it fit."""
    source = random if rng is None else rng
    x = source.randrange(grid.cols)
    y = source.randrange(grid.rows)
    return _try_fill(grid, _ship_cells(y, x, Direction.RIGHT), ship_number)


def place_random_ships(grid: Grid, count: int, first_number: int, rng: _Rng | None = None) -> int:
    """Place up to ``count`` ships at random, numbered from ``first_number``.

    At most ``rows * cols`` attempts are made. Returns how many were placed.
    """
    source = random if rng is None else rng
    placed = 0
    for _ in range(grid.rows * grid.cols):
        if placed == count:
            break
        place = place_random_vertical if source.randrange(2) == 0 else place_random_horizontal
        if place(grid, first_number + placed, source):
            placed += 1
    return placed


def count_unhit_parts(grid: Grid, ship_count: int) -> int:
    """Number of ship parts not yet hit."""
    return sum(1 for row in grid for value in row if 0 < value <= ship_count)


def fire(grid: Grid, y: int, x: int, ship_count: int) -> ShotResult:
    """Fire at ``(y, x)`` and record the outcome on the grid."""
    value = grid[y, x]
    if 0 < value <= ship_count:
        grid[y, x] = -value
        return ShotResult.HIT
    if value == WATER:
        grid[y, x] = MISS
        return ShotResult.MISS
    return ShotResult.REPEATED


def mark_sunk_ships(grid: Grid, ship_count: int) -> list[int]:
    """Mark every fully hit ship as sunk; return the numbers of those ships."""
    sunk = []
    for number in range(1, ship_count + 1):
        hits = sum(1 for row in grid for value in row if value == -number)
        if hits == SHIP_SIZE:
            sink_ship(grid, number)
            sunk.append(number)
    return sunk


def sink_ship(grid: Grid, ship_number: int) -> None:
    """Turn every hit part of ship ``ship_number`` into a sunk part."""
    for y, row in enumerate(grid):
        for x, value in enumerate(row):
            if value == -ship_number:
                grid[y, x] = SUNK