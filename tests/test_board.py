import random

import pytest

from seeschlacht.board import (
    MISS,
    SHIP_SIZE,
    SUNK,
    Direction,
    PlacementError,
    ShotResult,
    count_unhit_parts,
    fire,
    mark_sunk_ships,
    place_random_horizontal,
    place_random_ships,
    place_random_vertical,
    place_ship,
    sink_ship,
)
from seeschlacht.grid import Grid


class _FixedRng:
    """Returns the given values in turn from randrange."""

    def __init__(self, values):
        self._values = iter(values)

    def randrange(self, stop):
        return next(self._values) % stop


def _cells_of(grid, value):
    return [(y, x) for y, row in enumerate(grid) for x, v in enumerate(row) if v == value]


def test_place_ship_down():
    grid = Grid(10, 10)
    place_ship(grid, 0, 0, Direction.DOWN, 1)
    assert _cells_of(grid, 1) == [(y, 0) for y in range(SHIP_SIZE)]
    assert count_unhit_parts(grid, 1) == SHIP_SIZE


def test_place_ship_left_accepts_plain_int():
    grid = Grid(10, 10)
    place_ship(grid, 3, 9, 3, 2)
    assert _cells_of(grid, 2) == [(3, x) for x in range(9 - SHIP_SIZE + 1, 10)]


@pytest.mark.parametrize(
    "y, x, direction",
    [(2, 0, Direction.UP), (7, 0, Direction.DOWN), (0, 3, Direction.LEFT), (0, 6, Direction.RIGHT)],
)
def test_place_ship_off_board_raises(y, x, direction):
    grid = Grid(10, 10)
    with pytest.raises(PlacementError):
        place_ship(grid, y, x, direction, 1)
    assert count_unhit_parts(grid, 9) == 0


def test_place_ship_collision_leaves_grid_unchanged():
    grid = Grid(10, 10)
    place_ship(grid, 2, 0, Direction.RIGHT, 1)
    before = list(grid)
    with pytest.raises(PlacementError):
        place_ship(grid, 0, 2, Direction.DOWN, 2)
    assert list(grid) == before


def test_place_ship_unknown_direction():
    grid = Grid(10, 10)
    with pytest.raises(PlacementError):
        place_ship(grid, 5, 5, 7, 1)


def test_fire_hit_miss_repeat():
    grid = Grid(10, 10)
    place_ship(grid, 0, 0, Direction.RIGHT, 1)
    assert fire(grid, 0, 0, 1) is ShotResult.HIT
    assert grid[0, 0] == -1
    assert fire(grid, 5, 5, 1) is ShotResult.MISS
    assert grid[5, 5] == MISS
    assert fire(grid, 0, 0, 1) is ShotResult.REPEATED
    assert fire(grid, 5, 5, 1) is ShotResult.REPEATED
    assert count_unhit_parts(grid, 1) == SHIP_SIZE - 1


def test_sinking_a_ship():
    grid = Grid(10, 10)
    place_ship(grid, 9, 4, Direction.UP, 1)
    place_ship(grid, 0, 0, Direction.RIGHT, 2)
    for y in range(5, 10):
        fire(grid, y, 4, 2)
    assert mark_sunk_ships(grid, 2) == [1]
    assert _cells_of(grid, SUNK) == [(y, 4) for y in range(5, 10)]
    assert count_unhit_parts(grid, 2) == SHIP_SIZE


def test_partly_hit_ship_not_sunk():
    grid = Grid(10, 10)
    place_ship(grid, 0, 0, Direction.DOWN, 1)
    fire(grid, 0, 0, 1)
    assert mark_sunk_ships(grid, 1) == []
    assert _cells_of(grid, SUNK) == []


def test_sink_ship_only_touches_hit_parts():
    grid = Grid(10, 10)
    place_ship(grid, 0, 0, Direction.RIGHT, 1)
    fire(grid, 0, 1, 1)
    sink_ship(grid, 1)
    assert grid[0, 1] == SUNK
    assert grid[0, 0] == 1


def test_random_vertical_with_fixed_rng():
    grid = Grid(10, 10)
    assert place_random_vertical(grid, 3, _FixedRng([3, 6])) is True
    assert _cells_of(grid, 3) == [(y, 3) for y in range(6 - SHIP_SIZE + 1, 7)]


def test_random_vertical_too_close_to_top():
    grid = Grid(10, 10)
    assert place_random_vertical(grid, 3, _FixedRng([3, 1])) is False
    assert _cells_of(grid, 3) == []


def test_random_horizontal_with_fixed_rng():
    grid = Grid(10, 10)
    assert place_random_horizontal(grid, 4, _FixedRng([2, 7])) is True
    assert _cells_of(grid, 4) == [(7, x) for x in range(2, 2 + SHIP_SIZE)]


def test_random_horizontal_too_close_to_edge():
    grid = Grid(10, 10)
    assert place_random_horizontal(grid, 4, _FixedRng([8, 0])) is False
    assert _cells_of(grid, 4) == []


def test_place_random_ships_invariants():
    grid = Grid(10, 10)
    placed = place_random_ships(grid, 3, 1, random.Random(1))
    assert placed == 3
    assert count_unhit_parts(grid, 3) == 3 * SHIP_SIZE
    for number in range(1, 4):
        cells = _cells_of(grid, number)
        assert len(cells) == SHIP_SIZE
        ys = {y for y, _ in cells}
        xs = {x for _, x in cells}
        assert len(ys) == 1 or len(xs) == 1


def test_place_random_ships_numbering_starts_at_first_number():
    grid = Grid(10, 10)
    placed = place_random_ships(grid, 1, 5, random.Random(7))
    assert placed == 1
    assert len(_cells_of(grid, 5)) == SHIP_SIZE


def test_place_random_ships_on_full_board():
    grid = Grid(10, 10, 9)
    assert place_random_ships(grid, 2, 1, random.Random(0)) == 0
    assert all(value == 9 for row in grid for value in row)