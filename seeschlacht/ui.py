"""Curses screens for aiming shots and placing ships.

Board cells are drawn two screen columns apart; the top-left corner of the
frame sits at ``(BOARD_Y_OFFSET, BOARD_X_OFFSET)``.
"""

from __future__ import annotations

import curses
import time
from dataclasses import dataclass
from typing import Any

from seeschlacht.board import MISS, SUNK, Direction
from seeschlacht.grid import Grid
from seeschlacht.player import Player

BOARD_X_OFFSET = 4
BOARD_Y_OFFSET = 8

HIDDEN = 1
REVEALED = 2

_ENTER = ord("\n")
_NO_KEY = -1
_POLL_DELAY = 0.01

_ARROWS = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
}


@dataclass(frozen=True)
class PlacementChoice:
    """Where and how to place a ship; no direction means place it at random."""

    y: int
    x: int
    direction: Direction | None = None

    @property
    def is_random(self) -> bool:
        return self.direction is None


def _acs(name: str, fallback: str) -> int:
    # Line-drawing characters exist in the curses module only after initscr.
    return getattr(curses, name, ord(fallback))


def _put(screen: Any, y: int, x: int, text: str) -> None:
    try:
        screen.addstr(y, x, text)
    except curses.error:
        pass


def _vline(screen: Any, y: int, x: int, char: int, length: int) -> None:
    try:
        screen.vline(y, x, char, length)
    except curses.error:
        pass


def _hline(screen: Any, y: int, x: int, char: int, length: int) -> None:
    try:
        screen.hline(y, x, char, length)
    except curses.error:
        pass


def _corner(screen: Any, y: int, x: int, char: int) -> None:
    try:
        screen.addch(y, x, char)
    except curses.error:
        pass


def _player_attr(player_number: int) -> int:
    pair = 1 if player_number == 1 else 2
    try:
        return curses.color_pair(pair)
    except curses.error:
        return curses.A_NORMAL


def _to_screen(y: int, x: int) -> tuple[int, int]:
    return y + BOARD_Y_OFFSET + 1, x * 2 + BOARD_X_OFFSET + 2


def _to_board(screen_y: int, screen_x: int) -> tuple[int, int]:
    return screen_y - (BOARD_Y_OFFSET + 1), (screen_x - (BOARD_X_OFFSET + 1)) // 2


def _limits(grid: Grid) -> tuple[int, int, int, int]:
    y_min, x_min = _to_screen(0, 0)
    y_max, x_max = _to_screen(grid.rows - 1, grid.cols - 1)
    return y_min, y_max, x_min, x_max


def decode_cell(value: int, mode: int) -> str:
    """Character shown for a cell; in REVEALED mode ships show their number."""
    if value == SUNK:
        char = "V"
    elif MISS < value < 0:
        char = "T"
    elif value == MISS:
        char = "O"
    else:
        char = "~"
    if mode == REVEALED and value > 0:
        char = chr(value + ord("0"))
    return char


def draw_indices(screen: Any, rows: int, cols: int, player_number: int) -> None:
    """Draw column letters, row numbers and the frame in the player's colour."""
    for col in range(cols):
        _put(screen, BOARD_Y_OFFSET - 1, col * 2 + BOARD_X_OFFSET + 2, chr(ord("a") + col))
    for row in range(rows):
        _put(screen, row + BOARD_Y_OFFSET + 1, BOARD_X_OFFSET - 2, str(row + 1))

    attr = _player_attr(player_number)
    screen.attron(attr)
    right = cols * 2 + BOARD_X_OFFSET + 2
    bottom = rows + BOARD_Y_OFFSET + 1
    vertical = _acs("ACS_VLINE", "|")
    horizontal = _acs("ACS_HLINE", "-")
    _vline(screen, BOARD_Y_OFFSET, BOARD_X_OFFSET, vertical, rows + 1)
    _vline(screen, BOARD_Y_OFFSET, right, vertical, rows + 1)
    _hline(screen, BOARD_Y_OFFSET, BOARD_X_OFFSET, horizontal, cols * 2 + 2)
    _hline(screen, bottom, BOARD_X_OFFSET, horizontal, cols * 2 + 2)
    _corner(screen, BOARD_Y_OFFSET, BOARD_X_OFFSET, _acs("ACS_ULCORNER", "+"))
    _corner(screen, BOARD_Y_OFFSET, right, _acs("ACS_URCORNER", "+"))
    _corner(screen, bottom, right, _acs("ACS_LRCORNER", "+"))
    _corner(screen, bottom, BOARD_X_OFFSET, _acs("ACS_LLCORNER", "+"))
    screen.attroff(attr)


def draw_crosshair(screen: Any, y: int, x: int) -> None:
    """Mark the selected screen position."""
    _put(screen, y, x, "X")


def draw_board_contents(screen: Any, grid: Grid, mode: int) -> None:
    """Draw every cell of ``grid`` decoded for ``mode``."""
    for row, values in enumerate(grid):
        for col, value in enumerate(values):
            screen_y, screen_x = _to_screen(row, col)
            _put(screen, screen_y, screen_x, decode_cell(value, mode))


def draw_board(screen: Any, grid: Grid, mode: int, player_number: int) -> None:
    """Draw indices, frame and contents of ``grid``."""
    draw_indices(screen, grid.rows, grid.cols, player_number)
    draw_board_contents(screen, grid, mode)
    draw_indices(screen, grid.rows, grid.cols, player_number)


def draw_direction_arrows(
    screen: Any, y: int, x: int, y_max: int, x_max: int, y_min: int, x_min: int
) -> None:
    """Draw arrows around ``(y, x)`` in every direction that stays on the board."""
    if x < x_max:
        _vline(screen, y, x + 2, _acs("ACS_RARROW", ">"), 1)
    if x > x_min:
        _vline(screen, y, x - 2, _acs("ACS_LARROW", "<"), 1)
    if y < y_max:
        _vline(screen, y + 1, x, _acs("ACS_DARROW", "v"), 1)
    if y > y_min:
        _vline(screen, y - 1, x, _acs("ACS_UARROW", "^"), 1)


def _move(key: int, y: int, x: int, limits: tuple[int, int, int, int]) -> tuple[int, int]:
    y_min, y_max, x_min, x_max = limits
    if key == curses.KEY_UP:
        y = max(y_min, y - 1)
    elif key == curses.KEY_DOWN:
        y = min(y_max, y + 1)
    elif key == curses.KEY_LEFT:
        x = max(x_min, x - 2)
    elif key == curses.KEY_RIGHT:
        x = min(x_max, x + 2)
    return y, x


def _target_loop(screen: Any, player: Player) -> tuple[int, int]:
    grid = player.board
    limits = _limits(grid)
    y, x = _to_screen(player.last_y, player.last_x)
    mode = HIDDEN
    while True:
        screen.erase()
        draw_board(screen, grid, mode, player.number)
        draw_crosshair(screen, y, x)
        _put(screen, 1, 1, "Fadenkreuz mit Pfeiltasten bewegen, Tipp abgeben mit ENTER.")
        _put(screen, 2, 1, "Mit c kann das gesamte Spielfeld offengelegt werden.")
        _put(
            screen, 4, 1,
            f"Spieler {player.number} ist am Zug, dies ist der {player.attempts + 1} Tipp.",
        )
        screen.refresh()

        key = screen.getch()
        if key == _NO_KEY:
            time.sleep(_POLL_DELAY)
        elif key in _ARROWS:
            y, x = _move(key, y, x, limits)
        elif key == ord("c"):
            mode = REVEALED if mode == HIDDEN else HIDDEN
        elif key == _ENTER:
            return _to_board(y, x)


def _placement_loop(
    screen: Any, player: Player, ship_number: int, board_y: int, board_x: int
) -> PlacementChoice:
    grid = player.board
    limits = _limits(grid)
    y_min, y_max, x_min, x_max = limits
    y, x = _to_screen(board_y, board_x)
    placer = 2 if player.number == 1 else 1
    while True:
        screen.erase()
        draw_indices(screen, grid.rows, grid.cols, player.number)
        draw_board_contents(screen, grid, REVEALED)
        draw_crosshair(screen, y, x)
        _put(screen, 1, 1, "Cursor mit Pfeiltasten bewegen.")
        _put(screen, 2, 1, "Ein Schiff zufaellig platzieren mit 'z'")
        _put(
            screen, 3, 1,
            "Platzieren beginnen mit ENTER. Danach die Ausrichtung durch Pfeiltasten bestimmen.",
        )
        _put(
            screen, 5, 1,
            f"Spieler {placer} platziert die eigenen Schiffe, "
            f"dies ist das {ship_number} Schiff von {player.ship_count}.",
        )
        screen.refresh()

        key = screen.getch()
        if key == _NO_KEY:
            time.sleep(_POLL_DELAY)
        elif key in _ARROWS:
            y, x = _move(key, y, x, limits)
        elif key == ord("z"):
            return PlacementChoice(board_y, board_x)
        elif key == _ENTER:
            board_y, board_x = _to_board(y, x)
            while True:
                draw_direction_arrows(screen, y, x, y_max, x_max, y_min, x_min)
                heading = screen.getch()
                if heading == _NO_KEY:
                    time.sleep(_POLL_DELAY)
                elif heading in _ARROWS:
                    return PlacementChoice(board_y, board_x, _ARROWS[heading])


def _prepare(screen: Any) -> Any:
    screen.nodelay(True)
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    try:
        if curses.has_colors():
            curses.init_pair(1, curses.COLOR_BLACK, curses.COLOR_RED)
            curses.init_pair(2, curses.COLOR_BLACK, curses.COLOR_GREEN)
    except curses.error:
        pass
    return screen


def choose_target(player: Player) -> tuple[int, int]:
    """Let the player aim at the opponent's board; return the chosen ``(y, x)``."""
    return curses.wrapper(lambda screen: _target_loop(_prepare(screen), player))


def choose_placement(player: Player, ship_number: int, y: int, x: int) -> PlacementChoice:
    """Let the opponent pick a stern position and heading for ship ``ship_number``.

    The cursor starts at board cell ``(y, x)``. A random placement keeps that
    position and has no direction.
    """
    return curses.wrapper(
        lambda screen: _placement_loop(_prepare(screen), player, ship_number, y, x)
    )