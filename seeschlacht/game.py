"""Game flow: reading the rules, placing the fleets and alternating turns."""

from __future__ import annotations

import argparse
import subprocess
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from seeschlacht.board import (
    MAX_COLS,
    MAX_ROWS,
    MAX_SHIPS,
    MIN_COLS,
    MIN_ROWS,
    MIN_SHIPS,
    PlacementError,
    count_unhit_parts,
    fire,
    mark_sunk_ships,
    place_random_ships,
    place_ship,
)
from seeschlacht.numinput import read_int
from seeschlacht.player import Player
from seeschlacht.ui import choose_placement, choose_target


@dataclass(frozen=True)
class Rules:
    """Board size and number of ships, agreed on before the game starts."""

    rows: int
    cols: int
    ships: int

    def __post_init__(self) -> None:
        if not MIN_ROWS <= self.rows <= MAX_ROWS:
            raise ValueError(f"rows must lie between {MIN_ROWS} and {MAX_ROWS}")
        if not MIN_COLS <= self.cols <= MAX_COLS:
            raise ValueError(f"columns must lie between {MIN_COLS} and {MAX_COLS}")
        if not MIN_SHIPS <= self.ships <= MAX_SHIPS:
            raise ValueError(f"ships must lie between {MIN_SHIPS} and {MAX_SHIPS}")


def _ask(prompt: str, error: str, low: int, high: int, stream: TextIO, out: TextIO) -> int:
    """Prompt until a whole number between ``low`` and ``high`` is entered."""
    while True:
        out.write(prompt)
        out.flush()
        try:
            value = read_int(stream)
        except ValueError:
            out.write(error + "\n")
            continue
        if low <= value <= high:
            return value


def read_rules(stream: TextIO | None = None, out: TextIO | None = None) -> Rules:
    """Ask for the number of columns, rows and ships until each one is valid."""
    source = sys.stdin if stream is None else stream
    sink = sys.stdout if out is None else out
    cols = _ask(
        f"Spaltenanzahl zwischen {MIN_COLS} und {MAX_COLS} eingeben: ",
        "Fehler bei der Eingabe, der Spaltenanzahl.",
        MIN_COLS, MAX_COLS, source, sink,
    )
    rows = _ask(
        f"Zeilenanzahl zwischen {MIN_ROWS} und {MAX_ROWS} eingeben: ",
        "Fehler bei der Eingabe der Zeilenanzahl.",
        MIN_ROWS, MAX_ROWS, source, sink,
    )
    ships = _ask(
        f"Anzahl der Schiffe zwischen {MIN_SHIPS} und {MAX_SHIPS} eingeben: ",
        "Fehler bei der Eingabe der Zeilenanzahl.",
        MIN_SHIPS, MAX_SHIPS, source, sink,
    )
    return Rules(rows=rows, cols=cols, ships=ships)


def read_coordinates(
    rows: int, cols: int, stream: TextIO | None = None, out: TextIO | None = None
) -> tuple[int, int]:
    """Ask for 1-based X and Y coordinates; return them zero-based as ``(x, y)``."""
    source = sys.stdin if stream is None else stream
    sink = sys.stdout if out is None else out
    x = _ask(
        "X-Koordinate eingeben: ",
        "Fehler bei der Eingabe, erneut eine X-Koordinate eingeben.",
        1, cols, source, sink,
    )
    sink.write("\n")
    y = _ask(
        "Y-Koordinate eingeben: ",
        "Fehler bei der Eingabe, erneut eine Y-Koordinate eingeben.",
        1, rows, source, sink,
    )
    return x - 1, y - 1


def place_ships(player: Player) -> None:
    """Let the opponent place every ship on the board ``player`` fires at.

    A ship that does not fit is asked for again. Raises PlacementError if a
    randomly placed ship finds no room.
    """
    y = x = 0
    number = 1
    while number <= player.ship_count:
        choice = choose_placement(player, number, y, x)
        y, x = choice.y, choice.x
        if choice.direction is None:
            if place_random_ships(player.board, 1, number) != 1:
                raise PlacementError(
                    f"Es konnte nicht alle {player.ship_count} Schiffe platziert werden."
                )
        else:
            try:
                place_ship(player.board, y, x, choice.direction, number)
            except PlacementError:
                continue
        number += 1


def player_turn(player: Player) -> int:
    """Let ``player`` fire one shot; return how many ship parts are still unhit."""
    y, x = choose_target(player)
    fire(player.board, y, x, player.ship_count)
    mark_sunk_ships(player.board, player.ship_count)
    remaining = count_unhit_parts(player.board, player.ship_count)
    player.attempts += 1
    player.last_x = x
    player.last_y = y
    return remaining


def _clear_screen() -> None:
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


def play() -> Player:
    """Run a whole game on the console and return the winning player."""
    rules = read_rules()
    _clear_screen()
    first = Player.create(1, rules.rows, rules.cols, rules.ships)
    second = Player.create(2, rules.rows, rules.cols, rules.ships)
    place_ships(first)
    place_ships(second)
    while True:
        for player in (first, second):
            if player_turn(player) == 0:
                print(f"Spieler {player.number} hat nach {player.attempts} Versuchen gewonnen.")
                return player


def main(argv: Sequence[str] | None = None) -> int:
    """Start a game of battleship for two players."""
    parser = argparse.ArgumentParser(
        prog="seeschlacht", description="Schiffe versenken fuer zwei Spieler."
    )
    parser.parse_args(argv)
    try:
        play()
    except PlacementError as exc:
        print(exc)
        return 1
    except EOFError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())