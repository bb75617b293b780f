# seeschlacht

A game of battleship for two players sharing one terminal. The screens use
`curses`, so a POSIX terminal is needed. The in-game texts are in German.

## Installing

```
pip install .
```

## Playing

Start the game with:

```
seeschlacht
```

The terminal is cleared, and you are first asked for the size of the board and
the number of ships. Each value is asked for again until it is a whole number
in range:

- columns: 10 to 26
- rows: 10 to 20
- ships: 1 to 9

Every ship is five cells long.

### Placing ships

Each player places the ships on the board that the other player will shoot at.
While placing, the ships already on the board are shown by their numbers.

- Move the cursor with the arrow keys.
- Press ENTER to fix the stern of a ship. Then choose the direction it points
  in with an arrow key.
- Press `z` to put the current ship in a random spot.

A ship that runs off the board or crosses another ship is not placed, and you
are asked for that ship again. If no room is found for a randomly placed ship,
the game prints a message and exits with status 1.

### Shooting

The players take turns. On your turn you move the crosshair with the arrow keys
and fire with ENTER. Pressing `c` shows or hides the whole board.

The board uses these symbols:

| Symbol  | Meaning                                    |
|---------|--------------------------------------------|
| `~`     | water, or a ship part not yet hit          |
| `O`     | a miss                                     |
| `T`     | a hit                                      |
| `V`     | part of a sunk ship                        |
| `1`–`9` | ship number, shown after `c`               |

A ship is sunk once all five of its cells have been hit. The first player to
hit every ship part of the other side wins, and the game prints how many shots
it took.

## Using it as a library

The game logic lives in `seeschlacht.board` and needs no terminal. A
`seeschlacht.grid.Grid` is indexed with `(row, column)` pairs; `render()`
returns it as tab-separated text.

```python
import random

from seeschlacht.grid import Grid
from seeschlacht.board import (
    Direction, place_ship, place_random_ships, fire, mark_sunk_ships, count_unhit_parts,
)

grid = Grid(10, 10, 0)
place_ship(grid, 4, 2, Direction.RIGHT, 1)
place_random_ships(grid, 2, 2, random.Random(7))

result = fire(grid, 4, 2, 3)
mark_sunk_ships(grid, 3)
print(result, count_unhit_parts(grid, 3))
print(grid.render())
```

`place_ship` raises `PlacementError` when a ship does not fit; `fire` returns a
`ShotResult` (`HIT`, `MISS` or `REPEATED`). `seeschlacht.numinput.parse_int`
and `read_int` read whole numbers typed on the console.

## What it does not do

There is no computer opponent and no play over a network: both players sit at
the same terminal. A game cannot be saved or resumed.

## Running the tests

```
pip install .[test]
pytest
```