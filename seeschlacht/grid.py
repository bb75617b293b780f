"""A fixed-size two-dimensional grid of integers."""

from __future__ import annotations

from collections.abc import Iterator


class Grid:
    """A rectangular grid of integers addressed by ``(row, column)`` pairs."""

    def __init__(self, rows: int, cols: int, value: int = 0) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("grid dimensions must not be negative")
        self.rows = rows
        self.cols = cols
        self._cells = [[value] * cols for _ in range(rows)]

    def fill(self, value: int) -> None:
        """Set every cell to ``value``."""
        for row in self._cells:
            row[:] = [value] * self.cols

    def render(self) -> str:
        """Return the grid as text, tab-separated cells, rows split by a blank line."""
        return "".join(
            "".join(f"{value}\t" for value in row) + "\n\n" for row in self._cells
        )

    def _check(self, pos: tuple[int, int]) -> tuple[int, int]:
        y, x = pos
        if not (0 <= y < self.rows and 0 <= x < self.cols):
            raise IndexError(f"position {pos!r} outside {self.rows}x{self.cols} grid")
        return y, x

    def __getitem__(self, pos: tuple[int, int]) -> int:
        y, x = self._check(pos)
        return self._cells[y][x]

    def __setitem__(self, pos: tuple[int, int], value: int) -> None:
        y, x = self._check(pos)
        self._cells[y][x] = value

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        """Yield each row as a tuple, top to bottom."""
        for row in self._cells:
            yield tuple(row)

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols})"