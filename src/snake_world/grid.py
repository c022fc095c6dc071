"""Flattened square grid with toroidal wraparound."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from snake_world.snake import Direction

# A cell is a row-major index into the width × width grid.
Cell = int


class CellType(enum.IntEnum):
    """Integer codes used in board snapshots."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2
    HEAD = 3


class Grid:
    """Square grid addressed by flat cell indices.

    ``index = row * width + col``. Moving off any edge re-enters on the
    opposite edge, so every neighbour lies inside the grid.
    """

    def __init__(self, width: int) -> None:
        if width < 2:
            raise ValueError("Grid width must be at least 2.")
        self.width = width
        self.size = width * width

    def contains(self, cell: Cell) -> bool:
        """Check whether a cell index lies within the grid."""
        return 0 <= cell < self.size

    def row_col(self, cell: Cell) -> tuple[int, int]:
        return divmod(cell, self.width)

    def index(self, row: int, col: int) -> Cell:
        return row * self.width + col

    def at_edge(self, cell: Cell, direction: Direction) -> bool:
        """Check whether moving in *direction* from *cell* crosses an edge."""
        row, col = self.row_col(cell)
        dr, dc = direction.value
        last = self.width - 1
        return (
            (dc == -1 and col == 0)
            or (dc == 1 and col == last)
            or (dr == -1 and row == 0)
            or (dr == 1 and row == last)
        )

    def neighbour(self, cell: Cell, direction: Direction) -> Cell:
        """Return the adjacent cell in *direction*, wrapping around edges."""
        row, col = self.row_col(cell)
        dr, dc = direction.value
        return self.index((row + dr) % self.width, (col + dc) % self.width)

    def to_array(
        self, body: Iterable[Cell], food: Cell | None = None,
    ) -> np.ndarray:
        """Render the snake and food into a ``(width, width)`` int8 board."""
        flat = np.zeros(self.size, dtype=np.int8)
        cells = list(body)
        if cells:
            flat[cells] = CellType.SNAKE
            flat[cells[0]] = CellType.HEAD
        if food is not None:
            flat[food] = CellType.FOOD
        return flat.reshape(self.width, self.width)
