"""Toroidal grid geometry for the snake game."""

from __future__ import annotations

from typing import Iterable, NamedTuple

import numpy as np


class Cell(NamedTuple):
    """One discrete grid position, 0-based."""

    column: int
    row: int


def wrap(coordinate: int, modulus: int) -> int:
    """Return the Euclidean remainder of *coordinate* modulo *modulus*.

    Negative coordinates map to ``modulus - 1``, ``modulus - 2``, ... so a
    step off the top or left edge reappears on the opposite edge.
    """
    if modulus <= 0:
        raise ValueError("modulus must be positive.")
    return coordinate % modulus


class Grid:
    """Fixed-size grid whose edges wrap onto the opposite edge.

    Coordinates use (column, row) ordering; the NumPy occupancy mask used
    by :meth:`free_cells` is indexed (row, column).
    """

    def __init__(self, columns: int = 20, rows: int = 20) -> None:
        if columns < 1 or rows < 1:
            raise ValueError("Grid dimensions must be at least 1×1.")
        self.columns = columns
        self.rows = rows

    @property
    def size(self) -> int:
        return self.columns * self.rows

    def in_bounds(self, cell: Cell) -> bool:
        """Check whether a cell lies within the grid."""
        return 0 <= cell.column < self.columns and 0 <= cell.row < self.rows

    def wrap(self, column: int, row: int) -> Cell:
        """Wrap both axes independently around the grid edges."""
        return Cell(wrap(column, self.columns), wrap(row, self.rows))

    def random_cell(self, rng: np.random.Generator) -> Cell:
        """Sample a uniformly random cell."""
        return Cell(
            int(rng.integers(self.columns)), int(rng.integers(self.rows)),
        )

    def free_cells(self, occupied: Iterable[Cell]) -> list[Cell]:
        """Return every cell not in *occupied*, in row-major order."""
        mask = np.ones((self.rows, self.columns), dtype=bool)
        for column, row in occupied:
            mask[row, column] = False
        rows, cols = np.nonzero(mask)
        return [
            Cell(c, r)
            for r, c in zip(rows.tolist(), cols.tolist(), strict=True)
        ]

    def to_dict(self) -> dict:
        """Serialize grid dimensions to a dictionary."""
        return {"columns": self.columns, "rows": self.rows}
