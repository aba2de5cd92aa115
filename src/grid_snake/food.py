"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from grid_snake.geometry import Color, DrawRequest, Tag
from grid_snake.grid import Cell

if TYPE_CHECKING:
    from grid_snake.geometry import Collidable
    from grid_snake.grid import Grid

logger = logging.getLogger(__name__)

FOOD_COLOR: Color = (255, 0, 0, 0)


class GridFullError(RuntimeError):
    """Raised when no cell is left to place food on."""


class Food:
    """A single food cell.

    Placement draws from a NumPy RNG so seeded games are reproducible.
    Random sampling is bounded by *max_attempts*; after that the cell is
    drawn from the explicit set of free cells.
    """

    def __init__(
        self,
        grid: Grid,
        location: Cell = Cell(4, 4),
        rng: np.random.Generator | None = None,
        max_attempts: int = 1000,
        color: Color = FOOD_COLOR,
    ) -> None:
        if max_attempts < 0:
            raise ValueError("max_attempts must not be negative.")
        self.grid = grid
        self.location = location
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts
        self.color = color

    @property
    def tag(self) -> Tag:
        return Tag.FOOD

    def geometry(self) -> list[Cell]:
        return [self.location]

    def draw_requests(self) -> list[DrawRequest]:
        return [DrawRequest(self.location, self.color)]

    def relocate_avoiding(self, obstacle: Collidable) -> Cell:
        """Move to a random cell not occupied by *obstacle*.

        Returns the new location. Raises :class:`GridFullError` if the
        obstacle covers the whole grid.
        """
        occupied = set(obstacle.geometry())
        for attempt in range(1, self.max_attempts + 1):
            cell = self.grid.random_cell(self.rng)
            if cell not in occupied:
                self.location = cell
                logger.debug(
                    "Food placed at %s after %d attempt(s).", cell, attempt,
                )
                return cell

        free = self.grid.free_cells(occupied)
        if not free:
            raise GridFullError("No free cell left for food.")
        self.location = free[int(self.rng.integers(len(free)))]
        logger.info(
            "Food placed at %s from %d free cell(s) after %d misses.",
            self.location, len(free), self.max_attempts,
        )
        return self.location

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {"location": list(self.location)}
