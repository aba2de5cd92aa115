"""Cell-set collision checks between game objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from grid_snake.geometry import Collidable
    from grid_snake.grid import Cell


def collides_pairwise(first: Collidable, second: Collidable) -> bool:
    """Return True if any cell of *first* equals any cell of *second*."""
    return not set(first.geometry()).isdisjoint(second.geometry())


def collides_self(collidable: Collidable) -> bool:
    """Return True if two distinct positions of the geometry hold one cell."""
    seen: set[Cell] = set()
    for cell in collidable.geometry():
        if cell in seen:
            return True
        seen.add(cell)
    return False
