"""Shared fixtures."""

from dataclasses import dataclass, field

import pytest

from grid_snake.geometry import Tag
from grid_snake.grid import Cell, Grid


@dataclass
class StaticObstacle:
    """Fixed set of cells standing in for a snake."""

    cells: list[Cell] = field(default_factory=list)
    tag: Tag = Tag.SNAKE

    def geometry(self) -> list[Cell]:
        return list(self.cells)


@pytest.fixture
def grid() -> Grid:
    return Grid(columns=20, rows=20)


@pytest.fixture
def obstacle_factory():
    return StaticObstacle
