"""Capabilities shared by the two kinds of game object."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, NamedTuple, Protocol

if TYPE_CHECKING:
    from grid_snake.grid import Cell

# RGBA, each channel 0-255.
Color = tuple[int, int, int, int]


class Tag(enum.Enum):
    """Kind of game object."""

    SNAKE = "snake"
    FOOD = "food"


class DrawRequest(NamedTuple):
    """A cell to fill with a color on the next render pass."""

    cell: Cell
    color: Color


class Collidable(Protocol):
    """Anything occupying cells on the grid.

    Implemented by :class:`~grid_snake.snake.Snake` and
    :class:`~grid_snake.food.Food` only.
    """

    @property
    def tag(self) -> Tag: ...

    def geometry(self) -> list[Cell]: ...


class Drawable(Protocol):
    """Anything that projects itself into draw requests."""

    def draw_requests(self) -> list[DrawRequest]: ...
