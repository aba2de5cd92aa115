"""Snake representation and movement logic."""

from __future__ import annotations

import enum

from grid_snake.geometry import Color, DrawRequest, Tag
from grid_snake.grid import Cell, Grid

HEAD_COLOR: Color = (125, 0, 175, 0)
BODY_COLOR: Color = (0, 0, 255, 0)


class Heading(enum.Enum):
    """Cardinal movement directions with (column_delta, row_delta) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Heading:
        dc, dr = self.value
        return Heading((-dc, -dr))


class Snake:
    """A snake made of a head cell and a trailing body.

    ``body[0]`` is the oldest segment (the tail) and ``body[-1]`` the
    newest (the neck). The body trails the head by exactly one historical
    position per segment.
    """

    def __init__(
        self,
        grid: Grid,
        start: Cell = Cell(0, 0),
        heading: Heading = Heading.RIGHT,
        length: int = 7,
        head_color: Color = HEAD_COLOR,
        body_color: Color = BODY_COLOR,
    ) -> None:
        if length < 0:
            raise ValueError("Snake length must not be negative.")
        self.grid = grid
        self.head = grid.wrap(*start)
        self.heading = heading
        self.head_color = head_color
        self.body_color = body_color
        self.grow_pending = False

        dc, dr = heading.value
        self.body: list[Cell] = [
            grid.wrap(self.head.column - dc * i, self.head.row - dr * i)
            for i in range(length, 0, -1)
        ]

    @property
    def tag(self) -> Tag:
        return Tag.SNAKE

    def try_set_heading(self, requested: Heading) -> None:
        """Change heading, silently ignoring 180° reversals."""
        if requested is not self.heading.opposite:
            self.heading = requested

    def prepare_growth(self) -> None:
        """Make the next :meth:`advance` add a segment instead of moving the tail.

        Repeated calls before that advance still add a single segment.
        """
        self.grow_pending = True

    def advance(self) -> None:
        """Move the snake one cell along its heading."""
        self.body.append(self.head)
        dc, dr = self.heading.value
        column, row = self.head.column + dc, self.head.row + dr
        if self.grow_pending:
            self.grow_pending = False
        else:
            del self.body[0]
        self.head = self.grid.wrap(column, row)

    def geometry(self) -> list[Cell]:
        """Return the occupied cells, head first."""
        return [self.head, *self.body]

    def draw_requests(self) -> list[DrawRequest]:
        requests = [DrawRequest(self.head, self.head_color)]
        requests.extend(DrawRequest(cell, self.body_color) for cell in self.body)
        return requests

    def __len__(self) -> int:
        return len(self.body) + 1

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "head": list(self.head),
            "body": [list(cell) for cell in self.body],
            "heading": self.heading.name.lower(),
            "grow_pending": self.grow_pending,
        }
