"""Game constants, overridable and serializable for reproducible runs."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from grid_snake.food import FOOD_COLOR
from grid_snake.geometry import Color
from grid_snake.grid import Cell, Grid
from grid_snake.snake import BODY_COLOR, HEAD_COLOR, Heading

logger = logging.getLogger(__name__)

_CELL_FIELDS = ("snake_start", "food_start")
_COLOR_FIELDS = ("clear_color", "food_color", "head_color", "body_color")


@dataclass(frozen=True)
class GameConfig:
    """Full game configuration.

    Supports JSON serialization so a game can be replayed with ``--seed``.
    """

    # Grid
    columns: int = 20
    rows: int = 20
    block_size: int = 40

    # Timing (milliseconds / frames per second)
    fps: int = 60
    move_interval_ms: int = 1000 // 25

    # Start state
    snake_start: Cell = Cell(0, 0)
    snake_heading: str = "right"
    snake_length: int = 7
    food_start: Cell = Cell(4, 4)

    # Food placement
    food_max_attempts: int = 1000

    # Colors (RGBA)
    clear_color: Color = (0, 0, 0, 0)
    food_color: Color = FOOD_COLOR
    head_color: Color = HEAD_COLOR
    body_color: Color = BODY_COLOR

    def __post_init__(self) -> None:
        if self.columns < 1 or self.rows < 1:
            raise ValueError("columns and rows must each be at least 1.")
        if self.block_size < 1:
            raise ValueError("block_size must be at least 1.")
        if self.fps < 1:
            raise ValueError("fps must be at least 1.")
        if self.move_interval_ms < 0:
            raise ValueError("move_interval_ms must not be negative.")
        if self.food_max_attempts < 0:
            raise ValueError("food_max_attempts must not be negative.")
        if self.snake_length < 0:
            raise ValueError("snake_length must not be negative.")

        heading = self.heading
        for name in _CELL_FIELDS:
            column, row = getattr(self, name)
            if not (0 <= column < self.columns and 0 <= row < self.rows):
                raise ValueError(f"{name} {(column, row)} is outside the grid.")

        axis = self.columns if heading in (Heading.LEFT, Heading.RIGHT) else self.rows
        if self.snake_length >= axis:
            raise ValueError(
                "snake_length does not fit the grid along the start heading; "
                "increase grid size or reduce snake_length."
            )

        grid = Grid(columns=self.columns, rows=self.rows)
        dc, dr = heading.value
        head_column, head_row = self.snake_start
        occupied = {
            grid.wrap(head_column - dc * i, head_row - dr * i)
            for i in range(self.snake_length + 1)
        }
        if Cell(*self.food_start) in occupied:
            raise ValueError("food_start overlaps the starting snake.")

    @property
    def heading(self) -> Heading:
        try:
            return Heading[self.snake_heading.upper()]
        except KeyError:
            raise ValueError(
                f"Unknown snake_heading {self.snake_heading!r}."
            ) from None

    @property
    def window_size(self) -> tuple[int, int]:
        """Window size in pixels."""
        return self.block_size * self.columns, self.block_size * self.rows

    def replace(self, **overrides) -> GameConfig:
        """Return a copy with *overrides* applied and validated."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data.update(overrides)
        return type(self).from_dict(data)

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        data = dict(raw)
        unknown = set(data) - {f.name for f in fields(cls)}
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        for name in _CELL_FIELDS:
            if name in data:
                data[name] = Cell(*data[name])
        for name in _COLOR_FIELDS:
            if name in data:
                data[name] = tuple(data[name])
        return cls(**data)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))
