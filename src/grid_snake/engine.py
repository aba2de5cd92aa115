"""Frame-based game engine composing snake, food, and collision logic."""

from __future__ import annotations

import enum
import logging
from typing import Iterable

import numpy as np

from grid_snake.collision import collides_pairwise, collides_self
from grid_snake.config import GameConfig
from grid_snake.food import Food, GridFullError
from grid_snake.geometry import DrawRequest
from grid_snake.grid import Grid
from grid_snake.snake import Heading, Snake

logger = logging.getLogger(__name__)


class GameOutcome(enum.Enum):
    """How a game ended."""

    QUIT = "quit"
    COLLIDED = "collided"
    GRID_FULL = "grid_full"


class MovementClock:
    """Accumulates frame time and fires once per movement interval.

    Movement runs on this clock rather than the frame rate, so the snake
    keeps a constant speed whatever the display refresh rate.
    """

    def __init__(self, interval_ms: int) -> None:
        self.interval_ms = interval_ms
        self.elapsed_ms = 0

    def tick(self, delta_ms: int) -> bool:
        """Return True if the snake should move this frame.

        Once the accumulated time exceeds the interval the clock resets to
        zero and the frame's delta is dropped.
        """
        if self.elapsed_ms > self.interval_ms:
            self.reset()
            return True
        self.elapsed_ms += delta_ms
        return False

    def reset(self) -> None:
        self.elapsed_ms = 0


class GameEngine:
    """Single-snake, frame-based game engine.

    The engine owns the snake, the food, and the movement clock. Each call
    to :meth:`update` runs one frame and returns ``None`` while the game
    continues, or the :class:`GameOutcome` that ended it.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.rng = np.random.default_rng(seed)
        self.grid = Grid(columns=self.config.columns, rows=self.config.rows)

        self.snake = Snake(
            self.grid,
            start=self.config.snake_start,
            heading=self.config.heading,
            length=self.config.snake_length,
            head_color=self.config.head_color,
            body_color=self.config.body_color,
        )
        self.food = Food(
            self.grid,
            location=self.config.food_start,
            rng=self.rng,
            max_attempts=self.config.food_max_attempts,
            color=self.config.food_color,
        )
        self.clock = MovementClock(self.config.move_interval_ms)

        self.score = 0
        self.frame = 0
        self.moves = 0
        self.outcome: GameOutcome | None = None

    @property
    def game_over(self) -> bool:
        return self.outcome is not None

    def handle_input(self, headings: Iterable[Heading]) -> None:
        """Apply heading requests in order; reversals are ignored."""
        for heading in headings:
            self.snake.try_set_heading(heading)

    def update(
        self,
        delta_ms: int,
        headings: Iterable[Heading] = (),
    ) -> GameOutcome | None:
        """Run one frame: input, collisions, then timed movement."""
        if self.outcome is not None:
            return self.outcome

        self.frame += 1
        self.handle_input(headings)

        outcome = self._resolve_collisions()
        if outcome is not None:
            return self._finish(outcome)

        if self.clock.tick(delta_ms):
            self.snake.advance()
            self.moves += 1
        return None

    def quit(self) -> GameOutcome:
        """End the game at the player's request."""
        if self.outcome is not None:
            return self.outcome
        return self._finish(GameOutcome.QUIT)

    def draw_requests(self) -> list[DrawRequest]:
        """Food first, then the snake head and body."""
        return [*self.food.draw_requests(), *self.snake.draw_requests()]

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "frame": self.frame,
            "moves": self.moves,
            "score": self.score,
            "game_over": self.game_over,
            "outcome": self.outcome.value if self.outcome else None,
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict(),
        }

    def _resolve_collisions(self) -> GameOutcome | None:
        if collides_self(self.snake):
            return GameOutcome.COLLIDED

        if collides_pairwise(self.snake, self.food):
            self.snake.prepare_growth()
            self.score += 1
            try:
                self.food.relocate_avoiding(self.snake)
            except GridFullError:
                return GameOutcome.GRID_FULL
        return None

    def _finish(self, outcome: GameOutcome) -> GameOutcome:
        self.outcome = outcome
        logger.info(
            "Game ended (%s) at frame %d with score %d.",
            outcome.value, self.frame, self.score,
        )
        return outcome
