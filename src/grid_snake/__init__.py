"""Grid Snake — core game engine."""

from grid_snake.collision import collides_pairwise, collides_self
from grid_snake.config import GameConfig
from grid_snake.engine import GameEngine, GameOutcome, MovementClock
from grid_snake.food import Food, GridFullError
from grid_snake.geometry import DrawRequest, Tag
from grid_snake.grid import Cell, Grid, wrap
from grid_snake.snake import Heading, Snake

__all__ = [
    "Cell",
    "DrawRequest",
    "Food",
    "GameConfig",
    "GameEngine",
    "GameOutcome",
    "Grid",
    "GridFullError",
    "Heading",
    "MovementClock",
    "Snake",
    "Tag",
    "collides_pairwise",
    "collides_self",
    "wrap",
]
