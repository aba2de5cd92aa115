"""Tests for the Snake module."""

import pytest

from grid_snake.collision import collides_self
from grid_snake.geometry import Tag
from grid_snake.grid import Cell, Grid
from grid_snake.snake import BODY_COLOR, HEAD_COLOR, Heading, Snake


class TestHeading:
    def test_opposites(self):
        assert Heading.UP.opposite is Heading.DOWN
        assert Heading.DOWN.opposite is Heading.UP
        assert Heading.LEFT.opposite is Heading.RIGHT
        assert Heading.RIGHT.opposite is Heading.LEFT


class TestSnakeInit:
    def test_default_creation(self, grid):
        snake = Snake(grid)
        assert snake.head == Cell(0, 0)
        assert snake.heading is Heading.RIGHT
        assert len(snake.body) == 7
        assert not snake.grow_pending
        assert snake.tag is Tag.SNAKE

    def test_body_trails_behind_and_wraps(self, grid):
        snake = Snake(grid, length=3)
        assert snake.body == [Cell(17, 0), Cell(18, 0), Cell(19, 0)]

    def test_body_trails_up(self, grid):
        snake = Snake(grid, start=Cell(5, 5), heading=Heading.UP, length=2)
        assert snake.body == [Cell(5, 7), Cell(5, 6)]

    def test_fresh_snake_does_not_self_collide(self, grid):
        for heading in Heading:
            snake = Snake(grid, start=Cell(3, 3), heading=heading, length=7)
            assert not collides_self(snake)

    def test_negative_length(self, grid):
        with pytest.raises(ValueError, match="negative"):
            Snake(grid, length=-1)


class TestSnakeHeading:
    def test_set_valid_heading(self, grid):
        snake = Snake(grid)
        snake.try_set_heading(Heading.UP)
        assert snake.heading is Heading.UP

    def test_reversal_ignored_for_every_heading(self, grid):
        for heading in Heading:
            snake = Snake(grid, start=Cell(10, 10), heading=heading, length=3)
            snake.try_set_heading(heading.opposite)
            assert snake.heading is heading

    def test_same_heading_kept(self, grid):
        snake = Snake(grid)
        snake.try_set_heading(Heading.RIGHT)
        assert snake.heading is Heading.RIGHT


class TestSnakeMovement:
    def test_first_advance_from_start(self, grid):
        snake = Snake(grid, start=Cell(0, 0), heading=Heading.RIGHT, length=7)
        snake.advance()
        assert snake.head == Cell(1, 0)
        assert len(snake.body) == 7
        assert snake.body[-1] == Cell(0, 0)

    def test_advance_without_growth(self, grid):
        snake = Snake(grid, start=Cell(5, 5), length=3)
        tail = snake.body[0]
        snake.advance()
        assert len(snake.body) == 3
        assert tail not in snake.body
        assert not snake.grow_pending

    def test_advance_with_growth(self, grid):
        snake = Snake(grid, start=Cell(5, 5), length=3)
        snake.prepare_growth()
        snake.advance()
        assert len(snake.body) == 4
        assert not snake.grow_pending

    def test_growth_does_not_stack(self, grid):
        snake = Snake(grid, start=Cell(5, 5), length=3)
        snake.prepare_growth()
        snake.prepare_growth()
        snake.advance()
        assert len(snake.body) == 4
        snake.advance()
        assert len(snake.body) == 4

    def test_wraps_right_edge(self, grid):
        snake = Snake(grid, start=Cell(19, 4), heading=Heading.RIGHT, length=3)
        snake.advance()
        assert snake.head == Cell(0, 4)
        assert snake.body[-1] == Cell(19, 4)

    def test_wraps_top_edge(self, grid):
        snake = Snake(grid, start=Cell(4, 0), heading=Heading.UP, length=3)
        snake.advance()
        assert snake.head == Cell(4, 19)

    def test_turn_then_advance(self, grid):
        snake = Snake(grid, start=Cell(5, 5), length=3)
        snake.try_set_heading(Heading.DOWN)
        snake.advance()
        assert snake.head == Cell(5, 6)

    def test_running_into_itself(self):
        grid = Grid(columns=10, rows=10)
        snake = Snake(grid, start=Cell(5, 5), length=4)
        for heading in (Heading.DOWN, Heading.LEFT, Heading.UP):
            snake.try_set_heading(heading)
            snake.advance()
        assert collides_self(snake)


class TestSnakeGeometry:
    def test_head_first(self, grid):
        snake = Snake(grid, start=Cell(5, 5), length=2)
        assert snake.geometry() == [Cell(5, 5), Cell(3, 5), Cell(4, 5)]
        assert len(snake) == 3

    def test_draw_requests(self, grid):
        snake = Snake(grid, start=Cell(5, 5), length=2)
        requests = snake.draw_requests()
        assert requests[0] == (Cell(5, 5), HEAD_COLOR)
        assert [r.color for r in requests[1:]] == [BODY_COLOR, BODY_COLOR]


class TestSnakeSerialization:
    def test_to_dict(self, grid):
        snake = Snake(grid, start=Cell(5, 5), length=2)
        d = snake.to_dict()
        assert d["head"] == [5, 5]
        assert d["body"] == [[3, 5], [4, 5]]
        assert d["heading"] == "right"
        assert d["grow_pending"] is False
