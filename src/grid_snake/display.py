"""pygame window, keyboard input, and block rendering."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

import pygame

from grid_snake.engine import GameEngine, GameOutcome
from grid_snake.snake import Heading

if TYPE_CHECKING:
    from grid_snake.geometry import Color, DrawRequest

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Snake"

KEY_TO_HEADING: dict[int, Heading] = {
    pygame.K_UP: Heading.UP,
    pygame.K_DOWN: Heading.DOWN,
    pygame.K_LEFT: Heading.LEFT,
    pygame.K_RIGHT: Heading.RIGHT,
}

_QUIT_KEYS = frozenset({pygame.K_ESCAPE})


def translate_events(
    events: Iterable[pygame.event.Event],
) -> tuple[list[Heading], bool]:
    """Turn a poll batch into heading requests and a quit flag.

    Each arrow key yields at most one request per batch, placed where
    the key was last pressed so the final press decides the heading.
    """
    headings: list[Heading] = []
    quit_requested = False
    for event in events:
        if event.type == pygame.QUIT:
            quit_requested = True
        elif event.type == pygame.KEYDOWN:
            if event.key in _QUIT_KEYS:
                quit_requested = True
            elif event.key in KEY_TO_HEADING:
                heading = KEY_TO_HEADING[event.key]
                if heading in headings:
                    headings.remove(heading)
                headings.append(heading)
    return headings, quit_requested


class BlockRenderer:
    """Fills one square block per draw request on a pygame surface."""

    def __init__(
        self,
        surface: pygame.Surface,
        block_size: int,
        clear_color: Color,
    ) -> None:
        self.surface = surface
        self.block_size = block_size
        self.clear_color = clear_color

    def clear(self) -> None:
        self.surface.fill(self.clear_color)

    def render(self, requests: Iterable[DrawRequest]) -> None:
        size = self.block_size
        for cell, color in requests:
            rect = pygame.Rect(cell.column * size, cell.row * size, size, size)
            self.surface.fill(color, rect)

    def present(self) -> None:
        pygame.display.flip()


def run_window(engine: GameEngine) -> GameOutcome:
    """Open the game window and run *engine* until it ends."""
    config = engine.config
    pygame.init()
    try:
        surface = pygame.display.set_mode(config.window_size)
        pygame.display.set_caption(WINDOW_TITLE)
        renderer = BlockRenderer(surface, config.block_size, config.clear_color)
        frame_clock = pygame.time.Clock()
        logger.info(
            "Window opened at %dx%d px, %d fps.",
            *config.window_size, config.fps,
        )

        previous = pygame.time.get_ticks()
        while True:
            headings, quit_requested = translate_events(pygame.event.get())
            if quit_requested:
                return engine.quit()

            now = pygame.time.get_ticks()
            outcome = engine.update(now - previous, headings)
            previous = now
            if outcome is not None:
                return outcome

            renderer.clear()
            renderer.render(engine.draw_requests())
            renderer.present()
            frame_clock.tick(config.fps)
    finally:
        pygame.quit()
