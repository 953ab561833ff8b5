from __future__ import annotations

import logging
import random

import pygame

from . import config
from .logic import Game
from .primitives import BufferPrimitives, SoftPrimitives
from .render import draw_state
from .state import Direction, Snapshot

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


def read_commands(events) -> tuple[Direction | None, bool, bool]:
    """Collapse one frame of events into (direction, restart, quit).

    Only the first direction key of the frame counts.
    """
    direction = None
    restart = False
    quit_requested = False
    for event in events:
        if event.type == pygame.QUIT:
            quit_requested = True
        elif event.type == pygame.KEYDOWN:
            if event.key in QUIT_KEYS:
                quit_requested = True
            elif event.key == pygame.K_r:
                restart = True
            elif direction is None:
                direction = KEY_DIRECTIONS.get(event.key)
    return direction, restart, quit_requested


def caption(refresh_ms: int, snapshot: Snapshot) -> str:
    title = f"gridsnake - Refresh Rate: {refresh_ms}ms - Score: {snapshot.score}"
    if snapshot.game_over:
        title += " - Game Over (R to restart)"
    elif snapshot.won:
        title += " - You Won! (R to restart)"
    return title


def main(refresh_ms: int = config.REFRESH_MS, renderer: str = "soft", seed: int | None = None) -> int:
    game = Game(refresh_ms, rng=random.Random(seed))

    pygame.init()
    try:
        screen = pygame.display.set_mode((config.WIDTH, config.HEIGHT))
        clock = pygame.time.Clock()
        if renderer == "buffer":
            prims = BufferPrimitives(config.WIDTH, config.HEIGHT)
        else:
            prims = SoftPrimitives(screen)
        logger.info("renderer: %s", renderer)

        snapshot = game.snapshot()
        title = None
        while True:
            direction, restart, quit_requested = read_commands(pygame.event.get())
            if quit_requested:
                break

            snapshot = game.tick(direction, restart=restart)

            draw_state(prims, snapshot)
            prims.present(screen)
            pygame.display.flip()

            new_title = caption(refresh_ms, snapshot)
            if new_title != title:
                pygame.display.set_caption(new_title)
                title = new_title

            clock.tick(config.FPS)
    finally:
        pygame.quit()

    print("Final score:", snapshot.score)
    return 0
