from __future__ import annotations

import logging
import random

from .snake import Snake
from .state import Position

logger = logging.getLogger(__name__)


class Food:
    """The single food cell and its spawn rule.

    ``rng`` is anything with a ``choice(sequence)`` method. It defaults to a
    fresh ``random.Random``; pass a seeded one (or a scripted chooser) to make
    spawns reproducible.
    """

    def __init__(self, grid_width: int, grid_height: int, rng=None):
        self.grid_width = grid_width
        self.grid_height = grid_height
        self.rng = rng if rng is not None else random.Random()
        # Border cell: out of play until the first spawn.
        self.position = Position(0, 0)

    def candidates(self, snake: Snake) -> list[Position]:
        occupied = snake.cells()
        return [
            Position(x, y)
            for x in range(1, self.grid_width - 1)
            for y in range(1, self.grid_height - 1)
            if (x, y) not in occupied
        ]

    def spawn(self, snake: Snake) -> bool:
        """Move the food to a uniformly random free interior cell.

        Returns False, leaving the position alone, when the snake covers the
        whole interior.
        """
        free = self.candidates(snake)
        if not free:
            logger.info("no free cell left for food; snake fills the board")
            return False
        self.position = self.rng.choice(free)
        logger.debug("food spawned at %s (%d candidates)", self.position, len(free))
        return True
