from __future__ import annotations

import logging
import time
from typing import Callable

from . import config
from .food import Food
from .snake import Snake
from .state import Direction, Outcome, Snapshot

logger = logging.getLogger(__name__)

NS_PER_MS = 1_000_000


class Game:
    """One snake, one food and the fixed-cadence tick loop that drives them.

    ``clock`` returns integer nanoseconds, like ``time.monotonic_ns``.
    ``tick`` may be called as often as the caller likes (once per rendered
    frame, say); the snake only moves when ``refresh_ms`` has passed since the
    previous step. The last accepted direction stays latched on the snake
    until that step happens.
    """

    def __init__(
        self,
        refresh_ms: int = config.REFRESH_MS,
        grid_width: int = config.GRID_WIDTH,
        grid_height: int = config.GRID_HEIGHT,
        rng=None,
        clock: Callable[[], int] = time.monotonic_ns,
    ):
        self.refresh_ms = config.check_refresh_ms(refresh_ms)
        self.grid_width, self.grid_height = config.check_grid(grid_width, grid_height)
        self.rng = rng
        self.clock = clock
        self._reset()
        logger.info(
            "new game on %dx%d grid, refresh %dms",
            self.grid_width,
            self.grid_height,
            self.refresh_ms,
        )

    def _reset(self) -> None:
        self.snake = Snake(self.grid_width, self.grid_height)
        self.food = Food(self.grid_width, self.grid_height, self.rng)
        self.food.spawn(self.snake)
        self.score = 0
        self.outcome = Outcome.RUNNING
        self.last_step = self.clock()

    @property
    def running(self) -> bool:
        return self.outcome is Outcome.RUNNING

    def restart(self) -> None:
        self._reset()
        logger.info("game restarted")

    def tick(self, direction: Direction | None = None, restart: bool = False) -> Snapshot:
        if self.outcome.terminal:
            if restart:
                self.restart()
            return self.snapshot()

        if direction is not None:
            self.snake.change_direction(direction)

        now = self.clock()
        if now - self.last_step >= self.refresh_ms * NS_PER_MS:
            self.last_step = now
            self._step()
        return self.snapshot()

    def _step(self) -> None:
        self.snake.update()

        if self.snake.head == self.food.position:
            self.snake.grow()
            self.score += config.FOOD_REWARD
            logger.debug("food eaten at %s, score %d", self.food.position, self.score)
            if not self.food.spawn(self.snake):
                self.outcome = Outcome.WON
                logger.info("game won with score %d", self.score)

        if self.snake.check_collision():
            cause = "wall" if self.snake.hits_wall() else "self"
            self.outcome = Outcome.GAME_OVER
            logger.info("game over (%s) at %s, score %d", cause, self.snake.head, self.score)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake.body),
            direction=self.snake.direction,
            food=self.food.position,
            score=self.score,
            outcome=self.outcome,
        )
