from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from itertools import islice

from .state import Direction, Position, add_vectors


class Snake:
    def __init__(self, grid_width: int, grid_height: int, body: Iterable[tuple[int, int]] | None = None):
        self.grid_width = grid_width
        self.grid_height = grid_height
        if body is None:
            body = [(grid_width // 2, grid_height // 2)]
        self.body: deque[Position] = deque(Position(x, y) for x, y in body)
        if not self.body:
            raise ValueError("snake body must have at least one cell")
        self.direction = Direction.RIGHT
        self.growing = False

    @property
    def head(self) -> Position:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def cells(self) -> set[Position]:
        return set(self.body)

    def change_direction(self, direction: Direction) -> None:
        # Turning straight back would run the head into the neck.
        if direction is self.direction.opposite:
            return
        self.direction = direction

    def grow(self) -> None:
        self.growing = True

    def update(self) -> None:
        """Advance one cell, dropping the tail unless a grow is pending.

        The new head is clamped to the grid rather than rejected, so a move
        past the edge lands on the wall cell and shows up in check_collision.
        """
        x, y = add_vectors(self.head, self.direction.value)
        new_head = Position(
            min(max(x, 0), self.grid_width - 1),
            min(max(y, 0), self.grid_height - 1),
        )
        self.body.appendleft(new_head)
        if self.growing:
            self.growing = False
        else:
            self.body.pop()

    def hits_wall(self) -> bool:
        x, y = self.head
        return x == 0 or x >= self.grid_width - 1 or y == 0 or y >= self.grid_height - 1

    def hits_self(self) -> bool:
        return self.head in islice(self.body, 1, None)

    def check_collision(self) -> bool:
        return self.hits_wall() or self.hits_self()
