from __future__ import annotations

from collections import namedtuple
from enum import Enum
from typing import NamedTuple


class Position(NamedTuple):
    x: int
    y: int


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    return (a[0] + b[0], a[1] + b[1])


class Direction(Enum):
    # (dx, dy) in screen coordinates, y grows downwards.
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


class Outcome(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"
    WON = "won"

    @property
    def terminal(self) -> bool:
        return self is not Outcome.RUNNING


_SnapshotBase = namedtuple("Snapshot", ["snake", "direction", "food", "score", "outcome"])
# snake: tuple[Position, ...], head is first element.
# direction: Direction
# food: Position
# score: int
# outcome: Outcome


class Snapshot(_SnapshotBase):
    """Read-only view of a game handed to presenters once per tick."""

    __slots__ = ()

    @property
    def game_over(self) -> bool:
        return self.outcome is Outcome.GAME_OVER

    @property
    def won(self) -> bool:
        return self.outcome is Outcome.WON
