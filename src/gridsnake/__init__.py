"""Grid snake: the game engine plus a pygame front end."""

from .config import ConfigError
from .food import Food
from .logic import Game
from .snake import Snake
from .state import Direction, Outcome, Position, Snapshot

__all__ = [
    "ConfigError",
    "Direction",
    "Food",
    "Game",
    "Outcome",
    "Position",
    "Snake",
    "Snapshot",
]
