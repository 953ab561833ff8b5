from __future__ import annotations

WIDTH, HEIGHT = 1280, 720
BLOCK = 20
GRID_WIDTH = WIDTH // BLOCK
GRID_HEIGHT = HEIGHT // BLOCK

REFRESH_MS = 150  # one simulation step per refresh interval
FPS = 60
FOOD_REWARD = 10

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GREEN = (0, 255, 0)
RED = (255, 0, 0)
GOLD = (255, 200, 0)
HUD_TEXT = (0, 0, 0)


class ConfigError(ValueError):
    pass


def check_refresh_ms(refresh_ms: int) -> int:
    if isinstance(refresh_ms, bool) or not isinstance(refresh_ms, int):
        raise ConfigError(f"refresh interval must be an integer number of ms, got {refresh_ms!r}")
    if refresh_ms <= 0:
        raise ConfigError(f"refresh interval must be positive, got {refresh_ms}ms")
    return refresh_ms


def check_grid(grid_width: int, grid_height: int) -> tuple[int, int]:
    # A one-cell wall on every side needs at least one interior cell inside it.
    if grid_width < 3 or grid_height < 3:
        raise ConfigError(f"grid {grid_width}x{grid_height} has no interior; need at least 3x3")
    return grid_width, grid_height


def check_block(block: int) -> int:
    if block <= 0:
        raise ConfigError(f"block size must be positive, got {block}")
    return block
