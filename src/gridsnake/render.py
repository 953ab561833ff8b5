from __future__ import annotations

from . import config, hud
from .state import Snapshot


def draw_border(prims, width: int, height: int, block: int) -> None:
    prims.rect(0, 0, width, block, config.WHITE)
    prims.rect(0, height - block, width, block, config.WHITE)
    prims.rect(0, 0, block, height, config.WHITE)
    prims.rect(width - block, 0, block, height, config.WHITE)


def draw_state(prims, snapshot: Snapshot, block: int = config.BLOCK) -> None:
    block = config.check_block(block)
    width, height = prims.size
    prims.clear(config.BLACK)

    for x, y in snapshot.snake:
        prims.rect(x * block, y * block, block, block, config.GREEN)

    fx, fy = snapshot.food
    prims.rect(fx * block, fy * block, block, block, config.RED)

    # The wall is drawn last, so a head clamped onto it disappears under it.
    draw_border(prims, width, height, block)

    scale = max(1, (block - 2) // hud.GLYPH_H)
    pad = (block - hud.GLYPH_H * scale) // 2
    hud.draw_score(prims, snapshot.score, block, pad, scale)
    hud.draw_outcome(prims, snapshot.outcome, width, height, block)
