from __future__ import annotations

from . import config
from .state import Outcome

# 3x5 block digits, one string per row.
GLYPHS = {
    "0": ("###", "#.#", "#.#", "#.#", "###"),
    "1": (".#.", "##.", ".#.", ".#.", "###"),
    "2": ("###", "..#", "###", "#..", "###"),
    "3": ("###", "..#", "###", "..#", "###"),
    "4": ("#.#", "#.#", "###", "..#", "..#"),
    "5": ("###", "#..", "###", "..#", "###"),
    "6": ("###", "#..", "###", "#.#", "###"),
    "7": ("###", "..#", "..#", "..#", "..#"),
    "8": ("###", "#.#", "###", "#.#", "###"),
    "9": ("###", "#.#", "###", "..#", "###"),
}
GLYPH_W, GLYPH_H = 3, 5

OUTCOME_COLORS = {
    Outcome.GAME_OVER: config.RED,
    Outcome.WON: config.GOLD,
}


def text_width(text: str, scale: int) -> int:
    if not text:
        return 0
    return len(text) * (GLYPH_W + 1) * scale - scale


def draw_score(prims, score: int, x: int, y: int, scale: int, color=config.HUD_TEXT) -> int:
    """Draw ``score`` as block digits with its top-left at (x, y); returns the width used."""
    text = str(score)
    cx = x
    for ch in text:
        for row, line in enumerate(GLYPHS[ch]):
            for col, cell in enumerate(line):
                if cell == "#":
                    prims.rect(cx + col * scale, y + row * scale, scale, scale, color)
        cx += (GLYPH_W + 1) * scale
    return text_width(text, scale)


def draw_outcome(prims, outcome: Outcome, width: int, height: int, block: int) -> None:
    color = OUTCOME_COLORS.get(outcome)
    if color is None:
        return
    # Solid stripe across the bottom wall.
    prims.rect(0, height - block, width, block, color)
