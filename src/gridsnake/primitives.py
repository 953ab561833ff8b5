from __future__ import annotations

import numpy as np
import pygame


class SoftPrimitives:
    """Draws straight onto a pygame surface."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface

    @property
    def size(self) -> tuple[int, int]:
        return self.surface.get_size()

    def clear(self, color: tuple[int, int, int]) -> None:
        self.surface.fill(color)

    def rect(self, x: int, y: int, w: int, h: int, color: tuple[int, int, int]) -> None:
        pygame.draw.rect(self.surface, color, pygame.Rect(x, y, w, h))

    def present(self, surface: pygame.Surface) -> None:
        if surface is not self.surface:
            surface.blit(self.surface, (0, 0))


class BufferPrimitives:
    """Frame buffer in a numpy array, blitted to the window once per frame."""

    def __init__(self, width: int, height: int):
        self.width = int(width)
        self.height = int(height)
        self.color = np.zeros((self.height, self.width, 3), dtype=np.uint8)

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def clear(self, color: tuple[int, int, int]) -> None:
        self.color[:, :] = color

    def rect(self, x: int, y: int, w: int, h: int, color: tuple[int, int, int]) -> None:
        x0 = max(0, x)
        y0 = max(0, y)
        x1 = min(self.width, x + w)
        y1 = min(self.height, y + h)
        if x0 >= x1 or y0 >= y1:
            return
        self.color[y0:y1, x0:x1] = color

    def present(self, surface: pygame.Surface) -> None:
        # pygame surfarray is (w, h, c), internal buffer is (h, w, c).
        pygame.surfarray.blit_array(surface, np.transpose(self.color, (1, 0, 2)))
