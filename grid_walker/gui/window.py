# grid_walker/gui/window.py
"""Simple ``pygame`` window for drawing tiles and text."""

from __future__ import annotations

import pygame

Colour = tuple[int, int, int]


class Window:
    """``pygame`` backed drawing surface sized to fit the whole grid."""

    def __init__(self, grid_size: tuple[int, int], tile_size: int = 16, caption: str = "Grid Walker") -> None:
        self.tile_size = tile_size
        self.size = (grid_size[0] * tile_size, grid_size[1] * tile_size)

        if not pygame.get_init(): pygame.init()
        if not pygame.font.get_init(): pygame.font.init()
        if not pygame.display.get_init(): pygame.display.init()

        self._surface = pygame.display.set_mode(self.size)
        pygame.display.set_caption(caption)

        try:
            self._font = pygame.font.SysFont(None, 18)
        except pygame.error:
            self._font = pygame.font.Font(None, 18)

    def fill_tile(self, x: int, y: int, colour: Colour) -> None:
        ts = self.tile_size
        pygame.draw.rect(self._surface, colour, (x * ts, y * ts, ts, ts))

    def draw_text(self, text: str, x: int, y: int, colour: Colour = (255, 255, 255)) -> None:
        if not self._font: return
        text_surf = self._font.render(text, True, colour)
        self._surface.blit(text_surf, (x, y))

    def refresh(self) -> None:
        pygame.display.flip()

    def clear(self, color: Colour = (0, 0, 0)) -> None:
        self._surface.fill(color)


__all__ = ["Window"]
