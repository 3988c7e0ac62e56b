"""Simple ``pygame`` window for rendering cells and text."""

from __future__ import annotations

import pygame


class Window:
    """``pygame`` backed drawing surface."""

    def __init__(self, size: tuple[int, int], caption: str = "gridpath") -> None:
        self.size = size

        if not pygame.get_init(): pygame.init()
        if not pygame.font.get_init(): pygame.font.init()
        if not pygame.display.get_init(): pygame.display.init()

        self._surface = pygame.display.set_mode(self.size)
        pygame.display.set_caption(caption)

        try:
            self._font = pygame.font.SysFont(None, 22)
        except pygame.error:
            self._font = pygame.font.Font(None, 22)

    def draw_rect(
        self, rect: tuple[int, int, int, int], colour: tuple[int, int, int]
    ) -> None:
        pygame.draw.rect(self._surface, colour, rect)

    def draw_text(
        self, text: str, x: int, y: int, colour: tuple[int, int, int] = (255, 255, 255)
    ) -> None:
        if not self._font: return
        text_surf = self._font.render(text, True, colour)
        self._surface.blit(text_surf, (x, y))

    def refresh(self) -> None:
        pygame.display.flip()

    def clear(self, color: tuple[int, int, int] = (0, 0, 0)) -> None:
        self._surface.fill(color)


__all__ = ["Window"]
