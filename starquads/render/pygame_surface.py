"""Pygame-backed draw surface."""
from __future__ import annotations

from typing import Dict, Tuple

import pygame

from starquads.state.commands import Color


class PygameSurface:
    def __init__(self, target: pygame.Surface, font_name: str = "consolas", font_size: int = 14) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.target = target
        self.color: Color = (255, 255, 255)
        self.line_width = 1
        self.font_name = font_name
        self.font_size = font_size
        self._fonts: Dict[Tuple[str, int], pygame.font.Font] = {}

    def _font(self) -> pygame.font.Font:
        key = (self.font_name, self.font_size)
        font = self._fonts.get(key)
        if font is None:
            font = pygame.font.SysFont(self.font_name, self.font_size)
            self._fonts[key] = font
        return font

    def fill(self, color: Color) -> None:
        self.target.fill(color)

    def set_color(self, color: Color) -> None:
        self.color = color

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        pygame.draw.line(self.target, self.color, (x1, y1), (x2, y2), self.line_width)

    def draw_text(self, text: str, x: int, y: int) -> None:
        # y is the baseline; pygame blits from the top-left corner
        font = self._font()
        img = font.render(text, True, self.color)
        self.target.blit(img, (x, y - font.get_ascent()))

    def save(self, path: str) -> None:
        pygame.image.save(self.target, path)
