"""Scrolling message log below the canvas."""
from __future__ import annotations

from collections import deque

import pygame

from ui.constants import COLOR_LOG_BG, COLOR_MESSAGE


class MessageLogPanel:
    """Accumulates every message the game shows, newest at the bottom."""

    def __init__(self, max_entries: int = 100) -> None:
        self.entries: deque[str] = deque(maxlen=max_entries)

    def add(self, text: str) -> None:
        self.entries.append(text)

    def draw(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        x: int, y: int, w: int, h: int,
    ) -> None:
        pygame.draw.rect(surface, COLOR_LOG_BG, (x, y, w, h))
        pygame.draw.line(surface, (50, 50, 60), (x, y), (x + w, y))

        line_h = 16
        max_lines = max(1, (h - 8) // line_h)
        ty = y + 4
        for text in list(self.entries)[-max_lines:]:
            rendered = font.render(text, True, COLOR_MESSAGE)
            surface.blit(rendered, (x + 6, ty))
            ty += line_h
