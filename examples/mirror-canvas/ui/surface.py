"""pygame implementation of the mirrorline drawing surface."""
from __future__ import annotations

from typing import Any, Sequence

import pygame

from mirrorline import Block, Node
from ui.constants import (
    COLOR_BG, COLOR_BLOCK, COLOR_DRAW_FIELD, COLOR_FIELD_TEXT, COLOR_LINE,
    COLOR_LINE_MIRRORED, COLOR_REFLECT_FIELD, COLOR_TITLE_BG,
    COLOR_TITLE_TEXT, LINE_WIDTH, NODE_COLORS,
)
from ui.log_panel import MessageLogPanel


class PygameSurface:
    """Draws onto an offscreen canvas; messages go to the log panel."""

    def __init__(self, width: int, height: int, log: MessageLogPanel) -> None:
        self.canvas = pygame.Surface((width, height))
        self.log = log
        self._font = pygame.font.SysFont("monospace", 14)
        self._title_font = pygame.font.SysFont("monospace", 32, bold=True)

    def clear(self) -> None:
        self.canvas.fill(COLOR_BG)

    def draw_fields(self, width: float, height: float) -> None:
        half = height / 2
        pygame.draw.rect(self.canvas, COLOR_DRAW_FIELD, (0, 0, width, half))
        pygame.draw.rect(self.canvas, COLOR_REFLECT_FIELD, (0, half, width, half))

    def draw_node(self, node: Node) -> None:
        center = (round(node.x), round(node.y))
        pygame.draw.circle(self.canvas, NODE_COLORS[node.type], center, round(node.radius))

    def draw_block(self, block: Block) -> None:
        rect = pygame.Rect(round(block.x), round(block.y),
                           round(block.width), round(block.height))
        pygame.draw.rect(self.canvas, COLOR_BLOCK, rect)

    def draw_line(self, points: Sequence[tuple[float, float]], mirrored: bool) -> None:
        if len(points) < 2:
            return
        color = COLOR_LINE_MIRRORED if mirrored else COLOR_LINE
        pygame.draw.lines(self.canvas, color, False, points, LINE_WIDTH)

    def draw_text(self, text: str, x: float, y: float) -> None:
        rendered = self._font.render(text, True, COLOR_FIELD_TEXT)
        # y is the text baseline, as on an HTML canvas
        self.canvas.blit(rendered, (x, y - self._font.get_ascent()))

    def draw_message(self, content: Any) -> None:
        self.log.add(str(content))

    def draw_full_screen_message(self, text: str) -> None:
        self.canvas.fill(COLOR_TITLE_BG)
        rendered = self._title_font.render(text, True, COLOR_TITLE_TEXT)
        rect = rendered.get_rect(center=self.canvas.get_rect().center)
        self.canvas.blit(rendered, rect)
