"""Sidebar with the REPLY and PAUSE buttons."""
from __future__ import annotations

import pygame

from ui.constants import (
    BUTTON_H, BUTTON_PAD, COLOR_BUTTON, COLOR_BUTTON_ACTIVE,
    COLOR_SIDEBAR_BG, COLOR_TEXT,
)


def button_rects(x: int, w: int) -> dict[str, pygame.Rect]:
    """Screen rectangles for each sidebar button, keyed by name."""
    bw = w - 2 * BUTTON_PAD
    return {
        "reply": pygame.Rect(x + BUTTON_PAD, BUTTON_PAD, bw, BUTTON_H),
        "pause": pygame.Rect(x + BUTTON_PAD, 2 * BUTTON_PAD + BUTTON_H, bw, BUTTON_H),
    }


def draw_sidebar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    x: int, w: int, h: int,
    reply_held: bool,
    replies: int,
) -> None:
    pygame.draw.rect(surface, COLOR_SIDEBAR_BG, (x, 0, w, h))
    for name, rect in button_rects(x, w).items():
        active = name == "reply" and reply_held
        pygame.draw.rect(surface, COLOR_BUTTON_ACTIVE if active else COLOR_BUTTON, rect)
        label = font.render(name.upper(), True, COLOR_TEXT)
        surface.blit(label, label.get_rect(center=rect.center))

    ty = 3 * BUTTON_PAD + 2 * BUTTON_H + 10
    surface.blit(font.render(f"Replies: {replies}", True, COLOR_TEXT), (x + BUTTON_PAD, ty))
