"""Layout, color, and rendering constants."""
from __future__ import annotations

from mirrorline import NodeType

# Canvas defaults (overridden by CLI --width / --height)
DEFAULT_CANVAS_W = 600
DEFAULT_CANVAS_H = 400

# Layout
SIDEBAR_W = 140
LOG_H = 110
BUTTON_H = 40
BUTTON_PAD = 12
FPS = 60

# Canvas colors
COLOR_BG = (15, 15, 22)
COLOR_TITLE_BG = (10, 10, 16)
COLOR_TITLE_TEXT = (230, 230, 240)
COLOR_DRAW_FIELD = (32, 36, 52)
COLOR_REFLECT_FIELD = (22, 24, 34)
COLOR_FIELD_TEXT = (200, 200, 210)
COLOR_BLOCK = (120, 120, 130)
COLOR_LINE = (240, 220, 120)
COLOR_LINE_MIRRORED = (150, 140, 90)
LINE_WIDTH = 4

NODE_COLORS: dict[NodeType, tuple[int, int, int]] = {
    NodeType.START: (90, 210, 110),
    NodeType.END: (220, 80, 80),
    NodeType.CONNECT: (100, 160, 230),
}

# Sidebar / log colors
COLOR_SIDEBAR_BG = (25, 25, 35)
COLOR_LOG_BG = (18, 18, 25)
COLOR_BUTTON = (55, 55, 75)
COLOR_BUTTON_ACTIVE = (95, 95, 130)
COLOR_TEXT = (200, 200, 200)
COLOR_MESSAGE = (170, 220, 170)
