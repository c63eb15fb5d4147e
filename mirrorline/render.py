"""Read-only render pass over a Game onto an abstract drawing surface."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, Sequence

from mirrorline.geometry import Block, Node, mirror
from mirrorline.types import GameState

if TYPE_CHECKING:
    from mirrorline.game import Game


class Surface(Protocol):
    """Drawing primitives a front-end must provide."""

    def clear(self) -> None: ...

    def draw_fields(self, width: float, height: float) -> None: ...

    def draw_node(self, node: Node) -> None: ...

    def draw_block(self, block: Block) -> None: ...

    def draw_line(self, points: Sequence[tuple[float, float]], mirrored: bool) -> None: ...

    def draw_text(self, text: str, x: float, y: float) -> None: ...

    def draw_message(self, content: Any) -> None: ...

    def draw_full_screen_message(self, text: str) -> None: ...


def render(game: Game, surface: Surface) -> None:
    """Draw the current frame. Never mutates ``game``."""
    settings = game.settings
    surface.clear()

    title = {
        GameState.STARTING: settings.title_text,
        GameState.PAUSED: settings.paused_text,
        GameState.STARTING_STAGE: settings.stage_intro_text,
    }.get(game.state)
    if title is not None:
        surface.draw_full_screen_message(title)
        return

    surface.draw_fields(game.width, game.height)

    surface.draw_text(
        f"TOTAL SCORE: {game.score.total}",
        settings.score_text_x, settings.total_score_y,
    )
    surface.draw_text(
        f"STAGE SCORE: {game.score.current}",
        settings.score_text_x, settings.stage_score_y,
    )

    if game.pending_message is not None:
        surface.draw_message(game.pending_message)

    for node in game.layout.nodes:
        surface.draw_node(node)
    for block in game.layout.blocks:
        surface.draw_block(block)

    points = game.line.points
    surface.draw_line(list(points), False)
    surface.draw_line(
        [mirror(x, y, game.width, game.height) for x, y in points], True,
    )
