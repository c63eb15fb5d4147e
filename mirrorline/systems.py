"""System factories wiring input and rendering into the Engine pipeline."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from mirrorline.input import InputBuffer
from mirrorline.render import Surface, render

if TYPE_CHECKING:
    from mirrorline.game import Game
    from mirrorline.types import TickContext


def make_update_system(inputs: InputBuffer) -> Callable[[Game, TickContext], None]:
    """Return a system that drains ``inputs`` and advances the game one tick."""

    def update_system(game: Game, ctx: TickContext) -> None:
        game.update(inputs.drain(), tick=ctx.tick_number)

    return update_system


def make_render_system(surface: Surface) -> Callable[[Game, TickContext], None]:
    """Return a system that draws the finished tick onto ``surface``."""

    def render_system(game: Game, ctx: TickContext) -> None:
        render(game, surface)

    return render_system
