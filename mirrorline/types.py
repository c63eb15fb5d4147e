"""Shared types for the mirrorline game loop."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable


class GameState(str, Enum):
    STARTING = "starting"
    STARTING_STAGE = "starting_stage"
    PLAYING = "playing"
    PAUSED = "paused"


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


if TYPE_CHECKING:
    from mirrorline.game import Game

System = Callable[["Game", TickContext], None]
