"""Input buffer: UI callbacks write into it, the tick drains it once."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True)
class InputFrame:
    """Everything the player did since the previous tick."""

    clicked: bool = False
    pointer_held: bool = False
    moves: tuple[tuple[float, float], ...] = ()
    pause_clicked: bool = False
    reply_held: bool = False


class InputBuffer:
    """One-shot flags and pointer samples are cleared on drain; held flags persist."""

    def __init__(self) -> None:
        self._clicked = False
        self._pause_clicked = False
        self._pointer_held = False
        self._reply_held = False
        self._moves: deque[tuple[float, float]] = deque()

    def click(self) -> None:
        self._clicked = True

    def pause_click(self) -> None:
        self._pause_clicked = True

    def pointer_down(self) -> None:
        self._pointer_held = True

    def pointer_up(self) -> None:
        self._pointer_held = False

    def pointer_move(self, x: float, y: float) -> None:
        self._moves.append((x, y))

    def reply_down(self) -> None:
        self._reply_held = True

    def reply_up(self) -> None:
        self._reply_held = False

    def drain(self) -> InputFrame:
        frame = InputFrame(
            clicked=self._clicked,
            pointer_held=self._pointer_held,
            moves=tuple(self._moves),
            pause_clicked=self._pause_clicked,
            reply_held=self._reply_held,
        )
        self._clicked = False
        self._pause_clicked = False
        self._moves.clear()
        return frame
