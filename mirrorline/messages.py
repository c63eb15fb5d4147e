"""Per-stage message scripts and the reply-aware scheduler that walks them."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Sequence

if TYPE_CHECKING:
    from mirrorline.game import Game


@dataclass(frozen=True)
class Message:
    """One scripted message. Not mutated at runtime.

    ``condition`` is evaluated against the live game when the cursor reaches
    the message; a False result skips it. ``delay`` is the number of ticks to
    wait before showing it (0 shows it immediately). ``await_reply`` opens a
    reply window that runs while the following message is pending.
    """

    content: Any
    condition: Callable[[Game], bool] | None = None
    delay: int = 0
    await_reply: bool = False


@dataclass
class MessageCursor:
    index: int = 0
    wait_ticks: int = 0
    has_replied: bool = False
    reply_ticks: int = 0


class MessageScheduler:
    """Advances a message script by one step per tick."""

    def __init__(self, reply_timeout: int) -> None:
        self.reply_timeout = reply_timeout
        self.cursor = MessageCursor()
        self.reply_count = 0

    def reset(self) -> None:
        """Rewind to the start of a script. ``reply_count`` is kept."""
        self.cursor = MessageCursor()

    def finished(self, script: Sequence[Message] | None) -> bool:
        return not script or self.cursor.index >= len(script)

    def update(
        self,
        script: Sequence[Message] | None,
        game: Game,
        reply_held: bool,
    ) -> Any | None:
        """Run one scheduling step. Returns the content to show this tick, if any."""
        cursor = self.cursor
        if not reply_held:
            cursor.reply_ticks = 0

        if not script or cursor.index >= len(script):
            return None

        current = script[cursor.index]
        if current.condition is not None and not current.condition(game):
            cursor.index += 1
            return None

        if cursor.index > 0:
            previous = script[cursor.index - 1]
            if previous.await_reply and not cursor.has_replied:
                if reply_held:
                    cursor.reply_ticks += 1
                if cursor.reply_ticks > self.reply_timeout:
                    cursor.has_replied = True
                    self.reply_count += 1

        if not current.delay or cursor.wait_ticks >= current.delay:
            cursor.wait_ticks = 0
            cursor.index += 1
            cursor.has_replied = False
            return current.content

        cursor.wait_ticks += 1
        return None
