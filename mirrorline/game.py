"""Game - top-level state machine owning stage, line, messages and score."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from mirrorline.config import GameSettings
from mirrorline.events import EventLog
from mirrorline.input import InputFrame
from mirrorline.line import RESET_OUTCOMES, Line, LineOutcome, extend_line
from mirrorline.messages import Message, MessageScheduler
from mirrorline.stages import StageLayout, load_stage
from mirrorline.types import GameState


@dataclass
class Score:
    current: int = 0
    total: int = 0


class Game:
    """Single owner of all mutable game state.

    ``update`` is the only mutator during play and runs once per tick.
    Renderers read the state after ``update`` returns.
    """

    def __init__(
        self,
        width: float,
        height: float,
        stages: Sequence[str],
        messages: Mapping[int, Sequence[Message]] | None = None,
        settings: GameSettings | None = None,
        stage_index: int = 0,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.settings = settings or GameSettings()
        self.width = width
        self.height = height
        self.node_radius = width * self.settings.node_radius_ratio
        self.stages = stages
        self.messages: Mapping[int, Sequence[Message]] = messages or {}
        self.events = EventLog(self.settings.event_log_size)

        self.state = GameState.STARTING
        self.stage_index = stage_index
        self.intro_timer = 0
        self.tick = 0

        self.layout = StageLayout()
        self.line = Line()
        self.scheduler = MessageScheduler(self.settings.reply_timeout_ticks)
        self.pending_message: Any | None = None
        self.score = Score(current=self.settings.stage_score_start)

        self.load_stage(self.stage_index)

    # --- Queries ---

    @property
    def reply_count(self) -> int:
        return self.scheduler.reply_count

    @property
    def script(self) -> Sequence[Message] | None:
        return self.messages.get(self.stage_index)

    # --- Stage and line lifecycle ---

    def _emit(self, type: str, **data: Any) -> None:
        self.events.emit(self.tick, self.stage_index, type, **data)

    def _set_state(self, state: GameState) -> None:
        if state is self.state:
            return
        self._emit("state_changed", old=self.state.value, new=state.value)
        self.state = state

    def load_stage(self, index: int) -> None:
        """Load stage ``index``. A missing stage leaves the field empty."""
        layout = load_stage(
            self.stages, index, self.width, self.height, self.node_radius,
        )
        if layout is None:
            self._emit("stage_missing", index=index)
            return
        self.layout = layout
        self.line.reset(len(layout.nodes))
        for diag in layout.diagnostics:
            self._emit(
                "stage_diagnostic",
                index=index,
                record_index=diag.record_index,
                record=diag.record,
                reason=diag.reason,
            )
        self._emit(
            "stage_loaded",
            index=index,
            nodes=len(layout.nodes),
            blocks=len(layout.blocks),
        )

    def reset_line(self) -> None:
        self.line.reset(len(self.layout.nodes))

    def reset_stage(self) -> None:
        self.layout = StageLayout()
        self.reset_line()
        self.scheduler.reset()
        self.score.current = self.settings.stage_score_start

    def advance_stage(self) -> None:
        cleared = self.stage_index
        self.score.total += self.score.current
        self._emit("stage_cleared", index=cleared, score=self.score.current)
        self.reset_stage()
        self.stage_index += 1
        self.load_stage(self.stage_index)
        self.intro_timer = self.settings.stage_intro_ticks
        self._set_state(GameState.STARTING_STAGE)

    # --- Per-tick update ---

    def update(self, frame: InputFrame, tick: int = 0) -> None:
        self.tick = tick
        # only a PLAYING frame draws the message; keep it until one has
        if self.state is GameState.PLAYING:
            self.pending_message = None

        self._handle_click(frame.clicked)
        self._handle_pause_click(frame.pause_clicked)

        if self.state is GameState.STARTING_STAGE:
            if self.intro_timer <= 0:
                self._set_state(GameState.PLAYING)
                return
            self.intro_timer -= 1
            return

        if self.state is not GameState.PLAYING:
            return

        self.score.current -= 1

        if not frame.pointer_held:
            self.reset_line()

        self._update_messages(frame.reply_held)

        if frame.pointer_held:
            self._handle_moves(frame.moves)

    def _handle_click(self, clicked: bool) -> None:
        if not clicked:
            return
        if self.state is GameState.STARTING:
            self.intro_timer = self.settings.stage_intro_ticks
            self._set_state(GameState.STARTING_STAGE)
        elif self.state is GameState.PAUSED:
            self._set_state(GameState.PLAYING)

    def _handle_pause_click(self, clicked: bool) -> None:
        if not clicked:
            return
        if self.state is GameState.PAUSED:
            self._set_state(GameState.PLAYING)
        else:
            self._set_state(GameState.PAUSED)

    def _update_messages(self, reply_held: bool) -> None:
        replies = self.scheduler.reply_count
        content = self.scheduler.update(self.script, self, reply_held)
        if self.scheduler.reply_count != replies:
            self._emit("reply_received", count=self.scheduler.reply_count)
        if content is not None:
            self.pending_message = content
            self._emit("message_shown", index=self.scheduler.cursor.index - 1)

    def _handle_moves(self, moves: Sequence[tuple[float, float]]) -> None:
        for x, y in moves:
            outcome = extend_line(
                self.line, self.layout, x, y, self.width, self.height,
            )
            if outcome in RESET_OUTCOMES:
                self._emit("line_reset", reason=outcome.value, x=x, y=y)
            elif outcome is LineOutcome.STAGE_CLEARED:
                self.advance_stage()
                return
