"""Game settings dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameSettings:
    """Immutable tuning knobs for a game session.

    Attributes:
        tick_interval_ms: Milliseconds between fixed ticks (50 -> 20 tps).
        node_radius_ratio: Node radius as a fraction of canvas width.
        stage_score_start: Stage score at the start of every stage.
        stage_intro_ticks: Length of the stage intro screen in ticks.
        reply_timeout_ticks: Ticks the reply control must be held (exceeded)
            before a reply counts.
        event_log_size: Maximum retained events, 0 for unbounded.
    """

    tick_interval_ms: int = 50
    node_radius_ratio: float = 0.025
    stage_score_start: int = 1000
    stage_intro_ticks: int = 40
    reply_timeout_ticks: int = 20
    event_log_size: int = 500

    title_text: str = "MIRROR LINE"
    paused_text: str = "PAUSED"
    stage_intro_text: str = "STARTING A LEVEL"
    score_text_x: int = 10
    total_score_y: int = 20
    stage_score_y: int = 40
