"""The player's line: growth, block collision, node activation, win check."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from mirrorline.geometry import mirror
from mirrorline.stages import StageLayout


class LineOutcome(str, Enum):
    IDLE = "idle"                    # nothing drawn yet, no Start touched
    EXTENDED = "extended"
    LEFT_FIELD = "left_field"        # crossed into the reflected field
    COLLIDED = "collided"
    MISSED_NODE = "missed_node"      # reached End with a node untouched
    STAGE_CLEARED = "stage_cleared"


RESET_OUTCOMES = frozenset(
    {LineOutcome.LEFT_FIELD, LineOutcome.COLLIDED, LineOutcome.MISSED_NODE}
)


@dataclass
class Line:
    points: list[tuple[float, float]] = field(default_factory=list)
    active: list[bool] = field(default_factory=list)

    def reset(self, node_count: int) -> None:
        self.points = []
        self.active = [False] * node_count

    @property
    def active_count(self) -> int:
        return sum(self.active)


def extend_line(
    line: Line,
    layout: StageLayout,
    x: float,
    y: float,
    width: float,
    height: float,
) -> LineOutcome:
    """Feed one held-pointer sample at (x, y) into ``line``.

    Every test is made for the sample and for its reflection through the
    canvas centre. Steps run in a fixed order: field check, block
    collision, node activation, line growth, end check. A reset ends the
    sample.
    """
    node_count = len(layout.nodes)
    mx, my = mirror(x, y, width, height)

    if y > height / 2:
        line.reset(node_count)
        return LineOutcome.LEFT_FIELD

    for block in layout.blocks:
        if block.contains(x, y) or block.contains(mx, my):
            line.reset(node_count)
            return LineOutcome.COLLIDED

    if len(line.active) != node_count:
        line.reset(node_count)

    for i, node in enumerate(layout.nodes):
        if line.active[i]:
            continue
        if node.contains(x, y) or node.contains(mx, my):
            line.active[i] = True

    start = layout.start_index
    if line.points or (start is not None and line.active[start]):
        line.points.append((x, y))

    end = layout.end_index
    if end is not None and line.active[end]:
        if line.active_count == node_count:
            return LineOutcome.STAGE_CLEARED
        line.reset(node_count)
        return LineOutcome.MISSED_NODE

    return LineOutcome.EXTENDED if line.points else LineOutcome.IDLE
