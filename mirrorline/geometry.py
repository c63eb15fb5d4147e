"""Node and Block shapes with point containment. Pure, no side effects."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NodeType(str, Enum):
    START = "start"
    END = "end"
    CONNECT = "connect"


@dataclass(frozen=True, slots=True)
class Node:
    """Circular target. A point on the rim counts as inside."""

    type: NodeType
    x: float
    y: float
    radius: float

    def contains(self, px: float, py: float) -> bool:
        dx = px - self.x
        dy = py - self.y
        return dx * dx + dy * dy <= self.radius * self.radius


@dataclass(frozen=True, slots=True)
class Block:
    """Axis-aligned obstacle anchored at its top-left corner."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, px: float, py: float) -> bool:
        return (
            self.x <= px <= self.x + self.width
            and self.y <= py <= self.y + self.height
        )


def mirror(x: float, y: float, width: float, height: float) -> tuple[float, float]:
    """Reflect a point through the centre of a width x height canvas."""
    return width - x, height - y
