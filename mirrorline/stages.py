"""Stage descriptor parsing.

A descriptor is a ``;``-separated list of records such as
``S(10,20);C(50,30);B(40,10,5,15);E(90,20)``. The first token of each
record is a kind code, the rest are integer percentages of the canvas
width (x, width) and height (y, height). Malformed records are dropped and
reported as :class:`StageDiagnostic` entries; nothing here raises.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Sequence

from mirrorline.geometry import Block, Node, NodeType

_TOKEN_SPLIT = re.compile(r"[,()]")

_NODE_KINDS: dict[str, NodeType] = {
    "S": NodeType.START,
    "E": NodeType.END,
    "C": NodeType.CONNECT,
}
_BLOCK_KIND = "B"


@dataclass(frozen=True)
class StageDiagnostic:
    """A record the loader ignored, or a stage-level problem (record_index -1)."""

    record_index: int
    record: str
    reason: str


@dataclass
class StageLayout:
    nodes: list[Node] = field(default_factory=list)
    blocks: list[Block] = field(default_factory=list)
    start_index: int | None = None
    end_index: int | None = None
    diagnostics: list[StageDiagnostic] = field(default_factory=list)

    @property
    def start_node(self) -> Node | None:
        return None if self.start_index is None else self.nodes[self.start_index]

    @property
    def end_node(self) -> Node | None:
        return None if self.end_index is None else self.nodes[self.end_index]


def _percent(token: str) -> int | None:
    try:
        value = int(token.strip())
    except ValueError:
        return None
    if not 0 <= value <= 100:
        return None
    return value


def parse_stage(
    descriptor: str, width: float, height: float, node_radius: float,
) -> StageLayout:
    """Parse a descriptor into nodes and blocks placed on a width x height canvas."""
    layout = StageLayout()

    def reject(i: int, record: str, reason: str) -> None:
        layout.diagnostics.append(StageDiagnostic(i, record, reason))

    for i, raw in enumerate(descriptor.split(";")):
        record = raw.strip()
        if not record:
            continue
        tokens = [t.strip() for t in _TOKEN_SPLIT.split(record) if t.strip()]
        if not tokens:
            reject(i, record, "record has no kind")
            continue
        kind, args = tokens[0], tokens[1:]

        if kind in _NODE_KINDS:
            arity = 2
        elif kind == _BLOCK_KIND:
            arity = 4
        else:
            reject(i, record, f"unknown kind {kind!r}")
            continue

        if len(args) != arity:
            reject(i, record, f"expected {arity} values, got {len(args)}")
            continue
        values = [_percent(a) for a in args]
        if any(v is None for v in values):
            reject(i, record, "values must be integers in [0, 100]")
            continue

        x = values[0] / 100 * width
        y = values[1] / 100 * height

        if kind == _BLOCK_KIND:
            w = values[2] / 100 * width
            h = values[3] / 100 * height
            layout.blocks.append(Block(x, y, w, h))
            continue

        node_type = _NODE_KINDS[kind]
        if node_type is NodeType.START:
            if layout.start_index is not None:
                reject(i, record, "duplicate start node")
                continue
            layout.start_index = len(layout.nodes)
        elif node_type is NodeType.END:
            if layout.end_index is not None:
                reject(i, record, "duplicate end node")
                continue
            layout.end_index = len(layout.nodes)
        layout.nodes.append(Node(node_type, x, y, node_radius))

    if layout.start_index is None:
        reject(-1, descriptor, "stage has no start node")
    if layout.end_index is None:
        reject(-1, descriptor, "stage has no end node")
    return layout


def load_stage(
    stages: Sequence[str],
    index: int,
    width: float,
    height: float,
    node_radius: float,
) -> StageLayout | None:
    """Return the parsed stage at ``index``, or None when there is no such stage."""
    if not 0 <= index < len(stages):
        return None
    return parse_stage(stages[index], width, height, node_radius)
