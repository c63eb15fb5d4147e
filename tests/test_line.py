"""Tests for line growth, collision, mirrored checks and the end-node rule."""
from __future__ import annotations

import pytest

from mirrorline.line import Line, LineOutcome, extend_line
from mirrorline.stages import StageLayout, parse_stage

W, H, R = 200.0, 100.0, 5.0


def _layout(descriptor: str) -> StageLayout:
    return parse_stage(descriptor, W, H, R)


def _feed(line: Line, layout: StageLayout, *samples: tuple[float, float]) -> list[LineOutcome]:
    return [extend_line(line, layout, x, y, W, H) for x, y in samples]


class TestReset:
    @pytest.mark.parametrize("node_count", [0, 1, 4])
    def test_reset_clears_points_and_active_set(self, node_count):
        line = Line(points=[(1.0, 2.0), (3.0, 4.0)], active=[True, False, True])
        line.reset(node_count)
        assert line.points == []
        assert line.active == [False] * node_count
        assert line.active_count == 0


class TestGrowth:
    def test_line_starts_only_after_start_node(self):
        layout = _layout("S(10,20);E(90,20)")
        line = Line()
        line.reset(len(layout.nodes))

        assert _feed(line, layout, (60, 20)) == [LineOutcome.IDLE]
        assert line.points == []

        assert _feed(line, layout, (20, 20), (60, 20)) == [
            LineOutcome.EXTENDED, LineOutcome.EXTENDED,
        ]
        assert line.points == [(20, 20), (60, 20)]
        assert line.active == [True, False]

    def test_full_route_clears_stage(self):
        layout = _layout("S(10,20);C(50,30);E(90,20)")
        line = Line()
        line.reset(3)

        outcomes = _feed(line, layout, (20, 20), (100, 30), (180, 20))
        assert outcomes == [
            LineOutcome.EXTENDED, LineOutcome.EXTENDED, LineOutcome.STAGE_CLEARED,
        ]
        assert line.active == [True, True, True]
        assert len(line.points) == 3

    def test_end_with_connect_missed_resets(self):
        layout = _layout("S(10,20);C(50,30);E(90,20)")
        line = Line()
        line.reset(3)

        outcomes = _feed(line, layout, (20, 20), (180, 20))
        assert outcomes[-1] is LineOutcome.MISSED_NODE
        assert line.points == []
        assert line.active == [False, False, False]

    def test_empty_layout_never_draws(self):
        line = Line()
        assert _feed(line, StageLayout(), (10, 10)) == [LineOutcome.IDLE]
        assert line.points == []

    def test_active_set_resized_to_layout(self):
        layout = _layout("S(10,20);E(90,20)")
        line = Line()
        _feed(line, layout, (20, 20))
        assert line.active == [True, False]


class TestReflectedField:
    def test_crossing_half_height_clears_line(self):
        layout = _layout("S(10,20);E(90,20)")
        line = Line()
        line.reset(2)
        _feed(line, layout, (20, 20), (30, 30))

        assert _feed(line, layout, (30, 50.5)) == [LineOutcome.LEFT_FIELD]
        assert line.points == []
        assert line.active == [False, False]

    def test_half_height_itself_is_in_field(self):
        layout = _layout("S(10,20);E(90,20)")
        line = Line()
        line.reset(2)
        outcomes = _feed(line, layout, (20, 20), (40, 50))
        assert outcomes == [LineOutcome.EXTENDED, LineOutcome.EXTENDED]

    def test_crossing_does_not_activate_mirrored_nodes(self):
        # (180, 80) mirrors onto the Start node at (20, 20)
        layout = _layout("S(10,20);E(90,20)")
        line = Line()
        line.reset(2)
        assert _feed(line, layout, (180, 80)) == [LineOutcome.LEFT_FIELD]
        assert line.active == [False, False]

    def test_mirrored_sample_activates_lower_node(self):
        # Connect at (60, 70) is only reachable through the mirror of (140, 30)
        layout = _layout("S(10,20);C(30,70);E(90,20)")
        line = Line()
        line.reset(3)
        outcomes = _feed(line, layout, (20, 20), (140, 30), (180, 20))
        assert outcomes[-1] is LineOutcome.STAGE_CLEARED

    def test_symmetric_layout_touches_end_through_mirror(self):
        # Start (20, 50) mirrors onto End (180, 50); the Connect is still untouched
        layout = _layout("S(10,50);C(50,50);E(90,50)")
        line = Line()
        line.reset(3)
        assert _feed(line, layout, (20, 50)) == [LineOutcome.MISSED_NODE]
        assert line.points == []


class TestCollision:
    def test_block_collision_resets(self):
        layout = _layout("S(10,20);B(40,10,10,20);E(90,20)")
        line = Line()
        line.reset(2)
        outcomes = _feed(line, layout, (20, 20), (90, 20))
        assert outcomes == [LineOutcome.EXTENDED, LineOutcome.COLLIDED]
        assert line.points == []
        assert line.active == [False, False]

    def test_mirrored_block_collision_resets(self):
        # Block spans (80..100, 60..80); the mirror of (110, 30) is (90, 70)
        layout = _layout("S(10,20);B(40,60,10,20);E(90,20)")
        line = Line()
        line.reset(2)
        outcomes = _feed(line, layout, (20, 20), (110, 30))
        assert outcomes == [LineOutcome.EXTENDED, LineOutcome.COLLIDED]
        assert line.points == []

    def test_collision_on_node_does_not_activate_it(self):
        layout = _layout("S(10,20);B(5,15,10,10);E(90,20)")
        line = Line()
        line.reset(2)
        assert _feed(line, layout, (20, 20)) == [LineOutcome.COLLIDED]
        assert line.active == [False, False]

    def test_line_resumes_after_collision(self):
        layout = _layout("S(10,20);B(40,10,10,20);E(90,20)")
        line = Line()
        line.reset(2)
        _feed(line, layout, (20, 20), (90, 20))
        assert _feed(line, layout, (20, 20)) == [LineOutcome.EXTENDED]
        assert line.points == [(20, 20)]
