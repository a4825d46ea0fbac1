import logging
import math

import pytest

from refbox_overlay.config.enums import DefenseSide, Team
from refbox_overlay.config.settings import NEXT_PLAY_STATE_POS, PLAY_STATE_POS
from refbox_overlay.entities.data.rules import BrokenRule
from refbox_overlay.entities.data.tracking import BallModel, Pose, RobotRef, RobotSample
from refbox_overlay.entities.data.vector import Vector2D, Vector3D
from refbox_overlay.entities.game.field import FieldGeometry
from refbox_overlay.render.colors import COLORS
from refbox_overlay.render.field import FieldRenderer
from refbox_overlay.render.primitives import DisplayList, PrimitiveType
from refbox_overlay.render.rules_overlay import RuleViolationOverlay, describe_rule, recent_rules

GEO = FieldGeometry.standard()
BALL = BallModel(Vector3D(-400, 300, 0))
ROBOTS = (
    RobotSample(Team.YELLOW, 4, Pose(1000, 500)),
    RobotSample(Team.BLUE, 4, Pose(-1000, -500)),
)


def _overlay(**kwargs) -> RuleViolationOverlay:
    return RuleViolationOverlay(FieldRenderer(GEO), **kwargs)


def _draw(rules, now=10000, play_states=(0, 0), **kwargs):
    dl = DisplayList()
    shown = _overlay(**kwargs).draw(dl, rules, now, ROBOTS, BALL, play_states)
    return dl, shown


def _texts(dl):
    return [p.text for p in dl if p.type == PrimitiveType.TEXT]


def _rule_texts(dl):
    return _texts(dl)[:-2]


def _shapes(dl):
    return [p for p in dl if p.type != PrimitiveType.TEXT]


@pytest.mark.parametrize("age, shown", [(100, 1), (4999, 1), (5000, 1), (5001, 0), (9000, 0)])
def test_window(age, shown):
    dl, count = _draw([BrokenRule(1, 10000 - age)])
    assert count == shown
    assert len(_rule_texts(dl)) == shown


def test_newest_first_and_stops_at_first_stale_rule():
    rules = [
        BrokenRule(3, 9500),  # recent, but behind a stale one
        BrokenRule(2, 1000),
        BrokenRule(1, 8000),
        BrokenRule(21, 9000),
    ]
    assert [r.rule_number for r in recent_rules(rules, 10000)] == [21, 1]


def test_custom_window():
    rules = [BrokenRule(1, 9000), BrokenRule(2, 9900)]
    assert [r.rule_number for r in recent_rules(rules, 10000, window=500)] == [2]


def test_text_lines_stack_downwards():
    dl, shown = _draw([BrokenRule(1, 9000), BrokenRule(2, 9100), BrokenRule(3, 9200)])
    assert shown == 3
    lines = [p for p in dl if p.type == PrimitiveType.TEXT][:3]
    x = -GEO.half_field_width + 100
    assert [p.points[0] for p in lines] == [
        (x, GEO.half_field_height - 200),
        (x, GEO.half_field_height - 450),
        (x, GEO.half_field_height - 700),
    ]
    assert [p.text for p in lines] == [
        "Ball not in play before kickoff",
        "Ball out over goal line",
        "Ball out over touch line",
    ]
    assert all(p.color == COLORS["WHITE"] and p.font_size == 24 for p in lines)


def test_rule_without_hints_draws_only_text():
    dl, _ = _draw([BrokenRule.from_raw(7, 9000)])
    assert _shapes(dl) == []
    assert _rule_texts(dl) == ["Kicker touched ball twice"]


def test_breaker_ring_around_matching_model_only():
    dl, _ = _draw([BrokenRule.from_raw(21, 9000, rule_breaker=(0, 4))])
    rings = _shapes(dl)
    assert len(rings) == 1
    ring = rings[0]
    assert ring.type == PrimitiveType.LINE_STRIP
    assert ring.color == COLORS["RED"]
    assert ring.width == 2
    assert len(ring.points) == 25
    assert all(math.hypot(x - 1000, y - 500) == pytest.approx(GEO.robot_radius + 100) for x, y in ring.points)
    assert _rule_texts(dl) == ["Robot pushing by Yellow 4"]


def test_breaker_without_model_draws_no_ring():
    dl, _ = _draw([BrokenRule.from_raw(21, 9000, rule_breaker=(1, 7))])
    assert _shapes(dl) == []
    assert _rule_texts(dl) == ["Robot pushing by Blue 7"]


def test_freekick_cross():
    dl, _ = _draw([BrokenRule.from_raw(10, 9000, freekick_pos=(100, 200))])
    (cross,) = _shapes(dl)
    assert cross.type == PrimitiveType.LINES
    assert cross.width == 3
    assert cross.points == ((10, 110), (190, 290), (10, 290), (190, 110))


def test_circle_around_ball():
    dl, _ = _draw([BrokenRule.from_raw(8, 9000, circle_around_ball=True)])
    (circle,) = _shapes(dl)
    assert circle.type == PrimitiveType.LINE_STRIP
    assert all(math.hypot(x + 400, y - 300) == pytest.approx(500) for x, y in circle.points)


@pytest.mark.parametrize("raw_side, side", [(0, DefenseSide.LEFT), (1, DefenseSide.RIGHT)])
def test_defense_area_highlight(raw_side, side):
    dl, _ = _draw([BrokenRule.from_raw(16, 9000, defense_area=raw_side)])
    shapes = _shapes(dl)
    assert len(shapes) == 3
    assert all(p.color == COLORS["RED"] for p in shapes)

    expected = DisplayList()
    FieldRenderer(GEO).draw_defense_area(expected, side, offset=200, color=COLORS["RED"])
    assert [p.points for p in shapes] == [p.points for p in expected]
    assert shapes[1].type == PrimitiveType.LINES
    assert shapes[1].width == 2


def test_highlighted_line():
    dl, _ = _draw([BrokenRule.from_raw(1, 9000, line_for_smth=((0, 2025), (3025, 2025)))])
    (line,) = _shapes(dl)
    assert line.type == PrimitiveType.LINES
    assert line.points == ((0, 2025), (3025, 2025))
    assert line.width == 3


def test_all_hints_together():
    rule = BrokenRule.from_raw(
        16,
        9000,
        rule_breaker=(1, 4),
        freekick_pos=(0, 0),
        circle_around_ball=True,
        defense_area=1,
        line_for_smth=((1, 1), (2, 2)),
    )
    dl, _ = _draw([rule])
    # ring, cross, ball circle, 3 defense area parts, line
    assert len(_shapes(dl)) == 7


@pytest.mark.parametrize("rule_number", [0, 43, -5])
def test_unknown_rule_number(rule_number, caplog):
    with caplog.at_level(logging.WARNING):
        dl, shown = _draw([BrokenRule(rule_number, 9000)])
    assert shown == 1
    assert _rule_texts(dl) == ["unknown"]
    assert f"Bad index for rule: {rule_number}" in caplog.text


def test_score_rule_with_breaker():
    rule = BrokenRule.from_raw(29, 9000, rule_breaker=(1, 4), standing=(2, 1))
    assert describe_rule(rule) == "Goal by Blue 4 New Standing: 2:1"


def test_score_rule_without_breaker():
    rule = BrokenRule.from_raw(29, 9000, standing=(0, 3))
    assert describe_rule(rule) == "Goal New Standing: 0:3"


def test_standing_only_shown_for_score_rule():
    rule = BrokenRule(rule_number=21, when_broken=0, rule_breaker=RobotRef(Team.YELLOW, 2), standing=(5, 5))
    assert describe_rule(rule) == "Robot pushing by Yellow 2"


def test_play_state_labels():
    dl, _ = _draw([], play_states=(2, 1))
    current, upcoming = [p for p in dl if p.type == PrimitiveType.TEXT]
    assert current.text == "internal Play_State: RUNNING"
    assert upcoming.text == "next internal Play_State: STOPPED"
    assert current.points[0] == PLAY_STATE_POS
    assert upcoming.points[0] == NEXT_PLAY_STATE_POS
    assert current.font_size == upcoming.font_size == 10


def test_unknown_play_state(caplog):
    with caplog.at_level(logging.WARNING):
        dl, _ = _draw([], play_states=(99, 0))
    assert _texts(dl)[0] == "internal Play_State: UNKNOWN"
    assert "99" in caplog.text


def test_custom_play_state_namer():
    dl, _ = _draw([], play_states=(3, 4), play_state_namer=lambda state: f"state-{state}")
    assert _texts(dl) == ["internal Play_State: state-3", "next internal Play_State: state-4"]


def test_empty_rule_log_still_draws_play_states():
    dl, shown = _draw([])
    assert shown == 0
    assert len(dl) == 2


def test_rule_positions_use_vectors():
    rule = BrokenRule.from_raw(10, 0, freekick_pos=(100, 200))
    assert rule.freekick_pos == Vector2D(100, 200)
