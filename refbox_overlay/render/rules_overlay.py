"""Overlay for recently broken rules and the rule engine's play states."""

from __future__ import annotations

import logging
from typing import Callable, Iterator, Sequence

from refbox_overlay.config.enums import Team
from refbox_overlay.config.settings import (
    BALL_CIRCLE_RADIUS,
    BREAKER_RING_MARGIN,
    BREAKER_RING_SEGMENTS,
    DEFENSE_AREA_HIGHLIGHT_OFFSET,
    FREEKICK_CROSS_HALF_LENGTH,
    NEXT_PLAY_STATE_POS,
    OVERLAY_LINE_WIDTH,
    OVERLAY_THICK_LINE_WIDTH,
    PLAY_STATE_FONT_SIZE,
    PLAY_STATE_POS,
    RULE_TEXT_FONT_SIZE,
    RULE_TEXT_LINE_SPACING,
    RULE_TEXT_MARGIN_X,
    RULE_TEXT_MARGIN_Y,
    RULE_WINDOW,
    SCORE_RULE_NUMBER,
)
from refbox_overlay.entities.data.rules import BrokenRule
from refbox_overlay.entities.data.tracking import BallModel, RobotSample
from refbox_overlay.entities.referee.play_state import play_state_string
from refbox_overlay.entities.referee.rule_names import rule_name
from refbox_overlay.render.colors import COLORS
from refbox_overlay.render.field import FieldRenderer
from refbox_overlay.render.objects import regular_polygon
from refbox_overlay.render.primitives import DisplayList

logger = logging.getLogger(__name__)

HIGHLIGHT_COLOR = COLORS["RED"]
TEXT_COLOR = COLORS["WHITE"]


def recent_rules(broken_rules: Sequence[BrokenRule], now: float, window: float = RULE_WINDOW) -> Iterator[BrokenRule]:
    """Yield the rules broken within ``window`` of ``now``, newest first.

    ``broken_rules`` is ordered oldest to newest, so the scan stops at the
    first rule that is too old.
    """
    for rule in reversed(broken_rules):
        if now - rule.when_broken > window:
            break
        yield rule


def team_name(team: Team) -> str:
    return "Yellow" if team == Team.YELLOW else "Blue"


def describe_rule(rule: BrokenRule) -> str:
    """One-line description, e.g. ``"Robot pushing by Blue 4"``."""
    text = rule_name(rule.rule_number)
    if rule.rule_breaker is not None:
        text += f" by {team_name(rule.rule_breaker.team)} {rule.rule_breaker.id}"
    if rule.rule_number == SCORE_RULE_NUMBER:
        text += f" New Standing: {rule.standing[0]}:{rule.standing[1]}"
    return text


class RuleViolationOverlay:
    """Draws every rule broken in the last ``window`` time units.

    Each part of a violation (breaker ring, freekick cross, ball circle,
    defense area, line) is drawn only when the event carries it; the text
    line is always drawn.
    """

    def __init__(
        self,
        field_renderer: FieldRenderer,
        window: float = RULE_WINDOW,
        play_state_namer: Callable[[int], str] = play_state_string,
    ):
        self.field_renderer = field_renderer
        self.geometry = field_renderer.geometry
        self.window = window
        self.play_state_namer = play_state_namer

    def draw(
        self,
        surface: DisplayList,
        broken_rules: Sequence[BrokenRule],
        now: float,
        robot_models: Sequence[RobotSample],
        ball_model: BallModel,
        play_states: tuple[int, int],
    ) -> int:
        """Draw the overlay and return the number of violations shown."""
        shown = 0
        for rule in recent_rules(broken_rules, now, self.window):
            self.draw_rule(surface, rule, shown, robot_models, ball_model)
            shown += 1
        self.draw_play_states(surface, play_states)
        return shown

    def draw_rule(
        self,
        surface: DisplayList,
        rule: BrokenRule,
        line_index: int,
        robot_models: Sequence[RobotSample],
        ball_model: BallModel,
    ) -> None:
        g = self.geometry

        if rule.rule_breaker is not None:
            ring = regular_polygon(g.robot_radius + BREAKER_RING_MARGIN, segments=BREAKER_RING_SEGMENTS)
            for robot in robot_models:
                if rule.rule_breaker.refers_to(robot):
                    with surface.transformed(translate=(robot.pos.x, robot.pos.y)):
                        surface.line_strip(ring, HIGHLIGHT_COLOR, width=OVERLAY_LINE_WIDTH)

        if rule.freekick_pos is not None:
            half = FREEKICK_CROSS_HALF_LENGTH
            with surface.transformed(translate=(rule.freekick_pos.x, rule.freekick_pos.y)):
                surface.lines(
                    [(-half, -half), (half, half), (-half, half), (half, -half)],
                    HIGHLIGHT_COLOR,
                    width=OVERLAY_THICK_LINE_WIDTH,
                )

        if rule.circle_around_ball:
            with surface.transformed(translate=(ball_model.pos.x, ball_model.pos.y)):
                surface.line_strip(regular_polygon(BALL_CIRCLE_RADIUS), HIGHLIGHT_COLOR, width=OVERLAY_LINE_WIDTH)

        if rule.defense_area is not None:
            self.field_renderer.draw_defense_area(
                surface,
                rule.defense_area,
                offset=DEFENSE_AREA_HIGHLIGHT_OFFSET,
                color=HIGHLIGHT_COLOR,
                width=OVERLAY_LINE_WIDTH,
            )

        if rule.line is not None:
            surface.lines(
                [(rule.line.p1.x, rule.line.p1.y), (rule.line.p2.x, rule.line.p2.y)],
                HIGHLIGHT_COLOR,
                width=OVERLAY_THICK_LINE_WIDTH,
            )

        x = -g.half_field_width + RULE_TEXT_MARGIN_X
        y = g.half_field_height - RULE_TEXT_MARGIN_Y - line_index * RULE_TEXT_LINE_SPACING
        surface.text(x, y, describe_rule(rule), TEXT_COLOR, RULE_TEXT_FONT_SIZE)

    def draw_play_states(self, surface: DisplayList, play_states: tuple[int, int]) -> None:
        current, upcoming = play_states
        surface.text(
            *PLAY_STATE_POS,
            f"internal Play_State: {self.play_state_namer(current)}",
            TEXT_COLOR,
            PLAY_STATE_FONT_SIZE,
        )
        surface.text(
            *NEXT_PLAY_STATE_POS,
            f"next internal Play_State: {self.play_state_namer(upcoming)}",
            TEXT_COLOR,
            PLAY_STATE_FONT_SIZE,
        )
