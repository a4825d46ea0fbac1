"""FieldStateRenderer: builds the complete overlay for one frame."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from refbox_overlay.config.enums import ObjectClass
from refbox_overlay.config.settings import MODEL_LINE_WIDTH, RULE_WINDOW
from refbox_overlay.data_sources.base import TrackingSource
from refbox_overlay.entities.data.tracking import BallModel
from refbox_overlay.entities.data.vector import Vector2D
from refbox_overlay.entities.game.field import FieldGeometry
from refbox_overlay.entities.referee.play_state import play_state_string
from refbox_overlay.render.aggregator import FrameObjects, ObjectStateAggregator
from refbox_overlay.render.field import FieldRenderer
from refbox_overlay.render.objects import draw_ball, draw_robot
from refbox_overlay.render.primitives import DisplayList
from refbox_overlay.render.rules_overlay import RuleViolationOverlay

logger = logging.getLogger(__name__)

# The shadow falls toward the bottom right, as far from the ball as the ball is high
SHADOW_DIRECTION = Vector2D(1.0, -1.0)


def ball_shadow(ball_model: BallModel) -> Vector2D:
    return ball_model.pos.to_2d() + SHADOW_DIRECTION.norm() * ball_model.pos.z


class FieldStateRenderer:
    """Renders field, tracked objects and rule overlay from a ``TrackingSource``.

    Usage::

        renderer = FieldStateRenderer(source)
        display_list = renderer.render()

    Later draws occlude earlier ones: field, robot percepts, robot samples,
    robot models, ball percepts, ball samples, ball shadow, ball model, then
    the rule overlay.
    """

    def __init__(
        self,
        source: TrackingSource,
        geometry: Optional[FieldGeometry] = None,
        rule_window: float = RULE_WINDOW,
        play_state_namer: Callable[[int], str] = play_state_string,
    ):
        self.source = source
        self.geometry = geometry if geometry is not None else FieldGeometry.standard()
        self.field_renderer = FieldRenderer(self.geometry)
        self.aggregator = ObjectStateAggregator()
        self.rules_overlay = RuleViolationOverlay(
            self.field_renderer, window=rule_window, play_state_namer=play_state_namer
        )

    def render(self, surface: Optional[DisplayList] = None) -> DisplayList:
        """Draw one frame into ``surface`` (a new display list if omitted) and return it."""
        surface = surface if surface is not None else DisplayList()

        self.field_renderer.draw(surface)

        objects = self.aggregator.aggregate(self.source)
        self.draw_objects(surface, objects)

        self.rules_overlay.draw(
            surface,
            self.source.get_broken_rules(),
            self.source.get_timestamp(),
            objects.robot_models,
            objects.ball_model,
            self.source.get_internal_play_states(),
        )
        return surface

    def draw_objects(self, surface: DisplayList, objects: FrameObjects) -> None:
        g = self.geometry

        for percept in objects.robot_percepts:
            draw_robot(surface, g, percept.x, percept.y, ObjectClass.PERCEPT, percept.orientation, team=percept.team)

        for sample in objects.robot_samples:
            logger.debug("Drawing robot sample of team %s id %s", sample.team, sample.id)
            draw_robot(surface, g, sample.pos.x, sample.pos.y, ObjectClass.SAMPLE, sample.pos.rotation)

        last_touched = objects.ball_model.last_touched
        for model in objects.robot_models:
            draw_robot(
                surface,
                g,
                model.pos.x,
                model.pos.y,
                ObjectClass.MODEL,
                model.pos.rotation,
                team=model.team,
                robot_id=model.id,
                last_touched=last_touched is not None and last_touched.refers_to(model),
                line_width=MODEL_LINE_WIDTH,
            )

        for percept in objects.ball_percepts:
            draw_ball(surface, g, percept.x, percept.y, 0.0, ObjectClass.PERCEPT)

        for sample in objects.ball_samples:
            draw_ball(surface, g, sample.pos.x, sample.pos.y, sample.pos.z, ObjectClass.SAMPLE)

        shadow = ball_shadow(objects.ball_model)
        draw_ball(surface, g, shadow.x, shadow.y, 0.0, ObjectClass.SHADOW)

        model = objects.ball_model
        draw_ball(surface, g, model.pos.x, model.pos.y, model.pos.z, ObjectClass.MODEL)
