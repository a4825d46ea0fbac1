"""Markers for robots and balls."""

import logging
from typing import List, Optional, Tuple

import numpy as np

from refbox_overlay.config.enums import ObjectClass, Team
from refbox_overlay.config.settings import POLYGON_SEGMENTS, ROBOT_LABEL_FONT_SIZE
from refbox_overlay.entities.game.field import FieldGeometry
from refbox_overlay.render.colors import COLORS, FALLBACK_COLOR
from refbox_overlay.render.primitives import DisplayList

logger = logging.getLogger(__name__)

TEAM_COLORS = {
    Team.YELLOW: COLORS["YELLOW"],
    Team.BLUE: COLORS["BLUE"],
}

# Outlined robots: filter samples and the fused model
ROBOT_OUTLINE_COLORS = {
    ObjectClass.SAMPLE: COLORS["WHITE"],
    ObjectClass.MODEL: COLORS["RED"],
}

LABEL_COLORS = {
    Team.YELLOW: COLORS["BLACK"],
    Team.BLUE: COLORS["WHITE"],
}

BALL_COLORS = {
    ObjectClass.PERCEPT: COLORS["ORANGE"],
    ObjectClass.SAMPLE: COLORS["WHITE"],
    ObjectClass.SHADOW: COLORS["MAGENTA"],
    ObjectClass.MODEL: COLORS["RED"],
}

LAST_TOUCHED_COLOR = COLORS["GREY"]


def regular_polygon(radius: float, start: float = 0.0, segments: int = POLYGON_SEGMENTS) -> List[Tuple[float, float]]:
    """Closed vertex ring (first vertex repeated at the end) around the origin."""
    angles = start + np.arange(segments + 1) * (2 * np.pi / segments)
    return np.column_stack([np.cos(angles) * radius, np.sin(angles) * radius]).tolist()


def draw_robot(
    surface: DisplayList,
    geometry: FieldGeometry,
    x: float,
    y: float,
    classification: ObjectClass,
    rotation: float,
    team: Optional[Team] = None,
    robot_id: Optional[int] = None,
    last_touched: bool = False,
    line_width: float = 1,
) -> None:
    """Draw a robot marker and, if ``robot_id`` is given, its number.

    Percepts are discs filled in the team colour. Samples and models are
    outlines; their centre vertex, which shows the orientation, is only
    added for a non-zero rotation.
    """
    outline = regular_polygon(geometry.robot_radius, rotation)

    with surface.transformed(translate=(x, y)):
        if classification == ObjectClass.PERCEPT and team in TEAM_COLORS:
            surface.polygon([(0.0, 0.0)] + outline, TEAM_COLORS[team])
        elif classification in ROBOT_OUTLINE_COLORS:
            centre = [(0.0, 0.0)] if rotation != 0 else []
            surface.line_strip(centre + outline, ROBOT_OUTLINE_COLORS[classification], width=line_width)
        else:
            logger.warning("unknown robot at (%s|%s) classification: %s team: %s", x, y, classification, team)
            surface.polygon(outline, FALLBACK_COLOR)

        if last_touched:
            surface.rect(0.0, 0.0, geometry.robot_radius, LAST_TOUCHED_COLOR)

    if robot_id is not None:
        surface.text(x, y, str(robot_id), LABEL_COLORS.get(team, FALLBACK_COLOR), ROBOT_LABEL_FONT_SIZE, centered=True)


def draw_ball(
    surface: DisplayList,
    geometry: FieldGeometry,
    x: float,
    y: float,
    z: float,
    classification: ObjectClass,
) -> None:
    """Draw a ball disc lifted to ``z`` plus the ball radius."""
    color = BALL_COLORS.get(classification)
    if color is None:
        logger.warning("unknown ball at (%s|%s) classification: %s", x, y, classification)
        color = FALLBACK_COLOR

    with surface.transformed(translate=(x, y)):
        surface.polygon(
            [(0.0, 0.0)] + regular_polygon(geometry.ball_radius),
            color,
            elevation=z + geometry.ball_radius,
        )
