"""Static field drawing: outline, defense areas, goals and marks."""

from typing import Optional

from refbox_overlay.config.enums import DefenseSide, Quadrant
from refbox_overlay.config.settings import GOAL_LINE_WIDTH, MARK_SIZE
from refbox_overlay.entities.game.field import FieldGeometry
from refbox_overlay.render.arc import draw_bres_circle
from refbox_overlay.render.colors import COLORS
from refbox_overlay.render.primitives import Color, DisplayList

LEFT_TEAM_COLOR = COLORS["YELLOW"]
RIGHT_TEAM_COLOR = COLORS["LIGHT_BLUE"]


class FieldRenderer:
    """Draws the field described by a ``FieldGeometry``.

    Only the left defense area and the right goal are described explicitly;
    their counterparts are the same drawing under a mirroring transform.
    """

    def __init__(self, geometry: FieldGeometry, line_color: Color = COLORS["WHITE"]):
        self.geometry = geometry
        self.line_color = line_color

    def draw(self, surface: DisplayList) -> None:
        g = self.geometry

        # Playing field + centre line
        surface.line_strip(
            [
                (0, -g.half_field_height),
                (0, g.half_field_height),
                (-g.half_field_width, g.half_field_height),
                (-g.half_field_width, -g.half_field_height),
                (g.half_field_width, -g.half_field_height),
                (g.half_field_width, g.half_field_height),
                (0, g.half_field_height),
            ],
            self.line_color,
        )

        # Outer boundary
        surface.line_strip(
            [
                (-g.half_width, g.half_height),
                (g.half_width, g.half_height),
                (g.half_width, -g.half_height),
                (-g.half_width, -g.half_height),
                (-g.half_width, g.half_height),
            ],
            self.line_color,
        )

        self.draw_defense_area(surface, DefenseSide.LEFT)
        self.draw_defense_area(surface, DefenseSide.RIGHT)
        self.draw_marks(surface)

    def draw_defense_area(
        self,
        surface: DisplayList,
        side: DefenseSide = DefenseSide.LEFT,
        offset: int = 0,
        color: Optional[Color] = None,
        width: float = 1,
    ) -> None:
        """Draw the defense area of ``side``, its radius enlarged by ``offset``.

        ``width`` applies to the straight segment; the arcs are single pixels.
        """
        g = self.geometry
        color = self.line_color if color is None else color
        radius = int(g.defense_radius + offset)

        with surface.transformed(scale=(g.mirror_sign(side), 1)):
            with surface.transformed(translate=(-g.half_field_width, g.half_defense_line)):
                draw_bres_circle(surface, radius, color, Quadrant.Q_I)
                surface.lines([(radius, 0), (radius, -g.defense_line)], color, width=width)
                with surface.transformed(translate=(0, -g.defense_line)):
                    draw_bres_circle(surface, radius, color, Quadrant.Q_IV)

    def draw_goal(self, surface: DisplayList, color: Color) -> None:
        """Three-sided outline of the right goal."""
        g = self.geometry
        surface.line_strip(
            [
                (g.half_field_width, -g.half_goal_width),
                (g.goal_back, -g.half_goal_width),
                (g.goal_back, g.half_goal_width),
                (g.half_field_width, g.half_goal_width),
            ],
            color,
            width=GOAL_LINE_WIDTH,
        )

    def draw_marks(self, surface: DisplayList) -> None:
        g = self.geometry
        draw_bres_circle(surface, int(g.center_radius), self.line_color)
        surface.rect(0, 0, MARK_SIZE, COLORS["RED"])

        surface.rect(g.penalty_mark_x, 0, MARK_SIZE, RIGHT_TEAM_COLOR)
        self.draw_goal(surface, RIGHT_TEAM_COLOR)

        # point mirror onto the left half
        with surface.transformed(scale=(-1, -1)):
            surface.rect(g.penalty_mark_x, 0, MARK_SIZE, LEFT_TEAM_COLOR)
            self.draw_goal(surface, LEFT_TEAM_COLOR)
