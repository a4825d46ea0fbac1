"""Rasterizes a ``DisplayList`` onto a pygame surface (top-down view)."""

import logging
from typing import Dict, Optional, Tuple

import numpy as np
import pygame

from refbox_overlay.entities.game.field import FieldGeometry
from refbox_overlay.render.colors import COLORS
from refbox_overlay.render.primitives import DisplayList, Primitive, PrimitiveType

logger = logging.getLogger(__name__)


class PygameSurface:
    """Maps field millimetres to pixels and draws display lists with pygame.

    The whole outer boundary is fitted into ``window_size``; +y points up on
    the field and down on screen. Elevation is ignored in this projection.
    """

    def __init__(
        self,
        geometry: FieldGeometry,
        window_size: Tuple[int, int] = (1000, 730),
        surface: Optional[pygame.Surface] = None,
        background=COLORS["FIELD_GREEN"],
    ):
        self.geometry = geometry
        self.window_size = window_size
        self.surface = surface if surface is not None else pygame.Surface(window_size)
        self.background = background
        self.scale = min(
            window_size[0] / (2 * geometry.half_width),
            window_size[1] / (2 * geometry.half_height),
        )
        self.center_x = window_size[0] / 2
        self.center_y = window_size[1] / 2
        self._fonts: Dict[int, pygame.font.Font] = {}

    def _pos_transform(self, pos_x: float, pos_y: float) -> Tuple[int, int]:
        return (
            int(round(pos_x * self.scale + self.center_x)),
            int(round(-pos_y * self.scale + self.center_y)),
        )

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def draw(self, display_list: DisplayList) -> pygame.Surface:
        self.surface.fill(self.background)
        for primitive in display_list:
            self.draw_primitive(primitive)
        return self.surface

    def draw_primitive(self, primitive: Primitive) -> None:
        if not np.isfinite(np.asarray(primitive.points, dtype=float)).all():
            logger.warning("Skipping %s with non-finite points: %s", primitive.type.name, primitive.points)
            return

        points =[self._pos_transform(x, y) for x, y in primitive.points]
        color = primitive.color
        width = max(1, int(primitive.width))

        if primitive.type == PrimitiveType.POINTS:
            for point in points:
                self.surface.set_at(point, color)
        elif primitive.type == PrimitiveType.LINE_STRIP:
            if len(points) >= 2:
                pygame.draw.lines(self.surface, color, False, points, width)
        elif primitive.type == PrimitiveType.LINES:
            for start, end in zip(points[0::2], points[1::2]):
                pygame.draw.line(self.surface, color, start, end, width)
        elif primitive.type in (PrimitiveType.POLYGON, PrimitiveType.QUAD):
            if len(points) >= 3:
                pygame.draw.polygon(self.surface, color, points, width=0)
            elif points:
                # shapes smaller than a pixel
                self.surface.set_at(points[0], color)
        elif primitive.type == PrimitiveType.TEXT:
            rendered = self._font(primitive.font_size).render(primitive.text, True, color)
            rect = rendered.get_rect()
            if primitive.centered:
                rect.center = points[0]
            else:
                rect.bottomleft = points[0]
            self.surface.blit(rendered, rect)

    def to_array(self) -> np.ndarray:
        """RGB pixels as a (height, width, 3) array."""
        return np.transpose(np.array(pygame.surfarray.pixels3d(self.surface)), axes=(1, 0, 2))
