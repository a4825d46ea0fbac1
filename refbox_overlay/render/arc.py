from typing import List, Tuple

from refbox_overlay.config.enums import Quadrant
from refbox_overlay.render.primitives import Color, DisplayList, Primitive


def _symmetric_points(x: int, y: int, quadrants: Quadrant) -> List[Tuple[int, int]]:
    points = []
    if quadrants & Quadrant.Q_I:
        points += [(x, y), (y, x)]
    if quadrants & Quadrant.Q_II:
        points += [(-x, y), (-y, x)]
    if quadrants & Quadrant.Q_III:
        points += [(-x, -y), (-y, -x)]
    if quadrants & Quadrant.Q_IV:
        points += [(x, -y), (y, -x)]
    return points


def bres_circle_points(r: int, quadrants: Quadrant = Quadrant.ALL) -> List[Tuple[int, int]]:
    """
    Integer points of a circle of radius ``r`` around the origin (Bresenham / midpoint).

    Only the octant x <= y is stepped; the rest of the circle is obtained by
    reflection, restricted to ``quadrants``. Duplicates on the diagonals and
    axes are kept.
    """
    if r < 0:
        raise ValueError(f"Circle radius must not be negative, got {r}")
    if not quadrants & Quadrant.ALL:
        raise ValueError("At least one quadrant must be selected")

    r = int(r)
    x = 0
    y = r
    g = 3 - 2 * r
    d = 10 - 4 * r
    ri = 6
    points = []
    while x <= y:
        points += _symmetric_points(x, y, quadrants)
        if g >= 0:
            g += d
            d += 8
            y -= 1
        else:
            g += ri
            d += 4
        ri += 4
        x += 1
    return points


def draw_bres_circle(
    surface: DisplayList, r: int, color: Color, quadrants: Quadrant = Quadrant.ALL
) -> Primitive:
    """Emit the circle (or the selected quadrants of it) around the current origin as points."""
    return surface.points(bres_circle_points(r, quadrants), color)
