"""Display list of 2D drawing primitives in field coordinates."""

from __future__ import annotations

from contextlib import contextmanager
from enum import Enum
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple

import numpy as np

Point = Tuple[float, float]
Color = Tuple[int, int, int]


class PrimitiveType(Enum):
    POINTS = 0
    LINE_STRIP = 1
    LINES = 2  # independent segments, points taken pairwise
    POLYGON = 3  # filled
    QUAD = 4  # filled rectangle given by its four corners
    TEXT = 5


class Primitive(NamedTuple):
    """One drawing instruction; ``points`` are already transformed to field coordinates."""

    type: PrimitiveType
    color: Color
    points: Tuple[Point, ...]
    width: float = 1
    elevation: float = 0.0
    text: Optional[str] = None
    font_size: Optional[int] = None
    centered: bool = False


def _translation(tx: float, ty: float) -> np.ndarray:
    return np.array([[1.0, 0.0, tx], [0.0, 1.0, ty], [0.0, 0.0, 1.0]])


def _scaling(sx: float, sy: float) -> np.ndarray:
    return np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]])


class DisplayList:
    """Collects primitives emitted by the draw routines of one frame.

    Draw calls take coordinates relative to the current origin. ``transformed``
    pushes a translation and/or scale on a matrix stack, so mirrored geometry
    is produced by drawing the same shape under a sign-flipping scale.
    """

    def __init__(self):
        self.primitives: List[Primitive] = []
        self._stack: List[np.ndarray] = [np.identity(3)]

    def __iter__(self) -> Iterator[Primitive]:
        return iter(self.primitives)

    def __len__(self) -> int:
        return len(self.primitives)

    def __getitem__(self, index):
        return self.primitives[index]

    def clear(self) -> None:
        if len(self._stack) != 1:
            raise ValueError("Cannot clear a display list inside a transform block")
        self.primitives.clear()

    @contextmanager
    def transformed(self, translate: Point = (0.0, 0.0), scale: Point = (1.0, 1.0)):
        """Apply ``translate`` then ``scale`` to everything drawn inside the block."""
        matrix = self._stack[-1] @ _translation(*translate) @ _scaling(*scale)
        self._stack.append(matrix)
        try:
            yield self
        finally:
            self._stack.pop()

    def to_field(self, points: Iterable[Point]) -> Tuple[Point, ...]:
        """Map points from the current local frame to field coordinates."""
        local = np.asarray(list(points), dtype=float).reshape(-1, 2)
        if local.size == 0:
            return ()
        homogeneous = np.hstack([local, np.ones((local.shape[0], 1))])
        world = homogeneous @ self._stack[-1].T
        # + 0.0 folds negative zeros produced by mirroring
        return tuple((float(x) + 0.0, float(y) + 0.0) for x, y in world[:, :2])

    def _emit(self, kind: PrimitiveType, color: Color, points: Iterable[Point], **kwargs) -> Primitive:
        primitive = Primitive(kind, tuple(color), self.to_field(points), **kwargs)
        self.primitives.append(primitive)
        return primitive

    # ------------------------------------------------------------------
    # Drawing interface
    # ------------------------------------------------------------------

    def points(self, points: Iterable[Point], color: Color) -> Primitive:
        return self._emit(PrimitiveType.POINTS, color, points)

    def line_strip(self, points: Iterable[Point], color: Color, width: float = 1) -> Primitive:
        return self._emit(PrimitiveType.LINE_STRIP, color, points, width=width)

    def lines(self, points: Iterable[Point], color: Color, width: float = 1) -> Primitive:
        return self._emit(PrimitiveType.LINES, color, points, width=width)

    def polygon(self, points: Iterable[Point], color: Color, elevation: float = 0.0) -> Primitive:
        return self._emit(PrimitiveType.POLYGON, color, points, width=0, elevation=elevation)

    def rect(self, x: float, y: float, size: float, color: Color) -> Primitive:
        """Filled square of side ``size`` centred on (x, y)."""
        off = size * 0.5
        corners = [(x - off, y + off), (x + off, y + off), (x + off, y - off), (x - off, y - off)]
        return self._emit(PrimitiveType.QUAD, color, corners, width=0)

    def text(self, x: float, y: float, text: str, color: Color, font_size: int, centered: bool = False) -> Primitive:
        """Text anchored at its lower left corner, or at its centre if ``centered``."""
        return self._emit(PrimitiveType.TEXT, color, [(x, y)], text=text, font_size=font_size, centered=centered)
