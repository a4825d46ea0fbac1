"""Field vectors in millimetres.

Equality is tolerant (``math.isclose`` per component) since positions come
out of filters and float transforms.
"""

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class Vector2D:
    x: float
    y: float

    @classmethod
    def from_array(cls, values) -> "Vector2D":
        """Build from any 2-element sequence or array."""
        x, y = np.asarray(values, dtype=float).reshape(2)
        return cls(float(x), float(y))

    def __iter__(self):
        return iter((self.x, self.y))

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return math.isclose(self.x, other.x) and math.isclose(self.y, other.y)

    def __hash__(self):
        return hash((self.x, self.y))

    def __array__(self, dtype=None, copy=None):
        return np.array([self.x, self.y], dtype=dtype)

    def mag(self) -> float:
        return math.hypot(self.x, self.y)

    def norm(self) -> "Vector2D":
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.mag()
        if length < 1e-8:
            return Vector2D(0.0, 0.0)
        return self * (1.0 / length)


@dataclass(frozen=True, eq=False)
class Vector3D:
    """Position with height above the ground (z)."""

    x: float
    y: float
    z: float

    @classmethod
    def from_array(cls, values) -> "Vector3D":
        x, y, z = np.asarray(values, dtype=float).reshape(3)
        return cls(float(x), float(y), float(z))

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return all(math.isclose(a, b) for a, b in zip(self, other))

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __array__(self, dtype=None, copy=None):
        return np.array([self.x, self.y, self.z], dtype=dtype)

    def to_2d(self) -> Vector2D:
        """Ground projection."""
        return Vector2D(self.x, self.y)
