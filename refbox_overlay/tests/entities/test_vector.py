import math
import pickle

import numpy as np
import pytest

from refbox_overlay.entities.data.vector import Vector2D, Vector3D


def test_from_array():
    assert Vector2D.from_array((1, 2)) == Vector2D(1, 2)
    assert Vector2D.from_array(np.array([1, 2])) == Vector2D(1.0, 2.0)
    assert Vector3D.from_array([1, 2, 3]).z == 3.0
    with pytest.raises(ValueError):
        Vector2D.from_array((1, 2, 3))


def test_arithmetic():
    v = Vector2D(3, 4)
    assert v.mag() == 5
    assert v + Vector2D(1, 1) == Vector2D(4, 5)
    assert v - Vector2D(1, 1) == Vector2D(2, 3)
    assert 2 * v == v * 2 == Vector2D(6, 8)
    assert v.norm() == Vector2D(0.6, 0.8)
    assert Vector2D(0, 0).norm() == Vector2D(0, 0)


def test_tolerant_equality():
    assert Vector2D(0.1 + 0.2, 1) == Vector2D(0.3, 1)
    assert Vector2D(1, 1) != Vector2D(1, 1.001)
    assert Vector3D(1, 2, 3) != Vector2D(1, 2)


def test_to_2d_and_array():
    v = Vector3D(1, 2, 3)
    assert v.to_2d() == Vector2D(1, 2)
    assert np.array(v).tolist() == [1.0, 2.0, 3.0]
    assert math.isclose(np.linalg.norm(Vector2D(3, 4)), 5.0)
    assert list(v) == [1, 2, 3]


def test_pickle():
    v = Vector3D(1.5, -2.5, 3.0)
    restored = pickle.loads(pickle.dumps(v))
    assert restored == v
    assert list(restored) == [1.5, -2.5, 3.0]
