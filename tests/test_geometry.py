"""Test Point and Vector value types."""

import dataclasses
import math

import numpy as np
import pytest

from mvcalc import Point, Vector, normalize, sample_path


def test_planar_and_spatial_coordinates():
    assert Point(1, 2).coordinates == ("x", "y")
    assert Point(1, 2, 3).coordinates == ("x", "y", "z")
    assert Point(1, 2).dimension == 2
    assert list(Point(1, 2, 3)) == [1, 2, 3]


def test_points_are_immutable():
    p = Point(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5.0


def test_shifted_returns_new_point():
    p = Point(1.0, 2.0)
    q = p.shifted("y", 0.5)
    assert q == Point(1.0, 2.5)
    assert p == Point(1.0, 2.0)


def test_shifting_unpopulated_z_starts_from_zero():
    assert Point(1.0, 2.0).shifted("z", 0.25) == Point(1.0, 2.0, 0.25)


def test_unknown_coordinate_raises():
    with pytest.raises(ValueError):
        Point(0, 0).get("w")


def test_bindings():
    assert Point(1, 2).as_bindings() == {"x": 1.0, "y": 2.0}
    assert Point(1, 2, 3).as_bindings() == {"x": 1.0, "y": 2.0, "z": 3.0}


@pytest.mark.parametrize("value, expected", [
    ((1, 2), Point(1.0, 2.0)),
    ([1, 2, 3], Point(1.0, 2.0, 3.0)),
    ({"x": 1, "y": 2}, Point(1.0, 2.0)),
    (0, Point(0.0, 0.0)),
    (Point(4, 5), Point(4, 5)),
])
def test_coerce(value, expected):
    assert Point.coerce(value) == expected


def test_coerce_rejects_wrong_length():
    with pytest.raises(ValueError):
        Point.coerce((1,))


def test_vector_dot_uses_shared_coordinates():
    assert Vector(1, 2).dot(Vector(3, 4)) == 11
    assert Vector(1, 2, 3).dot(Vector(1, 1, 1)) == 6
    # z only counts when both sides have it
    assert Vector(1, 2, 3).dot(Vector(1, 1)) == 3


def test_normalize_unit_length():
    u = normalize((3, 4))
    assert isinstance(u, Vector)
    assert u == Vector(0.6, 0.8)
    assert u.magnitude == pytest.approx(1.0)
    assert normalize((1, 2, 2)).magnitude == pytest.approx(1.0)


def test_normalize_zero_vector_is_zero():
    """Test that the zero vector normalizes to itself instead of failing."""
    assert normalize((0, 0)) == Vector(0.0, 0.0)
    assert normalize((0, 0, 0)) == Vector(0.0, 0.0, 0.0)
    assert normalize(Vector(0, 0)).is_zero


def test_vector_magnitude_and_scale():
    v = Vector(3, 4)
    assert v.magnitude == 5.0
    assert v.scaled(2) == Vector(6, 8)
    assert not math.isnan(Vector(0, 0).magnitude)


def test_coerce_accepts_numpy_scalars():
    assert Point.coerce(np.int64(0)) == Point(0.0, 0.0)
    assert Point.coerce(np.float32(1.5)) == Point(1.5, 1.5)
    assert isinstance(Point.coerce(np.int64(2)).x, float)


def test_sample_path_with_numpy_target(stub_evaluator):
    result = sample_path("sum", np.int64(0), "axis-x", evaluator=stub_evaluator)
    assert result.target == Point(0.0, 0.0)
    assert result.estimate == pytest.approx(0.005)
