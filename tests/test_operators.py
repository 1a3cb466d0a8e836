"""Test gradient, directional derivative and the field operators."""

import math

import pytest

from mvcalc import (
    Vector,
    curl_2d,
    directional_derivative,
    divergence,
    gradient,
    normalize,
    tangent_plane,
)


def test_gradient_in_the_plane(sympy_evaluator):
    grad = gradient("x^2 * y + y^3", (1, 2), evaluator=sympy_evaluator)
    assert grad.dimension == 2
    assert grad.x == pytest.approx(4.0, abs=1e-3)
    assert grad.y == pytest.approx(13.0, abs=1e-3)


def test_gradient_size_follows_the_point(sympy_evaluator):
    """Test that a point with z yields a three-component gradient."""
    grad = gradient("x*y*z", (1, 2, 3), evaluator=sympy_evaluator)
    assert grad.dimension == 3
    assert grad.x == pytest.approx(6.0, abs=1e-6)
    assert grad.y == pytest.approx(3.0, abs=1e-6)
    assert grad.z == pytest.approx(2.0, abs=1e-6)


def test_gradient_keeps_defined_components(stub_evaluator):
    grad = gradient("cubic", (1, 0), evaluator=stub_evaluator)
    assert grad.x == pytest.approx(3.0, abs=1e-6)
    assert grad.y == 0.0


def test_directional_derivative_along_unit_vector(sympy_evaluator):
    expr = "x^2 * y + y^3"
    u = normalize((3, 4))
    grad = gradient(expr, (1, 2), evaluator=sympy_evaluator)

    result = directional_derivative(expr, (1, 2), u, evaluator=sympy_evaluator)
    assert result == grad.dot(u)
    assert result == pytest.approx(0.6 * 4 + 0.8 * 13, abs=1e-3)


def test_direction_is_used_as_given(stub_evaluator):
    """Test that the direction is not normalized behind the caller's back."""
    unit = directional_derivative("bowl", (1, 2), (1, 0), evaluator=stub_evaluator)
    doubled = directional_derivative("bowl", (1, 2), (2, 0), evaluator=stub_evaluator)
    assert doubled == pytest.approx(2 * unit)


def test_spatial_direction_with_planar_point_ignores_z(stub_evaluator):
    result = directional_derivative("bowl", (1, 2), (1, 0, 5), evaluator=stub_evaluator)
    assert result == pytest.approx(2.0, abs=1e-6)


def test_divergence(sympy_evaluator):
    assert divergence(["x^2", "y^2"], (1, 2), evaluator=sympy_evaluator) == pytest.approx(6.0, abs=1e-6)
    assert divergence(["x", "y", "z"], (1, 1, 1), evaluator=sympy_evaluator) == pytest.approx(3.0, abs=1e-6)


def test_divergence_dimension_mismatch_raises(sympy_evaluator):
    with pytest.raises(ValueError):
        divergence(["x", "y", "z"], (1, 2), evaluator=sympy_evaluator)


def test_curl_of_rotation_field(sympy_evaluator):
    assert curl_2d("-y", "x", (1, 1), evaluator=sympy_evaluator) == pytest.approx(2.0, abs=1e-6)
    assert curl_2d("2*x", "2*y", (1, 1), evaluator=sympy_evaluator) == pytest.approx(0.0, abs=1e-6)


def test_tangent_plane(sympy_evaluator):
    plane = tangent_plane("x^2 + 2*y^2", (1, 1), evaluator=sympy_evaluator)
    assert plane.value == pytest.approx(3.0)
    assert plane.slope_x == pytest.approx(2.0, abs=1e-6)
    assert plane.slope_y == pytest.approx(4.0, abs=1e-6)
    assert plane.at(1, 1) == pytest.approx(3.0)
    assert str(plane) == "z = 2x + 4y - 3"


def test_tangent_plane_at_undefined_point(sympy_evaluator):
    plane = tangent_plane("log(x)", (0, 1), evaluator=sympy_evaluator)
    assert math.isnan(plane.value)


def test_normalize_keeps_vector_type():
    assert isinstance(normalize(Vector(0, 2)), Vector)
    assert normalize(Vector(0, 2)) == Vector(0.0, 1.0)
