"""Test the conservative field heuristic."""

import math

import pytest

from mvcalc import Point, potential_hint
from mvcalc import test_conservative as check_conservative
from mvcalc.analyzers import DEFAULT_SAMPLE_POINTS
from mvcalc.core.results import FIELD_CAVEAT


def test_gradient_field_is_conservative(sympy_evaluator):
    """(2x, 2y) is the gradient of x^2 + y^2."""
    result = check_conservative("2*x", "2*y", evaluator=sympy_evaluator)

    assert result.conservative
    assert result.match_count == 4
    assert result.matches == [True] * 4
    assert [e.point for e in result.evidence] == list(DEFAULT_SAMPLE_POINTS)


def test_rotation_field_is_not_conservative(sympy_evaluator):
    result = check_conservative("-y", "x", evaluator=sympy_evaluator)

    assert not result.conservative
    assert result.match_count == 0
    assert result.dP_dy == pytest.approx([-1.0] * 4, abs=1e-6)
    assert result.dQ_dx == pytest.approx([1.0] * 4, abs=1e-6)
    assert all(e.difference == pytest.approx(2.0, abs=1e-6) for e in result.evidence)


def test_custom_sample_points(sympy_evaluator):
    """(xy, x^2/2) is the gradient of x^2 y / 2."""
    points = [(0.5, 0.5), Point(3, -2), {"x": -4, "y": 1}]
    result = check_conservative("x*y", "x^2/2", points, evaluator=sympy_evaluator)

    assert len(result.evidence) == 3
    assert result.evidence[1].point == Point(3.0, -2.0)
    assert result.conservative


def test_undefined_partials_never_match(stub_evaluator):
    result = check_conservative("nowhere", "nowhere", evaluator=stub_evaluator)

    assert result.match_count == 0
    assert not result.conservative
    assert all(math.isnan(v) for v in result.dP_dy)


def test_partially_undefined_field(sympy_evaluator):
    """Test that a point where P is undefined counts as a mismatch."""
    result = check_conservative("log(y)", "0", [(1, 1), (1, -1)], evaluator=sympy_evaluator)
    assert result.matches == [False, False]

    result = check_conservative("log(x)", "0", [(1, 1), (-1, 1)], evaluator=sympy_evaluator)
    assert result.matches == [True, False]


def test_result_is_flagged_heuristic(sympy_evaluator):
    result = check_conservative("2*x", "2*y", evaluator=sympy_evaluator)
    assert result.is_heuristic
    assert result.caveat == FIELD_CAVEAT


def test_no_sample_points_is_not_conservative(sympy_evaluator):
    result = check_conservative("2*x", "2*y", [], evaluator=sympy_evaluator)
    assert result.evidence == ()
    assert not result.conservative


def test_potential_hint(sympy_evaluator):
    assert potential_hint("2*x", "2*y", evaluator=sympy_evaluator) == "f(x,y) = ∫(2*x)dx + g(y)"
    assert potential_hint("-y", "x", evaluator=sympy_evaluator) is None


def test_public_name_is_not_collected():
    assert check_conservative.__test__ is False
