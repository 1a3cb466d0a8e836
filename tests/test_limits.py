"""Test the limit path sampler."""

import pytest

from mvcalc import PathKind, Point, compare_paths, sample_path
from mvcalc.analyzers import estimate_limit


# =============================================================================
# sample_path
# =============================================================================

def test_removable_singularity_at_origin(sympy_evaluator):
    """(x^2 - y^2)/(x - y) is x + y off the diagonal; the limit at 0 is 0."""
    result = sample_path("(x^2 - y^2)/(x - y)", 0, "axis-x", evaluator=sympy_evaluator)

    assert result.estimate == pytest.approx(0.0, abs=0.01)
    assert result.exists
    # only the final step lands on the 0/0 target
    assert result.dropped == 1
    assert len(result.series) == 19


def test_path_dependent_limit(stub_evaluator):
    """xy/(x^2 + y^2) tends to 1/2 along y = x but to 0 along the x-axis."""
    _, diagonal = sample_path("ratio", 0, "diagonal", evaluator=stub_evaluator)
    _, axis = sample_path("ratio", 0, "axis-x", evaluator=stub_evaluator)

    assert diagonal == pytest.approx(0.5)
    assert axis == pytest.approx(0.0)
    assert abs(diagonal - axis) > 0.01


def test_sinc_limit(sympy_evaluator):
    result = sample_path("sin(x)/x", 0, "axis-x", evaluator=sympy_evaluator)
    assert result.estimate == pytest.approx(1.0, abs=1e-3)


def test_series_is_in_walk_order(stub_evaluator):
    series, _ = sample_path("sum", 0, "diagonal", evaluator=stub_evaluator)
    ts = [s.t for s in series]
    distances = [s.distance for s in series]

    assert ts == sorted(ts)
    assert distances == sorted(distances, reverse=True)
    assert series[-1].point == Point(0.0, 0.0)


def test_result_unpacks_as_series_and_estimate(stub_evaluator):
    result = sample_path("sum", 0, "axis-x", evaluator=stub_evaluator)
    series, estimate = result
    assert series is result.series
    assert estimate == result.estimate


def test_everywhere_undefined_has_no_limit(stub_evaluator):
    result = sample_path("nowhere", 0, "axis-x", evaluator=stub_evaluator)
    assert result.estimate is None
    assert not result.exists
    assert len(result.series) == 0
    assert result.dropped == 20


def test_too_few_values_has_no_limit(stub_evaluator):
    """Test that fewer defined values than the window gives no estimate."""
    result = sample_path("sum", 0, "axis-x", steps=3, evaluator=stub_evaluator)
    assert len(result.series) == 3
    assert result.estimate is None


def test_path_kind_aliases(stub_evaluator):
    assert sample_path("sum", 0, "x", evaluator=stub_evaluator).path_kind is PathKind.AXIS_X
    assert sample_path("sum", 0, "y", evaluator=stub_evaluator).path_kind is PathKind.AXIS_Y
    assert sample_path("sum", 0, PathKind.PARABOLIC, evaluator=stub_evaluator).path_kind \
        is PathKind.PARABOLIC


def test_unknown_path_kind_raises(stub_evaluator):
    with pytest.raises(ValueError):
        sample_path("sum", 0, "spiral", evaluator=stub_evaluator)


@pytest.mark.parametrize("kwargs", [
    {"steps": 0},
    {"window": 0},
    {"approach_radius": 0.0},
])
def test_invalid_walk_sizes_raise(stub_evaluator, kwargs):
    with pytest.raises(ValueError):
        sample_path("sum", 0, "axis-x", evaluator=stub_evaluator, **kwargs)


def test_parabolic_path_points(stub_evaluator):
    series, _ = sample_path("sum", 0, "parabolic", evaluator=stub_evaluator)
    for sample in series:
        assert sample.point.y == pytest.approx(sample.point.x ** 2)


def test_target_away_from_origin(stub_evaluator):
    """x + y approached from above along x = 1 towards (1, 2)."""
    result = sample_path("sum", Point(1, 2), "axis-y", evaluator=stub_evaluator)

    assert result.target == Point(1.0, 2.0)
    assert all(s.point.x == 1.0 for s in result.series)
    # mean of 3 + s for the last five distances 0.01 .. 0
    assert result.estimate == pytest.approx(3.005, abs=1e-9)


def test_sampling_is_idempotent(sympy_evaluator):
    first = sample_path("x*y/(x^2+y^2)", 0, "parabolic", evaluator=sympy_evaluator)
    second = sample_path("x*y/(x^2+y^2)", 0, "parabolic", evaluator=sympy_evaluator)
    assert first == second


def test_estimate_limit():
    assert estimate_limit([1, 2, 3, 4, 5, 6]) == 4.0
    assert estimate_limit([1, 2], window=2) == 1.5
    assert estimate_limit([1, 2]) is None
    assert estimate_limit([]) is None


# =============================================================================
# compare_paths
# =============================================================================

def test_compare_paths_flags_path_dependence(stub_evaluator):
    comparison = compare_paths("ratio", 0, evaluator=stub_evaluator)

    assert list(comparison.results) == list(PathKind)
    assert comparison.path_dependent
    assert not comparison.agree
    assert comparison.common_estimate is None


def test_compare_paths_agreement(sympy_evaluator):
    comparison = compare_paths("sin(x^2 + y^2)/(x^2 + y^2)", 0, evaluator=sympy_evaluator)

    assert not comparison.path_dependent
    assert comparison.agree
    assert comparison.common_estimate == pytest.approx(1.0, abs=1e-3)


def test_compare_paths_with_undefined_path(sympy_evaluator):
    """The diagonal of (x^2 - y^2)/(x - y) is undefined everywhere."""
    comparison = compare_paths("(x^2 - y^2)/(x - y)", 0, evaluator=sympy_evaluator)

    assert comparison.estimates[PathKind.DIAGONAL] is None
    assert not comparison.path_dependent
    assert not comparison.agree
    assert comparison.common_estimate is None


def test_compare_selected_paths(stub_evaluator):
    comparison = compare_paths("ratio", 0, ["x", "y"], evaluator=stub_evaluator)
    assert set(comparison.results) == {PathKind.AXIS_X, PathKind.AXIS_Y}
    assert comparison.agree
    assert comparison.common_estimate == pytest.approx(0.0)
