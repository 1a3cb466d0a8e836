# -*- coding: utf-8 -*-
"""
Limit Path Sampler
==================

Estimates a two-variable limit by walking towards the target point along a
fixed approach path and averaging the values closest to it.

Paths (offsets from the target, s = distance to the target):

    axis-x     (s, 0)        along y = y0
    axis-y     (0, s)        along x = x0
    diagonal   (s, s)        along the line y - y0 = x - x0
    parabolic  (s, s^2)      along the parabola y - y0 = (x - x0)^2

The walk uses ``t_i = i / steps`` for ``i = 1..steps`` and
``s = approach_radius * (1 - t)``, so the last step lands on the target.
Undefined values (including the usual 0/0 at the target) are dropped and the
walk continues.

The estimate is the mean of the last ``window`` defined values. This is an
approximation heuristic, not a convergence proof: agreement along one path
says nothing about other paths, and different estimates along different paths
are the classic sign that the limit does not exist.
"""

import logging
import math
from typing import Iterable, List, Optional, Tuple

import numpy as np

from ..core.engine import KernelConfig
from ..core.evaluator import ExpressionEvaluator, evaluate_or_nan
from ..core.geometry import Point, PointLike
from ..core.results import (
    LimitResult,
    PathComparison,
    PathKind,
    PathSample,
    SampleSeries,
)

logger = logging.getLogger(__name__)

_DEFAULTS = KernelConfig()


def path_offset(path_kind: PathKind, distance: float) -> Tuple[float, float]:
    """Offset from the target at ``distance`` along ``path_kind``."""
    if path_kind is PathKind.AXIS_X:
        return distance, 0.0
    if path_kind is PathKind.AXIS_Y:
        return 0.0, distance
    if path_kind is PathKind.DIAGONAL:
        return distance, distance
    return distance, distance * distance


def estimate_limit(values: Iterable[float], window: int = 5) -> Optional[float]:
    """
    Mean of the last ``window`` values, or None.

    None means "no limit along this path": fewer than ``window`` values are
    available, or one of the trailing values is not finite.
    """
    tail = list(values)[-window:] if window > 0 else []
    if len(tail) < window or not tail:
        return None
    if not all(math.isfinite(v) for v in tail):
        return None
    return float(np.mean(tail))


def sample_path(
    expression: str,
    target: PointLike = 0.0,
    path_kind="axis-x",
    steps: int = _DEFAULTS.path_steps,
    approach_radius: float = _DEFAULTS.approach_radius,
    window: int = _DEFAULTS.limit_window,
    evaluator: Optional[ExpressionEvaluator] = None,
) -> LimitResult:
    """
    Walk towards ``target`` along one path and estimate the limit there.

    Args:
        expression: Expression in x and y
        target: Limit point; a number c stands for (c, c)
        path_kind: PathKind or one of "axis-x", "axis-y", "diagonal",
            "parabolic" (aliases "x" and "y")
        steps: Number of walk steps
        approach_radius: Distance from the target where the walk starts
        window: Number of trailing defined values averaged for the estimate
        evaluator: Expression evaluator (SymPy by default)

    Returns:
        LimitResult; unpack as ``series, estimate``. ``estimate`` is None
        when there is no limit along this path.

    Raises:
        ValueError: For an unknown path kind or non-positive sizes

    Example:
        >>> series, estimate = sample_path("x*y/(x^2+y^2)", 0, "diagonal")
        >>> # estimate is about 0.5, while along "axis-x" it is 0.0
    """
    kind = PathKind.coerce(path_kind)
    if steps < 1:
        raise ValueError(f"steps must be at least 1, got {steps}")
    if window < 1:
        raise ValueError(f"window must be at least 1, got {window}")
    if not approach_radius > 0:
        raise ValueError(f"approach_radius must be positive, got {approach_radius}")

    center = Point.coerce(target)
    center = Point(center.x, center.y)

    samples: List[PathSample] = []
    dropped = 0

    for i in range(1, steps + 1):
        t = i / steps
        distance = approach_radius * (1 - t)
        dx, dy = path_offset(kind, distance)
        point = Point(center.x + dx, center.y + dy)

        value = evaluate_or_nan(evaluator, expression, point.as_bindings())
        if not math.isfinite(value):
            dropped += 1
            continue
        samples.append(PathSample(t=t, distance=distance, point=point, value=value))

    series = SampleSeries(tuple(samples))
    estimate = estimate_limit(series.values, window)

    if estimate is None:
        logger.debug(
            "No limit of %r along %s towards %s (%d defined, %d dropped)",
            expression, kind.value, center, len(series), dropped,
        )
    else:
        logger.debug("Limit of %r along %s towards %s ~ %g", expression, kind.value, center, estimate)

    return LimitResult(
        expression=expression,
        path_kind=kind,
        target=center,
        series=series,
        estimate=estimate,
        dropped=dropped,
        window=window,
    )


def compare_paths(
    expression: str,
    target: PointLike = 0.0,
    path_kinds: Optional[Iterable] = None,
    tolerance: float = _DEFAULTS.path_agreement_tolerance,
    steps: int = _DEFAULTS.path_steps,
    approach_radius: float = _DEFAULTS.approach_radius,
    window: int = _DEFAULTS.limit_window,
    evaluator: Optional[ExpressionEvaluator] = None,
) -> PathComparison:
    """
    Sample several approach paths towards the same point.

    ``PathComparison.path_dependent`` flags estimates that disagree by more
    than ``tolerance``, which means the limit does not exist. Agreement is
    only evidence, not proof, that it does.
    """
    kinds = [PathKind.coerce(k) for k in (path_kinds or list(PathKind))]
    results = {
        kind: sample_path(expression, target, kind, steps, approach_radius, window, evaluator)
        for kind in kinds
    }
    center = Point.coerce(target)
    return PathComparison(
        expression=expression,
        target=Point(center.x, center.y),
        results=results,
        tolerance=tolerance,
    )
