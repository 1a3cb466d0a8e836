# -*- coding: utf-8 -*-
"""
Surface and Contour Sampling
============================

Grid scans used to draw surfaces, level curves and cross-sections.

The grid has ``(resolution + 1)^2`` points evenly spaced over the two ranges
(both ends included) and is walked row-major: x in the outer loop, y in the
inner one. Every scan costs O(resolution^2) evaluations, so ``resolution`` is
the caller's accuracy/cost knob.

Contours are found with a near-level filter: a grid point belongs to a level
when |f(point) - level| < tolerance. This is coarse. Output density depends on
the resolution and the local slope, and no curve is traced.
"""

import logging
import math
from typing import Iterable, List, Optional, Tuple

import numpy as np

from ..core.engine import KernelConfig, Range
from ..core.evaluator import ExpressionEvaluator, evaluate_or_nan
from ..core.geometry import Point, PointLike
from ..core.results import ContourLevel, CutSample, SampleSeries, SurfacePoint

logger = logging.getLogger(__name__)

_DEFAULTS = KernelConfig()


def grid_axis(bounds: Range, resolution: int) -> np.ndarray:
    """``resolution + 1`` evenly spaced values covering ``bounds``."""
    if resolution < 1:
        raise ValueError(f"resolution must be at least 1, got {resolution}")
    low, high = bounds
    # Same arithmetic as low + (high - low) * (i / resolution) for every i.
    return low + (high - low) * (np.arange(resolution + 1) / resolution)


def _scan(
    expression: str,
    x_range: Range,
    y_range: Range,
    resolution: int,
    evaluator: Optional[ExpressionEvaluator],
) -> List[Tuple[float, float, float]]:
    """Evaluate the grid row-major; undefined values are kept as NaN."""
    xs = grid_axis(x_range, resolution)
    ys = grid_axis(y_range, resolution)
    values = []
    for x in xs:
        for y in ys:
            x_f, y_f = float(x), float(y)
            values.append((x_f, y_f, evaluate_or_nan(evaluator, expression, {"x": x_f, "y": y_f})))
    return values


def sample_surface(
    expression: str,
    x_range: Range = _DEFAULTS.x_range,
    y_range: Range = _DEFAULTS.y_range,
    resolution: int = _DEFAULTS.surface_resolution,
    evaluator: Optional[ExpressionEvaluator] = None,
) -> SampleSeries:
    """
    Sample z = f(x, y) on a regular grid.

    Returns:
        SampleSeries of SurfacePoint in row-major order; points where the
        expression is undefined or non-finite are left out.
    """
    grid = _scan(expression, x_range, y_range, resolution, evaluator)
    samples = tuple(SurfacePoint(x, y, z) for x, y, z in grid if math.isfinite(z))

    skipped = len(grid) - len(samples)
    if skipped:
        logger.debug("Surface of %r: skipped %d undefined grid points", expression, skipped)
    return SampleSeries(samples)


def sample_contours(
    expression: str,
    levels: Iterable[float],
    x_range: Range = _DEFAULTS.x_range,
    y_range: Range = _DEFAULTS.y_range,
    resolution: int = _DEFAULTS.contour_resolution,
    tolerance: float = _DEFAULTS.contour_tolerance,
    evaluator: Optional[ExpressionEvaluator] = None,
) -> List[ContourLevel]:
    """
    Grid points lying near each requested level.

    The grid is evaluated once and filtered per level. Levels with no point
    near them are omitted from the result.

    Args:
        expression: Expression in x and y
        levels: Level values, reported in the order given
        x_range, y_range: Grid bounds
        resolution: Grid subdivisions per axis
        tolerance: Maximum |f - level| for a point to count as on the level
        evaluator: Expression evaluator (SymPy by default)
    """
    grid = [(x, y, z) for x, y, z in _scan(expression, x_range, y_range, resolution, evaluator)
            if math.isfinite(z)]

    contours = []
    for level in levels:
        points = tuple(Point(x, y) for x, y, z in grid if abs(z - level) < tolerance)
        if points:
            contours.append(ContourLevel(level=level, points=points))
        else:
            logger.debug("Level %g of %r not found on a %d-grid", level, expression, resolution)
    return contours


def sample_cut(
    expression: str,
    point: PointLike,
    variable: str = "x",
    half_width: float = 5.0,
    steps: int = 50,
    evaluator: Optional[ExpressionEvaluator] = None,
) -> SampleSeries:
    """
    Cross-section of f through ``point`` along one axis.

    The other coordinate is held fixed. ``2 * steps + 1`` offsets are spread
    evenly over [-half_width, half_width]; each CutSample records the moving
    coordinate and the defined value there.
    """
    if variable not in ("x", "y"):
        raise ValueError(f"Cut variable must be 'x' or 'y', got {variable!r}")
    if steps < 1:
        raise ValueError(f"steps must be at least 1, got {steps}")

    p = Point.coerce(point)
    p = Point(p.x, p.y)
    samples = []
    for i in range(-steps, steps + 1):
        offset = (i / steps) * half_width
        moved = p.shifted(variable, offset)
        value = evaluate_or_nan(evaluator, expression, moved.as_bindings())
        if math.isfinite(value):
            samples.append(CutSample(t=moved.get(variable), value=value))
    return SampleSeries(tuple(samples))
