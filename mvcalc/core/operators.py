# -*- coding: utf-8 -*-
"""
Differential Operators
======================

Operators built from the finite-difference core:

    - Gradient (∇f): partials along every populated coordinate of the point
    - Directional derivative (D_u f = ∇f · u): direction used as given
    - Divergence (∇·F): sum of ∂F_i/∂x_i for a field given by components
    - Scalar curl in the plane (∂Q/∂x - ∂P/∂y)
    - Tangent plane of z = f(x, y)

Dimensionality is driven by the point the caller supplies, never by scanning
the expression text: a point with ``z`` yields a 3-component gradient.
"""

import math
from typing import Optional, Sequence

from .differences import partial
from .engine import DEFAULT_STEP
from .evaluator import ExpressionEvaluator, evaluate_or_nan
from .geometry import Point, PointLike, Vector, normalize
from .results import TangentPlane

__all__ = [
    "gradient",
    "directional_derivative",
    "normalize",
    "divergence",
    "curl_2d",
    "tangent_plane",
]


def gradient(
    expression: str,
    point: PointLike,
    step: float = DEFAULT_STEP,
    evaluator: Optional[ExpressionEvaluator] = None,
) -> Vector:
    """
    Gradient of a scalar expression at ``point``.

    Components that cannot be computed are NaN; the others are still returned.
    """
    p = Point.coerce(point)
    components = [partial(expression, name, p, step, evaluator) for name in p.coordinates]
    return Vector(*components)


def directional_derivative(
    expression: str,
    point: PointLike,
    direction: PointLike,
    step: float = DEFAULT_STEP,
    evaluator: Optional[ExpressionEvaluator] = None,
) -> float:
    """
    Rate of change of ``expression`` at ``point`` along ``direction``.

    The direction is not normalized here; pass ``normalize(d)`` to get the
    derivative along a unit vector. Only coordinates shared by the gradient
    and the direction contribute.
    """
    grad = gradient(expression, point, step, evaluator)
    return grad.dot(Vector.coerce(direction))


def divergence(
    components: Sequence[str],
    point: PointLike,
    step: float = DEFAULT_STEP,
    evaluator: Optional[ExpressionEvaluator] = None,
) -> float:
    """
    Divergence of the field whose i-th component is ``components[i]``.

    Components are paired with the point's coordinates in order (x, y, z).

    Raises:
        ValueError: If the number of components differs from the point's
            dimension
    """
    p = Point.coerce(point)
    if len(components) != p.dimension:
        raise ValueError(
            f"Field has {len(components)} components but the point is {p.dimension}-dimensional"
        )
    return sum(
        partial(component, name, p, step, evaluator)
        for component, name in zip(components, p.coordinates)
    )


def curl_2d(
    P: str,
    Q: str,
    point: PointLike,
    step: float = DEFAULT_STEP,
    evaluator: Optional[ExpressionEvaluator] = None,
) -> float:
    """Scalar curl ∂Q/∂x - ∂P/∂y of the planar field (P, Q)."""
    p = Point.coerce(point)
    return partial(Q, "x", p, step, evaluator) - partial(P, "y", p, step, evaluator)


def tangent_plane(
    expression: str,
    point: PointLike,
    step: float = DEFAULT_STEP,
    evaluator: Optional[ExpressionEvaluator] = None,
) -> TangentPlane:
    """
    Tangent plane to the surface z = f(x, y) above ``point``.

    Any undefined ingredient shows up as NaN in the returned plane.
    """
    p = Point.coerce(point)
    planar = Point(p.x, p.y)
    value = evaluate_or_nan(evaluator, expression, planar.as_bindings())
    return TangentPlane(
        point=planar,
        value=value if math.isfinite(value) else math.nan,
        slope_x=partial(expression, "x", planar, step, evaluator),
        slope_y=partial(expression, "y", planar, step, evaluator),
    )
