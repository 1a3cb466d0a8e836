# -*- coding: utf-8 -*-
"""
Finite-Difference Core
======================

Central-difference stencils on top of an expression evaluator.

    partial:         (f(p + h e) - f(p - h e)) / 2h
    second_partial:  (f(p + h e) - 2 f(p) + f(p - h e)) / h^2
    mixed_partial:   (f(+h,+h) - f(+h,-h) - f(-h,+h) + f(-h,-h)) / 4h^2

The step is fixed (no adaptive error control). A smaller step amplifies
round-off and kinks, a larger one adds curvature bias; 1e-4 is the default.

Every stencil is total: if the evaluator fails at any stencil point the
derivative is NaN (undefined) instead of an exception, so sampling walks can
carry on.
"""

import logging
import math
from typing import Optional

from .engine import DEFAULT_STEP, check_step
from .evaluator import ExpressionEvaluator, evaluate_or_nan
from .geometry import Point, PointLike

logger = logging.getLogger(__name__)


def is_undefined(value: Optional[float]) -> bool:
    """True for None, NaN and infinities."""
    return value is None or not math.isfinite(value)


def _f(evaluator: Optional[ExpressionEvaluator], expression: str, point: Point) -> float:
    return evaluate_or_nan(evaluator, expression, point.as_bindings())


def partial(
    expression: str,
    variable: str,
    point: PointLike,
    step: float = DEFAULT_STEP,
    evaluator: Optional[ExpressionEvaluator] = None,
) -> float:
    """
    First partial derivative by symmetric central difference.

    Only the two perturbed points are evaluated, never ``point`` itself, so a
    removable singularity exactly at ``point`` does not matter.

    Args:
        expression: Expression text
        variable: "x", "y" or "z"
        point: Where to differentiate
        step: Perturbation h (must be positive)
        evaluator: Expression evaluator (SymPy by default)

    Returns:
        The derivative, or NaN if either evaluation was undefined

    Example:
        >>> fx = partial("x^2 * y + y^3", "x", (1, 2))  # 2xy, about 4.0
    """
    h = check_step(step)
    p = Point.coerce(point)

    forward = _f(evaluator, expression, p.shifted(variable, h))
    backward = _f(evaluator, expression, p.shifted(variable, -h))

    result = (forward - backward) / (2 * h)
    if is_undefined(result):
        logger.debug("d/d%s of %r undefined at %s", variable, expression, p)
        return math.nan
    return result


def second_partial(
    expression: str,
    variable: str,
    point: PointLike,
    step: float = DEFAULT_STEP,
    evaluator: Optional[ExpressionEvaluator] = None,
) -> float:
    """Pure second partial with the 3-point stencil; NaN if undefined."""
    h = check_step(step)
    p = Point.coerce(point)

    forward = _f(evaluator, expression, p.shifted(variable, h))
    center = _f(evaluator, expression, p)
    backward = _f(evaluator, expression, p.shifted(variable, -h))

    result = (forward - 2 * center + backward) / (h * h)
    return math.nan if is_undefined(result) else result


def mixed_partial(
    expression: str,
    first: str,
    second: str,
    point: PointLike,
    step: float = DEFAULT_STEP,
    evaluator: Optional[ExpressionEvaluator] = None,
) -> float:
    """
    Mixed second partial with the symmetric 4-point stencil.

    Falls back to ``second_partial`` when both variables are the same.
    """
    if first == second:
        return second_partial(expression, first, point, step, evaluator)

    h = check_step(step)
    p = Point.coerce(point)

    def corner(sign_a: int, sign_b: int) -> float:
        shifted = p.shifted(first, sign_a * h).shifted(second, sign_b * h)
        return _f(evaluator, expression, shifted)

    result = (corner(1, 1) - corner(1, -1) - corner(-1, 1) + corner(-1, -1)) / (4 * h * h)
    return math.nan if is_undefined(result) else result
