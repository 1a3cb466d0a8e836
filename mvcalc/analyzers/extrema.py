# -*- coding: utf-8 -*-
"""
Critical-Point Classification
=============================

Second-derivative test for functions of two variables.

At a stationary point p of f:

    D = fxx * fyy - fxy^2

    D > 0 and fxx > 0   ->  local minimum
    D > 0 and fxx < 0   ->  local maximum
    D < 0               ->  saddle point
    otherwise           ->  inconclusive (D == 0, or undefined partials)

The test is local and assumes ``point`` is already stationary; nothing here
searches for stationary points.

Constrained extrema are checked, not searched: ``lagrange_condition`` reports
how far a candidate point and multiplier are from satisfying ∇f = λ∇g.
"""

import logging
import math
from typing import Optional

from ..core.differences import mixed_partial, second_partial
from ..core.engine import DEFAULT_STEP, KernelConfig
from ..core.evaluator import ExpressionEvaluator, evaluate_or_nan
from ..core.geometry import Point, PointLike
from ..core.operators import gradient
from ..core.results import HessianTest, HessianVerdict, LagrangeCheck

logger = logging.getLogger(__name__)

_DEFAULTS = KernelConfig()


def verdict_from_partials(fxx: float, fyy: float, fxy: float) -> HessianVerdict:
    """Classify from the three second partials; NaN anywhere is inconclusive."""
    determinant = fxx * fyy - fxy * fxy
    if determinant > 0 and fxx > 0:
        return HessianVerdict.MINIMUM
    if determinant > 0 and fxx < 0:
        return HessianVerdict.MAXIMUM
    if determinant < 0:
        return HessianVerdict.SADDLE
    return HessianVerdict.INCONCLUSIVE


def second_derivative_test(
    expression: str,
    point: PointLike,
    step: float = DEFAULT_STEP,
    evaluator: Optional[ExpressionEvaluator] = None,
) -> HessianTest:
    """
    Run the Hessian determinant test and keep every intermediate value.

    Args:
        expression: Expression in x and y
        point: Stationary point to classify (z, if given, is ignored)
        step: Finite-difference step shared by all three stencils
        evaluator: Expression evaluator (SymPy by default)

    Returns:
        HessianTest with fxx, fyy, fxy, the determinant and the verdict
    """
    p = Point.coerce(point)
    p = Point(p.x, p.y)

    fxx = second_partial(expression, "x", p, step, evaluator)
    fyy = second_partial(expression, "y", p, step, evaluator)
    fxy = mixed_partial(expression, "x", "y", p, step, evaluator)

    determinant = fxx * fyy - fxy * fxy
    verdict = verdict_from_partials(fxx, fyy, fxy)
    logger.debug("Hessian of %r at %s: D=%g -> %s", expression, p, determinant, verdict.value)

    return HessianTest(
        point=p,
        fxx=fxx,
        fyy=fyy,
        fxy=fxy,
        determinant=determinant,
        verdict=verdict,
    )


def classify(
    expression: str,
    point: PointLike,
    step: float = DEFAULT_STEP,
    evaluator: Optional[ExpressionEvaluator] = None,
) -> HessianVerdict:
    """Classify a stationary point as maximum, minimum, saddle or inconclusive."""
    return second_derivative_test(expression, point, step, evaluator).verdict


def lagrange_condition(
    objective: str,
    constraint: str,
    point: PointLike,
    multiplier: float,
    tolerance: float = _DEFAULTS.lagrange_tolerance,
    step: float = DEFAULT_STEP,
    evaluator: Optional[ExpressionEvaluator] = None,
) -> LagrangeCheck:
    """
    Check a candidate for the constrained problem "extremize f subject to g = 0".

    The constraint is given in the form g(x, y) = 0 (e.g. ``x + y - 10``).
    ``LagrangeCheck.satisfied`` tells whether ∇f ≈ λ∇g within ``tolerance``
    and ``LagrangeCheck.on_constraint`` whether |g| < ``tolerance``.
    """
    p = Point.coerce(point)
    p = Point(p.x, p.y)

    grad_f = gradient(objective, p, step, evaluator)
    grad_g = gradient(constraint, p, step, evaluator)
    residual = abs(grad_f.x - multiplier * grad_g.x) + abs(grad_f.y - multiplier * grad_g.y)

    bindings = p.as_bindings()
    return LagrangeCheck(
        point=p,
        multiplier=multiplier,
        grad_objective=grad_f,
        grad_constraint=grad_g,
        objective_value=evaluate_or_nan(evaluator, objective, bindings),
        constraint_value=evaluate_or_nan(evaluator, constraint, bindings),
        residual=residual if math.isfinite(residual) else math.nan,
        tolerance=tolerance,
    )
