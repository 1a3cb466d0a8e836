# -*- coding: utf-8 -*-
"""
Conservative Field Tester
=========================

A planar field F = (P, Q) on a simply connected region is conservative iff
∂P/∂y = ∂Q/∂x. The tester compares both cross-partials at a handful of sample
points; it is a finite-sample heuristic. A field that passes everywhere
sampled can still fail elsewhere, so results are always reported with
``FieldCheckResult.caveat``.
"""

import logging
import math
from typing import Iterable, Optional

from ..core.differences import partial
from ..core.engine import DEFAULT_STEP, KernelConfig
from ..core.evaluator import ExpressionEvaluator
from ..core.geometry import Point, PointLike
from ..core.results import FieldCheckResult, FieldEvidence

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_POINTS = (
    Point(1.0, 1.0),
    Point(2.0, 1.0),
    Point(1.0, 2.0),
    Point(-1.0, 1.0),
)

_DEFAULTS = KernelConfig()


def test_conservative(
    P: str,
    Q: str,
    sample_points: Optional[Iterable[PointLike]] = None,
    tolerance: float = _DEFAULTS.conservative_tolerance,
    step: float = DEFAULT_STEP,
    evaluator: Optional[ExpressionEvaluator] = None,
) -> FieldCheckResult:
    """
    Compare ∂P/∂y with ∂Q/∂x at each sample point.

    Args:
        P: First field component
        Q: Second field component
        sample_points: Points to test; defaults to (1,1), (2,1), (1,2), (-1,1)
        tolerance: Maximum |∂P/∂y - ∂Q/∂x| for a match
        step: Finite-difference step
        evaluator: Expression evaluator (SymPy by default)

    Returns:
        FieldCheckResult with one FieldEvidence per sample point. A point
        where either partial is undefined never matches.
    """
    points = DEFAULT_SAMPLE_POINTS if sample_points is None else tuple(
        Point.coerce(p) for p in sample_points
    )

    evidence = []
    for point in points:
        dP_dy = partial(P, "y", point, step, evaluator)
        dQ_dx = partial(Q, "x", point, step, evaluator)
        difference = abs(dP_dy - dQ_dx)
        matches = math.isfinite(difference) and difference < tolerance
        evidence.append(FieldEvidence(point=point, dP_dy=dP_dy, dQ_dx=dQ_dx, matches=matches))

    result = FieldCheckResult(P=P, Q=Q, evidence=tuple(evidence), tolerance=tolerance)
    logger.debug(
        "Field (%s, %s): %d/%d sample points match",
        P, Q, result.match_count, len(result.evidence),
    )
    return result


# pytest would otherwise collect the public name above as a test.
test_conservative.__test__ = False


def potential_hint(
    P: str,
    Q: str,
    sample_points: Optional[Iterable[PointLike]] = None,
    evaluator: Optional[ExpressionEvaluator] = None,
) -> Optional[str]:
    """
    Textual starting point for the potential function of (P, Q).

    Only a hint for the student, not a verified antiderivative. Returns None
    when the field fails the cross-partial test.
    """
    return hint_from_check(test_conservative(P, Q, sample_points, evaluator=evaluator))


def hint_from_check(check: FieldCheckResult) -> Optional[str]:
    """Potential-function hint for an already computed field check."""
    if not check.conservative:
        return None
    return f"f(x,y) = ∫({check.P})dx + g(y)"
