# -*- coding: utf-8 -*-
"""
Kernel Result Records
=====================

Immutable records returned by the kernel operations.

Key Concepts:
    - SampleSeries: ordered samples of a path walk or grid scan (walk order)
    - LimitResult: one approach path and its limit estimate
    - FieldCheckResult: per-point evidence of the cross-partial test
    - HessianVerdict / HessianTest: second-derivative test outcome

Undefined numeric values are NaN. Heuristic outcomes that are not failures
(no limit along a path, non-conservative by finite sample, inconclusive test)
are expressed through dedicated fields, never through NaN.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .geometry import Point, Vector

LIMIT_CAVEAT = (
    "Approximation: mean of the last values sampled along one path. "
    "Agreement along a path is not a proof that the limit exists."
)

FIELD_CAVEAT = (
    "Finite-sample heuristic: matching cross-partials at the sample points is "
    "necessary but not sufficient for the field to be conservative."
)

CONTOUR_CAVEAT = (
    "Near-level filter: grid points whose value is within the tolerance of the "
    "level. Density grows with resolution; this is not contour tracing."
)


class PathKind(Enum):
    """Approach paths for the limit sampler."""
    AXIS_X = "axis-x"
    AXIS_Y = "axis-y"
    DIAGONAL = "diagonal"
    PARABOLIC = "parabolic"

    @classmethod
    def coerce(cls, value: Any) -> "PathKind":
        """Accept a PathKind, its value, or the short aliases ``x`` / ``y``."""
        if isinstance(value, cls):
            return value
        aliases = {"x": cls.AXIS_X, "y": cls.AXIS_Y}
        if value in aliases:
            return aliases[value]
        try:
            return cls(value)
        except ValueError:
            valid = [k.value for k in cls] + list(aliases)
            raise ValueError(f"Unknown path kind {value!r}, expected one of {valid}") from None


class HessianVerdict(Enum):
    """Outcome of the second-derivative test."""
    MAXIMUM = "maximum"
    MINIMUM = "minimum"
    SADDLE = "saddle"
    INCONCLUSIVE = "inconclusive"


# =============================================================================
# Sample series
# =============================================================================

@dataclass(frozen=True)
class PathSample:
    """
    One defined value along an approach path.

    Attributes:
        t: Walk parameter in (0, 1]; ascending along the walk
        distance: Distance from the target along the path parameter
        point: Where the expression was evaluated
        value: The (finite) value there
    """
    t: float
    distance: float
    point: Point
    value: float


@dataclass(frozen=True)
class SurfacePoint:
    """A grid sample ``(x, y, z = f(x, y))``."""
    x: float
    y: float
    z: float

    @property
    def value(self) -> float:
        return self.z


@dataclass(frozen=True)
class CutSample:
    """A sample of a one-variable cross-section; ``t`` is the moving coordinate."""
    t: float
    value: float


@dataclass(frozen=True)
class SampleSeries:
    """
    Ordered, immutable sequence of samples.

    Order is the canonical walk order (ascending path parameter or row-major
    grid) and is meaningful: the limit estimate reads the tail of the series.
    """
    samples: Tuple[Any, ...] = ()

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.samples)

    def __getitem__(self, index):
        return self.samples[index]

    @property
    def values(self) -> Tuple[float, ...]:
        return tuple(s.value for s in self.samples)

    def last(self, n: int) -> Tuple[Any, ...]:
        """The last ``n`` samples (fewer if the series is shorter)."""
        return self.samples[-n:] if n > 0 else ()


# =============================================================================
# Limits
# =============================================================================

@dataclass(frozen=True)
class LimitResult:
    """
    Samples along one approach path and the resulting estimate.

    Unpacks as ``series, estimate``.

    Attributes:
        expression: Expression text
        path_kind: Approach path used
        target: The point being approached
        series: Defined samples in walk order
        estimate: Mean of the last ``window`` values, or None when there is
            no limit along this path (too few defined values)
        dropped: Number of walk steps whose value was undefined
        window: How many trailing values feed the estimate
    """
    expression: str
    path_kind: PathKind
    target: Point
    series: SampleSeries
    estimate: Optional[float]
    dropped: int = 0
    window: int = 5

    @property
    def exists(self) -> bool:
        """Whether this path produced an estimate."""
        return self.estimate is not None

    @property
    def caveat(self) -> str:
        return LIMIT_CAVEAT

    def __iter__(self):
        return iter((self.series, self.estimate))


@dataclass(frozen=True)
class PathComparison:
    """
    Limit estimates along several paths towards the same point.

    Attributes:
        expression: Expression text
        target: The point being approached
        results: Per-path results, in the order requested
        tolerance: Maximum spread for two estimates to count as equal
    """
    expression: str
    target: Point
    results: Dict[PathKind, LimitResult]
    tolerance: float

    @property
    def estimates(self) -> Dict[PathKind, Optional[float]]:
        return {kind: r.estimate for kind, r in self.results.items()}

    def _defined(self) -> List[float]:
        return [e for e in self.estimates.values() if e is not None]

    @property
    def path_dependent(self) -> bool:
        """Two defined estimates differ by more than the tolerance."""
        defined = self._defined()
        return bool(defined) and (max(defined) - min(defined)) > self.tolerance

    @property
    def agree(self) -> bool:
        """Every path produced an estimate and they all agree."""
        defined = self._defined()
        return (
            len(defined) == len(self.results)
            and bool(defined)
            and not self.path_dependent
        )

    @property
    def common_estimate(self) -> Optional[float]:
        """Mean of the estimates when all paths agree, else None."""
        if not self.agree:
            return None
        defined = self._defined()
        return sum(defined) / len(defined)

    @property
    def caveat(self) -> str:
        return LIMIT_CAVEAT


# =============================================================================
# Conservative fields
# =============================================================================

@dataclass(frozen=True)
class FieldEvidence:
    """Cross-partials at one sample point."""
    point: Point
    dP_dy: float
    dQ_dx: float
    matches: bool

    @property
    def difference(self) -> float:
        return abs(self.dP_dy - self.dQ_dx)


@dataclass(frozen=True)
class FieldCheckResult:
    """
    Outcome of the cross-partial test for a planar field ``(P, Q)``.

    ``conservative`` is True only when every sample point matched. The test is
    a finite-sample heuristic (see ``caveat``), never a proof.
    """
    P: str
    Q: str
    evidence: Tuple[FieldEvidence, ...]
    tolerance: float

    @property
    def conservative(self) -> bool:
        return bool(self.evidence) and all(e.matches for e in self.evidence)

    @property
    def match_count(self) -> int:
        return sum(1 for e in self.evidence if e.matches)

    @property
    def dP_dy(self) -> List[float]:
        return [e.dP_dy for e in self.evidence]

    @property
    def dQ_dx(self) -> List[float]:
        return [e.dQ_dx for e in self.evidence]

    @property
    def matches(self) -> List[bool]:
        return [e.matches for e in self.evidence]

    @property
    def is_heuristic(self) -> bool:
        return True

    @property
    def caveat(self) -> str:
        return FIELD_CAVEAT


# =============================================================================
# Critical points
# =============================================================================

@dataclass(frozen=True)
class HessianTest:
    """
    Second partials at a point and the resulting verdict.

    Attributes:
        point: Where the test was run (assumed stationary)
        fxx, fyy, fxy: Second partials (NaN if undefined)
        determinant: fxx*fyy - fxy**2
        verdict: Classification derived from the above
    """
    point: Point
    fxx: float
    fyy: float
    fxy: float
    determinant: float
    verdict: HessianVerdict


@dataclass(frozen=True)
class LagrangeCheck:
    """
    Check of the Lagrange condition ``grad f = lambda * grad g`` at a candidate.

    Attributes:
        point: Candidate point
        multiplier: The lambda supplied by the caller
        grad_objective: grad f at the point
        grad_constraint: grad g at the point
        objective_value: f at the point
        constraint_value: g at the point (0 on the constraint curve)
        residual: |f_x - lambda g_x| + |f_y - lambda g_y|
        tolerance: Threshold for ``satisfied`` and ``on_constraint``
    """
    point: Point
    multiplier: float
    grad_objective: Vector
    grad_constraint: Vector
    objective_value: float
    constraint_value: float
    residual: float
    tolerance: float

    @property
    def satisfied(self) -> bool:
        return math.isfinite(self.residual) and self.residual < self.tolerance

    @property
    def on_constraint(self) -> bool:
        return math.isfinite(self.constraint_value) and abs(self.constraint_value) < self.tolerance


# =============================================================================
# Grids and planes
# =============================================================================

@dataclass(frozen=True)
class ContourLevel:
    """Grid points found near one level of a function."""
    level: float
    points: Tuple[Point, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class TangentPlane:
    """
    Tangent plane ``z = value + slope_x (x - x0) + slope_y (y - y0)``.
    """
    point: Point
    value: float
    slope_x: float
    slope_y: float

    @property
    def intercept(self) -> float:
        return self.value - self.slope_x * self.point.x - self.slope_y * self.point.y

    def at(self, x: float, y: float) -> float:
        return self.value + self.slope_x * (x - self.point.x) + self.slope_y * (y - self.point.y)

    def __str__(self) -> str:
        c = self.intercept
        sign = "-" if c < 0 else "+"
        return f"z = {self.slope_x:.4g}x + {self.slope_y:.4g}y {sign} {abs(c):.4g}"
