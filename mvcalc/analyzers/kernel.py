# -*- coding: utf-8 -*-
"""
High-level calculus kernel interface.

Usage:
    kernel = CalculusKernel()
    fx = kernel.partial("x^2 * y + y^3", "x", (1, 2))
    series, estimate = kernel.sample_path("x*y/(x^2+y^2)", 0, "diagonal")

    # Inject another evaluator (e.g. an in-memory stub) and settings
    kernel = CalculusKernel(evaluator=my_evaluator, config=KernelConfig(step=1e-5))
"""

from typing import Iterable, List, Optional, Sequence

from ..core.differences import mixed_partial, partial, second_partial
from ..core.engine import KernelConfig, Range
from ..core.evaluator import ExpressionEvaluator, default_evaluator, evaluate_or_nan
from ..core.geometry import Point, PointLike, Vector, normalize
from ..core.operators import (
    curl_2d,
    directional_derivative,
    divergence,
    gradient,
    tangent_plane,
)
from ..core.results import (
    ContourLevel,
    FieldCheckResult,
    HessianTest,
    HessianVerdict,
    LagrangeCheck,
    LimitResult,
    PathComparison,
    SampleSeries,
    TangentPlane,
)
from . import extrema, fields, limits, surfaces


class CalculusKernel:
    """
    Binds one expression evaluator and one KernelConfig to every operation.

    The kernel is stateless apart from those two collaborators; every method
    is a pure function of its arguments.

    Attributes:
        evaluator: Expression evaluator used for every evaluation
        config: Step sizes, tolerances and walk sizes
    """

    def __init__(
        self,
        evaluator: Optional[ExpressionEvaluator] = None,
        config: Optional[KernelConfig] = None,
    ):
        self.evaluator = evaluator or default_evaluator()
        self.config = config or KernelConfig()

    # =========================================================================
    # Evaluation and derivatives
    # =========================================================================

    def evaluate(self, expression: str, point: PointLike) -> float:
        """Value at ``point``, NaN where undefined."""
        return evaluate_or_nan(self.evaluator, expression, Point.coerce(point).as_bindings())

    def partial(self, expression: str, variable: str, point: PointLike) -> float:
        return partial(expression, variable, point, self.config.step, self.evaluator)

    def second_partial(self, expression: str, variable: str, point: PointLike) -> float:
        return second_partial(expression, variable, point, self.config.step, self.evaluator)

    def mixed_partial(self, expression: str, first: str, second: str, point: PointLike) -> float:
        return mixed_partial(expression, first, second, point, self.config.step, self.evaluator)

    def gradient(self, expression: str, point: PointLike) -> Vector:
        return gradient(expression, point, self.config.step, self.evaluator)

    def directional_derivative(self, expression: str, point: PointLike, direction: PointLike) -> float:
        return directional_derivative(expression, point, direction, self.config.step, self.evaluator)

    @staticmethod
    def normalize(vector: PointLike) -> Vector:
        return normalize(vector)

    def divergence(self, components: Sequence[str], point: PointLike) -> float:
        return divergence(components, point, self.config.step, self.evaluator)

    def curl_2d(self, P: str, Q: str, point: PointLike) -> float:
        return curl_2d(P, Q, point, self.config.step, self.evaluator)

    def tangent_plane(self, expression: str, point: PointLike) -> TangentPlane:
        return tangent_plane(expression, point, self.config.step, self.evaluator)

    # =========================================================================
    # Limits
    # =========================================================================

    def sample_path(
        self,
        expression: str,
        target: PointLike = 0.0,
        path_kind="axis-x",
        steps: Optional[int] = None,
    ) -> LimitResult:
        cfg = self.config
        return limits.sample_path(
            expression,
            target,
            path_kind,
            steps=cfg.path_steps if steps is None else steps,
            approach_radius=cfg.approach_radius,
            window=cfg.limit_window,
            evaluator=self.evaluator,
        )

    def compare_paths(
        self,
        expression: str,
        target: PointLike = 0.0,
        path_kinds: Optional[Iterable] = None,
    ) -> PathComparison:
        cfg = self.config
        return limits.compare_paths(
            expression,
            target,
            path_kinds,
            tolerance=cfg.path_agreement_tolerance,
            steps=cfg.path_steps,
            approach_radius=cfg.approach_radius,
            window=cfg.limit_window,
            evaluator=self.evaluator,
        )

    # =========================================================================
    # Fields and extrema
    # =========================================================================

    def test_conservative(
        self,
        P: str,
        Q: str,
        sample_points: Optional[Iterable[PointLike]] = None,
    ) -> FieldCheckResult:
        return fields.test_conservative(
            P, Q, sample_points,
            tolerance=self.config.conservative_tolerance,
            step=self.config.step,
            evaluator=self.evaluator,
        )

    def potential_hint(self, P: str, Q: str) -> Optional[str]:
        return fields.hint_from_check(self.test_conservative(P, Q))

    def classify(self, expression: str, point: PointLike) -> HessianVerdict:
        return extrema.classify(expression, point, self.config.step, self.evaluator)

    def second_derivative_test(self, expression: str, point: PointLike) -> HessianTest:
        return extrema.second_derivative_test(expression, point, self.config.step, self.evaluator)

    def lagrange_condition(
        self,
        objective: str,
        constraint: str,
        point: PointLike,
        multiplier: float,
    ) -> LagrangeCheck:
        return extrema.lagrange_condition(
            objective, constraint, point, multiplier,
            tolerance=self.config.lagrange_tolerance,
            step=self.config.step,
            evaluator=self.evaluator,
        )

    # =========================================================================
    # Grids
    # =========================================================================

    def sample_surface(
        self,
        expression: str,
        x_range: Optional[Range] = None,
        y_range: Optional[Range] = None,
        resolution: Optional[int] = None,
    ) -> SampleSeries:
        cfg = self.config
        return surfaces.sample_surface(
            expression,
            cfg.x_range if x_range is None else x_range,
            cfg.y_range if y_range is None else y_range,
            cfg.surface_resolution if resolution is None else resolution,
            evaluator=self.evaluator,
        )

    def sample_contours(
        self,
        expression: str,
        levels: Iterable[float],
        x_range: Optional[Range] = None,
        y_range: Optional[Range] = None,
        resolution: Optional[int] = None,
    ) -> List[ContourLevel]:
        cfg = self.config
        return surfaces.sample_contours(
            expression,
            levels,
            cfg.x_range if x_range is None else x_range,
            cfg.y_range if y_range is None else y_range,
            cfg.contour_resolution if resolution is None else resolution,
            tolerance=cfg.contour_tolerance,
            evaluator=self.evaluator,
        )

    def sample_cut(
        self,
        expression: str,
        point: PointLike,
        variable: str = "x",
        half_width: float = 5.0,
        steps: int = 50,
    ) -> SampleSeries:
        return surfaces.sample_cut(expression, point, variable, half_width, steps, self.evaluator)
