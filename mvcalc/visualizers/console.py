# -*- coding: utf-8 -*-
"""
Console Output Formatting
=========================

Plain-text (optionally ANSI-colored) rendering of kernel results.
"""

import math
from typing import Optional

from ..core.geometry import Point
from ..core.results import (
    FieldCheckResult,
    HessianTest,
    HessianVerdict,
    LagrangeCheck,
    LimitResult,
    PathComparison,
)


class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'


def format_number(value: Optional[float], decimals: int = 4) -> str:
    """
    Format a kernel value for display.

    Undefined values (None, NaN) render as ``---`` and infinities as ``∞`` or
    ``-∞``, so callers can show a placeholder instead of failing.
    """
    if value is None or math.isnan(value):
        return "---"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    return f"{value:.{decimals}f}"


def format_point(point: Point, decimals: int = 4) -> str:
    """``(x, y)`` or ``(x, y, z)`` with formatted coordinates."""
    return "(" + ", ".join(format_number(c, decimals) for c in point) + ")"


class ConsoleReporter:
    """
    Formats kernel results for console output.

    Supports both colored and plain text output.
    """

    def __init__(self, use_colors: bool = True, width: int = 72, decimals: int = 4):
        """
        Initialize console reporter.

        Args:
            use_colors: Whether to use ANSI colors
            width: Target width for rules under headers
            decimals: Digits after the decimal point
        """
        self.use_colors = use_colors
        self.width = width
        self.decimals = decimals

    def _c(self, color: str, text: str) -> str:
        """Apply color if colors are enabled."""
        if self.use_colors:
            return f"{color}{text}{Colors.ENDC}"
        return text

    def _n(self, value: Optional[float]) -> str:
        return format_number(value, self.decimals)

    def _header(self, text: str) -> str:
        line = "=" * self.width
        return f"{self._c(Colors.HEADER, line)}\n {text}\n{self._c(Colors.HEADER, line)}"

    def _verdict_color(self, verdict: HessianVerdict) -> str:
        if verdict is HessianVerdict.SADDLE:
            return Colors.WARNING
        if verdict is HessianVerdict.INCONCLUSIVE:
            return Colors.DIM
        return Colors.GREEN

    def format_gradient(self, expression: str, point: Point, grad: Point) -> str:
        """``∇f(point) = (..)`` line."""
        return f"∇({expression}) at {format_point(point, self.decimals)} = {format_point(grad, self.decimals)}"

    def format_limit(self, result: LimitResult, rows: Optional[int] = None) -> str:
        """Table of the walk followed by the estimate."""
        lines = [self._header(f"LIMIT of {result.expression} along {result.path_kind.value}")]
        lines.append(f"  Target: {format_point(result.target, self.decimals)}")

        header = f"  {'t':>8} {'distance':>12} {'value':>14}"
        lines.append(header)
        lines.append("  " + "-" * (len(header) - 2))
        samples = result.series.samples if rows is None else result.series.last(rows)
        for s in samples:
            lines.append(f"  {self._n(s.t):>8} {self._n(s.distance):>12} {self._n(s.value):>14}")

        if result.dropped:
            lines.append(self._c(Colors.DIM, f"  ({result.dropped} undefined sample(s) skipped)"))
        if result.exists:
            lines.append(f"  Estimate: {self._c(Colors.BOLD, self._n(result.estimate))}")
        else:
            lines.append(f"  Estimate: {self._c(Colors.WARNING, 'no limit along this path')}")
        lines.append(self._c(Colors.DIM, f"  {result.caveat}"))
        return "\n".join(lines)

    def format_comparison(self, comparison: PathComparison) -> str:
        """One line per path plus the overall conclusion."""
        lines = [self._header(f"PATHS towards {format_point(comparison.target, self.decimals)}: {comparison.expression}")]
        for kind, estimate in comparison.estimates.items():
            text = self._n(estimate) if estimate is not None else "no limit"
            lines.append(f"  {kind.value:<12} {text}")

        if comparison.path_dependent:
            lines.append(self._c(Colors.FAIL, "  Estimates differ by path: the limit does not exist."))
        elif comparison.agree:
            lines.append(self._c(Colors.GREEN, f"  All paths agree on {self._n(comparison.common_estimate)}."))
        else:
            lines.append(self._c(Colors.WARNING, "  Inconclusive: some paths gave no estimate."))
        lines.append(self._c(Colors.DIM, f"  {comparison.caveat}"))
        return "\n".join(lines)

    def format_field_check(self, result: FieldCheckResult) -> str:
        """Evidence table of the cross-partial test."""
        lines = [self._header(f"FIELD F = ({result.P}, {result.Q})")]
        header = f"  {'point':<20} {'∂P/∂y':>10} {'∂Q/∂x':>10}  match"
        lines.append(header)
        lines.append("  " + "-" * (len(header) - 2))
        for e in result.evidence:
            mark = self._c(Colors.GREEN, "yes") if e.matches else self._c(Colors.FAIL, "no")
            lines.append(
                f"  {format_point(e.point, 2):<20} {self._n(e.dP_dy):>10} {self._n(e.dQ_dx):>10}  {mark}"
            )

        verdict = "conservative" if result.conservative else "not conservative"
        color = Colors.GREEN if result.conservative else Colors.FAIL
        lines.append(
            f"  {result.match_count}/{len(result.evidence)} points match: "
            f"{self._c(color, verdict)}"
        )
        lines.append(self._c(Colors.DIM, f"  {result.caveat}"))
        return "\n".join(lines)

    def format_hessian(self, expression: str, test: HessianTest) -> str:
        """Second partials, determinant and verdict."""
        lines = [self._header(f"CRITICAL POINT of {expression} at {format_point(test.point, self.decimals)}")]
        lines.append(f"  fxx = {self._n(test.fxx)}   fyy = {self._n(test.fyy)}   fxy = {self._n(test.fxy)}")
        lines.append(f"  D = fxx*fyy - fxy^2 = {self._n(test.determinant)}")
        lines.append(f"  Verdict: {self._c(self._verdict_color(test.verdict), test.verdict.value)}")
        return "\n".join(lines)

    def format_lagrange(self, check: LagrangeCheck) -> str:
        """∇f against λ∇g at a candidate point."""
        lam = check.multiplier
        gf, gg = check.grad_objective, check.grad_constraint
        lines = [self._header(f"LAGRANGE CHECK at {format_point(check.point, self.decimals)}, λ = {self._n(lam)}")]
        lines.append(f"  ∂f/∂x = λ∂g/∂x -> {self._n(gf.x)} ≈ λ×{self._n(gg.x)}")
        lines.append(f"  ∂f/∂y = λ∂g/∂y -> {self._n(gf.y)} ≈ λ×{self._n(gg.y)}")
        lines.append(f"  Residual: {self._n(check.residual)}   g = {self._n(check.constraint_value)}")
        lines.append(f"  f = {self._n(check.objective_value)}")
        ok = check.satisfied and check.on_constraint
        lines.append(
            f"  Condition: {self._c(Colors.GREEN, 'satisfied') if ok else self._c(Colors.FAIL, 'not satisfied')}"
        )
        return "\n".join(lines)
