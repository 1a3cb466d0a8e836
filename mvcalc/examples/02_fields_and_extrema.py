"""
    Example 2: Fields, Critical Points and Constraints
    ==================================================

    Derivative-based diagnostics on small teaching examples.

    Key concepts introduced:
    - Gradient, directional derivative and tangent plane
    - test_conservative: the cross-partial heuristic for planar fields
    - second_derivative_test: Hessian determinant classification
    - lagrange_condition: checking a constrained candidate
    - to_json: exporting results for a display layer
"""

import logging

from mvcalc import CalculusKernel, Point
from mvcalc.logging_config import setup_logging
from mvcalc.visualizers import ConsoleReporter, to_json


def section(title):
    print("\n" + "=" * 72)
    print(title)
    print("=" * 72)


# =============================================================================
# Step 1: Derivatives
# =============================================================================

def show_derivatives(kernel, reporter):
    section("DERIVATIVES of f = x^2 y + y^3")
    expression = "x^2 * y + y^3"
    point = (1, 2)

    grad = kernel.gradient(expression, point)
    print(reporter.format_gradient(expression, Point(*point), grad))

    u = kernel.normalize((3, 4))
    print(f"D_u f with u = {tuple(u)}: {kernel.directional_derivative(expression, point, u):.4f}")
    print(f"Tangent plane: {kernel.tangent_plane(expression, point)}")


# =============================================================================
# Step 2: Conservative fields
# =============================================================================

def show_fields(kernel, reporter):
    section("CONSERVATIVE FIELDS")
    for P, Q in [("2*x", "2*y"), ("-y", "x"), ("y*cos(x*y)", "x*cos(x*y)")]:
        check = kernel.test_conservative(P, Q)
        print(reporter.format_field_check(check))
        hint = kernel.potential_hint(P, Q)
        if hint:
            print(f"  Hint: {hint}")
        print(f"  curl at (1, 1): {kernel.curl_2d(P, Q, (1, 1)):.4f}\n")


# =============================================================================
# Step 3: Critical points and constraints
# =============================================================================

def show_extrema(kernel, reporter):
    section("CRITICAL POINTS")
    for expression in ["x^2 + y^2", "x^2 - y^2", "-x^2 - y^2", "x^3 + y^2"]:
        print(reporter.format_hessian(expression, kernel.second_derivative_test(expression, (0, 0))))

    section("CONSTRAINED: maximize xy subject to x + y = 10")
    for multiplier in (5.0, 1.0):
        check = kernel.lagrange_condition("x*y", "x + y - 10", (5, 5), multiplier)
        print(reporter.format_lagrange(check))

    print("\nAs JSON:")
    print(to_json(kernel.second_derivative_test("x*y", (0, 0))))


def main():
    setup_logging(logging.INFO)

    kernel = CalculusKernel()
    reporter = ConsoleReporter()

    show_derivatives(kernel, reporter)
    show_fields(kernel, reporter)
    show_extrema(kernel, reporter)

    print("\nDone!")


if __name__ == "__main__":
    main()
