"""
    Example 1: Limits Along Paths
    =============================

    Two-variable limits are estimated by walking towards the target point
    along several paths. When the paths disagree the limit does not exist;
    when they agree we only have evidence, not proof.

    Key concepts introduced:
    - CalculusKernel: the entry point bundling evaluator and configuration
    - sample_path / compare_paths: single and multi-path walks
    - ConsoleReporter: plain text rendering of the results
"""

from mvcalc import CalculusKernel, KernelConfig
from mvcalc.visualizers import ConsoleReporter


# =============================================================================
# Step 1: Classic limit exercises
# =============================================================================

EXERCISES = [
    ("(x^2 - y^2)/(x - y)", "Removable singularity: equals x + y off the diagonal"),
    ("x*y/(x^2 + y^2)", "Path dependent: 1/2 along y = x, 0 along the axes"),
    ("sin(x^2 + y^2)/(x^2 + y^2)", "Radial sinc: tends to 1 from every direction"),
    ("x^2*y/(x^4 + y^2)", "Fools straight lines: 0 along every line, 1/2 along y = x^2"),
]


# =============================================================================
# Step 2: Walk and report
# =============================================================================

def run_exercise(kernel, reporter, expression, description):
    print("\n" + "=" * 72)
    print(f"Exercise: {expression}")
    print("=" * 72)
    print(f"{description}\n")

    result = kernel.sample_path(expression, 0, "diagonal")
    print(reporter.format_limit(result, rows=5))
    print()
    print(reporter.format_comparison(kernel.compare_paths(expression, 0)))


def main():
    print("=" * 72)
    print(" " * 22 + "LIMITS ALONG APPROACH PATHS")
    print("=" * 72)

    kernel = CalculusKernel(config=KernelConfig(path_steps=40))
    reporter = ConsoleReporter()

    for expression, description in EXERCISES:
        run_exercise(kernel, reporter, expression, description)

    print("\nDone!")


if __name__ == "__main__":
    main()
