from .limits import sample_path, compare_paths, estimate_limit
from .fields import test_conservative, potential_hint, DEFAULT_SAMPLE_POINTS
from .extrema import classify, second_derivative_test, lagrange_condition
from .surfaces import sample_surface, sample_contours, sample_cut
from .kernel import CalculusKernel

__all__ = [
    "sample_path",
    "compare_paths",
    "estimate_limit",
    "test_conservative",
    "potential_hint",
    "DEFAULT_SAMPLE_POINTS",
    "classify",
    "second_derivative_test",
    "lagrange_condition",
    "sample_surface",
    "sample_contours",
    "sample_cut",
    "CalculusKernel",
]
