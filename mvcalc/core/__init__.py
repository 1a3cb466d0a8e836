"""Core calculus kernel components."""

from .engine import KernelConfig, DEFAULT_STEP
from .evaluator import (
    EvaluationError,
    ExpressionEvaluator,
    FunctionEvaluator,
    MvcalcError,
    SympyEvaluator,
    default_evaluator,
    evaluate_or_nan,
)
from .geometry import Point, Vector, normalize
from .differences import partial, second_partial, mixed_partial, is_undefined
from .operators import gradient, directional_derivative, divergence, curl_2d, tangent_plane

__all__ = [
    # Configuration
    "KernelConfig",
    "DEFAULT_STEP",
    # Evaluation
    "EvaluationError",
    "ExpressionEvaluator",
    "FunctionEvaluator",
    "MvcalcError",
    "SympyEvaluator",
    "default_evaluator",
    "evaluate_or_nan",
    # Geometry
    "Point",
    "Vector",
    "normalize",
    # Finite differences
    "partial",
    "second_partial",
    "mixed_partial",
    "is_undefined",
    # Operators
    "gradient",
    "directional_derivative",
    "divergence",
    "curl_2d",
    "tangent_plane",
]
