# -*- coding: utf-8 -*-
"""
Multivariable Calculus Kernel
=============================

Numerical calculus on expressions of two or three real variables, built for
interactive teaching tools.

Everything is computed by finite differences and sampling, never symbolically:

- **Partial derivatives**: central differences with a fixed step (1e-4)
- **Gradient / directional derivative**: vectors sized by the point you pass
- **Limits**: walk towards a point along axis, diagonal or parabolic paths
- **Conservative fields**: compare ∂P/∂y and ∂Q/∂x at sample points
- **Critical points**: Hessian determinant test (max / min / saddle)
- **Surfaces and contours**: grid scans for plotting

Quick Start:
    >>> from mvcalc import CalculusKernel
    >>>
    >>> kernel = CalculusKernel()
    >>> kernel.gradient("x^2 * y + y^3", (1, 2))        # ~ (4, 13)
    >>> kernel.classify("x^2 - y^2", (0, 0))            # HessianVerdict.SADDLE
    >>> kernel.compare_paths("x*y/(x^2+y^2)").path_dependent   # True

Expressions are evaluated by an injected ExpressionEvaluator (SymPy by
default). Any value the evaluator cannot produce becomes NaN and the
operations carry on; heuristic outcomes such as "no limit along this path"
are reported as results, not errors.
"""

import logging

__version__ = "1.0.0"

from .core.engine import KernelConfig
from .core.evaluator import (
    EvaluationError,
    ExpressionEvaluator,
    FunctionEvaluator,
    MvcalcError,
    SympyEvaluator,
)
from .core.geometry import Point, Vector, normalize
from .core.differences import partial, second_partial, mixed_partial, is_undefined
from .core.operators import gradient, directional_derivative, divergence, curl_2d, tangent_plane
from .core.results import (
    ContourLevel,
    CutSample,
    FieldCheckResult,
    FieldEvidence,
    HessianTest,
    HessianVerdict,
    LagrangeCheck,
    LimitResult,
    PathComparison,
    PathKind,
    PathSample,
    SampleSeries,
    SurfacePoint,
    TangentPlane,
)
from .analyzers import (
    CalculusKernel,
    sample_path,
    compare_paths,
    test_conservative,
    potential_hint,
    classify,
    second_derivative_test,
    lagrange_condition,
    sample_surface,
    sample_contours,
    sample_cut,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Configuration and evaluation
    "KernelConfig",
    "EvaluationError",
    "ExpressionEvaluator",
    "FunctionEvaluator",
    "MvcalcError",
    "SympyEvaluator",
    # Geometry
    "Point",
    "Vector",
    "normalize",
    # Derivatives and operators
    "partial",
    "second_partial",
    "mixed_partial",
    "is_undefined",
    "gradient",
    "directional_derivative",
    "divergence",
    "curl_2d",
    "tangent_plane",
    # Results
    "ContourLevel",
    "CutSample",
    "FieldCheckResult",
    "FieldEvidence",
    "HessianTest",
    "HessianVerdict",
    "LagrangeCheck",
    "LimitResult",
    "PathComparison",
    "PathKind",
    "PathSample",
    "SampleSeries",
    "SurfacePoint",
    "TangentPlane",
    # Analyzers
    "CalculusKernel",
    "sample_path",
    "compare_paths",
    "test_conservative",
    "potential_hint",
    "classify",
    "second_derivative_test",
    "lagrange_condition",
    "sample_surface",
    "sample_contours",
    "sample_cut",
]
