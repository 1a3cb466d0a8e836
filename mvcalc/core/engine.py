# -*- coding: utf-8 -*-
"""
Kernel Configuration
====================

Every tunable constant of the kernel lives in ``KernelConfig``: finite
difference step, walk sizes, and the tolerances used by the heuristic tests.

The defaults reproduce the behaviour the teaching scenarios were calibrated
against:

- step = 1e-4 for every finite-difference stencil
- 20 path steps, limit estimated from the last 5 defined values
- cross-partials match when they differ by less than 1e-4
- a grid point lies "on" a contour when it is within 0.1 of the level
"""

from dataclasses import dataclass
from typing import Tuple

Range = Tuple[float, float]

DEFAULT_STEP = 1e-4


@dataclass
class KernelConfig:
    """Configuration for the calculus kernel."""

    # Finite differences
    step: float = DEFAULT_STEP

    # Limit path sampling
    path_steps: int = 20
    approach_radius: float = 0.05
    limit_window: int = 5
    path_agreement_tolerance: float = 0.01

    # Heuristic tolerances
    conservative_tolerance: float = 1e-4
    contour_tolerance: float = 0.1
    lagrange_tolerance: float = 0.1

    # Grid sampling
    surface_resolution: int = 30
    contour_resolution: int = 50
    x_range: Range = (-5.0, 5.0)
    y_range: Range = (-5.0, 5.0)

    def __post_init__(self):
        if not self.step > 0:
            raise ValueError(f"step must be positive, got {self.step}")
        if not self.approach_radius > 0:
            raise ValueError(f"approach_radius must be positive, got {self.approach_radius}")
        for name in ("path_steps", "limit_window", "surface_resolution", "contour_resolution"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be at least 1, got {getattr(self, name)}")
        for name in ("conservative_tolerance", "contour_tolerance",
                     "lagrange_tolerance", "path_agreement_tolerance"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative, got {getattr(self, name)}")


def check_step(step: float) -> float:
    """Validate a finite-difference step and return it."""
    if not step > 0:
        raise ValueError(f"step must be positive, got {step}")
    return step
