# -*- coding: utf-8 -*-
"""
Points and Vectors
==================

Immutable coordinate records shared by every kernel routine.

A Point always carries ``x`` and ``y``; ``z`` is optional and its presence is
what makes an operation three-dimensional. Operations never mutate a Point,
they return new ones.
"""

import math
import numbers
from dataclasses import dataclass, replace
from typing import Dict, Iterator, Mapping, Optional, Sequence, Tuple, Union

COORDINATE_NAMES: Tuple[str, ...] = ("x", "y", "z")


@dataclass(frozen=True)
class Point:
    """
    A location in the plane or in space.

    Attributes:
        x: First coordinate
        y: Second coordinate
        z: Optional third coordinate (None for planar points)
    """

    x: float
    y: float
    z: Optional[float] = None

    @property
    def coordinates(self) -> Tuple[str, ...]:
        """Names of the populated coordinates, in order."""
        return COORDINATE_NAMES if self.z is not None else COORDINATE_NAMES[:2]

    @property
    def dimension(self) -> int:
        return len(self.coordinates)

    def get(self, name: str) -> float:
        """Value of coordinate ``name``; an unpopulated ``z`` reads as 0."""
        if name not in COORDINATE_NAMES:
            raise ValueError(f"Unknown coordinate {name!r}, expected one of {COORDINATE_NAMES}")
        value = getattr(self, name)
        return 0.0 if value is None else value

    def shifted(self, name: str, delta: float) -> "Point":
        """Return a copy with coordinate ``name`` moved by ``delta``."""
        return replace(self, **{name: self.get(name) + delta})

    def as_bindings(self) -> Dict[str, float]:
        """Variable bindings for an expression evaluator."""
        return {name: float(getattr(self, name)) for name in self.coordinates}

    def __iter__(self) -> Iterator[float]:
        return (getattr(self, name) for name in self.coordinates)

    @classmethod
    def coerce(cls, value: "PointLike") -> "Point":
        """
        Build an instance from a Point, a mapping or a 2/3-sequence.

        A plain number ``c`` is read as the planar point ``(c, c)``.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, Point):
            return cls(value.x, value.y, value.z)
        if isinstance(value, numbers.Real):
            return cls(float(value), float(value))
        if isinstance(value, Mapping):
            z = value.get("z")
            return cls(float(value["x"]), float(value["y"]), None if z is None else float(z))
        coords = [float(v) for v in value]
        if len(coords) not in (2, 3):
            raise ValueError(f"Expected 2 or 3 coordinates, got {len(coords)}")
        return cls(*coords)


@dataclass(frozen=True)
class Vector(Point):
    """A Point used as a direction or a gradient."""

    def dot(self, other: Point) -> float:
        """
        Dot product over the coordinates both vectors populate.

        ``z`` only contributes when it is present on both sides.
        """
        total = self.x * other.x + self.y * other.y
        if self.z is not None and other.z is not None:
            total += self.z * other.z
        return total

    @property
    def magnitude(self) -> float:
        return math.sqrt(sum(c * c for c in self))

    def scaled(self, factor: float) -> "Vector":
        return Vector(
            self.x * factor,
            self.y * factor,
            None if self.z is None else self.z * factor,
        )

    @property
    def is_zero(self) -> bool:
        return all(c == 0.0 for c in self)


PointLike = Union[Point, Mapping[str, float], Sequence[float], float]


def normalize(vector: "PointLike") -> Vector:
    """
    Return ``vector / |vector|``.

    Total function: the zero vector normalizes to the zero vector (of the same
    dimension) instead of raising.
    """
    v = Vector.coerce(vector)
    magnitude = v.magnitude
    if magnitude == 0.0:
        return Vector(0.0, 0.0, None if v.z is None else 0.0)
    return Vector(
        v.x / magnitude,
        v.y / magnitude,
        None if v.z is None else v.z / magnitude,
    )
