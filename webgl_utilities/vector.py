"""Fixed-size vectors and the vector-only helpers.

Vectors carry two, three or four float components and never change after
construction. Missing trailing components are padded the way shader code
expects them: ``0.0`` everywhere except the fourth (homogeneous) component,
which defaults to ``1.0``.
"""
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from .diagnostics import report
from .result import InvalidArgumentError, LinearResult, ShapeMismatchError

VECTOR_SIZES = (2, 3, 4)


def is_number(value: object) -> bool:
    """Real numbers only; booleans are rejected even though they subclass int."""

    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class Vector:
    """Immutable vector of 2, 3 or 4 float components."""

    components: Tuple[float, ...]

    def __post_init__(self) -> None:
        values = tuple(self.components)
        if len(values) not in VECTOR_SIZES:
            raise ShapeMismatchError(f"Vectors hold 2, 3 or 4 components, got {len(values)}")
        for value in values:
            if not is_number(value):
                raise InvalidArgumentError(f"Vector components must be numbers, got {value!r}")
        object.__setattr__(self, "components", tuple(float(value) for value in values))

    @classmethod
    def from_sequence(cls, values: Iterable[float], size: int) -> "Vector":
        """Build a ``size`` component vector, truncating or padding ``values``."""

        if size not in VECTOR_SIZES:
            raise InvalidArgumentError(f"Unsupported vector size: {size}")
        items = list(values)[:size]
        while len(items) < size:
            # Only the homogeneous w slot defaults to one.
            items.append(1.0 if len(items) == 3 else 0.0)
        return cls(tuple(items))

    @classmethod
    def from_components(cls, *values: float, size: int) -> "Vector":
        return cls.from_sequence(values, size)

    @property
    def size(self) -> int:
        return len(self.components)

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[float]:
        return iter(self.components)

    def __getitem__(self, index: int) -> float:
        return self.components[index]

    def __add__(self, other: "Vector") -> "Vector":
        from .operations import linear_add

        return linear_add(self, other).unwrap()

    def __sub__(self, other: "Vector") -> "Vector":
        from .operations import linear_subtract

        return linear_subtract(self, other).unwrap()

    def __mul__(self, other):
        from .operations import linear_multiply, linear_scale

        if isinstance(other, Vector):
            return linear_multiply(self, other).unwrap()
        if is_number(other):
            return linear_scale(other, self).unwrap()
        return NotImplemented

    def __rmul__(self, other):
        if is_number(other):
            return self.__mul__(other)
        return NotImplemented

    def __neg__(self) -> "Vector":
        return negate_vector(self)


def vec2(*components: float) -> Vector:
    return Vector.from_sequence(components, 2)


def vec3(*components: float) -> Vector:
    return Vector.from_sequence(components, 3)


def vec4(*components: float) -> Vector:
    """Return a homogeneous vector; ``vec4()`` is the origin ``(0, 0, 0, 1)``."""

    return Vector.from_sequence(components, 4)


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


# //1.- Compute the dot product of two equally sized vectors.
def dot_product(u: Vector, v: Vector) -> LinearResult[float]:
    if not isinstance(u, Vector) or not isinstance(v, Vector):
        return report("dot_product", InvalidArgumentError("Both arguments must be vectors."))
    if len(u) != len(v):
        return report("dot_product", ShapeMismatchError("Vectors are not the same dimension."))
    return LinearResult.success(math.fsum(a * b for a, b in zip(u, v)))


# //2.- Cross product of the first three components following the right-hand rule.
def cross_product(u: Vector, v: Vector) -> LinearResult[Vector]:
    if not isinstance(u, Vector) or len(u) < 3:
        return report(
            "cross_product",
            InvalidArgumentError("First argument is not a vector of minimum size, 3."),
        )
    if not isinstance(v, Vector) or len(v) < 3:
        return report(
            "cross_product",
            InvalidArgumentError("Second argument is not a vector of minimum size, 3."),
        )
    ux, uy, uz = u.components[:3]
    vx, vy, vz = v.components[:3]
    return LinearResult.success(Vector((uy * vz - uz * vy, uz * vx - ux * vz, ux * vy - uy * vx)))


# //3.- Euclidean length of a vector.
def vector_length(u: Vector) -> float:
    return math.sqrt(sum(component * component for component in u))


# //4.- Scale a vector to unit length, optionally leaving the last component alone.
def normalize_vector(u: Vector, exclude_last: bool = False) -> LinearResult[Vector]:
    if not isinstance(u, Vector):
        return report("normalize_vector", InvalidArgumentError("Argument must be a vector."))
    leading = u.components[:-1] if exclude_last else u.components
    length = math.sqrt(sum(component * component for component in leading))
    if length == 0.0 or not math.isfinite(length):
        return report("normalize_vector", InvalidArgumentError("Vector has zero length."))
    normalized = tuple(component / length for component in leading)
    if exclude_last:
        normalized += (u.components[-1],)
    return LinearResult.success(Vector(normalized))


# //5.- Flip the sign of every component.
def negate_vector(u: Vector) -> Vector:
    return Vector(tuple(-component for component in u))


# //6.- Linearly interpolate between two vectors using parameter s.
def mix_vectors(u: Vector, v: Vector, s: float) -> LinearResult[Vector]:
    if not is_number(s):
        return report("mix_vectors", InvalidArgumentError("The third parameter must be a number."))
    if len(u) != len(v):
        return report("mix_vectors", ShapeMismatchError("Vectors are not the same dimension."))
    return LinearResult.success(Vector(tuple((1.0 - s) * a + s * b for a, b in zip(u, v))))


__all__ = [
    "VECTOR_SIZES",
    "Vector",
    "is_number",
    "vec2",
    "vec3",
    "vec4",
    "degrees_to_radians",
    "dot_product",
    "cross_product",
    "vector_length",
    "normalize_vector",
    "negate_vector",
    "mix_vectors",
]
