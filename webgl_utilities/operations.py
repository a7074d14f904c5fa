"""Generic operations shared by vectors and matrices.

Each function dispatches on the operand types: two matrices, a matrix and a
vector, or two vectors. Mixed or mismatched shapes produce a failed
:class:`~webgl_utilities.result.LinearResult` and a logged diagnostic.
"""
from __future__ import annotations

import math
from typing import Callable, Union

from .diagnostics import report
from .matrix import Matrix
from .result import InvalidArgumentError, LinearResult, ShapeMismatchError
from .vector import Vector, is_number

Linear = Union[Vector, Matrix]


def _check_kinds(operation: str, u: object, v: object) -> LinearResult[None]:
    if not isinstance(u, (Vector, Matrix)) or not isinstance(v, (Vector, Matrix)):
        return report(operation, InvalidArgumentError("Operands must be vectors or matrices."))
    if isinstance(u, Matrix) != isinstance(v, Matrix):
        return report(operation, ShapeMismatchError("Cannot combine matrix and non-matrix variables."))
    if len(u) != len(v):
        return report(operation, ShapeMismatchError("Operands have different dimensions."))
    return LinearResult.success(None)


def _componentwise(
    operation: str,
    u: Linear,
    v: Linear,
    combine: Callable[[float, float], float],
) -> LinearResult[Linear]:
    checked = _check_kinds(operation, u, v)
    if not checked.ok:
        return LinearResult.failure(checked.error)  # type: ignore[arg-type]
    if isinstance(u, Matrix):
        return LinearResult.success(
            Matrix(tuple(tuple(combine(a, b) for a, b in zip(ru, rv)) for ru, rv in zip(u.rows, v.rows)))  # type: ignore[union-attr]
        )
    return LinearResult.success(Vector(tuple(combine(a, b) for a, b in zip(u, v))))  # type: ignore[arg-type]


def linear_equivalence(u: object, v: object) -> bool:
    """Exact, component-by-component equality; matrices never equal vectors."""

    if isinstance(u, Matrix) != isinstance(v, Matrix):
        return False
    if isinstance(u, Matrix):
        return u.rows == v.rows  # type: ignore[union-attr]
    if isinstance(u, Vector) and isinstance(v, Vector):
        return u.components == v.components
    return False


def linear_add(u: Linear, v: Linear) -> LinearResult[Linear]:
    return _componentwise("linear_add", u, v, lambda a, b: a + b)


def linear_subtract(u: Linear, v: Linear) -> LinearResult[Linear]:
    return _componentwise("linear_subtract", u, v, lambda a, b: a - b)


def linear_multiply(u: Linear, v: Linear) -> LinearResult[Linear]:
    """Multiply two operands.

    * matrix x matrix: the usual row-by-column product.
    * matrix x vector: each output component is a row dotted with the vector.
    * vector x vector: the elementwise product (see ``dot_product`` for the
      scalar product).
    """

    if isinstance(u, Matrix) and isinstance(v, Vector):
        if u.dimension != len(v):
            return report(
                "linear_multiply",
                ShapeMismatchError("Cannot multiply vectors/matrices of different dimensions."),
            )
        return LinearResult.success(Vector(tuple(math.fsum(a * b for a, b in zip(row, v)) for row in u.rows)))

    checked = _check_kinds("linear_multiply", u, v)
    if not checked.ok:
        return LinearResult.failure(checked.error)  # type: ignore[arg-type]

    if isinstance(u, Matrix):
        columns = tuple(zip(*v.rows))  # type: ignore[union-attr]
        return LinearResult.success(
            Matrix(tuple(tuple(math.fsum(a * b for a, b in zip(row, column)) for column in columns) for row in u.rows))
        )
    return LinearResult.success(Vector(tuple(a * b for a, b in zip(u, v))))  # type: ignore[arg-type]


def linear_scale(s: float, u: Linear) -> LinearResult[Linear]:
    """Multiply every component of ``u`` by the scalar ``s``."""

    if not is_number(s):
        return report("linear_scale", InvalidArgumentError("The first parameter must be a number."))
    if isinstance(u, Matrix):
        return LinearResult.success(Matrix(tuple(tuple(s * value for value in row) for row in u.rows)))
    if isinstance(u, Vector):
        return LinearResult.success(Vector(tuple(s * value for value in u)))
    return report("linear_scale", InvalidArgumentError("The second parameter must be a vector/matrix."))


__all__ = [
    "linear_equivalence",
    "linear_add",
    "linear_subtract",
    "linear_multiply",
    "linear_scale",
]
