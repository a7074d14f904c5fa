"""Square matrices stored as rows of floats.

The :class:`Matrix` type is what distinguishes a matrix from a vector of
vectors: operations dispatch on it, flattening transposes it, and every
matrix-producing helper returns a new ``Matrix``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple

from .diagnostics import report
from .result import InvalidArgumentError, LinearResult, ShapeMismatchError
from .vector import Vector, is_number

MATRIX_DIMENSIONS = (2, 3, 4)

Row = Tuple[float, ...]


@dataclass(frozen=True)
class Matrix:
    """Immutable ``n x n`` matrix with ``n`` in 2, 3 or 4."""

    rows: Tuple[Row, ...]

    def __post_init__(self) -> None:
        rows = tuple(tuple(row) for row in self.rows)
        dimension = len(rows)
        if dimension not in MATRIX_DIMENSIONS:
            raise ShapeMismatchError(f"Matrices are 2x2, 3x3 or 4x4, got {dimension} rows")
        for row in rows:
            if len(row) != dimension:
                raise ShapeMismatchError(
                    f"Every row of a {dimension}x{dimension} matrix needs {dimension} entries, got {len(row)}"
                )
            for value in row:
                if not is_number(value):
                    raise InvalidArgumentError(f"Matrix entries must be numbers, got {value!r}")
        object.__setattr__(self, "rows", tuple(tuple(float(value) for value in row) for row in rows))

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> "Matrix":
        return cls(tuple(tuple(row) for row in rows))

    @classmethod
    def identity(cls, dimension: int) -> "Matrix":
        return cls.scalar(1.0, dimension)

    @classmethod
    def scalar(cls, value: float, dimension: int) -> "Matrix":
        if dimension not in MATRIX_DIMENSIONS:
            raise InvalidArgumentError(f"Unsupported matrix dimension: {dimension}")
        return cls(tuple(tuple(value if i == j else 0.0 for j in range(dimension)) for i in range(dimension)))

    @classmethod
    def from_sequence(cls, values: Sequence[float], dimension: int) -> "Matrix":
        """Build a matrix from row-major ``values``.

        No values yields the identity and a single value a scaled identity.
        Otherwise each row is built like a vector of the same size, so short
        input pads with zeros (and a one in the w slot of 4x4 rows).
        """

        if dimension not in MATRIX_DIMENSIONS:
            raise InvalidArgumentError(f"Unsupported matrix dimension: {dimension}")
        values = list(values)
        if len(values) <= 1:
            return cls.scalar(values[0] if values else 1.0, dimension)
        return cls(
            tuple(
                Vector.from_sequence(values[index * dimension:(index + 1) * dimension], dimension).components
                for index in range(dimension)
            )
        )

    @property
    def dimension(self) -> int:
        return len(self.rows)

    def row(self, index: int) -> Vector:
        return Vector(self.rows[index])

    def column(self, index: int) -> Vector:
        return Vector(tuple(row[index] for row in self.rows))

    def transposed(self) -> "Matrix":
        return Matrix(tuple(zip(*self.rows)))

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> Row:
        return self.rows[index]

    def __add__(self, other: "Matrix") -> "Matrix":
        from .operations import linear_add

        return linear_add(self, other).unwrap()

    def __sub__(self, other: "Matrix") -> "Matrix":
        from .operations import linear_subtract

        return linear_subtract(self, other).unwrap()

    def __matmul__(self, other):
        from .operations import linear_multiply

        if isinstance(other, (Matrix, Vector)):
            return linear_multiply(self, other).unwrap()
        return NotImplemented

    def __mul__(self, other):
        from .operations import linear_scale

        if is_number(other):
            return linear_scale(other, self).unwrap()
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> "Matrix":
        return Matrix(tuple(tuple(-value for value in row) for row in self.rows))


def mat2(*values: float) -> Matrix:
    return Matrix.from_sequence(values, 2)


def mat3(*values: float) -> Matrix:
    return Matrix.from_sequence(values, 3)


def mat4(*values: float) -> Matrix:
    return Matrix.from_sequence(values, 4)


def transpose_matrix(m: Matrix) -> LinearResult[Matrix]:
    if not isinstance(m, Matrix):
        return report("transpose_matrix", InvalidArgumentError("Cannot transpose a non-matrix."))
    return LinearResult.success(m.transposed())


__all__ = ["MATRIX_DIMENSIONS", "Matrix", "mat2", "mat3", "mat4", "transpose_matrix"]
