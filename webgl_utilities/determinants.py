"""Determinants, inverses and the normal matrix.

Determinants use closed-form cofactor expansion: the 4x4 case expands along
the first row into four 3x3 minors. Inverses are the adjugate divided by the
determinant. Only 2x2, 3x3 and 4x4 matrices exist, so no elimination scheme
is needed.
"""
from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .config import DEFAULT_CONFIG, UtilityConfig
from .diagnostics import report
from .matrix import Matrix
from .result import InvalidArgumentError, LinearResult, SingularMatrixError

Rows = Sequence[Sequence[float]]


def _minor(m: Rows, row: int, column: int) -> Tuple[Tuple[float, ...], ...]:
    """Drop ``row`` and ``column`` from ``m``."""

    return tuple(
        tuple(value for j, value in enumerate(values) if j != column)
        for i, values in enumerate(m)
        if i != row
    )


def det2(m: Rows) -> float:
    return m[0][0] * m[1][1] - m[0][1] * m[1][0]


def det3(m: Rows) -> float:
    return (
        m[0][0] * m[1][1] * m[2][2]
        + m[0][1] * m[1][2] * m[2][0]
        + m[0][2] * m[2][1] * m[1][0]
        - m[2][0] * m[1][1] * m[0][2]
        - m[1][0] * m[0][1] * m[2][2]
        - m[0][0] * m[1][2] * m[2][1]
    )


def det4(m: Rows) -> float:
    return (
        m[0][0] * det3(_minor(m, 0, 0))
        - m[0][1] * det3(_minor(m, 0, 1))
        + m[0][2] * det3(_minor(m, 0, 2))
        - m[0][3] * det3(_minor(m, 0, 3))
    )


_DETERMINANTS = {2: det2, 3: det3, 4: det4}


def determinant(m: Matrix) -> LinearResult[float]:
    if not isinstance(m, Matrix):
        return report("determinant", InvalidArgumentError("Variable is not a matrix."))
    return LinearResult.success(_DETERMINANTS[m.dimension](m.rows))


def _checked_determinant(d: float) -> float:
    if d == 0:
        raise SingularMatrixError("Matrix is singular (determinant 0.0).")
    return d


def _adjugate_inverse(m: Rows, d: float) -> Matrix:
    """Transposed cofactor matrix divided by ``d``.

    Entry ``[i][j]`` of the inverse is the signed cofactor of ``m[j][i]``.
    """

    size = len(m)
    minor_det = _DETERMINANTS[size - 1]
    return Matrix.from_rows(
        (
            tuple(
                (-1.0 if (i + j) % 2 else 1.0) * minor_det(_minor(m, j, i)) / d
                for j in range(size)
            )
            for i in range(size)
        )
    )


def inverse2(m: Rows) -> Matrix:
    d = _checked_determinant(det2(m))
    return Matrix.from_rows(
        (
            (m[1][1] / d, -m[0][1] / d),
            (-m[1][0] / d, m[0][0] / d),
        )
    )


def inverse3(m: Rows) -> Matrix:
    return _adjugate_inverse(m, _checked_determinant(det3(m)))


def inverse4(m: Rows) -> Matrix:
    return _adjugate_inverse(m, _checked_determinant(det4(m)))


_INVERSES = {2: inverse2, 3: inverse3, 4: inverse4}


def inverse(m: Matrix, config: Optional[UtilityConfig] = None) -> LinearResult[Matrix]:
    """Invert ``m``, failing with :class:`SingularMatrixError` on a zero determinant.

    ``config.singular_epsilon`` widens "zero" to ``abs(det) <= epsilon``.
    """

    config = config or DEFAULT_CONFIG
    if not isinstance(m, Matrix):
        return report("inverse", InvalidArgumentError("Variable is not a matrix."))
    d = _DETERMINANTS[m.dimension](m.rows)
    if abs(d) <= config.singular_epsilon:
        return report("inverse", SingularMatrixError(f"Matrix is singular (determinant {d!r})."))
    return LinearResult.success(_INVERSES[m.dimension](m.rows))


def normal_matrix(
    m: Matrix,
    truncate: bool = False,
    config: Optional[UtilityConfig] = None,
) -> LinearResult[Matrix]:
    """Inverse-transpose of a 4x4 model matrix, optionally cut down to its 3x3 block."""

    if not isinstance(m, Matrix) or m.dimension != 4:
        return report("normal_matrix", InvalidArgumentError("Normal matrices are derived from a mat4."))
    result = inverse(m.transposed(), config)
    if not result.ok or not truncate:
        return result
    upper = result.unwrap()
    return LinearResult.success(Matrix.from_rows(row[:3] for row in upper.rows[:3]))


__all__ = [
    "det2",
    "det3",
    "det4",
    "determinant",
    "inverse2",
    "inverse3",
    "inverse4",
    "inverse",
    "normal_matrix",
]
