"""Builders for 4x4 transformation, view and projection matrices.

Angles are given in degrees. Matrices follow the OpenGL column-vector
convention: points are transformed as ``matrix @ vec4(x, y, z, 1)`` and the
translation lives in the last column.
"""
from __future__ import annotations

import math
from typing import List, Sequence

from .diagnostics import report
from .matrix import Matrix
from .operations import linear_equivalence, linear_subtract
from .result import DegenerateGeometryError, InvalidArgumentError, LinearResult
from .vector import (
    Vector,
    cross_product,
    degrees_to_radians,
    dot_product,
    negate_vector,
    normalize_vector,
    vec3,
)


def _identity_rows() -> List[List[float]]:
    return [[1.0 if i == j else 0.0 for j in range(4)] for i in range(4)]


def _unpack_triple(operation: str, values: Sequence[float]) -> Sequence[float]:
    items = tuple(values)
    if len(items) != 3:
        raise InvalidArgumentError(f"{operation}(): expected three components, got {len(items)}")
    return items


# //1.- Identity with the offsets written into the last column.
def translate_matrix(x: float, y: float, z: float) -> Matrix:
    rows = _identity_rows()
    rows[0][3] = x
    rows[1][3] = y
    rows[2][3] = z
    return Matrix.from_rows(rows)


def translate_matrix_from(offsets: Sequence[float]) -> Matrix:
    return translate_matrix(*_unpack_triple("translate_matrix_from", offsets))


# //2.- Identity with the scale factors on the diagonal.
def scaling_matrix(x: float, y: float, z: float) -> Matrix:
    rows = _identity_rows()
    rows[0][0] = x
    rows[1][1] = y
    rows[2][2] = z
    return Matrix.from_rows(rows)


def scaling_matrix_from(factors: Sequence[float]) -> Matrix:
    return scaling_matrix(*_unpack_triple("scaling_matrix_from", factors))


# //3.- Rodrigues rotation about an arbitrary axis.
def rotate_matrix(angle: float, axis: Sequence[float]) -> LinearResult[Matrix]:
    """Rotate by ``angle`` degrees about ``axis``; the axis need not be unit length."""

    components = tuple(axis)
    if len(components) != 3:
        return report("rotate_matrix", InvalidArgumentError("Rotation axis must have three components."))
    normalized = normalize_vector(vec3(*components))
    if not normalized.ok:
        return LinearResult.failure(normalized.error)  # type: ignore[arg-type]
    x, y, z = normalized.unwrap()

    radians = degrees_to_radians(angle)
    c = math.cos(radians)
    omc = 1.0 - c
    s = math.sin(radians)

    return LinearResult.success(
        Matrix.from_rows(
            (
                (x * x * omc + c, x * y * omc - z * s, x * z * omc + y * s, 0.0),
                (x * y * omc + z * s, y * y * omc + c, y * z * omc - x * s, 0.0),
                (x * z * omc - y * s, y * z * omc + x * s, z * z * omc + c, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )
    )


def rotate_matrix_about(angle: float, x: float, y: float, z: float) -> LinearResult[Matrix]:
    return rotate_matrix(angle, (x, y, z))


# //4.- Closed-form rotations about the principal axes.
def rotate_x(theta: float) -> Matrix:
    c = math.cos(degrees_to_radians(theta))
    s = math.sin(degrees_to_radians(theta))
    return Matrix.from_rows(
        (
            (1.0, 0.0, 0.0, 0.0),
            (0.0, c, -s, 0.0),
            (0.0, s, c, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def rotate_y(theta: float) -> Matrix:
    c = math.cos(degrees_to_radians(theta))
    s = math.sin(degrees_to_radians(theta))
    return Matrix.from_rows(
        (
            (c, 0.0, s, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (-s, 0.0, c, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def rotate_z(theta: float) -> Matrix:
    c = math.cos(degrees_to_radians(theta))
    s = math.sin(degrees_to_radians(theta))
    return Matrix.from_rows(
        (
            (c, -s, 0.0, 0.0),
            (s, c, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


# //5.- Camera view matrix looking from eye towards at.
def view_matrix_at(eye: Vector, at: Vector, up: Vector) -> LinearResult[Matrix]:
    for name, value in (("eye", eye), ("at", at), ("up", up)):
        if not isinstance(value, Vector) or len(value) != 3:
            return report(
                "view_matrix_at",
                InvalidArgumentError(f"Parameter [{name}] must be in the form of a vec3."),
            )

    if linear_equivalence(eye, at):
        return LinearResult.success(Matrix.identity(4))

    forward = normalize_vector(linear_subtract(at, eye).unwrap())
    if not forward.ok:
        return LinearResult.failure(forward.error)  # type: ignore[arg-type]
    right = normalize_vector(cross_product(forward.unwrap(), up).unwrap())
    if not right.ok:
        # up is parallel to the viewing direction
        return LinearResult.failure(right.error)  # type: ignore[arg-type]
    v = forward.unwrap()
    n = right.unwrap()
    u = normalize_vector(cross_product(n, v).unwrap()).unwrap()
    v = negate_vector(v)

    return LinearResult.success(
        Matrix.from_rows(
            (
                (*n, -dot_product(n, eye).unwrap()),
                (*u, -dot_product(u, eye).unwrap()),
                (*v, -dot_product(v, eye).unwrap()),
                (0.0, 0.0, 0.0, 1.0),
            )
        )
    )


# //6.- OpenGL style orthographic projection; coincident bounds are fatal.
def orthographic_matrix(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float,
) -> Matrix:
    if left == right:
        raise DegenerateGeometryError("orthographic_matrix(): left and right are equal")
    if bottom == top:
        raise DegenerateGeometryError("orthographic_matrix(): bottom and top are equal")
    if near == far:
        raise DegenerateGeometryError("orthographic_matrix(): near and far are equal")

    w = right - left
    h = top - bottom
    d = far - near

    rows = _identity_rows()
    rows[0][0] = 2.0 / w
    rows[1][1] = 2.0 / h
    rows[2][2] = -2.0 / d
    rows[0][3] = -(left + right) / w
    rows[1][3] = -(top + bottom) / h
    rows[2][3] = -(near + far) / d
    return Matrix.from_rows(rows)


# //7.- OpenGL style perspective projection from a vertical field of view.
def perspective_matrix(fov_y: float, aspect: float, near: float, far: float) -> LinearResult[Matrix]:
    if aspect == 0:
        return report("perspective_matrix", InvalidArgumentError("Aspect ratio must not be zero."))
    if near == far:
        return report("perspective_matrix", InvalidArgumentError("near and far are equal."))
    half_angle = math.tan(degrees_to_radians(fov_y) / 2.0)
    if half_angle == 0.0:
        return report("perspective_matrix", InvalidArgumentError("Field of view must not be zero."))
    f = 1.0 / half_angle
    d = far - near

    rows = _identity_rows()
    rows[0][0] = f / aspect
    rows[1][1] = f
    rows[2][2] = -(near + far) / d
    rows[2][3] = -2.0 * near * far / d
    rows[3][2] = -1.0
    rows[3][3] = 0.0
    return LinearResult.success(Matrix.from_rows(rows))


__all__ = [
    "translate_matrix",
    "translate_matrix_from",
    "scaling_matrix",
    "scaling_matrix_from",
    "rotate_matrix",
    "rotate_matrix_about",
    "rotate_x",
    "rotate_y",
    "rotate_z",
    "view_matrix_at",
    "orthographic_matrix",
    "perspective_matrix",
]
