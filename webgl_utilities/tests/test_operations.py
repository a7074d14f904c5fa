"""Tests for equality, addition, subtraction, multiplication and scaling."""
from __future__ import annotations

import pytest

from webgl_utilities.matrix import Matrix, mat2, mat3
from webgl_utilities.operations import (
    linear_add,
    linear_equivalence,
    linear_multiply,
    linear_scale,
    linear_subtract,
)
from webgl_utilities.result import InvalidArgumentError, ShapeMismatchError
from webgl_utilities.vector import vec2, vec3, vec4


def test_equivalence() -> None:
    assert linear_equivalence(mat2(1, 2, 3, 4), mat2(1, 2, 3, 4))
    assert not linear_equivalence(mat2(1, 2, 3, 4), mat2(1, 2, 3, 5))
    assert linear_equivalence(vec3(1, 2, 3), vec3(1, 2, 3))
    assert not linear_equivalence(vec3(1, 2, 3), vec4(1, 2, 3))
    assert not linear_equivalence(mat2(), mat3())


def test_matrix_never_equals_nested_vectors() -> None:
    assert not linear_equivalence(mat2(), [vec2(1, 0), vec2(0, 1)])
    assert not linear_equivalence(mat2(), vec2(1, 0))


def test_add_and_subtract() -> None:
    assert linear_add(vec3(1, 2, 3), vec3(4, 5, 6)).unwrap() == vec3(5, 7, 9)
    assert linear_subtract(vec3(4, 5, 6), vec3(1, 2, 3)).unwrap() == vec3(3, 3, 3)
    assert linear_add(mat2(1, 2, 3, 4), mat2(1, 1, 1, 1)).unwrap() == mat2(2, 3, 4, 5)
    assert linear_subtract(mat2(1, 2, 3, 4), mat2(1, 1, 1, 1)).unwrap() == mat2(0, 1, 2, 3)


def test_add_mismatched_vectors_fails(caplog: pytest.LogCaptureFixture) -> None:
    result = linear_add(vec3(), vec4())
    assert not result.ok
    assert result.value is None
    assert isinstance(result.error, ShapeMismatchError)
    assert "linear_add()" in caplog.text


@pytest.mark.parametrize(
    "u, v",
    [
        (mat2(), vec2()),
        (vec3(), mat3()),
        (mat2(), mat3()),
    ],
)
def test_subtract_rejects_mixed_shapes(u, v) -> None:
    result = linear_subtract(u, v)
    assert isinstance(result.error, ShapeMismatchError)


def test_add_rejects_plain_sequences() -> None:
    result = linear_add([1.0, 2.0], vec2())  # type: ignore[arg-type]
    assert isinstance(result.error, InvalidArgumentError)


@pytest.mark.parametrize("dimension", [2, 3, 4])
def test_identity_is_neutral(dimension: int) -> None:
    m = Matrix.from_sequence(list(range(1, dimension * dimension + 1)), dimension)
    identity = Matrix.identity(dimension)
    assert linear_multiply(identity, m).unwrap() == m
    assert linear_multiply(m, identity).unwrap() == m


def test_matrix_product() -> None:
    assert mat2(1, 2, 3, 4) @ mat2(5, 6, 7, 8) == mat2(19, 22, 43, 50)


def test_matrix_vector_product() -> None:
    assert linear_multiply(mat2(1, 2, 3, 4), vec2(1, 1)).unwrap() == vec2(3, 7)
    assert mat3(2) @ vec3(1, 2, 3) == vec3(2, 4, 6)


def test_vector_product_is_elementwise() -> None:
    assert linear_multiply(vec3(1, 2, 3), vec3(4, 5, 6)).unwrap() == vec3(4, 10, 18)


def test_multiply_shape_errors() -> None:
    assert isinstance(linear_multiply(mat3(), vec4()).error, ShapeMismatchError)
    assert isinstance(linear_multiply(vec2(), mat2()).error, ShapeMismatchError)
    assert isinstance(linear_multiply(mat2(), mat3()).error, ShapeMismatchError)
    with pytest.raises(ShapeMismatchError):
        mat3() @ vec4()


def test_scale() -> None:
    assert linear_scale(2, mat2(1, 2, 3, 4)).unwrap() == mat2(2, 4, 6, 8)
    assert linear_scale(-1.5, vec2(2, -2)).unwrap() == vec2(-3, 3)


def test_scale_rejects_non_numeric_inputs() -> None:
    assert isinstance(linear_scale("2", vec2()).error, InvalidArgumentError)  # type: ignore[arg-type]
    assert isinstance(linear_scale(True, vec2(1, 2)).error, InvalidArgumentError)
    assert isinstance(linear_scale(2, [1.0, 2.0]).error, InvalidArgumentError)  # type: ignore[arg-type]
