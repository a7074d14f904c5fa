"""Serialize vectors and matrices into float32 buffers for graphics uploads."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Sequence, Union

import numpy as np

from .diagnostics import report
from .matrix import Matrix, mat2, mat3, mat4
from .result import InvalidArgumentError, LinearResult, ShapeMismatchError
from .vector import Vector, vec2, vec3, vec4

Flattenable = Union[Vector, Matrix, Sequence[Vector]]


# //1.- Produce a contiguous column-major float32 buffer from a vector, matrix or vertex list.
def linear_flatten(value: Flattenable) -> LinearResult[np.ndarray]:
    if isinstance(value, Matrix):
        # Rows are stored row-major; uniforms expect column-major.
        return LinearResult.success(np.ascontiguousarray(np.asarray(value.rows, dtype=np.float32).T).ravel())
    if isinstance(value, Vector):
        return LinearResult.success(np.asarray(value.components, dtype=np.float32))
    if isinstance(value, (list, tuple)):
        if not all(isinstance(item, Vector) for item in value):
            return report("linear_flatten", InvalidArgumentError("Vertex lists may only contain vectors."))
        sizes = {len(item) for item in value}
        if len(sizes) > 1:
            return report("linear_flatten", ShapeMismatchError("Vertex list mixes vectors of different sizes."))
        if not value:
            return LinearResult.success(np.zeros(0, dtype=np.float32))
        return LinearResult.success(np.asarray([item.components for item in value], dtype=np.float32).ravel())
    return report("linear_flatten", InvalidArgumentError("Expected a vector, matrix or list of vectors."))


# //2.- Byte sizes of the default-constructed types, computed once at import.
def _byte_sizes() -> Mapping[str, int]:
    builders = {"vec2": vec2, "vec3": vec3, "vec4": vec4, "mat2": mat2, "mat3": mat3, "mat4": mat4}
    return MappingProxyType({name: linear_flatten(build()).unwrap().nbytes for name, build in builders.items()})


SIZEOF: Mapping[str, int] = _byte_sizes()


__all__ = ["linear_flatten", "SIZEOF"]
