"""Linear algebra helpers for small WebGL/OpenGL style programs.

The package builds vectors and square matrices, combines them, derives
transformation and projection matrices, inverts them, and flattens the
results into float32 buffers ready for a graphics API upload.
"""

from .config import DEFAULT_CONFIG, UtilityConfig, load_utility_config
from .determinants import det2, det3, det4, determinant, inverse, inverse2, inverse3, inverse4, normal_matrix
from .diagnostics import format_matrix, print_matrix, setup_logging
from .flatten import SIZEOF, linear_flatten
from .matrix import Matrix, mat2, mat3, mat4, transpose_matrix
from .operations import linear_add, linear_equivalence, linear_multiply, linear_scale, linear_subtract
from .result import (
    DegenerateGeometryError,
    InvalidArgumentError,
    LinearError,
    LinearResult,
    ShapeMismatchError,
    SingularMatrixError,
)
from .transforms import (
    orthographic_matrix,
    perspective_matrix,
    rotate_matrix,
    rotate_matrix_about,
    rotate_x,
    rotate_y,
    rotate_z,
    scaling_matrix,
    scaling_matrix_from,
    translate_matrix,
    translate_matrix_from,
    view_matrix_at,
)
from .vector import (
    Vector,
    cross_product,
    degrees_to_radians,
    dot_product,
    mix_vectors,
    negate_vector,
    normalize_vector,
    vec2,
    vec3,
    vec4,
    vector_length,
)

__all__ = [
    "UtilityConfig",
    "DEFAULT_CONFIG",
    "load_utility_config",
    "LinearResult",
    "LinearError",
    "ShapeMismatchError",
    "InvalidArgumentError",
    "SingularMatrixError",
    "DegenerateGeometryError",
    "setup_logging",
    "format_matrix",
    "print_matrix",
    "Vector",
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
    "Matrix",
    "mat2",
    "mat3",
    "mat4",
    "transpose_matrix",
    "linear_equivalence",
    "linear_add",
    "linear_subtract",
    "linear_multiply",
    "linear_scale",
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
    "det2",
    "det3",
    "det4",
    "determinant",
    "inverse2",
    "inverse3",
    "inverse4",
    "inverse",
    "normal_matrix",
    "linear_flatten",
    "SIZEOF",
]
