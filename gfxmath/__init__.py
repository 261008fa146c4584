"""
gfxmath: simple, easy to understand math primitives for game and graphics
development, built on PyTorch tensors.

Key Features:
- Vector2, Vector3, Vector4 with dot/cross products and normalization
- Matrix2, Matrix3, Matrix4 with products, transpose, determinant, inverse
- Rotor3 for 3D rotations (quaternion-equivalent), composable and
  convertible to rotation matrices
- Batched tensor kernels for rotors and small matrices in gfxmath.utils

API Design:
- Every value owns a fixed-shape tensor (float64 unless configured)
- Operators return new values; in-place operations end with an underscore
- IEEE-754 semantics for division by zero, no hidden epsilons
- Matrices are row-major and act on column vectors

Example:
    >>> import math
    >>> from gfxmath import Rotor3, Vector3
    >>> r = Rotor3.from_axis_angle(Vector3(0, 0, 1), math.pi / 2)
    >>> r.rotate(Vector3(1, 0, 0)).is_close(Vector3(0, 1, 0), atol=1e-12)
    True
"""

__version__ = "0.1.0"

from . import core
from . import utils
from . import vec
from . import mat
from . import rot

from .core.errors import (
    GfxMathError,
    BoundsError,
    SingularMatrixError,
    DimensionMismatchError,
)
from .vec import Vector2, Vector3, Vector4
from .mat import Matrix2, Matrix3, Matrix4
from .rot import Rotor3

__all__ = [
    # Subpackages
    "core",
    "utils",
    "vec",
    "mat",
    "rot",
    # Errors
    "GfxMathError",
    "BoundsError",
    "SingularMatrixError",
    "DimensionMismatchError",
    # Value types
    "Vector2",
    "Vector3",
    "Vector4",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "Rotor3",
]
