"""
Core module for gfxmath.

Contains:
- Constants: Centralized default values and numeric constants
- Errors: Exceptions raised by the value types
- Types: Type aliases and shape validation
- Base: Abstract base class shared by vectors, matrices and rotors
"""

from .constants import (
    # Tensor defaults
    DEFAULT_DTYPE_NAME,
    DEFAULT_DEVICE,
    # Tolerances
    DEFAULT_RTOL,
    DEFAULT_ATOL,
    DEFAULT_UNIT_TOLERANCE,
    # Rotor constants
    ANTIPARALLEL_EPS,
)

from .errors import (
    GfxMathError,
    BoundsError,
    SingularMatrixError,
    DimensionMismatchError,
)

from .types import (
    Scalar,
    ArrayLike,
    Shape,
    validate_shape,
    check_index,
)

from .base import FixedTensor

__all__ = [
    # Constants
    "DEFAULT_DTYPE_NAME",
    "DEFAULT_DEVICE",
    "DEFAULT_RTOL",
    "DEFAULT_ATOL",
    "DEFAULT_UNIT_TOLERANCE",
    "ANTIPARALLEL_EPS",
    # Errors
    "GfxMathError",
    "BoundsError",
    "SingularMatrixError",
    "DimensionMismatchError",
    # Types
    "Scalar",
    "ArrayLike",
    "Shape",
    "validate_shape",
    "check_index",
    # Base class
    "FixedTensor",
]
