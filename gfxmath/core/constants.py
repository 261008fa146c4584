"""
Centralized constants for gfxmath.

This module defines the default values and numeric constants used throughout
the library. Using these constants keeps defaults consistent between the
value types, the tensor kernels and the configuration layer.

Usage:
    from gfxmath.core.constants import DEFAULT_RTOL, DEFAULT_ATOL

    def my_check(a, b, rtol: float = DEFAULT_RTOL):
        ...
"""

# =============================================================================
# Tensor Defaults
# =============================================================================

# Name of the default torch dtype (resolved with getattr(torch, name))
DEFAULT_DTYPE_NAME: str = "float64"

# Default device for newly constructed values
DEFAULT_DEVICE: str = "cpu"

# dtypes a value may be stored in
SUPPORTED_DTYPE_NAMES = ("float32", "float64")


# =============================================================================
# Comparison Tolerances
# =============================================================================

# Relative / absolute tolerance for is_close (same defaults as torch.allclose)
DEFAULT_RTOL: float = 1e-5
DEFAULT_ATOL: float = 1e-8

# Accepted deviation of |v| from 1 when unit inputs are validated
DEFAULT_UNIT_TOLERANCE: float = 1e-3


# =============================================================================
# Rotor Constants
# =============================================================================

# a.b below -1 + this value is treated as antiparallel in from_vectors
ANTIPARALLEL_EPS: float = 1e-5

# |x| above this picks the y axis as helper when building a perpendicular
PERPENDICULAR_SWITCH: float = 0.9


# =============================================================================
# Fixed Shapes
# =============================================================================

VECTOR2_SHAPE = (2,)
VECTOR3_SHAPE = (3,)
VECTOR4_SHAPE = (4,)
MATRIX2_SHAPE = (2, 2)
MATRIX3_SHAPE = (3, 3)
MATRIX4_SHAPE = (4, 4)
ROTOR3_SHAPE = (4,)
