"""
Utility functions for gfxmath.

Includes batched rotor and linear algebra kernels used by the value types,
and configuration management.
"""

from .config import (
    Config,
    load_config,
    save_config,
    get_default_config,
    set_default_config,
)
from .linalg import (
    minor_matrix,
    determinant,
    cofactor_matrix,
    adjugate,
    inverse_from_adjugate,
)
from .rotor_ops import (
    rotor_magnitude,
    normalize_rotor,
    rotor_conjugate,
    rotor_multiply,
    rotor_from_axis_angle,
    rotor_from_vectors,
    rotor_from_vectors_double,
    perpendicular_vector,
    rotate_vector,
    rotor_to_matrix,
    rotor_to_axis_angle,
)

__all__ = [
    # Config
    "Config",
    "load_config",
    "save_config",
    "get_default_config",
    "set_default_config",
    # Linear algebra
    "minor_matrix",
    "determinant",
    "cofactor_matrix",
    "adjugate",
    "inverse_from_adjugate",
    # Rotor operations
    "rotor_magnitude",
    "normalize_rotor",
    "rotor_conjugate",
    "rotor_multiply",
    "rotor_from_axis_angle",
    "rotor_from_vectors",
    "rotor_from_vectors_double",
    "perpendicular_vector",
    "rotate_vector",
    "rotor_to_matrix",
    "rotor_to_axis_angle",
]
