"""
Type aliases and shape conventions for gfxmath.

Shape Conventions:
==================

Every value type owns a single tensor of fixed shape:
    - Vector2 / Vector3 / Vector4:  (2,) / (3,) / (4,)
    - Matrix2 / Matrix3 / Matrix4:  (2, 2) / (3, 3) / (4, 4), row-major
    - Rotor3:                       (4,) as [s, yz, zx, xy]

The functional kernels in gfxmath.utils accept batched inputs with any number
of leading dimensions, e.g. rotors of shape (..., 4) or matrices of shape
(..., N, N). The value types always use the unbatched shapes above.

Matrices are row-major: element (row, col) is stored at tensor[row, col] and
a matrix acts on column vectors (M * v).
"""

from typing import Sequence, Tuple, Union

import numpy as np
import torch

from .errors import BoundsError


# =============================================================================
# Basic Type Aliases
# =============================================================================

# Anything accepted where a single scalar is expected
Scalar = Union[int, float]

# Anything torch.as_tensor turns into a component array
ArrayLike = Union[Sequence[float], Sequence[Sequence[float]], np.ndarray, torch.Tensor]

# Fixed shape of a value type
Shape = Tuple[int, ...]


def validate_shape(
    tensor: torch.Tensor,
    expected_shape: Shape,
    name: str = "tensor"
) -> None:
    """
    Validate that a tensor has exactly the expected fixed shape.

    Args:
        tensor: Tensor to validate
        expected_shape: Required shape, e.g. (3,) or (4, 4)
        name: Name for error messages

    Raises:
        ValueError: If the tensor shape differs from expected_shape
    """
    if tuple(tensor.shape) != tuple(expected_shape):
        raise ValueError(
            f"{name} expects shape {tuple(expected_shape)}, "
            f"got {tuple(tensor.shape)}"
        )


def check_index(index: int, size: int, name: str = "index") -> int:
    """
    Check a runtime index against a fixed size.

    Only 0 <= index < size is accepted; negative indices are rejected.

    Raises:
        BoundsError: If the index is out of range
        TypeError: If the index is not an integer
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"{name} must be an int, got {type(index).__name__}")
    if not 0 <= index < size:
        raise BoundsError(f"{name} {index} out of range for size {size}")
    return index
