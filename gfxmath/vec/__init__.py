"""
Vector module: 2D, 3D and 4D floating point vectors.
"""

from .vectors import (
    Vector,
    Vector2,
    Vector3,
    Vector4,
)

__all__ = [
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
]
