"""
Matrix module: square floating point matrices of orders 2-4.
"""

from .matrices import (
    SquareMatrix,
    Matrix2,
    Matrix3,
    Matrix4,
)

__all__ = [
    "SquareMatrix",
    "Matrix2",
    "Matrix3",
    "Matrix4",
]
