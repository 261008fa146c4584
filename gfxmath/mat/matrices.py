"""
Square floating point matrices of orders 2-4: Matrix2, Matrix3 and Matrix4.

Storage and indexing follow row-major order, like most mathematical texts:
element (row, col) is m[row, col], and matrices act on column vectors, so
`m * v` transforms v and `a * b` applies b first, then a.

`*` and `@` both mean the algebraic product when the right operand is a
matrix or vector of the same order; `*` with a plain number scales.
"""

import logging
from typing import List, Optional, Union

import torch

from ..core.base import FixedTensor, promote
from ..core.constants import MATRIX2_SHAPE, MATRIX3_SHAPE, MATRIX4_SHAPE
from ..core.errors import SingularMatrixError
from ..core.types import ArrayLike, Scalar, check_index
from ..utils.linalg import determinant, inverse_from_adjugate
from ..vec.vectors import Vector, Vector2, Vector3, Vector4

logger = logging.getLogger(__name__)


class SquareMatrix(FixedTensor):
    """
    Base class for the N x N matrices.

    Subclasses set ORDER, SHAPE and the VECTOR type they act on.
    """

    ORDER: int = 0
    VECTOR: type = Vector

    def __init__(
        self,
        rows: ArrayLike,
        dtype: Optional[torch.dtype] = None,
        device: Optional[Union[str, torch.device]] = None
    ):
        """
        Initialize a matrix from N rows of N scalars (row-major).

        Args:
            rows: Nested sequence, sequence of vectors, or (N, N) tensor
            dtype: Storage dtype, default from Config
            device: Storage device, default from Config

        Raises:
            ValueError: If rows is not an N x N grid
        """
        if not isinstance(rows, torch.Tensor):
            try:
                rows = [[float(v) for v in row] for row in rows]
            except TypeError as e:
                raise ValueError(
                    f"{type(self).__name__} expects {self.ORDER} rows of {self.ORDER} scalars"
                ) from e
        self._data = self._coerce(rows, dtype, device)

    @classmethod
    def from_rows(cls, rows: ArrayLike, dtype: Optional[torch.dtype] = None, device=None):
        """Create a matrix from its rows."""
        return cls(rows, dtype=dtype, device=device)

    @classmethod
    def from_cols(cls, cols: ArrayLike, dtype: Optional[torch.dtype] = None, device=None):
        """Create a matrix from its columns."""
        return cls(cols, dtype=dtype, device=device).transpose()

    @classmethod
    def identity(cls, dtype: Optional[torch.dtype] = None, device=None):
        """Ones on the diagonal, zeros elsewhere."""
        return cls.from_tensor(torch.eye(cls.ORDER).tolist(), dtype, device)

    @classmethod
    def zero(cls, dtype: Optional[torch.dtype] = None, device=None):
        """Matrix with all elements equal to 0.0."""
        return cls.from_tensor([[0.0] * cls.ORDER] * cls.ORDER, dtype, device)

    # === Element access ===

    def __getitem__(self, key):
        """m[row, col] returns an element, m[row] returns the row as a vector."""
        if isinstance(key, tuple):
            row, col = self._check_key(key)
            return self._data[row, col].item()
        return self.row(key)

    def __setitem__(self, key, value: Scalar) -> None:
        row, col = self._check_key(key)
        self._data[row, col] = float(value)

    def _check_key(self, key):
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(f"{type(self).__name__} indices must be (row, col), got {key!r}")
        row, col = key
        check_index(row, self.ORDER, name="row")
        check_index(col, self.ORDER, name="column")
        return row, col

    def get(self, row: int, col: int) -> float:
        return self[row, col]

    def set(self, row: int, col: int, value: Scalar) -> None:
        """Overwrite one element in place."""
        self[row, col] = value

    def row(self, index: int) -> Vector:
        check_index(index, self.ORDER, name="row")
        return self.VECTOR._wrap(self._data[index].clone())

    def col(self, index: int) -> Vector:
        check_index(index, self.ORDER, name="column")
        return self.VECTOR._wrap(self._data[:, index].clone())

    def as_row_major(self) -> List[List[float]]:
        """The rows as nested lists."""
        return self._data.tolist()

    def as_col_major(self) -> List[List[float]]:
        """The columns as nested lists."""
        return self._data.t().tolist()

    # === Transpose, determinant, inverse ===

    def transpose(self):
        """Return self transposed (rows become columns)."""
        return self._wrap(self._data.t().clone(memory_format=torch.contiguous_format))

    def transpose_(self):
        """Transpose in place and return self."""
        self._data = self._data.t().clone(memory_format=torch.contiguous_format)
        return self

    def determinant(self) -> float:
        return determinant(self._data).item()

    def try_inverse(self):
        """
        Inverse as adjugate / determinant, or None for a singular matrix.

        Only an exactly zero determinant counts as singular; nearly
        singular matrices return numerically unstable results.
        """
        if determinant(self._data).item() == 0.0:
            logger.debug(f"{type(self).__name__} has zero determinant, no inverse")
            return None
        return self._wrap(inverse_from_adjugate(self._data))

    def inverse(self):
        """
        Inverse as adjugate / determinant.

        Raises:
            SingularMatrixError: If the determinant is exactly zero
        """
        result = self.try_inverse()
        if result is None:
            raise SingularMatrixError(f"{type(self).__name__} is singular (determinant is 0)")
        return result

    # === Products ===

    def __mul__(self, other):
        """Scale by a number, or matrix product with a matrix/vector."""
        if isinstance(other, (int, float)):
            return super().__mul__(other)
        return self.__matmul__(other)

    def __matmul__(self, other):
        """Matrix-matrix or matrix-vector product."""
        if type(other) is self.VECTOR:
            a, v = promote(self._data, other._data)
            return self.VECTOR._wrap(torch.mv(a, v))
        if not self._check_same_type(other):
            return NotImplemented
        a, b = promote(self._data, other._data)
        return self._wrap(torch.matmul(a, b))


class Matrix2(SquareMatrix):
    """A 2x2 floating point matrix acting on Vector2."""

    ORDER = 2
    SHAPE = MATRIX2_SHAPE
    VECTOR = Vector2


class Matrix3(SquareMatrix):
    """A 3x3 floating point matrix acting on Vector3."""

    ORDER = 3
    SHAPE = MATRIX3_SHAPE
    VECTOR = Vector3


class Matrix4(SquareMatrix):
    """A 4x4 floating point matrix acting on Vector4."""

    ORDER = 4
    SHAPE = MATRIX4_SHAPE
    VECTOR = Vector4
