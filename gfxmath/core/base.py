"""
Base class for gfxmath value types.

This module defines the interface shared by every fixed-size value in the
library. Each value owns exactly one tensor whose shape is fixed per class.

Class Hierarchy:
    FixedTensor (abstract)
    ├── Vector (gfxmath.vec)
    │   ├── Vector2
    │   ├── Vector3
    │   └── Vector4
    ├── SquareMatrix (gfxmath.mat)
    │   ├── Matrix2
    │   ├── Matrix3
    │   └── Matrix4
    └── Rotor3 (gfxmath.rot)
"""

from abc import ABC
from typing import Optional, Tuple, TypeVar, Union

import numpy as np
import torch

from .errors import DimensionMismatchError
from .types import ArrayLike, Scalar, Shape, validate_shape
from ..utils.config import get_default_config

F = TypeVar('F', bound='FixedTensor')


def promote(a: torch.Tensor, b: torch.Tensor) -> Tuple[torch.Tensor, torch.Tensor]:
    """Cast two tensors to their common dtype."""
    dtype = torch.promote_types(a.dtype, b.dtype)
    return a.to(dtype), b.to(dtype)


class FixedTensor(ABC):
    """
    Abstract base class for values backed by a tensor of fixed shape.

    Subclasses set SHAPE and provide their own constructors. Operations here
    never modify self; they return a new value of the same type.

    Provided:
        - dtype / device / to() / clone() / to_tensor() / tolist() / to_numpy()
        - exact equality (==) and tolerance comparison (is_close)
        - +, - between values of the same type
        - unary -, scalar *, scalar /
    """

    SHAPE: Shape = ()

    # Values are mutable through named operations, so they are not hashable
    __hash__ = None

    _data: torch.Tensor

    # === Construction ===

    @classmethod
    def _coerce(
        cls,
        data: ArrayLike,
        dtype: Optional[torch.dtype] = None,
        device: Optional[Union[str, torch.device]] = None
    ) -> torch.Tensor:
        """Turn array-like input into an owned tensor of the class shape."""
        config = get_default_config()
        if isinstance(data, np.ndarray):
            data = torch.as_tensor(data, device=config.device if device is None else device)
        if dtype is None:
            if isinstance(data, torch.Tensor) and data.is_floating_point():
                dtype = data.dtype
            else:
                dtype = config.torch_dtype
        if device is None:
            device = data.device if isinstance(data, torch.Tensor) else config.device

        tensor = torch.as_tensor(data, dtype=dtype, device=device)
        validate_shape(tensor, cls.SHAPE, name=cls.__name__)
        # Never alias caller-owned storage; always row-major strides
        return tensor.clone(memory_format=torch.contiguous_format)

    @classmethod
    def _wrap(cls, tensor: torch.Tensor):
        """Wrap an already validated tensor without copying."""
        obj = cls.__new__(cls)
        obj._data = tensor
        return obj

    @classmethod
    def from_tensor(
        cls,
        data: ArrayLike,
        dtype: Optional[torch.dtype] = None,
        device: Optional[Union[str, torch.device]] = None
    ):
        """
        Create a value from any array-like of exactly SHAPE.

        Raises:
            ValueError: If the data does not have the class shape
        """
        return cls._wrap(cls._coerce(data, dtype, device))

    # === Tensor access ===

    @property
    def dtype(self) -> torch.dtype:
        return self._data.dtype

    @property
    def device(self) -> torch.device:
        return self._data.device

    def to(
        self: F,
        dtype: Optional[torch.dtype] = None,
        device: Optional[Union[str, torch.device]] = None
    ) -> F:
        """Return a copy with the given dtype and/or device."""
        return self._wrap(self._data.to(
            device=self.device if device is None else device,
            dtype=self.dtype if dtype is None else dtype,
            copy=True,
        ))

    def clone(self: F) -> F:
        """Create a copy."""
        return self._wrap(self._data.clone())

    def to_tensor(self) -> torch.Tensor:
        """Return a copy of the underlying tensor."""
        return self._data.clone()

    def tolist(self) -> list:
        return self._data.tolist()

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the components as a numpy array on the CPU."""
        return self._data.detach().cpu().numpy().copy()

    # === Comparison ===

    def _check_same_type(self, other: object) -> bool:
        """
        True if other can be combined with self.

        Raises:
            DimensionMismatchError: If other is a value of another fixed type
        """
        if type(other) is type(self):
            return True
        if isinstance(other, FixedTensor):
            raise DimensionMismatchError(
                f"cannot combine {type(self).__name__} with {type(other).__name__}"
            )
        return False

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(torch.all(self._data == other._data.to(self.device)))

    def is_close(
        self,
        other: 'FixedTensor',
        rtol: Optional[float] = None,
        atol: Optional[float] = None
    ) -> bool:
        """
        Component-wise comparison within tolerance.

        Defaults come from the active Config.
        """
        if not self._check_same_type(other):
            raise TypeError(f"cannot compare {type(self).__name__} with {type(other).__name__}")
        config = get_default_config()
        rtol = config.rtol if rtol is None else rtol
        atol = config.atol if atol is None else atol
        a, b = promote(self._data, other._data.to(self.device))
        return torch.allclose(a, b, rtol=rtol, atol=atol)

    # === Arithmetic ===

    def __add__(self, other):
        """Component-wise addition."""
        if not self._check_same_type(other):
            return NotImplemented
        return self._wrap(self._data + other._data)

    def __sub__(self, other):
        """Component-wise subtraction."""
        if not self._check_same_type(other):
            return NotImplemented
        return self._wrap(self._data - other._data)

    def __neg__(self):
        return self._wrap(-self._data)

    def __mul__(self, other: Scalar):
        """Multiplication by scalar."""
        if isinstance(other, (int, float)):
            return self._wrap(self._data * other)
        return NotImplemented

    def __rmul__(self, other: Scalar):
        """Left multiplication by scalar."""
        if isinstance(other, (int, float)):
            return self._wrap(other * self._data)
        return NotImplemented

    def __truediv__(self, other: Scalar):
        """Division by scalar, IEEE semantics for zero."""
        if isinstance(other, (int, float)):
            return self._wrap(self._data / other)
        return NotImplemented

    def __repr__(self) -> str:
        values = ", ".join(repr(v) for v in self._data.flatten().tolist())
        return f"{type(self).__name__}({values})"
