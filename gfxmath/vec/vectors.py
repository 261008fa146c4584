"""
Fixed-size floating point vectors: Vector2, Vector3 and Vector4.

Each vector owns a tensor of shape (N,). Arithmetic returns new vectors;
the only in-place operations are item assignment and normalize_().

Division by zero and normalization of a zero vector follow IEEE-754 and
produce inf/nan components rather than raising.
"""

from typing import Iterator, Optional, Union

import torch

from ..core.base import FixedTensor, promote
from ..core.constants import VECTOR2_SHAPE, VECTOR3_SHAPE, VECTOR4_SHAPE
from ..core.types import ArrayLike, Scalar, check_index
from ..utils.rotor_ops import perpendicular_vector


class Vector(FixedTensor):
    """
    Base class for the fixed-size vectors.

    Subclasses only differ in SHAPE and in the components they expose
    (z and w; cross products exist on Vector3 only).
    """

    def __init__(
        self,
        *components: Scalar,
        dtype: Optional[torch.dtype] = None,
        device: Optional[Union[str, torch.device]] = None
    ):
        """
        Initialize a vector from exactly N scalar components.

        Args:
            *components: The N components in order x, y, [z], [w]
            dtype: Storage dtype, default from Config
            device: Storage device, default from Config

        Raises:
            ValueError: If the number of components is not N
        """
        size = self.SHAPE[0]
        if len(components) != size:
            raise ValueError(
                f"{type(self).__name__} expects {size} components, got {len(components)}"
            )
        self._data = self._coerce([float(c) for c in components], dtype, device)

    @classmethod
    def from_array(
        cls,
        array: ArrayLike,
        dtype: Optional[torch.dtype] = None,
        device: Optional[Union[str, torch.device]] = None
    ):
        """Create a vector from a sequence or tensor of length N."""
        return cls.from_tensor(array, dtype, device)

    @classmethod
    def zero(cls, dtype: Optional[torch.dtype] = None, device=None):
        """Vector with all components equal to 0.0."""
        return cls.from_tensor([0.0] * cls.SHAPE[0], dtype, device)

    @classmethod
    def ones(cls, dtype: Optional[torch.dtype] = None, device=None):
        """Vector with all components equal to 1.0."""
        return cls.from_tensor([1.0] * cls.SHAPE[0], dtype, device)

    # === Components ===

    @property
    def x(self) -> float:
        return self._data[0].item()

    @property
    def y(self) -> float:
        return self._data[1].item()

    def __len__(self) -> int:
        return self.SHAPE[0]

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.tolist())

    def __getitem__(self, index: int) -> float:
        check_index(index, self.SHAPE[0], name="component index")
        return self._data[index].item()

    def __setitem__(self, index: int, value: Scalar) -> None:
        check_index(index, self.SHAPE[0], name="component index")
        self._data[index] = float(value)

    # === Products and norms ===

    def dot(self, other: 'Vector') -> float:
        """Sum of component-wise products."""
        if not self._check_same_type(other):
            raise TypeError(f"cannot dot {type(self).__name__} with {type(other).__name__}")
        a, b = promote(self._data, other._data)
        return (a * b).sum().item()

    def magnitude_squared(self) -> float:
        """
        The squared length of the vector.

        Cheaper than magnitude() and enough for comparisons.
        """
        return (self._data * self._data).sum().item()

    def magnitude(self) -> float:
        """The length of the vector."""
        return torch.linalg.vector_norm(self._data).item()

    length = magnitude

    def normalize(self):
        """Return a unit vector pointing the same way (nan for a zero vector)."""
        return self._wrap(self._data / torch.linalg.vector_norm(self._data))

    def normalize_(self):
        """Normalize in place and return self."""
        self._data.div_(torch.linalg.vector_norm(self._data))
        return self


class Vector2(Vector):
    """A two dimensional vector (x, y)."""

    SHAPE = VECTOR2_SHAPE


class Vector3(Vector):
    """A three dimensional vector (x, y, z)."""

    SHAPE = VECTOR3_SHAPE

    @property
    def z(self) -> float:
        return self._data[2].item()

    def cross(self, other: 'Vector3') -> 'Vector3':
        """Right-handed cross product self x other."""
        if not self._check_same_type(other):
            raise TypeError(f"cannot cross Vector3 with {type(other).__name__}")
        a, b = promote(self._data, other._data)
        return Vector3._wrap(torch.linalg.cross(a, b, dim=-1))

    def perpendicular(self) -> 'Vector3':
        """A unit vector orthogonal to self (self must be non-zero)."""
        return Vector3._wrap(perpendicular_vector(self._data))


class Vector4(Vector):
    """A four dimensional vector (x, y, z, w)."""

    SHAPE = VECTOR4_SHAPE

    @property
    def z(self) -> float:
        return self._data[2].item()

    @property
    def w(self) -> float:
        return self._data[3].item()
