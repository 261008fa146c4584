"""
3D rotors.

A Rotor3 represents a rotation as a scalar plus three bivector components,
stored as (s, yz, zx, xy). It is algebraically equivalent to a quaternion
[w, x, y, z], with the yz, zx and xy planes playing the role of rotations
about the x, y and z axes.

Conventions:
    - r.rotate(v) computes the sandwich product r v r~.
    - r2 * r1 applies r1 first, then r2 (same order as matrix products);
      r1.then(r2) is the same rotor written in application order.
    - Nothing is normalized implicitly. Rotors built from unit inputs are
      unit rotors; after long chains of compositions call normalize().
"""

import logging
from typing import Optional, Tuple, Union

import torch

from ..core.base import FixedTensor, promote
from ..core.constants import ANTIPARALLEL_EPS, ROTOR3_SHAPE
from ..core.types import Scalar
from ..mat.matrices import Matrix3, Matrix4
from ..utils.config import get_default_config
from ..utils.rotor_ops import (
    normalize_rotor,
    rotate_vector,
    rotor_conjugate,
    rotor_from_axis_angle,
    rotor_from_vectors,
    rotor_from_vectors_double,
    rotor_magnitude,
    rotor_multiply,
    rotor_to_axis_angle,
    rotor_to_matrix,
)
from ..vec.vectors import Vector3

logger = logging.getLogger(__name__)


def _require_unit(v: Vector3, name: str) -> None:
    """Reject non-unit inputs when the active Config asks for validation."""
    config = get_default_config()
    if not config.validate_unit_inputs:
        return
    magnitude = v.magnitude()
    if abs(magnitude - 1.0) > config.unit_tolerance:
        raise ValueError(f"{name} must be a unit vector, got magnitude {magnitude}")


class Rotor3(FixedTensor):
    """
    A rotor for rotations in 3D space.

    Can be constructed from:
    - Four explicit components (s, yz, zx, xy)
    - An axis and an angle
    - Two unit vectors (rotates the first onto the second)
    - Two unit vectors, rotating by twice the angle between them
    """

    SHAPE = ROTOR3_SHAPE

    def __init__(
        self,
        s: Scalar,
        yz: Scalar,
        zx: Scalar,
        xy: Scalar,
        dtype: Optional[torch.dtype] = None,
        device: Optional[Union[str, torch.device]] = None
    ):
        """
        Initialize a rotor from its components.

        Args:
            s: Scalar part
            yz: Bivector part in the yz plane (rotation about x)
            zx: Bivector part in the zx plane (rotation about y)
            xy: Bivector part in the xy plane (rotation about z)
            dtype: Storage dtype, default from Config
            device: Storage device, default from Config
        """
        self._data = self._coerce([float(s), float(yz), float(zx), float(xy)], dtype, device)

    @classmethod
    def identity(cls, dtype: Optional[torch.dtype] = None, device=None) -> 'Rotor3':
        """The rotor of no rotation."""
        return cls(1.0, 0.0, 0.0, 0.0, dtype=dtype, device=device)

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle: float) -> 'Rotor3':
        """
        Rotor rotating by `angle` radians about `axis`.

        s = cos(angle/2), bivector = axis * sin(angle/2). The axis is used
        as given and should have unit length.
        """
        if not isinstance(axis, Vector3):
            raise TypeError(f"axis must be a Vector3, got {type(axis).__name__}")
        _require_unit(axis, "axis")
        return cls._wrap(rotor_from_axis_angle(axis._data, angle))

    @classmethod
    def from_vectors(cls, a: Vector3, b: Vector3) -> 'Rotor3':
        """
        Rotor rotating unit vector a onto unit vector b.

        Antiparallel inputs give a half turn about a.cross(a.perpendicular()).
        """
        if not isinstance(a, Vector3) or not isinstance(b, Vector3):
            raise TypeError("from_vectors expects two Vector3")
        _require_unit(a, "a")
        _require_unit(b, "b")
        if a.dot(b) < -1.0 + ANTIPARALLEL_EPS:
            logger.debug("Antiparallel vectors, rotating about a perpendicular axis")
        a_data, b_data = promote(a._data, b._data)
        return cls._wrap(rotor_from_vectors(a_data, b_data))

    @classmethod
    def from_vectors_double(cls, a: Vector3, b: Vector3) -> 'Rotor3':
        """
        Rotor rotating by twice the angle from unit vector a to unit vector b.

        s = a.dot(b), bivector = a.cross(b). Applying it to a rotates a past
        b by the same angle again.
        """
        if not isinstance(a, Vector3) or not isinstance(b, Vector3):
            raise TypeError("from_vectors_double expects two Vector3")
        _require_unit(a, "a")
        _require_unit(b, "b")
        a_data, b_data = promote(a._data, b._data)
        return cls._wrap(rotor_from_vectors_double(a_data, b_data))

    # === Components ===

    @property
    def s(self) -> float:
        return self._data[0].item()

    @property
    def yz(self) -> float:
        return self._data[1].item()

    @property
    def zx(self) -> float:
        return self._data[2].item()

    @property
    def xy(self) -> float:
        return self._data[3].item()

    @property
    def bivector(self) -> Vector3:
        """The bivector part as (yz, zx, xy)."""
        return Vector3._wrap(self._data[1:].clone())

    # === Norm and inverse ===

    def magnitude_squared(self) -> float:
        return (self._data * self._data).sum().item()

    def magnitude(self) -> float:
        return rotor_magnitude(self._data).item()

    def normalize(self) -> 'Rotor3':
        """Return the unit rotor (nan components for a zero rotor)."""
        return self._wrap(normalize_rotor(self._data))

    def normalize_(self) -> 'Rotor3':
        """Normalize in place and return self."""
        self._data = normalize_rotor(self._data)
        return self

    def conjugate(self) -> 'Rotor3':
        """Negate the bivector part, keeping the scalar part."""
        return self._wrap(rotor_conjugate(self._data))

    def inverse(self) -> 'Rotor3':
        """
        The reverse rotation, computed as the conjugate.

        Exact for unit rotors; normalize first otherwise.
        """
        return self.conjugate()

    # === Composition and application ===

    def __mul__(self, other):
        """Compose with another rotor (other is applied first), or scale."""
        if isinstance(other, (int, float)):
            return super().__mul__(other)
        if not self._check_same_type(other):
            return NotImplemented
        a, b = promote(self._data, other._data)
        return self._wrap(rotor_multiply(a, b))

    def then(self, other: 'Rotor3') -> 'Rotor3':
        """Rotor applying self first and other second."""
        if not isinstance(other, Rotor3):
            raise TypeError(f"then() expects a Rotor3, got {type(other).__name__}")
        return other * self

    def rotate(self, v: Vector3) -> Vector3:
        """Rotate v with the sandwich product r v r~."""
        if not isinstance(v, Vector3):
            raise TypeError(f"Rotor3 rotates Vector3, got {type(v).__name__}")
        r, v_data = promote(self._data, v._data)
        return Vector3._wrap(rotate_vector(v_data, r))

    # === Conversions ===

    def to_matrix3(self) -> Matrix3:
        """3x3 matrix with m * v == self.rotate(v)."""
        return Matrix3._wrap(rotor_to_matrix(self._data).contiguous())

    def to_matrix4(self) -> Matrix4:
        """Homogeneous 4x4 rotation matrix (rotation block padded with identity)."""
        m = torch.eye(4, dtype=self.dtype, device=self.device)
        m[:3, :3] = rotor_to_matrix(self._data)
        return Matrix4._wrap(m)

    def to_axis_angle(self) -> Tuple[Vector3, float]:
        """
        Axis and angle in radians of a unit rotor.

        The identity rotor returns a zero axis and angle 0.
        """
        axis, angle = rotor_to_axis_angle(self._data)
        return Vector3._wrap(axis), angle.item()
