"""
Rotor operations for 3D rotations.

A 3D rotor is the even part of the geometric algebra G(3,0): a scalar plus
three bivectors. Rotors are represented as (s, yz, zx, xy) where s is the
scalar part and yz, zx, xy are the bivector parts dual to the x, y and z
axes. This ordering lines up with the quaternion convention [w, x, y, z]:

    R = s + yz*e23 + zx*e31 + xy*e12

All operations support batched inputs with shape (..., 4). None of them
normalize implicitly: a non-unit rotor rotates and scales.
"""

from typing import Tuple

import torch

from ..core.constants import ANTIPARALLEL_EPS, PERPENDICULAR_SWITCH


def rotor_magnitude(r: torch.Tensor) -> torch.Tensor:
    """
    Euclidean norm of the four rotor components.

    Args:
        r: Rotor tensor of shape (..., 4) as [s, yz, zx, xy]

    Returns:
        Magnitude of shape (...)
    """
    return torch.linalg.vector_norm(r, dim=-1)


def normalize_rotor(r: torch.Tensor) -> torch.Tensor:
    """
    Scale a rotor to unit magnitude.

    A zero rotor produces nan components (no epsilon clamping).

    Args:
        r: Rotor tensor of shape (..., 4)

    Returns:
        Unit rotor of shape (..., 4)
    """
    return r / rotor_magnitude(r).unsqueeze(-1)


def rotor_conjugate(r: torch.Tensor) -> torch.Tensor:
    """
    Rotor reverse: R~ = s - yz*e23 - zx*e31 - xy*e12

    For unit rotors this is the inverse rotation.

    Args:
        r: Rotor tensor of shape (..., 4)

    Returns:
        Conjugate rotor of shape (..., 4)
    """
    # Negate the bivector part
    return torch.cat([r[..., :1], -r[..., 1:]], dim=-1)


def rotor_multiply(r1: torch.Tensor, r2: torch.Tensor) -> torch.Tensor:
    """
    Compose two rotors: r1 * r2

    The product applies r2 first and r1 second when used in a sandwich.
    Same algebra as the Hamilton product of [w, x, y, z] quaternions.

    Args:
        r1: Rotor of shape (..., 4)
        r2: Rotor of shape (..., 4)

    Returns:
        Product rotor of shape (..., 4)
    """
    s1, a1, b1, c1 = r1.unbind(dim=-1)
    s2, a2, b2, c2 = r2.unbind(dim=-1)

    s = s1 * s2 - a1 * a2 - b1 * b2 - c1 * c2
    a = s1 * a2 + a1 * s2 + b1 * c2 - c1 * b2
    b = s1 * b2 - a1 * c2 + b1 * s2 + c1 * a2
    c = s1 * c2 + a1 * b2 - b1 * a2 + c1 * s2

    return torch.stack([s, a, b, c], dim=-1)


def rotor_from_axis_angle(axis: torch.Tensor, angle: torch.Tensor) -> torch.Tensor:
    """
    Create rotor from axis-angle representation.

    R = cos(θ/2) + sin(θ/2) * (ax*e23 + ay*e31 + az*e12)

    The axis is used as given; pass a unit axis to get a unit rotor.

    Args:
        axis: Rotation axis of shape (..., 3)
        angle: Rotation angle in radians of shape (...)

    Returns:
        Rotor of shape (..., 4)
    """
    angle = torch.as_tensor(angle, dtype=axis.dtype, device=axis.device)
    half_angle = angle / 2
    s = torch.cos(half_angle)
    bivector = axis * torch.sin(half_angle).unsqueeze(-1)
    return torch.cat([s.unsqueeze(-1).expand(bivector.shape[:-1] + (1,)), bivector], dim=-1)


def perpendicular_vector(v: torch.Tensor) -> torch.Tensor:
    """
    Unit vector orthogonal to v.

    Crosses v with the x axis, or with the y axis when v is close to x.

    Args:
        v: Non-zero vectors of shape (..., 3)

    Returns:
        Unit vectors of shape (..., 3)
    """
    x_axis = torch.zeros_like(v)
    x_axis[..., 0] = 1.0
    y_axis = torch.zeros_like(v)
    y_axis[..., 1] = 1.0

    v_unit = v / torch.linalg.vector_norm(v, dim=-1, keepdim=True)
    use_y = v_unit[..., 0:1].abs() > PERPENDICULAR_SWITCH
    helper = torch.where(use_y, y_axis, x_axis)

    perp = torch.linalg.cross(v, helper, dim=-1)
    return perp / torch.linalg.vector_norm(perp, dim=-1, keepdim=True)


def rotor_from_vectors_double(a: torch.Tensor, b: torch.Tensor) -> torch.Tensor:
    """
    Rotor built directly from two unit vectors: R = a.b + (a x b) as bivector.

    It rotates in the plane of a and b, in the direction from a to b, by
    twice the angle between them. rotor_from_vectors uses it with the
    halfway vector to get the exact angle.

    Args:
        a: Unit vectors of shape (..., 3)
        b: Unit vectors of shape (..., 3)

    Returns:
        Rotor of shape (..., 4)
    """
    s = (a * b).sum(dim=-1, keepdim=True)
    bivector = torch.linalg.cross(a, b, dim=-1)
    return torch.cat([s, bivector], dim=-1)


def rotor_from_vectors(a: torch.Tensor, b: torch.Tensor) -> torch.Tensor:
    """
    Rotor rotating unit vector a onto unit vector b.

    Doubles the rotation from a to the unit halfway vector
    h = (a + b) / |a + b|. When a and b are antiparallel, h is replaced by
    p = perpendicular_vector(a), which gives a half turn about a x p.

    Args:
        a: Unit vectors of shape (..., 3)
        b: Unit vectors of shape (..., 3)

    Returns:
        Rotor of shape (..., 4)
    """
    dot = (a * b).sum(dim=-1, keepdim=True)
    antiparallel = dot < (-1.0 + ANTIPARALLEL_EPS)

    halfway = a + b
    halfway = halfway / torch.linalg.vector_norm(halfway, dim=-1, keepdim=True)
    h = torch.where(antiparallel, perpendicular_vector(a), halfway)

    return rotor_from_vectors_double(a, h)


def rotate_vector(v: torch.Tensor, r: torch.Tensor) -> torch.Tensor:
    """
    Rotate a 3D vector by a rotor.

    v' = R * v * R~ (sandwich product)

    Uses the reverse rather than the inverse, so a non-unit rotor also
    scales v by |R|^2.

    Args:
        v: Vector(s) of shape (..., 3)
        r: Rotor(s) of shape (..., 4)

    Returns:
        Rotated vector(s) of shape (..., 3)
    """
    # Embed the vector with a zero scalar part
    v_embedded = torch.cat([torch.zeros_like(v[..., :1]), v], dim=-1)

    result = rotor_multiply(rotor_multiply(r, v_embedded), rotor_conjugate(r))

    return result[..., 1:]


def rotor_to_matrix(r: torch.Tensor) -> torch.Tensor:
    """
    3x3 matrix equivalent to rotating with r.

    Column j is the image of the j-th basis vector, so M @ v == rotate_vector(v, r).

    Args:
        r: Rotor of shape (..., 4)

    Returns:
        Matrix of shape (..., 3, 3)
    """
    basis = torch.eye(3, dtype=r.dtype, device=r.device)
    # (..., 3 basis vectors, 3 components)
    images = rotate_vector(
        basis.expand(r.shape[:-1] + (3, 3)),
        r.unsqueeze(-2).expand(r.shape[:-1] + (3, 4)),
    )
    return images.transpose(-1, -2)


def rotor_to_axis_angle(r: torch.Tensor) -> Tuple[torch.Tensor, torch.Tensor]:
    """
    Convert a unit rotor to axis-angle representation.

    The identity rotor has no defined axis and returns a zero axis.

    Args:
        r: Unit rotor of shape (..., 4)

    Returns:
        axis: Unit rotation axis of shape (..., 3)
        angle: Rotation angle in radians of shape (...), in [0, 2π]
    """
    s = r[..., 0]
    bivector = r[..., 1:]

    sin_half_angle = torch.linalg.vector_norm(bivector, dim=-1)
    angle = 2 * torch.atan2(sin_half_angle, s)

    safe_norm = torch.where(sin_half_angle > 0, sin_half_angle, torch.ones_like(sin_half_angle))
    axis = bivector / safe_norm.unsqueeze(-1)

    return axis, angle
