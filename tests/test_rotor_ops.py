"""
Tests for the batched rotor operations.

Key properties tested:
- Rotor product matches the Hamilton product of [w, x, y, z] quaternions
- Sandwich rotation preserves lengths and matches the matrix form
- Shortest-arc rotors handle parallel and antiparallel inputs
"""

import math

import pytest
import torch

from gfxmath.utils.rotor_ops import (
    normalize_rotor,
    perpendicular_vector,
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


@pytest.fixture
def unit_rotors():
    torch.manual_seed(42)
    return normalize_rotor(torch.randn(16, 4, dtype=torch.float64))


@pytest.fixture
def unit_vectors():
    torch.manual_seed(7)
    v = torch.randn(16, 3, dtype=torch.float64)
    return v / torch.linalg.vector_norm(v, dim=-1, keepdim=True)


class TestRotorAlgebra:
    """Tests for products, conjugates and norms."""

    def test_identity_is_neutral(self, unit_rotors):
        identity = torch.tensor([1.0, 0.0, 0.0, 0.0], dtype=torch.float64).expand_as(unit_rotors)
        assert torch.allclose(rotor_multiply(identity, unit_rotors), unit_rotors)
        assert torch.allclose(rotor_multiply(unit_rotors, identity), unit_rotors)

    def test_basis_products(self):
        """e23 * e31 == e12 in the (s, yz, zx, xy) ordering, like i * j == k."""
        i = torch.tensor([0.0, 1.0, 0.0, 0.0], dtype=torch.float64)
        j = torch.tensor([0.0, 0.0, 1.0, 0.0], dtype=torch.float64)
        k = torch.tensor([0.0, 0.0, 0.0, 1.0], dtype=torch.float64)
        assert torch.equal(rotor_multiply(i, j), k)
        assert torch.equal(rotor_multiply(j, i), -k)
        assert torch.equal(rotor_multiply(i, i), torch.tensor([-1.0, 0.0, 0.0, 0.0], dtype=torch.float64))

    def test_conjugate(self):
        r = torch.tensor([1.0, 2.0, 3.0, 4.0])
        assert torch.equal(rotor_conjugate(r), torch.tensor([1.0, -2.0, -3.0, -4.0]))

    def test_times_conjugate_is_magnitude_squared(self, unit_rotors):
        r = unit_rotors * 3.0
        product = rotor_multiply(r, rotor_conjugate(r))
        assert torch.allclose(product[..., 0], torch.full((16,), 9.0, dtype=torch.float64))
        assert torch.allclose(product[..., 1:], torch.zeros(16, 3, dtype=torch.float64), atol=1e-12)

    def test_normalize(self, unit_rotors):
        assert torch.allclose(rotor_magnitude(unit_rotors), torch.ones(16, dtype=torch.float64))

    def test_normalize_zero(self):
        assert torch.isnan(normalize_rotor(torch.zeros(4))).all()


class TestRotateVector:
    """Tests for the sandwich product."""

    def test_preserves_length(self, unit_rotors, unit_vectors):
        rotated = rotate_vector(unit_vectors * 2.0, unit_rotors)
        norms = torch.linalg.vector_norm(rotated, dim=-1)
        assert torch.allclose(norms, torch.full((16,), 2.0, dtype=torch.float64))

    def test_matches_matrix(self, unit_rotors, unit_vectors):
        m = rotor_to_matrix(unit_rotors)
        assert m.shape == (16, 3, 3)
        by_matrix = (m @ unit_vectors.unsqueeze(-1)).squeeze(-1)
        assert torch.allclose(by_matrix, rotate_vector(unit_vectors, unit_rotors), atol=1e-12)

    def test_matrix_is_orthonormal(self, unit_rotors):
        m = rotor_to_matrix(unit_rotors)
        eye = torch.eye(3, dtype=torch.float64).expand(16, 3, 3)
        assert torch.allclose(m @ m.transpose(-1, -2), eye, atol=1e-12)
        assert torch.allclose(torch.linalg.det(m), torch.ones(16, dtype=torch.float64))

    def test_composition(self, unit_rotors, unit_vectors):
        r1 = unit_rotors
        r2 = unit_rotors.flip(0)
        composed = rotate_vector(unit_vectors, rotor_multiply(r2, r1))
        sequential = rotate_vector(rotate_vector(unit_vectors, r1), r2)
        assert torch.allclose(composed, sequential, atol=1e-12)


class TestAxisAngle:
    """Tests for axis-angle conversions."""

    def test_round_trip(self, unit_vectors):
        angles = torch.linspace(0.1, 3.0, 16, dtype=torch.float64)
        axis, angle = rotor_to_axis_angle(rotor_from_axis_angle(unit_vectors, angles))
        assert torch.allclose(axis, unit_vectors, atol=1e-10)
        assert torch.allclose(angle, angles, atol=1e-10)

    def test_scalar_angle_broadcasts(self, unit_vectors):
        r = rotor_from_axis_angle(unit_vectors, math.pi)
        assert r.shape == (16, 4)
        assert torch.allclose(r[..., 0], torch.zeros(16, dtype=torch.float64), atol=1e-15)

    def test_identity_has_zero_axis(self):
        axis, angle = rotor_to_axis_angle(torch.tensor([1.0, 0.0, 0.0, 0.0]))
        assert torch.equal(axis, torch.zeros(3))
        assert angle.item() == 0.0


class TestFromVectors:
    """Tests for shortest-arc rotors."""

    def test_rotates_a_onto_b(self, unit_vectors):
        a = unit_vectors
        b = unit_vectors.roll(1, dims=0)
        r = rotor_from_vectors(a, b)
        assert torch.allclose(rotate_vector(a, r), b, atol=1e-10)

    def test_mixed_antiparallel_batch(self):
        a = torch.tensor([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]], dtype=torch.float64)
        b = torch.tensor([[-1.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, -1.0]], dtype=torch.float64)
        r = rotor_from_vectors(a, b)
        assert torch.isfinite(r).all()
        assert torch.allclose(rotate_vector(a, r), b, atol=1e-12)

    def test_perpendicular_vector(self, unit_vectors):
        p = perpendicular_vector(unit_vectors)
        assert torch.allclose((p * unit_vectors).sum(dim=-1), torch.zeros(16, dtype=torch.float64), atol=1e-12)
        assert torch.allclose(torch.linalg.vector_norm(p, dim=-1), torch.ones(16, dtype=torch.float64))

    def test_double_angle(self, unit_vectors):
        """Applying the double-angle rotor to a reflects a across b."""
        a = unit_vectors
        b = unit_vectors.roll(1, dims=0)
        r = rotor_from_vectors_double(a, b)
        dot = (a * b).sum(dim=-1, keepdim=True)
        reflected = 2 * dot * b - a
        assert torch.allclose(rotate_vector(a, r), reflected, atol=1e-10)

    def test_exact_rotor_is_double_of_halfway(self, unit_vectors):
        a = unit_vectors
        b = unit_vectors.roll(1, dims=0)
        halfway = (a + b) / torch.linalg.vector_norm(a + b, dim=-1, keepdim=True)
        assert torch.allclose(rotor_from_vectors(a, b), rotor_from_vectors_double(a, halfway))
