"""
Small dense linear algebra kernels for square matrices of order 1-4.

Matrices are tensors of shape (..., N, N) in row-major order. The kernels use
closed forms and cofactor expansion instead of factorizations so that results
are exact for small integer-valued matrices and no pivoting decisions are
hidden from the caller.

All operations support batched inputs.
"""

from typing import List

import torch


def _remaining(n: int, skip: int) -> List[int]:
    return [k for k in range(n) if k != skip]


def minor_matrix(m: torch.Tensor, row: int, col: int) -> torch.Tensor:
    """
    Remove one row and one column.

    Args:
        m: Matrix of shape (..., N, N)
        row: Row to remove
        col: Column to remove

    Returns:
        Matrix of shape (..., N-1, N-1)
    """
    n = m.shape[-1]
    rows = _remaining(n, row)
    cols = _remaining(n, col)
    return m[..., rows, :][..., :, cols]


def determinant(m: torch.Tensor) -> torch.Tensor:
    """
    Determinant by closed form (N <= 2) or Laplace expansion along row 0.

    Args:
        m: Matrix of shape (..., N, N)

    Returns:
        Determinant of shape (...)
    """
    n = m.shape[-1]
    if m.shape[-2] != n:
        raise ValueError(f"Expected a square matrix, got shape {tuple(m.shape)}")

    if n == 1:
        return m[..., 0, 0]
    if n == 2:
        return m[..., 0, 0] * m[..., 1, 1] - m[..., 0, 1] * m[..., 1, 0]

    total = torch.zeros(m.shape[:-2], dtype=m.dtype, device=m.device)
    for j in range(n):
        sign = 1.0 if j % 2 == 0 else -1.0
        total = total + sign * m[..., 0, j] * determinant(minor_matrix(m, 0, j))
    return total


def cofactor_matrix(m: torch.Tensor) -> torch.Tensor:
    """
    Matrix of cofactors C[i, j] = (-1)^(i+j) * det(minor(i, j)).

    Args:
        m: Matrix of shape (..., N, N) with N >= 2

    Returns:
        Cofactor matrix of shape (..., N, N)
    """
    n = m.shape[-1]
    rows = []
    for i in range(n):
        row = []
        for j in range(n):
            sign = 1.0 if (i + j) % 2 == 0 else -1.0
            row.append(sign * determinant(minor_matrix(m, i, j)))
        rows.append(torch.stack(row, dim=-1))
    return torch.stack(rows, dim=-2)


def adjugate(m: torch.Tensor) -> torch.Tensor:
    """Transpose of the cofactor matrix."""
    return cofactor_matrix(m).transpose(-1, -2)


def inverse_from_adjugate(m: torch.Tensor) -> torch.Tensor:
    """
    Inverse as adjugate / determinant.

    Singular inputs are not checked: a zero determinant yields inf/nan
    entries per IEEE division.

    Args:
        m: Matrix of shape (..., N, N)

    Returns:
        Inverse of shape (..., N, N)
    """
    det = determinant(m)
    return adjugate(m) / det.unsqueeze(-1).unsqueeze(-1)
