"""
Real Isomorphisms of Complex States and Operators
==================================================

Optimizers and ODE solvers that only handle real numbers work with real
"iso" representations of kets and operators. This module converts between
the complex objects and those real encodings. The layouts here are the ones
the index functions in `subspaces` refer to.

Kets
----
    ψ ∈ ℂᴺ  ↦  ψ̃ = [Re ψ; Im ψ] ∈ ℝ²ᴺ

Operators acting on kets
------------------------
    H  ↦  H̃ = [ Re H   -Im H ]
              [ Im H    Re H ]

so that H̃ ψ̃ is the iso of H ψ.

Operators as vectors
--------------------
An N×N operator U is flattened column by column and each column is stored
as its iso ket:

    Ũ = [ iso(U[:, 0]); iso(U[:, 1]); ... ; iso(U[:, N-1]) ] ∈ ℝ²ᴺ²

so entry (i, j) has its real part at 2N·j + i and its imaginary part at
2N·j + N + i.
"""

import math
from typing import Optional

import numpy as np

from .utils.math_utils import to_array


# =============================================================================
# VECTORISATION
# =============================================================================

def vec(A) -> np.ndarray:
    """Column-major vectorisation of a matrix."""
    return to_array(A).flatten(order="F")


def unvec(v, dim: Optional[int] = None) -> np.ndarray:
    """Inverse of `vec`. ``dim`` is inferred for square matrices."""
    v = np.asarray(v).ravel()
    if dim is None:
        dim = math.isqrt(v.size)
    if dim * dim != v.size:
        raise ValueError(f"Vector of length {v.size} is not a vectorised {dim}x{dim} matrix")
    return v.reshape((dim, dim), order="F")


# =============================================================================
# KETS
# =============================================================================

def ket_to_iso(psi) -> np.ndarray:
    """[Re ψ; Im ψ] as a real 1-D array of length 2N."""
    psi = to_array(psi).ravel()
    return np.concatenate([psi.real, psi.imag])


def iso_to_ket(psi_iso) -> np.ndarray:
    """Complex ket from its iso representation."""
    psi_iso = np.asarray(psi_iso, dtype=float).ravel()
    if psi_iso.size % 2:
        raise ValueError(f"Iso ket must have even length, got {psi_iso.size}")
    n = psi_iso.size // 2
    return psi_iso[:n] + 1j * psi_iso[n:]


# =============================================================================
# OPERATORS
# =============================================================================

def _square(U) -> np.ndarray:
    U = to_array(U)
    if U.ndim != 2 or U.shape[0] != U.shape[1]:
        raise ValueError(f"Expected a square matrix, got shape {U.shape}")
    return U


def iso_operator(H) -> np.ndarray:
    """
    Real 2N×2N block form of a complex operator.

    Satisfies ``iso_operator(H) @ ket_to_iso(ψ) == ket_to_iso(H @ ψ)``.
    """
    H = _square(H)
    return np.block([[H.real, -H.imag], [H.imag, H.real]])


def iso_operator_to_operator(H_iso) -> np.ndarray:
    """Inverse of `iso_operator`."""
    H_iso = np.asarray(H_iso, dtype=float)
    if H_iso.ndim != 2 or H_iso.shape[0] != H_iso.shape[1] or H_iso.shape[0] % 2:
        raise ValueError(f"Iso operator must be square with even size, got shape {H_iso.shape}")
    n = H_iso.shape[0] // 2
    return H_iso[:n, :n] + 1j * H_iso[n:, :n]


def operator_to_iso_vec(U) -> np.ndarray:
    """
    Flatten an operator into a real vector of length 2N².

    Column j of U becomes the block ``ket_to_iso(U[:, j])``.
    """
    U = _square(U)
    return np.concatenate([ket_to_iso(U[:, j]) for j in range(U.shape[1])])


def iso_vec_to_operator(U_iso) -> np.ndarray:
    """Inverse of `operator_to_iso_vec`."""
    U_iso = np.asarray(U_iso, dtype=float).ravel()
    n = math.isqrt(U_iso.size // 2)
    if 2 * n * n != U_iso.size:
        raise ValueError(f"Iso vector of length {U_iso.size} does not encode a square operator")
    columns = U_iso.reshape((n, 2 * n))
    return (columns[:, :n] + 1j * columns[:, n:]).T
