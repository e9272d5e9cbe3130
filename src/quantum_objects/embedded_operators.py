"""
Embedding Operators into Larger Hilbert Spaces
==============================================

A gate is usually specified on the computational subspace (a 2×2 X gate,
a 4×4 CZ) but the physical system has more levels. Embedding places the
subspace operator into the full space:

    U_full[s_a, s_b] = U[a, b]     for subspace indices s

and leaves every other entry zero. Unembedding reads the same block back,
so

    unembed(embed(U, s, levels), s) == U

holds exactly.

Example
-------
>>> from quantum_objects import GATES, embed, unembed
>>> X3 = embed(GATES["X"], range(2), 3)
>>> X3.real
array([[0., 1., 0.],
       [1., 0., 0.],
       [0., 0., 0.]])
>>> unembed(X3, range(2))
array([[0.+0.j, 1.+0.j],
       [1.+0.j, 0.+0.j]])

For composite systems, `EmbeddedOperator` keeps the subsystem structure
alongside the embedded matrix:

>>> from quantum_objects import EmbeddedOperator, operator_from_string
>>> op = EmbeddedOperator(operator_from_string("XI"), subsystem_levels=[3, 3])
>>> op.subspace_indices
[0, 1, 3, 4]
"""

from typing import List, Optional, Sequence, Union

import numpy as np
import scipy.sparse as sp

from .configurations import SubspaceConfig
from .exceptions import DimensionMismatch, InvalidSubspace
from .subspaces import _as_int, get_leakage_indices, get_subspace_indices, normalize_levels
from .utils.math_utils import composite_dimension, to_array


def _embedding_indices(subspace_indices, dim: int) -> List[int]:
    # Order is kept: position k of the subspace operator maps to indices[k].
    indices = [_as_int(i, "Subspace index") for i in subspace_indices]
    if len(set(indices)) != len(indices):
        raise InvalidSubspace(f"Subspace indices {indices} contain duplicates")
    for i in indices:
        if not 0 <= i < dim:
            raise InvalidSubspace(f"Subspace index {i} out of range [0, {dim})")
    return indices


def embed(
    operator,
    subspace_indices: Sequence[int],
    levels: Union[int, Sequence[int]],
) -> np.ndarray:
    """
    Embed a subspace operator into the full Hilbert space.

    Parameters
    ----------
    operator : array-like, Qobj or sparse matrix
        d×d operator on the subspace.
    subspace_indices : sequence of int
        d flat indices of the full space (e.g. from `get_subspace_indices`).
    levels : int or sequence of int
        Full-space dimension, or the subsystem level counts.

    Returns
    -------
    np.ndarray
        N×N complex matrix, zero outside the subspace block.

    Raises
    ------
    DimensionMismatch
        Operator is not square or its size differs from len(subspace_indices).
    InvalidSubspace
        An index is outside [0, N) or repeated.
    """
    op = to_array(operator)
    dim = composite_dimension(normalize_levels(levels))
    indices = _embedding_indices(subspace_indices, dim)

    if op.ndim != 2 or op.shape[0] != op.shape[1]:
        raise DimensionMismatch(f"Operator must be square, got shape {op.shape}")
    if op.shape[0] != len(indices):
        raise DimensionMismatch(
            f"Operator of size {op.shape[0]} does not match "
            f"{len(indices)} subspace indices"
        )

    full = np.zeros((dim, dim), dtype=complex)
    full[np.ix_(indices, indices)] = op
    return full


def unembed(matrix, subspace_indices: Optional[Sequence[int]] = None) -> np.ndarray:
    """
    Extract the subspace block of a full-space operator.

    ``matrix`` may also be an `EmbeddedOperator`, in which case its own
    subspace indices are used.
    """
    if isinstance(matrix, EmbeddedOperator):
        return matrix.unembed()
    if subspace_indices is None:
        raise TypeError("subspace_indices is required unless an EmbeddedOperator is given")

    full = to_array(matrix)
    if full.ndim != 2 or full.shape[0] != full.shape[1]:
        raise DimensionMismatch(f"Operator must be square, got shape {full.shape}")
    indices = _embedding_indices(subspace_indices, full.shape[0])
    return full[np.ix_(indices, indices)].copy()


class EmbeddedOperator:
    """
    An operator embedded in a subspace of a composite quantum system.

    Parameters
    ----------
    subspace_operator : array-like or Qobj
        Operator on the subspace (d×d).
    subspace_indices : sequence of int, optional
        Flat indices of the subspace. Defaults to the subspace given by
        ``config`` (qubits) on every subsystem.
    subsystem_levels : int or sequence of int
        Level counts of the subsystems. Required.
    config : SubspaceConfig, optional
        Used only when ``subspace_indices`` is omitted.

    Attributes
    ----------
    operator : np.ndarray
        The embedded N×N matrix.
    subspace_indices : list of int
    subsystem_levels : list of int
    """

    def __init__(
        self,
        subspace_operator,
        subspace_indices: Optional[Sequence[int]] = None,
        subsystem_levels: Optional[Union[int, Sequence[int]]] = None,
        *,
        config: Optional[SubspaceConfig] = None,
    ):
        if subsystem_levels is None:
            raise TypeError("subsystem_levels is required")
        levels = list(normalize_levels(subsystem_levels))
        if subspace_indices is None:
            subspace_indices = get_subspace_indices(subsystem_levels=levels, config=config)

        dim = composite_dimension(levels)
        self.subspace_indices = _embedding_indices(subspace_indices, dim)
        self.subsystem_levels = levels
        self.operator = embed(subspace_operator, self.subspace_indices, levels)

    @classmethod
    def from_full_operator(
        cls,
        operator,
        subspace_indices: Sequence[int],
        subsystem_levels: Union[int, Sequence[int]],
    ) -> "EmbeddedOperator":
        """Wrap an operator that already acts on the full space."""
        full = to_array(operator)
        levels = normalize_levels(subsystem_levels)
        dim = composite_dimension(levels)
        if full.shape != (dim, dim):
            raise DimensionMismatch(
                f"Operator of shape {full.shape} does not act on a space of dimension {dim}"
            )
        obj = cls.__new__(cls)
        obj.subspace_indices = _embedding_indices(subspace_indices, dim)
        obj.subsystem_levels = list(levels)
        obj.operator = full.copy()
        return obj

    @property
    def dim(self) -> int:
        return self.operator.shape[0]

    @property
    def leakage_indices(self) -> List[int]:
        return get_leakage_indices(self.subspace_indices, self.subsystem_levels)

    def unembed(self) -> np.ndarray:
        """The subspace block of the embedded operator."""
        return unembed(self.operator, self.subspace_indices)

    def sparse(self) -> sp.csr_matrix:
        return sp.csr_matrix(self.operator)

    def __matmul__(self, other: "EmbeddedOperator") -> "EmbeddedOperator":
        if not isinstance(other, EmbeddedOperator):
            return NotImplemented
        if (other.subspace_indices != self.subspace_indices
                or other.subsystem_levels != self.subsystem_levels):
            raise DimensionMismatch(
                "Cannot compose embedded operators with different subspaces or levels"
            )
        return EmbeddedOperator.from_full_operator(
            self.operator @ other.operator,
            self.subspace_indices,
            self.subsystem_levels,
        )

    def __repr__(self) -> str:
        return (
            f"EmbeddedOperator(dim={self.dim}, subspace_indices={self.subspace_indices}, "
            f"subsystem_levels={self.subsystem_levels})"
        )
