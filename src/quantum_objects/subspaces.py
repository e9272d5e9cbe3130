"""
Subspace and Leakage Indices for Composite Quantum Systems
===========================================================

This module computes which basis states of a (possibly composite) multilevel
system belong to the computational subspace and which are leakage states.
The results are plain lists of flat integer indices that can be used to
slice state vectors, embed operators, or build leakage penalties.

Hilbert Space Structure
-----------------------
A composite system of subsystems with level counts L₀, L₁, ..., Lₙ₋₁ has a
Hilbert space of dimension

    N = L₀ · L₁ · ... · Lₙ₋₁

Basis states |l₀ l₁ ... lₙ₋₁⟩ are ordered the same way ``np.kron`` orders
them (row-major, first subsystem most significant), so the flat index is the
mixed-radix number

    index = Σᵢ lᵢ · (Lᵢ₊₁ · Lᵢ₊₂ · ... · Lₙ₋₁)

For two 3-level systems:

    |00⟩ → 0   |01⟩ → 1   |02⟩ → 2
    |10⟩ → 3   |11⟩ → 4   |12⟩ → 5
    |20⟩ → 6   |21⟩ → 7   |22⟩ → 8

The qubit subspace {0, 1} ⊗ {0, 1} is therefore [0, 1, 3, 4] and the leakage
states are [2, 5, 6, 7, 8].

Subspace vs Leakage
-------------------
    H = H_subspace ⊕ H_leakage

Computation lives in H_subspace; population in H_leakage is an error. The
two index sets returned by `get_subspace_indices` and `get_leakage_indices`
partition range(N) exactly.

Excitation Number Restriction (ENR)
-----------------------------------
Sometimes only states with a small total number of excitations matter
(e.g. coupled oscillators). `get_enr_subspace_indices(n, levels)` keeps the
basis states with l₀ + l₁ + ... ≤ n.

Isomorphic (real) vector indices
--------------------------------
Real-valued optimizers work with the iso-vector of an operator U
(see ``isomorphisms.operator_to_iso_vec``): column j of U occupies slots
[2N·j, 2N·(j+1)) as [Re U[:, j]; Im U[:, j]], so entry (i, j) sits at

    real:  2N·j + i
    imag:  2N·j + N + i

`get_iso_vec_subspace_indices` returns the slots of the subspace ⊗ subspace
block. `get_iso_vec_leakage_indices` returns the mixed subspace/leakage
blocks and, on request, the pure leakage ⊗ leakage block, which does not
couple to the subspace and is skipped by default.

Calling conventions
-------------------
    get_subspace_indices(range(2), 5)                  # single system
    get_subspace_indices([range(2), range(2)], [3, 3]) # one subset per subsystem
    get_subspace_indices([3, 3])                       # qubits assumed
    get_subspace_indices([0, 1, 3], [3, 3])            # flat composite indices

All indices are 0-based. Every function is pure and returns a new list.
"""

import operator
import warnings
from itertools import product
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .configurations import DEFAULT_CONFIG, SubspaceConfig
from .exceptions import (
    DimensionMismatch,
    InvalidExcitationBound,
    InvalidLevels,
    InvalidSubspace,
)
from .utils.math_utils import composite_dimension

Levels = Union[int, Sequence[int]]
SubspaceSpec = Union[Iterable[int], Sequence[Iterable[int]]]


# =============================================================================
# INPUT NORMALISATION
# =============================================================================

def _as_int(value, what: str, error=InvalidSubspace) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise error(f"{what} must be an integer, got {value!r}") from None


def normalize_levels(subsystem_levels: Levels) -> Tuple[int, ...]:
    """
    Return subsystem level counts as a tuple of positive ints.

    An int is a single subsystem.
    """
    if isinstance(subsystem_levels, (int, np.integer)):
        levels = (_as_int(subsystem_levels, "Level count", InvalidLevels),)
    else:
        levels = tuple(
            _as_int(l, "Level count", InvalidLevels) for l in subsystem_levels
        )
    if not levels:
        raise InvalidLevels("At least one subsystem is required")
    for i, l in enumerate(levels):
        if l < 1:
            raise InvalidLevels(f"Subsystem {i} has {l} levels; need at least 1")
    return levels


def _normalize_subset(
    subset: Iterable[int],
    dim: int,
    config: SubspaceConfig,
    label: str,
    stacklevel: int = 2,
) -> Tuple[int, ...]:
    """Sorted, de-duplicated, range-checked indices in [0, dim)."""
    values = [_as_int(v, f"{label} index") for v in subset]
    if not values:
        raise InvalidSubspace(f"{label} is empty")

    for v in values:
        if not 0 <= v < dim:
            raise InvalidSubspace(
                f"{label} index {v} out of range [0, {dim})"
            )

    unique = sorted(set(values))
    if len(unique) != len(values) and config.warn_on_duplicates:
        warnings.warn(
            f"{label} contains duplicate indices {values}; using {unique}",
            UserWarning,
            stacklevel=stacklevel,
        )
    return tuple(unique)


def _is_per_subsystem(subspace) -> bool:
    """True if ``subspace`` is a sequence of per-subsystem level subsets."""
    if isinstance(subspace, range):
        return False
    return len(subspace) > 0 and all(
        not isinstance(s, (int, np.integer)) and hasattr(s, "__iter__")
        for s in subspace
    )


def _strides(levels: Sequence[int]) -> List[int]:
    """Row-major place values: stride_i = L_{i+1} · ... · L_{n-1}."""
    strides = [1] * len(levels)
    for i in range(len(levels) - 2, -1, -1):
        strides[i] = strides[i + 1] * levels[i + 1]
    return strides


def _product_indices(subsets: Sequence[Sequence[int]], levels: Sequence[int]) -> List[int]:
    # Subsets are sorted, so lexicographic product order is ascending flat order.
    strides = _strides(levels)
    return [
        sum(l * s for l, s in zip(choice, strides))
        for choice in product(*subsets)
    ]


def resolve_subspace(
    subspace: Optional[SubspaceSpec],
    subsystem_levels: Levels,
    config: Optional[SubspaceConfig] = None,
    *,
    stacklevel: int = 2,
) -> Tuple[List[int], Tuple[int, ...]]:
    """
    Turn any accepted subspace description into flat composite indices.

    Parameters
    ----------
    subspace : iterable of int, sequence of iterables of int, or None
        - None: ``config.default_subspace`` for every subsystem
        - sequence of subsets: one level subset per subsystem
        - flat iterable of ints: level subset for a single system, or
          composite indices when several subsystems are given
    subsystem_levels : int or sequence of int
        Level count of each subsystem.
    config : SubspaceConfig, optional
        Default-construction policy. Defaults to qubits.
    stacklevel : int
        Passed to `warnings.warn` for duplicate levels, counted from the
        caller of this function.

    Returns
    -------
    indices : list of int
        Ascending flat indices in [0, N).
    levels : tuple of int
        Normalised subsystem levels.
    """
    config = config or DEFAULT_CONFIG
    levels = normalize_levels(subsystem_levels)
    # One frame for _normalize_subset itself.
    stacklevel += 1

    if subspace is None:
        subsets = []
        for i, l in enumerate(levels):
            subsets.append(_normalize_subset(
                config.default_subspace, l, config,
                f"Default subspace of subsystem {i}", stacklevel,
            ))
        return _product_indices(subsets, levels), levels

    if not isinstance(subspace, range):
        subspace = list(subspace)

    if _is_per_subsystem(subspace):
        if len(subspace) != len(levels):
            raise DimensionMismatch(
                f"Got {len(subspace)} subspace subsets for {len(levels)} subsystems"
            )
        subsets = []
        for i, (s, l) in enumerate(zip(subspace, levels)):
            subsets.append(_normalize_subset(
                s, l, config, f"Subspace of subsystem {i}", stacklevel,
            ))
        return _product_indices(subsets, levels), levels

    dim = composite_dimension(levels)
    label = "Subspace" if len(levels) == 1 else "Composite subspace"
    return list(_normalize_subset(subspace, dim, config, label, stacklevel)), levels


def _split_args(subspace, subsystem_levels):
    # get_subspace_indices([3, 3]) means "levels [3, 3], default subspace".
    if subsystem_levels is None:
        if subspace is None:
            raise TypeError("subsystem_levels is required")
        return None, subspace
    return subspace, subsystem_levels


def _complement(indices: Iterable[int], dim: int) -> List[int]:
    taken = set(indices)
    return [i for i in range(dim) if i not in taken]


# =============================================================================
# SUBSPACE / LEAKAGE INDICES
# =============================================================================

def get_subspace_indices(
    subspace: Optional[SubspaceSpec] = None,
    subsystem_levels: Optional[Levels] = None,
    *,
    config: Optional[SubspaceConfig] = None,
) -> List[int]:
    """
    Flat indices of the subspace states of a composite system.

    Parameters
    ----------
    subspace : see `resolve_subspace`
        If only one positional argument is given it is taken as
        ``subsystem_levels`` and the default subspace is used.
    subsystem_levels : int or sequence of int
        Level count of each subsystem.
    config : SubspaceConfig, optional
        Default subspace policy (qubits unless told otherwise).

    Returns
    -------
    list of int
        Unique ascending indices in [0, ∏ levels).

    Raises
    ------
    InvalidSubspace
        A level is outside [0, Lᵢ), a subset is empty, or not integer.
    DimensionMismatch
        Number of subsets differs from number of subsystems.

    Examples
    --------
    >>> get_subspace_indices(range(2), 5)
    [0, 1]
    >>> get_subspace_indices([range(2), range(2)], [3, 3])
    [0, 1, 3, 4]
    >>> get_subspace_indices([3, 3])
    [0, 1, 3, 4]
    """
    subspace, subsystem_levels = _split_args(subspace, subsystem_levels)
    indices, _ = resolve_subspace(subspace, subsystem_levels, config, stacklevel=3)
    return indices


def get_leakage_indices(
    subspace: Optional[SubspaceSpec] = None,
    subsystem_levels: Optional[Levels] = None,
    *,
    config: Optional[SubspaceConfig] = None,
) -> List[int]:
    """
    Flat indices of the leakage states: the complement of
    `get_subspace_indices` in range(∏ levels).

    >>> get_leakage_indices(range(2), 5)
    [2, 3, 4]
    >>> get_leakage_indices([3, 3])
    [2, 5, 6, 7, 8]
    """
    subspace, subsystem_levels = _split_args(subspace, subsystem_levels)
    indices, levels = resolve_subspace(subspace, subsystem_levels, config, stacklevel=3)
    return _complement(indices, composite_dimension(levels))


# =============================================================================
# EXCITATION NUMBER RESTRICTION
# =============================================================================

def _validate_excitation_number(excitation_number) -> int:
    if isinstance(excitation_number, bool):
        raise InvalidExcitationBound("Excitation number must be an integer, got a bool")
    n = _as_int(excitation_number, "Excitation number", InvalidExcitationBound)
    if n < 0:
        raise InvalidExcitationBound(f"Excitation number must be >= 0, got {n}")
    return n


def get_enr_subspace_indices(excitation_number: int, subsystem_levels: Levels) -> List[int]:
    """
    Indices of basis states with at most ``excitation_number`` excitations.

    The excitation count of |l₀ l₁ ... lₙ₋₁⟩ is l₀ + l₁ + ... + lₙ₋₁.

    Parameters
    ----------
    excitation_number : int
        Maximum total excitation number (>= 0).
    subsystem_levels : int or sequence of int
        Level count of each subsystem.

    Returns
    -------
    list of int
        Ascending flat indices. For n = 0 this is [0]; the set for n is
        contained in the set for n + 1.

    Examples
    --------
    >>> get_enr_subspace_indices(1, [3, 3])
    [0, 1, 3]
    """
    n = _validate_excitation_number(excitation_number)
    levels = normalize_levels(subsystem_levels)
    # product() enumerates basis states in flat-index order
    return [
        index
        for index, state in enumerate(product(*(range(l) for l in levels)))
        if sum(state) <= n
    ]


def get_enr_leakage_indices(excitation_number: int, subsystem_levels: Levels) -> List[int]:
    """Complement of `get_enr_subspace_indices`."""
    levels = normalize_levels(subsystem_levels)
    return _complement(
        get_enr_subspace_indices(excitation_number, levels),
        composite_dimension(levels),
    )


# =============================================================================
# ISOMORPHIC INDICES
# =============================================================================

def _iso_vec_block(rows: Iterable[int], cols: Iterable[int], dim: int) -> List[int]:
    """Iso-vector slots (real and imaginary) of the entries rows × cols."""
    rows = list(rows)
    slots = []
    for j in cols:
        for i in rows:
            slots.append(2 * dim * j + i)
            slots.append(2 * dim * j + dim + i)
    return slots


def get_iso_vec_subspace_indices(
    subspace: Optional[SubspaceSpec] = None,
    subsystem_levels: Optional[Levels] = None,
    *,
    config: Optional[SubspaceConfig] = None,
) -> List[int]:
    """
    Iso-vector indices of the subspace ⊗ subspace block of an operator.

    Parameters
    ----------
    subspace, subsystem_levels, config
        As for `get_subspace_indices`.

    Returns
    -------
    list of int
        Ascending indices into ``operator_to_iso_vec(U)`` (length 2N²) of
        the real and imaginary parts of every U[i, j] with i and j both in
        the subspace.

    Examples
    --------
    >>> get_iso_vec_subspace_indices(range(2), 3)
    [0, 1, 3, 4, 6, 7, 9, 10]
    """
    subspace, subsystem_levels = _split_args(subspace, subsystem_levels)
    indices, levels = resolve_subspace(subspace, subsystem_levels, config, stacklevel=3)
    dim = composite_dimension(levels)
    return sorted(_iso_vec_block(indices, indices, dim))


def get_iso_vec_leakage_indices(
    subspace: Optional[SubspaceSpec] = None,
    subsystem_levels: Optional[Levels] = None,
    *,
    ignore_pure_leakage: bool = True,
    config: Optional[SubspaceConfig] = None,
) -> List[int]:
    """
    Iso-vector indices of the leakage blocks of an operator.

    The blocks returned are

        subspace rows ⊗ leakage columns
        leakage rows ⊗ subspace columns
        leakage rows ⊗ leakage columns   (only if ignore_pure_leakage=False)

    The pure leakage block is skipped by default: it never couples to the
    subspace, so leakage-suppression objectives can disregard it.

    Parameters
    ----------
    subspace, subsystem_levels, config
        As for `get_subspace_indices`.
    ignore_pure_leakage : bool
        Skip the leakage ⊗ leakage block (default True).

    Returns
    -------
    list of int
        Ascending iso-vector indices. The result with
        ``ignore_pure_leakage=False`` is a superset of the default one.

    Examples
    --------
    >>> get_iso_vec_leakage_indices(range(2), 3)
    [2, 5, 8, 11, 12, 13, 15, 16]
    """
    subspace, subsystem_levels = _split_args(subspace, subsystem_levels)
    indices, levels = resolve_subspace(subspace, subsystem_levels, config, stacklevel=3)
    dim = composite_dimension(levels)
    leakage = _complement(indices, dim)

    slots = _iso_vec_block(indices, leakage, dim) + _iso_vec_block(leakage, indices, dim)
    if not ignore_pure_leakage:
        slots += _iso_vec_block(leakage, leakage, dim)
    return sorted(slots)


def get_iso_subspace_indices(
    subspace: Optional[SubspaceSpec] = None,
    subsystem_levels: Optional[Levels] = None,
    *,
    config: Optional[SubspaceConfig] = None,
) -> List[int]:
    """
    Indices into ``ket_to_iso(ψ)`` (length 2N) of the subspace amplitudes:
    real parts at i, imaginary parts at N + i.

    >>> get_iso_subspace_indices(range(2), 3)
    [0, 1, 3, 4]
    """
    subspace, subsystem_levels = _split_args(subspace, subsystem_levels)
    indices, levels = resolve_subspace(subspace, subsystem_levels, config, stacklevel=3)
    dim = composite_dimension(levels)
    return indices + [dim + i for i in indices]


def get_iso_leakage_indices(
    subspace: Optional[SubspaceSpec] = None,
    subsystem_levels: Optional[Levels] = None,
    *,
    config: Optional[SubspaceConfig] = None,
) -> List[int]:
    """Complement of `get_iso_subspace_indices` in range(2N)."""
    subspace, subsystem_levels = _split_args(subspace, subsystem_levels)
    indices, levels = resolve_subspace(subspace, subsystem_levels, config, stacklevel=3)
    dim = composite_dimension(levels)
    leakage = _complement(indices, dim)
    return leakage + [dim + i for i in leakage]
