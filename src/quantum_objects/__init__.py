# Quantum Objects: States, Operators and Subspace Indices for Multilevel Systems
#
# A small library for building quantum states and operators of composite
# multilevel systems and for locating their computational subspace.
#
# Layout:
#   subspaces:               subspace / leakage / ENR / iso-vector index sets
#   isomorphisms:            real encodings of kets and operators
#   embedded_operators:      embed, unembed, EmbeddedOperator
#   quantum_object_builders: kets and operators from strings, ladder operators
#   gates:                   PAULIS and GATES tables
#   configurations:          default subspace policy
#   exceptions:              error types (all ValueError subclasses)

__version__ = "0.1.0"

from .configurations import (
    SubspaceConfig,
    DEFAULT_CONFIG,
    get_qubit_config,
    get_qutrit_config,
)
from .exceptions import (
    QuantumObjectsError,
    InvalidLevels,
    InvalidSubspace,
    InvalidExcitationBound,
    DimensionMismatch,
)
from .subspaces import (
    get_subspace_indices,
    get_leakage_indices,
    get_enr_subspace_indices,
    get_enr_leakage_indices,
    get_iso_vec_subspace_indices,
    get_iso_vec_leakage_indices,
    get_iso_subspace_indices,
    get_iso_leakage_indices,
)
from .isomorphisms import (
    vec,
    unvec,
    ket_to_iso,
    iso_to_ket,
    iso_operator,
    iso_operator_to_operator,
    operator_to_iso_vec,
    iso_vec_to_operator,
)
from .embedded_operators import (
    embed,
    unembed,
    EmbeddedOperator,
)
from .gates import PAULIS, GATES
from .quantum_object_builders import (
    ATOMIC_LEVELS,
    ket_from_string,
    ket_from_bitstring,
    operator_from_string,
    annihilate,
    create,
)

__all__ = [
    # Configuration
    "SubspaceConfig",
    "DEFAULT_CONFIG",
    "get_qubit_config",
    "get_qutrit_config",
    # Errors
    "QuantumObjectsError",
    "InvalidLevels",
    "InvalidSubspace",
    "InvalidExcitationBound",
    "DimensionMismatch",
    # Indices
    "get_subspace_indices",
    "get_leakage_indices",
    "get_enr_subspace_indices",
    "get_enr_leakage_indices",
    "get_iso_vec_subspace_indices",
    "get_iso_vec_leakage_indices",
    "get_iso_subspace_indices",
    "get_iso_leakage_indices",
    # Isomorphisms
    "vec",
    "unvec",
    "ket_to_iso",
    "iso_to_ket",
    "iso_operator",
    "iso_operator_to_operator",
    "operator_to_iso_vec",
    "iso_vec_to_operator",
    # Embedding
    "embed",
    "unembed",
    "EmbeddedOperator",
    # Builders
    "PAULIS",
    "GATES",
    "ATOMIC_LEVELS",
    "ket_from_string",
    "ket_from_bitstring",
    "operator_from_string",
    "annihilate",
    "create",
]
