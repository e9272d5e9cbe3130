#!/usr/bin/env python3
"""
Tour of quantum_objects
=======================

Walks through the package API:
1. Kets from atomic notation and bitstrings
2. Operators from Pauli strings, ladder operators
3. Embedding gates into multilevel systems
4. Subspace, leakage and ENR indices
5. Iso-vector indices and the pure-leakage block
"""

import numpy as np

from quantum_objects import (
    GATES,
    EmbeddedOperator,
    annihilate,
    create,
    embed,
    get_enr_subspace_indices,
    get_iso_vec_leakage_indices,
    get_iso_vec_subspace_indices,
    get_leakage_indices,
    get_subspace_indices,
    ket_from_bitstring,
    ket_from_string,
    operator_from_string,
    unembed,
)


def section(title: str) -> None:
    print()
    print("=" * 70)
    print(title)
    print("=" * 70)


def main() -> None:
    np.set_printoptions(precision=3, suppress=True)

    section("1. Quantum states")
    print("|g⟩           :", ket_from_string("g", [2]).full().ravel())
    print("(|g⟩+|e⟩)|g⟩  :", ket_from_string("(g+e)g", [2, 2]).full().ravel())
    print("|01⟩          :", ket_from_bitstring("01").full().ravel())

    section("2. Quantum operators")
    print("X ⊗ Z:\n", operator_from_string("XZ").full().real)
    a = annihilate(3)
    print("a (3 levels):\n", a.full().real)
    print("a†a:\n", (create(3) * a).full().real)

    section("3. Embedded operators")
    X3 = embed(GATES["X"], range(2), 3)
    print("X embedded in a qutrit:\n", X3.real)
    print("unembedded:\n", unembed(X3, range(2)).real)

    levels = [3, 3]
    indices = get_subspace_indices([range(2), range(2)], levels)
    op = EmbeddedOperator(operator_from_string("XI"), indices, levels)
    print(op)
    print("nonzero entries of the full operator:", op.sparse().nnz)

    section("4. Subspace and leakage indices")
    print("subspace(range(2), 5) :", get_subspace_indices(range(2), 5))
    print("leakage(range(2), 5)  :", get_leakage_indices(range(2), 5))
    print("subspace([3, 3])      :", get_subspace_indices(levels))
    print("leakage([3, 3])       :", get_leakage_indices(levels))
    print("ENR n=1, [3, 3]       :", get_enr_subspace_indices(1, levels))

    section("5. Iso-vector indices")
    print("subspace block        :", get_iso_vec_subspace_indices(range(2), 3))
    default = get_iso_vec_leakage_indices(range(2), 3)
    print("leakage blocks        :", default)
    full = get_iso_vec_leakage_indices(range(2), 3, ignore_pure_leakage=False)
    print("pure leakage block    :", sorted(set(full) - set(default)))


if __name__ == "__main__":
    main()
