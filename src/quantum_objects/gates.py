"""
Standard Operators and Gates
============================

Constant tables of frequently used single- and two-qubit operators, stored
as ``qutip.Qobj`` so that tensor products keep track of subsystem dims.

PAULIS
------
    I = [[1, 0], [0, 1]]      X = [[0, 1], [1, 0]]
    Y = [[0, -i], [i, 0]]     Z = [[1, 0], [0, -1]]

GATES
-----
The Paulis plus

    H          Hadamard, (X + Z)/√2
    S          phase gate, diag(1, i)
    T          π/8 gate, diag(1, e^{iπ/4})
    CX         controlled-X, control on the first qubit
    CZ         controlled-Z
    sqrtiSWAP  square root of iSWAP

Two-qubit gates use the basis order |00⟩, |01⟩, |10⟩, |11⟩ (first qubit most
significant), the same order as `subspaces` and ``np.kron``.
"""

import numpy as np
from qutip import Qobj, qeye, sigmax, sigmay, sigmaz


PAULIS = {
    "I": qeye(2),
    "X": sigmax(),
    "Y": sigmay(),
    "Z": sigmaz(),
}

_TWO_QUBIT_DIMS = [[2, 2], [2, 2]]

GATES = {
    **PAULIS,
    "H": Qobj(np.array([[1, 1], [1, -1]], dtype=complex) / np.sqrt(2)),
    "S": Qobj(np.diag([1, 1j])),
    "T": Qobj(np.diag([1, np.exp(1j * np.pi / 4)])),
    "CX": Qobj(
        np.array([
            [1, 0, 0, 0],
            [0, 1, 0, 0],
            [0, 0, 0, 1],
            [0, 0, 1, 0],
        ], dtype=complex),
        dims=_TWO_QUBIT_DIMS,
    ),
    "CZ": Qobj(np.diag([1, 1, 1, -1]).astype(complex), dims=_TWO_QUBIT_DIMS),
    "sqrtiSWAP": Qobj(
        np.array([
            [1, 0, 0, 0],
            [0, 1 / np.sqrt(2), 1j / np.sqrt(2), 0],
            [0, 1j / np.sqrt(2), 1 / np.sqrt(2), 0],
            [0, 0, 0, 1],
        ], dtype=complex),
        dims=_TWO_QUBIT_DIMS,
    ),
}
