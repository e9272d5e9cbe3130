"""
Quantum Object Builders
=======================

Convenience constructors for kets and operators from short strings.

Atomic notation
---------------
Levels of each subsystem are named by letters, ground state first:

    g → 0,  e → 1,  f → 2,  h → 3,  i → 4,  j → 5,  k → 6,  l → 7

One character per subsystem. A parenthesised sum gives an equal
superposition for that subsystem:

    "(g+e)g"  with levels [2, 2]  →  (|gg⟩ + |eg⟩)/√2

Bitstrings
----------
    "01"  →  |0⟩ ⊗ |1⟩

Pauli strings
-------------
    "XZ"  →  X ⊗ Z

All builders return ``qutip.Qobj`` with the subsystem structure in ``dims``.
"""

from functools import reduce
from typing import Dict, List, Optional, Sequence, Union

from qutip import Qobj, basis, tensor
from qutip import create as _qutip_create
from qutip import destroy as _qutip_destroy

from .exceptions import DimensionMismatch, InvalidLevels
from .gates import PAULIS
from .subspaces import normalize_levels


ATOMIC_LEVELS: Dict[str, int] = {
    "g": 0,
    "e": 1,
    "f": 2,
    "h": 3,
    "i": 4,
    "j": 5,
    "k": 6,
    "l": 7,
}


def _tensor(parts: List[Qobj]) -> Qobj:
    return parts[0] if len(parts) == 1 else tensor(*parts)


def _parse_atomic_string(ket: str) -> List[List[str]]:
    """Split "(g+e)g" into [["g", "e"], ["g"]]."""
    terms = []
    chars = ket.replace(" ", "")
    pos = 0
    while pos < len(chars):
        c = chars[pos]
        if c == "(":
            end = chars.find(")", pos)
            if end == -1:
                raise ValueError(f"Unbalanced parenthesis in ket string {ket!r}")
            group = chars[pos + 1:end].split("+")
            if any(len(atom) != 1 for atom in group):
                raise ValueError(f"Malformed superposition {chars[pos:end + 1]!r} in {ket!r}")
            terms.append(group)
            pos = end + 1
        elif c == ")" or c == "+":
            raise ValueError(f"Unexpected {c!r} in ket string {ket!r}")
        else:
            terms.append([c])
            pos += 1
    return terms


def ket_from_string(
    ket: str,
    levels: Union[int, Sequence[int]],
    level_dict: Optional[Dict[str, int]] = None,
) -> Qobj:
    """
    Build a (product) ket from atomic notation.

    Parameters
    ----------
    ket : str
        One atom per subsystem, e.g. "ge" or "(g+e)g".
    levels : int or sequence of int
        Level count of each subsystem.
    level_dict : dict, optional
        Letter → level map. Defaults to `ATOMIC_LEVELS`.

    Returns
    -------
    Qobj
        Normalised ket with ``dims = [levels, [1, ...]]``.

    Examples
    --------
    >>> ket_from_string("g", [2]).full().ravel()
    array([1.+0.j, 0.+0.j])
    """
    level_dict = level_dict or ATOMIC_LEVELS
    levels = normalize_levels(levels)
    terms = _parse_atomic_string(ket)

    if len(terms) != len(levels):
        raise DimensionMismatch(
            f"Ket string {ket!r} describes {len(terms)} subsystems, "
            f"but {len(levels)} level counts were given"
        )

    parts = []
    for subsystem, (atoms, dim) in enumerate(zip(terms, levels)):
        states = []
        for atom in atoms:
            if atom not in level_dict:
                raise ValueError(f"Unknown atomic level {atom!r} in {ket!r}")
            level = level_dict[atom]
            if level >= dim:
                raise ValueError(
                    f"Level {atom!r} ({level}) does not exist in subsystem "
                    f"{subsystem} with {dim} levels"
                )
            states.append(basis(dim, level))
        parts.append(reduce(lambda a, b: a + b, states).unit())

    return _tensor(parts)


def ket_from_bitstring(bitstring: str) -> Qobj:
    """
    Qubit ket from a bitstring, first character = first qubit.

    >>> ket_from_bitstring("01").full().ravel().real
    array([0., 1., 0., 0.])
    """
    if not bitstring:
        raise ValueError("Bitstring is empty")
    parts = []
    for c in bitstring:
        if c not in "01":
            raise ValueError(f"Invalid bit {c!r} in bitstring {bitstring!r}")
        parts.append(basis(2, int(c)))
    return _tensor(parts)


def operator_from_string(operator: str) -> Qobj:
    """
    Tensor product of Pauli operators, e.g. "XZ" → X ⊗ Z.

    Only labels in `PAULIS` are accepted.
    """
    if not operator:
        raise ValueError("Operator string is empty")
    parts = []
    for c in operator:
        if c not in PAULIS:
            raise ValueError(
                f"Unknown operator {c!r} in {operator!r}; expected one of {sorted(PAULIS)}"
            )
        parts.append(PAULIS[c])
    return _tensor(parts)


def _check_levels(levels: int) -> int:
    (levels,) = normalize_levels(levels)
    if levels < 2:
        raise InvalidLevels(f"Ladder operators need at least 2 levels, got {levels}")
    return levels


def annihilate(levels: int) -> Qobj:
    """
    Truncated annihilation operator a = Σₙ √n |n-1⟩⟨n|.
    """
    return _qutip_destroy(_check_levels(levels))


def create(levels: int) -> Qobj:
    """Truncated creation operator a† (adjoint of `annihilate`)."""
    return _qutip_create(_check_levels(levels))
