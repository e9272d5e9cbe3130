"""
Configuration Dataclasses for Subspace Selection
=================================================

Functions that compute subspace indices need to know which levels of each
subsystem form the computational subspace when the caller does not say.
Rather than hard-coding "the lowest two levels" inside every function, the
default is held in a small configuration object that is passed around
explicitly.

WHY A CONFIG OBJECT?
--------------------

Most users work with qubits encoded in the two lowest levels of a
multilevel system (transmons, atoms with a Rydberg level, oscillators).
Some encode qutrits, or use the levels {1, 2} of a three-level system.
A config lets that choice be made once:

    >>> cfg = get_qutrit_config()
    >>> get_subspace_indices([4, 4], config=cfg)
    [0, 1, 2, 4, 5, 6, 8, 9, 10]

PRESET CONFIGURATIONS
---------------------

- `get_qubit_config()`: lowest two levels (the default)
- `get_qutrit_config()`: lowest three levels
"""

from dataclasses import dataclass, field
from typing import Sequence


@dataclass(frozen=True)
class SubspaceConfig:
    """
    Default-construction policy for subspaces.

    Attributes
    ----------
    default_subspace : Sequence[int]
        Levels (0-based) taken for every subsystem when no subspace is given.
        Default: ``range(2)``, i.e. a qubit in the two lowest levels.

    warn_on_duplicates : bool
        Emit a ``UserWarning`` when a subset lists the same level twice.
        Duplicates are always collapsed; this only controls the warning.
    """
    default_subspace: Sequence[int] = field(default_factory=lambda: range(2))
    warn_on_duplicates: bool = True


DEFAULT_CONFIG = SubspaceConfig()


def get_qubit_config() -> SubspaceConfig:
    """Qubit subspace: levels {0, 1} of each subsystem."""
    return SubspaceConfig(default_subspace=range(2))


def get_qutrit_config() -> SubspaceConfig:
    """Qutrit subspace: levels {0, 1, 2} of each subsystem."""
    return SubspaceConfig(default_subspace=range(3))
