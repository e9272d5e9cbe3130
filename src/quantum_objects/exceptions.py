"""
Error Types for Quantum Object Construction
============================================

All errors raised by this package derive from ``QuantumObjectsError``, which
is itself a ``ValueError``. Code that already guards calls with
``except ValueError`` keeps working; code that wants to distinguish the
failure mode can catch the specific subclass.

Error kinds
-----------
- InvalidLevels: a subsystem level count is not a positive integer
- InvalidSubspace: a requested level (or flat index) lies outside its range
- InvalidExcitationBound: negative or non-integer excitation number
- DimensionMismatch: number of per-subsystem subsets (or operator size)
  disagrees with the system structure

Every error is raised at the point of computation. There is no partial
result and no retry: the caller fixes the input and calls again.
"""


class QuantumObjectsError(ValueError):
    """Base class for all quantum_objects errors."""


class InvalidLevels(QuantumObjectsError):
    """A subsystem level count is not an integer >= 1."""


class InvalidSubspace(QuantumObjectsError):
    """A subspace level index is out of range, empty or not an integer."""


class InvalidExcitationBound(QuantumObjectsError):
    """The excitation-number bound for ENR indices is invalid."""


class DimensionMismatch(QuantumObjectsError):
    """Sequence lengths or operator shapes disagree with the system structure."""
