# Mathematical Utilities
#
# Small helpers shared by the isomorphism, embedding and builder modules.
#
# Functions:
#   - to_array: coerce Qobj / sparse / array-like input to a dense ndarray
#   - composite_dimension: total dimension of a composite system

from typing import Sequence, Union

import numpy as np
import scipy.sparse as sp
from qutip import Qobj


def to_array(obj, dtype=complex) -> np.ndarray:
    """
    Return ``obj`` as a dense numpy array.

    Accepts ``qutip.Qobj``, any ``scipy.sparse`` matrix, or anything
    ``np.asarray`` understands.
    """
    if isinstance(obj, Qobj):
        return np.asarray(obj.full(), dtype=dtype)
    if sp.issparse(obj):
        return np.asarray(obj.toarray(), dtype=dtype)
    return np.asarray(obj, dtype=dtype)


def composite_dimension(levels: Union[int, Sequence[int]]) -> int:
    """Product of subsystem level counts (an int is a single subsystem)."""
    if isinstance(levels, (int, np.integer)):
        return int(levels)
    return int(np.prod([int(l) for l in levels], dtype=np.int64))
