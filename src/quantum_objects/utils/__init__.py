# Utility Functions
#
# Common utilities used across the package.
#
# Submodules:
#   - math_utils: array coercion, composite dimensions

from .math_utils import (
    to_array,
    composite_dimension,
)

__all__ = [
    "to_array",
    "composite_dimension",
]
