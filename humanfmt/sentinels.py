"""
UNSET marks a merge() argument that was not passed.

Formatter merge() methods default every field to UNSET, so `merge(precision=None)` resets
precision to its default while `merge()` keeps the current value:

    >>> Bytes.si(4096, precision=1).merge().precision
    1
    >>> Bytes.si(4096, precision=1).merge(precision=None).precision is None
    True
"""

# Standard library -----------------------------------------------------------------------------------------------------
from enum import Enum
from typing import Final


class UnsetType(Enum):
    """Single-member enum, so UNSET survives pickling and copying as the same object."""
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "<UNSET>"

    def __bool__(self) -> bool:
        return False


UNSET: Final = UnsetType.UNSET
