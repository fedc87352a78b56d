#
# Humanfmt Lookup Tables
#

# Standard library -----------------------------------------------------------------------------------------------------
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Generic, TypeVar

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_value

K = TypeVar("K")
V = TypeVar("V")


# Classes --------------------------------------------------------------------------------------------------------------

class BiDirectionalMap(Mapping[K, V], Generic[K, V]):
    """
    Read-only one-to-one table, e.g. SI exponent <-> prefix symbol.

    The forward direction is a regular Mapping, iterated in insertion order; `x in table`
    tests keys. The reverse direction is served by get_key().

        >>> table = BiDirectionalMap({3: "k", 6: "M"})
        >>> table[6], table.get_key("k")
        ('M', 3)

    Raises:
        ValueError: If a key or a value occurs twice.
    """

    __slots__ = ("_forward", "_inverse")

    def __init__(self, pairs: Mapping[K, V] | Iterable[tuple[K, V]] = ()) -> None:
        forward: dict[K, V] = {}
        inverse: dict[V, K] = {}
        for key, value in (pairs.items() if isinstance(pairs, Mapping) else pairs):
            if key in forward:
                raise ValueError(f"key {fmt_value(key)} already exists")
            if value in inverse:
                raise ValueError(f"value {fmt_value(value)} already exists for key {fmt_value(inverse[value])}")
            forward[key] = value
            inverse[value] = key
        object.__setattr__(self, "_forward", frozendict(forward))
        object.__setattr__(self, "_inverse", frozendict(inverse))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __getitem__(self, key: K) -> V:
        return self._forward[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._forward)

    def __len__(self) -> int:
        return len(self._forward)

    def get_key(self, value: V) -> K:
        return self._inverse[value]

    def __hash__(self) -> int:
        return hash(self._forward)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._forward)!r})"
