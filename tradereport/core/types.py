"""Core container type: FrozenMap, an immutable key-sorted mapping.

Both reports are nested FrozenMaps, so their iteration order is a property of
the value itself rather than of how it was built.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar, final

K = TypeVar("K")
V = TypeVar("V")


@final
@dataclass(frozen=True, slots=True)
class FrozenMap(Generic[K, V]):
    """Immutable mapping whose entries are stored sorted by key.

    Guarantees (a) immutability, (b) deterministic ascending iteration,
    (c) structural equality between maps built in different orders.
    """

    _entries: tuple[tuple[K, V], ...]

    @staticmethod
    def sorted_from(items: dict[K, V] | Iterable[tuple[K, V]]) -> FrozenMap[K, V]:
        """Build from a dict or (key, value) pairs; the last duplicate wins.

        Keys must be of one comparable type (dates, codes); TypeError otherwise.
        """
        d = items if isinstance(items, dict) else dict(items)
        return FrozenMap(_entries=tuple(sorted(d.items(), key=lambda kv: kv[0])))

    def __getitem__(self, key: K) -> V:
        for k, v in self._entries:
            if k == key:
                return v
        raise KeyError(key)

    def __iter__(self) -> Iterator[K]:
        return (k for k, _ in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def values(self) -> tuple[V, ...]:
        return tuple(v for _, v in self._entries)

    def items(self) -> tuple[tuple[K, V], ...]:
        """Return the sorted (key, value) entries."""
        return self._entries

    def to_dict(self) -> dict[K, V]:
        """Convert to a regular dict (insertion order == key order)."""
        return dict(self._entries)

