"""Open-addressing hash table with Robin Hood probing and dense value storage."""

from __future__ import annotations

from bisect import bisect_left
from typing import Any, Callable, Hashable, Iterator, NamedTuple, Optional

TABLE_PROBE = 24
U32_MAX = 0xFFFFFFFF

# A table is not grown further once its capacity is this many times the
# number of entries: clustered hashes would not be spread out by growing.
_GROWTH_LIMIT = 16

_PRIMES: tuple[int, ...] = tuple(sorted((
    187091,
    1289, 28802401,
    149, 15173, 2320627, 357502601,
    53, 409, 4349, 53201, 658753, 8175383, 101473717, 1259520799,
    19, 89, 241, 709, 2357, 8123, 28411, 99733, 351061,
    1236397, 4355707, 15345007, 54061849, 190465427, 671030513, 2364114217,
    7, 37, 71, 113, 193, 313, 541, 953, 1741, 3209, 5953, 11113, 20753, 38873,
    72817, 136607, 256279, 480881, 902483, 1693859, 3179303, 5967347, 11200489,
    21023161, 39460231, 74066549, 139022417, 260944219, 489790921, 919334987,
    1725587117, 3238918481,
    3, 13, 29, 43, 61, 79, 103, 137, 167, 211, 277, 359, 467, 619, 823, 1109,
    1493, 2029, 2753, 3739, 5087, 6949, 9497, 12983, 17749, 24281, 33223, 45481,
    62233, 85229, 116731, 159871, 218971, 299951, 410857, 562841, 771049,
    1056323, 1447153, 1982627, 2716249, 3721303, 5098259, 6984629, 9569143,
    13109983, 17961079, 24607243, 33712729, 46187573, 63278561, 86693767,
    118773397, 162723577, 222936881, 305431229, 418451333, 573292817, 785430967,
    1076067617, 1474249943, 2019773507, 2767159799, 3791104843,
)))


def table_size(sz: int) -> int:
    """Return the smallest tabulated prime not below sz, or U32_MAX if none is."""
    index = bisect_left(_PRIMES, sz)
    return _PRIMES[index] if index < len(_PRIMES) else U32_MAX


def _default_hash(key: Hashable) -> int:
    return hash(key)


class _Entry(NamedTuple):
    hash: int
    key: Any
    dense: int


class Table:
    """Mapping whose values are stored densely, in insertion order; deleting
    an entry moves the last value into its place."""

    def __init__(self, size: int = 0, hasher: Optional[Callable[[Any], int]] = None):
        self._hasher = hasher or _default_hash
        self._reserve = table_size(max(size, 100))
        self._slots: list[Optional[_Entry]] = [None] * self._reserve
        self._values: list[Any] = []
        self._slot_of: list[int] = []
        self._max_probe = 0

    @property
    def capacity(self) -> int:
        """Number of slots in the key array."""
        return self._reserve

    def _hash(self, key: Any) -> int:
        result = self._hasher(key) & U32_MAX
        return result or 1

    def _place(self, entry: _Entry) -> int:
        """Insert an entry, displacing closer ones; return the longest probe used."""
        reserve = self._reserve
        index = entry.hash % reserve
        probe = 0
        worst = 0
        while True:
            current = self._slots[index]
            if current is None:
                self._slots[index] = entry
                self._slot_of[entry.dense] = index
                worst = max(worst, probe)
                break
            distance = (index - current.hash % reserve) % reserve
            if distance < probe:
                self._slots[index] = entry
                self._slot_of[entry.dense] = index
                worst = max(worst, probe)
                entry, probe = current, distance
            index = (index + 1) % reserve
            probe += 1
        self._max_probe = max(self._max_probe, worst)
        return worst

    def resize(self, size: int) -> None:
        """Rebuild the key array with at least size slots."""
        size = table_size(size)
        if size <= len(self._values):
            raise ValueError(f"table of {len(self._values)} entries cannot shrink to {size}")
        entries = [entry for entry in self._slots if entry is not None]
        self._reserve = size
        self._slots = [None] * size
        self._max_probe = 0
        for entry in entries:
            self._place(entry)

    def _find(self, key: Any) -> Optional[int]:
        h = self._hash(key)
        for offset in range(self._max_probe + 1):
            index = (h + offset) % self._reserve
            entry = self._slots[index]
            if entry is not None and entry.hash == h and entry.key == key:
                return index
        return None

    def has(self, key: Any) -> bool:
        return self._find(key) is not None

    def set(self, key: Any, value: Any) -> None:
        """Insert or replace the value stored under key."""
        index = self._find(key)
        if index is not None:
            self._values[self._slots[index].dense] = value
            return

        if self._reserve <= len(self._values):
            self.resize(self._reserve * 2)

        dense = len(self._values)
        self._values.append(value)
        self._slot_of.append(0)
        probe = self._place(_Entry(self._hash(key), key, dense))

        if probe >= TABLE_PROBE and self._reserve < _GROWTH_LIMIT * len(self._values):
            self.resize(self._reserve * 2)

    def get(self, key: Any) -> Any:
        """Return the value under key; raise KeyError if it is absent."""
        index = self._find(key)
        if index is None:
            raise KeyError(key)
        return self._values[self._slots[index].dense]

    def get_or_create(self, key: Any, default_factory: Callable[[], Any]) -> Any:
        """Return the value under key, storing default_factory() first if absent."""
        index = self._find(key)
        if index is not None:
            return self._values[self._slots[index].dense]
        value = default_factory()
        self.set(key, value)
        return value

    def delete(self, key: Any) -> None:
        """Remove key; raise KeyError if it is absent."""
        index = self._find(key)
        if index is None:
            raise KeyError(key)

        dense = self._slots[index].dense
        last = len(self._values) - 1
        if dense != last:
            self._values[dense] = self._values[last]
            moved_slot = self._slot_of[last]
            self._slot_of[dense] = moved_slot
            self._slots[moved_slot] = self._slots[moved_slot]._replace(dense=dense)
        self._values.pop()
        self._slot_of.pop()
        self._slots[index] = None

    def keys(self) -> Iterator[Any]:
        for slot in self._slot_of:
            yield self._slots[slot].key

    def values(self) -> Iterator[Any]:
        yield from self._values

    def items(self) -> Iterator[tuple[Any, Any]]:
        for slot, value in zip(self._slot_of, self._values):
            yield self._slots[slot].key, value

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return self.keys()

    def __getitem__(self, key: Any) -> Any:
        return self.get(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: Any) -> None:
        self.delete(key)