"""Generic helpers on mappings and sequences, and thread-safe containers."""

from __future__ import annotations

import threading
from typing import Callable, Generic, Hashable, Iterable, Mapping, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
T = TypeVar("T")


def map_keys(m: Mapping[K, V]) -> list[K]:
    """Return the keys of a mapping."""
    return list(m)


def map_keys_sorted(m: Mapping[K, V]) -> list[K]:
    """Return the keys of a mapping in ascending order."""
    return sorted(m)


def map_filter_keys(m: Mapping[K, V], f: Callable[[V], bool]) -> list[K]:
    """Return the keys whose value satisfies f."""
    return [k for k, v in m.items() if f(v)]


def delete_item(s: Iterable[T], item: T) -> list[T]:
    """Return a new list without any occurrence of item."""
    return [x for x in s if x != item]


def filter_items(s: Iterable[T], f: Callable[[T], bool]) -> list[T]:
    """Return the items that satisfy f, in order."""
    return [x for x in s if f(x)]


class SyncMap(Generic[K, V]):
    """A mapping safe to share between threads."""

    def __init__(self) -> None:
        self._m: dict[K, V] = {}
        self._lock = threading.Lock()

    def clear(self) -> None:
        with self._lock:
            self._m.clear()

    def compare_and_delete(self, key: K, old: V) -> bool:
        """Delete the entry for key when its value equals old."""
        with self._lock:
            if key in self._m and self._m[key] == old:
                del self._m[key]
                return True
            return False

    def compare_and_swap(self, key: K, old: V, new: V) -> bool:
        """Replace the value for key by new when it equals old."""
        with self._lock:
            if key in self._m and self._m[key] == old:
                self._m[key] = new
                return True
            return False

    def delete(self, key: K) -> None:
        with self._lock:
            self._m.pop(key, None)

    def load(self, key: K) -> tuple[V | None, bool]:
        """Return (value, True) when present, else (None, False)."""
        with self._lock:
            if key in self._m:
                return self._m[key], True
            return None, False

    def load_and_delete(self, key: K) -> tuple[V | None, bool]:
        """Remove the entry, returning its previous value and whether it existed."""
        with self._lock:
            if key in self._m:
                return self._m.pop(key), True
            return None, False

    def load_or_store(self, key: K, value: V) -> tuple[V, bool]:
        """Return the existing value and True, or store value and return it with False."""
        with self._lock:
            if key in self._m:
                return self._m[key], True
            self._m[key] = value
            return value, False

    def range(self, f: Callable[[K, V], bool | None]) -> None:
        """Call f for each entry; stop when f returns False."""
        with self._lock:
            snapshot = list(self._m.items())
        for k, v in snapshot:
            if f(k, v) is False:
                break

    def store(self, key: K, value: V) -> None:
        with self._lock:
            self._m[key] = value

    def swap(self, key: K, value: V) -> tuple[V | None, bool]:
        """Store value, returning the previous value and whether there was one."""
        with self._lock:
            loaded = key in self._m
            previous = self._m.get(key)
            self._m[key] = value
            return previous, loaded

    def keys(self) -> list[K]:
        with self._lock:
            return list(self._m)

    def values(self) -> list[V]:
        with self._lock:
            return list(self._m.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._m)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._m


class SyncSet(Generic[T]):
    """A set safe to share between threads."""

    def __init__(self, *items: T) -> None:
        self._s: set[T] = set()
        self._lock = threading.Lock()
        for item in items:
            self.add(item)

    def add(self, item: T) -> bool:
        """Add an item; return False when it was already present."""
        with self._lock:
            if item in self._s:
                return False
            self._s.add(item)
            return True

    def remove(self, item: T) -> None:
        """Remove an item when present."""
        with self._lock:
            self._s.discard(item)

    def contains(self, item: T) -> bool:
        with self._lock:
            return item in self._s

    def items(self) -> list[T]:
        with self._lock:
            return list(self._s)

    def range(self, fn: Callable[[T], object]) -> None:
        """Call fn for each item."""
        for item in self.items():
            fn(item)

    def __len__(self) -> int:
        with self._lock:
            return len(self._s)

    def __contains__(self, item: object) -> bool:
        with self._lock:
            return item in self._s