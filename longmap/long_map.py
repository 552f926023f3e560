"""
A hash map from signed 64-bit integer keys to arbitrary values.

Collisions are resolved by chaining: every bucket holds the head of a singly
linked list of entries. The bucket array doubles once the number of entries
exceeds ``capacity * load_factor`` and every entry is rehashed into the new
array before ``put`` returns. Removal never shrinks the table.
"""

import math
import operator
from numbers import Real
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

from longmap.errors import InvalidCapacity, InvalidLoadFactor
from longmap.logger.log_types import LogEvent
from longmap.logger.logger import log_error_event, log_map_event, log_resize_event

V = TypeVar("V")

DEFAULT_INITIAL_CAPACITY = 16
MAXIMUM_CAPACITY = 1 << 30
DEFAULT_LOAD_FACTOR = 0.85

MIN_KEY = -(1 << 63)
MAX_KEY = (1 << 63) - 1


class _Entry(Generic[V]):
    __slots__ = ("key", "value", "next")

    def __init__(self, key: int, value: V):
        self.key = key
        self.value = value
        self.next: Optional[_Entry[V]] = None

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


def _check_key(key) -> int:
    key = int(operator.index(key))
    if not MIN_KEY <= key <= MAX_KEY:
        raise OverflowError(f"key {key} is outside the signed 64-bit range")
    return key


def _check_capacity(initial_capacity) -> int:
    if isinstance(initial_capacity, bool) or not isinstance(initial_capacity, int):
        error = f"initial_capacity must be an int, got {initial_capacity!r}"
        log_error_event(LogEvent.INVALID_ARGUMENT, error)
        raise InvalidCapacity(error)
    if initial_capacity <= 0:
        error = f"initial_capacity must be positive, got {initial_capacity}"
        log_error_event(LogEvent.INVALID_ARGUMENT, error)
        raise InvalidCapacity(error)
    return min(initial_capacity, MAXIMUM_CAPACITY)


def _check_load_factor(load_factor) -> float:
    if isinstance(load_factor, bool) or not isinstance(load_factor, Real):
        error = f"load_factor must be a real number, got {load_factor!r}"
        log_error_event(LogEvent.INVALID_ARGUMENT, error)
        raise InvalidLoadFactor(error)
    try:
        value = float(load_factor)
    except OverflowError:
        # integers beyond float range
        value = math.inf if load_factor > 0 else -math.inf
    if math.isnan(value) or value <= 0:
        error = f"load_factor must be positive, got {load_factor}"
        log_error_event(LogEvent.INVALID_ARGUMENT, error)
        raise InvalidLoadFactor(error)
    return value


class LongMap(Generic[V]):
    """
    Chained hash table keyed by signed 64-bit integers.

    Values may be anything, ``None`` included. Because a stored ``None`` and a
    missing key look the same through ``get``, use ``contains_key`` (or pass a
    sentinel ``default``) when the difference matters.

    Instances are not thread-safe. Calling into the same map from several
    threads at once is unsupported and no locking is attempted.
    """

    def __init__(
        self,
        initial_capacity: int = DEFAULT_INITIAL_CAPACITY,
        load_factor: float = DEFAULT_LOAD_FACTOR,
    ) -> None:
        capacity = _check_capacity(initial_capacity)
        self._load_factor = _check_load_factor(load_factor)
        self._size = 0
        self._entries: List[Optional[_Entry[V]]] = [None] * capacity
        self._threshold = capacity * self._load_factor
        log_map_event(LogEvent.MAP_CREATED, capacity, 0)

    @classmethod
    def from_map(cls, another_map) -> "LongMap[V]":
        """
        Build a new map holding every pair of *another_map*.

        *another_map* may be ``None`` (giving an empty map), another
        ``LongMap`` or any sized object exposing ``keys()`` and ``get()``,
        such as a ``dict`` with integer keys.
        """
        if another_map is None:
            new_map = cls()
        else:
            new_map = cls(max(len(another_map), DEFAULT_INITIAL_CAPACITY))
            for key in another_map.keys():
                new_map.put(key, another_map.get(key))
        log_map_event(LogEvent.MAP_COPIED, new_map.capacity, new_map._size)
        return new_map

    @property
    def capacity(self) -> int:
        return len(self._entries)

    @property
    def load_factor(self) -> float:
        return self._load_factor

    @property
    def threshold(self) -> float:
        return self._threshold

    def _index(self, key: int) -> int:
        # abs() of MIN_KEY is 2**63, Python ints don't wrap
        return abs(key) % len(self._entries)

    def _find(self, key: int) -> Optional[_Entry[V]]:
        entry = self._entries[self._index(key)]
        while entry is not None:
            if entry.key == key:
                return entry
            entry = entry.next
        return None

    def _iter_entries(self) -> Iterator[_Entry[V]]:
        for head in self._entries:
            entry = head
            while entry is not None:
                yield entry
                entry = entry.next

    def put(self, key: int, value: V) -> V:
        """Store *value* under *key* and return *value*."""
        key = _check_key(key)
        idx = self._index(key)
        entry = self._entries[idx]

        if entry is None:
            self._entries[idx] = _Entry(key, value)
        else:
            while True:
                if entry.key == key:
                    entry.value = value
                    return value
                if entry.next is None:
                    break
                entry = entry.next
            entry.next = _Entry(key, value)

        self._size += 1
        self._resize_if_needed()
        return value

    def get(self, key: int, default: Optional[V] = None) -> Optional[V]:
        entry = self._find(_check_key(key))
        if entry is None:
            return default
        return entry.value

    def remove(self, key: int, default: Optional[V] = None) -> Optional[V]:
        """Unlink the entry for *key* and return its value, or *default*."""
        key = _check_key(key)
        idx = self._index(key)
        entry = self._entries[idx]
        previous = None
        while entry is not None:
            if entry.key == key:
                if previous is not None:
                    previous.next = entry.next
                else:
                    self._entries[idx] = entry.next
                entry.next = None
                self._size -= 1
                return entry.value
            previous = entry
            entry = entry.next
        return default

    def contains_key(self, key: int) -> bool:
        return self._find(_check_key(key)) is not None

    def contains_value(self, value) -> bool:
        # identity first, so None and NaN are found like any other value
        for entry in self._iter_entries():
            if entry.value is value or entry.value == value:
                return True
        return False

    def keys(self) -> List[int]:
        """Snapshot of all keys in bucket order; sort it if order matters."""
        return [entry.key for entry in self._iter_entries()]

    def values(self) -> List[V]:
        """Snapshot of all values, in the same order as ``keys()``."""
        return [entry.value for entry in self._iter_entries()]

    def items(self) -> List[Tuple[int, V]]:
        return [(entry.key, entry.value) for entry in self._iter_entries()]

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        """Drop every entry and go back to the default capacity."""
        self._size = 0
        self._entries = [None] * DEFAULT_INITIAL_CAPACITY
        self._threshold = DEFAULT_INITIAL_CAPACITY * self._load_factor
        log_map_event(LogEvent.MAP_CLEARED, DEFAULT_INITIAL_CAPACITY, 0)

    def _resize_if_needed(self) -> None:
        old_capacity = len(self._entries)
        if self._size <= self._threshold or old_capacity >= MAXIMUM_CAPACITY:
            return

        new_capacity = min(old_capacity * 2, MAXIMUM_CAPACITY)
        old_entries = self._entries
        self._entries = [None] * new_capacity
        self._threshold = new_capacity * self._load_factor

        for head in old_entries:
            entry = head
            while entry is not None:
                following = entry.next
                idx = self._index(entry.key)
                entry.next = self._entries[idx]
                self._entries[idx] = entry
                entry = following

        log_resize_event(old_capacity, new_capacity, self._size, self._threshold)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key) -> bool:
        return self.contains_key(key)

    def __getitem__(self, key: int) -> V:
        entry = self._find(_check_key(key))
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key: int, value: V) -> None:
        self.put(key, value)

    def __delitem__(self, key: int) -> None:
        key = _check_key(key)
        if self._find(key) is None:
            raise KeyError(key)
        self.remove(key)

    def __iter__(self) -> Iterator[int]:
        return iter(self.keys())

    def __str__(self) -> str:
        return "[" + ",".join(str(entry) for entry in self._iter_entries()) + "]"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} size={self._size} capacity={self.capacity}>"
