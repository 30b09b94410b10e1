import copy
import logging
from collections.abc import Iterable, Iterator
from typing import Generic, Optional, TypeVar, Union

from pyrsistent import PVector, pvector

from assocarray.entry import Entry
from assocarray.exception import KeyNotFoundError, NullKeyError
from assocarray.logconfig import TRACE
from assocarray.util import partition

K = TypeVar("K")
V = TypeVar("V")

DEFAULT_CAPACITY = 16

logger = logging.getLogger(__name__)


class AssociativeArray(Generic[K, V]):
    """An associative array backed by a single growable list of entries.

    Lookups are linear scans comparing keys by equality, so every operation
    is O(n) in the number of stored entries. Slots `[0, size)` of the backing
    store hold entries in insertion order; slots `[size, capacity)` are
    `None`. Removing an entry shifts every later entry left by one, so the
    relative order of the remaining keys never changes.

    `None` is never accepted as a key. `set` and `get` raise `NullKeyError`
    when given one, while `has_key` and `remove` quietly treat it as absent.

    Instances are not safe for concurrent mutation; callers must serialize
    access themselves."""

    __slots__ = ("_pairs", "_size")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"Capacity must be a positive integer, got {capacity}")
        self._pairs: list[Optional[Entry[K, V]]] = [None] * capacity
        self._size = 0

    def __bool__(self):
        return self._size > 0

    def __contains__(self, key):
        return self.has_key(key)

    def __copy__(self) -> "AssociativeArray[K, V]":
        new_arr: AssociativeArray[K, V] = AssociativeArray(capacity=self.capacity)
        new_arr._pairs[: self._size] = self._pairs[: self._size]
        new_arr._size = self._size
        return new_arr

    def __deepcopy__(self, memo) -> "AssociativeArray[K, V]":
        new_arr: AssociativeArray[K, V] = AssociativeArray(capacity=self.capacity)
        memo[id(self)] = new_arr
        for i in range(self._size):
            entry = self._pairs[i]
            assert entry is not None
            new_arr._pairs[i] = Entry(
                copy.deepcopy(entry.key, memo), copy.deepcopy(entry.value, memo)
            )
        new_arr._size = self._size
        return new_arr

    def __delitem__(self, key):
        self._remove_at(self._find(key))

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, AssociativeArray):
            return NotImplemented
        if self._size != other._size:
            return False
        return all(
            self._pairs[i] == other._pairs[i] for i in range(self._size)
        )

    def __getitem__(self, key):
        return self.get(key)

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __len__(self):
        return self._size

    def __repr__(self):
        kvs = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"AssociativeArray({{{kvs}}})"

    def __setitem__(self, key, value):
        self.set(key, value)

    def __str__(self):
        return "{" + ", ".join(str(entry) for entry in self._live()) + "}"

    def _live(self) -> Iterator[Entry[K, V]]:
        for i in range(self._size):
            entry = self._pairs[i]
            assert entry is not None
            yield entry

    def _index_of(self, key: K) -> int:
        """Return the index of the entry whose key equals `key`, or -1."""
        for i, entry in enumerate(self._live()):
            if entry.key == key:
                return i
        return -1

    def _find(self, key: K) -> int:
        if key is None:
            raise NullKeyError()
        i = self._index_of(key)
        if i < 0:
            raise KeyNotFoundError.for_key(key)
        return i

    def _expand(self) -> None:
        old_capacity = len(self._pairs)
        self._pairs.extend([None] * old_capacity)
        logger.debug(
            "Expanded backing store from %d to %d slots", old_capacity, len(self._pairs)
        )

    def _remove_at(self, i: int) -> None:
        self._pairs[i : self._size - 1] = self._pairs[i + 1 : self._size]
        self._size -= 1
        self._pairs[self._size] = None

    @property
    def capacity(self) -> int:
        return len(self._pairs)

    def clone(self) -> "AssociativeArray[K, V]":
        """Return an independent copy of this array.

        Keys and values are deep copied, so mutating a value held by the clone
        (or adding and removing its entries) is never visible from the
        original and vice versa.

        Values which cannot be deep copied (locks, open files and the like)
        cause a `TypeError`; the source array is left untouched. Use
        `copy.copy` to share such values between arrays instead."""
        return copy.deepcopy(self)

    def set(self, key: K, value: V) -> None:
        """Associate `value` with `key`.

        If an entry with an equal key already exists its value is replaced
        where it stands; otherwise a new entry is appended, doubling the
        backing store first if it is full."""
        if key is None:
            raise NullKeyError()

        i = self._index_of(key)
        if i >= 0:
            entry = self._pairs[i]
            assert entry is not None
            if logger.isEnabledFor(TRACE):
                logger.log(TRACE, "Updating value for key %r at index %d", key, i)
            self._pairs[i] = entry.with_value(value)
            return

        if logger.isEnabledFor(TRACE):
            logger.log(TRACE, "Appending key %r at index %d", key, self._size)
        if self._size >= len(self._pairs):
            self._expand()
        self._pairs[self._size] = Entry(key, value)
        self._size += 1

    def get(self, key: K) -> V:
        """Return the value associated with `key`.

        Raise `NullKeyError` if `key` is `None` and `KeyNotFoundError` if no
        entry has a key equal to `key`."""
        entry = self._pairs[self._find(key)]
        assert entry is not None
        return entry.value

    def has_key(self, key: Optional[K]) -> bool:
        if key is None:
            return False
        return self._index_of(key) >= 0

    def remove(self, key: Optional[K]) -> None:
        """Remove the entry for `key`, if there is one.

        Later entries are shifted left to close the gap. Removing `None` or a
        key which is not present does nothing."""
        if key is None:
            return
        i = self._index_of(key)
        if i < 0:
            return
        if logger.isEnabledFor(TRACE):
            logger.log(TRACE, "Removing key %r from index %d", key, i)
        self._remove_at(i)

    def size(self) -> int:
        return self._size

    def keys(self) -> Iterator[K]:
        for entry in self._live():
            yield entry.key

    def values(self) -> Iterator[V]:
        for entry in self._live():
            yield entry.value

    def items(self) -> Iterator[tuple[K, V]]:
        for entry in self._live():
            yield entry.key, entry.value

    def entries(self) -> PVector:
        """Return an immutable snapshot of the stored entries in order."""
        return pvector(self._live())


def associative_array(*kvs) -> AssociativeArray:
    """Create a new associative array from alternating keys and values."""
    if len(kvs) % 2 != 0:
        raise ValueError("associative_array requires an even number of arguments")
    arr: AssociativeArray = AssociativeArray()
    for k, v in partition(kvs, 2):
        arr.set(k, v)
    return arr


def from_entries(
    entries: Iterable[Union[Entry[K, V], tuple[K, V]]]
) -> AssociativeArray[K, V]:
    """Create a new associative array from `Entry` records or key/value pairs.

    Later entries for an equal key replace the values of earlier ones."""
    arr: AssociativeArray[K, V] = AssociativeArray()
    for entry in entries:
        if not isinstance(entry, Entry):
            entry = Entry.from_pair(entry)
        arr.set(entry.key, entry.value)
    return arr
