from collections.abc import Sequence
from typing import Generic, TypeVar

import attr

K = TypeVar("K")
V = TypeVar("V")


@attr.frozen
class Entry(Generic[K, V]):
    """A single key/value pair held by an associative array.

    Entries are immutable; updating the value of a stored key replaces the
    entry in its slot with an evolved copy."""

    key: K
    value: V

    def __iter__(self):
        yield self.key
        yield self.value

    def __str__(self):
        return f"{self.key}:{self.value}"

    def with_value(self, value: V) -> "Entry[K, V]":
        return attr.evolve(self, value=value)

    @staticmethod
    def of(k: K, v: V) -> "Entry[K, V]":
        return Entry(k, v)

    @staticmethod
    def from_pair(pair: Sequence) -> "Entry":
        try:
            if not len(pair) == 2:
                raise ValueError("Sequence arg to entry must be a pair")
        except TypeError as e:
            raise TypeError(f"Cannot make entry from {type(pair)}") from e

        k, v = pair
        return Entry(k, v)
