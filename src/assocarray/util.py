from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def partition(coll: Sequence[T], n: int) -> Iterable[tuple[T, ...]]:
    """Partition `coll` into groups of size `n`. The final group holds the
    remainder and may be shorter than `n`."""
    assert n > 0
    start = 0
    stop = n
    while stop <= len(coll):
        yield tuple(coll[start:stop])
        start += n
        stop += n
    if start < len(coll) < stop:
        yield tuple(coll[start:])
