from assocarray.array import (
    DEFAULT_CAPACITY,
    AssociativeArray,
    associative_array,
    from_entries,
)
from assocarray.entry import Entry
from assocarray.exception import AssociativeArrayError, KeyNotFoundError, NullKeyError

__all__ = [
    "DEFAULT_CAPACITY",
    "AssociativeArray",
    "AssociativeArrayError",
    "Entry",
    "KeyNotFoundError",
    "NullKeyError",
    "associative_array",
    "from_entries",
]
