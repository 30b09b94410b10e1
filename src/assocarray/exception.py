from typing import Any

import attr


class AssociativeArrayError(Exception):
    """Base class for errors raised by an associative array."""


@attr.define(str=False)
class NullKeyError(AssociativeArrayError):
    """Raised when `None` is supplied as a key to an operation which requires
    a real key (`set` and `get`)."""

    message: str = "Key cannot be None"

    def __str__(self):
        return self.message


@attr.define(str=False)
class KeyNotFoundError(AssociativeArrayError, KeyError):
    """Raised when a lookup finds no entry with a key equal to `key`.

    This is also a `KeyError`, so code written against the Python mapping
    protocol can catch it as usual."""

    message: str
    key: Any = None

    @classmethod
    def for_key(cls, key: Any) -> "KeyNotFoundError":
        return cls(f"Key not found: {key}", key)

    def __str__(self):
        return self.message
