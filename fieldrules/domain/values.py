"""Measuring values of arbitrary shape.

Rules accept whatever the caller hands them. Before measuring, a value goes
through ``indirect``, which strips nullable wrappers and reports whether
anything is left to measure. ``length_of_value`` then dispatches on a closed
set of measurable categories:

- text (``str``)
- binary (``bytes``, ``bytearray``, ``memoryview``)
- containers (``Sequence``, ``Mapping``, ``Set``)

Anything else raises ``UnsupportedTypeError``.
"""

from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from ..constants import DEFAULT_BYTE_ENCODING
from .exceptions import UnsupportedTypeError

# Wrappers nested deeper than this are measured as-is
MAX_UNWRAP_DEPTH = 2


@runtime_checkable
class Nullable(Protocol):
    """A value paired with a validity flag, e.g. a database NULL-able column."""

    valid: bool

    def unwrap(self) -> Any: ...


@dataclass(frozen=True)
class NullString:
    """A string that may be NULL."""

    string: str = ""
    valid: bool = False

    def unwrap(self) -> str:
        return self.string


def indirect(value: Any) -> tuple[Any, bool]:
    """Strip nullable wrappers from a value.

    Args:
        value: Any value handed to a rule

    Returns:
        The unwrapped value and whether it is nil-like (``None`` or an
        invalid wrapper)
    """
    for _ in range(MAX_UNWRAP_DEPTH):
        if value is None:
            return None, True
        if not isinstance(value, Nullable):
            return value, False
        if not value.valid:
            return None, True
        value = value.unwrap()
    return value, value is None


def string_length(
    value: str, *, runes: bool = False, encoding: str = DEFAULT_BYTE_ENCODING
) -> int:
    """Count the characters or encoded bytes of a string.

    Characters the encoding cannot represent count as one replacement byte
    sequence each (``?`` for most single-byte codecs).
    """
    if runes:
        return len(value)
    return len(value.encode(encoding, errors="replace"))


def length_of_value(value: Any, *, encoding: str = DEFAULT_BYTE_ENCODING) -> int:
    """Get the length of a string, byte sequence or container.

    Strings are measured by their encoded byte count.

    Raises:
        UnsupportedTypeError: If the value has no notion of length
    """
    if isinstance(value, str):
        return string_length(value, encoding=encoding)
    if isinstance(value, memoryview):
        return value.nbytes
    if isinstance(value, (bytes, bytearray, Sequence, Mapping, Set)):
        return len(value)
    raise UnsupportedTypeError(type(value))
