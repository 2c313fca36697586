"""Length and count rules.

A ``LengthRule`` checks that the length of a value lies within ``[min, max]``.
A zero bound is inactive, except that ``min == max == 0`` requires the value
to be empty. ``None``, invalid nullable wrappers and empty values always pass;
requiring a value is the job of a separate rule.

A value is measured before the emptiness check, so scalars such as ``0`` or
``False`` raise ``UnsupportedTypeError`` rather than passing as empty.

Each failing ``validate`` call returns a fresh copy of the rule's error value,
so callers may raise or modify it without affecting the rule.
"""

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..config import settings
from . import constants as c
from .errors import ValidationError, new_error
from .values import indirect, length_of_value, string_length


class Measure(Enum):
    """How a rule measures strings."""

    BYTES = "bytes"
    RUNES = "runes"
    ELEMENTS = "elements"


_LENGTH_ERRORS = {
    "too_long": (c.LENGTH_TOO_LONG_CODE, c.LENGTH_TOO_LONG_MESSAGE),
    "too_short": (c.LENGTH_TOO_SHORT_CODE, c.LENGTH_TOO_SHORT_MESSAGE),
    "invalid": (c.LENGTH_INVALID_CODE, c.LENGTH_INVALID_MESSAGE),
    "out_of_range": (c.LENGTH_OUT_OF_RANGE_CODE, c.LENGTH_OUT_OF_RANGE_MESSAGE),
    "empty_required": (c.LENGTH_EMPTY_REQUIRED_CODE, c.EMPTY_REQUIRED_MESSAGE),
}

_COUNT_ERRORS = {
    "too_long": (c.COUNT_TOO_LONG_CODE, c.COUNT_TOO_LONG_MESSAGE),
    "too_short": (c.COUNT_TOO_SHORT_CODE, c.COUNT_TOO_SHORT_MESSAGE),
    "invalid": (c.COUNT_INVALID_CODE, c.COUNT_INVALID_MESSAGE),
    "out_of_range": (c.COUNT_OUT_OF_RANGE_CODE, c.COUNT_OUT_OF_RANGE_MESSAGE),
    "empty_required": (c.COUNT_EMPTY_REQUIRED_CODE, c.EMPTY_REQUIRED_MESSAGE),
}


def _bound_kind(min: int, max: int) -> str:
    if min == 0 and max == 0:
        return "empty_required"
    if max == 0:
        return "too_short"
    if min == 0:
        return "too_long"
    if min == max:
        return "invalid"
    return "out_of_range"


def _default_error(min: int, max: int, measure: Measure) -> ValidationError:
    errors = _COUNT_ERRORS if measure is Measure.ELEMENTS else _LENGTH_ERRORS
    code, message = errors[_bound_kind(min, max)]
    return new_error(code, message).with_params({"min": min, "max": max})


@dataclass(frozen=True)
class LengthRule:
    """Checks that a value's length lies within the configured bounds."""

    min: int
    max: int
    measure: Measure
    err: ValidationError
    encoding: str = settings.byte_encoding

    def validate(self, value: Any) -> ValidationError | None:
        """Check the length of a value.

        Args:
            value: A string, byte sequence, container, nullable wrapper or None

        Returns:
            A copy of the rule's error value if the length is out of bounds,
            else None

        Raises:
            UnsupportedTypeError: If the value has no notion of length
        """
        value, is_nil = indirect(value)
        if is_nil:
            return None

        if isinstance(value, str) and self.measure is Measure.RUNES:
            size = string_length(value, runes=True)
        else:
            size = length_of_value(value, encoding=self.encoding)

        if size == 0:
            return None
        if (
            (self.min > 0 and size < self.min)
            or (self.max > 0 and size > self.max)
            or (self.min == 0 and self.max == 0)
        ):
            return self.err.copy()
        return None

    def error(self, message: str) -> "LengthRule":
        """Return a copy of the rule that reports the given message verbatim."""
        return dataclasses.replace(
            self, err=self.err.with_message(message).with_params({})
        )

    def error_object(self, err: ValidationError) -> "LengthRule":
        """Return a copy of the rule that reports the given error value."""
        return dataclasses.replace(self, err=err.copy())


def _build(min: int, max: int, measure: Measure) -> LengthRule:
    if min < 0 or max < 0:
        raise ValueError(f"Length bounds cannot be negative (min={min}, max={max})")
    if max > 0 and min > max:
        raise ValueError(f"Minimum length {min} exceeds maximum length {max}")
    return LengthRule(
        min=min,
        max=max,
        measure=measure,
        err=_default_error(min, max, measure),
        encoding=settings.byte_encoding,
    )


def length(min: int, max: int) -> LengthRule:
    """Create a rule measuring strings by their encoded byte count.

    Byte sequences are measured by byte count and containers by element count.
    A zero ``max`` means no upper bound; ``length(0, 0)`` requires emptiness.
    """
    return _build(min, max, Measure.BYTES)


def rune_length(min: int, max: int) -> LengthRule:
    """Create a rule measuring strings by their character count."""
    return _build(min, max, Measure.RUNES)


def count(min: int, max: int) -> LengthRule:
    """Create a rule measuring the number of elements in a value.

    Strings are measured the same way as by ``length``.
    """
    return _build(min, max, Measure.ELEMENTS)
