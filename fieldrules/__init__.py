"""Length and count validation rules."""

from .application.validation import Rule, ensure_valid, validate
from .domain.errors import ValidationError, new_error
from .domain.exceptions import DomainError, InternalError, UnsupportedTypeError
from .domain.length import LengthRule, Measure, count, length, rune_length
from .domain.values import Nullable, NullString, indirect, length_of_value

__all__ = [
    "DomainError",
    "InternalError",
    "LengthRule",
    "Measure",
    "NullString",
    "Nullable",
    "Rule",
    "UnsupportedTypeError",
    "ValidationError",
    "count",
    "ensure_valid",
    "indirect",
    "length",
    "length_of_value",
    "new_error",
    "rune_length",
    "validate",
]
