"""Domain-specific exceptions."""

from .constants import UNSUPPORTED_TYPE_MESSAGE


class DomainError(Exception):
    """Base exception for domain errors."""

    pass


class InternalError(DomainError):
    """Raised when a rule is misused, as opposed to receiving bad input."""

    pass


class UnsupportedTypeError(InternalError):
    """Raised when a value's type has no notion of length."""

    def __init__(self, value_type: type):
        self.value_type = value_type
        super().__init__(
            UNSUPPORTED_TYPE_MESSAGE.format(type_name=value_type.__name__)
        )
