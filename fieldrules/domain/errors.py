"""Error values returned by validation rules.

A rule reports bad input by returning a ``ValidationError`` rather than raising
it. The error pairs a stable machine-readable ``code`` with a human-readable
``message`` template; ``params`` are substituted into the template when the
error is rendered, so callers can localize by swapping the message and keeping
the params.
"""

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from .exceptions import DomainError


@dataclass(eq=True)
class ValidationError(DomainError):
    """Validation failure carrying a code, a message template and its params."""

    code: str
    message: str
    params: dict[str, Any] = field(default_factory=dict)

    def error(self) -> str:
        """Render the message with params substituted."""
        if not self.params:
            return self.message
        return self.message.format_map(self.params)

    def __str__(self) -> str:
        return self.error()

    def copy(self) -> "ValidationError":
        """Return an independent copy, free of any traceback."""
        return dataclasses.replace(self, params=dict(self.params))

    def with_code(self, code: str) -> "ValidationError":
        return dataclasses.replace(self, code=code)

    def with_message(self, message: str) -> "ValidationError":
        return dataclasses.replace(self, message=message)

    def with_params(self, params: dict[str, Any]) -> "ValidationError":
        return dataclasses.replace(self, params=dict(params))

    def add_param(self, name: str, value: Any) -> "ValidationError":
        return dataclasses.replace(self, params={**self.params, name: value})


def new_error(code: str, message: str) -> ValidationError:
    """Create an error value with the given code and message.

    Args:
        code: Stable identifier callers can branch on
        message: Message template, used verbatim when no params are set

    Returns:
        A new ValidationError without params
    """
    return ValidationError(code=code, message=message)
