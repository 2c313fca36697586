"""Running rules against a value.

Rules themselves never log; this module is where outcomes are recorded so
monitoring sees every rejected value in one place.
"""

from typing import Any, Final, Protocol

from ..domain.errors import ValidationError
from ..domain.exceptions import InternalError
from ..logging_config import get_logger

logger: Final = get_logger(__name__)


class Rule(Protocol):
    def validate(self, value: Any) -> ValidationError | None: ...


def validate(
    value: Any, *rules: Rule, field: str | None = None
) -> ValidationError | None:
    """Apply rules in order and return the first failure.

    Args:
        value: The value to check
        *rules: Rules to apply
        field: Name of the field being validated (for logs only)

    Returns:
        The first failing rule's error value, or None if all rules pass

    Raises:
        InternalError: If a rule cannot handle the value's type
    """
    for rule in rules:
        try:
            err = rule.validate(value)
        except InternalError as e:
            logger.error(
                "Rule cannot validate value",
                field=field,
                rule=type(rule).__name__,
                value_type=type(value).__name__,
                error=str(e),
            )
            raise

        if err is not None:
            logger.warning(
                "Validation failed",
                field=field,
                code=err.code,
                message=err.error(),
            )
            return err

    return None


def ensure_valid(value: Any, *rules: Rule, field: str | None = None) -> None:
    """Apply rules in order and raise the first failure.

    Raises:
        ValidationError: If any rule rejects the value
        InternalError: If a rule cannot handle the value's type
    """
    err = validate(value, *rules, field=field)
    if err is not None:
        raise err
