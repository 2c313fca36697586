"""Error codes and message templates for the length rules."""

from typing import Final

# Length rule errors
LENGTH_TOO_LONG_CODE: Final = "validation_length_too_long"
LENGTH_TOO_SHORT_CODE: Final = "validation_length_too_short"
LENGTH_INVALID_CODE: Final = "validation_length_invalid"
LENGTH_OUT_OF_RANGE_CODE: Final = "validation_length_out_of_range"
LENGTH_EMPTY_REQUIRED_CODE: Final = "validation_length_empty_required"

LENGTH_TOO_LONG_MESSAGE: Final = "the length must be no more than {max}"
LENGTH_TOO_SHORT_MESSAGE: Final = "the length must be no less than {min}"
LENGTH_INVALID_MESSAGE: Final = "the length must be exactly {min}"
LENGTH_OUT_OF_RANGE_MESSAGE: Final = "the length must be between {min} and {max}"

# Count rule errors
COUNT_TOO_LONG_CODE: Final = "validation_count_too_long"
COUNT_TOO_SHORT_CODE: Final = "validation_count_too_short"
COUNT_INVALID_CODE: Final = "validation_count_invalid"
COUNT_OUT_OF_RANGE_CODE: Final = "validation_count_out_of_range"
COUNT_EMPTY_REQUIRED_CODE: Final = "validation_count_empty_required"

COUNT_TOO_LONG_MESSAGE: Final = "the count must be no more than {max}"
COUNT_TOO_SHORT_MESSAGE: Final = "the count must be no less than {min}"
COUNT_INVALID_MESSAGE: Final = "the count must be exactly {min}"
COUNT_OUT_OF_RANGE_MESSAGE: Final = "the count must be between {min} and {max}"

EMPTY_REQUIRED_MESSAGE: Final = "the value must be empty"

UNSUPPORTED_TYPE_MESSAGE: Final = "cannot get the length of {type_name}"
