"""Tests for the element-count rule."""

import pytest

from fieldrules import NullString, UnsupportedTypeError, count, length


@pytest.mark.parametrize(
    ("min", "max", "value", "expected"),
    [
        (2, 4, "abc", None),
        (2, 4, "", None),
        (2, 4, "abcdf", "the count must be between 2 and 4"),
        (0, 4, "ab", None),
        (0, 4, "abcde", "the count must be no more than 4"),
        (2, 0, "ab", None),
        (2, 0, "a", "the count must be no less than 2"),
        (2, 0, None, None),
        (2, 4, NullString("abc", valid=True), None),
        (2, 4, NullString("", valid=True), None),
        (2, 2, "abcdf", "the count must be exactly 2"),
        (2, 2, "ab", None),
        (0, 0, "", None),
        (0, 0, "ab", "the value must be empty"),
        (2, 4, ["a", "b", "c"], None),
        (2, 4, ["a"], "the count must be between 2 and 4"),
        (2, 4, {"a": 1, "b": 2}, None),
        (2, 4, {"a": 1}, "the count must be between 2 and 4"),
        (2, 4, (1, 2, 3), None),
        (2, 4, (1,), "the count must be between 2 and 4"),
        (2, 4, [], None),
        (0, 4, [], None),
        (2, 0, [], None),
        (0, 2, range(5), "the count must be no more than 2"),
        (1, 2, frozenset({1, 2, 3}), "the count must be between 1 and 2"),
    ],
)
def test_count(min, max, value, expected):
    """Test element-count bounds across strings and containers."""
    err = count(min, max).validate(value)

    if expected is None:
        assert err is None
    else:
        assert err is not None
        assert str(err) == expected


def test_count_measures_strings_like_length(boom: str):
    """Test that strings are measured by byte count, not as one element."""
    assert str(count(0, 2).validate(boom)) == "the count must be no more than 2"
    assert length(0, 2).validate(boom) is not None


@pytest.mark.parametrize(
    ("min", "max", "code"),
    [
        (2, 4, "validation_count_out_of_range"),
        (2, 2, "validation_count_invalid"),
        (2, 0, "validation_count_too_short"),
        (0, 4, "validation_count_too_long"),
        (0, 0, "validation_count_empty_required"),
    ],
)
def test_count_default_codes(min, max, code):
    assert count(min, max).err.code == code


def test_count_unsupported_type():
    with pytest.raises(UnsupportedTypeError) as exc_info:
        count(1, 3).validate(object())

    assert exc_info.value.value_type is object
    assert str(exc_info.value) == "cannot get the length of object"
