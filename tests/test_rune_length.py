"""Tests for the character-count rule."""

import pytest

from fieldrules import NullString, UnsupportedTypeError, rune_length


@pytest.mark.parametrize(
    ("min", "max", "value", "expected"),
    [
        (2, 4, "abc", None),
        (2, 4, "", None),
        (2, 4, "abcdf", "the length must be between 2 and 4"),
        (0, 4, "ab", None),
        (0, 4, "abcde", "the length must be no more than 4"),
        (2, 0, "ab", None),
        (2, 0, "a", "the length must be no less than 2"),
        (2, 0, None, None),
        (2, 4, NullString("abc", valid=True), None),
        (2, 4, NullString("", valid=True), None),
        (2, 3, [1], "the length must be between 2 and 3"),
    ],
)
def test_rune_length(min, max, value, expected):
    """Test character-count bounds across strings and containers."""
    err = rune_length(min, max).validate(value)

    if expected is None:
        assert err is None
    else:
        assert err is not None
        assert str(err) == expected


@pytest.mark.parametrize(
    ("repeat", "wrapped", "expected"),
    [
        (2, False, None),
        (3, False, None),
        (1, False, "the length must be between 2 and 3"),
        (4, False, "the length must be between 2 and 3"),
        (2, True, None),
        (1, True, "the length must be between 2 and 3"),
    ],
)
def test_rune_length_multibyte(boom: str, repeat, wrapped, expected):
    """Test that each 4-byte character counts once."""
    value = boom * repeat
    if wrapped:
        value = NullString(value, valid=True)

    err = rune_length(2, 3).validate(value)

    if expected is None:
        assert err is None
    else:
        assert str(err) == expected


def test_rune_length_unsupported_type():
    with pytest.raises(UnsupportedTypeError, match="cannot get the length of int"):
        rune_length(2, 0).validate(123)


def test_rune_length_bytes_are_not_decoded(boom: str):
    """Test that byte sequences keep their byte count in character mode."""
    err = rune_length(0, 2).validate(boom.encode("utf-8"))

    assert str(err) == "the length must be no more than 2"
