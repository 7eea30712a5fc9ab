import string

import pytest

from minitalk.chars import (
    atoi,
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    itoa,
    tolower,
    toupper,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -42abc", -42),
        ("\t\n\v\f\r+123", 123),
        ("0", 0),
        ("-0", 0),
        ("007", 7),
    ],
)
def test_atoi_parses_leading_number(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "   ", "+-5", "--5", "- 5", "+"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_stops_at_first_non_digit():
    assert atoi("12 34") == 12
    assert atoi("99x100") == 99


def test_atoi_int_limits():
    assert atoi("2147483647") == 2147483647
    assert atoi("-2147483648") == -2147483648


def test_atoi_wraps_like_32_bit_int():
    assert atoi("2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2147483647, -2147483648, 1000000])
def test_itoa_round_trips_through_atoi(n):
    assert atoi(itoa(n)) == n


def test_itoa_values():
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(2147483647) == "2147483647"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")


def test_isalpha_matches_ascii_letters():
    for code in range(256):
        assert isalpha(code) == (chr(code) in string.ascii_letters)


def test_isdigit_matches_ascii_digits():
    for code in range(256):
        assert isdigit(code) == (chr(code) in string.digits)


def test_isalnum_is_union_of_alpha_and_digit():
    for code in range(-1, 256):
        assert isalnum(code) == (isalpha(code) or isdigit(code))


def test_isascii_bounds():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(128) is False
    assert isascii(-1) is False


def test_isprint_bounds():
    assert isprint(" ") is True
    assert isprint("~") is True
    assert isprint(31) is False
    assert isprint(127) is False


def test_classifiers_accept_strings():
    assert isalpha("a") is True
    assert isdigit("7") is True
    assert isalnum("_") is False


def test_classifier_rejects_long_string():
    with pytest.raises(ValueError):
        isalpha("ab")


def test_classifier_rejects_other_types():
    with pytest.raises(TypeError):
        isdigit(1.5)


def test_toupper_and_tolower_on_strings():
    assert toupper("a") == "A"
    assert tolower("Z") == "z"
    assert toupper("5") == "5"
    assert tolower("!") == "!"


def test_case_mapping_keeps_integer_codes():
    assert toupper(ord("q")) == ord("Q")
    assert tolower(ord("Q")) == ord("q")
    assert toupper(200) == 200


def test_case_mapping_round_trip_over_letters():
    for letter in string.ascii_lowercase:
        assert tolower(toupper(letter)) == letter
    for letter in string.ascii_uppercase:
        assert toupper(tolower(letter)) == letter


def test_case_mapping_leaves_non_letters_alone():
    for code in range(128):
        ch = chr(code)
        if ch not in string.ascii_letters:
            assert toupper(ch) == ch
            assert tolower(ch) == ch