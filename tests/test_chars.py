import string

import pytest

from pyls.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)


def test_is_digit_accepts_only_digits():
    assert all(is_digit(c) for c in string.digits)
    assert not any(is_digit(c) for c in string.ascii_letters + string.punctuation)


def test_is_alpha_accepts_only_letters():
    assert all(is_alpha(c) for c in string.ascii_letters)
    assert not any(is_alpha(c) for c in string.digits + string.punctuation + " ")


def test_is_alnum_truthiness_matches_alpha_or_digit():
    for code in range(-1, 300):
        assert bool(is_alnum(code)) == (is_alpha(code) or is_digit(code))


def test_is_alnum_distinguishes_three_classes():
    classes = {is_alnum(c) for c in string.ascii_letters + string.digits}
    assert len(classes) == 3
    assert is_alnum("A") == is_alnum("Z")
    assert is_alnum("a") == is_alnum("z")


def test_is_print_range():
    printable = [code for code in range(-5, 300) if is_print(code)]
    assert printable == list(range(32, 127))


def test_is_print_agrees_with_alnum_for_letters_and_digits():
    for c in string.ascii_letters + string.digits:
        assert is_print(c) == is_alnum(c)


def test_is_ascii_range():
    ascii_codes = [code for code in range(-5, 300) if is_ascii(code)]
    assert ascii_codes == list(range(0, 128))


def test_case_mapping_of_letters():
    assert "".join(map(to_upper, string.ascii_lowercase)) == string.ascii_uppercase
    assert "".join(map(to_lower, string.ascii_uppercase)) == string.ascii_lowercase


def test_case_mapping_leaves_other_characters():
    others = string.digits + string.punctuation + " "
    assert "".join(map(to_upper, others)) == others
    assert "".join(map(to_lower, others)) == others


def test_case_mapping_on_codes():
    assert to_upper(ord("q")) == ord(to_upper("q"))
    assert to_lower(ord("Q")) == ord(to_lower("Q"))
    assert to_lower(to_upper(ord("m"))) == ord("m")


def test_multi_character_string_is_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


@pytest.mark.parametrize(
    "text, expected",
    [("  \t-123abc", -123), ("+7", 7), ("\n\v\f42 17", 42), ("99", 99)],
)
def test_atoi_parses_leading_number(text, expected):
    assert atoi(text) == expected


def test_atoi_without_digits():
    assert atoi("--5") == 0
    assert atoi("") == 0
    assert atoi("abc") == atoi("")


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 1, -1, 2147483647, -2147483648, 123456])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_values():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(2147483648) == "-2147483648"
    assert itoa(305) == "305"