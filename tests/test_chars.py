import string

import pytest

from pipex.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_whitespace,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters_are_alpha(c):
    assert is_alpha(c) is True
    assert is_alpha(ord(c)) is True


@pytest.mark.parametrize("c", list(string.digits + string.punctuation + " \t"))
def test_non_letters_are_not_alpha(c):
    assert is_alpha(c) is False


def test_alpha_rejects_non_ascii_letters():
    assert is_alpha("é") is False
    assert is_alpha(ord("@")) is False
    assert is_alpha(ord("[")) is False


@pytest.mark.parametrize("c", list(string.digits))
def test_digits(c):
    assert is_digit(c) is True
    assert is_alnum(c) is True


@pytest.mark.parametrize("c", list(string.ascii_letters + " /:"))
def test_non_digits(c):
    assert is_digit(c) is False


def test_alnum_matches_alpha_or_digit_for_all_ascii():
    for code in range(128):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_ascii_range():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_print_matches_printable_set():
    printable = set(string.printable) - set(string.whitespace) | {" "}
    for code in range(256):
        assert is_print(code) == (chr(code) in printable)


@pytest.mark.parametrize("c", [" ", "\t", "\n", "\v", "\f", "\r"])
def test_whitespace_characters(c):
    assert is_whitespace(c) is True


@pytest.mark.parametrize("c", ["a", "0", "\x08", "\x0e", "_"])
def test_not_whitespace(c):
    assert is_whitespace(c) is False


def test_to_upper_maps_lowercase():
    for low, up in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(low) == up
        assert to_upper(ord(low)) == ord(up)


def test_to_lower_maps_uppercase():
    for low, up in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_lower(up) == low
        assert to_lower(ord(up)) == ord(low)


@pytest.mark.parametrize("c", list(string.digits + string.punctuation + " é"))
def test_case_conversion_leaves_others(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


def test_case_round_trip():
    for c in string.ascii_lowercase:
        assert to_lower(to_upper(c)) == c
    for c in string.ascii_uppercase:
        assert to_upper(to_lower(c)) == c


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        is_digit(4.5)