import io

import pytest

from pipex.printf import format_printf, printf, putendl, putnbr


def test_plain_text_is_unchanged():
    assert format_printf("Usage: ./pipex infile cmd1 cmd2 outfile") == (
        "Usage: ./pipex infile cmd1 cmd2 outfile"
    )


def test_string_conversion():
    assert format_printf("%s: command not found", "ls") == "ls: command not found"


def test_null_string():
    assert format_printf("%s", None) == "(null)"


def test_char_from_int_and_str():
    assert format_printf("%c%c", ord("o"), "k") == "ok"


@pytest.mark.parametrize("n", [0, 5, -5, 2147483647, -2147483648])
def test_signed_round_trip(n):
    assert int(format_printf("%d", n)) == n
    assert format_printf("%i", n) == format_printf("%d", n)


def test_signed_wraps_to_32_bits():
    assert int(format_printf("%d", 2**31)) == -(2**31)


def test_unsigned_of_negative_wraps():
    assert int(format_printf("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 15, 255, 4096, 2**32 - 1])
def test_hex_round_trip(n):
    lower = format_printf("%x", n)
    upper = format_printf("%X", n)
    assert int(lower, 16) == n
    assert upper == lower.upper()


def test_pointer_has_prefix_and_round_trips():
    out = format_printf("%p", 48879)
    assert out.startswith("0x")
    assert int(out, 16) == 48879


def test_null_pointer():
    assert format_printf("%p", None) == "0x0"


def test_percent_escape():
    assert format_printf("100%%") == "100%"


def test_unknown_specifier_is_literal():
    assert format_printf("%q") == "%q"


def test_trailing_percent_prints_nothing():
    assert format_printf("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d and %d", 1)


def test_printf_writes_and_counts():
    buffer = io.StringIO()
    count = printf("%s=%d\n", "x", -3, file=buffer)
    assert buffer.getvalue() == "x=-3\n"
    assert count == len(buffer.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s", "pipex")
    assert capsys.readouterr().out == "pipex"
    assert count == len("pipex")


@pytest.mark.parametrize("n", [0, 42, -42, -2147483648])
def test_putnbr_round_trip(n):
    buffer = io.StringIO()
    putnbr(n, file=buffer)
    assert int(buffer.getvalue()) == n


def test_putendl_appends_newline():
    buffer = io.StringIO()
    putendl(": command not found", file=buffer)
    assert buffer.getvalue() == ": command not found\n"


def test_putendl_none_writes_newline_only():
    buffer = io.StringIO()
    putendl(None, file=buffer)
    assert buffer.getvalue() == "\n"