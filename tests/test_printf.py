import io

import pytest

from pyls.printf import ConversionSpec, parse_spec, printf, sprintf


@pytest.mark.parametrize(
    "fmt, value",
    [
        ("%d", 42),
        ("%i", -17),
        ("%5d", 42),
        ("%-5d|", 42),
        ("%05d", 42),
        ("%05d", -42),
        ("%.3d", 5),
        ("%8.3d", -5),
        ("%+d", 5),
        ("%+d", -5),
        ("% d", 5),
        ("%1d ", 3),
        ("%-05d|", 42),
    ],
)
def test_signed_matches_standard_formatting(fmt, value):
    assert sprintf(fmt, value) == fmt % value


@pytest.mark.parametrize(
    "fmt, value",
    [
        ("%x", 255),
        ("%X", 255),
        ("%#x", 255),
        ("%#X", 255),
        ("%08x", 255),
        ("%#08x", 255),
        ("%.4x", 255),
        ("%-6x|", 171),
        ("%x", 0),
    ],
)
def test_hex_matches_standard_formatting(fmt, value):
    assert sprintf(fmt, value) == fmt % value


def test_hex_of_negative_wraps_to_unsigned():
    assert sprintf("%x", -1) == "%x" % 0xFFFFFFFF


def test_unsigned_of_negative_wraps():
    assert sprintf("%u", -1) == str(2**32 - 1)


def test_unsigned_plain_value():
    assert sprintf("%u", 1234) == "1234"


def test_signed_truncates_to_32_bits():
    assert sprintf("%d", 2**31) == "-2147483648"


def test_zero_with_zero_precision_prints_nothing():
    assert sprintf("%.0d", 0) == ""


@pytest.mark.parametrize(
    "fmt, value",
    [
        ("%s", "hello"),
        ("%10s", "hello"),
        ("%-6s|", "ab"),
        ("%.2s", "hello"),
        ("%5.2s", "hello"),
        ("%6s ", "root"),
    ],
)
def test_string_matches_standard_formatting(fmt, value):
    assert sprintf(fmt, value) == fmt % value


def test_null_string():
    assert sprintf("%s", None) == "(null)"


def test_null_string_with_small_precision_is_empty():
    assert sprintf("%.3s", None) == ""


@pytest.mark.parametrize("fmt", ["%c", "%3c", "%-3c|"])
def test_char_matches_standard_formatting(fmt):
    assert sprintf(fmt, "A") == fmt % "A"


def test_char_from_code():
    assert sprintf("%c", ord("z")) == "z"


def test_percent_literal():
    assert sprintf("100%%") == "100%%" % ()


def test_null_pointer():
    assert sprintf("%p", 0) == "0x0"


def test_pointer_is_lowercase_hex():
    assert sprintf("%p", 0xBEEF) == hex(0xBEEF)


def test_literal_text_around_conversions():
    assert sprintf("a%db%sc", 1, "x") == "a%db%sc" % (1, "x")


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_incomplete_specification_raises():
    with pytest.raises(ValueError):
        sprintf("abc%")


def test_parse_spec_fields():
    spec = parse_spec("-08.3x")
    assert isinstance(spec, ConversionSpec)
    assert spec.conversion == "x"
    assert spec.width == 8
    assert spec.precision == 3
    assert spec.left == 1
    assert spec.zero == 1
    assert spec.has_precision and spec.has_width


def test_parse_spec_flags_counted():
    spec = parse_spec("++ #d")
    assert spec.plus == 2
    assert spec.space == 1
    assert spec.alternate
    assert not spec.force_sign


@pytest.mark.parametrize(
    "text", ["d", "5d", "-5d", "05d", ".3d", ".d", "-08.3x", "#x", "+ d", "12s", "%", "10.20s"]
)
def test_parse_spec_length_is_specification_length(text):
    assert parse_spec(text + "tail").length == len(text)


def test_parse_spec_without_conversion_raises():
    with pytest.raises(ValueError):
        parse_spec("5")


def test_printf_writes_to_stream_and_returns_count():
    out = io.StringIO()
    count = printf("%5d|%s", 7, "ok", out=out)
    assert out.getvalue() == "%5d|%s" % (7, "ok")
    assert count == len(out.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s:\n", "dir")
    captured = capsys.readouterr().out
    assert captured == "dir:\n"
    assert count == len(captured)