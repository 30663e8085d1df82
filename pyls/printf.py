"""A small printf: the c, s, p, d, i, u, x, X and % conversions with flags."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, TextIO

from pyls.chars import atoi, itoa

CONVERSIONS = "cspdiuxX%"
_NONZERO_DIGITS = "123456789"
_DIGITS = "0123456789"
_MISSING = object()


@dataclass(frozen=True)
class ConversionSpec:
    """One parsed conversion: its flags, width, precision and length in the format."""

    conversion: str
    width: int = 0
    precision: int = 0
    has_width: bool = False
    has_precision: bool = False
    precision_star: bool = False
    alternate: bool = False
    space: int = 0
    plus: int = 0
    zero: int = 0
    left: int = 0
    length: int = 1

    @property
    def precise(self) -> bool:
        """True when any precision was given."""
        return self.has_precision or self.precision_star

    @property
    def force_sign(self) -> bool:
        """True when the '+' flag was given an odd number of times."""
        return self.plus % 2 == 1


def _decimal_digits(value: int) -> int:
    return len(str(abs(value)))


def parse_spec(text: str) -> ConversionSpec:
    """Parse the conversion that starts text, which is what follows a '%'.

    Raises ValueError when no conversion character ends the specification.
    """
    end = next((k for k, ch in enumerate(text) if ch in CONVERSIONS), None)
    if end is None:
        raise ValueError(f"incomplete conversion specification: %{text}")

    def before(k: int) -> str:
        return text[k - 1] if k > 0 else "%"

    precision_star = has_precision = alternate = has_width = False
    space = plus = zero = left = 0
    for k, ch in enumerate(text[:end]):
        if ch == "." and text[k + 1] == "*":
            precision_star = True
        if ch == ".":
            has_precision = True
        elif ch == " ":
            space += 1
        elif ch == "+":
            plus += 1
        elif ch == "#":
            alternate = True
        elif ch == "0" and not has_width and not has_precision:
            zero += 1
        elif ch == "-":
            left += 1
        starts_number = ch in _NONZERO_DIGITS and before(k) not in _NONZERO_DIGITS
        if (starts_number or ch == "*") and before(k) != ".":
            has_width = True

    width = precision = 0
    bare_dots = 0
    k = 0
    while k < end:
        ch = text[k]
        if (
            width == 0
            and ch in _NONZERO_DIGITS
            and before(k) not in _NONZERO_DIGITS
            and before(k) != "."
        ):
            width = atoi(text[k:])
        if ch == "." and text[k + 1] in _DIGITS:
            precision = atoi(text[k + 1:])
            k += 1
        elif ch == "." and (text[k + 1] > "9" or (text[k + 1] < "0" and text[k + 1] != "*")):
            bare_dots += 1
        k += 1

    length = (
        int(precision_star) + int(has_precision) + space + plus + int(alternate)
        + zero + left + int(has_width) + 1 - bare_dots
    )
    if has_width:
        length += _decimal_digits(width) - 1
    if precision_star:
        length += 1
    if has_precision:
        length += _decimal_digits(precision)

    return ConversionSpec(
        conversion=text[end],
        width=width,
        precision=precision,
        has_width=has_width,
        has_precision=has_precision,
        precision_star=precision_star,
        alternate=alternate,
        space=space,
        plus=plus,
        zero=zero,
        left=left,
        length=length,
    )


def _justify(body: str, spec: ConversionSpec, width: int) -> str:
    pad = " " * max(width, 0)
    return body + pad if spec.left else pad + body


def _render_char(spec: ConversionSpec, value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c needs a single character, got {value!r}")
        ch = value
    else:
        ch = chr(int(value) & 0xFF)
    return _justify(ch, spec, spec.width - 1)


def _render_string(spec: ConversionSpec, value: Any) -> str:
    prec = spec.precision
    if value is None:
        if spec.precise and prec <= 5:
            return ""
        text = "(null)"
    else:
        text = str(value)
    if spec.precise and prec < len(text):
        width = spec.width - prec
        text = text[:max(prec, 0)]
    else:
        width = spec.width - len(text)
    return _justify(text, spec, width)


def _render_pointer(spec: ConversionSpec, value: Any) -> str:
    addr = 0 if value is None else int(value) & 0xFFFFFFFFFFFFFFFF
    count = len(format(addr, "x")) if addr else 3
    body = f"0x{addr:x}" if addr else "0x0"
    return _justify(body, spec, spec.width - 2 - count)


def _pad_number(text: str, spec: ConversionSpec, width: int, prec: int) -> str:
    parts: list[str] = []
    if not spec.left and (spec.zero == 0 or spec.has_precision) and width > 0:
        parts.append(" " * width)
        width = 0
    digits = text
    if spec.force_sign and text[0] != "-":
        parts.append("+")
    elif text[0] == "-":
        parts.append("-")
        digits = text[1:]
    elif spec.space:
        parts.append(" ")
    if not spec.left and spec.zero and not spec.has_precision and width > 0:
        parts.append("0" * width)
        width = 0
    parts.append("0" * max(prec - len(digits), 0))
    remaining = min(prec, len(digits)) - 1
    if text[0] != "0" or remaining != -1 or not spec.precise:
        parts.append(digits)
    if spec.left and width > 0:
        parts.append(" " * width)
    return "".join(parts)


def _render_signed(spec: ConversionSpec, value: Any) -> str:
    text = itoa(int(value))
    width, prec = spec.width, spec.precision
    if prec >= len(text):
        width -= prec
        if text[0] == "-" or spec.force_sign or spec.space:
            width -= 1
    elif text[0] != "0" or prec != 0 or not spec.precise:
        width -= len(text)
    return _pad_number(text, spec, width, prec)


def _render_unsigned(spec: ConversionSpec, value: Any) -> str:
    text = str(int(value) & 0xFFFFFFFF)
    width, prec = spec.width, spec.precision
    if prec > len(text):
        width -= prec
    elif text[0] != "0" or prec != 0 or not spec.precise:
        width -= len(text)
    return _pad_number(text, spec, width, prec)


def _render_hex(spec: ConversionSpec, value: Any) -> str:
    upper = spec.conversion == "X"
    x = int(value) & 0xFFFFFFFF
    digits = format(x, "X" if upper else "x") if x else ""
    count = len(digits) or 1
    width, prec = spec.width, spec.precision
    if spec.alternate and x:
        width -= 2
    if spec.has_precision and prec > count:
        width -= prec
    elif x or not spec.has_precision or prec != 0:
        width -= count

    parts: list[str] = []
    if not spec.left and (spec.precise or spec.zero == 0) and width > 0:
        parts.append(" " * width)
    if spec.alternate and x:
        parts.append("0X" if upper else "0x")
    if spec.zero and not spec.left and not spec.precise and width > 0:
        parts.append("0" * width)
    parts.append("0" * max(prec - count, 0))
    remaining = min(prec, count) - 1
    if x == 0 and (not spec.has_precision or remaining != -1):
        parts.append("0")
    else:
        parts.append(digits)
    if spec.left and width > 0:
        parts.append(" " * width)
    return "".join(parts)


_RENDERERS = {
    "c": _render_char,
    "s": _render_string,
    "p": _render_pointer,
    "d": _render_signed,
    "i": _render_signed,
    "u": _render_unsigned,
    "x": _render_hex,
    "X": _render_hex,
}


def _render(spec: ConversionSpec, args: Iterator[Any]) -> str:
    if spec.conversion == "%":
        return "%"
    value = next(args, _MISSING)
    if value is _MISSING:
        raise TypeError("not enough arguments for format string")
    return _RENDERERS[spec.conversion](spec, value)


def sprintf(fmt: str, *args: Any) -> str:
    """Format args according to fmt and return the resulting text."""
    values = iter(args)
    pieces: list[str] = []
    i = 0
    last = len(fmt) - 1
    while i < len(fmt):
        if fmt[i] != "%":
            pieces.append(fmt[i])
            i += 1
            continue
        spec = parse_spec(fmt[i + 1:])
        pieces.append(_render(spec, values))
        i = max(i, min(i + spec.length, last)) + 1
    return "".join(pieces)


def printf(fmt: str, *args: Any, out: TextIO | None = None) -> int:
    """Write the formatted text to out (standard output by default); return its length."""
    text = sprintf(fmt, *args)
    (sys.stdout if out is None else out).write(text)
    return len(text)