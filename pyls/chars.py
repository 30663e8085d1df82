"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

from itertools import takewhile

_WHITESPACE = " \t\r\n\v\f"
_DIGITS = "0123456789"

# Class bits reported by is_alnum and is_print.
_UPPER = 1
_LOWER = 2
_DIGIT = 4
_PUNCT = 16
_SPACE = 64


def _code(c: int | str) -> int:
    """Return the character code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _wrap32(value: int) -> int:
    """Reduce an integer to the range of a signed 32-bit int."""
    return ((value + 2**31) % 2**32) - 2**31


def is_alnum(c: int | str) -> int:
    """Return a non-zero class bit for letters and digits, 0 otherwise."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _UPPER
    if ord("a") <= code <= ord("z"):
        return _LOWER
    if ord("0") <= code <= ord("9"):
        return _DIGIT
    return 0


def is_alpha(c: int | str) -> bool:
    """Return True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_ascii(c: int | str) -> bool:
    """Return True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_digit(c: int | str) -> bool:
    """Return True for the ASCII digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_print(c: int | str) -> int:
    """Return a non-zero class bit for printable ASCII, 0 otherwise."""
    code = _code(c)
    if code == 32:
        return _SPACE
    if 33 <= code <= 47 or 58 <= code <= 64 or 91 <= code <= 96 or 123 <= code <= 126:
        return _PUNCT
    if 48 <= code <= 57:
        return _DIGIT
    if 65 <= code <= 90:
        return _UPPER
    if 97 <= code <= 122:
        return _LOWER
    return 0


def to_lower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; other values pass through."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; other values pass through."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is read, then digits
    until the first non-digit. The result wraps to a signed 32-bit int.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: ch in _DIGITS, rest))
    value = int(digits) if digits else 0
    return _wrap32(-value if negative else value)


def itoa(n: int) -> str:
    """Return the decimal text of n taken as a signed 32-bit int."""
    return str(_wrap32(n))