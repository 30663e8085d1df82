"""String helpers: splitting, searching, comparing, trimming and mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest

_NUL = "\0"


def _char(c: int | str) -> str:
    """Return c as a one-character string, wrapping codes above 255 once."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    code = int(c)
    if code > 255:
        code -= 256
    if code < 0:
        raise ValueError(f"invalid character code {c}")
    return chr(code)


def split(text: str, sep: str) -> list[str]:
    """Split text on the character sep, dropping empty pieces."""
    return [piece for piece in text.split(_char(sep)) if piece]


def find_char(text: str, c: int | str) -> int | None:
    """Return the index of the first c in text, or None.

    Searching for the NUL character finds the end of the text.
    """
    ch = _char(c)
    if ch == _NUL and _NUL not in text:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def rfind_char(text: str, c: int | str) -> int | None:
    """Return the index of the last c in text, or None.

    Searching for the NUL character finds the end of the text.
    """
    ch = _char(c)
    if ch == _NUL and _NUL not in text:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def compare_n(first: str, second: str, n: int) -> int:
    """Compare at most n characters; return the code difference at the first mismatch."""
    if n <= 0:
        return 0
    for a, b in zip_longest(first[:n], second[:n], fillvalue=_NUL):
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def find_substring(haystack: str, needle: str, limit: int) -> int | None:
    """Return where needle first occurs wholly within the first limit characters.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    if not needle:
        return 0
    if limit <= 0:
        return None
    end = haystack.find(_NUL)
    searchable = haystack if end < 0 else haystack[:end]
    index = searchable[:limit].find(needle)
    return None if index < 0 else index


def trim(text: str, charset: str) -> str:
    """Remove characters in charset from both ends of text."""
    return text.strip(charset)


def substring(text: str, start: int, length: int) -> str:
    """Return up to length characters of text from start; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]


def join(first: str, second: str) -> str:
    """Return first followed by second."""
    return first + second


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for every character of text."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def iterate_indexed(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Call func(index, char) for each element, storing any non-None result in place."""
    for index, ch in enumerate(list(chars)):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement