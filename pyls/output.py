"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from pyls.chars import itoa


def _stream(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: int | str, stream: TextIO | None = None) -> None:
    """Write one character, given as a string or a code, to stream."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    else:
        ch = chr(int(c) & 0xFF)
    _stream(stream).write(ch)


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write text to stream; None writes nothing."""
    if text is None:
        return
    _stream(stream).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write text followed by a newline."""
    put_str(text, stream)
    put_char("\n", stream)


def put_number(n: int, stream: TextIO | None = None) -> None:
    """Write n, taken as a signed 32-bit int, in decimal."""
    put_str(itoa(n), stream)