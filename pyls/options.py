"""Command-line option parsing for the directory lister."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

DEFAULT_PATH = "."


@dataclass
class Flags:
    """Which listing options are switched on."""

    recursive: bool = False
    long_format: bool = False
    show_all: bool = False
    reverse: bool = False
    sort_by_time: bool = False


class InvalidOptionError(ValueError):
    """Raised for an option letter the lister does not know."""

    def __init__(self, option: str) -> None:
        super().__init__(f"invalid option -- {option}")
        self.option = option


_OPTION_FIELDS = {
    "R": "recursive",
    "l": "long_format",
    "a": "show_all",
    "r": "reverse",
    "t": "sort_by_time",
}


def apply_option(flags: Flags, arg: str) -> Flags:
    """Switch on the flags named by the letters of an argument such as "-laR".

    The leading dash is skipped. Raises InvalidOptionError at the first
    unknown letter. Returns the same flags object.
    """
    for letter in arg[1:]:
        field = _OPTION_FIELDS.get(letter)
        if field is None:
            raise InvalidOptionError(letter)
        setattr(flags, field, True)
    return flags


def parse_args(argv: Iterable[str]) -> tuple[Flags, list[str]]:
    """Split arguments (without the program name) into flags and paths.

    Arguments starting with a dash are options until the first path has
    been seen; after that every argument is a path. With no paths the
    current directory is listed.
    """
    flags = Flags()
    paths: list[str] = []
    for arg in argv:
        if paths or not arg.startswith("-"):
            paths.append(arg)
        else:
            apply_option(flags, arg)
    if not paths:
        paths.append(DEFAULT_PATH)
    return flags, paths