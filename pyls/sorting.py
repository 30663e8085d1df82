"""Ordering of paths by name or by modification time."""

from __future__ import annotations

import os
from collections.abc import Iterable

from pyls.options import Flags


def _fold(ch: str) -> int:
    code = ord(ch)
    return code + 32 if ord("A") <= code <= ord("Z") else code


def compare_names(first: str, second: str) -> int:
    """Compare names ignoring ASCII case; return negative, zero or positive.

    Where one name is a prefix of the other, the shorter one sorts first.
    """
    for a, b in zip(first, second):
        diff = _fold(a) - _fold(b)
        if diff:
            return diff
    common = min(len(first), len(second))
    tail_a = ord(first[common]) if common < len(first) else 0
    tail_b = ord(second[common]) if common < len(second) else 0
    return tail_a - tail_b


def _mtime(path: str, cache: dict[str, int]) -> int:
    if path not in cache:
        try:
            cache[path] = int(os.lstat(path).st_mtime)
        except OSError:
            cache[path] = 0
    return cache[path]


def _by_name_swap(first: str, second: str, reverse: bool) -> bool:
    cmp = compare_names(first, second)
    return cmp < 0 if reverse else cmp > 0


def _should_swap(first: str, second: str, flags: Flags, cache: dict[str, int]) -> bool:
    if not flags.sort_by_time:
        return _by_name_swap(first, second, flags.reverse)
    t1, t2 = _mtime(first, cache), _mtime(second, cache)
    if t1 == t2:
        return _by_name_swap(first, second, flags.reverse)
    return t1 > t2 if flags.reverse else t1 < t2


def sort_paths(paths: Iterable[str], flags: Flags) -> list[str]:
    """Return paths ordered by name, or newest first with the time flag.

    The reverse flag inverts the order. Paths with equal modification
    times are ordered by name.
    """
    result = list(paths)
    cache: dict[str, int] = {}
    # Exchange sort: each position takes the first best candidate that follows it.
    for i in range(len(result)):
        for j in range(i + 1, len(result)):
            if _should_swap(result[i], result[j], flags, cache):
                result[i], result[j] = result[j], result[i]
    return result