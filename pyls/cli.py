"""The directory lister command."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from pyls.listing import PROGRAM, format_files, read_directory, valid_paths
from pyls.options import Flags, InvalidOptionError, parse_args
from pyls.sorting import sort_paths


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def list_directory(path: str, flags: Flags, out: TextIO | None = None) -> None:
    """List one directory, then descend into its subdirectories if recursive."""
    stream = _stream(out)
    files, subdirs = read_directory(path, flags)
    stream.write(format_files(sort_paths(files, flags), flags))
    if flags.recursive and subdirs:
        explore(sort_paths(subdirs, flags), flags, stream)


def explore(paths: Sequence[str], flags: Flags, out: TextIO | None = None) -> None:
    """List each directory in turn under a blank line and a "path:" heading."""
    stream = _stream(out)
    for path in paths:
        stream.write(f"\n{path}:\n")
        list_directory(path, flags, stream)


def run(paths: Sequence[str], flags: Flags, out: TextIO | None = None) -> None:
    """List the top-level directories, with headings when there are several."""
    stream = _stream(out)
    for index, path in enumerate(paths):
        if index > 0:
            stream.write("\n")
        if len(paths) > 1:
            stream.write(f"{path}:\n")
        list_directory(path, flags, stream)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the lister on argv (the process arguments by default); return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        flags, paths = parse_args(args)
    except InvalidOptionError as exc:
        sys.stdout.write(f"{PROGRAM}: {exc}\n")
        return 1
    existing = sort_paths(valid_paths(paths, sys.stdout), flags)
    try:
        run(existing, flags, sys.stdout)
    except OSError as exc:
        sys.stdout.flush()
        sys.stderr.write(f"{PROGRAM}: {exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())