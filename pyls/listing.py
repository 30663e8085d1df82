"""Reading directories and formatting their entries, short or long."""

from __future__ import annotations

import grp
import os
import pwd
import stat
import sys
import time
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

from pyls.options import Flags
from pyls.permissions import mode_string

PROGRAM = "pyls"
_BLOCK_BYTES = 4096
_BLOCKS_PER_CHUNK = 4


@dataclass(frozen=True)
class FileInfo:
    """What the long listing shows about one file."""

    name: str
    mode: int
    nlink: int
    user: str
    group: str
    size: int
    mtime: int

    @property
    def is_dir(self) -> bool:
        """True when the entry is a directory."""
        return stat.S_ISDIR(self.mode)

    @property
    def basename(self) -> str:
        """The part of the name after the last slash."""
        return self.name[self.name.rfind("/") + 1:]


def join_path(directory: str, name: str) -> str:
    """Join a directory and an entry name with exactly one slash between them."""
    if directory.endswith("/"):
        return directory + name
    return f"{directory}/{name}"


def _user_name(uid: int) -> str:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def _group_name(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def gather_info(path: str) -> FileInfo:
    """Collect the details of path without following a final symbolic link."""
    st = os.lstat(path)
    return FileInfo(
        name=path,
        mode=st.st_mode,
        nlink=st.st_nlink,
        user=_user_name(st.st_uid),
        group=_group_name(st.st_gid),
        size=st.st_size,
        mtime=int(st.st_mtime),
    )


def blocks_used(info: FileInfo) -> int:
    """Return the kilobytes counted towards the total: 4 per started 4096 bytes.

    Directories count for nothing.
    """
    if info.is_dir:
        return 0
    chunks, rest = divmod(info.size, _BLOCK_BYTES)
    return _BLOCKS_PER_CHUNK * (chunks + (1 if rest else 0))


def _long_line(info: FileInfo) -> str:
    stamp = time.ctime(info.mtime)[4:16]
    return (
        f"{mode_string(info.mode)} {info.nlink:1d} {info.user:>6} {info.group:>6} "
        f"{info.size:5d} {stamp} {info.basename}"
    )


def format_long(paths: Iterable[str]) -> str:
    """Return the total line and one detail line per path, without a final newline."""
    infos = [gather_info(path) for path in paths]
    total = sum(blocks_used(info) for info in infos)
    return f"total {total}\n" + "\n".join(_long_line(info) for info in infos)


def format_short(paths: Iterable[str]) -> str:
    """Return the base names of paths, each followed by a tab."""
    return "".join(f"{path[path.rfind('/') + 1:]}\t" for path in paths)


def format_files(paths: Iterable[str], flags: Flags) -> str:
    """Format paths in the style the flags ask for, ending in a newline if any."""
    paths = list(paths)
    body = format_long(paths) if flags.long_format else format_short(paths)
    return body + ("\n" if paths else "")


def read_directory(path: str, flags: Flags) -> tuple[list[str], list[str]]:
    """Return the entries of directory path and the subdirectories to descend into.

    Hidden entries, including "." and "..", are kept only with the all flag.
    Subdirectories are collected only with the recursive flag and never
    include hidden ones. Both lists are in directory order, unsorted.
    """
    files: list[str] = []
    subdirs: list[str] = []
    if flags.show_all:
        files.extend(join_path(path, name) for name in (".", ".."))
    with os.scandir(path) as entries:
        for entry in entries:
            hidden = entry.name.startswith(".")
            if hidden and not flags.show_all:
                continue
            full = join_path(path, entry.name)
            files.append(full)
            if flags.recursive and not hidden and entry.is_dir(follow_symlinks=False):
                subdirs.append(full)
    return files, subdirs


def valid_paths(paths: Iterable[str], err: TextIO | None = None) -> list[str]:
    """Return the paths that exist, reporting each missing one on err."""
    stream = sys.stdout if err is None else err
    found: list[str] = []
    for path in paths:
        if os.path.exists(path):
            found.append(path)
        else:
            stream.write(f"{PROGRAM}: {path}: No such file or directory\n")
    return found