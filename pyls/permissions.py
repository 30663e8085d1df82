"""Rendering of file mode bits as a permission string."""

from __future__ import annotations

import stat

_PERMISSION_BITS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


def mode_string(mode: int) -> str:
    """Return the ten-character permission string for mode, e.g. "drwxr-xr-x".

    Only directories are marked in the first column; every other file type
    shows a dash.
    """
    kind = "d" if stat.S_ISDIR(mode) else "-"
    return kind + "".join(letter if mode & bit else "-" for bit, letter in _PERMISSION_BITS)