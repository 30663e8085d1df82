import stat

import pytest

from pyls.permissions import mode_string


def test_directory_mode():
    assert mode_string(stat.S_IFDIR | 0o755) == "drwxr-xr-x"


def test_regular_file_mode():
    assert mode_string(stat.S_IFREG | 0o644) == "-rw-r--r--"


@pytest.mark.parametrize("perms", [0o000, 0o777, 0o755, 0o640, 0o421, 0o124, 0o700, 0o007])
@pytest.mark.parametrize("kind", [stat.S_IFREG, stat.S_IFDIR])
def test_matches_standard_rendering(kind, perms):
    mode = kind | perms
    assert mode_string(mode) == stat.filemode(mode)


@pytest.mark.parametrize("kind", [stat.S_IFLNK, stat.S_IFCHR, stat.S_IFIFO, stat.S_IFSOCK])
def test_non_directories_show_dash(kind):
    mode = kind | 0o751
    result = mode_string(mode)
    assert result[0] == "-"
    assert result[1:] == stat.filemode(mode)[1:]


def test_length_is_always_ten():
    for perms in range(0o1000):
        assert len(mode_string(stat.S_IFREG | perms)) == 10


def test_special_bits_do_not_change_execute_column():
    plain = mode_string(stat.S_IFREG | 0o755)
    special = mode_string(stat.S_IFREG | stat.S_ISUID | stat.S_ISGID | stat.S_ISVTX | 0o755)
    assert special == plain