# pyls

`pyls` lists the contents of directories in the manner of `ls`, with a small
set of options that can be combined in any order. It runs on POSIX systems
(it looks up owner and group names through `pwd` and `grp`).

## Installation

```
pip install .
```

## Usage

```
pyls [-Rlart] [directory ...]
```

The same command can be started with `python -m pyls.cli`.

If no directory is given, the current directory is listed. Directories that
do not exist are reported as `pyls: <path>: No such file or directory` and
skipped. The remaining ones are sorted with the same rules as their entries;
when more than one is left, each listing starts with a `<path>:` heading and
listings are separated by a blank line.

Options (they may be grouped, as in `-la`):

| Option | Meaning |
|--------|---------|
| `-R`   | descend into subdirectories; each is listed after a blank line and a `<path>:` heading. Hidden directories are not entered |
| `-l`   | long format, preceded by a `total` line |
| `-a`   | include entries whose names begin with `.`, including `.` and `..` |
| `-r`   | reverse the sort order |
| `-t`   | sort by modification time, newest first; equal times are sorted by name |

Names are compared ignoring ASCII case; where one name is a prefix of another,
the shorter comes first. Any other option letter prints
`pyls: invalid option -- <letter>` and exits with status 1. Every argument
after the first path is taken as a path, even if it begins with `-`.

In the short format, entry names are written on one line, each followed by a
tab. In the long format, each entry gets a line with its permission string
(`d` for directories, `-` for anything else, then three `rwx` groups), link
count, owner, group, size, modification time (`Mon DD HH:MM`) and name. The
`total` line counts 4 for every started 4096 bytes of each entry that is not a
directory.

### Examples

```
pyls
pyls -la /tmp
pyls -Rt src docs
```

## Using it from Python

The listing can be written to any text stream:

```python
import io
from pyls.options import parse_args
from pyls.cli import run

flags, paths = parse_args(["-l", "."])
buffer = io.StringIO()
run(paths, flags, buffer)
print(buffer.getvalue())
```

Other building blocks:

- `pyls.options`: `Flags`, `parse_args`, `apply_option` and `InvalidOptionError`.
- `pyls.sorting`: `compare_names` and `sort_paths`.
- `pyls.permissions`: `mode_string`, e.g. `"drwxr-xr-x"`.
- `pyls.listing`: `read_directory`, `gather_info` (returning a `FileInfo`),
  `blocks_used`, `format_short`, `format_long`, `format_files`, `join_path`
  and `valid_paths`.

The package also carries small standalone helpers that the lister does not
itself use:

- `pyls.printf`: `sprintf`, `printf` and `parse_spec`, a printf-style
  formatter for `%c %s %p %d %i %u %x %X %%` with the `-`, `0`, `+`, space and
  `#` flags, width and precision.
- `pyls.chars`: ASCII classification (`is_alpha`, `is_digit`, …), case mapping,
  and C-style `atoi` / `itoa` on 32-bit integers.
- `pyls.strings`: `split`, `trim`, `substring`, `find_char`, `compare_n` and
  similar string helpers.
- `pyls.memory`: byte-buffer helpers such as `mem_move`, `strlcpy` and `strlcat`.
- `pyls.output`: `put_char`, `put_str`, `put_endl` and `put_number` for text streams.

## Limitations

- Every path argument must be a directory. A plain file given on the command
  line is not listed on its own; the command reports the error and exits
  with status 1.
- Output is not arranged in columns, and symbolic links are not followed or
  shown with their targets.
- Only directories are marked in the long format's type column; other file
  types show `-`.
- Messages about missing paths and invalid options go to standard output.

## Running the tests

```
pip install .[test]
pytest
```