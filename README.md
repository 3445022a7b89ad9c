# wnucore

A small set of everyday file and terminal utilities with coloured output,
usable on any platform that runs Python.

## Installation

From a checkout of the package:

```
pip install .
```

## Commands

Every command except `wnu` and `wclear` prints its usage when run with
`-h` or `--help`, and most also print it when given no arguments.

| Command  | What it does                                                          |
|----------|-----------------------------------------------------------------------|
| `wnu`    | Lists the available commands                                          |
| `wcat`   | Prints the contents of a UTF-8 file                                   |
| `wclear` | Clears the terminal screen                                            |
| `wgrep`  | Prints the lines of a file that contain a pattern, ignoring case      |
| `whead`  | Shows the first N lines of a file (10 by default)                     |
| `wtail`  | Shows the last N lines of a file (10 by default)                      |
| `lsw`    | Lists a directory: directories blue, executables green, files white   |
| `wrm`    | Deletes a file or directory after asking for confirmation             |
| `wtouch` | Creates one or more empty files that do not exist yet                 |

### Examples

```
wcat notes.txt
wgrep hello ./file.txt
whead file.txt 5
wtail file.txt 15
lsw ./some_folder
wrm old.txt
wrm -r build
wtouch a.txt b.txt
```

`wgrep` takes exactly a pattern and a file. It matches lines without regard
to case and highlights in red the whitespace-separated words equal to the
pattern.

`whead` and `wtail` fall back to 10 lines when the count is not a
non-negative whole number. Lines that are not valid UTF-8 are not printed.

`lsw` decides whether a file is executable from its permission bits, or on
Windows from its extension (`.exe`, `.bat`, `.ps1`, `.com`). Given a path
that is not a directory, it says so and prints nothing else.

`wrm` asks `(y/n)` before deleting; `y` or `yes` confirms. A non-empty
directory is removed only with `-r` or `--recursive`.

## Library use

The helpers behind the commands can be used from Python as well:

```python
from wnucore.utils import FileType, GrepConfig, grep_run, grep_search, list_dir, read_file

for name, kind in list_dir("."):
    if kind is FileType.DIRECTORY:
        print(name)

config = GrepConfig.from_args(["wgrep", "Hello", "notes.txt"])
grep_run(config)                      # prints the matching lines

for line in grep_search("hello", read_file("notes.txt")):
    print(line)
```

`GrepConfig.from_args` raises `ValueError` for too few or too many
arguments. `wnucore.head.head_lines(path, count)`,
`wnucore.tail.tail_lines(path, count)`, `wnucore.touch.touch(paths)` and
`wnucore.rm.confirm_and_delete(path, recursive)` are available in the same
way. Each command's `main(argv=None)` returns its exit status.

## Limitations

- `wtouch` only creates missing files; it does not update the modification
  time of a file that already exists.
- The commands take only the options described above; there are no further
  flags such as line numbers, regular expressions or recursive search.

## Running the tests

```
pip install ".[test]"
pytest
```