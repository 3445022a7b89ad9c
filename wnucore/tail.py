"""tail: print the last lines of a file."""

from __future__ import annotations

import os
import re
import sys
from typing import BinaryIO, Iterator, Sequence

from termcolor import colored

DEFAULT_COUNT = 10
_COUNT_RE = re.compile(r"\+?[0-9]+")
_MAX_COUNT = 2**64 - 1

HELP = """
tail - show last lines of a file

Usage:
    tail <file_path> [line_count]

Description:
    Shows the last N lines of the given file.
    Defaults to 10 lines.

Example:
    tail file.txt 15
"""


def _parse_count(text: str) -> int:
    if not _COUNT_RE.fullmatch(text):
        return DEFAULT_COUNT
    value = int(text)
    return value if value <= _MAX_COUNT else DEFAULT_COUNT


def _valid_lines(handle: BinaryIO) -> Iterator[str]:
    """Yield each valid UTF-8 line without its ending."""
    for raw in handle:
        if raw.endswith(b"\n"):
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError:
            continue


def tail_lines(path: str | os.PathLike[str], count: int = DEFAULT_COUNT) -> list[str]:
    """Return the last ``count`` valid UTF-8 lines of a file."""
    if count < 0:
        raise ValueError("line count must not be negative")
    with open(path, "rb") as handle:
        lines = list(_valid_lines(handle))
    return lines[max(len(lines) - count, 0):]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args or "--help" in args or "-h" in args:
        print(colored(HELP, attrs=["bold"]))
        return 0
    path = args[0]
    count = _parse_count(args[1]) if len(args) > 1 else DEFAULT_COUNT
    try:
        lines = tail_lines(path, count)
    except OSError as exc:
        print(f"{colored('Error reading file', 'red')}: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())