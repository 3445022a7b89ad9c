"""head: print the first lines of a file."""

from __future__ import annotations

import os
import re
import sys
from itertools import islice
from typing import BinaryIO, Iterator, Sequence

from termcolor import colored

DEFAULT_COUNT = 10
_COUNT_RE = re.compile(r"\+?[0-9]+")
_MAX_COUNT = 2**64 - 1

HELP = """
head - show first lines of a file

Usage:
    head <file_path> [line_count]

Description:
    Shows the first N lines of the given file.
    Defaults to 10 lines.

Example:
    head file.txt 5
"""


def _parse_count(text: str) -> int:
    if not _COUNT_RE.fullmatch(text):
        return DEFAULT_COUNT
    value = int(text)
    return value if value <= _MAX_COUNT else DEFAULT_COUNT


def _text_lines(handle: BinaryIO) -> Iterator[str | None]:
    """Yield each line without its ending, or None where it is not valid UTF-8."""
    for raw in handle:
        if raw.endswith(b"\n"):
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError:
            yield None


def head_lines(path: str | os.PathLike[str], count: int = DEFAULT_COUNT) -> list[str]:
    """Return the first ``count`` lines of a file.

    Lines that are not valid UTF-8 are left out but still count.
    """
    if count < 0:
        raise ValueError("line count must not be negative")
    with open(path, "rb") as handle:
        return [
            line for line in islice(_text_lines(handle), count) if line is not None
        ]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args or "--help" in args or "-h" in args:
        print(colored(HELP, attrs=["bold"]))
        return 0
    path = args[0]
    count = _parse_count(args[1]) if len(args) > 1 else DEFAULT_COUNT
    try:
        lines = head_lines(path, count)
    except OSError as exc:
        print(f"{colored('Error reading file', 'red')}: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())