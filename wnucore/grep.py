"""grep: print the lines of a file that contain a pattern."""

from __future__ import annotations

import sys
from typing import Sequence

from termcolor import colored

from wnucore.utils import GrepConfig, grep_run, is_help_flag

HELP = """
grep - search for patterns in files

Usage:
    grep <pattern> <file_path>

Description:
    Searches for lines in the specified file that contain the given pattern.

Examples:
    grep "hello" ./file.txt
    grep main src/main.rs
"""


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2 or any(is_help_flag(arg) for arg in args):
        print(colored(HELP, attrs=["bold"]))
        return 0
    try:
        config = GrepConfig.from_args(["grep", *args])
    except ValueError as exc:
        print(f"Problem parsing arguments: {exc}", file=sys.stderr)
        return 1
    try:
        grep_run(config)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Application Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())