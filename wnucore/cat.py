"""cat: print the contents of a file."""

from __future__ import annotations

import sys
from typing import Sequence

from termcolor import colored

from wnucore.utils import is_help_flag, read_file

HELP = """
cat - display contents of a file

Usage:
    cat <file_path>

Description:
    Reads and prints the content of the specified file.

Example:
    cat notes.txt
"""


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args or is_help_flag(args[0]):
        print(colored(HELP, attrs=["bold"]))
        return 0
    try:
        contents = read_file(args[0])
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(contents)
    return 0


if __name__ == "__main__":
    sys.exit(main())