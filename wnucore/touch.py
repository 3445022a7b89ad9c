"""touch: create files that do not exist yet."""

from __future__ import annotations

import os
import sys
from typing import Iterable, Sequence

from wnucore.utils import is_help_flag

HELP = """
touch - create an empty file (like Unix 'touch')

Usage:
    touch <file_path>

Description:
    Creates the file if it doesn't exist.
    If it does, it is left unchanged.

Example:
    touch myfile.txt
    touch myfile.txt myfile2.txt myfile3.bat
    touch /path/myfile1 /path/myfile2.txt
"""


def touch(paths: Iterable[str | os.PathLike[str]]) -> None:
    """Create each file that does not exist; existing files keep their content.

    Stops at the first path that cannot be opened, raising OSError.
    """
    for path in paths:
        with open(path, "ab"):
            pass


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args or is_help_flag(args[0]):
        print(HELP)
        return 0
    try:
        touch(args)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())