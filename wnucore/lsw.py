"""lsw: list the entries of a directory, coloured by kind."""

from __future__ import annotations

import sys
from typing import Sequence

from termcolor import colored

from wnucore.utils import FileType, is_help_flag, list_dir

HELP = """
lsw - list files and directories

Usage:
    lsw <directory_path>

Description:
    Lists all entries in the given directory.
    Directories are shown in blue.
    Executable files are shown in green.
    Regular files are shown in white.

Example:
    lsw ./some_folder
"""

_COLORS = {
    FileType.DIRECTORY: "blue",
    FileType.EXECUTABLE: "green",
    FileType.FILE: "white",
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args or is_help_flag(args[0]):
        print(colored(HELP, attrs=["bold"]))
        return 0
    try:
        entries = list_dir(args[0])
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if not entries:
        print("No entries found or not a directory.")
        return 0
    for name, kind in entries:
        print(colored(name, _COLORS[kind], attrs=["bold"]))
    return 0


if __name__ == "__main__":
    sys.exit(main())