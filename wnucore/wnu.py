"""wnu: print an overview of the available commands."""

from __future__ import annotations

import sys
from typing import Sequence

from termcolor import colored

COMMANDS = (
    ("cat", "      - Print file contents"),
    ("clear", "    - Clear the screen"),
    ("head", "       - Show first N lines of a file"),
    ("lsw", "        - List files/directories"),
    ("grep", "         - Search for text in a file"),
    ("rm", "           - Delete file/directory"),
    ("tail", "      - Show last N lines of a file"),
    ("touch", "     - Create new file"),
)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the command overview and return 0."""
    print(colored("wnu - WNU Core Utilities", attrs=["bold"]))
    print(f"\n{colored('Available Commands', attrs=['underline', 'bold'])}:")
    for name, description in COMMANDS:
        print(f"  {colored(name, 'cyan')}{description}")
    print(
        f"\n{colored('Tip', attrs=['italic'])}: "
        "Run with '--help' or '-h' for usage per command."
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())