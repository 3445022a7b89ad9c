"""clear: clear the terminal screen."""

from __future__ import annotations

import sys
from typing import Sequence

CLEAR_ALL = "\x1b[2J"


def main(argv: Sequence[str] | None = None) -> int:
    """Clear the whole screen and return 0."""
    sys.stdout.write(CLEAR_ALL)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())