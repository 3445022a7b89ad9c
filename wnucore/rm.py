"""rm: delete a file or directory after asking for confirmation."""

from __future__ import annotations

import os
import shutil
import sys
from typing import Sequence

from termcolor import colored


def confirm_and_delete(path: str | os.PathLike[str], recursive: bool) -> bool:
    """Ask on stdin whether to delete ``path`` and delete it if confirmed.

    Returns True if the path was deleted, False if the user cancelled.
    Raises OSError if the deletion fails.
    """
    name = os.fspath(path)
    shown = colored(name, "red", attrs=["bold"])
    action = "force delete" if recursive else "delete"
    is_dir = os.path.isdir(name)

    if is_dir:
        print(f"Sure you want to {action} {shown} and all of its contents? (y/n)")
    else:
        print(f"Sure you want to {action} {shown}? (y/n)")
    sys.stdout.flush()

    answer = sys.stdin.readline().strip().lower()
    if answer not in ("y", "yes"):
        print("Cancelled.")
        return False

    if is_dir:
        if recursive:
            shutil.rmtree(name)
        else:
            try:
                os.rmdir(name)
            except OSError as err:
                raise OSError(
                    f"Couldn't delete the directory. Perhaps it's not empty?{err}"
                ) from err
    else:
        os.remove(name)
    print(f"Deleted {colored(name, 'green', attrs=['bold'])}")
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: rm [-r|--recursive] <path>", file=sys.stderr)
        return 0

    if args[0] in ("-r", "--recursive"):
        if len(args) < 2:
            print("Please provide a path to delete with -r flag", file=sys.stderr)
            return 0
        path, recursive = args[1], True
    else:
        path, recursive = args[0], False

    if not os.path.exists(path):
        print(f"Path '{colored(path, 'red')}' does not exist", file=sys.stderr)
        return 0

    try:
        confirm_and_delete(path, recursive and os.path.isdir(path))
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())