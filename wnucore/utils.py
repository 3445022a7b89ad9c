"""Shared helpers: help-flag detection, file reading, directory listing and grep."""

from __future__ import annotations

import os
import re
import stat
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePath
from typing import Iterator, Sequence

from termcolor import colored

_WINDOWS_EXECUTABLE_SUFFIXES = frozenset({"exe", "bat", "ps1", "com"})
_PIECE_RE = re.compile(r"\S*\s|\S+")
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


class FileType(Enum):
    """Kind of a directory entry as shown by ``lsw``."""

    DIRECTORY = "directory"
    EXECUTABLE = "executable"
    FILE = "file"


def is_help_flag(arg: str) -> bool:
    """Return True if ``arg`` asks for help."""
    return arg in ("-h", "--help")


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the whole text of a UTF-8 file, line endings untouched."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def _is_executable(entry: os.DirEntry[str]) -> bool:
    if os.name == "nt":
        suffix = PurePath(entry.name).suffix
        return suffix[1:].lower() in _WINDOWS_EXECUTABLE_SUFFIXES
    mode = entry.stat(follow_symlinks=False).st_mode
    return bool(mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH))


def list_dir(path: str | os.PathLike[str]) -> list[tuple[str, FileType]]:
    """List the entries of a directory with their kind.

    Raises OSError if ``path`` does not exist. If it is not a directory a
    notice is printed and an empty list is returned.
    """
    if not stat.S_ISDIR(os.stat(path).st_mode):
        name = Path(path).name or "unknown"
        print(f"{colored(name, 'red', attrs=['bold'])} is not a directory.\n")
        return []

    entries: list[tuple[str, FileType]] = []
    with os.scandir(path) as listing:
        for entry in listing:
            if entry.is_dir(follow_symlinks=False):
                kind = FileType.DIRECTORY
            elif _is_executable(entry):
                kind = FileType.EXECUTABLE
            else:
                kind = FileType.FILE
            entries.append((entry.name, kind))
    return entries


def _lines(contents: str) -> Iterator[str]:
    parts = contents.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    for part in parts:
        yield part[:-1] if part.endswith("\r") else part


def _highlight_line(line: str, query: str) -> str:
    wanted = query.translate(_ASCII_LOWER)
    pieces = []
    for word in _PIECE_RE.findall(line):
        trimmed = word.strip()
        if trimmed.translate(_ASCII_LOWER) == wanted:
            whitespace = word[len(trimmed):]
            pieces.append(colored(trimmed, "red", attrs=["bold"]) + whitespace)
        else:
            pieces.append(word)
    return "".join(pieces)


def grep_search(query: str, contents: str) -> Iterator[str]:
    """Yield the lines of ``contents`` containing ``query``, case-insensitively.

    Words equal to the query are highlighted.
    """
    needle = query.lower()
    for line in _lines(contents):
        if needle in line.lower():
            yield _highlight_line(line, query)


@dataclass(frozen=True)
class GrepConfig:
    """What to search for and where."""

    query: str
    filename: str

    @classmethod
    def from_args(cls, args: Sequence[str]) -> "GrepConfig":
        """Build a config from ``[program, query, filename]``."""
        if len(args) < 3:
            raise ValueError("Not Enough Arguments")
        if len(args) > 3:
            raise ValueError("Too many arguments")
        return cls(query=args[1], filename=args[2])


def grep_run(config: GrepConfig) -> None:
    """Print every matching line of the configured file."""
    contents = read_file(config.filename)
    for line in grep_search(config.query, contents):
        print(line)
    sys.stdout.flush()