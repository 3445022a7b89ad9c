"""Small command-line utilities for files and the terminal: cat, clear, grep, head, tail, lsw, rm and touch."""

__version__ = "0.1.0"