"""Helpers for reading and writing source files."""

from __future__ import annotations

import os


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the whole content of a file, line endings untouched.

    Raises OSError when the file cannot be opened.
    """
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise OSError(f"Could not open file: {os.fspath(path)}") from exc


def write_file(path: str | os.PathLike[str], content: str) -> None:
    """Replace the content of a file, creating it if needed.

    Raises OSError when the file cannot be opened for writing.
    """
    try:
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
    except OSError as exc:
        raise OSError(f"Could not open file for writing: {os.fspath(path)}") from exc


def file_exists(path: str | os.PathLike[str]) -> bool:
    """Whether the file exists and can be opened for reading."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False