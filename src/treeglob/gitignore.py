"""Gitignore handling for glob searches, using pathspec."""

from __future__ import annotations

import os
from pathlib import Path

import pathspec


def _read_ignore_file(path: Path) -> list[str] | None:
    """
    Read the non-blank, non-comment lines of an ignore file. Returns `None` if the
    file is missing, unreadable, or not valid UTF-8.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    return [line for line in text.splitlines() if line.strip() and not line.strip().startswith("#")]


def load_gitignore(directory: str | os.PathLike[str] = ".") -> pathspec.GitIgnoreSpec | None:
    """
    Read `.gitignore` in the given directory and return a compiled `GitIgnoreSpec`,
    or `None` if the file doesn't exist, can't be read, or has no patterns.
    """
    lines = _read_ignore_file(Path(directory) / ".gitignore")
    if not lines:
        return None
    return pathspec.GitIgnoreSpec.from_lines(lines)
