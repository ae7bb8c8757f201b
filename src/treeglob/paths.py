"""Splitting helpers for native path strings."""

from __future__ import annotations

import logging
import os

log = logging.getLogger(__name__)


def get_parent_dirs(file_path: str) -> list[str]:
    """
    Directory segments of `file_path`, shallowest first, without the final
    (file) segment. `.` segments are dropped, so `./a/b/c.txt` gives `["a", "b"]`.
    Empty segments are kept: an absolute path starts with `""`.
    """
    segments = [s for s in file_path.split(os.sep) if s != "."]
    return segments[:-1]


def get_filename(file_path: str) -> str | None:
    """Last segment of `file_path`, or `None` for an empty path."""
    filename = file_path.split(os.sep)[-1] if file_path else None
    log.debug("path: %s, filename: %s", file_path, filename)
    return filename
