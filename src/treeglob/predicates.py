"""
Path predicates used during directory traversal.

`is_directory` and `is_file` stat the path and raise `FileNotFoundError` when it
doesn't exist. The `ignore_*` predicates are pure string checks that return
`False` for paths that should be pruned from a walk.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Callable

# Substring marking a dependency-cache directory anywhere in the path.
NODE_MODULES = "node_modules"

# Prefix of build output directories (`build`, `build-x`, `build_release`, ...).
BUILD_PREFIX = "build"

PathPredicate = Callable[[str], bool]


def is_directory(path: str | os.PathLike[str]) -> bool:
    """True if `path` is a directory. Raises `FileNotFoundError` if it doesn't exist."""
    return stat.S_ISDIR(os.stat(path).st_mode)


def is_file(path: str | os.PathLike[str]) -> bool:
    """True if `path` is a regular file. Raises `FileNotFoundError` if it doesn't exist."""
    return stat.S_ISREG(os.stat(path).st_mode)


def _last_segment(path: str) -> str:
    return path.split(os.sep)[-1]


def ignore_node_module(path: str) -> bool:
    return NODE_MODULES not in path


def ignore_dot_dir(path: str) -> bool:
    return not _last_segment(path).startswith(".")


def ignore_build_dir(path: str) -> bool:
    return not _last_segment(path).startswith(BUILD_PREFIX)


# Applied in order to every subdirectory found by the enumerator.
DIRECTORY_EXCLUSIONS: tuple[PathPredicate, ...] = (
    ignore_node_module,
    ignore_dot_dir,
    ignore_build_dir,
)
