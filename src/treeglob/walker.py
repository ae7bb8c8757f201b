"""
Directory enumeration and recursive traversal.

Everything here returns plain path strings built by joining child names onto the
given directory, in the order the OS lists them. Excluded directories (see
`treeglob.predicates.DIRECTORY_EXCLUSIONS`) are pruned, so nothing below them is
ever visited.

Symbolic links are followed and there is no cycle detection: a link that points
back up the tree recurses until Python raises `RecursionError`.
"""

from __future__ import annotations

import os
from itertools import chain

from treeglob.predicates import DIRECTORY_EXCLUSIONS, PathPredicate, is_directory, is_file


def _accept_all(_path: str) -> bool:
    return True


def _children(path: str | os.PathLike[str]) -> list[str]:
    base = os.fspath(path)
    return [os.path.join(base, name) for name in os.listdir(base)]


def get_directories_in(path: str | os.PathLike[str]) -> list[str]:
    """Immediate subdirectories of `path` that pass every directory exclusion."""
    return [
        child
        for child in _children(path)
        if is_directory(child) and all(keep(child) for keep in DIRECTORY_EXCLUSIONS)
    ]


def get_files_in_directory(
    path: str | os.PathLike[str], file_filter: PathPredicate | None = None
) -> list[str]:
    """Regular files directly inside `path`, optionally filtered by `file_filter`."""
    keep = file_filter or _accept_all
    return [child for child in _children(path) if is_file(child) and keep(child)]


def get_directories_recursively_in(path: str | os.PathLike[str]) -> list[str]:
    """
    All non-excluded directories below `path`, depth-first pre-order: each
    subdirectory is followed by its own descendants before its next sibling.
    `path` itself is not included.
    """
    result: list[str] = []
    for subdir in get_directories_in(path):
        result.append(subdir)
        result.extend(get_directories_recursively_in(subdir))
    return result


def get_files_recursively_in(
    root_path: str | os.PathLike[str], file_filter: PathPredicate | None = None
) -> list[str]:
    """
    Files inside every directory returned by `get_directories_recursively_in`,
    in traversal order.

    Only subdirectories are scanned for files: files sitting directly in
    `root_path` are not returned.
    """
    dirs = get_directories_recursively_in(root_path)
    return list(chain.from_iterable(get_files_in_directory(d, file_filter) for d in dirs))
