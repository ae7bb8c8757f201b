"""
Glob-driven file discovery.

A glob pattern is resolved in two steps: `extract_root_folder_from_glob` picks the
narrowest directory that can contain every match, then the recursive walker scans
that directory and keeps the files `wcmatch` says match the pattern. The root is
only a scoping optimization, so when in doubt it widens to the current directory.
Files directly inside a narrowed root are scanned too; files directly inside the
current directory are not.

Searches are best-effort: `get_files_from_glob` returns an empty list on any
failure. Use `find_files_from_glob` to see what went wrong.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from wcmatch import glob as wcglob

from treeglob.gitignore import load_gitignore
from treeglob.walker import get_files_in_directory, get_files_recursively_in

log = logging.getLogger(__name__)

CURRENT_DIR = "." + os.sep

GLOB_FLAGS = wcglob.GLOBSTAR | wcglob.BRACE

# Characters that make a path segment a pattern rather than a literal name.
_GLOB_CHARS = frozenset("*?[{")


@dataclass(frozen=True)
class GlobResult:
    """
    Outcome of a glob search. `error` holds the exception that stopped the scan,
    in which case `files` is empty.
    """

    files: tuple[str, ...] = ()
    root: str = CURRENT_DIR
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def extract_root_folder_from_glob(pattern: str | None) -> str:
    """
    Directory to start scanning from for `pattern`.

    Only a literal leading directory (`src` in `src/**/*.ts`) narrows the scan.
    Missing, absolute, separator-free, and wildcard-led patterns all scan from
    the current directory.
    """
    if pattern is None:
        return CURRENT_DIR
    if pattern.strip().startswith(os.sep):
        return CURRENT_DIR
    if os.sep not in pattern:
        return CURRENT_DIR

    first = pattern.split(os.sep)[0]
    if first.strip().startswith("*") or any(c in _GLOB_CHARS for c in first):
        return CURRENT_DIR
    return first


def _strip_current_dir(path: str) -> str:
    while path.startswith(CURRENT_DIR):
        path = path[len(CURRENT_DIR) :]
    return path


def find_files_from_glob(pattern: str, *, respect_gitignore: bool = False) -> GlobResult:
    """
    Files matching `pattern`, in traversal order, with any leading `./` removed.

    With `respect_gitignore`, files matched by `.gitignore` in the current
    directory are dropped as well. Failures are logged and reported through
    `GlobResult.error` rather than raised.
    """
    root = CURRENT_DIR
    try:
        root = extract_root_folder_from_glob(pattern)
        match_pattern = _strip_current_dir(pattern)
        ignore_spec = load_gitignore(".") if respect_gitignore else None

        def matches(path: str) -> bool:
            candidate = _strip_current_dir(path)
            if not wcglob.globmatch(candidate, match_pattern, flags=GLOB_FLAGS):
                return False
            return ignore_spec is None or not ignore_spec.match_file(candidate)

        found = get_files_recursively_in(root, matches)
        if root != CURRENT_DIR:
            # A narrowed root is the pattern's own leading directory, so its
            # direct files can match too.
            found = get_files_in_directory(root, matches) + found
        files = tuple(_strip_current_dir(p) for p in found)
    except Exception as e:
        log.warning("Glob search for %r under %r failed: %s", pattern, root, e)
        return GlobResult(root=root, error=e)

    log.debug("Glob %r under %r matched %d files", pattern, root, len(files))
    return GlobResult(files=files, root=root)


def get_files_from_glob(pattern: str, *, respect_gitignore: bool = False) -> list[str]:
    """Files matching `pattern`, or an empty list if the search fails for any reason."""
    return list(find_files_from_glob(pattern, respect_gitignore=respect_gitignore).files)
