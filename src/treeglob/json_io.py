"""
Small JSON and text file helpers.

`write_json_file` creates any missing parent directories before writing, and
`json_from` treats a missing file as an empty document.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from strif import atomic_output_file

from treeglob.paths import get_parent_dirs
from treeglob.predicates import is_directory, is_file

log = logging.getLogger(__name__)

JSON_INDENT = 2


def _ensure_directory_exists(directory_path: str) -> None:
    if os.path.exists(directory_path):
        return
    try:
        os.mkdir(directory_path)
    except FileExistsError:
        # Created by someone else since the check.
        return
    log.debug("Created directory %s", directory_path)


def _ensure_directory_structure_exists(file_path: str) -> None:
    """
    Create the parent directories of `file_path` one level at a time, starting
    from `.` for relative paths and from the filesystem root for absolute ones.
    """
    partial_path = Path(file_path).anchor or "."
    for directory in get_parent_dirs(file_path):
        # Empty segments come from the leading separator or doubled separators.
        if not directory:
            continue
        partial_path = os.path.join(partial_path, directory)
        _ensure_directory_exists(partial_path)


def write_json_file(data: Any, *paths: str | os.PathLike[str]) -> None:
    """
    Serialize `data` as 2-space indented JSON and write it to the file formed by
    joining `paths`, overwriting any existing content.
    """
    text = json.dumps(data, indent=JSON_INDENT, ensure_ascii=False)
    file_path = os.path.join(*(os.fspath(p) for p in paths))
    _ensure_directory_structure_exists(file_path)
    with atomic_output_file(file_path) as temp_path:
        Path(temp_path).write_text(text, encoding="utf-8")


def json_from(file_path: str | os.PathLike[str]) -> Any:
    """Parsed JSON from `file_path`, or `{}` if it isn't an existing regular file."""
    if not os.path.isfile(file_path):
        return {}
    return json.loads(Path(file_path).read_text(encoding="utf-8"))


def file_exists(file_path: str | os.PathLike[str]) -> bool:
    """
    True if `file_path` is an existing regular file, `False` if nothing is there.
    Raises `IsADirectoryError` if it's a directory.
    """
    if not os.path.exists(file_path):
        return False
    if is_file(file_path):
        return True
    if is_directory(file_path):
        raise IsADirectoryError(f"File '{os.fspath(file_path)}' is a directory but should be a file.")
    return False


def read_all_lines(file_path: str | os.PathLike[str]) -> list[str]:
    """Contents of a UTF-8 text file split on `\\n`."""
    return Path(file_path).read_text(encoding="utf-8").split("\n")
