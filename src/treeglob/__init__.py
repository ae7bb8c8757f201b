"""
Filesystem traversal, glob-based file discovery, and small JSON file helpers.

Usage::

    from treeglob import get_files_from_glob, json_from, write_json_file

    for path in get_files_from_glob("src/**/*.json"):
        data = json_from(path)

    write_json_file({"ok": True}, "out", "reports", "summary.json")
"""

from treeglob.glob_finder import (
    GlobResult,
    extract_root_folder_from_glob,
    find_files_from_glob,
    get_files_from_glob,
)
from treeglob.json_io import file_exists, json_from, read_all_lines, write_json_file
from treeglob.paths import get_filename, get_parent_dirs
from treeglob.predicates import (
    ignore_build_dir,
    ignore_dot_dir,
    ignore_node_module,
    is_directory,
    is_file,
)
from treeglob.walker import (
    get_directories_in,
    get_directories_recursively_in,
    get_files_in_directory,
    get_files_recursively_in,
)

__all__ = [
    "GlobResult",
    "extract_root_folder_from_glob",
    "file_exists",
    "find_files_from_glob",
    "get_directories_in",
    "get_directories_recursively_in",
    "get_filename",
    "get_files_from_glob",
    "get_files_in_directory",
    "get_files_recursively_in",
    "get_parent_dirs",
    "ignore_build_dir",
    "ignore_dot_dir",
    "ignore_node_module",
    "is_directory",
    "is_file",
    "json_from",
    "read_all_lines",
    "write_json_file",
]
