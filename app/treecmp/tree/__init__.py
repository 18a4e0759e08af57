"""Directory tree walking and file classification.

This module provides the sorted file listing of a directory tree,
the blacklist of never-compared files, and the binary-content
heuristic used to decide which files are diffed as text.
"""

from treecmp.tree.binary import is_likely_binary
from treecmp.tree.ignore import DEFAULT_BLACKLIST_PATTERNS, IgnoreSet
from treecmp.tree.models import FileKind, FileTree
from treecmp.tree.walker import classify_path, walk_tree

__all__ = [
    "DEFAULT_BLACKLIST_PATTERNS",
    "FileKind",
    "FileTree",
    "IgnoreSet",
    "classify_path",
    "is_likely_binary",
    "walk_tree",
]
