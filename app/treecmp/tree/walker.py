"""Recursive directory walking.

Produces the deterministic, sorted file listing that the comparator
walks pairwise by index.
"""

import logging
from pathlib import Path

from treecmp.core.errors import TreeNotFoundError
from treecmp.tree.binary import is_likely_binary
from treecmp.tree.ignore import IgnoreSet
from treecmp.tree.models import FileKind, FileTree

logger = logging.getLogger(__name__)


def walk_tree(root: Path) -> FileTree:
    """List every file below a directory.

    Directories themselves are not listed. Symbolic links pointing at
    files are listed like regular files.

    Args:
        root: Directory to walk.

    Returns:
        FileTree with relative, slash-separated paths in lexical order.

    Raises:
        TreeNotFoundError: If root does not exist or is not a directory.
    """
    if not root.is_dir():
        msg = f"Directory not found: {root}"
        raise TreeNotFoundError(msg)

    paths = sorted(entry.relative_to(root).as_posix() for entry in root.rglob("*") if entry.is_file())
    logger.debug("Walked %s: %d files", root, len(paths))
    return FileTree(root=root, paths=tuple(paths))


def classify_path(path: str, blacklist: IgnoreSet) -> FileKind:
    """Decide how a file is treated by the content comparison.

    The binary check runs before the blacklist, so a file matching both
    is reported as binary.

    Args:
        path: Relative file path.
        blacklist: Patterns of never-compared files.

    Returns:
        The FileKind of the path.
    """
    if is_likely_binary(path):
        return FileKind.BINARY
    if blacklist.ignores(path):
        return FileKind.BLACKLISTED
    return FileKind.TEXT
