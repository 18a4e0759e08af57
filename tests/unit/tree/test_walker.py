"""Tests for directory walking and file classification."""

from collections.abc import Callable
from pathlib import Path

import pytest
from treecmp.core.errors import TreeNotFoundError
from treecmp.tree.ignore import IgnoreSet
from treecmp.tree.models import FileKind
from treecmp.tree.walker import classify_path, walk_tree

TreeFactory = Callable[[str, dict[str, str | bytes]], Path]


class TestWalkTree:
    """Tests for walk_tree."""

    def test_lists_files_sorted(self, make_tree: TreeFactory) -> None:
        """Files at every depth are listed in lexical order."""
        root = make_tree(
            "site",
            {
                "z.html": "z",
                "a/b/c.html": "c",
                "a/a.html": "a",
                "index.html": "i",
            },
        )

        tree = walk_tree(root)

        assert tree.root == root
        assert tree.paths == ("a/a.html", "a/b/c.html", "index.html", "z.html")

    def test_excludes_directories(self, make_tree: TreeFactory) -> None:
        """Directories, including empty ones, are not listed."""
        root = make_tree("site", {"posts/first.html": "1"})
        (root / "empty").mkdir()

        tree = walk_tree(root)

        assert tree.paths == ("posts/first.html",)

    def test_empty_directory(self, tmp_path: Path) -> None:
        """An empty directory yields an empty listing."""
        root = tmp_path / "empty"
        root.mkdir()
        assert walk_tree(root).paths == ()

    def test_deterministic(self, make_tree: TreeFactory) -> None:
        """Walking the same tree twice yields the same listing."""
        root = make_tree("site", {"b.txt": "b", "a.txt": "a", "c/d.txt": "d"})
        assert walk_tree(root) == walk_tree(root)

    def test_missing_directory(self, tmp_path: Path) -> None:
        """A missing directory raises TreeNotFoundError."""
        with pytest.raises(TreeNotFoundError, match="Directory not found"):
            walk_tree(tmp_path / "missing")

    def test_file_instead_of_directory(self, tmp_path: Path) -> None:
        """A file root raises TreeNotFoundError."""
        file_path = tmp_path / "file.txt"
        file_path.write_text("x")
        with pytest.raises(TreeNotFoundError):
            walk_tree(file_path)


class TestClassifyPath:
    """Tests for classify_path."""

    def test_text(self) -> None:
        """HTML files are text."""
        assert classify_path("index.html", IgnoreSet()) == FileKind.TEXT

    def test_binary(self) -> None:
        """Images are binary."""
        assert classify_path("images/logo.png", IgnoreSet()) == FileKind.BINARY

    def test_blacklisted(self) -> None:
        """Logs and fonts are blacklisted."""
        assert classify_path("build.log", IgnoreSet()) == FileKind.BLACKLISTED
        assert classify_path("fonts/icons.woff2", IgnoreSet()) == FileKind.BLACKLISTED

    def test_binary_checked_before_blacklist(self) -> None:
        """A file matching both checks is reported as binary."""
        assert classify_path("logo.png", IgnoreSet(("*.png",))) == FileKind.BINARY

    def test_custom_blacklist(self) -> None:
        """Custom patterns replace the defaults."""
        blacklist = IgnoreSet(("*.map",))
        assert classify_path("app.js.map", blacklist) == FileKind.BLACKLISTED
        assert classify_path("build.log", blacklist) == FileKind.TEXT
