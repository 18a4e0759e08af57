"""Tree domain models.

This module defines the data structures describing a walked directory
tree and how each of its files is treated during comparison.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class FileKind(str, Enum):
    """How a file is treated by the content comparison.

    Attributes:
        TEXT: Read as text and diffed character by character.
        BINARY: Known binary extension, content is never compared.
        BLACKLISTED: Matches the blacklist, content is never compared.
    """

    TEXT = "text"
    BINARY = "binary"
    BLACKLISTED = "blacklisted"


@dataclass(frozen=True, slots=True)
class FileTree:
    """Sorted listing of the files below a root directory.

    Attributes:
        root: Directory the listing was taken from.
        paths: Relative, slash-separated file paths in lexical order.
            Directories are not listed.
    """

    root: Path
    paths: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate that paths are sorted and relative."""
        if list(self.paths) != sorted(self.paths):
            msg = "FileTree paths must be sorted"
            raise ValueError(msg)
        for path in self.paths:
            if not path or path.startswith("/"):
                msg = f"FileTree paths must be relative, got {path!r}"
                raise ValueError(msg)

    def __len__(self) -> int:
        return len(self.paths)

    def __contains__(self, path: object) -> bool:
        return path in self.paths

    def without(self, excluded: frozenset[str]) -> tuple[str, ...]:
        """Return the paths not listed in ``excluded``, order preserved."""
        return tuple(p for p in self.paths if p not in excluded)

    def resolve(self, path: str) -> Path:
        """Return the absolute filesystem location of a relative path."""
        return self.root.joinpath(*path.split("/"))
