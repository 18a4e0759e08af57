"""Blacklist of files that are never content-compared.

Some files are either not worth diffing (logs) or are binary formats the
extension heuristic does not know about (web fonts). Their presence is
still checked, only their content is skipped.
"""

import fnmatch
from collections.abc import Iterable
from dataclasses import dataclass

# Glob-style patterns. A pattern without a slash matches the file name at
# any depth. A pattern with a slash, including a leading one, matches the
# whole relative path from the tree root.
DEFAULT_BLACKLIST_PATTERNS: tuple[str, ...] = (
    "*.log",
    "*.woff",
    "*.woff2",
)


@dataclass(frozen=True, slots=True)
class IgnoreSet:
    """Immutable set of glob patterns classifying never-compared files.

    Attributes:
        patterns: Glob patterns, matched with fnmatch semantics.
    """

    patterns: tuple[str, ...] = DEFAULT_BLACKLIST_PATTERNS

    @classmethod
    def from_patterns(cls, patterns: Iterable[str]) -> "IgnoreSet":
        """Build an IgnoreSet from any iterable of patterns.

        Surrounding whitespace is stripped, blank and duplicate entries
        are dropped.
        """
        cleaned: list[str] = []
        for pattern in patterns:
            stripped = pattern.strip()
            if stripped and stripped not in cleaned:
                cleaned.append(stripped)
        return cls(tuple(cleaned))

    def ignores(self, path: str) -> bool:
        """Check whether a relative path matches any blacklist pattern.

        Args:
            path: Relative, slash-separated file path.

        Returns:
            True if the file's content must not be compared.
        """
        name = path.rsplit("/", 1)[-1]
        for pattern in self.patterns:
            candidate = path if "/" in pattern else name
            if fnmatch.fnmatchcase(candidate, pattern.lstrip("/")):
                return True
        return False
