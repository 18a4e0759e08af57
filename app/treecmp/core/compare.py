"""Comparison of a generated directory tree against expected output.

This module provides the TreeComparator class that checks a freshly
generated tree (conventionally ``_site``) against a checked-in reference
tree (conventionally ``expected``).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from treecmp.core.errors import (
    ComparisonFailure,
    ContentDiffError,
    FileCountMismatchError,
    FileIdentityMismatchError,
    MissingIgnoredPathError,
)
from treecmp.core.textdiff import DEFAULT_CONTEXT, FileDiff, diff_chars, read_text, render_file_diff
from treecmp.tree.binary import is_likely_binary
from treecmp.tree.ignore import IgnoreSet
from treecmp.tree.walker import walk_tree
from treecmp.utils.formatting import console as default_console

if TYPE_CHECKING:
    from rich.console import Console

    from treecmp.core.config import CompareSettings

logger = logging.getLogger(__name__)

DEFAULT_EXPECTED_PATH = "expected"
DEFAULT_ACTUAL_PATH = "_site"


@dataclass(frozen=True, slots=True)
class ComparisonReport:
    """Outcome of comparing two directory trees.

    Attributes:
        expected_root: Directory holding the expected files.
        actual_root: Directory holding the generated files.
        compared: Number of files whose text content was diffed.
        skipped: Paths whose content was not compared (binary,
            blacklisted, or content that looked binary).
        diffs: Per-file differences, one entry per differing file.
        warnings: Human-readable warnings raised during the walk.
        failure: The first failure detected, None if the trees match.
    """

    expected_root: Path
    actual_root: Path
    compared: int = 0
    skipped: tuple[str, ...] = ()
    diffs: tuple[FileDiff, ...] = ()
    warnings: tuple[str, ...] = ()
    failure: ComparisonFailure | None = None

    @property
    def passed(self) -> bool:
        """Check if the actual tree matches the expected tree."""
        return self.failure is None

    def raise_for_failure(self) -> None:
        """Raise the recorded failure, if any.

        Raises:
            ComparisonFailure: The failure recorded in this report.
        """
        if self.failure is not None:
            raise self.failure

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for JSON serialization.

        Returns:
            Dictionary representation of the report.
        """
        return {
            "passed": self.passed,
            "expected": str(self.expected_root),
            "actual": str(self.actual_root),
            "summary": {
                "compared": self.compared,
                "skipped": len(self.skipped),
                "differing": len(self.diffs),
            },
            "failure": self.failure.to_dict() if self.failure is not None else None,
            "diffs": [d.to_dict() for d in self.diffs],
            "skipped": list(self.skipped),
            "warnings": list(self.warnings),
        }


class TreeComparator:
    """Compares an actual directory tree against an expected one.

    Structural checks run first and stop at the first failure, in this
    order: ignored paths missing from the actual tree, unequal file
    counts, differing file names at the same sorted position. Content
    is then diffed for every text file, and all differing files are
    collected before the comparison fails.

    Args:
        blacklist: Patterns of files never content-compared. Defaults
            to log files and web fonts.
        console: Console the per-file diffs are printed to. Defaults to
            the shared stdout console.
        context: Characters of unchanged text printed around each change.

    Example:
        >>> comparator = TreeComparator()
        >>> report = comparator.run(Path("test_site"), ignored_paths=["favicon.ico"])
        >>> if not report.passed:
        ...     print(report.failure)
    """

    def __init__(
        self,
        blacklist: IgnoreSet | None = None,
        *,
        console: Console | None = None,
        context: int = DEFAULT_CONTEXT,
    ) -> None:
        self._blacklist = blacklist if blacklist is not None else IgnoreSet()
        self._console = console
        self._context = context

    @classmethod
    def from_settings(cls, settings: CompareSettings, *, console: Console | None = None) -> TreeComparator:
        """Build a comparator from loaded settings."""
        return cls(
            IgnoreSet.from_patterns(settings.blacklist),
            console=console,
            context=settings.context,
        )

    @property
    def blacklist(self) -> IgnoreSet:
        return self._blacklist

    def _get_console(self) -> Console:
        return self._console if self._console is not None else default_console

    def run(
        self,
        root: Path | str,
        expected_relative_path: str = DEFAULT_EXPECTED_PATH,
        actual_relative_path: str = DEFAULT_ACTUAL_PATH,
        ignored_paths: Iterable[str] = (),
    ) -> ComparisonReport:
        """Compare the two trees and report the outcome.

        Comparison failures are recorded in the report rather than
        raised.

        Args:
            root: Base directory holding both trees.
            expected_relative_path: Expected tree, relative to root.
            actual_relative_path: Actual tree, relative to root.
            ignored_paths: Relative paths that must exist in the actual
                tree but are excluded from comparison.

        Returns:
            ComparisonReport describing the outcome.

        Raises:
            TreeNotFoundError: If either tree directory does not exist.
        """
        base = Path(root)
        expected_tree = walk_tree(base / expected_relative_path)
        actual_tree = walk_tree(base / actual_relative_path)
        ignored = tuple(dict.fromkeys(ignored_paths))

        def fail(failure: ComparisonFailure) -> ComparisonReport:
            logger.debug("Comparison failed (%s): %s", failure.kind.value, failure)
            return ComparisonReport(
                expected_root=expected_tree.root,
                actual_root=actual_tree.root,
                failure=failure,
            )

        missing = [p for p in ignored if p not in actual_tree]
        if missing:
            return fail(MissingIgnoredPathError(missing))

        excluded = frozenset(ignored)
        expected_paths = expected_tree.without(excluded)
        actual_paths = actual_tree.without(excluded)

        if len(expected_paths) != len(actual_paths):
            return fail(FileCountMismatchError(len(expected_paths), len(actual_paths)))

        for expected_path, actual_path in zip(expected_paths, actual_paths, strict=True):
            if expected_path != actual_path:
                return fail(FileIdentityMismatchError(expected_path, actual_path))

        console = self._get_console()
        compared = 0
        skipped: list[str] = []
        diffs: list[FileDiff] = []
        warnings: list[str] = []

        for path in expected_paths:
            if is_likely_binary(path) or self._blacklist.ignores(path):
                logger.debug("Skipping content comparison of %s", path)
                skipped.append(path)
                continue

            expected = read_text(expected_tree.resolve(path))
            actual = read_text(actual_tree.resolve(path))

            if is_likely_binary(None, expected):
                message = f"Unrecognised file extension {path} contains null characters, skipping"
                logger.warning("Unrecognised file extension %s contains null characters, skipping", path)
                warnings.append(message)
                skipped.append(path)
                continue

            compared += 1
            diff = diff_chars(expected, actual, path)
            if diff.has_changes:
                render_file_diff(diff, expected, console, self._context)
                diffs.append(diff)

        failure: ComparisonFailure | None = None
        if diffs:
            failure = ContentDiffError([d.path for d in diffs])

        return ComparisonReport(
            expected_root=expected_tree.root,
            actual_root=actual_tree.root,
            compared=compared,
            skipped=tuple(skipped),
            diffs=tuple(diffs),
            warnings=tuple(warnings),
            failure=failure,
        )

    def compare(
        self,
        root: Path | str,
        expected_relative_path: str = DEFAULT_EXPECTED_PATH,
        actual_relative_path: str = DEFAULT_ACTUAL_PATH,
        ignored_paths: Iterable[str] = (),
    ) -> ComparisonReport:
        """Compare the two trees, raising on any failure.

        Takes the same arguments as :meth:`run`.

        Returns:
            The passing ComparisonReport.

        Raises:
            TreeNotFoundError: If either tree directory does not exist.
            MissingIgnoredPathError: If an ignored path was not generated.
            FileCountMismatchError: If the trees hold different file counts.
            FileIdentityMismatchError: If the sorted file names diverge.
            ContentDiffError: If any file content differs.
        """
        report = self.run(root, expected_relative_path, actual_relative_path, ignored_paths)
        report.raise_for_failure()
        return report


def compare(
    root: Path | str,
    expected_relative_path: str = DEFAULT_EXPECTED_PATH,
    actual_relative_path: str = DEFAULT_ACTUAL_PATH,
    ignored_paths: Iterable[str] = (),
) -> None:
    """Assert that a generated tree matches its expected output.

    Intended to be called from test suites after the site generator has
    produced the actual tree. Returns nothing on success.

    Args:
        root: Base directory holding both trees.
        expected_relative_path: Expected tree, relative to root.
        actual_relative_path: Actual tree, relative to root.
        ignored_paths: Relative paths checked for existence only.

    Raises:
        TreeCompareError: If a tree is missing or the trees differ.
    """
    TreeComparator().compare(root, expected_relative_path, actual_relative_path, ignored_paths)
