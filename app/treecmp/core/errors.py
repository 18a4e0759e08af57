"""Exceptions raised by tree comparison.

Comparison failures carry a FailureKind so callers can branch on the
failure category without parsing message text. Structural failures are
raised as soon as they are detected; content failures are accumulated
over the whole tree and reported once.
"""

from collections.abc import Sequence
from enum import Enum


class FailureKind(str, Enum):
    """Category of a failed comparison, in priority order.

    Attributes:
        MISSING_IGNORED_PATH: An ignored path was not generated at all.
        FILE_COUNT_MISMATCH: The trees hold a different number of files.
        FILE_IDENTITY_MISMATCH: Same number of files, different names.
        CONTENT_DIFF: One or more files differ in normalized content.
    """

    MISSING_IGNORED_PATH = "missing_ignored_path"
    FILE_COUNT_MISMATCH = "file_count_mismatch"
    FILE_IDENTITY_MISMATCH = "file_identity_mismatch"
    CONTENT_DIFF = "content_diff"


class TreeCompareError(Exception):
    """Base exception for treecmp errors."""


class TreeNotFoundError(TreeCompareError):
    """Raised when the expected or actual directory does not exist."""


class ComparisonFailure(TreeCompareError):
    """Base exception for a tree that does not match its expected output."""

    kind: FailureKind

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for JSON serialization."""
        return {"kind": self.kind.value, "message": str(self)}


class MissingIgnoredPathError(ComparisonFailure):
    """Raised when an ignored path is absent from the actual tree."""

    kind = FailureKind.MISSING_IGNORED_PATH

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(f"Ignored paths are not present in actual paths! Missing: {', '.join(self.missing)}")

    def to_dict(self) -> dict[str, object]:
        return {**super().to_dict(), "missing": list(self.missing)}


class FileCountMismatchError(ComparisonFailure):
    """Raised when the trees hold a different number of comparable files."""

    kind = FailureKind.FILE_COUNT_MISMATCH

    def __init__(self, expected_count: int, actual_count: int) -> None:
        self.expected_count = expected_count
        self.actual_count = actual_count
        super().__init__(f"Unequal number of files! Expected: {expected_count}, Actual: {actual_count}")

    def to_dict(self) -> dict[str, object]:
        return {**super().to_dict(), "expected": self.expected_count, "actual": self.actual_count}


class FileIdentityMismatchError(ComparisonFailure):
    """Raised when the sorted file lists diverge at some position."""

    kind = FailureKind.FILE_IDENTITY_MISMATCH

    def __init__(self, expected_path: str, actual_path: str) -> None:
        self.expected_path = expected_path
        self.actual_path = actual_path
        super().__init__(f"Different files built! Expected: {expected_path}, Actual: {actual_path}")

    def to_dict(self) -> dict[str, object]:
        return {**super().to_dict(), "expected": self.expected_path, "actual": self.actual_path}


class ContentDiffError(ComparisonFailure):
    """Raised after the full walk when any file content differed."""

    kind = FailureKind.CONTENT_DIFF

    def __init__(self, paths: Sequence[str]) -> None:
        self.paths = tuple(paths)
        super().__init__(f"Diffs found in files: {', '.join(self.paths)}")

    def to_dict(self) -> dict[str, object]:
        return {**super().to_dict(), "paths": list(self.paths)}


class SettingsError(TreeCompareError):
    """Base exception for settings file errors."""


class SettingsParseError(SettingsError):
    """Raised when the settings file is not valid TOML."""


class SettingsValidationError(SettingsError):
    """Raised when the settings file content is invalid."""
