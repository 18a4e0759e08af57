"""Unit tests for the comparison exception hierarchy."""

import pytest
from treecmp.core.errors import (
    ComparisonFailure,
    ContentDiffError,
    FailureKind,
    FileCountMismatchError,
    FileIdentityMismatchError,
    MissingIgnoredPathError,
    SettingsError,
    SettingsParseError,
    TreeCompareError,
    TreeNotFoundError,
)


class TestFailureKinds:
    """Tests for the FailureKind tags."""

    @pytest.mark.parametrize(
        ("error", "kind"),
        [
            (MissingIgnoredPathError(["a.png"]), FailureKind.MISSING_IGNORED_PATH),
            (FileCountMismatchError(2, 1), FailureKind.FILE_COUNT_MISMATCH),
            (FileIdentityMismatchError("a", "b"), FailureKind.FILE_IDENTITY_MISMATCH),
            (ContentDiffError(["a.html"]), FailureKind.CONTENT_DIFF),
        ],
    )
    def test_kind(self, error: ComparisonFailure, kind: FailureKind) -> None:
        """Every failure carries its kind and is a TreeCompareError."""
        assert error.kind == kind
        assert isinstance(error, TreeCompareError)
        assert error.to_dict()["kind"] == kind.value


class TestMessages:
    """Tests for failure messages."""

    def test_missing_ignored_lists_paths(self) -> None:
        """The message names every missing path."""
        error = MissingIgnoredPathError(["a.png", "b.png"])
        assert "a.png, b.png" in str(error)
        assert error.to_dict()["missing"] == ["a.png", "b.png"]

    def test_content_diff_lists_paths(self) -> None:
        """The message names every differing file."""
        error = ContentDiffError(["a.html", "b.html"])
        assert str(error) == "Diffs found in files: a.html, b.html"
        assert error.to_dict()["paths"] == ["a.html", "b.html"]

    def test_identity_to_dict(self) -> None:
        """Identity failures serialize both paths."""
        data = FileIdentityMismatchError("a.html", "b.html").to_dict()
        assert data["expected"] == "a.html"
        assert data["actual"] == "b.html"


class TestHierarchy:
    """Tests for non-comparison errors."""

    def test_tree_not_found_is_not_a_comparison_failure(self) -> None:
        """A missing tree is a precondition error, not a comparison failure."""
        assert not issubclass(TreeNotFoundError, ComparisonFailure)
        assert issubclass(TreeNotFoundError, TreeCompareError)

    def test_settings_errors(self) -> None:
        """Settings errors share a base class."""
        assert issubclass(SettingsParseError, SettingsError)
        assert issubclass(SettingsError, TreeCompareError)
