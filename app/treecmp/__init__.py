"""treecmp - Compare generated directory trees against expected output.

Walks an expected tree and an actual (generated) tree, checks that both
hold the same files, and diffs the text content of every comparable file.
"""

__version__ = "0.1.0"

from treecmp.core.compare import ComparisonReport, TreeComparator, compare
from treecmp.core.errors import (
    ComparisonFailure,
    ContentDiffError,
    FailureKind,
    FileCountMismatchError,
    FileIdentityMismatchError,
    MissingIgnoredPathError,
    TreeCompareError,
    TreeNotFoundError,
)

__all__ = [
    "ComparisonFailure",
    "ComparisonReport",
    "ContentDiffError",
    "FailureKind",
    "FileCountMismatchError",
    "FileIdentityMismatchError",
    "MissingIgnoredPathError",
    "TreeCompareError",
    "TreeComparator",
    "TreeNotFoundError",
    "__version__",
    "compare",
]
