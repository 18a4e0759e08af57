"""Character-level text diffing.

Provides line-ending normalization, scoped text reads, and the
character diff whose report is printed for every differing file.
"""

from __future__ import annotations

import difflib
import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from rich.text import Text

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from rich.console import Console

CRLF_PATTERN = re.compile(r"\r\n")

# Characters of unchanged text shown around each change
DEFAULT_CONTEXT = 30

# Largest changed block, as a product of both lengths, diffed per character
MAX_CHARACTER_DIFF_CELLS = 4_000_000


class ChangeType(str, Enum):
    """Kind of a single character-level change.

    Attributes:
        INSERT: Text present only in the actual file.
        DELETE: Text present only in the expected file.
        REPLACE: Text that differs between both files.
    """

    INSERT = "insert"
    DELETE = "delete"
    REPLACE = "replace"


@dataclass(frozen=True, slots=True)
class DiffChunk:
    """A contiguous run of changed characters.

    Attributes:
        change_type: Kind of change.
        offset: Character offset of the change in the expected text.
        line: 1-based line number of the change in the expected text.
        column: 1-based column of the change in the expected text.
        expected: Text removed from the expected content.
        actual: Text added by the actual content.
    """

    change_type: ChangeType
    offset: int
    line: int
    column: int
    expected: str
    actual: str


@dataclass(frozen=True, slots=True)
class FileDiff:
    """Character-level differences of one file.

    Attributes:
        path: Relative path of the compared file.
        chunks: Changed runs in expected-text order.
    """

    path: str
    chunks: tuple[DiffChunk, ...]

    @property
    def has_changes(self) -> bool:
        return bool(self.chunks)

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for JSON serialization."""
        return {
            "path": self.path,
            "changes": [
                {
                    "type": chunk.change_type.value,
                    "line": chunk.line,
                    "column": chunk.column,
                    "expected": chunk.expected,
                    "actual": chunk.actual,
                }
                for chunk in self.chunks
            ],
        }


def normalize_line_endings(text: str) -> str:
    """Collapse every CRLF sequence into a single newline."""
    return CRLF_PATTERN.sub("\n", text)


def read_text(path: Path) -> str:
    """Read a file as UTF-8 text with normalized line endings.

    Undecodable bytes are replaced with U+FFFD so the binary heuristic
    can spot them. Newlines are read untranslated so that only CRLF
    pairs are collapsed, lone carriage returns are kept.
    """
    with open(path, encoding="utf-8", errors="replace", newline="") as f:
        return normalize_line_endings(f.read())


def _position(text: str, offset: int) -> tuple[int, int]:
    line_start = text.rfind("\n", 0, offset) + 1
    return text.count("\n", 0, offset) + 1, offset - line_start + 1


def _common_prefix_length(a: str, b: str) -> int:
    limit = min(len(a), len(b))
    i = 0
    while i < limit and a[i] == b[i]:
        i += 1
    return i


def _common_suffix_length(a: str, b: str) -> int:
    limit = min(len(a), len(b))
    i = 0
    while i < limit and a[-1 - i] == b[-1 - i]:
        i += 1
    return i


def _line_starts(lines: list[str]) -> list[int]:
    starts = [0]
    for line in lines:
        starts.append(starts[-1] + len(line))
    return starts


def _diff_block(expected: str, actual: str, offset: int) -> Iterator[tuple[ChangeType, int, str, str]]:
    """Yield the character-level changes inside one changed block of lines.

    The shared prefix and suffix are trimmed first. What is left is diffed
    character by character unless it exceeds MAX_CHARACTER_DIFF_CELLS, in
    which case it is reported as a single replacement.
    """
    prefix = _common_prefix_length(expected, actual)
    suffix = _common_suffix_length(expected[prefix:], actual[prefix:])
    old = expected[prefix : len(expected) - suffix]
    new = actual[prefix : len(actual) - suffix]
    offset += prefix

    if not old:
        yield ChangeType.INSERT, offset, old, new
        return
    if not new:
        yield ChangeType.DELETE, offset, old, new
        return
    if len(old) * len(new) > MAX_CHARACTER_DIFF_CELLS:
        yield ChangeType.REPLACE, offset, old, new
        return

    matcher = difflib.SequenceMatcher(None, old, new, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag != "equal":
            yield ChangeType(tag), offset + i1, old[i1:i2], new[j1:j2]


def diff_chars(expected: str, actual: str, path: str) -> FileDiff:
    """Compute the character-level differences between two texts.

    Lines are aligned first; only the blocks of lines that changed are
    diffed character by character, so large files with a few edits stay
    cheap to compare.

    Args:
        expected: Normalized expected content.
        actual: Normalized actual content.
        path: Relative path the texts belong to.

    Returns:
        FileDiff listing every changed run, empty when the texts match.
    """
    if expected == actual:
        return FileDiff(path=path, chunks=())

    expected_lines = expected.splitlines(keepends=True)
    actual_lines = actual.splitlines(keepends=True)
    expected_starts = _line_starts(expected_lines)
    actual_starts = _line_starts(actual_lines)

    matcher = difflib.SequenceMatcher(None, expected_lines, actual_lines)
    chunks: list[DiffChunk] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            continue
        block = _diff_block(
            expected[expected_starts[i1] : expected_starts[i2]],
            actual[actual_starts[j1] : actual_starts[j2]],
            expected_starts[i1],
        )
        for change_type, offset, old, new in block:
            line, column = _position(expected, offset)
            chunks.append(
                DiffChunk(
                    change_type=change_type,
                    offset=offset,
                    line=line,
                    column=column,
                    expected=old,
                    actual=new,
                )
            )
    return FileDiff(path=path, chunks=tuple(chunks))


def render_file_diff(
    diff: FileDiff,
    expected: str,
    console: Console,
    context: int = DEFAULT_CONTEXT,
) -> None:
    """Print a file's differences with surrounding context.

    Removed text is printed as ``[-text-]`` in the ``removed`` style,
    added text as ``{+text+}`` in the ``added`` style, and the unchanged
    context in the ``muted`` style.

    Args:
        diff: The differences to print.
        expected: Normalized expected content the chunks refer to.
        console: Console to print to.
        context: Characters of unchanged text shown on each side.
    """
    if not diff.has_changes:
        return

    header = Text()
    header.append("Diff in ", style="bold_header")
    header.append(diff.path, style="bold_header")
    count = len(diff.chunks)
    header.append(f" ({count} change{'' if count == 1 else 's'})", style="muted")
    console.print(header)

    for chunk in diff.chunks:
        end = chunk.offset + len(chunk.expected)
        before = expected[max(0, chunk.offset - context) : chunk.offset]
        after = expected[end : end + context]

        line = Text("  ")
        line.append(f"@ {chunk.line}:{chunk.column} ", style="info")
        line.append(before, style="muted")
        if chunk.expected:
            line.append(f"[-{chunk.expected}-]", style="removed")
        if chunk.actual:
            line.append(f"{{+{chunk.actual}+}}", style="added")
        line.append(after, style="muted")
        console.print(line, soft_wrap=True)
