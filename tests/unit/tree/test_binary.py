"""Tests for the binary content heuristic."""

import pytest
from treecmp.tree.binary import BINARY_EXTENSIONS, CHUNK_LENGTH, TEXT_EXTENSIONS, is_likely_binary


class TestExtensionLists:
    """Tests for the known extension sets."""

    def test_lists_do_not_overlap(self) -> None:
        """No extension is both binary and text."""
        assert not BINARY_EXTENSIONS & TEXT_EXTENSIONS

    def test_web_fonts_are_not_known(self) -> None:
        """Web fonts are handled by the blacklist, not the extension list."""
        assert "woff" not in BINARY_EXTENSIONS
        assert "woff2" not in BINARY_EXTENSIONS


class TestIsLikelyBinaryByPath:
    """Tests for classification by file extension."""

    @pytest.mark.parametrize("path", ["logo.png", "images/photo.JPG", "docs/manual.pdf", "archive.tar.gz"])
    def test_binary_extensions(self, path: str) -> None:
        """Known binary extensions are binary."""
        assert is_likely_binary(path) is True

    @pytest.mark.parametrize("path", ["index.html", "css/site.css", "bundle.min.js", "icon.svg"])
    def test_text_extensions(self, path: str) -> None:
        """Known text extensions are not binary."""
        assert is_likely_binary(path) is False

    def test_unknown_extension_without_sample(self) -> None:
        """Unknown extensions without content are treated as text."""
        assert is_likely_binary("data.xyz") is False
        assert is_likely_binary("CNAME") is False

    def test_extension_wins_over_content(self) -> None:
        """A recognised extension decides even if the sample disagrees."""
        assert is_likely_binary("page.html", "\x00\x00") is False
        assert is_likely_binary("logo.png", "plain text") is True


class TestIsLikelyBinaryByContent:
    """Tests for classification by content sample."""

    def test_plain_text(self) -> None:
        """Ordinary text is not binary."""
        assert is_likely_binary(None, "Hello, world!\n\tIndented line\n") is False

    def test_null_character(self) -> None:
        """A NUL character marks content as binary."""
        assert is_likely_binary(None, "abc\x00def") is True

    def test_low_control_character(self) -> None:
        """Control characters up to backspace mark content as binary."""
        assert is_likely_binary(None, "abc\x08def") is True

    def test_replacement_character(self) -> None:
        """Undecodable bytes (U+FFFD) mark content as binary."""
        assert is_likely_binary(None, "caf\ufffd") is True

    def test_bytes_sample(self) -> None:
        """Raw bytes are decoded before inspection."""
        assert is_likely_binary("blob.xyz", b"\xff\xfe\x00\x01") is True
        assert is_likely_binary("notes.xyz", "héllo".encode()) is False

    def test_empty_sample(self) -> None:
        """Empty content is not binary."""
        assert is_likely_binary(None, "") is False

    def test_only_sampled_chunks_are_inspected(self) -> None:
        """Control characters outside the start, middle and end chunks go unnoticed."""
        text = ["a"] * 1000
        text[CHUNK_LENGTH + 10] = "\x00"
        assert is_likely_binary(None, "".join(text)) is False

    def test_middle_chunk_is_inspected(self) -> None:
        """The middle chunk of long content is inspected."""
        text = ["a"] * 1000
        text[500] = "\x00"
        assert is_likely_binary(None, "".join(text)) is True

    def test_end_chunk_is_inspected(self) -> None:
        """The end chunk of long content is inspected."""
        assert is_likely_binary(None, "a" * 1000 + "\x01") is True
