"""Heuristic detection of binary files.

Classification is done first by file extension and, for unfamiliar
extensions, by sampling the content for control characters. The
heuristic is deliberately cheap: only three short chunks of the
content (start, middle, end) are inspected.
"""

from pathlib import PurePosixPath

# Characters sampled per chunk of content
CHUNK_LENGTH = 24

# Code points at or below this value mark content as binary
_MAX_CONTROL_CODE_POINT = 8

_REPLACEMENT_CHARACTER = "\ufffd"

BINARY_EXTENSIONS: frozenset[str] = frozenset(
    {
        "7z", "a", "aac", "aiff", "apk", "ar", "avi", "bin", "bmp", "bz2",
        "cab", "class", "dat", "db", "deb", "dll", "dmg", "doc", "docx",
        "dylib", "eot", "exe", "flac", "flv", "gif", "gz", "ico", "icns",
        "iso", "jar", "jpeg", "jpg", "lz", "lzma", "m4a", "m4v", "mkv",
        "mov", "mp3", "mp4", "mpeg", "mpg", "o", "ogg", "otf", "pdf",
        "png", "ppt", "pptx", "psd", "pyc", "rar", "rpm", "so", "sqlite",
        "swf", "tar", "tgz", "tif", "tiff", "ttf", "wav", "webm", "webp",
        "wma", "wmv", "xls", "xlsx", "xz", "zip",
    }
)  # fmt: skip

TEXT_EXTENSIONS: frozenset[str] = frozenset(
    {
        "cfg", "conf", "css", "csv", "htm", "html", "ini", "js", "json",
        "jsx", "less", "map", "markdown", "md", "mjs", "njk", "py", "rss",
        "sass", "scss", "sh", "svg", "toml", "ts", "tsx", "txt", "vue",
        "webmanifest", "xhtml", "xml", "yaml", "yml",
    }
)  # fmt: skip


def _extension_verdict(path: str) -> bool | None:
    """Classify a path by its extensions.

    Every dotted suffix of the file name is tried, last one first, so
    ``bundle.min.js`` and ``archive.tar.gz`` are both recognised.

    Returns:
        True for a known binary extension, False for a known text
        extension, None when no extension is recognised.
    """
    name = PurePosixPath(path).name.lower()
    parts = name.split(".")[1:]
    for part in reversed(parts):
        if part in BINARY_EXTENSIONS:
            return True
        if part in TEXT_EXTENSIONS:
            return False
    return None


def _sample_chunks(text: str) -> list[str]:
    """Return the start, middle and end chunks of a piece of content."""
    if len(text) <= CHUNK_LENGTH * 3:
        return [text]
    middle = len(text) // 2
    return [
        text[:CHUNK_LENGTH],
        text[middle : middle + CHUNK_LENGTH],
        text[-CHUNK_LENGTH:],
    ]


def _content_is_binary(sample: str | bytes) -> bool:
    if isinstance(sample, bytes):
        sample = sample.decode("utf-8", errors="replace")
    for chunk in _sample_chunks(sample):
        for char in chunk:
            if char == _REPLACEMENT_CHARACTER or ord(char) <= _MAX_CONTROL_CODE_POINT:
                return True
    return False


def is_likely_binary(path: str | None = None, sample: str | bytes | None = None) -> bool:
    """Guess whether a file holds binary content.

    The extension decides when it is recognised. Otherwise the content
    sample, if any, is checked for NUL and other low control characters
    and for undecodable bytes.

    Args:
        path: File name or relative path. May be None to classify a
            content sample alone.
        sample: File content, as text or raw bytes.

    Returns:
        True if the file should be treated as binary. Unknown extensions
        without a sample are treated as text.
    """
    if path:
        verdict = _extension_verdict(path)
        if verdict is not None:
            return verdict
    if sample is not None:
        return _content_is_binary(sample)
    return False
