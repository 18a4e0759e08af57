"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

TreeFactory = Callable[[str, dict[str, str | bytes]], Path]


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user settings never leak in."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def make_tree(tmp_path: Path) -> TreeFactory:
    """Create a directory tree below tmp_path from a mapping of relative paths to content.

    Text content is written as UTF-8 bytes so line endings are kept as given.
    """

    def _make(name: str, files: dict[str, str | bytes]) -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        for rel_path, content in files.items():
            target = root / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            data = content.encode("utf-8") if isinstance(content, str) else content
            target.write_bytes(data)
        return root

    return _make


@pytest.fixture
def site_files() -> dict[str, str | bytes]:
    """A small generated site with text, binary and blacklisted files."""
    return {
        "index.html": "<html>\n<body>Hello</body>\n</html>\n",
        "about/index.html": "<html>\n<body>About</body>\n</html>\n",
        "css/site.css": "body { margin: 0; }\n",
        "images/logo.png": b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR",
        "fonts/icons.woff2": b"wOF2\x00\x01\x00\x00",
        "build.log": "built in 12ms\n",
    }
