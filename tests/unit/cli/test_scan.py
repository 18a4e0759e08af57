"""Unit tests for the scan command."""

import json
from collections.abc import Callable
from pathlib import Path

from treecmp.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()

TreeFactory = Callable[[str, dict[str, str | bytes]], Path]


class TestScanCommand:
    """Tests for treecmp scan."""

    def test_table(self, make_tree: TreeFactory, site_files: dict[str, str | bytes]) -> None:
        """Files are listed with their classification."""
        root = make_tree("_site", site_files)

        result = runner.invoke(app, ["scan", "--dir", str(root)])

        assert result.exit_code == 0
        assert "index.html" in result.stdout
        assert "blacklisted" in result.stdout
        assert "Total: 6 files" in result.stdout

    def test_json(self, make_tree: TreeFactory, site_files: dict[str, str | bytes]) -> None:
        """--json lists every file and its kind."""
        root = make_tree("_site", site_files)

        result = runner.invoke(app, ["scan", "-d", str(root), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        kinds = {entry["path"]: entry["kind"] for entry in data["files"]}
        assert kinds == {
            "about/index.html": "text",
            "build.log": "blacklisted",
            "css/site.css": "text",
            "fonts/icons.woff2": "blacklisted",
            "images/logo.png": "binary",
            "index.html": "text",
        }

    def test_settings_blacklist(self, make_tree: TreeFactory, tmp_path: Path) -> None:
        """The blacklist comes from the settings file."""
        root = make_tree("_site", {"app.js.map": "{}", "build.log": "ok"})
        config = tmp_path / "config.toml"
        config.write_text('[compare]\nblacklist = ["*.map"]\n')

        result = runner.invoke(app, ["scan", "-d", str(root), "-c", str(config), "--json"])

        kinds = {entry["path"]: entry["kind"] for entry in json.loads(result.stdout)["files"]}
        assert kinds == {"app.js.map": "blacklisted", "build.log": "text"}

    def test_empty_tree(self, tmp_path: Path) -> None:
        """An empty tree reports that no files were found."""
        root = tmp_path / "_site"
        root.mkdir()

        result = runner.invoke(app, ["scan", "-d", str(root)])

        assert result.exit_code == 0
        assert "No files found" in result.stdout

    def test_missing_directory(self, tmp_path: Path) -> None:
        """A missing directory exits with code 1."""
        result = runner.invoke(app, ["scan", "-d", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "Directory not found" in (result.stdout + result.stderr)
