"""Scan command implementation.

Lists the files of one tree together with how the comparison treats
each of them.
"""

import json
from collections import Counter
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from treecmp.core.config import load_settings
from treecmp.core.errors import SettingsError, TreeNotFoundError
from treecmp.tree.ignore import IgnoreSet
from treecmp.tree.models import FileKind
from treecmp.tree.walker import classify_path, walk_tree
from treecmp.utils.formatting import console, create_file_table, print_error, print_info

app = typer.Typer(
    help="List the files of a tree and how they are compared.",
    invoke_without_command=True,
)

_KIND_STYLES: dict[FileKind, str] = {
    FileKind.TEXT: "text",
    FileKind.BINARY: "skipped",
    FileKind.BLACKLISTED: "muted",
}


@app.callback(invoke_without_command=True)
def scan_tree(
    ctx: typer.Context,
    directory: Annotated[
        Path,
        typer.Option(
            "--dir",
            "-d",
            help="Tree to list.",
            file_okay=False,
        ),
    ] = Path("_site"),
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Settings file to use instead of the default.",
            dir_okay=False,
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            "-j",
            help="Output as JSON for scripting.",
        ),
    ] = False,
) -> None:
    """List the files of a tree and how they are compared.

    Each file is classified as text (diffed), binary (presence only), or
    blacklisted (presence only).
    """
    if ctx.invoked_subcommand is not None:
        return

    try:
        settings = load_settings(config_path)
    except SettingsError as e:
        print_error(f"Failed to load settings: {e}")
        raise typer.Exit(code=1) from e

    try:
        tree = walk_tree(directory)
    except TreeNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    blacklist = IgnoreSet.from_patterns(settings.blacklist)
    classified = [(path, classify_path(path, blacklist)) for path in tree.paths]

    if json_output:
        data = {
            "root": str(tree.root),
            "files": [{"path": path, "kind": kind.value} for path, kind in classified],
        }
        console.print_json(json.dumps(data))
        return

    if not classified:
        print_info(f"No files found in {tree.root}")
        return

    table = create_file_table(f"Files in {tree.root}")
    for path, kind in classified:
        style = _KIND_STYLES[kind]
        table.add_row(escape(path), f"[{style}]{kind.value}[/{style}]")
    console.print(table)

    counts = Counter(kind for _, kind in classified)
    summary = ", ".join(f"{counts[kind]} {kind.value}" for kind in FileKind if counts[kind])
    console.print(f"\nTotal: {len(classified)} files ({summary})")
