"""Settings commands.

Provides commands to show the effective settings and to write a
default settings file.
"""

import json
from pathlib import Path
from typing import Annotated

import tomli_w
import typer
from rich.markup import escape

from treecmp.core.config import CompareSettings, load_settings, save_settings
from treecmp.core.errors import SettingsError
from treecmp.core.paths import get_settings_path
from treecmp.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or create the treecmp settings file.",
    no_args_is_help=True,
)

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Settings file to use instead of the default.",
        dir_okay=False,
    ),
]


@app.command()
def show(
    config_path: ConfigOption = None,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            "-j",
            help="Output as JSON for scripting.",
        ),
    ] = False,
) -> None:
    """Show the effective settings."""
    path = config_path or get_settings_path()
    try:
        settings = load_settings(path)
    except SettingsError as e:
        print_error(f"Failed to load settings: {e}")
        raise typer.Exit(code=1) from e

    if json_output:
        console.print_json(json.dumps(settings.model_dump(mode="json")))
        return

    if path.exists():
        print_info(f"Settings file: {path}")
    else:
        print_info("No settings file found, using defaults.")
    console.print(escape(tomli_w.dumps({"compare": settings.model_dump(mode="json")})), highlight=False)


@app.command()
def init(
    config_path: ConfigOption = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing settings file.",
        ),
    ] = False,
) -> None:
    """Write a settings file with the default values."""
    path = config_path or get_settings_path()
    if path.exists() and not force:
        print_error(f"Settings file already exists: {path}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    try:
        saved = save_settings(CompareSettings(), path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Settings written to {saved}")
