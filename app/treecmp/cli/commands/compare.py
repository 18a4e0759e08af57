"""Compare command implementation.

Compares a generated tree with its expected output and reports every
structural or content difference.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from treecmp.core.compare import ComparisonReport, TreeComparator
from treecmp.core.config import load_settings
from treecmp.core.errors import ContentDiffError, SettingsError, TreeNotFoundError
from treecmp.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_success,
)

app = typer.Typer(
    help="Compare a generated tree with its expected output.",
    invoke_without_command=True,
)


def _print_summary(report: ComparisonReport) -> None:
    """Print summary line for a comparison report.

    Args:
        report: The report to summarize.
    """
    parts = [f"[info]{report.compared} compared[/info]"]
    if report.skipped:
        parts.append(f"[skipped]{len(report.skipped)} skipped[/skipped]")
    if report.diffs:
        parts.append(f"[removed]{len(report.diffs)} differing[/removed]")
    console.print(f"\nSummary: {', '.join(parts)}")


@app.callback(invoke_without_command=True)
def compare_trees(
    ctx: typer.Context,
    root: Annotated[
        Path,
        typer.Option(
            "--root",
            "-r",
            help="Directory holding both trees.",
            file_okay=False,
        ),
    ] = Path("."),
    expected: Annotated[
        str | None,
        typer.Option(
            "--expected",
            "-e",
            help="Expected tree, relative to the root. Defaults to the configured value.",
        ),
    ] = None,
    actual: Annotated[
        str | None,
        typer.Option(
            "--actual",
            "-a",
            help="Generated tree, relative to the root. Defaults to the configured value.",
        ),
    ] = None,
    ignore: Annotated[
        list[str] | None,
        typer.Option(
            "--ignore",
            "-i",
            help="Relative path that must exist but is not compared. Repeatable.",
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Settings file to use instead of the default.",
            dir_okay=False,
        ),
    ] = None,
    brief: Annotated[
        bool,
        typer.Option(
            "--brief",
            "-b",
            help="Show summary counts only.",
        ),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            "-j",
            help="Output as JSON for scripting.",
        ),
    ] = False,
) -> None:
    """Compare a generated tree with its expected output.

    Structural checks stop at the first failure:
      1. Every --ignore path exists in the generated tree
      2. Both trees hold the same number of files
      3. Both trees hold the same file names

    Text files are then diffed with line endings normalized. Binary and
    blacklisted files are only checked for presence.

    Examples:
        treecmp compare                          # ./expected vs ./_site
        treecmp compare -r test/site -i x.png    # Check x.png exists only
        treecmp compare --json                   # JSON output for scripting
    """
    if ctx.invoked_subcommand is not None:
        return

    quiet = bool(ctx.obj and ctx.obj.get("quiet"))

    try:
        settings = load_settings(config_path)
    except SettingsError as e:
        print_error(f"Failed to load settings: {e}")
        raise typer.Exit(code=1) from e

    # Keep stdout clean for JSON; per-file diffs go to stderr instead
    comparator = TreeComparator.from_settings(settings, console=err_console if json_output or brief else console)

    try:
        report = comparator.run(
            root,
            expected or settings.expected,
            actual or settings.actual,
            ignore or [],
        )
    except TreeNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    except OSError as e:
        print_error(f"Failed to read files: {e}")
        raise typer.Exit(code=1) from e

    if json_output:
        console.print_json(json.dumps(report.to_dict()))
        if not report.passed:
            raise typer.Exit(code=1)
        return

    if brief:
        console.print(f"[info]Compared:[/info] {report.compared}")
        console.print(f"[skipped]Skipped:[/skipped] {len(report.skipped)}")
        console.print(f"[removed]Differing:[/removed] {len(report.diffs)}")
    elif not quiet or not report.passed:
        _print_summary(report)

    if report.failure is None:
        if not quiet:
            print_success("Trees match.")
        return

    print_error(str(report.failure))
    if not isinstance(report.failure, ContentDiffError):
        print_info("Structural check failed; file contents were not compared.")
    raise typer.Exit(code=1)
