"""CLI package for treecmp.

This package contains the Typer application and all subcommands.
"""

from treecmp.cli.main import app

__all__ = ["app"]
