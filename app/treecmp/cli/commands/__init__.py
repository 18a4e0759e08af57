"""CLI commands for treecmp.

This package contains all subcommand implementations.
"""

from treecmp.cli.commands import compare, config, scan

__all__ = ["compare", "config", "scan"]
