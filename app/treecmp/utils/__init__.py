"""Utility modules for treecmp.

This module exports the shared console helpers.
"""

from treecmp.utils.formatting import (
    console,
    create_file_table,
    err_console,
    print_error,
    print_info,
    print_success,
)

__all__ = [
    "console",
    "create_file_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
]
