"""Utility modules for zonestrip.

This module exports commonly used utility functions.
"""

from zonestrip.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_success,
    print_verbose,
    print_warning,
    truncate_display_name,
)

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_verbose",
    "print_warning",
    "truncate_display_name",
]
