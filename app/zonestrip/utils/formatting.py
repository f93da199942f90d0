"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console

from zonestrip.core.theme import get_theme

# Paths longer than this are shortened from the left for display
MAX_DISPLAY_LENGTH = 80
ELLIPSIS = "..."


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def truncate_display_name(full_name: str) -> str:
    """Shorten a path for console output, keeping its trailing segments.

    Args:
        full_name: Full path to display.

    Returns:
        ``full_name`` unchanged if it fits in 80 characters, otherwise an
        ellipsis followed by its last 77 characters.
    """
    if len(full_name) > MAX_DISPLAY_LENGTH:
        return ELLIPSIS + full_name[-(MAX_DISPLAY_LENGTH - len(ELLIPSIS)) :]
    return full_name


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")


def print_verbose(message: str) -> None:
    """Print a diagnostic message."""
    console.print(f"[verbose]VERBOSE:[/] [muted]{message}[/]")
