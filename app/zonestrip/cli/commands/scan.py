"""Scan command.

Lists files that carry the Zone.Identifier marker without changing them.
"""

import json
from enum import Enum
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from zonestrip.cli.types import require_path
from zonestrip.stripper.errors import describe_error
from zonestrip.stripper.models import PathKind, PathTarget
from zonestrip.stripper.stripper import iter_marked_files
from zonestrip.utils.formatting import (
    console,
    print_error,
    print_success,
    print_warning,
    truncate_display_name,
)


class OutputFormat(str, Enum):
    """Output format options for scan."""

    TABLE = "table"
    JSON = "json"


def scan(
    path: Annotated[
        str,
        typer.Argument(help="File or directory to scan.", callback=require_path),
    ] = ".",
    no_recurse: Annotated[
        bool,
        typer.Option("--no-recurse", help="Do not descend into subdirectories."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List files that carry a Zone.Identifier marker.

    Examples:
        zonestrip scan ~/Downloads
        zonestrip scan . --format json
    """
    target = PathTarget.resolve(path)
    if target.kind == PathKind.MISSING:
        print_error(f"Path not found: {escape(truncate_display_name(target.absolute))}")
        raise typer.Exit(code=1)

    def _on_error(directory: str, error: OSError) -> None:
        print_warning(
            f"Cannot list directory {escape(truncate_display_name(directory))}: "
            f"{escape(describe_error(error))}"
        )

    marked = list(iter_marked_files(target.absolute, no_recurse=no_recurse, on_error=_on_error))

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps({"root": target.absolute, "files": marked}))
        return

    if not marked:
        print_success("No files with a Zone.Identifier marker found.")
        return

    _print_table(marked)
    console.print(f"\n[dim]Found {len(marked)} marked file(s)[/dim]")


# === Private helper functions ===


def _print_table(paths: list[str]) -> None:
    """Display marked files as a Rich table."""
    table = Table(
        title="Files with Zone.Identifier",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="path", no_wrap=True)
    for path in paths:
        table.add_row(escape(truncate_display_name(path)))
    console.print(table)
