"""Settings commands.

Shows or creates the user settings file (~/.config/zonestrip/config.toml).
"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from zonestrip.core.paths import get_settings_path
from zonestrip.core.settings import Settings, SettingsError, load_settings, save_settings
from zonestrip.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or create user settings.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective strip defaults."""
    path = get_settings_path()
    try:
        settings = load_settings(path)
    except SettingsError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from None

    source = str(path) if path.exists() else "built-in defaults"
    table = Table(
        title=f"Settings ({source})",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Key", no_wrap=True)
    table.add_column("Value")
    for key, value in settings.strip.model_dump().items():
        table.add_row(f"strip.{key}", str(value).lower())
    console.print(table)


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing settings file.",
        ),
    ] = False,
) -> None:
    """Write a settings file with default values."""
    path = get_settings_path()
    if path.exists() and not force:
        print_info(
            f"Settings file already exists: {escape(str(path))} (use --force to overwrite)"
        )
        return

    try:
        saved = save_settings(Settings(), path)
    except SettingsError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from None
    print_success(f"Settings written to {escape(str(saved))}")
