"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from zonestrip import __version__
from zonestrip.cli.commands import config, scan, strip
from zonestrip.core.log import configure_logging

# Create main Typer app
app = typer.Typer(
    name="zonestrip",
    help="Remove the Zone.Identifier marker from downloaded files.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"zonestrip version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """zonestrip - Remove the Zone.Identifier marker from downloaded files.

    Files downloaded from the internet carry a Zone.Identifier stream that
    marks them as untrusted. zonestrip clears it from single files or whole
    directory trees.
    """
    configure_logging(verbose)
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
app.command(name="strip")(strip.strip)
app.command(name="scan")(scan.scan)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
