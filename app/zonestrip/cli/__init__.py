"""CLI package for zonestrip.

This package contains the Typer application and all subcommands.
"""

from zonestrip.cli.main import app

__all__ = ["app"]
