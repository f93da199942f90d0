"""CLI commands for zonestrip.

This package contains all subcommand implementations.
"""

from zonestrip.cli.commands import config, scan, strip

__all__ = ["config", "scan", "strip"]
