"""Strip command.

Removes the Zone.Identifier marker from files and directory trees.
"""

from typing import Annotated

import typer
from rich.markup import escape

from zonestrip.cli.types import require_paths
from zonestrip.core.settings import Settings, SettingsError, load_settings
from zonestrip.stripper.models import StripReport
from zonestrip.stripper.policy import (
    AlwaysProceedPolicy,
    ConfirmPolicy,
    DryRunPolicy,
    PromptPolicy,
)
from zonestrip.stripper.reporter import ConsoleReporter
from zonestrip.stripper.stripper import Stripper
from zonestrip.utils.formatting import console, print_info, print_success, print_warning


def strip(
    ctx: typer.Context,
    paths: Annotated[
        list[str],
        typer.Argument(help="Files or directories to unblock.", callback=require_paths),
    ],
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Temporarily clear the read-only attribute when needed.",
        ),
    ] = False,
    no_recurse: Annotated[
        bool,
        typer.Option("--no-recurse", help="Do not descend into subdirectories."),
    ] = False,
    suppress_success: Annotated[
        bool,
        typer.Option(
            "--suppress-success",
            "-s",
            help="Do not print a line for each stripped file.",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Show what would be stripped."),
    ] = False,
    confirm: Annotated[
        bool,
        typer.Option("--confirm", "-c", help="Ask before stripping each file."),
    ] = False,
) -> None:
    """Strip the Zone.Identifier marker from files.

    Directories are processed recursively. Files without a marker are left
    untouched. Flags enabled in ~/.config/zonestrip/config.toml are on by
    default.

    Examples:
        zonestrip strip setup.exe
        zonestrip strip ~/Downloads --force
        zonestrip strip . --no-recurse --dry-run
    """
    obj = ctx.obj or {}
    quiet = bool(obj.get("quiet", False))
    verbose = bool(obj.get("verbose", False))

    defaults = _load_defaults().strip
    force = force or defaults.force
    no_recurse = no_recurse or defaults.no_recurse
    suppress_success = suppress_success or defaults.suppress_success or quiet
    confirm = confirm or defaults.confirm

    policy: ConfirmPolicy
    if dry_run:
        policy = DryRunPolicy()
    elif confirm:
        policy = PromptPolicy()
    else:
        policy = AlwaysProceedPolicy()

    reporter = ConsoleReporter(suppress_success=suppress_success, show_verbose=verbose)
    stripper = Stripper(policy=policy, reporter=reporter, force=force, no_recurse=no_recurse)

    report = StripReport()
    for path in paths:
        report.merge(stripper.process(path))

    if not quiet:
        _print_summary(report, dry_run)

    if report.has_errors:
        raise typer.Exit(code=1)


# === Private helper functions ===


def _load_defaults() -> Settings:
    """Load user settings, falling back to defaults on error."""
    try:
        return load_settings()
    except SettingsError as e:
        print_warning(f"{escape(str(e))}. Using default settings.")
        return Settings()


def _print_summary(report: StripReport, dry_run: bool) -> None:
    """Print a one-line summary of the run."""
    if dry_run:
        print_info(f"\nDry run: {report.declined} file(s) would be stripped.")
        return

    if report.stripped == 0 and report.failed == 0:
        if report.declined:
            print_info(f"\n{report.declined} file(s) skipped.")
        elif report.missing == 0:
            print_info("\nNo files with a Zone.Identifier marker found.")
        return

    if report.failed == 0:
        print_success(f"\nStripped {report.stripped} file(s).")
    else:
        console.print(
            f"\n[success]{report.stripped} stripped[/success], "
            f"[error]{report.failed} failed[/error]"
        )
    if report.restore_failures:
        print_warning(
            f"{report.restore_failures} file(s) may have lost their read-only attribute."
        )
