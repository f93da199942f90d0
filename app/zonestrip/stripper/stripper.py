"""Recursive Zone.Identifier stripping.

Walks a file or directory tree depth-first and removes the Zone.Identifier
marker from every file that carries one. Failures are handled at the
smallest scope (one file, one directory listing) and reported; they never
abort the rest of the traversal.
"""

import logging
import os
from collections.abc import Callable, Iterator

from zonestrip.stripper.errors import StreamOperationError, describe_error
from zonestrip.stripper.models import PathKind, PathTarget, StripOutcome, StripReport, classify_path
from zonestrip.stripper.policy import AlwaysProceedPolicy, ConfirmPolicy, DryRunPolicy
from zonestrip.stripper.reporter import ConsoleReporter, Reporter
from zonestrip.stripper.streams import (
    clear_read_only,
    delete_marker,
    has_marker,
    is_marker_name,
    is_read_only,
    read_attributes,
    restore_attributes,
)
from zonestrip.utils.formatting import truncate_display_name

logger = logging.getLogger(__name__)

STRIP_ACTION = "Strip Zone.Identifier"


def _list_directory(path: str) -> list[os.DirEntry[str]]:
    """List the immediate children of a directory, sorted by name.

    Raises:
        OSError: If the directory cannot be listed.
    """
    with os.scandir(path) as entries:
        return sorted(entries, key=lambda entry: entry.name)


def _is_directory(entry: os.DirEntry[str]) -> bool:
    """Check if an entry is a real directory (symlinks are not followed)."""
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


class Stripper:
    """Removes the Zone.Identifier marker from files and directory trees.

    Attributes:
        _policy: Governor asked before each marker is removed.
        _reporter: Receives all user-facing messages.
        _force: Temporarily clear the read-only attribute to allow removal.
        _no_recurse: Only process the immediate children of a directory.

    Example:
        >>> stripper = Stripper(force=True)
        >>> report = stripper.process("~/Downloads")
        >>> print(report.stripped)
    """

    def __init__(
        self,
        policy: ConfirmPolicy | None = None,
        reporter: Reporter | None = None,
        force: bool = False,
        no_recurse: bool = False,
    ) -> None:
        """Initialize the Stripper.

        Args:
            policy: Confirmation governor. Defaults to AlwaysProceedPolicy.
            reporter: Output sink. Defaults to a ConsoleReporter.
            force: If True, read-only files are made writable for the
                duration of the removal and restored afterwards.
            no_recurse: If True, subdirectories of a directory are skipped.
        """
        self._policy = policy or AlwaysProceedPolicy()
        self._reporter = reporter or ConsoleReporter()
        self._force = force
        self._no_recurse = no_recurse

    def process(self, path: str) -> StripReport:
        """Strip the marker from a file, or from every file under a directory.

        The path is resolved against the current working directory once;
        nested directories are processed with their already-absolute paths.

        Args:
            path: File or directory, relative or absolute.

        Returns:
            Counters describing what happened. Per-file problems are
            reported and counted, never raised.
        """
        report = StripReport()
        target = PathTarget.resolve(path)
        logger.debug("Resolved %s to %s (%s)", target.raw, target.absolute, target.kind.value)
        self._process_resolved(target.absolute, self._no_recurse, report)
        return report

    def _process_resolved(self, path: str, no_recurse: bool, report: StripReport) -> None:
        """Dispatch an absolute path to the file or directory handler."""
        display = truncate_display_name(path)
        kind = classify_path(path)

        if kind == PathKind.FILE:
            report.record(self._strip_file(path, report))
            return

        if kind == PathKind.MISSING:
            report.missing += 1
            self._reporter.error(f"Path not found: {display}")
            return

        try:
            entries = _list_directory(path)
        except OSError as e:
            report.unreadable_directories += 1
            self._reporter.warning(f"Cannot list directory {display}: {describe_error(e)}")
            return

        self._reporter.verbose(f"Entering directory {display}")
        for entry in entries:
            if _is_directory(entry):
                # Nested levels always recurse; only the top call honors no_recurse
                if not no_recurse:
                    self._process_resolved(entry.path, False, report)
            elif not is_marker_name(entry.name):
                report.record(self._strip_file(entry.path, report))
        self._reporter.verbose(f"Leaving directory {display}")

    def _strip_file(self, path: str, report: StripReport) -> StripOutcome:
        """Remove the marker from a single file.

        The original attribute bitset is restored in a ``finally`` block
        whenever the read-only bit was cleared, whatever the deletion did.

        Args:
            path: Absolute path of the file.
            report: Report to count restore failures in.

        Returns:
            What happened to this file.
        """
        if not has_marker(path):
            return StripOutcome.NO_MARKER

        display = truncate_display_name(path)
        if not self._policy.confirm(STRIP_ACTION, display):
            logger.debug("Declined %s", path)
            return StripOutcome.DECLINED

        restore_to: int | None = None
        try:
            attributes = read_attributes(path)
            if self._force and is_read_only(attributes):
                self._reporter.verbose(f"Temporarily clearing attributes on {display}")
                clear_read_only(path, attributes)
                restore_to = attributes

            self._reporter.verbose(f"Stripping {display}")
            delete_marker(path)
        except (OSError, StreamOperationError) as e:
            self._reporter.error(f"Failed to strip {display}: {describe_error(e)}")
            outcome = StripOutcome.FAILED
        else:
            self._reporter.success(f"Stripped {display}")
            outcome = StripOutcome.STRIPPED
        finally:
            if restore_to is not None:
                self._restore(path, restore_to, report)

        return outcome

    def _restore(self, path: str, attributes: int, report: StripReport) -> None:
        """Write back the attributes recorded before a temporary clear."""
        display = truncate_display_name(path)
        self._reporter.verbose(f"Reverting attributes on {display}")
        try:
            restore_attributes(path, attributes)
        except StreamOperationError as e:
            report.restore_failures += 1
            self._reporter.warning(
                f"Could not restore attributes {attributes:#o} on {display}: {describe_error(e)}"
            )


def iter_marked_files(
    path: str,
    no_recurse: bool = False,
    on_error: Callable[[str, OSError], None] | None = None,
) -> Iterator[str]:
    """Yield every file under ``path`` that carries the marker.

    Traversal follows the same rules as Stripper.process() but changes
    nothing.

    Args:
        path: File or directory, relative or absolute.
        no_recurse: If True, subdirectories of the top directory are skipped.
        on_error: Called with the directory path and error when a listing
            fails. Defaults to logging a warning.

    Yields:
        Absolute paths of files with a marker, in traversal order.
    """
    target = PathTarget.resolve(path)
    if target.kind == PathKind.FILE:
        if has_marker(target.absolute):
            yield target.absolute
        return
    if target.kind == PathKind.MISSING:
        return

    yield from _walk_marked(target.absolute, no_recurse, on_error)


def _walk_marked(
    directory: str,
    no_recurse: bool,
    on_error: Callable[[str, OSError], None] | None,
) -> Iterator[str]:
    try:
        entries = _list_directory(directory)
    except OSError as e:
        if on_error is not None:
            on_error(directory, e)
        else:
            logger.warning("Cannot list directory %s: %s", directory, describe_error(e))
        return

    for entry in entries:
        if _is_directory(entry):
            if not no_recurse:
                yield from _walk_marked(entry.path, False, on_error)
        elif not is_marker_name(entry.name) and has_marker(entry.path):
            yield entry.path


def strip_zone_identifier(
    path: str,
    *,
    force: bool = False,
    no_recurse: bool = False,
    suppress_success: bool = False,
    dry_run: bool = False,
    verbose: bool = False,
) -> StripReport:
    """Strip the marker under ``path`` with console output.

    Convenience wrapper that builds a Stripper with a ConsoleReporter and
    either the dry-run or the always-proceed policy.

    Args:
        path: File or directory, relative or absolute.
        force: Temporarily clear the read-only attribute when needed.
        no_recurse: Only process the immediate children of a directory.
        suppress_success: Hide the per-file success lines.
        dry_run: Report what would be stripped without changing anything.
        verbose: Print diagnostic traversal messages.

    Returns:
        Counters describing the run.
    """
    policy: ConfirmPolicy = DryRunPolicy() if dry_run else AlwaysProceedPolicy()
    reporter = ConsoleReporter(suppress_success=suppress_success, show_verbose=verbose)
    stripper = Stripper(policy=policy, reporter=reporter, force=force, no_recurse=no_recurse)
    return stripper.process(path)
