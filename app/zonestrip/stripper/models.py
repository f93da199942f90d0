"""Data structures for a stripping run.

Everything here is derived from the filesystem at call time; nothing is
persisted between invocations.
"""

import os
from dataclasses import dataclass
from enum import Enum


class PathKind(str, Enum):
    """What a resolved path points at.

    Attributes:
        FILE: Existing regular file (or non-directory entry).
        DIRECTORY: Existing directory.
        MISSING: Neither a file nor a directory.
    """

    FILE = "file"
    DIRECTORY = "directory"
    MISSING = "missing"


@dataclass(frozen=True, slots=True)
class PathTarget:
    """A caller-supplied path after resolution.

    Attributes:
        raw: Path exactly as supplied.
        absolute: Path joined with the current working directory.
        kind: Classification of the absolute path.
    """

    raw: str
    absolute: str
    kind: PathKind

    def __post_init__(self) -> None:
        """Validate path target data after initialization."""
        if not self.raw:
            msg = "Path cannot be empty"
            raise ValueError(msg)

    @classmethod
    def resolve(cls, raw: str, cwd: str | None = None) -> "PathTarget":
        """Resolve a path against the working directory and classify it.

        Args:
            raw: Relative or absolute path.
            cwd: Directory to resolve against. Defaults to os.getcwd().

        Returns:
            A classified PathTarget.

        Raises:
            ValueError: If raw is empty.
        """
        if not raw:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        absolute = os.path.normpath(os.path.join(cwd or os.getcwd(), os.path.expanduser(raw)))
        return cls(raw=raw, absolute=absolute, kind=classify_path(absolute))


def classify_path(path: str) -> PathKind:
    """Classify an absolute path as file, directory or missing."""
    if os.path.isfile(path):
        return PathKind.FILE
    if os.path.isdir(path):
        return PathKind.DIRECTORY
    return PathKind.MISSING


class StripOutcome(str, Enum):
    """Result of running the single-file procedure on one file.

    Attributes:
        NO_MARKER: File carries no marker; left untouched.
        STRIPPED: Marker removed.
        DECLINED: Confirmation governor vetoed the change (includes dry-run).
        FAILED: Marker deletion failed; marker left intact.
    """

    NO_MARKER = "no_marker"
    STRIPPED = "stripped"
    DECLINED = "declined"
    FAILED = "failed"


@dataclass(slots=True)
class StripReport:
    """Aggregate counters for one or more stripping runs.

    Attributes:
        files_seen: Files the single-file procedure was run on.
        stripped: Markers removed.
        declined: Markers left because confirmation was declined or dry-run.
        failed: Markers that could not be removed.
        restore_failures: Files whose read-only attribute could not be restored.
        missing: Top-level paths that did not exist.
        unreadable_directories: Directories whose listing failed.
    """

    files_seen: int = 0
    stripped: int = 0
    declined: int = 0
    failed: int = 0
    restore_failures: int = 0
    missing: int = 0
    unreadable_directories: int = 0

    def record(self, outcome: StripOutcome) -> None:
        """Count the outcome of one file."""
        self.files_seen += 1
        if outcome == StripOutcome.STRIPPED:
            self.stripped += 1
        elif outcome == StripOutcome.DECLINED:
            self.declined += 1
        elif outcome == StripOutcome.FAILED:
            self.failed += 1

    def merge(self, other: "StripReport") -> None:
        """Add the counters of another report into this one."""
        self.files_seen += other.files_seen
        self.stripped += other.stripped
        self.declined += other.declined
        self.failed += other.failed
        self.restore_failures += other.restore_failures
        self.missing += other.missing
        self.unreadable_directories += other.unreadable_directories

    @property
    def has_errors(self) -> bool:
        """True if any strip failed or a top-level path was missing."""
        return self.failed > 0 or self.missing > 0

    @property
    def has_warnings(self) -> bool:
        """True if any attribute restore or directory listing failed."""
        return self.restore_failures > 0 or self.unreadable_directories > 0
