"""Zone.Identifier stripping.

This module provides the recursive stripper, its confirmation policies
and output reporters, and the low-level stream helpers it is built on.
"""

from zonestrip.stripper.errors import StreamOperationError, ZonestripError, describe_error
from zonestrip.stripper.models import PathKind, PathTarget, StripOutcome, StripReport
from zonestrip.stripper.policy import (
    AlwaysProceedPolicy,
    ConfirmPolicy,
    DryRunPolicy,
    PromptPolicy,
)
from zonestrip.stripper.reporter import ConsoleReporter, Reporter
from zonestrip.stripper.streams import MARKER_STREAM_NAME, has_marker, marker_stream_path
from zonestrip.stripper.stripper import (
    STRIP_ACTION,
    Stripper,
    iter_marked_files,
    strip_zone_identifier,
)

__all__ = [
    "MARKER_STREAM_NAME",
    "STRIP_ACTION",
    "AlwaysProceedPolicy",
    "ConfirmPolicy",
    "ConsoleReporter",
    "DryRunPolicy",
    "PathKind",
    "PathTarget",
    "PromptPolicy",
    "Reporter",
    "StreamOperationError",
    "StripOutcome",
    "StripReport",
    "Stripper",
    "ZonestripError",
    "describe_error",
    "has_marker",
    "iter_marked_files",
    "marker_stream_path",
    "strip_zone_identifier",
]
