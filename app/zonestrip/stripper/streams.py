"""Zone.Identifier stream access and read-only attribute handling.

The marker is addressed as ``<path>:Zone.Identifier``. On NTFS that name
is the alternate data stream itself. On other filesystems (for example
files copied out of Windows under WSL) the same name is a sibling file,
so probing and deleting it works the same way everywhere.

The attribute bitset is the permission part of ``st_mode``. The read-only
bit is the owner-write bit; on Windows os.chmod() maps exactly that bit to
FILE_ATTRIBUTE_READONLY.
"""

import errno
import logging
import os
import stat

from zonestrip.stripper.errors import StreamOperationError

logger = logging.getLogger(__name__)

MARKER_STREAM_NAME = "Zone.Identifier"
STREAM_SEPARATOR = ":"


def marker_stream_path(path: str) -> str:
    """Build the composite marker name for a file.

    Args:
        path: Full path of the host file.

    Returns:
        ``path`` joined with ``:Zone.Identifier``.
    """
    return f"{path}{STREAM_SEPARATOR}{MARKER_STREAM_NAME}"


def is_marker_name(name: str) -> bool:
    """Check whether a directory entry name is itself a marker.

    Only filesystems without alternate streams list markers as entries.
    """
    return name.endswith(STREAM_SEPARATOR + MARKER_STREAM_NAME)


def has_marker(path: str) -> bool:
    """Check whether a file carries the marker stream."""
    return os.path.lexists(marker_stream_path(path))


def read_attributes(path: str) -> int:
    """Return the attribute bitset of a file.

    Raises:
        OSError: If the file cannot be stat'ed.
    """
    return stat.S_IMODE(os.stat(path).st_mode)


def is_read_only(attributes: int) -> bool:
    """Check the read-only bit of an attribute bitset."""
    return not attributes & stat.S_IWRITE


def clear_read_only(path: str, attributes: int) -> None:
    """Clear only the read-only bit, leaving every other bit as recorded.

    Args:
        path: File to modify.
        attributes: The file's current attribute bitset.

    Raises:
        StreamOperationError: If the attributes cannot be changed.
    """
    try:
        os.chmod(path, attributes | stat.S_IWRITE)
    except OSError as e:
        raise StreamOperationError(path, "clear read-only attribute") from e


def restore_attributes(path: str, attributes: int) -> None:
    """Write a recorded attribute bitset back verbatim.

    Raises:
        StreamOperationError: If the attributes cannot be written.
    """
    try:
        os.chmod(path, attributes)
    except OSError as e:
        raise StreamOperationError(path, "restore attributes") from e


def delete_marker(path: str) -> None:
    """Delete the marker stream of a file.

    The marker belongs to its host file, so a read-only host blocks the
    deletion even where the process could bypass permission bits.

    Args:
        path: Full path of the host file.

    Raises:
        StreamOperationError: Wrapping the OSError that stopped the deletion.
    """
    stream = marker_stream_path(path)
    try:
        if is_read_only(read_attributes(path)):
            raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), stream)
        os.remove(stream)
    except OSError as e:
        raise StreamOperationError(path, "delete stream") from e
    logger.debug("Removed %s", stream)
