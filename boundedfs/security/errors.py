"""Typed error kinds raised by boundedfs.

Every failure carries an :class:`ErrorKind` so callers can branch on a single
value instead of a chain of ``isinstance`` checks::

    try:
        child = root.append(user_input)
    except BoundedPathError as exc:
        if exc.kind is ErrorKind.PATH_ESCAPES_ROOT:
            ...

Store failures (permissions, disk full, ...) are not wrapped: the underlying
``OSError`` reaches the caller unchanged and :func:`error_kind` classifies it
as ``IO_FAILURE``.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Terminal failure categories."""

    PATH_NOT_FOUND = "path_not_found"
    PATH_ESCAPES_ROOT = "path_escapes_root"
    LEGACY_PATH_SEGMENT = "legacy_path_segment"
    NOT_A_FILE = "not_a_file"
    NOT_A_DIRECTORY = "not_a_directory"
    DIRECTORY_CREATE_FAILED = "directory_create_failed"
    RELATIVE_PATH_MISMATCH = "relative_path_mismatch"
    MALFORMED_JSON = "malformed_json"
    IO_FAILURE = "io_failure"


class BoundedPathError(Exception):
    """Base class for all boundedfs failures."""

    kind: ErrorKind = ErrorKind.IO_FAILURE

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class PathNotFoundError(BoundedPathError):
    """Construction required existence and the target is absent."""

    kind = ErrorKind.PATH_NOT_FOUND


class PathSecurityError(BoundedPathError):
    """Raised when a path violates the sandbox constraints."""

    kind = ErrorKind.PATH_ESCAPES_ROOT


class PathEscapesRootError(PathSecurityError):
    """A path rises above its resolved stack or leaves its bounding instance."""

    kind = ErrorKind.PATH_ESCAPES_ROOT


class LegacyPathSegmentError(PathSecurityError):
    """A segment looks like an 8.3 short-name alias."""

    kind = ErrorKind.LEGACY_PATH_SEGMENT


class NotAFileError(BoundedPathError):
    kind = ErrorKind.NOT_A_FILE


class NotADirError(BoundedPathError):
    kind = ErrorKind.NOT_A_DIRECTORY


class DirectoryCreateError(BoundedPathError):
    kind = ErrorKind.DIRECTORY_CREATE_FAILED


class RelativePathMismatchError(BoundedPathError):
    kind = ErrorKind.RELATIVE_PATH_MISMATCH


class MalformedJsonError(BoundedPathError):
    kind = ErrorKind.MALFORMED_JSON


def error_kind(exc: BaseException) -> Optional[ErrorKind]:
    """Classify an exception raised by a boundedfs operation.

    Returns ``None`` for exceptions that did not originate from a path or
    store operation.
    """
    if isinstance(exc, BoundedPathError):
        return exc.kind
    if isinstance(exc, OSError):
        return ErrorKind.IO_FAILURE
    return None


__all__ = [
    "ErrorKind",
    "BoundedPathError",
    "PathNotFoundError",
    "PathSecurityError",
    "PathEscapesRootError",
    "LegacyPathSegmentError",
    "NotAFileError",
    "NotADirError",
    "DirectoryCreateError",
    "RelativePathMismatchError",
    "MalformedJsonError",
    "error_kind",
]
