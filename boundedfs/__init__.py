"""boundedfs: filesystem paths that cannot leave their sandbox."""

from .bounded_path import BoundedPath
from .content import load_json
from .security import (
    BoundedPathError,
    DirectoryCreateError,
    ErrorKind,
    LegacyPathSegmentError,
    MalformedJsonError,
    NotADirError,
    NotAFileError,
    PathEscapesRootError,
    PathNotFoundError,
    PathSecurityError,
    RelativePathMismatchError,
    error_kind,
    normalize,
)
from .storage import FileStore, LocalFileStore

__version__ = "0.1.0"

__all__ = [
    "BoundedPath",
    "load_json",
    "BoundedPathError",
    "DirectoryCreateError",
    "ErrorKind",
    "LegacyPathSegmentError",
    "MalformedJsonError",
    "NotADirError",
    "NotAFileError",
    "PathEscapesRootError",
    "PathNotFoundError",
    "PathSecurityError",
    "RelativePathMismatchError",
    "error_kind",
    "normalize",
    "FileStore",
    "LocalFileStore",
]
