"""Security-related utilities for boundedfs."""

from .errors import (
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
)
from .path_sanitizer import fix_separators, is_legacy_short_name, normalize
from .visibility import VisibilityPredicate, always_visible, hide_dotfiles, hide_names

__all__ = [
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
    "fix_separators",
    "is_legacy_short_name",
    "normalize",
    "VisibilityPredicate",
    "always_visible",
    "hide_dotfiles",
    "hide_names",
]
