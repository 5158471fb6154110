"""Pure string/path normalization for boundedfs.

This module provides side-effect-free path normalization that is shared by
every ``BoundedPath``. No filesystem I/O is performed by any function in this
module; existence and containment against a concrete root are checked by
``BoundedPath.append``.

Key functions:
- fix_separators: Canonicalize ``/`` and ``\\`` to the configured separator
- normalize: Resolve ``.``/``..`` segments with a stack, rejecting underflow
- is_legacy_short_name: Detect 8.3 short-name aliases such as ``PROGRA~1``
- join_parts: Rebuild a canonical path string from validated segments
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from boundedfs.config import settings
from .errors import LegacyPathSegmentError, PathEscapesRootError

# 8.3 alias: up to six name characters, a tilde, a numeric tail and an
# optional extension of at most three characters.
_LEGACY_SHORT_NAME_RE = re.compile(r"^[^\s~.]{1,6}~[0-9]+(\.[^\s.]{1,3})?$")

# Drive designator segment such as ``c:``.
_DRIVE_RE = re.compile(r"^[A-Za-z]:$")


def _resolve_separator(separator: Optional[str]) -> str:
    sep = separator or settings.separator
    if sep not in ("/", "\\"):
        raise ValueError(f"unsupported path separator: {sep!r}")
    return sep


def fix_separators(raw: str, separator: Optional[str] = None) -> str:
    """Replace the foreign separator style with ``separator``."""
    sep = _resolve_separator(separator)
    if sep == "/":
        return raw.replace("\\", "/")
    return raw.replace("/", "\\")


def is_legacy_short_name(segment: str) -> bool:
    """Return True if ``segment`` has the shape of an 8.3 short-name alias.

    Such aliases (``PROGRA~1``, ``DOCUME~12.TXT``) can address a different
    real entry than the segment text suggests on filesystems that generate
    them, so they are refused outright.
    """
    return bool(_LEGACY_SHORT_NAME_RE.match(segment))


def normalize(raw: str, separator: Optional[str] = None) -> List[str]:
    """Split ``raw`` into validated segments.

    Args:
        raw: Raw path using either separator style
        separator: Canonical separator (defaults to ``settings.separator``)

    Returns:
        Ordered list of segments, empty for the root itself

    Raises:
        PathEscapesRootError: If a ``..`` segment would pop an empty stack
        LegacyPathSegmentError: If a segment looks like a short-name alias

    Process:
        1. Canonicalize separators
        2. Drop empty and ``.`` segments
        3. Pop on ``..``, refusing to rise above the resolved stack
        4. Reject legacy short-name segments, push everything else
    """
    if not isinstance(raw, str):
        raise TypeError("path must be a string")

    sep = _resolve_separator(separator)
    stack: List[str] = []
    for segment in fix_separators(raw, sep).split(sep):
        if not segment or segment == ".":
            continue
        if segment == "..":
            if not stack:
                raise PathEscapesRootError(
                    "could not pop, already on the lowest level", path=raw
                )
            stack.pop()
        elif is_legacy_short_name(segment):
            raise LegacyPathSegmentError(
                f"legacy short-name segment not supported: {segment}", path=raw
            )
        else:
            stack.append(segment)
    return stack


def split_path_parts(raw: str, separator: Optional[str] = None) -> List[str]:
    """Alias of :func:`normalize` used for segment comparisons."""
    return normalize(raw, separator)


def is_anchored(raw: str, separator: Optional[str] = None) -> bool:
    """Return True if ``raw`` starts at the filesystem root."""
    sep = _resolve_separator(separator)
    return fix_separators(raw, sep).startswith(sep)


def join_parts(parts: Sequence[str], separator: Optional[str] = None, *, anchored: bool = True) -> str:
    """Rebuild a canonical path string (no trailing separator).

    An anchored empty sequence denotes the filesystem root; an unanchored one
    denotes the current directory. A lone drive segment keeps its separator
    (``c:\\``), since a bare ``c:`` names the working directory on that drive.
    """
    sep = _resolve_separator(separator)
    body = sep.join(parts)
    if anchored:
        return sep + body
    if len(parts) == 1 and _DRIVE_RE.match(parts[0]):
        return body + sep
    return body or "."


__all__ = [
    "fix_separators",
    "is_legacy_short_name",
    "normalize",
    "split_path_parts",
    "is_anchored",
    "join_parts",
]
