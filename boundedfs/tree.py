"""Recursive directory operations built on ``BoundedPath``.

Ordering guarantees:
- ``directory_tree`` is depth-first with every directory emitted before its
  descendants.
- ``remove_recursive`` removes every child before its parent directory.

Symlinks are never followed by ``remove_recursive``: a link is removed as a
link, its target is left alone. ``directory_tree`` skips symlinked
directories unless the path was built with ``follow_symlinks=True``; in that
case each real directory is visited at most once, which breaks link cycles.

Children are derived through ``BoundedPath.append``, so every entry name goes
through the normalizer. A directory holding an entry shaped like an 8.3 short
name (``abc~1``) cannot be listed, walked or removed with these functions;
each of them raises ``LegacyPathSegmentError``. Such a tree has to be cleaned
up outside the library.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional, Set

from boundedfs.logging import StructuredLogger, create_logger
from boundedfs.security.errors import NotADirError

if TYPE_CHECKING:
    from boundedfs.bounded_path import BoundedPath

_logger: Optional[StructuredLogger] = None


def _log() -> StructuredLogger:
    global _logger
    if _logger is None:
        _logger = create_logger(component="tree")
    return _logger


def list_children(path: "BoundedPath", include_hidden: bool = False) -> List["BoundedPath"]:
    """List direct entries of ``path`` in name order.

    Entries are filtered through ``path.visibility`` unless ``include_hidden``.
    Children are derived without an existence check so an entry removed
    between listing and derivation still yields a handle.
    """
    if not path.is_dir():
        raise NotADirError(f"can only list children of a directory: {path.get_path_clean()}",
                           path=path.get_path_clean())
    out: List["BoundedPath"] = []
    for name in sorted(path.store.list_entries(path.get_path_clean())):
        if name in (".", ".."):
            continue
        if include_hidden or path.visibility(name):
            out.append(path.append(name, should_exist=False))
    return out


def _label(path: "BoundedPath", root: "BoundedPath") -> str:
    if root.is_same_path(path):
        return path.get_dirname()
    if root.contains_fs(path):
        return path.separator.join(path.get_path_parts()[len(root.get_path_parts()):])
    return path.get_relative_path(root)


def directory_tree(path: "BoundedPath", root: Optional["BoundedPath"] = None) -> Dict[str, str]:
    """Map each directory's canonical path to its label.

    The label is the path relative to ``root`` (default: ``path`` itself), or
    the bare directory name for ``root``.
    """
    root = root if root is not None else path
    seen: Set[str] = set()
    output: Dict[str, str] = {}
    _walk(path, root, output, seen)
    return output


def _walk(path: "BoundedPath", root: "BoundedPath", output: Dict[str, str], seen: Set[str]) -> None:
    if not path.is_dir():
        raise NotADirError(f"not a directory: {path.get_path_clean()}", path=path.get_path_clean())
    if path.follow_symlinks:
        real = path.get_real_path()
        if real in seen:
            return
        seen.add(real)

    output[path.get_path()] = _label(path, root)
    for child in path.get_children():
        if not child.is_dir():
            continue
        if child.is_symlink() and not path.follow_symlinks:
            continue
        _walk(child, root, output, seen)


def remove_recursive(path: "BoundedPath") -> None:
    """Delete ``path`` and everything below it, children first."""
    if path.is_symlink() or not path.is_dir():
        raise NotADirError(f"this is not a directory: {path.get_path_clean()}",
                           path=path.get_path_clean())

    for child in path.get_children(include_hidden=True):
        if child.is_dir() and not child.is_symlink():
            remove_recursive(child)
        else:
            path.store.remove_file(child.get_path_clean())
    path.store.remove_empty_directory(path.get_path_clean())
    _log().debug("directory removed", path=path.get_path_clean())


__all__ = ["list_children", "directory_tree", "remove_recursive"]
