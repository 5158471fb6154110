"""Sandboxed filesystem path value type.

Threat model and protections:
- Directory traversal: ``..`` segments are resolved syntactically at
  construction; popping past the resolved stack is refused outright.
- Escaping a bounding instance: every derived path (``append``, ``create_*``)
  must be a strict descendant of the instance that produced it.
- Absolute path injection: leading separators on relative input are stripped
  before joining, so ``/etc/passwd`` lands inside the root.
- Mixed separators: ``/`` and ``\\`` are both accepted and canonicalized to the
  configured separator before any comparison.
- Short-name aliasing: 8.3 style segments (``PROGRA~1``) are rejected.

Each instance is an immutable handle. Operations that create or remove entries
act on the underlying ``FileStore`` and return new instances; the canonical
string of an existing instance never changes. Nothing is cached between calls,
so check-then-act sequences (``create_file_if_not_exist``, ``create_dir``) are
exposed to concurrent mutation of the store. Callers needing atomicity must
serialize access themselves.
"""

from __future__ import annotations

import os
import re
import secrets
import time
from typing import Any, Dict, Iterable, List, Optional, Union

from boundedfs import tree
from boundedfs.config import settings
from boundedfs.content import load_json
from boundedfs.logging import StructuredLogger, create_logger
from boundedfs.security.errors import (
    DirectoryCreateError,
    NotADirError,
    NotAFileError,
    PathEscapesRootError,
    PathNotFoundError,
    RelativePathMismatchError,
)
from boundedfs.security.path_sanitizer import fix_separators, join_parts, normalize
from boundedfs.security.visibility import VisibilityPredicate, always_visible
from boundedfs.storage.file_store import FileStore, LocalFileStore

_logger: Optional[StructuredLogger] = None


def _log() -> StructuredLogger:
    global _logger
    if _logger is None:
        _logger = create_logger(component="bounded_path")
    return _logger


class BoundedPath:
    """A filesystem location that stays inside the instance it was derived from.

    Args:
        path: Raw path using either separator style
        should_exist: When True (default), fail with ``PathNotFoundError`` if
            the store reports the path absent
        store: Filesystem collaborator (defaults to ``LocalFileStore``)
        separator: Canonical separator (defaults to ``settings.separator``)
        visibility: Predicate deciding which entries ``get_children`` lists
            when hidden entries are excluded (defaults to everything visible)
        follow_symlinks: Descend into symlinked directories when building
            directory trees (defaults to ``settings.follow_symlinks``)

    Collaborators are inherited by every path derived from this one.
    """

    __slots__ = (
        "_path",
        "_clean",
        "_parts",
        "store",
        "separator",
        "visibility",
        "follow_symlinks",
    )

    def __init__(
        self,
        path: Union[str, "os.PathLike[str]"],
        should_exist: bool = True,
        *,
        store: Optional[FileStore] = None,
        separator: Optional[str] = None,
        visibility: Optional[VisibilityPredicate] = None,
        follow_symlinks: Optional[bool] = None,
    ) -> None:
        sep = separator or settings.separator
        raw = fix_separators(os.fspath(path), sep)
        parts = normalize(raw, sep)
        clean = join_parts(parts, sep, anchored=raw.startswith(sep))

        self.store: FileStore = store if store is not None else LocalFileStore()
        self.separator = sep
        self.visibility: VisibilityPredicate = visibility or always_visible
        self.follow_symlinks = settings.follow_symlinks if follow_symlinks is None else follow_symlinks
        self._parts = tuple(parts)
        self._clean = clean

        if should_exist and not self.store.exists(clean):
            raise PathNotFoundError(f"the given path does not exist: {clean}", path=clean)
        if self.store.is_directory(clean):
            self._path = clean.rstrip(sep) + sep
        else:
            self._path = clean

    # ---------- Derivation ----------
    def _derive(self, path: str, should_exist: bool = True) -> "BoundedPath":
        return BoundedPath(
            path,
            should_exist,
            store=self.store,
            separator=self.separator,
            visibility=self.visibility,
            follow_symlinks=self.follow_symlinks,
        )

    def _strip_relative(self, relative: str) -> str:
        return fix_separators(relative, self.separator).lstrip(self.separator)

    def append(self, relative: str, should_exist: bool = True) -> "BoundedPath":
        """Derive a strict descendant of this path.

        Raises:
            PathEscapesRootError: If the result is not below this instance
            PathNotFoundError: If ``should_exist`` and the result is absent
        """
        base = self._clean.rstrip(self.separator)
        candidate = self._derive(
            base + self.separator + self._strip_relative(relative), should_exist=False
        )

        if not self.contains_fs(candidate):
            _log().warning(
                "path escapes bounding root",
                parent=self._clean,
                child=candidate._clean,
            )
            raise PathEscapesRootError(
                f"the found path is not a part of the parent, {self._clean}, {candidate._clean}",
                path=candidate._clean,
            )
        if should_exist and not self.store.exists(candidate._clean):
            raise PathNotFoundError(
                f"the given path does not exist: {candidate._clean}", path=candidate._clean
            )
        return candidate

    def contains_fs(self, other: "BoundedPath") -> bool:
        """True iff ``other`` is a strict descendant (segment prefix match)."""
        mine = self._parts
        theirs = other._parts
        if len(mine) >= len(theirs):
            return False
        return theirs[: len(mine)] == mine

    def is_same_path(self, other: "BoundedPath") -> bool:
        return self._parts == other._parts

    def get_parent(self) -> "BoundedPath":
        """Return the real parent directory of the real path."""
        return self._derive(os.path.dirname(self.get_real_path()))

    # ---------- Representations ----------
    def get_path(self) -> str:
        """Canonical form, with a trailing separator for directories."""
        return self._path

    def get_path_parts(self) -> List[str]:
        return list(self._parts)

    def get_path_clean(self) -> str:
        """Canonical form without the trailing separator (a drive root keeps it)."""
        return self._clean

    def get_real_path(self) -> str:
        real = self.store.canonical_absolute_path(self._clean)
        if real is None:
            raise PathNotFoundError(f"could not resolve real path: {self._clean}", path=self._clean)
        return real

    def __str__(self) -> str:
        return self._path

    def __fspath__(self) -> str:
        return self._clean

    def __repr__(self) -> str:
        return f"BoundedPath({self._path!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundedPath):
            return NotImplemented
        return self.is_same_path(other)

    def __hash__(self) -> int:
        return hash(self._parts)

    # ---------- Creation ----------
    def create_dir(self, relative: str, mode: Optional[int] = None) -> "BoundedPath":
        """Ensure ``relative`` exists as a directory below this path.

        A concurrent creation by another actor counts as success.
        """
        mode = settings.dir_mode if mode is None else mode
        target = self.append(relative, should_exist=False)
        full = target._clean
        if not self.store.is_directory(full):
            created = self.store.create_directories(full, mode)
            if not created and not self.store.is_directory(full):
                raise DirectoryCreateError(f'directory "{full}" was not created', path=full)
            _log().debug("directory created", path=full, mode=oct(mode))
        return self._derive(full)

    def create_file(
        self,
        relative: str,
        mode: Optional[int] = None,
        contents: Optional[Union[str, bytes]] = None,
    ) -> "BoundedPath":
        """Create or truncate ``relative``, write ``contents`` and apply ``mode``."""
        mode = settings.file_mode if mode is None else mode
        target = self.append(relative, should_exist=False)
        full = target._clean
        self.store.create_or_truncate(full)
        if contents is not None:
            data = contents.encode("utf-8") if isinstance(contents, str) else contents
            self.store.write_all(full, data)
        self.store.set_permissions(full, mode)
        _log().debug("file created", path=full, mode=oct(mode), size=0 if contents is None else len(contents))
        return self._derive(full)

    def create_unique_file(
        self,
        relative: str,
        mode: Optional[int] = None,
        contents: Optional[Union[str, bytes]] = None,
    ) -> "BoundedPath":
        """Create a file whose name is prefixed with a timestamp and random token.

        ``a/report.txt`` becomes ``a/20240131-235959<10 hex chars>.report.txt``.
        Collisions are not retried. A request without a file name (``sub/``)
        raises ``NotAFileError``.
        """
        head, _, name = self._strip_relative(relative).rpartition(self.separator)
        if not name or name in (".", ".."):
            raise NotAFileError(f"a unique file needs a file name: {relative}", path=relative)
        unique = f"{time.strftime('%Y%m%d-%H%M%S')}{secrets.token_hex(5)}.{name}"
        if head:
            unique = head + self.separator + unique
        return self.create_file(unique, mode, contents)

    def create_file_if_not_exist(
        self,
        relative: str,
        mode: Optional[int] = None,
        contents: Optional[Union[str, bytes]] = None,
    ) -> "BoundedPath":
        """Return the existing file untouched, or create it."""
        candidate = self.append(relative, should_exist=False)
        if candidate.file_exists():
            return candidate
        return self.create_file(relative, mode, contents)

    # ---------- Introspection ----------
    def is_dir(self) -> bool:
        return self.store.is_directory(self._clean)

    def is_file(self) -> bool:
        return self.store.is_regular_file(self._clean)

    def is_symlink(self) -> bool:
        return self.store.is_symlink(self._clean)

    def file_exists(self) -> bool:
        return self.is_file() and self.store.exists(self._clean)

    def _basename(self) -> str:
        return self._parts[-1] if self._parts else ""

    def get_filename(self) -> str:
        if self.is_dir():
            raise NotAFileError(f"could not get filename from non file: {self._clean}", path=self._clean)
        return self._basename()

    def get_dirname(self) -> str:
        if self.is_file():
            raise NotADirError(f"could not get dirname from non dir: {self._clean}", path=self._clean)
        return self._basename()

    def get_extension(self) -> str:
        name = self.get_filename()
        if "." not in name:
            return ""
        return name.rpartition(".")[2].lower()

    def get_filename_without_extension(self) -> str:
        name = self.get_filename()
        if "." not in name:
            return name
        return name.rpartition(".")[0]

    def get_safe_filename(self) -> str:
        extension = self.get_extension() or "unknown"
        base = re.sub(r"\W+", "_", self.get_filename_without_extension())
        return f"{base}.{extension}"

    def file_size(self) -> int:
        if self.is_dir():
            raise NotAFileError(f"could not get size of non file: {self._clean}", path=self._clean)
        return self.store.size_of(self._clean)

    def get_mime_type(self) -> str:
        return self.store.mime_type_of(self._clean)

    def _has_extension_in(self, allowed: Iterable[str]) -> bool:
        if not self.is_file():
            return False
        return self.get_extension() in {ext.lower() for ext in allowed}

    def is_image(self, allowed_extensions: Optional[Iterable[str]] = None) -> bool:
        if allowed_extensions is None:
            allowed_extensions = settings.image_extensions
        return self._has_extension_in(allowed_extensions)

    def is_readable_file(self, allowed_extensions: Optional[Iterable[str]] = None) -> bool:
        if allowed_extensions is None:
            allowed_extensions = settings.readable_extensions
        return self._has_extension_in(allowed_extensions)

    def get_relative_path(self, root: "BoundedPath") -> str:
        """Strip ``root``'s real path prefix from this real path."""
        prefix = root.get_real_path().rstrip(self.separator) + self.separator
        real = self.get_real_path()
        if not real.startswith(prefix):
            raise RelativePathMismatchError(
                f"could not get relative path of {self._path} compared to {root.get_path()}",
                path=self._clean,
            )
        return real[len(prefix):]

    # ---------- Contents ----------
    def get_bytes(self) -> bytes:
        if not self.is_file():
            raise NotAFileError(
                f"could not get contents because file is not found: {self._clean}", path=self._clean
            )
        return self.store.read_all(self._clean)

    def get_contents(self, encoding: str = "utf-8") -> str:
        return self.get_bytes().decode(encoding)

    def get_json(self, model: Any = None) -> Any:
        """Decode the file as JSON, optionally validating into ``model``."""
        return load_json(self.get_bytes(), model, source=self._clean)

    # ---------- Tree operations ----------
    def get_children(self, include_hidden: bool = False) -> List["BoundedPath"]:
        return tree.list_children(self, include_hidden=include_hidden)

    def get_directory_tree(self, root: Optional["BoundedPath"] = None) -> Dict[str, str]:
        return tree.directory_tree(self, root)

    def rm_dir(self) -> None:
        tree.remove_recursive(self)

    def unlink(self) -> None:
        """Remove a file (or a symlink, which is never followed)."""
        if not (self.is_symlink() or self.is_file()):
            raise NotAFileError(f"you can only unlink files: {self._clean}", path=self._clean)
        self.store.remove_file(self._clean)
        _log().debug("file removed", path=self._clean)


__all__ = ["BoundedPath"]
