"""Raw filesystem collaborator consumed by ``BoundedPath``.

``FileStore`` is the narrow set of OS operations the path core needs. Each call
is an independent round-trip; nothing is cached, so two calls may observe
different state if another actor mutates the store in between.

``LocalFileStore`` implements it on top of ``os``. Its methods receive plain
path strings (no trailing separator) and raise ``OSError`` unchanged on
failure, except :meth:`create_directories` which reports failure as ``False``
so callers can apply a race-tolerant re-check.
"""

from __future__ import annotations

import logging
import mimetypes
import os
from typing import List, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

DIRECTORY_MIME_TYPE = "directory"
FALLBACK_MIME_TYPE = "application/octet-stream"


@runtime_checkable
class FileStore(Protocol):
    def exists(self, path: str) -> bool: ...

    def is_directory(self, path: str) -> bool: ...

    def is_regular_file(self, path: str) -> bool: ...

    def is_symlink(self, path: str) -> bool: ...

    def list_entries(self, path: str) -> List[str]: ...

    def create_directories(self, path: str, mode: int) -> bool: ...

    def create_or_truncate(self, path: str) -> None: ...

    def set_permissions(self, path: str, mode: int) -> None: ...

    def write_all(self, path: str, data: bytes) -> None: ...

    def read_all(self, path: str) -> bytes: ...

    def remove_file(self, path: str) -> None: ...

    def remove_empty_directory(self, path: str) -> None: ...

    def canonical_absolute_path(self, path: str) -> Optional[str]: ...

    def size_of(self, path: str) -> int: ...

    def mime_type_of(self, path: str) -> str: ...


class LocalFileStore:
    """``FileStore`` backed by the local operating system."""

    def exists(self, path: str) -> bool:
        # lexists so dangling symlinks still count as present entries
        return os.path.lexists(path)

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def is_regular_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def is_symlink(self, path: str) -> bool:
        return os.path.islink(path)

    def list_entries(self, path: str) -> List[str]:
        return [name for name in os.listdir(path) if name not in (".", "..")]

    def create_directories(self, path: str, mode: int) -> bool:
        try:
            os.makedirs(path, mode=mode, exist_ok=True)
        except OSError:
            logger.debug("makedirs failed for %s", path, exc_info=True)
            return False
        return True

    def create_or_truncate(self, path: str) -> None:
        with open(path, "wb"):
            pass

    def set_permissions(self, path: str, mode: int) -> None:
        os.chmod(path, mode)

    def write_all(self, path: str, data: bytes) -> None:
        with open(path, "wb") as f:
            f.write(data)

    def read_all(self, path: str) -> bytes:
        with open(path, "rb") as f:
            return f.read()

    def remove_file(self, path: str) -> None:
        os.unlink(path)

    def remove_empty_directory(self, path: str) -> None:
        os.rmdir(path)

    def canonical_absolute_path(self, path: str) -> Optional[str]:
        if not os.path.exists(path):
            return None
        return os.path.realpath(path)

    def size_of(self, path: str) -> int:
        return os.path.getsize(path)

    def mime_type_of(self, path: str) -> str:
        if os.path.isdir(path):
            return DIRECTORY_MIME_TYPE
        if not os.path.exists(path):
            raise FileNotFoundError(path)
        guessed, _encoding = mimetypes.guess_type(path, strict=False)
        return guessed or FALLBACK_MIME_TYPE


__all__ = ["FileStore", "LocalFileStore", "DIRECTORY_MIME_TYPE", "FALLBACK_MIME_TYPE"]
