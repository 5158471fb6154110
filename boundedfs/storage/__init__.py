"""Filesystem collaborators for boundedfs."""

from .file_store import FileStore, LocalFileStore

__all__ = ["FileStore", "LocalFileStore"]
