"""boundedfs centralized configuration.

Provides typed settings for path handling, default permissions, extension
allow-lists and logging. All settings are backed by environment variables
following the BFS_* naming convention.

Example:
    >>> from boundedfs.config import settings
    >>> settings.dir_mode == 0o777
    True
    >>> settings.image_extensions
    ('png', 'jpg', 'jpeg', 'gif')

Environment Variables:
    BFS_SEPARATOR: Path separator used for canonical forms (default: os.sep)
    BFS_DIR_MODE: Octal permission bits for created directories (default: 777)
    BFS_FILE_MODE: Octal permission bits for created files (default: 777)
    BFS_FOLLOW_SYMLINKS: Descend into symlinked directories when walking trees (default: off)
    BFS_IMAGE_EXTENSIONS: Comma separated extensions treated as images
    BFS_READABLE_EXTENSIONS: Comma separated extensions treated as readable documents
    BFS_LOG_LEVEL: Minimum level emitted by structured loggers (default: warning)
    BFS_LOG_DIR: Directory for JSONL log files (default: unset, console only)
    BFS_LOG_CONSOLE: Whether loggers print to stdout (default: on)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_IMAGE_EXTENSIONS: Tuple[str, ...] = ("png", "jpg", "jpeg", "gif")

DEFAULT_READABLE_EXTENSIONS: Tuple[str, ...] = (
    "docx", "doc", "odt",
    "txt", "rtf", "pdf",
    "xls", "xlsx", "ods",
    "ppt", "pptx", "odp",
    "wav", "mp3",
    "rar", "zip",
    "ttf",
    "ai", "psd", "svg",
    "html",
    "avi", "mov", "mp4",
)


def _env(name: str, default: str) -> str:
    """Get environment variable with BFS_* prefix validation."""
    if not name.startswith("BFS_"):
        raise ValueError(f"Only BFS_* env vars are allowed, got: {name}")
    return os.getenv(name, default)


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name, str(default))
    return raw.lower() in {"1", "true", "yes", "on"}


def _env_octal(name: str, default: int) -> int:
    """Get environment variable as octal permission bits (``755`` or ``0o755``)."""
    raw = _env(name, oct(default))
    try:
        return int(raw, 8)
    except Exception:
        return default


def _env_list(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    """Get environment variable as a lower-cased, comma separated tuple."""
    raw = _env(name, "")
    if not raw.strip():
        return default
    items = tuple(part.strip().lower().lstrip(".") for part in raw.split(","))
    return tuple(item for item in items if item) or default


def _env_separator(name: str, default: str) -> str:
    raw = _env(name, default)
    if raw not in ("/", "\\"):
        return default
    return raw


def _env_optional(name: str) -> Optional[str]:
    raw = _env(name, "")
    return raw or None


@dataclass(frozen=True)
class Settings:
    """Centralized runtime settings for boundedfs.

    All values can be overridden via environment variables.
    This dataclass is frozen to prevent accidental mutation at runtime.
    For testing, override environment variables and reload this module,
    or pass explicit values to the APIs that accept them.
    """

    # Path handling
    separator: str = _env_separator("BFS_SEPARATOR", os.sep)
    follow_symlinks: bool = _env_bool("BFS_FOLLOW_SYMLINKS", False)

    # Permissions applied by the creation primitives
    dir_mode: int = _env_octal("BFS_DIR_MODE", 0o777)
    file_mode: int = _env_octal("BFS_FILE_MODE", 0o777)

    # Extension allow-lists for is_image / is_readable_file
    image_extensions: Tuple[str, ...] = _env_list("BFS_IMAGE_EXTENSIONS", DEFAULT_IMAGE_EXTENSIONS)
    readable_extensions: Tuple[str, ...] = _env_list(
        "BFS_READABLE_EXTENSIONS", DEFAULT_READABLE_EXTENSIONS
    )

    # Logging
    log_level: str = _env("BFS_LOG_LEVEL", "warning").lower()
    log_dir: Optional[str] = _env_optional("BFS_LOG_DIR")
    log_console: bool = _env_bool("BFS_LOG_CONSOLE", True)


# Module-level instance for convenient access
settings = Settings()

__all__ = [
    "settings",
    "Settings",
    "DEFAULT_IMAGE_EXTENSIONS",
    "DEFAULT_READABLE_EXTENSIONS",
]
