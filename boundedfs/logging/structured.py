"""Structured JSON-lines logging with level filtering and redaction."""

from __future__ import annotations

import json
import sys
import time
import uuid
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, TextIO, Union

from .redaction import DataRedactor


class LogLevel(Enum):
    """Standard log levels."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _LEVEL_ORDER.index(self)

    @classmethod
    def parse(cls, raw: Union[str, "LogLevel", None], default: "LogLevel") -> "LogLevel":
        if isinstance(raw, LogLevel):
            return raw
        try:
            return cls((raw or "").strip().lower())
        except ValueError:
            return default


_LEVEL_ORDER = [LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARNING, LogLevel.ERROR, LogLevel.CRITICAL]


class StructuredLogger:
    """Structured logger emitting one JSON object per line."""

    def __init__(
        self,
        component: str,
        session_id: Optional[str] = None,
        output_file: Optional[Union[str, Path, TextIO]] = None,
        enable_console: bool = True,
        redactor: Optional[DataRedactor] = None,
        min_level: Union[str, LogLevel, None] = LogLevel.DEBUG,
        max_log_size_mb: Optional[int] = None,
        max_log_files: int = 5,
    ) -> None:
        """Initialize structured logger.

        Args:
            component: Component identifier (e.g., 'bounded_path', 'tree')
            session_id: Optional session ID for correlation
            output_file: Optional file path or handle for log output
            enable_console: Whether to output to console (default: True)
            redactor: Optional data redactor for sensitive information
            min_level: Entries below this level are dropped (default: debug)
            max_log_size_mb: Maximum log file size in MB before rotation (None = no limit)
            max_log_files: Maximum number of rotated log files to keep (default: 5)
        """
        self.component = component
        self.session_id = session_id or str(uuid.uuid4())[:8]
        self.start_time = time.time()
        self.redactor = redactor or DataRedactor()
        self.min_level = LogLevel.parse(min_level, LogLevel.DEBUG)

        self.max_log_size_bytes = (max_log_size_mb * 1024 * 1024) if max_log_size_mb else None
        self.max_log_files = max_log_files
        self.log_file_path: Optional[Path] = None

        self.console_enabled = enable_console
        self.log_file: Optional[TextIO] = None

        if output_file:
            if isinstance(output_file, (str, Path)):
                self.log_file_path = Path(output_file)
                self.log_file_path.parent.mkdir(parents=True, exist_ok=True)
                self._open_log_file()
            else:
                self.log_file = output_file

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level.rank >= self.min_level.rank

    def _format_log_entry(self, level: LogLevel, message: str, **context: Any) -> Dict[str, Any]:
        """Format log entry with consistent structure."""
        safe_context = self.redactor.redact_dict(context)

        entry = {
            "timestamp": time.time(),
            "iso_timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime()) + "Z",
            "level": level.value,
            "component": self.component,
            "session_id": self.session_id,
            "session_time": time.time() - self.start_time,
            "message": message,
            **safe_context,
        }

        return entry

    def _open_log_file(self) -> None:
        if self.log_file_path:
            self.log_file = open(self.log_file_path, "a", encoding="utf-8")

    def _rotate_log_if_needed(self) -> None:
        """Rotate log file if size limit is exceeded."""
        if not self.log_file_path or not self.max_log_size_bytes:
            return

        if not (
            self.log_file_path.exists()
            and self.log_file_path.stat().st_size > self.max_log_size_bytes
        ):
            return

        if self.log_file:
            self.log_file.close()

        suffix = self.log_file_path.suffix
        for i in range(self.max_log_files - 1, 0, -1):
            old_file = self.log_file_path.with_suffix(f".{i}{suffix}")
            new_file = self.log_file_path.with_suffix(f".{i+1}{suffix}")
            if old_file.exists():
                old_file.replace(new_file)

        self.log_file_path.replace(self.log_file_path.with_suffix(f".1{suffix}"))
        self._open_log_file()

    def _write_log(self, entry: Dict[str, Any]) -> None:
        json_line = json.dumps(entry, default=str, separators=(",", ":"))

        if self.console_enabled:
            print(json_line, file=sys.stdout, flush=True)

        if self.log_file:
            self._rotate_log_if_needed()
            self.log_file.write(json_line + "\n")
            self.log_file.flush()

    def log(self, level: LogLevel, message: str, **context: Any) -> None:
        if not self.is_enabled_for(level):
            return
        self._write_log(self._format_log_entry(level, message, **context))

    def debug(self, message: str, **context: Any) -> None:
        self.log(LogLevel.DEBUG, message, **context)

    def info(self, message: str, **context: Any) -> None:
        self.log(LogLevel.INFO, message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self.log(LogLevel.WARNING, message, **context)

    def error(self, message: str, **context: Any) -> None:
        self.log(LogLevel.ERROR, message, **context)

    def critical(self, message: str, **context: Any) -> None:
        self.log(LogLevel.CRITICAL, message, **context)

    def close(self) -> None:
        """Close log file handle if open."""
        if self.log_file and hasattr(self.log_file, "close"):
            self.log_file.close()
            self.log_file = None


def create_logger(
    component: str,
    session_id: Optional[str] = None,
    log_dir: Optional[Union[str, Path]] = None,
    **kwargs: Any,
) -> StructuredLogger:
    """Factory function to create structured logger with standard configuration.

    Args:
        component: Component identifier
        session_id: Optional session ID for correlation
        log_dir: Optional directory for log files (uses BFS_LOG_DIR if not provided)
        **kwargs: Additional arguments passed to StructuredLogger

    Returns:
        Configured StructuredLogger instance
    """
    from boundedfs.config import settings

    if log_dir is None:
        log_dir = settings.log_dir

    kwargs.setdefault("min_level", settings.log_level)
    kwargs.setdefault("enable_console", settings.log_console)

    output_file = None
    if log_dir:
        output_file = Path(log_dir) / f"{component}_{session_id or 'default'}.jsonl"

    return StructuredLogger(
        component=component, session_id=session_id, output_file=output_file, **kwargs
    )
