"""Sensitive data redaction for structured logging."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Pattern, Union


class DataRedactor:
    """Redact sensitive information from log data.

    Sandbox paths are logged routinely (escape attempts, removals), so the
    default patterns hide the user-specific prefix of home directories while
    keeping the rest of the path readable.
    """

    def __init__(self, custom_patterns: Optional[List[Pattern[str]]] = None) -> None:
        """Initialize redactor with standard and custom patterns.

        Args:
            custom_patterns: Additional regex patterns to redact
        """
        self.patterns = [
            # Tokens and API keys (common patterns)
            re.compile(
                r'(token|key|secret|password|api_key|credential)["\']?\s*[=:]\s*["\']?[a-zA-Z0-9_-]{8,}["\']?',
                re.IGNORECASE,
            ),
            # User home directories
            re.compile(r"/home/[^/\\\s]+"),
            re.compile(r"/Users/[^/\\\s]+"),
            re.compile(r"[A-Za-z]:\\Users\\[^\\\s]+", re.IGNORECASE),
        ]

        if custom_patterns:
            self.patterns.extend(custom_patterns)

        # Field names redacted entirely
        self.sensitive_fields = {
            "password", "token", "secret", "key", "auth", "credential",
            "api_key", "access_token", "refresh_token", "auth_token", "contents",
        }

    def redact_string(self, text: str) -> str:
        result = text
        for pattern in self.patterns:
            result = pattern.sub("[REDACTED]", result)
        return result

    def redact_path(self, path: Union[str, Path]) -> str:
        return self.redact_string(str(path))

    def redact_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively redact sensitive data from dictionary.

        Args:
            data: Dictionary to redact

        Returns:
            Dictionary with sensitive data redacted
        """
        result: Dict[str, Any] = {}

        for key, value in data.items():
            if key.lower() in self.sensitive_fields:
                result[key] = "[REDACTED]"
                continue

            if isinstance(value, dict):
                result[key] = self.redact_dict(value)
            elif isinstance(value, (list, tuple)):
                result[key] = [
                    self.redact_dict(item) if isinstance(item, dict)
                    else self.redact_string(item) if isinstance(item, str)
                    else item
                    for item in value
                ]
            elif isinstance(value, str):
                result[key] = self.redact_string(value)
            elif isinstance(value, Path):
                result[key] = self.redact_path(value)
            else:
                result[key] = value

        return result

    def add_pattern(self, pattern: Union[str, Pattern[str]]) -> None:
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        self.patterns.append(pattern)

    def add_sensitive_field(self, field_name: str) -> None:
        self.sensitive_fields.add(field_name.lower())
