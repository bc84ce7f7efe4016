"""Logging filter for redacting sensitive data from log messages."""

import logging
import re
from typing import Pattern


class SensitiveDataFilter(logging.Filter):
    """Filter to redact sensitive data from log messages.

    Redacts:
    - The service API key (env assignments and key=value pairs)
    - X-API-Key and Authorization headers
    - Bearer tokens
    """

    def __init__(self):
        super().__init__()

        # Order matters - more specific patterns come first
        self.patterns: list[tuple[Pattern, str]] = [
            # Authorization headers (must come before the standalone Bearer pattern)
            (
                re.compile(r"(Authorization):\s+(Bearer\s+)?([^\s,]+)", re.IGNORECASE),
                r"\1: ***REDACTED***",
            ),
            (
                re.compile(r"(X-API-Key):\s*([^\s,]+)", re.IGNORECASE),
                r"\1: ***REDACTED***",
            ),
            # Environment variable assignments (e.g., API_KEY=abc123)
            (
                re.compile(r"\b(API_KEY)=([^\s,\)]+)", re.IGNORECASE),
                r"\1=***REDACTED***",
            ),
            (
                re.compile(
                    r"(api[_-]?key|apikey|token|secret|password)['\"]?\s*[:=]\s*['\"]?"
                    r"([A-Za-z0-9_\-\.]{12,})",
                    re.IGNORECASE,
                ),
                r"\1=***REDACTED***",
            ),
            (
                re.compile(r"\bBearer\s+([A-Za-z0-9_\-\.=]+)", re.IGNORECASE),
                r"Bearer ***REDACTED***",
            ),
        ]

    def filter(self, record: logging.LogRecord) -> bool:
        """Redact the record in place and always let it through."""
        if record.msg:
            record.msg = self.redact(str(record.msg))

        # Args used in % formatting
        if record.args:
            if isinstance(record.args, dict):
                record.args = {k: self._redact_value(v) for k, v in record.args.items()}
            elif isinstance(record.args, tuple):
                record.args = tuple(self._redact_value(arg) for arg in record.args)

        if record.exc_text:
            record.exc_text = self.redact(record.exc_text)

        return True

    def _redact_value(self, value):
        # Non-strings keep their type so %d and friends still format
        if isinstance(value, str):
            return self.redact(value)
        return value

    def redact(self, text: str) -> str:
        """Apply redaction patterns to text.

        Args:
            text: Text to redact

        Returns:
            Text with sensitive data redacted
        """
        for pattern, replacement in self.patterns:
            text = pattern.sub(replacement, text)
        return text
