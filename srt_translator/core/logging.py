"""Logging configuration."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys

from srt_translator.core.config import get_settings
from srt_translator.core.log_filter import SensitiveDataFilter


def setup_logging() -> None:
    """Configure application logging with stdout and rotating file handlers."""
    settings = get_settings()

    logs_dir = Path(settings.log_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    handlers = [
        logging.StreamHandler(sys.stdout),
        # 10MB per file, 5 backups
        RotatingFileHandler(
            logs_dir / "app.log",
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        ),
    ]

    if settings.enable_log_redaction:
        log_filter = SensitiveDataFilter()
        for handler in handlers:
            handler.addFilter(log_filter)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def get_logger(name: str) -> logging.Logger:
    """Get logger instance for module."""
    return logging.getLogger(name)
