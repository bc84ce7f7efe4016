"""Pytest configuration and fixtures."""

import asyncio
from unittest.mock import patch

from fastapi.testclient import TestClient
import pytest

from srt_translator.core.config import get_settings
from srt_translator.main import create_app

# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def no_translation_delay(monkeypatch):
    """Make the placeholder translator answer immediately."""
    monkeypatch.setattr(get_settings(), "translation_delay_ms", 0)


@pytest.fixture
def client():
    """Create test client without authentication."""
    with patch("srt_translator.core.security.settings") as mock_settings:
        mock_settings.api_key = None
        app = create_app()
        yield TestClient(app)


@pytest.fixture
def client_with_auth():
    """Client with API key configured (no default headers)."""
    with patch("srt_translator.core.security.settings") as mock_settings:
        mock_settings.api_key = "test_secret_key_12345"
        app = create_app()
        yield TestClient(app)


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_srt():
    """Sample SRT content for testing."""
    return """1
00:00:01,000 --> 00:00:04,000
Hello world

2
00:00:05,000 --> 00:00:08,000
How are you?"""


@pytest.fixture
def messy_srt():
    """SRT content with odd indices, a multi-line cue and malformed blocks."""
    return """7
00:00:01,000 --> 00:00:04,000
First line
Second line

5
not-a-timecode
Dropped

12
00:00:09,500 --> 00:00:05,000
End before start

3
00:00:10,000 --> 00:00:11,000
"""


# ============================================================================
# Translator Doubles
# ============================================================================


def make_delayed_translator(delays: dict[str, float], completed: list[str] | None = None):
    """Build a translator that sleeps a per-text delay before answering.

    Args:
        delays: Seconds to sleep for each input text
        completed: Optional list that receives texts in completion order

    Returns:
        Async translator returning "<lang>:<text>"
    """

    async def translator(text: str, target_language: str) -> str:
        await asyncio.sleep(delays.get(text, 0))
        if completed is not None:
            completed.append(text)
        return f"{target_language}:{text}"

    return translator


def make_failing_translator(fail_on: str, message: str = "backend unavailable"):
    """Build a translator that raises for one specific text."""

    async def translator(text: str, target_language: str) -> str:
        await asyncio.sleep(0)
        if text == fail_on:
            raise RuntimeError(message)
        return f"{target_language}:{text}"

    return translator
