"""Tests for the translation service."""

import asyncio

import pytest

from srt_translator.core.config import Settings
from srt_translator.exceptions import TranslationError
from srt_translator.services.translation import translate_batch, translate_text
from tests.conftest import make_delayed_translator, make_failing_translator


@pytest.fixture
def settings():
    return Settings(translation_delay_ms=0)


class TestTranslateText:
    """Tests for the placeholder translate_text function."""

    async def test_hebrew_prefix(self, settings):
        """Test the designated language gets the Hebrew label."""
        result = await translate_text("Hello world", "hebrew", settings=settings)

        assert result == "תרגום: Hello world"

    async def test_other_language_prefix(self, settings):
        """Test any other identifier gets the default label."""
        assert await translate_text("Hello", "english", settings=settings) == "Translation: Hello"
        assert await translate_text("Hello", "klingon", settings=settings) == "Translation: Hello"

    async def test_language_match_is_exact(self, settings):
        """Test identifiers are compared without case folding."""
        result = await translate_text("Hello", "Hebrew", settings=settings)

        assert result == "Translation: Hello"

    async def test_preserves_multiline_text(self, settings):
        """Test multi-line text is carried through unchanged after the prefix."""
        result = await translate_text("Line one\nLine two", "hebrew", settings=settings)

        assert result == "תרגום: Line one\nLine two"

    async def test_custom_prefixes(self):
        """Test prefixes and designated language come from settings."""
        custom = Settings(
            translation_delay_ms=0,
            designated_language="spanish",
            designated_prefix="ES: ",
            default_prefix="XX: ",
        )

        assert await translate_text("Hi", "spanish", settings=custom) == "ES: Hi"
        assert await translate_text("Hi", "hebrew", settings=custom) == "XX: Hi"

    async def test_uses_global_settings(self):
        """Test the cached settings are used when none are passed."""
        assert await translate_text("Hi", "hebrew") == "תרגום: Hi"


class TestTranslateBatch:
    """Tests for translate_batch function."""

    async def test_default_translator(self):
        """Test the placeholder translator is used by default."""
        result = await translate_batch(["A", "B"], "english")

        assert result == ["Translation: A", "Translation: B"]

    async def test_empty_batch(self):
        """Test an empty batch returns an empty list."""
        assert await translate_batch([], "hebrew") == []

    async def test_preserves_order_under_variable_delay(self):
        """Test results follow input order, not completion order."""
        completed = []
        translator = make_delayed_translator({"A": 0.06, "B": 0.03, "C": 0.0}, completed)

        result = await translate_batch(["A", "B", "C"], "hebrew", translator=translator)

        assert completed == ["C", "B", "A"]
        assert result == ["hebrew:A", "hebrew:B", "hebrew:C"]

    async def test_calls_run_concurrently(self):
        """Test every call is in flight at the same time."""
        in_flight = 0
        peak = 0
        release = asyncio.Event()

        async def translator(text, target_language):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            if peak == 5:
                release.set()
            await release.wait()
            in_flight -= 1
            return text

        result = await translate_batch(list("abcde"), "english", translator=translator)

        assert peak == 5
        assert result == list("abcde")

    async def test_failure_fails_whole_batch(self):
        """Test one failing call raises TranslationError with the cause chained."""
        translator = make_failing_translator("B", "quota exceeded")

        with pytest.raises(TranslationError, match="quota exceeded") as exc_info:
            await translate_batch(["A", "B", "C"], "hebrew", translator=translator)

        assert isinstance(exc_info.value.__cause__, RuntimeError)

    async def test_failure_cancels_pending_calls(self):
        """Test calls still running when another fails are cancelled."""
        cancelled = []

        async def translator(text, target_language):
            if text == "fail":
                raise RuntimeError("boom")
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.append(text)
                raise
            return text

        with pytest.raises(TranslationError):
            await translate_batch(["slow1", "fail", "slow2"], "hebrew", translator=translator)

        assert sorted(cancelled) == ["slow1", "slow2"]
