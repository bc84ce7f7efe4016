"""Subtitle text translation.

``translate_text`` is a placeholder backend: it waits briefly and labels
the text with a language-specific prefix. Anything matching the
``Translator`` protocol can be passed to ``translate_batch`` instead.
"""

import asyncio
from typing import Protocol

from srt_translator.core.config import Settings, get_settings
from srt_translator.core.logging import get_logger
from srt_translator.exceptions import TranslationError

logger = get_logger(__name__)


class Translator(Protocol):
    """Async per-entry translation function."""

    async def __call__(self, text: str, target_language: str) -> str: ...


async def translate_text(
    text: str,
    target_language: str,
    settings: Settings | None = None,
) -> str:
    """Translate a single subtitle text.

    Args:
        text: Text to translate (individual subtitle entry)
        target_language: Target language identifier (e.g., "hebrew", "english")
        settings: Settings instance (optional, will use get_settings() if not provided)

    Returns:
        Translated text
    """
    if settings is None:
        settings = get_settings()

    await asyncio.sleep(settings.translation_delay_ms / 1000)

    if target_language == settings.designated_language:
        return f"{settings.designated_prefix}{text}"
    return f"{settings.default_prefix}{text}"


async def translate_batch(
    texts: list[str],
    target_language: str,
    translator: Translator | None = None,
) -> list[str]:
    """Translate all texts concurrently, keeping input order.

    Every text gets its own call and all calls run at once. If any call
    fails the others are cancelled and nothing is returned.

    Args:
        texts: List of texts to translate
        target_language: Target language identifier
        translator: Translation function (defaults to translate_text)

    Returns:
        List of translated texts in same order as input

    Raises:
        TranslationError: If any translation fails
    """
    translator = translator or translate_text

    logger.info("Starting translation: %d entries -> %s", len(texts), target_language)

    tasks = [asyncio.ensure_future(translator(text, target_language)) for text in texts]
    try:
        translated = await asyncio.gather(*tasks)
    except Exception as e:
        for task in tasks:
            task.cancel()
        # Collect the cancelled and failed siblings so none is left unretrieved
        await asyncio.gather(*tasks, return_exceptions=True)
        logger.error("Translation failed after %d entries were submitted: %s", len(texts), e)
        raise TranslationError(f"Error during translation: {e}") from e

    logger.info("Translation complete: %d entries translated", len(texts))

    return list(translated)
