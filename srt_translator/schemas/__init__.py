"""Pydantic schemas for API request/response validation."""

from srt_translator.schemas.translation import (
    HealthResponse,
    LanguageOption,
    LanguagesResponse,
    ParsedBlockSchema,
    ParseRequest,
    ParseResponse,
    SubtitleEntrySchema,
    TranslationRequest,
    TranslationResponse,
)

__all__ = [
    "TranslationRequest",
    "TranslationResponse",
    "ParseRequest",
    "ParseResponse",
    "ParsedBlockSchema",
    "SubtitleEntrySchema",
    "LanguageOption",
    "LanguagesResponse",
    "HealthResponse",
]
