"""Pydantic schemas for translation API."""

from pydantic import BaseModel, Field


class TranslationRequest(BaseModel):
    """Request model for translation endpoint."""

    srt_content: str = Field(..., description="SRT subtitle file content to translate")
    target_language: str = Field(
        ...,
        description="Target language identifier (e.g., 'hebrew', 'english')",
        min_length=1,
    )
    filename: str | None = Field(
        None, description="Optional original file name, used to name the translated file"
    )
    session_id: str | None = Field(
        None,
        description=(
            "Optional client session id. A new request with the same id cancels "
            "the session's in-flight translation"
        ),
    )


class TranslationResponse(BaseModel):
    """Response model for translation endpoint."""

    translated_srt: str = Field(
        ..., description="Translated SRT subtitle content with preserved timestamps"
    )
    entry_count: int = Field(..., description="Number of subtitle entries translated")
    skipped_blocks: int = Field(0, description="Number of malformed blocks that were skipped")
    filename: str = Field(..., description="Suggested file name for the translated file")


class ParseRequest(BaseModel):
    """Request model for parse diagnostics endpoint."""

    srt_content: str = Field(..., description="SRT subtitle file content to inspect")


class SubtitleEntrySchema(BaseModel):
    index: int | None
    start_time: str
    end_time: str
    text: str


class ParsedBlockSchema(BaseModel):
    position: int
    accepted: bool
    entry: SubtitleEntrySchema | None = None
    skip_reason: str | None = None


class ParseResponse(BaseModel):
    """Response model for parse diagnostics endpoint."""

    entry_count: int
    skipped_blocks: int
    blocks: list[ParsedBlockSchema]


class LanguageOption(BaseModel):
    value: str
    label: str
    prefix: str


class LanguagesResponse(BaseModel):
    languages: list[LanguageOption]


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    service: str
    status: str
    version: str
    authentication: str
    active_sessions: int = 0
    endpoints: dict[str, list[str]] = {}
