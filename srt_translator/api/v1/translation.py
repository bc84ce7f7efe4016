"""Translation endpoints."""

from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Form, HTTPException, Response, UploadFile, status

from srt_translator.core.config import Settings, get_settings
from srt_translator.core.logging import get_logger
from srt_translator.exceptions import SubtitleServiceError, TranslationError
from srt_translator.schemas import TranslationRequest, TranslationResponse
from srt_translator.services.pipeline import (
    TranslationJob,
    TranslationOutcome,
    is_supported_file,
    run_translation,
)

logger = get_logger(__name__)

router = APIRouter()

TRANSLATION_FAILED_DETAIL = "Translation failed. Please try again."


async def _translate(job: TranslationJob) -> TranslationOutcome:
    """Run the pipeline and map domain errors to HTTP errors."""
    try:
        return await run_translation(job)
    except TranslationError as e:
        # The cause is logged; clients only get a generic message
        logger.error("Translation error for %s: %s", job.filename or "request", e.__cause__ or e)
        raise HTTPException(status_code=e.status_code, detail=TRANSLATION_FAILED_DETAIL)
    except SubtitleServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    except Exception as e:
        logger.exception("Unexpected error while translating subtitles")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Unexpected error: {str(e)}",
        )


def _content_disposition(filename: str) -> str:
    fallback = filename.encode("ascii", "ignore").decode("ascii") or "subtitles.srt"
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


@router.post(
    "",
    response_model=TranslationResponse,
    status_code=status.HTTP_200_OK,
    summary="Translate SRT subtitle content",
    description="Translates SRT subtitle content while preserving timestamps",
)
async def translate_srt(request: TranslationRequest):
    """Translate SRT subtitle content to the target language.

    Args:
        request: Translation request with SRT content and target language

    Returns:
        Translated SRT content with preserved timestamps

    Raises:
        HTTPException: If validation or translation fails
    """
    outcome = await _translate(
        TranslationJob(
            content=request.srt_content,
            target_language=request.target_language,
            filename=request.filename,
            session_id=request.session_id,
        )
    )

    return TranslationResponse(
        translated_srt=outcome.translated_srt,
        entry_count=outcome.entry_count,
        skipped_blocks=outcome.skipped_blocks,
        filename=outcome.filename,
    )


@router.post(
    "/file",
    status_code=status.HTTP_200_OK,
    summary="Translate an uploaded SRT file",
    description="Translates an uploaded .srt file and returns the translated file as a download",
    response_class=Response,
)
async def translate_srt_file(
    file: Annotated[UploadFile, File(description="SRT subtitle file")],
    target_language: Annotated[str, Form(min_length=1)],
    settings: Annotated[Settings, Depends(get_settings)],
    session_id: Annotated[str | None, Form()] = None,
):
    """Translate an uploaded SRT file and return it as an attachment."""
    if not file.filename or not is_supported_file(file.filename, settings):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please select a valid SRT file",
        )

    raw = await file.read()
    if len(raw) > settings.max_upload_size:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File exceeds maximum size of {settings.max_upload_size} bytes",
        )

    try:
        content = raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Subtitle file must be UTF-8 encoded",
        )

    outcome = await _translate(
        TranslationJob(
            content=content,
            target_language=target_language,
            filename=file.filename,
            session_id=session_id,
        )
    )

    return Response(
        content=outcome.translated_srt,
        media_type="text/plain; charset=utf-8",
        headers={
            "Content-Disposition": _content_disposition(outcome.filename),
            "X-Entry-Count": str(outcome.entry_count),
            "X-Skipped-Blocks": str(outcome.skipped_blocks),
        },
    )
