"""Parse -> translate -> generate pipeline for one translation request."""

from dataclasses import dataclass
from pathlib import PurePath

from srt_translator.core.config import Settings, get_settings
from srt_translator.core.logging import get_logger
from srt_translator.exceptions import MissingInputError, UnsupportedFileError
from srt_translator.services.sessions import SessionRegistry, session_registry
from srt_translator.services.srt_parser import (
    extract_texts,
    generate_srt,
    parse_srt_blocks,
    update_texts,
)
from srt_translator.services.translation import Translator, translate_batch

logger = get_logger(__name__)


@dataclass(frozen=True)
class TranslationJob:
    """Everything one translate request needs, passed through the pipeline."""

    content: str | None
    target_language: str | None
    filename: str | None = None
    session_id: str | None = None


@dataclass(frozen=True)
class TranslationOutcome:
    translated_srt: str
    entry_count: int
    skipped_blocks: int
    filename: str


def is_supported_file(filename: str, settings: Settings | None = None) -> bool:
    """Check the filename extension against the allowed subtitle extensions."""
    settings = settings or get_settings()
    suffix = PurePath(filename).suffix.lower()
    return suffix in {ext.lower() for ext in settings.allowed_extensions}


def output_filename(filename: str | None, settings: Settings | None = None) -> str:
    """Name of the translated file offered for download.

    Args:
        filename: Name of the uploaded file, if known
        settings: Settings instance (optional, will use get_settings() if not provided)

    Returns:
        The original name with the output prefix, or the prefixed default name
    """
    settings = settings or get_settings()
    return f"{settings.output_filename_prefix}{filename or settings.default_output_filename}"


def validate_job(job: TranslationJob, settings: Settings | None = None) -> None:
    """Reject a job before any parsing or translation happens.

    Raises:
        MissingInputError: If content or target language is missing
        UnsupportedFileError: If the filename is not an SRT file
    """
    settings = settings or get_settings()

    if job.content is None or not job.target_language or not job.target_language.strip():
        raise MissingInputError("Please provide a subtitle file and a target language")

    if job.filename and not is_supported_file(job.filename, settings):
        raise UnsupportedFileError(
            f"Unsupported file '{job.filename}'. "
            f"Allowed extensions: {', '.join(sorted(settings.allowed_extensions))}"
        )


async def run_translation(
    job: TranslationJob,
    translator: Translator | None = None,
    registry: SessionRegistry | None = None,
    settings: Settings | None = None,
) -> TranslationOutcome:
    """Translate the subtitles of a job into its target language.

    Args:
        job: The translation request
        translator: Translation function (defaults to the placeholder backend)
        registry: Session registry used to supersede stale batches
        settings: Settings instance (optional, will use get_settings() if not provided)

    Returns:
        The generated SRT along with entry and skip counts

    Raises:
        MissingInputError: If content or target language is missing
        UnsupportedFileError: If the filename is not an SRT file
        TranslationError: If any entry fails to translate
        TranslationCancelledError: If a newer request for the session superseded this one
    """
    settings = settings or get_settings()
    registry = registry or session_registry

    validate_job(job, settings)

    blocks = parse_srt_blocks(job.content)
    entries = [block.entry for block in blocks if block.entry is not None]
    skipped = len(blocks) - len(entries)

    if skipped:
        logger.warning("Skipped %d malformed block(s) out of %d", skipped, len(blocks))
    logger.info("Parsed %d subtitle entries from %s", len(entries), job.filename or "request")

    translated_texts = await registry.run(
        job.session_id,
        translate_batch(extract_texts(entries), job.target_language, translator=translator),
    )

    translated_entries = update_texts(entries, translated_texts)

    return TranslationOutcome(
        translated_srt=generate_srt(translated_entries),
        entry_count=len(translated_entries),
        skipped_blocks=skipped,
        filename=output_filename(job.filename, settings),
    )
