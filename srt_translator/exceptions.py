"""Domain exceptions raised by the subtitle services."""

from fastapi import status


class SubtitleServiceError(Exception):
    """Base class for errors the API turns into client-facing responses."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class UnsupportedFileError(SubtitleServiceError):
    """The uploaded file is not an SRT file."""


class MissingInputError(SubtitleServiceError):
    """No subtitle content or no target language was supplied."""


class TranslationError(SubtitleServiceError):
    """A translation call failed; the whole batch is discarded."""

    status_code = status.HTTP_502_BAD_GATEWAY


class TranslationCancelledError(SubtitleServiceError):
    """The batch was superseded by a newer request for the same session."""

    status_code = status.HTTP_409_CONFLICT
