"""Target language endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from srt_translator.core.config import Settings, get_settings
from srt_translator.schemas import LanguageOption, LanguagesResponse

router = APIRouter()


@router.get("", response_model=LanguagesResponse)
async def list_languages(settings: Annotated[Settings, Depends(get_settings)]):
    """List the selectable target languages and the label each one produces."""
    return LanguagesResponse(
        languages=[
            LanguageOption(
                value=settings.designated_language,
                label="Hebrew",
                prefix=settings.designated_prefix,
            ),
            LanguageOption(value="english", label="English", prefix=settings.default_prefix),
        ]
    )
