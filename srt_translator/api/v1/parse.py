"""Parse diagnostics endpoint."""

from fastapi import APIRouter

from srt_translator.schemas import (
    ParsedBlockSchema,
    ParseRequest,
    ParseResponse,
    SubtitleEntrySchema,
)
from srt_translator.services.srt_parser import parse_srt_blocks

router = APIRouter()


@router.post("", response_model=ParseResponse, summary="Inspect how SRT content parses")
async def parse_srt_content(request: ParseRequest):
    """Report every block of the content as accepted or skipped, without translating."""
    blocks = parse_srt_blocks(request.srt_content)

    results = [
        ParsedBlockSchema(
            position=block.position,
            accepted=block.accepted,
            entry=(
                SubtitleEntrySchema(
                    index=block.entry.index,
                    start_time=block.entry.start_time,
                    end_time=block.entry.end_time,
                    text=block.entry.text,
                )
                if block.entry is not None
                else None
            ),
            skip_reason=block.skip_reason.value if block.skip_reason else None,
        )
        for block in blocks
    ]
    entry_count = sum(1 for block in blocks if block.accepted)

    return ParseResponse(
        entry_count=entry_count,
        skipped_blocks=len(blocks) - entry_count,
        blocks=results,
    )
