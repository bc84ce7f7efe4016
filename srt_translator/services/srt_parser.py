"""SRT subtitle file parser and generator.

Parsing is permissive: blocks that are too short or lack a recognizable
timecode line are skipped rather than rejected. Timecodes are carried as
opaque strings so they come back out of the generator byte-for-byte.
"""

import re

from srt_translator.models.srt import ParsedBlock, SkipReason, SubtitleEntry

BLOCK_SEPARATOR = re.compile(r"\n\s*\n")
TIMECODE_LINE = re.compile(
    r"(\d{2}:\d{2}:\d{2},\d{3}) --> (\d{2}:\d{2}:\d{2},\d{3})", re.ASCII
)
LEADING_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)


def _normalize_newlines(content: str) -> str:
    return content.replace("\r\n", "\n").replace("\r", "\n")


def _parse_index(line: str) -> int | None:
    """Parse the leading integer of an index line, ``None`` if there is none."""
    match = LEADING_INTEGER.match(line.strip())
    if match is None:
        return None
    return int(match.group(0))


def split_blocks(content: str) -> list[str]:
    """Split SRT content into blank-line separated blocks.

    Args:
        content: Raw SRT file content as string

    Returns:
        List of raw block strings in source order (empty for blank content)
    """
    content = _normalize_newlines(content).lstrip("\ufeff").strip()
    if not content:
        return []
    return BLOCK_SEPARATOR.split(content)


def parse_block(block: str, position: int) -> ParsedBlock:
    """Parse a single block into an entry or a skip reason."""
    lines = block.split("\n")
    if len(lines) < 3:
        return ParsedBlock(position=position, raw=block, skip_reason=SkipReason.TOO_FEW_LINES)

    match = TIMECODE_LINE.search(lines[1])
    if match is None:
        return ParsedBlock(position=position, raw=block, skip_reason=SkipReason.INVALID_TIMECODE)

    start_time, end_time = match.groups()
    entry = SubtitleEntry(
        index=_parse_index(lines[0]),
        start_time=start_time,
        end_time=end_time,
        text="\n".join(lines[2:]).strip(),
    )
    return ParsedBlock(position=position, raw=block, entry=entry)


def parse_srt_blocks(content: str) -> list[ParsedBlock]:
    """Parse SRT content, reporting the outcome of every block.

    Args:
        content: Raw SRT file content as string

    Returns:
        One ParsedBlock per block, in source order
    """
    return [
        parse_block(block, position) for position, block in enumerate(split_blocks(content), 1)
    ]


def parse_srt(content: str) -> list[SubtitleEntry]:
    """Parse SRT content into a list of subtitle entries.

    Malformed blocks are dropped silently; use ``parse_srt_blocks`` to see
    which blocks were skipped and why.

    Args:
        content: Raw SRT file content as string

    Returns:
        List of SubtitleEntry objects in source order
    """
    return [block.entry for block in parse_srt_blocks(content) if block.entry is not None]


def generate_srt(entries: list[SubtitleEntry]) -> str:
    """Serialize entries to SRT text, renumbering them from 1.

    Args:
        entries: List of SubtitleEntry objects

    Returns:
        SRT formatted string
    """
    return "\n".join(
        f"{position}\n{entry.start_time} --> {entry.end_time}\n{entry.text}\n"
        for position, entry in enumerate(entries, start=1)
    )


def extract_texts(entries: list[SubtitleEntry]) -> list[str]:
    """Extract just the text content from entries."""
    return [entry.text for entry in entries]


def update_texts(entries: list[SubtitleEntry], translated_texts: list[str]) -> list[SubtitleEntry]:
    """Return copies of the entries carrying the translated texts.

    Args:
        entries: Original list of SubtitleEntry objects
        translated_texts: List of translated text strings (same length as entries)

    Returns:
        New list of SubtitleEntry objects with updated texts

    Raises:
        ValueError: If lengths don't match
    """
    if len(entries) != len(translated_texts):
        raise ValueError(
            f"Mismatch: {len(entries)} entries but {len(translated_texts)} translations"
        )

    return [
        SubtitleEntry(entry.index, entry.start_time, entry.end_time, translated_text)
        for entry, translated_text in zip(entries, translated_texts)
    ]
