"""Domain models."""

from srt_translator.models.srt import ParsedBlock, SkipReason, SubtitleEntry

__all__ = ["SubtitleEntry", "ParsedBlock", "SkipReason"]
