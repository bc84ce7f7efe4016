"""SRT subtitle entry model."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class SubtitleEntry:
    """A single subtitle cue.

    Timecodes are kept as the exact strings found in the source file.
    ``index`` is the ordinal declared in the file, or ``None`` when the
    index line has no leading integer.
    """

    index: int | None
    start_time: str
    end_time: str
    text: str

    def __repr__(self) -> str:
        return f"SubtitleEntry(index={self.index}, time={self.start_time} --> {self.end_time})"


class SkipReason(str, Enum):
    """Why a block did not become an entry."""

    TOO_FEW_LINES = "too_few_lines"
    INVALID_TIMECODE = "invalid_timecode"


@dataclass(frozen=True)
class ParsedBlock:
    """Outcome of parsing one blank-line separated block."""

    position: int  # 1-based position among the blocks of the file
    raw: str
    entry: SubtitleEntry | None = None
    skip_reason: SkipReason | None = None

    @property
    def accepted(self) -> bool:
        return self.entry is not None
