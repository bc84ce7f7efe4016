"""SRT Translator - translate SubRip subtitle files while keeping their timecodes."""

__version__ = "0.1.0"
