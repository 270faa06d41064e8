"""
srtshift: Shift and trim SubRip subtitle files

Offsets every subtitle in an .srt file by a signed delta, drops the
subtitles pushed before the start of the timeline and the ones ending
after an optional cutoff, and writes the result as a new .srt file.
"""

__version__ = "0.1.1"
__author__ = "srtshift Contributors"
__license__ = "MIT"

from .cli import main as cli_main
from .entry import SubtitleEntry, TimeSpan
from .exporter import SRTExporter, export_to_srt
from .loader import SubtitleLoader, detect_format, load_subtitles
from .shifter import SubtitleShifter, shift_entries
from .timestamp import MAX_TIMESTAMP, format_timestamp, parse_timestamp
from .utils import (
    SrtShiftError,
    SubtitleFormatError,
    SubtitleIOError,
    SubtitleParseError,
    TimestampParseError,
)

__all__ = [
    "__version__",
    "parse_timestamp",
    "format_timestamp",
    "MAX_TIMESTAMP",
    "TimeSpan",
    "SubtitleEntry",
    "SubtitleShifter",
    "shift_entries",
    "SubtitleLoader",
    "detect_format",
    "load_subtitles",
    "SRTExporter",
    "export_to_srt",
    "SrtShiftError",
    "SubtitleIOError",
    "SubtitleFormatError",
    "SubtitleParseError",
    "TimestampParseError",
    "cli_main",
]
