"""
Subtitle loading module for srtshift.

Reads a subtitle file, detects its format and parses SubRip content
into SubtitleEntry objects using the srt library.
"""

import re
from pathlib import Path
from typing import Dict, List, Optional

import srt

from .entry import SubtitleEntry, TimeSpan
from .utils import (
    SubtitleFormatError,
    SubtitleIOError,
    SubtitleParseError,
    get_file_size_kb,
    get_logger,
    timedelta_to_ms,
    validate_file_exists,
)

logger = get_logger(__name__)

EXTENSION_FORMATS = {
    ".srt": "srt",
    ".ass": "ass",
    ".ssa": "ssa",
    ".vtt": "vtt",
    ".idx": "idx",
    ".sub": "sub",
}

SRT_TIMING_LINE = re.compile(
    r"^\s*\d+:\d{2}:\d{2}[,.]\d{3}\s*-->\s*\d+:\d{2}:\d{2}[,.]\d{3}", re.MULTILINE
)
MICRODVD_LINE = re.compile(r"^\s*\{\d+\}\{\d*\}", re.MULTILINE)


def detect_format(path: str, content: str) -> Optional[str]:
    """
    Detect the subtitle format of a file.

    The file extension wins when it is a known subtitle extension;
    otherwise the content is sniffed.

    Args:
        path: File path (only the extension is used)
        content: Decoded file content

    Returns:
        Format name ("srt", "ass", "vtt", ...) or None if unknown

    Example:
        >>> detect_format("movie.srt", "")
        'srt'
        >>> detect_format("movie.txt", "WEBVTT\\n\\n00:01.000 --> 00:02.000")
        'vtt'
    """
    suffix = Path(path).suffix.lower()
    if suffix in EXTENSION_FORMATS:
        return EXTENSION_FORMATS[suffix]

    head = content.lstrip()
    if head.startswith("WEBVTT"):
        return "vtt"
    if head.startswith("[Script Info]"):
        return "ass"
    if MICRODVD_LINE.search(content):
        return "microdvd"
    if SRT_TIMING_LINE.search(content):
        return "srt"

    return None


class SubtitleLoader:
    """
    Loads SubRip files into subtitle entries.

    Any other detected (or undetectable) format is rejected.
    """

    def __init__(self, encoding: str = "utf-8-sig"):
        """
        Initialize the loader.

        Args:
            encoding: Text encoding of input files (default accepts an optional BOM)
        """
        self.encoding = encoding
        logger.debug(f"SubtitleLoader initialized with encoding: {encoding}")

    def read_file(self, path: str) -> str:
        """
        Read a whole subtitle file as text.

        Raises:
            SubtitleIOError: If the file is missing, unreadable or not decodable
        """
        if not validate_file_exists(path):
            raise SubtitleIOError(f"Subtitle file not found: {path}")

        try:
            data = Path(path).read_bytes()
        except OSError as e:
            raise SubtitleIOError(f"Could not read {path}: {e}")

        try:
            content = data.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise SubtitleIOError(f"Could not decode {path} as {self.encoding}: {e}")

        logger.debug(f"Read {len(data)} bytes from {path}")
        return content

    def parse(self, content: str) -> List[SubtitleEntry]:
        """
        Parse SubRip text into entries, keeping source order.

        Raises:
            SubtitleParseError: If the content is not valid SubRip or a
                subtitle ends before it starts
        """
        try:
            subtitles = list(srt.parse(content))
        except (srt.SRTParseError, srt.TimestampParseError) as e:
            raise SubtitleParseError(f"Parser error: {e}")

        entries = []
        for sub in subtitles:
            start = timedelta_to_ms(sub.start)
            end = timedelta_to_ms(sub.end)

            # Spans must satisfy start <= end
            if end < start:
                raise SubtitleParseError(
                    f"Subtitle {sub.index} ends before it starts "
                    f"({sub.start} --> {sub.end})"
                )

            entries.append(SubtitleEntry(timespan=TimeSpan(start=start, end=end), text=sub.content))

        logger.debug(f"Parsed {len(entries)} subtitle entries")
        return entries

    def load(self, path: str) -> Dict[str, any]:
        """
        Read, detect and parse a SubRip file.

        Args:
            path: Path to the subtitle file

        Returns:
            Dictionary with the entries and file metadata

        Raises:
            SubtitleIOError: If the file cannot be read
            SubtitleFormatError: If the file is not SubRip
            SubtitleParseError: If the SubRip content is malformed
        """
        logger.info(f"Loading subtitles from: {path}")

        content = self.read_file(path)

        subtitle_format = detect_format(path, content)
        if subtitle_format is None:
            raise SubtitleFormatError(f"Unknown subtitle format: {path}")
        if subtitle_format != "srt":
            raise SubtitleFormatError(
                f"Only srt files supported (detected '{subtitle_format}'): {path}"
            )

        entries = self.parse(content)

        result = {
            "entries": entries,
            "format": subtitle_format,
            "total_entries": len(entries),
            "file_size_kb": get_file_size_kb(path),
            "source_file": str(Path(path).resolve()),
        }

        logger.info(f"Loaded {result['total_entries']} entries from {path}")
        return result


def load_subtitles(path: str, encoding: str = "utf-8-sig") -> Dict[str, any]:
    """
    Convenience function for subtitle loading.

    Args:
        path: Path to the subtitle file
        encoding: Text encoding of the file

    Returns:
        Dictionary containing entries and metadata
    """
    loader = SubtitleLoader(encoding=encoding)
    return loader.load(path)
