"""
Utility functions for srtshift.

Includes the exception hierarchy, millisecond/timedelta conversion,
file helpers and logging setup.
"""

import logging
import os
import sys
from datetime import timedelta
from typing import Optional


# ============================================================================
# Custom Exception Classes
# ============================================================================


class SrtShiftError(Exception):
    """Base exception for all srtshift errors."""

    pass


class SubtitleIOError(SrtShiftError):
    """Raised when a subtitle file cannot be read or written."""

    pass


class SubtitleFormatError(SrtShiftError):
    """Raised when the input is not a SubRip file."""

    pass


class SubtitleParseError(SrtShiftError):
    """Raised when subtitle content does not follow the SubRip grammar."""

    pass


class TimestampParseError(SrtShiftError):
    """Raised when a timestamp string does not match [+-]hh:mm:ss,mmm."""

    pass


# ============================================================================
# Time Conversion
# ============================================================================


def timedelta_to_ms(value: timedelta) -> int:
    """
    Convert a timedelta to whole milliseconds.

    Example:
        >>> timedelta_to_ms(timedelta(seconds=1, milliseconds=500))
        1500
    """
    return value // timedelta(milliseconds=1)


def ms_to_timedelta(ms: int) -> timedelta:
    """
    Convert milliseconds to a timedelta.

    Example:
        >>> ms_to_timedelta(1500)
        datetime.timedelta(seconds=1, microseconds=500000)
    """
    return timedelta(milliseconds=ms)


def format_duration(ms: int) -> str:
    """
    Format a millisecond duration in human-readable form.

    Args:
        ms: Duration in milliseconds

    Returns:
        Human-readable duration string

    Example:
        >>> format_duration(90500)
        '1m 30.5s'
        >>> format_duration(3661000)
        '1h 1m 1s'
    """
    sign = "-" if ms < 0 else ""
    ms = abs(ms)

    hours = ms // 3600000
    minutes = (ms % 3600000) // 60000
    secs = (ms % 60000) / 1000

    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if secs > 0 or not parts:
        parts.append(f"{secs:g}s")

    return sign + " ".join(parts)


# ============================================================================
# Logging Configuration
# ============================================================================


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """
    Set up logging configuration for srtshift.

    Args:
        verbose: Enable DEBUG level logging if True, otherwise INFO
        log_file: Optional file path to write logs to

    Returns:
        Configured logger instance
    """
    log_level = logging.DEBUG if verbose else logging.INFO

    # Create formatter
    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers
    root_logger.handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File handler (optional)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)  # Always DEBUG for file
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Get srtshift logger
    logger = logging.getLogger("srtshift")
    logger.setLevel(log_level)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    if name == "srtshift" or name.startswith("srtshift."):
        return logging.getLogger(name)
    return logging.getLogger(f"srtshift.{name}")


# ============================================================================
# File Utilities
# ============================================================================


def validate_file_exists(file_path: str) -> bool:
    """Check if a file exists."""
    return os.path.isfile(file_path)


def get_file_size_kb(file_path: str) -> float:
    """
    Get file size in kilobytes.

    Example:
        >>> get_file_size_kb("movie.srt")
        48.12
    """
    size_bytes = os.path.getsize(file_path)
    return round(size_bytes / 1024, 2)
