"""
Subtitle entry value types.

Times are integer milliseconds measured from the start of the media.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TimeSpan:
    """Display interval of a subtitle, in milliseconds."""

    start: int
    end: int

    def __add__(self, delta: int) -> "TimeSpan":
        """Return a new span with both ends moved by delta milliseconds."""
        if not isinstance(delta, int):
            return NotImplemented
        return TimeSpan(self.start + delta, self.end + delta)

    @property
    def duration(self) -> int:
        """Length of the span in milliseconds."""
        return self.end - self.start


@dataclass(frozen=True)
class SubtitleEntry:
    """A time span plus the text shown during it. Text may be absent."""

    timespan: TimeSpan
    text: Optional[str] = None

    @property
    def start(self) -> int:
        """Start time in milliseconds."""
        return self.timespan.start

    @property
    def end(self) -> int:
        """End time in milliseconds."""
        return self.timespan.end
