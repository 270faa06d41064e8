"""
Entry shifting module for srtshift.

Moves subtitle entries along the timeline by a constant delta and
drops the ones that fall outside the valid window.
"""

from typing import Dict, Iterable, List, Optional

from .entry import SubtitleEntry
from .timestamp import format_timestamp
from .utils import get_logger

logger = get_logger(__name__)


class SubtitleShifter:
    """
    Shifts subtitle entries and trims them to a window.

    An entry is dropped when its shifted start is negative, or when its
    original (unshifted) end is at or after the cutoff.
    """

    def __init__(self, delta: int = 0, end: Optional[int] = None):
        """
        Initialize the shifter.

        Args:
            delta: Signed shift in milliseconds
            end: Cutoff in milliseconds, compared against original end times.
                None disables the cutoff.
        """
        self.delta = delta
        self.end = end
        self.stats: Dict[str, int] = {}

        logger.debug(
            f"SubtitleShifter initialized: delta={format_timestamp(delta)}, "
            f"end={'none' if end is None else format_timestamp(end)}"
        )

    def shift(self, entries: Iterable[SubtitleEntry]) -> List[SubtitleEntry]:
        """
        Shift entries and filter out those outside the window.

        Source order is preserved and the input entries are left untouched.

        Args:
            entries: Parsed subtitle entries

        Returns:
            New list of shifted entries
        """
        shifted_entries = []
        total = 0
        dropped_negative = 0
        dropped_cutoff = 0

        for entry in entries:
            total += 1
            timespan = entry.timespan + self.delta

            if timespan.start < 0:
                dropped_negative += 1
                continue

            if self.end is not None and entry.timespan.end >= self.end:
                dropped_cutoff += 1
                continue

            shifted_entries.append(SubtitleEntry(timespan=timespan, text=entry.text))

        self.stats = {
            "input_entries": total,
            "output_entries": len(shifted_entries),
            "dropped_negative": dropped_negative,
            "dropped_cutoff": dropped_cutoff,
        }

        logger.info(
            f"Shifted {len(shifted_entries)}/{total} entries "
            f"(dropped {dropped_negative} before start, {dropped_cutoff} after cutoff)"
        )

        return shifted_entries


def shift_entries(
    entries: Iterable[SubtitleEntry],
    delta: int,
    end: Optional[int] = None,
) -> List[SubtitleEntry]:
    """
    Convenience function for shifting entries.

    Args:
        entries: Parsed subtitle entries
        delta: Signed shift in milliseconds
        end: Optional cutoff on original end times, in milliseconds

    Returns:
        Shifted and filtered entries
    """
    return SubtitleShifter(delta=delta, end=end).shift(entries)
