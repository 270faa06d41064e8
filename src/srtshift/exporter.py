"""
SRT subtitle exporter module for srtshift.

Serializes subtitle entries to SubRip text with the srt library and
writes the result to disk.
"""

import os
import stat
import tempfile
from pathlib import Path
from typing import Dict, List

import srt

from .entry import SubtitleEntry
from .utils import SubtitleIOError, get_logger, ms_to_timedelta

logger = get_logger(__name__)


class SRTExporter:
    """
    Exports subtitle entries to SRT format.

    Entries are numbered from 1 in the order given; they are never
    re-sorted or dropped on the way out.
    """

    def __init__(self, eol: str = "\n"):
        """
        Initialize the SRT exporter.

        Args:
            eol: Line ending to use in the output (default: "\\n")
        """
        self.eol = eol
        logger.debug(f"SRTExporter initialized: eol={eol!r}")

    def to_subtitles(self, entries: List[SubtitleEntry]) -> List[srt.Subtitle]:
        """Convert entries to srt.Subtitle objects, numbered from 1."""
        return [
            srt.Subtitle(
                index=index,
                start=ms_to_timedelta(entry.start),
                end=ms_to_timedelta(entry.end),
                content=entry.text or "",
            )
            for index, entry in enumerate(entries, start=1)
        ]

    @staticmethod
    def _target_mode(output_file: Path) -> int:
        """
        Permission bits for the output file.

        An existing file keeps its mode; a new one gets what a plain
        open() would create under the current umask.
        """
        if output_file.exists():
            return stat.S_IMODE(output_file.stat().st_mode)

        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask

    def export_to_string(self, entries: List[SubtitleEntry]) -> str:
        """
        Export entries to SRT format string.

        Args:
            entries: Entries to serialize

        Returns:
            SRT formatted string
        """
        logger.info(f"Exporting {len(entries)} entries to SRT format")
        return srt.compose(self.to_subtitles(entries), reindex=False, eol=self.eol)

    def export_to_file(self, entries: List[SubtitleEntry], output_path: str):
        """
        Export entries to an SRT file.

        The content goes to a temporary file next to the target which then
        replaces it, so the target is either left as it was or fully written.
        Symlinks are followed and an existing file keeps its permissions.

        Args:
            entries: Entries to serialize
            output_path: Path to output SRT file

        Raises:
            SubtitleIOError: If the file cannot be written
        """
        logger.info(f"Exporting to file: {output_path}")

        srt_content = self.export_to_string(entries)

        # Replace the file a symlink points at, not the link itself
        output_file = Path(output_path).resolve()
        tmp_path = None
        try:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            mode = self._target_mode(output_file)

            fd, tmp_path = tempfile.mkstemp(
                dir=output_file.parent, prefix=f".{output_file.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(srt_content)

            os.chmod(tmp_path, mode)
            os.replace(tmp_path, output_file)
        except OSError as e:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise SubtitleIOError(f"Couldn't write to {output_path}: {e}")

        logger.info(f"Exported {len(entries)} subtitles to {output_path}")


def export_to_srt(entries: List[SubtitleEntry], output_path: str, eol: str = "\n") -> Dict[str, any]:
    """
    Convenience function to export entries to SRT format.

    Args:
        entries: Subtitle entries with timing
        output_path: Path to output SRT file
        eol: Line ending to use in the output

    Returns:
        Dictionary with export statistics
    """
    exporter = SRTExporter(eol=eol)
    exporter.export_to_file(entries, output_path)

    total_duration = sum(entry.timespan.duration for entry in entries)

    stats = {
        "output_subtitles": len(entries),
        "total_duration": total_duration,
        "output_file": str(Path(output_path).resolve()),
    }

    return stats
