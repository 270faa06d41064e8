"""
Command-line interface for srtshift.

Main entry point for shifting and trimming SubRip files.
"""

import sys
from pathlib import Path
from typing import Optional

import click
from tqdm import tqdm

from . import __version__
from .exporter import export_to_srt
from .loader import load_subtitles
from .shifter import SubtitleShifter
from .timestamp import format_timestamp, parse_timestamp
from .utils import (
    SrtShiftError,
    TimestampParseError,
    format_duration,
    get_logger,
    setup_logging,
)

logger = get_logger(__name__)


def parse_timestamp_option(ctx, param, value):
    """Click callback turning a timestamp option into milliseconds."""
    if value is None:
        return None
    try:
        return parse_timestamp(value)
    except TimestampParseError as e:
        raise click.BadParameter(str(e))


@click.command()
@click.version_option(version=__version__, prog_name="srtshift")
@click.option(
    "-i",
    "--input",
    "input_path",
    required=True,
    type=click.Path(),
    help="Input SRT file",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    required=True,
    type=click.Path(),
    help="Output SRT file",
)
@click.option(
    "-s",
    "--shift",
    required=True,
    callback=parse_timestamp_option,
    help="Shift timestamps [+/-]hh:mm:ss,xxx",
)
@click.option(
    "-a",
    "--cutafter",
    default=None,
    callback=parse_timestamp_option,
    help="Cut entries ending at or after [+/-]hh:mm:ss,xxx (original timing)",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Do not print the summary",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose logging",
)
@click.option(
    "--log-file",
    type=click.Path(),
    envvar="SRTSHIFT_LOG_FILE",
    help="Optional log file path (or set SRTSHIFT_LOG_FILE env var)",
)
def main(input_path, output_path, shift, cutafter, quiet, verbose, log_file):
    """
    srtshift - Shift and trim SubRip files

    Adds SHIFT to every subtitle's start and end time. Subtitles that would
    start before 00:00:00,000 are dropped, as are subtitles whose original
    end time is at or after CUTAFTER.

    \b
    Example:
        srtshift -i movie.srt -o shifted.srt -s -00:00:01,500
        srtshift -i movie.srt -o trimmed.srt -s +00:00:00,500 -a 01:30:00,000
    """
    # Setup logging
    setup_logging(verbose=verbose, log_file=log_file)

    try:
        # Run pipeline
        result = run_pipeline(
            input_path=input_path,
            output_path=output_path,
            shift=shift,
            cutafter=cutafter,
        )

        # Display summary
        if not quiet:
            display_summary(result, output_path)

        click.echo(f"Successfully wrote to {output_path}")
        sys.exit(0)

    except SrtShiftError as e:
        click.echo(f"Error: {e}", err=True)
        logger.error(f"Run failed: {e}", exc_info=True)
        sys.exit(1)

    except KeyboardInterrupt:
        click.echo("\nInterrupted by user", err=True)
        sys.exit(130)

    except Exception as e:
        click.echo(f"Unexpected error: {e}", err=True)
        logger.error(f"Unexpected error: {e}", exc_info=True)
        sys.exit(1)


def run_pipeline(
    input_path: str,
    output_path: str,
    shift: int,
    cutafter: Optional[int] = None,
) -> dict:
    """
    Load, shift and export a subtitle file.

    Args:
        input_path: Path to input SRT
        output_path: Path for output SRT
        shift: Signed shift in milliseconds
        cutafter: Optional cutoff on original end times, in milliseconds

    Returns:
        Dictionary with pipeline results and statistics
    """
    results = {"shift": shift, "cutafter": cutafter}

    with tqdm(total=3, desc="Loading", unit="phase", disable=None) as pbar:
        # Phase 1: Load and parse the input
        loaded = load_subtitles(input_path)
        results["input"] = loaded
        pbar.update(1)

        # Phase 2: Shift and trim entries
        pbar.set_description("Shifting")
        shifter = SubtitleShifter(delta=shift, end=cutafter)
        entries = shifter.shift(loaded["entries"])
        results["entries"] = entries
        results["shift_stats"] = shifter.stats
        pbar.update(1)

        # Phase 3: Export to SRT
        pbar.set_description("Exporting")
        results["export"] = export_to_srt(entries, output_path)
        pbar.update(1)

    return results


def display_summary(results: dict, output_path: str):
    """
    Display run summary statistics.

    Args:
        results: Pipeline results dictionary
        output_path: Output file path
    """
    click.echo(f"{'='*60}")
    click.echo(f"srtshift v{__version__}")
    click.echo(f"{'='*60}")

    # Options
    cutafter = results.get("cutafter")
    click.echo(f"Shift:         {format_timestamp(results['shift'])}")
    click.echo(f"Cut after:     {'none' if cutafter is None else format_timestamp(cutafter)}")

    # Input statistics
    if "input" in results:
        click.echo(f"Input:         {results['input']['total_entries']} entries")

    # Shift statistics
    if "shift_stats" in results:
        stats = results["shift_stats"]
        click.echo(
            f"Dropped:       {stats['dropped_negative']} before start, "
            f"{stats['dropped_cutoff']} after cutoff"
        )

    # Export statistics
    if "export" in results:
        exp = results["export"]
        click.echo(f"Output:        {exp['output_subtitles']} subtitles")
        click.echo(f"Shown for:     {format_duration(exp['total_duration'])}")
        click.echo(f"File:          {Path(output_path).resolve()}")

    click.echo(f"{'='*60}")


if __name__ == "__main__":
    main()
