"""
Report generation module.

This module selects the artist pairs whose count exceeds the threshold
and writes them as human-readable lines.
"""

import logging
import sys
from typing import Iterable, Iterator, Mapping, Optional, TextIO

from ..models import ArtistPair, ReportEntry

logger = logging.getLogger(__name__)


def report(counts: Mapping[ArtistPair, int], min_times: int) -> Iterator[ReportEntry]:
    """
    Yield every pair seen strictly more than ``min_times`` times.

    A pair whose count equals ``min_times`` is not reported. Entries come
    out in the map's iteration order and the map is never modified, so
    calling this again on unchanged counts yields the same entries.

    Args:
        counts: Pair counts, usually ``PairAggregator.counts``
        min_times: Exclusive lower bound on the count

    Yields:
        ReportEntry for each qualifying pair
    """
    for pair, count in counts.items():
        if count > min_times:
            yield ReportEntry(pair=pair, count=count)


def write_report(entries: Iterable[ReportEntry], stream: Optional[TextIO] = None) -> int:
    """
    Write one line per report entry.

    Args:
        entries: Entries to write
        stream: Text stream to write to (defaults to stdout)

    Returns:
        Number of lines written
    """
    if stream is None:
        stream = sys.stdout

    written = 0
    for entry in entries:
        stream.write(entry.format_line() + "\n")
        written += 1

    logger.debug(f"Wrote {written} report lines")
    return written


def write_report_file(entries: Iterable[ReportEntry], output_path: str) -> int:
    """Write the report to a file, replacing any existing content."""
    try:
        with open(output_path, "w", encoding="utf-8") as f:
            written = write_report(entries, f)
        logger.info(f"Successfully wrote {written} pairs to {output_path}")
        return written
    except OSError as e:
        logger.error(f"Failed to write report to {output_path}: {e}")
        raise
