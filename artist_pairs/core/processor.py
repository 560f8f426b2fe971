"""
Processing coordination module.

This module runs the pair-counting pipeline over parsed records, tracks
statistics and logs the start banner and summary for a run.
"""

import logging
import time
from datetime import datetime
from typing import List, Sequence, Tuple

from ..constants import DEFAULT_MAX_ARTISTS_PER_RECORD
from ..models import AggregationStats, ReportEntry
from .aggregator import PairAggregator
from .reporter import report

logger = logging.getLogger(__name__)


def log_processing_start(total_records: int, input_file: str, min_times: int) -> float:
    """
    Log the start of processing.

    Args:
        total_records: Number of customer records to aggregate
        input_file: Path to the input file
        min_times: Reporting threshold

    Returns:
        Start timestamp for duration calculation
    """
    start_time = time.time()
    start_datetime = datetime.fromtimestamp(start_time)

    logger.info("=" * 70)
    logger.info("ARTIST PAIR COUNTING - PROCESSING STARTED")
    logger.info("=" * 70)
    logger.info(f"Start time: {start_datetime.strftime('%Y-%m-%d %H:%M:%S')}")
    logger.info(f"Input file: {input_file}")
    logger.info(f"Customer records: {total_records}")
    logger.info(f"Reporting pairs seen more than {min_times} times")
    logger.info("=" * 70)

    return start_time


def calculate_aggregation_stats(
    aggregator: PairAggregator,
    empty_records: int,
    oversized_records: int,
    reported_pairs: int,
    min_times: int,
    start_time: float,
    end_time: float,
) -> AggregationStats:
    """Build the statistics for a finished run."""
    return AggregationStats(
        total_records=aggregator.records_seen,
        empty_records=empty_records,
        oversized_records=oversized_records,
        pairs_observed=aggregator.pairs_seen,
        distinct_pairs=len(aggregator),
        reported_pairs=reported_pairs,
        min_times=min_times,
        start_time=start_time,
        end_time=end_time,
        total_duration=end_time - start_time,
    )


def log_processing_summary(stats: AggregationStats):
    """Log a summary of the run."""
    end_datetime = datetime.fromtimestamp(stats.end_time)

    logger.info("=" * 70)
    logger.info("PROCESSING SUMMARY")
    logger.info("=" * 70)
    logger.info(f"End time: {end_datetime.strftime('%Y-%m-%d %H:%M:%S')}")
    logger.info(f"Total duration: {stats.total_duration:.2f}s")
    logger.info("")
    logger.info("INPUT STATISTICS:")
    logger.info(f"  Customer records processed: {stats.total_records}")
    logger.info(f"  Records with fewer than two artists: {stats.empty_records}")
    logger.info(f"  Records above the artist limit: {stats.oversized_records}")
    logger.info("")
    logger.info("PAIR STATISTICS:")
    logger.info(f"  Pairs observed: {stats.pairs_observed}")
    logger.info(f"  Distinct pairs: {stats.distinct_pairs}")
    logger.info(f"  Pairs seen more than {stats.min_times} times: {stats.reported_pairs}")
    logger.info("=" * 70)

    if stats.reported_pairs == 0:
        logger.warning(f"No artist pair appears more than {stats.min_times} times")


def find_artist_pairs(
    records: Sequence[Sequence[str]],
    min_times: int,
    max_artists: int = DEFAULT_MAX_ARTISTS_PER_RECORD,
) -> Tuple[List[ReportEntry], AggregationStats]:
    """
    Count artist pairs across all records and select those above the threshold.

    Records longer than ``max_artists`` are counted like any other record;
    they only produce a warning.

    Args:
        records: Customer records in input order
        min_times: Exclusive lower bound on the pair count
        max_artists: Documented maximum artists per record

    Returns:
        Tuple of (report entries, run statistics)
    """
    start_time = time.time()
    aggregator = PairAggregator()
    empty_records = 0
    oversized_records = 0

    for line_num, artists in enumerate(records, 1):
        if len(artists) < 2:
            empty_records += 1
        elif len(artists) > max_artists:
            oversized_records += 1
            logger.warning(
                f"Record {line_num}: {len(artists)} artists exceeds the documented maximum of {max_artists}"
            )
        aggregator.record(artists)

    logger.debug(f"Aggregated {aggregator.pairs_seen} pairs into {len(aggregator)} distinct keys")

    entries = list(report(aggregator.counts, min_times))
    end_time = time.time()

    stats = calculate_aggregation_stats(
        aggregator=aggregator,
        empty_records=empty_records,
        oversized_records=oversized_records,
        reported_pairs=len(entries),
        min_times=min_times,
        start_time=start_time,
        end_time=end_time,
    )
    return entries, stats
