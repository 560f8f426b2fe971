#!/usr/bin/env python3
"""
Core package for the artist pair finder.

This package provides the core business logic: reading customer records,
aggregating artist pair counts and reporting the pairs above a threshold.
"""

from .reader import (
    read_records,
    split_record,
)

from .aggregator import (
    PairAggregator,
)

from .reporter import (
    report,
    write_report,
    write_report_file,
)

from .processor import (
    find_artist_pairs,
    log_processing_start,
    log_processing_summary,
    calculate_aggregation_stats,
)

__all__ = [
    # Input reading
    "read_records",
    "split_record",
    # Aggregation
    "PairAggregator",
    # Reporting
    "report",
    "write_report",
    "write_report_file",
    # Processing coordination
    "find_artist_pairs",
    "log_processing_start",
    "log_processing_summary",
    "calculate_aggregation_stats",
]
