#!/usr/bin/env python3
"""
Statistics Models

This module contains data structures related to aggregation statistics
and run timing.
"""

from typing import NamedTuple


class AggregationStats(NamedTuple):
    """
    Statistics for one pair-counting run.

    Attributes:
        total_records: Number of customer records folded into the counts
        empty_records: Records with fewer than two artists (no pairs)
        oversized_records: Records longer than the documented maximum
        pairs_observed: Total pair increments across all records
        distinct_pairs: Number of unique pair keys
        reported_pairs: Number of pairs above the threshold
        min_times: Threshold used for the report
        start_time: Processing start timestamp
        end_time: Processing end timestamp
        total_duration: Total processing duration in seconds
    """

    total_records: int
    empty_records: int
    oversized_records: int
    pairs_observed: int
    distinct_pairs: int
    reported_pairs: int
    min_times: int
    start_time: float
    end_time: float
    total_duration: float
