#!/usr/bin/env python3
"""
Data Models Module

This module contains all data structures and type definitions used
throughout the artist pair finder.
"""

from .pair import ArtistPair, ReportEntry
from .record import InputUnavailable, ReadResult
from .stats import AggregationStats

__all__ = [
    "ArtistPair",
    "ReportEntry",
    "InputUnavailable",
    "ReadResult",
    "AggregationStats",
]
