#!/usr/bin/env python3
"""
Artist Pair Finder Package

A Python package for finding pairs of artists that appear together in
many customers' favorite-artist lists.

This package provides both a command-line interface and a programmatic API
for counting artist pair co-occurrences and reporting the frequent ones.
"""

__version__ = "1.0.0"
__author__ = "Artist Pair Finder"
__description__ = (
    "Report artist pairs that co-occur in many customers' favorite lists"
)
__license__ = "MIT"
__status__ = "Production"

# Import models for public API
from .models import (
    ArtistPair,
    ReportEntry,
    InputUnavailable,
    ReadResult,
    AggregationStats,
)

# Import constants for public API
from .constants import (
    EXIT_SUCCESS,
    EXIT_INPUT_ERROR,
    EXIT_CONFIG_ERROR,
    EXIT_INTERRUPTED,
    EXIT_UNEXPECTED_ERROR,
    DEFAULT_INPUT_FILE,
    DEFAULT_MIN_TIMES,
    DEFAULT_MAX_ARTISTS_PER_RECORD,
)

# Import core functionality for public API
from .core import (
    PairAggregator,
    read_records,
    report,
    write_report,
    find_artist_pairs,
)

# Import CLI functionality for public API
from .cli import (
    main,
    create_argument_parser,
)

# Import utilities for public API
from .utils import (
    setup_logging,
)

# Public API exports
__all__ = [
    # Package metadata
    "__version__",
    "__author__",
    "__description__",
    # Data models
    "ArtistPair",
    "ReportEntry",
    "InputUnavailable",
    "ReadResult",
    "AggregationStats",
    # Constants
    "EXIT_SUCCESS",
    "EXIT_INPUT_ERROR",
    "EXIT_CONFIG_ERROR",
    "EXIT_INTERRUPTED",
    "EXIT_UNEXPECTED_ERROR",
    "DEFAULT_INPUT_FILE",
    "DEFAULT_MIN_TIMES",
    "DEFAULT_MAX_ARTISTS_PER_RECORD",
    # Core functionality
    "PairAggregator",
    "read_records",
    "report",
    "write_report",
    "find_artist_pairs",
    # CLI functions
    "main",
    "create_argument_parser",
    # Utilities
    "setup_logging",
]
