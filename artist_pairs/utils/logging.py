"""
Logging utilities for the artist pair finder.

This module provides centralized logging configuration so every module
logs with the same level and format.
"""

import logging


def setup_logging(verbose: bool = False):
    """Setup logging configuration with appropriate level and format."""
    level = logging.DEBUG if verbose else logging.INFO
    format_string = "%(asctime)s - %(levelname)s - %(message)s"

    # basicConfig logs to stderr, which keeps the report on stdout clean
    logging.basicConfig(level=level, format=format_string, datefmt="%Y-%m-%d %H:%M:%S")
