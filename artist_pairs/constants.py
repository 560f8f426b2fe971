#!/usr/bin/env python3
"""
Application Constants

This module contains all configuration constants and exit codes used
throughout the artist pair finder.
"""

# Exit codes for different failure modes
EXIT_SUCCESS = 0
EXIT_INPUT_ERROR = 2
EXIT_CONFIG_ERROR = 3
EXIT_INTERRUPTED = 130  # Conventional exit code for Ctrl+C
EXIT_UNEXPECTED_ERROR = 10

# Input defaults
DEFAULT_INPUT_FILE = "Artist_lists_small.txt"
DEFAULT_MIN_TIMES = 50
DEFAULT_MAX_ARTISTS_PER_RECORD = 50  # documented, not enforced
ARTIST_DELIMITER = ","
