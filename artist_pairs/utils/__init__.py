"""
Utilities module for the artist pair finder.

This module provides shared utility functions organized by concern:
- Logging utilities for consistent logging setup
- Validation utilities for CLI paths
"""

from .logging import setup_logging
from .validation import _is_output_path_writable

__all__ = [
    "setup_logging",
    "_is_output_path_writable",
]
