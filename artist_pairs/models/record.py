#!/usr/bin/env python3
"""
Input Record Models

This module contains data structures related to reading customer
favorite-artist lists from an input file.
"""

from typing import List, NamedTuple, Optional


class InputUnavailable(NamedTuple):
    """
    The input resource could not be opened or read.

    Attributes:
        path: Path that was requested
        reason: Human-readable cause reported by the OS or decoder
    """

    path: str
    reason: str

    def __str__(self) -> str:
        return f"File could not be loaded: {self.path} ({self.reason})"


class ReadResult(NamedTuple):
    """
    Result of reading an input file.

    Attributes:
        records: One list of artist names per input line, in file order
        lines_read: Number of lines read from the file
        error: Set when the file could not be opened or read
    """

    records: List[List[str]]
    lines_read: int
    error: Optional[InputUnavailable] = None

    @property
    def ok(self) -> bool:
        return self.error is None
