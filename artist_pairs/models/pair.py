#!/usr/bin/env python3
"""
Artist Pair Models

This module contains the structured key used to count artist pairings
and the report entries produced from those counts.
"""

from typing import NamedTuple


class ArtistPair(NamedTuple):
    """
    Unordered pair of artist names in canonical (sorted) order.

    Attributes:
        first: Lexicographically smaller artist name
        second: Lexicographically larger (or equal) artist name
    """

    first: str
    second: str

    @classmethod
    def of(cls, a: str, b: str) -> "ArtistPair":
        """Build the canonical pair for two names given in any order."""
        if b < a:
            a, b = b, a
        return cls(a, b)

    @property
    def is_self_pair(self) -> bool:
        """True when the same artist was listed twice in one record."""
        return self.first == self.second

    def display(self) -> str:
        return f"({self.first}, {self.second})"


class ReportEntry(NamedTuple):
    """
    A pair that met the reporting threshold.

    Attributes:
        pair: The canonical artist pair
        count: Number of customer records containing the pair
    """

    pair: ArtistPair
    count: int

    def format_line(self) -> str:
        """Render the entry the way the report prints it (trailing space included)."""
        return f"{self.pair.display()} appears {self.count} times! "
