"""
Pair aggregation module.

This module counts, for every unordered pair of artists, how many
customer records list both of them.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Sequence

from ..models import ArtistPair

logger = logging.getLogger(__name__)


class PairAggregator:
    """
    Accumulates co-occurrence counts for artist pairs.

    Each call to ``record`` folds one customer's list into the counts
    before returning, so the counts always reflect whole records.
    """

    def __init__(self):
        self._counts: Dict[ArtistPair, int] = {}
        self.records_seen = 0
        self.pairs_seen = 0

    def record(self, artists: Sequence[str]) -> int:
        """
        Count every unordered pair within one customer's artist list.

        The list is sorted first so each pair is keyed in canonical order
        and visited once per index pair ``i < j``. A name listed twice
        yields a self-pair such as ``(a, a)``.

        Args:
            artists: The customer's artist names, in any order

        Returns:
            Number of pair increments made for this record
        """
        ordered = sorted(artists)
        size = len(ordered)
        added = 0

        for i in range(size - 1):
            for j in range(i + 1, size):
                key = ArtistPair(ordered[i], ordered[j])
                self._counts[key] = self._counts.get(key, 0) + 1
                added += 1

        self.records_seen += 1
        self.pairs_seen += added
        return added

    def record_all(self, records: Iterable[Sequence[str]]) -> None:
        """Fold records in order."""
        for artists in records:
            self.record(artists)

    def merge(self, other: "PairAggregator") -> None:
        """
        Add another aggregator's counts into this one.

        Counts for identical keys are summed, so the merged result does
        not depend on the order aggregators are merged in.
        """
        for key, count in other._counts.items():
            self._counts[key] = self._counts.get(key, 0) + count
        self.records_seen += other.records_seen
        self.pairs_seen += other.pairs_seen
        logger.debug(f"Merged {len(other)} pair counts ({len(self)} distinct pairs now)")

    def count(self, a: str, b: str) -> int:
        """Return the count for the unordered pair ``(a, b)``, 0 if never seen."""
        return self._counts.get(ArtistPair.of(a, b), 0)

    @property
    def counts(self) -> Mapping[ArtistPair, int]:
        """Read-only view of the pair counts."""
        return MappingProxyType(self._counts)

    def __len__(self) -> int:
        return len(self._counts)
