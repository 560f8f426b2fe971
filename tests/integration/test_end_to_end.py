#!/usr/bin/env python3
"""
Integration tests running the reader, aggregator and reporter together
on a realistic favorites file.
"""

import os
import random
import shutil
import tempfile
import unittest
from itertools import combinations

from artist_pairs import PairAggregator, find_artist_pairs, read_records, report
from artist_pairs.models import ArtistPair


ARTISTS = [
    "Radiohead", "Beck", "Blur", "Pulp", "Oasis", "Björk", "Portishead",
    "Massive Attack", "Air", "Daft Punk", "The Strokes", "Interpol",
]


class TestEndToEnd(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        rng = random.Random(7)
        self.customers = [rng.sample(ARTISTS, rng.randint(0, 8)) for _ in range(300)]
        self.input_file = os.path.join(self.temp_dir, "Artist_lists_small.txt")
        with open(self.input_file, "w", encoding="utf-8") as f:
            for favorites in self.customers:
                f.write(",".join(favorites) + "\n")

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def expected_counts(self):
        counts = {}
        for favorites in self.customers:
            for a, b in combinations(sorted(favorites), 2):
                counts[ArtistPair(a, b)] = counts.get(ArtistPair(a, b), 0) + 1
        return counts

    def test_counts_match_brute_force(self):
        result = read_records(self.input_file)
        self.assertTrue(result.ok)
        self.assertEqual(len(result.records), 300)

        aggregator = PairAggregator()
        aggregator.record_all(result.records)

        self.assertEqual(dict(aggregator.counts), self.expected_counts())

    def test_report_matches_threshold(self):
        expected = self.expected_counts()
        min_times = sorted(expected.values())[len(expected) // 2]

        entries, stats = find_artist_pairs(read_records(self.input_file).records, min_times)

        self.assertEqual(
            {entry.pair: entry.count for entry in entries},
            {pair: count for pair, count in expected.items() if count > min_times},
        )
        self.assertEqual(stats.total_records, 300)
        self.assertEqual(stats.distinct_pairs, len(expected))

    def test_split_files_merge_to_same_counts(self):
        first = PairAggregator()
        first.record_all(self.customers[:150])
        second = PairAggregator()
        second.record_all(self.customers[150:])
        first.merge(second)

        whole = PairAggregator()
        whole.record_all(read_records(self.input_file).records)

        self.assertEqual(set(report(first.counts, 3)), set(report(whole.counts, 3)))


if __name__ == '__main__':
    unittest.main()
