# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Dictionary-coverage segment classifier.

Decides whether a URL segment is *meaningful* (human-authored words or slugs)
or a machine-generated identifier.  First matching rule wins:

  1. shorter than ``min_segment_length``  → meaningful (too short to judge)
  2. structural random-ID pattern         → not meaningful
  3. dictionary coverage ratio            → meaningful iff ratio > threshold

Coverage scan: for every offset in the segment, every dictionary word that
starts there marks the characters it spans.  Overlapping matches raise the
per-character count, never the ratio, so ``covered <= len(segment)`` always
holds.  Scanning every offset handles concatenated slugs such as
``userlogin`` without a tokenizer.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable

from .config import ClassifierConfig
from .patterns import is_likely_random_pattern
from .trie import WordTrie


@dataclasses.dataclass(frozen=True, slots=True)
class Coverage:
    """Per-character word coverage of one segment."""

    segment: str
    counts: tuple[int, ...]  # matched words covering each position
    words: tuple[str, ...]  # matches in scan order (offset, then length)

    @property
    def length(self) -> int:
        return len(self.counts)

    @property
    def covered(self) -> int:
        return sum(1 for c in self.counts if c > 0)

    @property
    def ratio(self) -> float:
        if not self.counts:
            return 0.0
        return self.covered / len(self.counts)


def scan_coverage(segment: str, trie: WordTrie) -> Coverage:
    """Count, for each position of *segment*, how many dictionary matches cover it.

    *segment* is expected lowercased already.
    """
    n = len(segment)
    counts = [0] * n
    words: list[str] = []
    for i in range(n):
        for word in trie.find_words_starting_at(segment, i):
            words.append(word)
            for j in range(i, min(i + len(word), n)):
                counts[j] += 1
    return Coverage(segment=segment, counts=tuple(counts), words=tuple(words))


@dataclasses.dataclass(frozen=True, slots=True)
class SegmentClassifier:
    """Meaningful / random verdicts over a shared, read-only trie.

    Holds the trie by reference; one instance can serve any number of
    threads since neither field is mutated after construction.
    """

    trie: WordTrie
    config: ClassifierConfig = dataclasses.field(default_factory=ClassifierConfig)

    def classify(self, segment: str) -> bool:
        """Return True when *segment* looks human-authored."""
        if len(segment) < self.config.min_segment_length:
            return True
        if is_likely_random_pattern(segment, self.config):
            return False
        return self.coverage(segment).ratio > self.config.threshold

    def is_random(self, segment: str) -> bool:
        return not self.classify(segment)

    def is_meaningful_by_coverage(self, segment: str) -> bool:
        """Rule 3 alone (with the short-segment bypass), skipping the pattern checks."""
        if len(segment) < self.config.min_segment_length:
            return True
        return self.coverage(segment).ratio > self.config.threshold

    def coverage(self, segment: str) -> Coverage:
        return scan_coverage(segment.lower(), self.trie)


def build_dictionary(words: Iterable[str]) -> WordTrie:
    """Build a trie from already-cleaned words. Duplicates and blanks are harmless."""
    trie = WordTrie()
    for word in words:
        trie.insert(word.lower())
    return trie


def is_meaningful(segment: str, trie: WordTrie, config: ClassifierConfig | None = None) -> bool:
    """One-shot verdict for *segment* against *trie*."""
    return SegmentClassifier(trie, config or ClassifierConfig()).classify(segment)
