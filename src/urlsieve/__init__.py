# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""urlsieve: tell human-authored URL segments from machine-generated identifiers.

Build a WordTrie once from a word list, then classify path segments, query
values and fragments:
- meaningful: covered by dictionary words (``userlogin``, ``search-results``)
- random: UUIDs, hex hashes, long numeric ids, or low dictionary coverage
"""

from __future__ import annotations

from .classifier import Coverage, SegmentClassifier, build_dictionary, is_meaningful, scan_coverage
from .config import ClassifierConfig, load_config
from .dictionary import load_word_list
from .errors import ConfigError, InvalidUrlError, UrlSieveError, WordListError
from .patterns import is_likely_random_pattern, is_uuid
from .trie import WordTrie
from .url_analyzer import AnalyzedPart, UrlAnalysis, analyze_url, analyze_urls, save_report, template_url

__all__ = [
    "AnalyzedPart",
    "ClassifierConfig",
    "ConfigError",
    "Coverage",
    "InvalidUrlError",
    "SegmentClassifier",
    "UrlAnalysis",
    "UrlSieveError",
    "WordListError",
    "WordTrie",
    "analyze_url",
    "analyze_urls",
    "build_dictionary",
    "is_likely_random_pattern",
    "is_meaningful",
    "is_uuid",
    "load_config",
    "load_word_list",
    "save_report",
    "scan_coverage",
    "template_url",
]
