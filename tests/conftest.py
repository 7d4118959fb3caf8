# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Shared test configuration and fixtures."""

try:
    import urlsieve  # noqa: F401
except ImportError:
    raise ImportError("urlsieve is not installed. Run: pip install -e '.[dev]'") from None

import pytest

from urlsieve.classifier import SegmentClassifier, build_dictionary

# Small stand-in for a real word list: URL vocabulary, no one- or two-letter words.
WORDS = [
    "user",
    "users",
    "login",
    "attempt",
    "search",
    "profile",
    "settings",
    "setting",
    "product",
    "name",
    "super",
    "long",
    "details",
    "detail",
    "view",
    "files",
    "file",
    "document",
    "item",
    "category",
    "electronics",
    "and",
    "gadgets",
    "resource",
    "order",
    "orders",
    "results",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep URLSIEVE_* variables from the developer's shell out of tests."""
    for var in (
        "URLSIEVE_WORDS",
        "URLSIEVE_THRESHOLD",
        "URLSIEVE_MIN_SEGMENT_LENGTH",
        "URLSIEVE_HEX_RATIO",
        "URLSIEVE_DIGIT_RATIO",
        "URLSIEVE_DIGIT_MIN_LENGTH",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def trie():
    return build_dictionary(WORDS)


@pytest.fixture
def classifier(trie):
    return SegmentClassifier(trie)
