# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Word-list loading: one word per line, UTF-8."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .config import WORDS_ENV
from .errors import WordListError
from .trie import WordTrie

logger = logging.getLogger(__name__)


def load_word_list(path: str | Path) -> WordTrie:
    """Read *path* into a new trie.

    Lines are stripped and lowercased; blank lines are skipped.  Both ``\\n``
    and ``\\r\\n`` line endings are accepted.

    Raises:
        WordListError: the file is missing, unreadable, or not valid UTF-8.
    """
    trie = WordTrie()
    try:
        with open(path, encoding="utf-8") as f:
            for line in f:
                word = line.strip().lower()
                if word:
                    trie.insert(word)
    except OSError as e:
        raise WordListError(f"Cannot read word list {path}: {e.strerror or e}", path=str(path)) from e
    except UnicodeDecodeError as e:
        raise WordListError(f"Word list {path} is not valid UTF-8: {e.reason}", path=str(path)) from e

    if len(trie) == 0:
        logger.warning("Word list %s contains no words; every long segment will look random", path)
    else:
        logger.info("Loaded %s words from %s", f"{len(trie):,}", path)
    return trie


def resolve_word_list_path(path: str | Path | None = None) -> Path:
    """Explicit *path*, else ``$URLSIEVE_WORDS``.

    Raises:
        WordListError: neither is set.
    """
    if path:
        return Path(path)
    env_path = os.environ.get(WORDS_ENV, "").strip()
    if env_path:
        return Path(env_path)
    raise WordListError(f"No word list given: pass --words or set {WORDS_ENV}")
