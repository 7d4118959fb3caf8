# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Insertion-only prefix trie with multi-match scanning.

Nodes live in an arena: ``_children[i]`` maps a character to the id of the
child node and ``_terminal[i]`` marks that a dictionary word ends at node
``i``.  Node 0 is the root.  The trie is built once and only read afterwards,
so lookups need no locking and can be shared across threads.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

ROOT = 0


class WordTrie:
    """Prefix tree over lowercase words."""

    __slots__ = ("_children", "_terminal", "_word_count")

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._children: list[dict[str, int]] = [{}]
        self._terminal: list[bool] = [False]
        self._word_count = 0
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add *word*. Re-inserting a word changes nothing; the empty string is ignored."""
        if not word:
            return
        node = ROOT
        for ch in word:
            child = self._children[node].get(ch)
            if child is None:
                child = len(self._children)
                self._children.append({})
                self._terminal.append(False)
                self._children[node][ch] = child
            node = child
        if not self._terminal[node]:
            self._terminal[node] = True
            self._word_count += 1

    def find_words_starting_at(self, segment: str, start_index: int) -> list[str]:
        """Return every word that is a prefix of ``segment[start_index:]``, shortest first.

        The walk stops at the first character without a child node, so the
        cost is bounded by the longest match rather than the remaining length.
        """
        found: list[str] = []
        if start_index < 0:
            return found
        children = self._children
        terminal = self._terminal
        node = ROOT
        for end in range(start_index, len(segment)):
            node = children[node].get(segment[end], -1)
            if node < 0:
                break
            if terminal[node]:
                found.append(segment[start_index : end + 1])
        return found

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or not word:
            return False
        node = ROOT
        for ch in word:
            node = self._children[node].get(ch, -1)
            if node < 0:
                return False
        return self._terminal[node]

    def __len__(self) -> int:
        return self._word_count

    def __iter__(self) -> Iterator[str]:
        """Yield stored words in depth-first, character-sorted order."""
        stack: list[tuple[int, str]] = [(ROOT, "")]
        while stack:
            node, prefix = stack.pop()
            if self._terminal[node]:
                yield prefix
            for ch in sorted(self._children[node], reverse=True):
                stack.append((self._children[node][ch], prefix + ch))

    @property
    def node_count(self) -> int:
        """Number of nodes including the root."""
        return len(self._children)

    def __repr__(self) -> str:
        return f"WordTrie(words={self._word_count}, nodes={self.node_count})"
