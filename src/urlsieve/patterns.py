# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Structural checks for machine-generated identifiers.

Cheap character-class counting that runs before the dictionary scan:
canonical UUIDs, hex-dominant strings (hashes, object ids) and long
digit-dominant strings (numeric ids, timestamps).  No regex engine, so each
rule can be tested on its own.
"""

from __future__ import annotations

from .config import ClassifierConfig

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_DECIMAL_DIGITS = frozenset("0123456789")

UUID_LENGTH = 36
_UUID_HYPHENS = frozenset({8, 13, 18, 23})

_DEFAULT_CONFIG = ClassifierConfig()


def is_uuid(segment: str) -> bool:
    """8-4-4-4-12 hex groups separated by hyphens, either case."""
    if len(segment) != UUID_LENGTH:
        return False
    for i, ch in enumerate(segment):
        if i in _UUID_HYPHENS:
            if ch != "-":
                return False
        elif ch not in _HEX_DIGITS:
            return False
    return True


def hex_fraction(segment: str) -> float:
    if not segment:
        return 0.0
    return sum(1 for ch in segment if ch in _HEX_DIGITS) / len(segment)


def digit_fraction(segment: str) -> float:
    if not segment:
        return 0.0
    return sum(1 for ch in segment if ch in _DECIMAL_DIGITS) / len(segment)


def is_likely_random_pattern(segment: str, config: ClassifierConfig | None = None) -> bool:
    """True when *segment* has the shape of a synthetic identifier.

    Segments shorter than ``min_segment_length`` are never flagged.
    """
    config = config or _DEFAULT_CONFIG
    if len(segment) < config.min_segment_length:
        return False

    if is_uuid(segment):
        return True

    if hex_fraction(segment) > config.hex_ratio:
        return True

    # digit rule: long segments only
    return len(segment) > config.digit_min_length and digit_fraction(segment) > config.digit_ratio
