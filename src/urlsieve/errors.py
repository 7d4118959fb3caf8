# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""urlsieve exception hierarchy.

The classification core never raises for string input.  These errors belong
to the boundary: word-list loading, configuration and URL parsing.  Catch
UrlSieveError for any of them.
"""

from __future__ import annotations


class UrlSieveError(Exception):
    """Base exception for all urlsieve errors."""


class WordListError(UrlSieveError):
    """Word list missing, unreadable, or not UTF-8."""

    def __init__(self, message: str, *, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class ConfigError(UrlSieveError):
    """Invalid configuration value or unreadable config file."""


class InvalidUrlError(UrlSieveError):
    """URL could not be split into scheme, host, path, query and fragment."""

    def __init__(self, message: str, *, url: str = "") -> None:
        super().__init__(message)
        self.url = url
