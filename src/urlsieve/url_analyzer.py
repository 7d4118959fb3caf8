# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""URL decomposition and batch analysis.

Splits a URL into path segments, query values and fragment, runs each through
a SegmentClassifier, and aggregates results for reporting.  Also rewrites URLs
into templates with likely-random parts replaced by a placeholder, so that
``/orders/7a9f469c-4382-4a7e-913e-0a5ed2e5f9c8/items`` and
``/orders/0c2d.../items`` group together.

Usage:
    from urlsieve.url_analyzer import analyze_urls, save_report
    report = analyze_urls(urls, classifier)
    save_report(report, Path("url_report.json"))
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from pathlib import Path
from urllib.parse import SplitResult, parse_qsl, unquote_plus, urlsplit, urlunsplit

from .classifier import SegmentClassifier
from .errors import InvalidUrlError

logger = logging.getLogger(__name__)

INVALID_URL = "Invalid URL"
DEFAULT_PLACEHOLDER = ":id"


# ── Types ────────────────────────────────────────────────────────────────────


class PartKind(StrEnum):
    """Where in the URL an analyzed string came from."""

    PATH = "path"
    QUERY_VALUE = "queryValue"
    HASH = "hash"


@dataclass(frozen=True)
class AnalyzedPart:
    """Verdict for one extracted string (immutable value object)."""

    part: PartKind
    value: str
    is_meaningful: bool
    key: str | None = None  # query parameter name, queryValue parts only

    def to_dict(self) -> dict:
        data: dict = {"part": self.part.value}
        if self.key is not None:
            data["key"] = self.key
        data["value"] = self.value
        data["is_meaningful"] = self.is_meaningful
        return data


@dataclass
class UrlAnalysis:
    """All verdicts for one URL, or a tagged error when it could not be parsed."""

    original_url: str
    analyzed_parts: list[AnalyzedPart] = field(default_factory=list)
    error: str | None = None

    @property
    def random_parts(self) -> list[AnalyzedPart]:
        return [p for p in self.analyzed_parts if not p.is_meaningful]

    @property
    def meaningful_parts(self) -> list[AnalyzedPart]:
        return [p for p in self.analyzed_parts if p.is_meaningful]

    def to_dict(self) -> dict:
        data: dict = {
            "original_url": self.original_url,
            "analyzed_parts": [p.to_dict() for p in self.analyzed_parts],
        }
        if self.error is not None:
            data["error"] = self.error
        return data


@dataclass(frozen=True)
class AnalysisSummary:
    """Aggregate counts over a batch."""

    urls: int
    invalid_urls: int
    parts: int
    meaningful_parts: int
    random_parts: int


@dataclass
class AnalysisReport:
    """Batch analysis result."""

    analyzed_at: str
    summary: AnalysisSummary
    results: list[UrlAnalysis]


# ── Parsing ──────────────────────────────────────────────────────────────────


def split_url(url: str) -> SplitResult:
    """Split an absolute URL.

    Raises:
        InvalidUrlError: malformed URL, missing scheme or host, or invalid port.
    """
    try:
        parts = urlsplit(url.strip())
        # .port validates the port and raises ValueError when out of range
        _ = parts.port
    except ValueError as e:
        raise InvalidUrlError(f"{INVALID_URL}: {e}", url=url) from e
    if not parts.scheme or not parts.netloc:
        raise InvalidUrlError(f"{INVALID_URL}: missing scheme or host", url=url)
    return parts


def _path_segments(path: str) -> list[str]:
    return [s for s in path.split("/") if s]


def analyze_url(url: str, classifier: SegmentClassifier) -> UrlAnalysis:
    """Classify every path segment, query value and fragment of *url*.

    Parts are reported in URL order: path, then query values, then hash.
    An unparseable URL yields ``error="Invalid URL"`` and no parts.
    """
    result = UrlAnalysis(original_url=url)
    try:
        parts = split_url(url)
    except InvalidUrlError as e:
        logger.warning("Skipping URL %s: %s", url[:120], e)
        result.error = INVALID_URL
        return result

    for segment in _path_segments(parts.path):
        result.analyzed_parts.append(AnalyzedPart(PartKind.PATH, segment, classifier.classify(segment)))

    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        if value:
            result.analyzed_parts.append(
                AnalyzedPart(PartKind.QUERY_VALUE, value, classifier.classify(value), key=key)
            )

    if parts.fragment:
        result.analyzed_parts.append(AnalyzedPart(PartKind.HASH, parts.fragment, classifier.classify(parts.fragment)))

    return result


# ── Templating ───────────────────────────────────────────────────────────────


def _template_query(query: str, classifier: SegmentClassifier, placeholder: str) -> str:
    pieces = []
    for pair in query.split("&"):
        key, sep, raw_value = pair.partition("=")
        if sep and raw_value and not classifier.classify(unquote_plus(raw_value)):
            pieces.append(f"{key}={placeholder}")
        else:
            pieces.append(pair)
    return "&".join(pieces)


def template_url(url: str, classifier: SegmentClassifier, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    """Replace likely-random path segments, query values and fragment with *placeholder*.

    Meaningful parts and URL structure (empty segments, parameter order,
    raw encoding) are kept as-is.  Invalid URLs are returned unchanged.
    """
    try:
        parts = split_url(url)
    except InvalidUrlError:
        return url

    path = "/".join(
        placeholder if segment and not classifier.classify(segment) else segment for segment in parts.path.split("/")
    )
    query = _template_query(parts.query, classifier, placeholder) if parts.query else parts.query
    fragment = parts.fragment
    if fragment and not classifier.classify(fragment):
        fragment = placeholder

    return urlunsplit((parts.scheme, parts.netloc, path, query, fragment))


# ── Batch ────────────────────────────────────────────────────────────────────


def analyze_urls(urls: Iterable[str], classifier: SegmentClassifier) -> AnalysisReport:
    """Analyze every URL and count verdicts."""
    results: list[UrlAnalysis] = []
    invalid = meaningful = random = 0

    for url in urls:
        analysis = analyze_url(url, classifier)
        results.append(analysis)
        if analysis.error is not None:
            invalid += 1
            continue
        n_random = len(analysis.random_parts)
        random += n_random
        meaningful += len(analysis.analyzed_parts) - n_random
        logger.debug("%s → %d parts, %d random", url[:80], len(analysis.analyzed_parts), n_random)

    summary = AnalysisSummary(
        urls=len(results),
        invalid_urls=invalid,
        parts=meaningful + random,
        meaningful_parts=meaningful,
        random_parts=random,
    )
    logger.info(
        "Analyzed %d URLs (%d invalid): %d meaningful, %d random parts",
        summary.urls,
        summary.invalid_urls,
        summary.meaningful_parts,
        summary.random_parts,
    )
    return AnalysisReport(
        analyzed_at=datetime.now(UTC).isoformat(),
        summary=summary,
        results=results,
    )


def report_to_dict(report: AnalysisReport) -> dict:
    return {
        "analyzed_at": report.analyzed_at,
        "summary": dict(report.summary.__dict__),
        "results": [r.to_dict() for r in report.results],
    }


def save_report(report: AnalysisReport, output_path: Path) -> None:
    """Serialize *report* to JSON at *output_path*, creating parent directories."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(report_to_dict(report), ensure_ascii=False, indent=2), encoding="utf-8")
    logger.info("Report saved to %s", output_path)
