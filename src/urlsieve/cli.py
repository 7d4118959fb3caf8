# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""urlsieve CLI: classify, analyze, template commands.

Usage:
    urlsieve --words words.txt classify userlogin 7a9f469c-4382-4a7e-913e-0a5ed2e5f9c8
    urlsieve --words words.txt analyze https://example.com/user/profile?id=123456789012
    urlsieve --words words.txt analyze --input urls.txt --output report.json
    urlsieve --words words.txt template https://example.com/files/abcdef0123456789/view
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .classifier import SegmentClassifier
from .config import load_config
from .dictionary import load_word_list, resolve_word_list_path
from .errors import UrlSieveError

logger = logging.getLogger(__name__)


def _build_classifier(args: argparse.Namespace) -> SegmentClassifier:
    config = load_config(args.config, threshold=args.threshold)
    trie = load_word_list(resolve_word_list_path(args.words))
    logger.debug("Using %r with threshold %.2f", trie, config.threshold)
    return SegmentClassifier(trie, config)


def _read_urls(args: argparse.Namespace) -> list[str]:
    urls = list(args.urls)
    if args.input:
        path = Path(args.input)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise UrlSieveError(f"Cannot read URL list {path}: {e.strerror or e}") from e
        urls.extend(line.strip() for line in text.splitlines() if line.strip())
    if not urls:
        raise UrlSieveError("No URLs given: pass URLs as arguments or use --input FILE")
    return urls


def cmd_classify(args: argparse.Namespace) -> None:
    """Print a verdict per segment."""
    classifier = _build_classifier(args)
    for segment in args.segments:
        meaningful = classifier.classify(segment)
        if args.json:
            coverage = classifier.coverage(segment)
            print(
                json.dumps(
                    {
                        "segment": segment,
                        "is_meaningful": meaningful,
                        "coverage_ratio": round(coverage.ratio, 4),
                        "words": list(coverage.words),
                    },
                    ensure_ascii=False,
                )
            )
        else:
            print(f"{'meaningful' if meaningful else 'random'}\t{segment}")


def cmd_analyze(args: argparse.Namespace) -> None:
    """Analyze URLs and print or save the report."""
    from .url_analyzer import analyze_urls, report_to_dict, save_report

    classifier = _build_classifier(args)
    report = analyze_urls(_read_urls(args), classifier)
    if args.output:
        save_report(report, Path(args.output))
        print(f"Report saved to {args.output}")
    else:
        print(json.dumps(report_to_dict(report), ensure_ascii=False, indent=2))


def cmd_template(args: argparse.Namespace) -> None:
    """Print each URL with random parts replaced."""
    from .url_analyzer import template_url

    classifier = _build_classifier(args)
    for url in _read_urls(args):
        print(template_url(url, classifier, placeholder=args.placeholder))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Separate human-authored URL segments from machine-generated identifiers",
        prog="urlsieve",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging and tracebacks on error")
    parser.add_argument("--log-json", action="store_true", help="Emit logs as JSON lines on stderr")
    parser.add_argument("--words", type=str, metavar="PATH", help="Word list, one word per line (or $URLSIEVE_WORDS)")
    parser.add_argument("--config", type=str, metavar="PATH", help="YAML config file")
    parser.add_argument("--threshold", type=float, metavar="F", help="Coverage ratio a segment must exceed")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_classify = subparsers.add_parser("classify", help="Classify individual segments")
    p_classify.add_argument("segments", nargs="+", metavar="SEGMENT")
    p_classify.add_argument("--json", action="store_true", help="One JSON object per segment with coverage details")

    p_analyze = subparsers.add_parser("analyze", help="Analyze path, query and fragment parts of URLs")
    p_analyze.add_argument("urls", nargs="*", metavar="URL")
    p_analyze.add_argument("--input", type=str, metavar="FILE", help="File with one URL per line")
    p_analyze.add_argument("-o", "--output", type=str, metavar="PATH", help="Save the JSON report to PATH")

    p_template = subparsers.add_parser("template", help="Replace random URL parts with a placeholder")
    p_template.add_argument("urls", nargs="*", metavar="URL")
    p_template.add_argument("--input", type=str, metavar="FILE", help="File with one URL per line")
    p_template.add_argument("--placeholder", type=str, default=":id", help="Replacement text (default: :id)")

    return parser


COMMANDS = {
    "classify": cmd_classify,
    "analyze": cmd_analyze,
    "template": cmd_template,
}


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    from .logging_config import configure

    configure(json_output=args.log_json, level="DEBUG" if args.verbose else "INFO")

    try:
        COMMANDS[args.command](args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(130)
    except UrlSieveError as e:
        print(f"error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc(file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
