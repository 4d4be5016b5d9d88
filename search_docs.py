#!/usr/bin/env python3
"""CLI helper to search the local documentation index."""

from __future__ import annotations

import argparse
import sys

from docsearch import DocIndexStore, DocIndexUnavailableError, get_category_stats, search_docs
from docsearch.config import load_settings
from docsearch.log import configure_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search the local documentation index.")
    parser.add_argument("query", nargs="?", default="", help="Search query or question")
    parser.add_argument("--category", default=None, help="Only search documents in this category")
    parser.add_argument(
        "--max-results",
        type=int,
        default=None,
        help="Maximum number of results to return, 1-20 (default: DOCSEARCH_MAX_RESULTS or 5)",
    )
    parser.add_argument(
        "--index",
        default=None,
        help="Path to the index JSON file (default: DOCSEARCH_INDEX_PATH or docs/index.json)",
    )
    parser.add_argument(
        "--list-categories",
        action="store_true",
        help="Print the document count per category and exit.",
    )
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON on stderr.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        settings = load_settings()
    except ValueError as exc:  # pragma: no cover - CLI guard
        raise SystemExit(f"Invalid configuration: {exc}") from exc

    configure_logging(settings.log_level, "json" if args.json_logs else settings.log_format)
    store = DocIndexStore(args.index or settings.index_path)

    if args.list_categories:
        try:
            stats = get_category_stats(store.load())
        except DocIndexUnavailableError as exc:
            raise SystemExit(str(exc)) from exc
        for category, count in sorted(stats.items()):
            print(f"{category}: {count}")  # noqa: T201
        return 0

    max_results = args.max_results if args.max_results is not None else settings.max_results
    params = {"query": args.query, "category": args.category, "max_results": max_results}
    result = search_docs(params, store=store)

    print(result.to_text())  # noqa: T201
    return 1 if result.is_error else 0


if __name__ == "__main__":
    sys.exit(main())
