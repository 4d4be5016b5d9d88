"""Shared data structures for documentation search."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_MAX_RESULTS = 5
DEFAULT_MIN_SCORE = 0.01


@dataclass(frozen=True)
class Document:
    """One documentation section as stored in the search index."""

    doc_id: str
    title: str
    category: str
    content: str
    headings: tuple[str, ...] = ()
    path: str = ""
    live_url: str = ""
    github_url: str = ""
    source_url: str = ""
    last_modified: str | None = None


@dataclass(frozen=True)
class DocIndex:
    """A built documentation index."""

    documents: tuple[Document, ...]
    version: str
    build_date: str


@dataclass(frozen=True)
class SearchOptions:
    query: str
    category: str | None = None
    max_results: int = DEFAULT_MAX_RESULTS
    min_score: float = DEFAULT_MIN_SCORE


@dataclass(frozen=True)
class SearchResult:
    """A ranked match with an excerpt suitable for quoting."""

    document: Document
    excerpt: str
    relevance_score: float
    matched_headings: tuple[str, ...] = field(default_factory=tuple)
