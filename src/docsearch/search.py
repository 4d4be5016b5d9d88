"""Documentation ranking with per-field TF-IDF scoring.

Each document is scored on three fields: body content, title and the joined
headings. Every field reuses one document-frequency table built from the body
content of the filtered document set, and the field scores are combined as
``body + 3 * title + 2 * headings``.

The module keeps no state between calls; callers pass the documents in.
"""

from __future__ import annotations

import math
import re
from typing import Iterable, Mapping, Sequence

from .log import get_logger
from .models import DEFAULT_MAX_RESULTS, DEFAULT_MIN_SCORE, Document, SearchOptions, SearchResult

logger = get_logger(__name__)

BODY_WEIGHT = 1
TITLE_WEIGHT = 3
HEADING_WEIGHT = 2

EXCERPT_CONTEXT_WORDS = 200
EXCERPT_MAX_LENGTH = 4000
ELLIPSIS = "..."

_NON_WORD = re.compile(r"[^\w\s-]")
_WHITESPACE = re.compile(r"\s+")


def tokenize(text: str) -> list[str]:
    """Lowercase ``text`` and split it into tokens longer than two characters."""

    cleaned = _NON_WORD.sub(" ", text.lower())
    return [token for token in cleaned.split() if len(token) > 2]


def count_relevant_tokens(tokens: Iterable[str], relevant_tokens: set[str] | frozenset[str]) -> dict[str, int]:
    """Count occurrences of ``relevant_tokens`` in ``tokens``.

    An empty ``relevant_tokens`` set counts every token.
    """

    counts: dict[str, int] = {}
    for token in tokens:
        if relevant_tokens and token not in relevant_tokens:
            continue
        counts[token] = counts.get(token, 0) + 1
    return counts


def calculate_score(
    query_tokens: Sequence[str],
    token_counts: Mapping[str, int],
    total_tokens: int,
    doc_frequencies: Mapping[str, int],
    total_docs: int,
) -> float:
    """Sum ``tf * idf`` over the distinct query tokens present in one field.

    ``idf`` is ``ln(total_docs / (df + 1))`` and is not clamped, so terms found
    in most documents contribute negatively.
    """

    if total_tokens == 0 or total_docs == 0:
        return 0.0

    score = 0.0
    for query_token in dict.fromkeys(query_tokens):
        tf = token_counts.get(query_token, 0) / total_tokens
        if tf == 0:
            continue
        idf = math.log(total_docs / (doc_frequencies.get(query_token, 0) + 1))
        score += tf * idf
    return score


def composite_score(body_score: float, title_score: float, heading_score: float) -> float:
    return BODY_WEIGHT * body_score + TITLE_WEIGHT * title_score + HEADING_WEIGHT * heading_score


def _token_word_positions(words: Sequence[str]) -> list[int]:
    """Index of the word that produced each token of ``" ".join(words)``."""

    return [word_index for word_index, word in enumerate(words) for _ in tokenize(word)]


def extract_excerpt(
    content: str,
    query_tokens: Sequence[str],
    precomputed_tokens: Sequence[str] | None = None,
    max_length: int = EXCERPT_MAX_LENGTH,
) -> str:
    """Return a generous window of ``content`` around the first query-term hit.

    The window spans ``EXCERPT_CONTEXT_WORDS`` words on each side of the word
    holding the first matching token, so callers rarely need to fetch the full
    section. Without a hit the opening words of the content are returned instead.
    """

    tokens = precomputed_tokens if precomputed_tokens is not None else tokenize(content)
    words = _WHITESPACE.split(content)
    wanted = set(query_tokens)

    match_index = next((index for index, token in enumerate(tokens) if token in wanted), -1)

    if match_index == -1:
        excerpt = " ".join(words[:EXCERPT_CONTEXT_WORDS])
        return excerpt + ELLIPSIS if len(words) > EXCERPT_CONTEXT_WORDS else excerpt

    # One word may yield several tokens (``config.settings.json``) or none (``a.b``).
    positions = _token_word_positions(words)
    if match_index < len(positions):
        word_index = positions[match_index]
    else:
        word_index = min(match_index, len(words) - 1)

    start = max(0, word_index - EXCERPT_CONTEXT_WORDS)
    end = min(len(words), word_index + EXCERPT_CONTEXT_WORDS)

    excerpt = " ".join(words[start:end])
    if start > 0:
        excerpt = ELLIPSIS + excerpt
    if end < len(words):
        excerpt = excerpt + ELLIPSIS

    if len(excerpt) > max_length:
        excerpt = excerpt[:max_length] + ELLIPSIS
    return excerpt


def find_matched_headings(headings: Iterable[str], query_tokens: Sequence[str]) -> list[str]:
    """Return the headings sharing at least one token with the query, in order."""

    wanted = set(query_tokens)
    return [heading for heading in headings if wanted.intersection(tokenize(heading))]


def _safe_length(tokens: Sequence[str]) -> int:
    return len(tokens) or 1


def search_documents(documents: Sequence[Document], options: SearchOptions) -> list[SearchResult]:
    """Rank ``documents`` against ``options.query`` and return the top matches."""

    query = options.query
    category = options.category
    max_results = options.max_results if options.max_results is not None else DEFAULT_MAX_RESULTS
    min_score = options.min_score if options.min_score is not None else DEFAULT_MIN_SCORE

    logger.debug("Searching documents", query=query, category=category, max_results=max_results)

    query_tokens = tokenize(query)
    if not query_tokens:
        logger.warning("No valid query tokens", query=query)
        return []

    query_token_set = frozenset(query_tokens)

    filtered_docs: Sequence[Document] = documents
    if category:
        filtered_docs = [doc for doc in documents if doc.category == category]
        logger.debug("Filtered documents by category", category=category, count=len(filtered_docs))

    if not filtered_docs:
        logger.info("No documents available after filtering", category=category)
        return []

    total_docs = len(filtered_docs)

    content_tokens = [tokenize(doc.content) for doc in filtered_docs]
    title_tokens = [tokenize(doc.title) for doc in filtered_docs]
    heading_tokens = [tokenize(" ".join(doc.headings)) for doc in filtered_docs]

    content_counts = [count_relevant_tokens(tokens, query_token_set) for tokens in content_tokens]
    title_counts = [count_relevant_tokens(tokens, query_token_set) for tokens in title_tokens]
    heading_counts = [count_relevant_tokens(tokens, query_token_set) for tokens in heading_tokens]

    # Body content is the only source of document frequency, for all three fields.
    doc_frequencies: dict[str, int] = {}
    for counts in content_counts:
        for token in counts:
            doc_frequencies[token] = doc_frequencies.get(token, 0) + 1

    results: list[SearchResult] = []
    for index, doc in enumerate(filtered_docs):
        body_score = calculate_score(
            query_tokens, content_counts[index], _safe_length(content_tokens[index]), doc_frequencies, total_docs
        )
        title_score = calculate_score(
            query_tokens, title_counts[index], _safe_length(title_tokens[index]), doc_frequencies, total_docs
        )
        heading_score = calculate_score(
            query_tokens, heading_counts[index], _safe_length(heading_tokens[index]), doc_frequencies, total_docs
        )
        score = composite_score(body_score, title_score, heading_score)

        if score < min_score:
            continue

        results.append(
            SearchResult(
                document=doc,
                excerpt=extract_excerpt(doc.content, query_tokens, content_tokens[index]),
                relevance_score=score,
                matched_headings=tuple(find_matched_headings(doc.headings, query_tokens)),
            )
        )

    ranked = sorted(results, key=lambda result: result.relevance_score, reverse=True)
    limited = ranked[:max_results]

    logger.info("Search completed", query=query, matched=len(ranked), returned=len(limited))
    return limited
