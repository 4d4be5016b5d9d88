"""Documentation search tool: validates requests and renders ranked results."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping

from pydantic import BaseModel, Field, ValidationError

from .index import DocIndexStore, DocIndexUnavailableError, get_categories
from .log import get_logger
from .models import DEFAULT_MAX_RESULTS, SearchOptions, SearchResult
from .search import search_documents

logger = get_logger(__name__)

MAX_RESULTS_LIMIT = 20


class SearchDocsInput(BaseModel):
    query: str = Field(description="The search query or question about the CLI")
    category: str | None = Field(
        default=None,
        description="Filter by documentation category (cli, tools, get-started, core, extensions, ...)",
    )
    max_results: int = Field(
        default=DEFAULT_MAX_RESULTS,
        ge=1,
        le=MAX_RESULTS_LIMIT,
        description="Maximum number of results to return (1-20, default: 5)",
    )


@dataclass(frozen=True)
class ToolResult:
    """Payload returned to the caller; ``is_error`` marks failures, not empty matches."""

    payload: dict[str, Any] = field(default_factory=dict)
    is_error: bool = False

    def to_text(self) -> str:
        return json.dumps(self.payload, indent=2, ensure_ascii=False)


def validate_input(data: Mapping[str, Any]) -> SearchDocsInput:
    """Validate raw tool arguments, summarizing errors as ``field: message; ...``."""

    try:
        return SearchDocsInput.model_validate(dict(data))
    except ValidationError as exc:
        message = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        logger.warning("Validation failed", error=message)
        raise ValueError(message) from exc


def format_result(result: SearchResult) -> dict[str, Any]:
    document = result.document
    return {
        "title": document.title,
        "excerpt": result.excerpt,
        "liveUrl": document.live_url,
        "category": document.category,
        "relevanceScore": round(result.relevance_score, 2),
        "matchedHeadings": list(result.matched_headings),
    }


def search_docs(params: Mapping[str, Any], *, store: DocIndexStore) -> ToolResult:
    """Run a documentation search and build the tool response.

    A search with no matches is a successful response with ``totalResults == 0``;
    only bad input, an unknown category or a missing index produce errors.
    """

    query = params.get("query")
    try:
        request = validate_input(params)
    except ValueError as exc:
        return ToolResult(payload={"error": str(exc), "query": query}, is_error=True)

    logger.info("Searching docs", query=request.query, category=request.category)

    try:
        index = store.load()
    except DocIndexUnavailableError as exc:
        logger.error("Search error", error=str(exc))
        return ToolResult(payload={"error": str(exc), "query": request.query}, is_error=True)

    categories = get_categories(index)
    if request.category and request.category not in categories:
        logger.warning("Invalid category", category=request.category)
        return ToolResult(
            payload={
                "error": f"Invalid category: {request.category}",
                "availableCategories": categories,
            },
            is_error=True,
        )

    results = search_documents(
        index.documents,
        SearchOptions(query=request.query, category=request.category, max_results=request.max_results),
    )
    formatted = [format_result(result) for result in results]

    payload: dict[str, Any] = {
        "results": formatted,
        "totalResults": len(formatted),
        "query": request.query,
    }
    if request.category:
        payload["filteredByCategory"] = request.category

    logger.info("Found results", count=len(formatted))
    return ToolResult(payload=payload)
