"""Local documentation search with TF-IDF ranking."""

from .index import (
    DocIndexStore,
    DocIndexUnavailableError,
    get_categories,
    get_category_stats,
    load_doc_index,
    parse_doc_index,
)
from .models import DocIndex, Document, SearchOptions, SearchResult
from .search import search_documents, tokenize
from .tool import SearchDocsInput, ToolResult, search_docs

__version__ = "0.1.0"

__all__ = [
    "Document",
    "DocIndex",
    "SearchOptions",
    "SearchResult",
    "search_documents",
    "tokenize",
    "DocIndexStore",
    "DocIndexUnavailableError",
    "load_doc_index",
    "parse_doc_index",
    "get_categories",
    "get_category_stats",
    "SearchDocsInput",
    "ToolResult",
    "search_docs",
]
