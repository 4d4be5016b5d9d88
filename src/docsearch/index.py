"""Documentation index loading.

The index is a JSON file produced by the docs build step::

    {"documents": [{"id": ..., "title": ..., ...}], "version": "...", "buildDate": "..."}
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .log import get_logger
from .models import DocIndex, Document
from .urls import extract_category, local_path_to_github_url, local_path_to_live_url, normalize_doc_link

logger = get_logger(__name__)


class DocIndexUnavailableError(RuntimeError):
    """Raised when the documentation index cannot be read or parsed."""


class DocumentModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    content: str = ""
    category: str | None = None
    path: str = ""
    headings: list[str] = Field(default_factory=list)
    live_url: str | None = Field(default=None, alias="liveUrl")
    github_url: str | None = Field(default=None, alias="githubUrl")
    source_url: str = Field(default="", alias="sourceUrl")
    last_modified: str | None = Field(default=None, alias="lastModified")

    def to_document(self) -> Document:
        if self.path:
            path = self.path
            live_url = local_path_to_live_url(path)
            github_url = local_path_to_github_url(path)
            category = extract_category(path)
        elif self.source_url:
            link = normalize_doc_link(self.title, self.source_url)
            path, live_url, github_url, category = link.path, link.live_url, link.github_url, link.category
        else:
            path, live_url, github_url, category = "", "", "", extract_category(self.id)

        return Document(
            doc_id=self.id,
            title=self.title,
            category=self.category or category,
            content=self.content,
            headings=tuple(self.headings),
            path=path,
            live_url=self.live_url or live_url,
            github_url=self.github_url or github_url,
            source_url=self.source_url,
            last_modified=self.last_modified,
        )


class DocIndexModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    documents: list[DocumentModel] = Field(default_factory=list)
    version: str = ""
    build_date: str = Field(default="", alias="buildDate")

    def to_index(self) -> DocIndex:
        return DocIndex(
            documents=tuple(document.to_document() for document in self.documents),
            version=self.version,
            build_date=self.build_date,
        )


def parse_doc_index(data: str) -> DocIndex:
    """Parse index JSON text into a ``DocIndex``."""

    try:
        model = DocIndexModel.model_validate_json(data)
    except ValidationError as exc:
        raise DocIndexUnavailableError(f"Documentation index is invalid: {exc}") from exc

    doc_ids = [document.id for document in model.documents]
    duplicates = sorted(doc_id for doc_id, count in Counter(doc_ids).items() if count > 1)
    if duplicates:
        raise DocIndexUnavailableError(f"Documentation index has duplicate ids: {', '.join(duplicates)}")

    return model.to_index()


def load_doc_index(path: str | Path) -> DocIndex:
    """Read and validate the index file at ``path``."""

    index_path = Path(path)
    try:
        data = index_path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Failed to load documentation index", path=str(index_path), error=str(exc))
        raise DocIndexUnavailableError(
            f"Documentation index not found at '{index_path}'. Rebuild the docs index to generate it."
        ) from exc

    index = parse_doc_index(data)
    logger.info("Loaded doc index", documents=len(index.documents))
    logger.debug("Doc index metadata", version=index.version, build_date=index.build_date)
    return index


def get_categories(index: DocIndex) -> list[str]:
    return sorted({doc.category for doc in index.documents})


def get_category_stats(index: DocIndex) -> dict[str, int]:
    """Count documents per category."""

    stats: dict[str, int] = {}
    for doc in index.documents:
        stats[doc.category] = stats.get(doc.category, 0) + 1
    return stats


class DocIndexStore:
    """Loads the index from disk once and serves the cached copy afterwards."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._index: DocIndex | None = None

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> DocIndex:
        if self._index is None:
            self._index = load_doc_index(self._path)
        return self._index

    def reload(self) -> DocIndex:
        self._index = None
        return self.load()
