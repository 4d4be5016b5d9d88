"""Map documentation paths to their published URLs."""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import urlparse

BASE_LIVE_URL = "https://geminicli.com/docs"
BASE_GITHUB_URL = "https://github.com/google-gemini/gemini-cli/blob/main/docs"
DOCS_PREFIX = "docs/"
DEFAULT_CATEGORY = "general"
DOCS_HOST = "geminicli.com"


@dataclass(frozen=True)
class NormalizedDocLink:
    doc_id: str
    path: str
    live_url: str
    github_url: str
    category: str
    source_url: str


def local_path_to_live_url(local_path: str) -> str:
    """Convert a local docs path to its live URL.

    Examples:
    - ``cli/commands.md`` -> ``https://geminicli.com/docs/cli/commands/``
    - ``index.md`` -> ``https://geminicli.com/docs/``
    """

    path = local_path[1:] if local_path.startswith("/") else local_path
    path = re.sub(r"\.md$", "", path)

    if path == "index" or path.endswith("/index"):
        path = re.sub(r"/?index$", "", path)

    return f"{BASE_LIVE_URL}/{path}/" if path else f"{BASE_LIVE_URL}/"


def local_path_to_github_url(local_path: str) -> str:
    path = local_path[1:] if local_path.startswith("/") else local_path
    return f"{BASE_GITHUB_URL}/{path}"


def extract_category(local_path: str) -> str:
    """Use the first directory of the path as category; top-level files are ``general``."""

    parts = local_path.split("/")
    if len(parts) == 1:
        return DEFAULT_CATEGORY
    return parts[0]


def _slugify(text: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")
    return slug or "doc"


def _normalize_docs_path(pathname: str) -> str:
    path = pathname.lstrip("/")

    if path in ("", DOCS_PREFIX, "docs", "docs.md"):
        return "index.md"

    if path.startswith(DOCS_PREFIX):
        path = path[len(DOCS_PREFIX):]

    if path in ("", "index"):
        return "index.md"

    if not path.endswith(".md"):
        return f"{path}.md"
    return path


def normalize_doc_link(title: str, raw_url: str) -> NormalizedDocLink:
    """Normalize a documentation link into ids, URLs and a category.

    Links outside the docs site fall back to a slug of ``title``.
    """

    source_url = re.sub(r"^http://", "https://", raw_url)
    parsed = urlparse(source_url)

    if parsed.scheme and parsed.hostname and DOCS_HOST in parsed.hostname:
        local_path = _normalize_docs_path(parsed.path)
        return NormalizedDocLink(
            doc_id=local_path,
            path=local_path,
            live_url=local_path_to_live_url(local_path),
            github_url=local_path_to_github_url(local_path),
            category=extract_category(local_path),
            source_url=source_url,
        )

    fallback_slug = _slugify(title)
    return NormalizedDocLink(
        doc_id=fallback_slug,
        path=fallback_slug,
        live_url=source_url,
        github_url=source_url,
        category=DEFAULT_CATEGORY,
        source_url=source_url,
    )
