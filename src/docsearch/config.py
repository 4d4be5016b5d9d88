"""Environment-driven settings for documentation search."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .models import DEFAULT_MAX_RESULTS

load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_INDEX_PATH = PROJECT_ROOT / "docs" / "index.json"


@dataclass(frozen=True)
class Settings:
    index_path: Path
    log_level: str = "INFO"
    log_format: str = "console"
    max_results: int = DEFAULT_MAX_RESULTS


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from exc


def load_settings() -> Settings:
    """Build settings from the environment (and a ``.env`` file when present)."""

    index_path = os.getenv("DOCSEARCH_INDEX_PATH")
    return Settings(
        index_path=Path(index_path) if index_path else DEFAULT_INDEX_PATH,
        log_level=(os.getenv("DOCSEARCH_LOG_LEVEL") or "INFO").upper(),
        log_format=(os.getenv("DOCSEARCH_LOG_FORMAT") or "console").lower(),
        max_results=_int_from_env("DOCSEARCH_MAX_RESULTS", DEFAULT_MAX_RESULTS),
    )
