"""English to Arabic keyword index used by program search."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Sequence

import yaml

from educonnect_mcp.config import settings
from educonnect_mcp.errors import KeywordIndexError

logger = logging.getLogger(__name__)


class KeywordIndex(Mapping[str, tuple[str, ...]]):
    """Read-only mapping from a lowercase term or phrase to Arabic substrings."""

    def __init__(self, entries: Mapping[str, Sequence[str]]) -> None:
        self._entries = MappingProxyType(
            {_normalize_key(term): tuple(keywords) for term, keywords in entries.items()}
        )

    def __getitem__(self, term: str) -> tuple[str, ...]:
        return self._entries[term]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, term: str) -> tuple[str, ...]:
        return self._entries.get(term, ())


def _normalize_key(term: str) -> str:
    return " ".join(str(term).lower().split())


def load_keyword_index(path: Path | None = None) -> KeywordIndex:
    keywords_path = path or settings.keywords_path
    if not keywords_path.exists():
        raise KeywordIndexError(f"Keyword index not found: {keywords_path}")

    try:
        raw = yaml.safe_load(keywords_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise KeywordIndexError(f"Keyword index is not valid YAML: {keywords_path}") from exc

    entries = raw.get("keywords") if isinstance(raw, dict) else None
    if not isinstance(entries, dict):
        raise KeywordIndexError("Keyword index must hold a 'keywords' mapping")
    for term, keywords in entries.items():
        if not isinstance(keywords, list) or not all(isinstance(k, str) for k in keywords):
            raise KeywordIndexError(f"Keywords for '{term}' must be a list of strings")

    index = KeywordIndex(entries)
    logger.info("keyword_index_loaded", extra={"terms": len(index)})
    return index
