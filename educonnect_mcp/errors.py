"""Shared error types for the catalog and MCP tools."""

from __future__ import annotations


class CatalogLoadError(Exception):
    """Raised when the program catalog file is missing or malformed."""


class KeywordIndexError(Exception):
    """Raised when the keyword index file is missing or malformed."""
