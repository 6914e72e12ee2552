"""Custom exception hierarchy for postfind.

These exceptions allow callers to discriminate error categories
and handle them appropriately while preserving the original context.
"""

from __future__ import annotations


class PostfindError(Exception):
    """Base class for all postfind exceptions."""


class ConfigError(PostfindError):
    """Raised when configuration loading or validation fails."""


class SourceError(PostfindError):
    """Raised when the document collection cannot be fetched or validated."""


class SearchError(PostfindError):
    """Raised for invalid search options (unknown scope, ordering, etc.)."""
