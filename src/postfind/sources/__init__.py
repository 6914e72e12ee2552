"""Document sources feeding the search engine.

A source owns the document collection and hands the engine a fresh list on
every fetch; the engine never keeps documents between calls.
"""

from .base import ContentSource
from .cache import CachedSource
from .json_file import JsonFileSource
from .static import StaticSource

__all__ = ["ContentSource", "CachedSource", "JsonFileSource", "StaticSource"]
