"""Search facade: one entry point for ranked search and one for suggestions.

Each call fetches the current collection from the configured source, then
runs purely in memory. Nothing computed for one call is kept for the next,
so overlapping calls are independent; discarding a superseded result is up
to the caller.
"""

from __future__ import annotations

import logging
import time
from typing import Any, List, Optional, Union

from postfind.config import Settings
from postfind.documents import Document
from postfind.search.base_search import (
    DisplayDocument,
    ScoredDocument,
    SearchQuery,
    SearchResult,
)
from postfind.search.ranker import filter_published, rank
from postfind.search.snippets import extract_context_snippets
from postfind.sources.base import ContentSource

logger = logging.getLogger(__name__)


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000.0


class SearchEngine:
    """Ranked search and suggestions over the documents of a `ContentSource`."""

    def __init__(self, source: ContentSource, settings: Optional[Settings] = None) -> None:
        self.source = source
        self.settings = settings or Settings()

    def _display(self, item: ScoredDocument, text: str) -> DisplayDocument:
        cfg = self.settings.snippets
        snippets = extract_context_snippets(
            item.document.content,
            text,
            max_snippets=cfg.max_snippets,
            context_length=cfg.context_length,
        )
        return DisplayDocument(
            **dict(item.document),
            context_snippets=snippets,
            relevance_score=item.score,
        )

    async def search(self, query: Union[SearchQuery, str], **options: Any) -> SearchResult:
        """Search the collection.

        `query` is either a `SearchQuery` or the raw text, in which case
        `options` (scope, ordering, limit, offset) build the `SearchQuery`.
        A blank query returns an empty result without scoring anything; a
        failing source is logged and also yields an empty result.
        """
        started = time.perf_counter()
        if not isinstance(query, SearchQuery):
            query = SearchQuery(text=query, **options)
        if query.is_blank:
            return SearchResult.empty(query.text, _elapsed_ms(started))

        try:
            documents = await self.source.fetch()
        except Exception:
            logger.exception("Search failed: could not load documents for %r", query.text)
            return SearchResult.empty(query.text, _elapsed_ms(started))

        page, total = rank(
            documents,
            query.text,
            scope=query.scope,
            ordering=query.ordering,
            offset=query.offset,
            limit=query.limit,
            config=self.settings.scoring,
        )
        # Snippets only for the returned page
        results = [self._display(item, query.text) for item in page]
        elapsed = _elapsed_ms(started)
        logger.debug(
            "Search %r (scope=%s, ordering=%s): %d of %d in %.1f ms",
            query.text,
            query.scope.value,
            query.ordering.value,
            len(results),
            total,
            elapsed,
        )
        return SearchResult(documents=results, total=total, query=query.text, elapsed_ms=elapsed)

    async def suggest(self, prefix: str, limit: int = 5) -> List[str]:
        """Return up to `limit` title words, tag names and category names
        containing `prefix` (case-insensitive) but not equal to it.

        Order is first-found in collection order; no scoring is done.
        """
        needle = (prefix or "").lower()
        if not needle.strip() or limit <= 0:
            return []
        try:
            documents = await self.source.fetch()
        except Exception:
            logger.exception("Suggest failed: could not load documents for %r", prefix)
            return []
        return collect_suggestions(documents, needle, limit)


def collect_suggestions(documents: List[Document], needle: str, limit: int) -> List[str]:
    """Gather suggestion strings for a lowercased `needle`."""
    found: dict[str, None] = {}

    def offer(candidate: str, compare: str) -> None:
        if needle in compare and compare != needle:
            found.setdefault(candidate, None)

    for doc in filter_published(documents):
        for word in doc.title.lower().split():
            offer(word, word)
        for tag in doc.tags or []:
            offer(tag.name, tag.name.lower())
        if doc.category is not None:
            offer(doc.category.name, doc.category.name.lower())
        if len(found) >= limit:
            break
    return list(found)[:limit]
