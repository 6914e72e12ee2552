"""Search tools for FastMCP.

Expose ranked article search and term suggestions over the engine held in the
server state.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from fastmcp import FastMCP

from postfind.exceptions import SearchError
from postfind.search.base_search import DisplayDocument, SearchQuery
from postfind.search.engine import SearchEngine
from postfind.search.highlight import highlight_markup
from postfind.search.snippets import extract_relevant_snippet


def _serialize_hit(
    doc: DisplayDocument, query: str, *, with_highlight: bool, preview_length: int
) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "id": doc.id,
        "title": doc.title,
        "slug": doc.slug,
        "excerpt": extract_relevant_snippet(doc.excerpt, query, preview_length),
        "category": doc.category.name if doc.category else None,
        "tags": [t.name for t in doc.tags],
        "published_at": doc.published_at.isoformat(),
        "view_count": doc.view_count,
        "like_count": doc.like_count,
        "score": doc.relevance_score,
        "snippets": list(doc.context_snippets),
    }
    if with_highlight:
        out["title_marked"] = highlight_markup(doc.title, query)
        out["snippets_marked"] = [highlight_markup(s, query) for s in doc.context_snippets]
    return out


def register_search_tools(mcp: FastMCP, get_state: Callable[[], Any]) -> None:
    """Register search tools on the given FastMCP instance.

    Expects `state.engine` (a `SearchEngine`) and `state.settings`.
    """

    def _engine() -> SearchEngine:
        state = get_state()
        engine = getattr(state, "engine", None)
        if engine is None:
            raise RuntimeError(
                "Search engine is not configured. Set POSTFIND_SOURCE__DOCUMENTS_PATH."
            )
        return engine

    @mcp.tool
    async def search_articles(
        query: str,
        *,
        scope: str = "all",
        ordering: str = "relevance",
        limit: Optional[int] = 10,
        offset: Optional[int] = 0,
        highlight: bool = True,
    ) -> Dict[str, Any]:
        """Search published articles by relevance, recency or popularity.

        Parameters
        ----------
        query: str
            Free text; terms are separated by whitespace.
        scope: str
            One of "all", "title", "body", "tags", "category".
        ordering: str
            One of "relevance", "recency", "popularity".
        limit, offset: int | None
            Pagination window (defaults 10 and 0).
        highlight: bool
            Include `<mark>`-wrapped title and snippets.
        """
        engine = _engine()
        try:
            request = SearchQuery(
                text=query,
                scope=scope,
                ordering=ordering,
                limit=int(10 if limit is None else limit),
                offset=int(offset or 0),
            )
        except SearchError as e:
            raise ValueError(str(e)) from e
        result = await engine.search(request)
        preview = engine.settings.snippets.preview_length
        return {
            "documents": [
                _serialize_hit(d, result.query, with_highlight=highlight, preview_length=preview)
                for d in result.documents
            ],
            "total": result.total,
            "query": result.query,
            "elapsed_ms": result.elapsed_ms,
        }

    @mcp.tool
    async def suggest_terms(prefix: str, limit: Optional[int] = 5) -> List[str]:
        """Suggest title words, tags and categories containing `prefix`."""
        return await _engine().suggest(prefix, int(5 if limit is None else limit))
