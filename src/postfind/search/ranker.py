"""Filter, score, threshold, order and paginate a document collection."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, TypeVar

from postfind.config import ScoringConfig
from postfind.documents import Document
from postfind.search.aggregator import score_document
from postfind.search.base_search import Ordering, Scope, ScoredDocument
from postfind.search.matcher import tokenize

T = TypeVar("T")

_DEFAULT = ScoringConfig()

# Sort keys are negated so a single ascending stable sort gives descending
# order while ties keep collection order.
_SORT_KEYS: Dict[Ordering, Callable[[ScoredDocument], object]] = {
    Ordering.RELEVANCE: lambda s: -s.score,
    Ordering.RECENCY: lambda s: -s.document.published_at.timestamp(),
    Ordering.POPULARITY: lambda s: -s.document.popularity,
}


def filter_published(documents: Iterable[Document]) -> List[Document]:
    """Drop unpublished documents."""
    return [d for d in documents if d.is_published]


def score_all(
    documents: Iterable[Document],
    query: str,
    scope: Scope = Scope.ALL,
    config: Optional[ScoringConfig] = None,
) -> List[ScoredDocument]:
    """Score every document, keeping collection order."""
    terms = tokenize(query)
    return [
        ScoredDocument(document=d, score=score_document(d, query, scope, config, terms=terms))
        for d in documents
    ]


def apply_threshold(scored: Iterable[ScoredDocument], min_score: float) -> List[ScoredDocument]:
    """Keep documents scoring at least `min_score`."""
    return [s for s in scored if s.score >= min_score]


def sort_scored(scored: Iterable[ScoredDocument], ordering: Ordering) -> List[ScoredDocument]:
    """Order scored documents; `sorted` is stable so ties keep their input order."""
    return sorted(scored, key=_SORT_KEYS[ordering])


def paginate(items: Sequence[T], offset: int, limit: int) -> List[T]:
    """Return the `[offset, offset + limit)` window of items."""
    offset = max(0, int(offset))
    limit = max(0, int(limit))
    return list(items[offset : offset + limit])


def rank(
    documents: Iterable[Document],
    query: str,
    *,
    scope: Scope = Scope.ALL,
    ordering: Ordering = Ordering.RELEVANCE,
    offset: int = 0,
    limit: int = 20,
    config: Optional[ScoringConfig] = None,
) -> Tuple[List[ScoredDocument], int]:
    """Run the full ranking pipeline.

    Returns the requested page and the number of documents that passed the
    score threshold before pagination.
    """
    cfg = config or _DEFAULT
    candidates = filter_published(documents)
    scored = apply_threshold(score_all(candidates, query, scope, cfg), cfg.min_score)
    ordered = sort_scored(scored, ordering)
    return paginate(ordered, offset, limit), len(ordered)
