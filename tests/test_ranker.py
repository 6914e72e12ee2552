from typing import Any, Callable, List

import pytest

from postfind.search.base_search import Ordering, Scope, ScoredDocument
from postfind.search.ranker import (
    apply_threshold,
    filter_published,
    paginate,
    rank,
    score_all,
    sort_scored,
)


def _ids(items: List[ScoredDocument]) -> List[str]:
    return [s.document.id for s in items]


def test_filter_published_drops_drafts(make_doc: Callable[..., Any]) -> None:
    docs = [make_doc("a"), make_doc("b", published=False), make_doc("c")]
    assert [d.id for d in filter_published(docs)] == ["a", "c"]


def test_threshold_boundary(make_doc: Callable[..., Any]) -> None:
    scored = [
        ScoredDocument(make_doc("nine"), 9.0),
        ScoredDocument(make_doc("ten"), 10.0),
        ScoredDocument(make_doc("almost"), 9.99),
    ]
    assert _ids(apply_threshold(scored, 10.0)) == ["ten"]


def test_relevance_sort_is_stable(make_doc: Callable[..., Any]) -> None:
    scored = [
        ScoredDocument(make_doc("a"), 20.0),
        ScoredDocument(make_doc("b"), 50.0),
        ScoredDocument(make_doc("c"), 20.0),
        ScoredDocument(make_doc("d"), 50.0),
    ]
    assert _ids(sort_scored(scored, Ordering.RELEVANCE)) == ["b", "d", "a", "c"]


def test_recency_sort(make_doc: Callable[..., Any]) -> None:
    scored = [
        ScoredDocument(make_doc("old", days=1), 500.0),
        ScoredDocument(make_doc("new", days=30), 10.0),
        ScoredDocument(make_doc("mid", days=10), 100.0),
    ]
    assert _ids(sort_scored(scored, Ordering.RECENCY)) == ["new", "mid", "old"]


def test_popularity_sort_uses_views_plus_likes(make_doc: Callable[..., Any]) -> None:
    scored = [
        ScoredDocument(make_doc("a", views=10, likes=1), 900.0),
        ScoredDocument(make_doc("b", views=5, likes=50), 10.0),
        ScoredDocument(make_doc("c", views=40, likes=0), 10.0),
    ]
    assert _ids(sort_scored(scored, Ordering.POPULARITY)) == ["b", "c", "a"]


@pytest.mark.parametrize(
    "offset, limit, expected",
    [(0, 2, [0, 1]), (1, 2, [1, 2]), (4, 10, [4]), (5, 3, []), (0, 0, []), (10, 1, [])],
)
def test_paginate(offset: int, limit: int, expected: List[int]) -> None:
    assert paginate(list(range(5)), offset, limit) == expected


def test_score_all_keeps_collection_order(make_doc: Callable[..., Any]) -> None:
    docs = [make_doc("a", title="zzz"), make_doc("b", title="hooks")]
    scored = score_all(docs, "hooks", Scope.TITLE)
    assert _ids(scored) == ["a", "b"]
    assert scored[0].score == 0.0
    assert scored[1].score > 0.0


def test_rank_total_counts_before_pagination(make_doc: Callable[..., Any]) -> None:
    docs = [make_doc(str(i), title=f"hooks part {i}") for i in range(5)]
    docs.append(make_doc("noise", title="unrelated"))
    docs.append(make_doc("draft", title="hooks draft", published=False))
    for offset in range(0, 7):
        for limit in range(0, 4):
            page, total = rank(docs, "hooks", offset=offset, limit=limit)
            assert total == 5
            assert len(page) <= limit
            assert "draft" not in _ids(page)
            assert "noise" not in _ids(page)
