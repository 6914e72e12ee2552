"""Combine per-field relevance scores into one document score."""

from __future__ import annotations

from typing import List, Optional

from postfind.config import ScoringConfig
from postfind.documents import Document
from postfind.search.base_search import Scope
from postfind.search.matcher import tokenize
from postfind.search.scorer import relevance_score

_DEFAULT = ScoringConfig()


def _tags_score(doc: Document, query: str, cfg: ScoringConfig, terms: List[str]) -> float:
    return sum(relevance_score(tag.name, query, cfg, terms=terms) for tag in doc.tags or [])


def _category_score(doc: Document, query: str, cfg: ScoringConfig, terms: List[str]) -> float:
    if doc.category is None:
        return 0.0
    return relevance_score(doc.category.name, query, cfg, terms=terms)


def score_document(
    doc: Document,
    query: str,
    scope: Scope = Scope.ALL,
    config: Optional[ScoringConfig] = None,
    *,
    terms: Optional[List[str]] = None,
) -> float:
    """Return the aggregate score of `doc` for `query` within `scope`.

    With `Scope.ALL` every field contributes, multiplied by its configured
    weight. A single-field scope scores that field alone, unweighted.
    """
    cfg = config or _DEFAULT
    if terms is None:
        terms = tokenize(query)

    match scope:
        case Scope.TITLE:
            return relevance_score(doc.title, query, cfg, terms=terms)
        case Scope.BODY:
            return relevance_score(doc.content, query, cfg, terms=terms)
        case Scope.TAGS:
            return _tags_score(doc, query, cfg, terms)
        case Scope.CATEGORY:
            return _category_score(doc, query, cfg, terms)
        case Scope.ALL:
            w = cfg.weights
            return (
                relevance_score(doc.title, query, cfg, terms=terms) * w.title
                + relevance_score(doc.excerpt, query, cfg, terms=terms) * w.excerpt
                + relevance_score(doc.content, query, cfg, terms=terms) * w.body
                + _tags_score(doc, query, cfg, terms) * w.tags
                + _category_score(doc, query, cfg, terms) * w.category
            )
    raise AssertionError(f"unhandled scope: {scope!r}")
