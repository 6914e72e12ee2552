"""Heuristic relevance score for one field of text against one query.

This is not a formal IR model. The score is built from a handful of bonuses
whose sizes come from `ScoringConfig`:

* the whole query appears in the field (``phrase``), and the field starts
  with it (``phrase_prefix``);
* for every query term and every whitespace token of the field, the term is
  a substring of the token (``token_substring``) and, independently, the term
  equals the token (``token_exact``). Bonuses accumulate per token, so a term
  that occurs three times scores three times;
* when at least ``coverage_ratio`` of the distinct terms matched some token,
  ``coverage * ratio`` is added.

A score of 0 means the heuristic found no relation.
"""

from __future__ import annotations

from typing import List, Optional

from postfind.config import ScoringConfig
from postfind.search.matcher import contains, starts_with, tokenize, unique_terms

_DEFAULT = ScoringConfig()


def relevance_score(
    text: str,
    query: str,
    config: Optional[ScoringConfig] = None,
    *,
    terms: Optional[List[str]] = None,
) -> float:
    """Score `text` against `query`.

    Parameters
    ----------
    text:
        Field text (title, excerpt, body, a tag name, a category name).
    query:
        Raw query string; its lowercased form is used for the phrase checks.
    config:
        Scoring constants. Defaults to `ScoringConfig()`.
    terms:
        Pre-tokenized query terms, to avoid re-tokenizing the query for every
        field of every document. Derived from `query` when omitted.
    """
    cfg = config or _DEFAULT
    if not text:
        return 0.0
    if terms is None:
        terms = tokenize(query)
    if not terms:
        return 0.0

    score = 0.0
    if contains(text, query):
        score += cfg.phrase
        if starts_with(text, query):
            score += cfg.phrase_prefix

    tokens = text.lower().split()
    matched: set[str] = set()
    for term in terms:
        for token in tokens:
            if term in token:
                score += cfg.token_substring
                matched.add(term)
            if term == token:
                score += cfg.token_exact
                matched.add(term)

    distinct = unique_terms(terms)
    ratio = len(matched) / len(distinct)
    if ratio >= cfg.coverage_ratio:
        score += cfg.coverage * ratio

    return score
