"""Query tokenization and literal, case-insensitive term matching.

User input is never interpreted as pattern syntax: every term goes through
`escape_term` before it is placed in a regular expression, so `a.b` matches
the text "a.b" and nothing else.

The scorer uses `contains` and `starts_with` for its phrase checks.
`contains_word` is offered to callers that need whole-word tests; scoring
itself compares whitespace tokens.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Pattern

_WHITESPACE = re.compile(r"\s+")


def tokenize(text: str) -> List[str]:
    """Split text on whitespace runs into non-empty lowercase terms.

    Order and duplicates are preserved.
    """
    if not text:
        return []
    return [t for t in _WHITESPACE.split(text.lower()) if t]


def unique_terms(terms: Iterable[str]) -> List[str]:
    """Return terms with duplicates removed, keeping first-seen order."""
    seen: set[str] = set()
    out: List[str] = []
    for term in terms:
        if term not in seen:
            seen.add(term)
            out.append(term)
    return out


def escape_term(term: str) -> str:
    """Escape a term for literal use inside a regular expression."""
    return re.escape(term)


def contains(field: str, term: str) -> bool:
    """Case-insensitive substring test."""
    return term.lower() in (field or "").lower()


def starts_with(field: str, term: str) -> bool:
    """Case-insensitive prefix test."""
    return (field or "").lower().startswith(term.lower())


def contains_word(field: str, term: str) -> bool:
    """Case-insensitive whole-word test.

    The term must be bounded on both sides by a non-word character or the edge
    of the string. Lookarounds are used instead of ``\\b`` so terms that start
    or end with punctuation (``c++``, ``.net``) behave sensibly.
    """
    if not term or not field:
        return False
    pattern = rf"(?<!\w){escape_term(term)}(?!\w)"
    return re.search(pattern, field, flags=re.IGNORECASE) is not None


def build_alternation(terms: Iterable[str]) -> Pattern[str] | None:
    """Build one capturing, case-insensitive alternation over escaped terms.

    Longer terms come first so that "react" never hides "reactive".
    Returns None when there are no terms.
    """
    ordered = sorted(unique_terms(t for t in terms if t), key=len, reverse=True)
    if not ordered:
        return None
    return re.compile("(" + "|".join(escape_term(t) for t in ordered) + ")", re.IGNORECASE)
