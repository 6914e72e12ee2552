"""Context snippets around query matches in a document body."""

from __future__ import annotations

from typing import List, Tuple

from postfind.search.matcher import tokenize

ELLIPSIS = "..."


def _wrap(content: str, start: int, end: int) -> str:
    snippet = content[start:end].strip()
    if start > 0:
        snippet = ELLIPSIS + snippet
    if end < len(content):
        snippet = snippet + ELLIPSIS
    return snippet


def _core(snippet: str) -> str:
    """Strip the ellipsis markers added by `_wrap`."""
    if snippet.startswith(ELLIPSIS):
        snippet = snippet[len(ELLIPSIS) :]
    if snippet.endswith(ELLIPSIS):
        snippet = snippet[: -len(ELLIPSIS)]
    return snippet


def extract_context_snippets(
    content: str,
    query: str,
    max_snippets: int = 2,
    context_length: int = 120,
) -> List[str]:
    """Return up to `max_snippets` windows of `content` around query matches.

    Terms are visited in query order; each term is scanned left to right. The
    window around a match spans ``context_length // 2`` characters on either
    side of the term, clamped to the text. Windows not touching the start or
    end of the text are marked with an ellipsis. A window whose text is already
    contained in an accepted snippet is dropped, and so is a window that
    overlaps one accepted for the same term, so repeated hits of a term close
    to each other produce one snippet.
    """
    if not content or not query.strip() or max_snippets <= 0:
        return []

    half = max(0, int(context_length)) // 2
    lower = content.lower()
    snippets: List[str] = []
    cores: List[str] = []

    for term in tokenize(query):
        pos = 0
        # Accepted windows of this term; repeated hits nearby add nothing new
        windows: List[Tuple[int, int]] = []
        while pos < len(lower) and len(snippets) < max_snippets:
            idx = lower.find(term, pos)
            if idx == -1:
                break
            pos = idx + len(term)
            start = max(0, idx - half)
            end = min(len(content), pos + half)
            if any(start < e and s < end for s, e in windows):
                continue
            snippet = _wrap(content, start, end)
            core = _core(snippet)
            if not any(core in accepted for accepted in cores):
                snippets.append(snippet)
                cores.append(core)
                windows.append((start, end))
        if len(snippets) >= max_snippets:
            break

    return snippets


def extract_relevant_snippet(text: str, query: str, max_length: int = 150) -> str:
    """Return one preview of at most `max_length` characters of `text`.

    The window is placed so the earliest match of any query term sits near its
    middle. Without a match (or without a query) the leading characters are
    returned.
    """
    if not text:
        return ""

    first = -1
    for term in tokenize(query):
        idx = text.lower().find(term)
        if idx != -1 and (first == -1 or idx < first):
            first = idx

    if first == -1:
        return text[:max_length] + (ELLIPSIS if len(text) > max_length else "")

    start = max(0, first - max_length // 2)
    end = min(len(text), start + max_length)
    snippet = text[start:end]
    if start > 0:
        snippet = ELLIPSIS + snippet
    if end < len(text):
        snippet = snippet + ELLIPSIS
    return snippet
