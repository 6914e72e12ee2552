"""Mark query terms inside display text.

The highlighter returns plain segments rather than markup; rendering is left
to the consumer. Joining the segment texts always gives back the input text
unchanged.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Iterable, List

from postfind.search.matcher import build_alternation, tokenize


@dataclass(frozen=True, slots=True)
class HighlightSegment:
    """A run of display text, marked when it is a query term match."""

    text: str
    is_match: bool = False


def highlight(text: str, query: str) -> List[HighlightSegment]:
    """Split `text` into segments, marking case-insensitive term matches."""
    if not text:
        return []
    terms = tokenize(query)
    pattern = build_alternation(terms)
    if pattern is None:
        return [HighlightSegment(text)]

    wanted = set(terms)
    segments: List[HighlightSegment] = []
    for part in pattern.split(text):
        if not part:
            continue
        segments.append(HighlightSegment(part, part.lower() in wanted))
    return segments


def strip_highlights(segments: Iterable[HighlightSegment]) -> str:
    """Reassemble the original text from segments."""
    return "".join(s.text for s in segments)


def render_highlights(
    segments: Iterable[HighlightSegment],
    *,
    open_tag: str = "<mark>",
    close_tag: str = "</mark>",
    escape: bool = True,
) -> str:
    """Render segments as markup, wrapping matches in `open_tag`/`close_tag`.

    Segment text is HTML-escaped unless `escape` is False.
    """
    out: List[str] = []
    for s in segments:
        body = html.escape(s.text) if escape else s.text
        out.append(f"{open_tag}{body}{close_tag}" if s.is_match else body)
    return "".join(out)


def highlight_markup(text: str, query: str, **kwargs: object) -> str:
    """Shortcut for `render_highlights(highlight(text, query))`."""
    return render_highlights(highlight(text, query), **kwargs)  # type: ignore[arg-type]
