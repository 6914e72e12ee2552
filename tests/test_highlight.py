import pytest

from postfind.search.highlight import (
    HighlightSegment,
    highlight,
    highlight_markup,
    render_highlights,
    strip_highlights,
)


def _marked(segments: list[HighlightSegment]) -> list[str]:
    return [s.text for s in segments if s.is_match]


@pytest.mark.parametrize(
    "text, query",
    [
        ("React Hooks Guide", "hooks"),
        ("React Hooks Guide", "react guide"),
        ("a.b.c", "a.b"),
        ("price is $5 (approx.) * 2", "$5 (approx.) *"),
        ("[brackets] and {braces} | pipes \\ slash", "[brackets] {braces} | \\"),
        ("no match here", "xyz"),
        ("   leading and trailing   ", "and"),
        ("ünïcödé Text", "ÜNÏ text"),
        ("anything", ""),
        ("", "query"),
    ],
)
def test_round_trip_preserves_text(text: str, query: str) -> None:
    assert strip_highlights(highlight(text, query)) == text


def test_dot_is_not_a_wildcard() -> None:
    segments = highlight("a.b.c", "a.b")
    assert segments == [HighlightSegment("a.b", True), HighlightSegment(".c", False)]
    assert _marked(highlight("aXb", "a.b")) == []


def test_metacharacter_terms_match_literally() -> None:
    text = "I like c++ and (x) stuff *"
    assert _marked(highlight(text, "c++ (x) *")) == ["c++", "(x)", "*"]
    assert _marked(highlight("ccc xx", "c++ (x) *")) == []


def test_case_insensitive_and_preserves_case() -> None:
    assert _marked(highlight("React react REACT", "react")) == ["React", "react", "REACT"]


def test_multiple_terms_and_longest_first() -> None:
    assert _marked(highlight("reactive react", "react reactive")) == ["reactive", "react"]


def test_empty_query_is_noop() -> None:
    assert highlight("React Hooks", "   ") == [HighlightSegment("React Hooks", False)]
    assert highlight("", "react") == []


def test_render_escapes_and_wraps() -> None:
    assert highlight_markup("<b>hooks</b>", "hooks") == "&lt;b&gt;<mark>hooks</mark>&lt;/b&gt;"


def test_render_custom_tags_without_escape() -> None:
    segments = highlight("React Hooks", "hooks")
    rendered = render_highlights(segments, open_tag="**", close_tag="**", escape=False)
    assert rendered == "React **Hooks**"
