import json
from typing import Any, Callable, Dict, List, Union

import pytest
from fastmcp import Client, FastMCP

from postfind.config import Settings
from postfind.documents import Document
from postfind.mcp.tools.search import register_search_tools
from postfind.search.engine import SearchEngine
from postfind.sources import StaticSource


class DummyState:
    def __init__(self, documents: List[Document]) -> None:
        self.settings = Settings()
        self.engine = SearchEngine(StaticSource(documents), self.settings)


def _extract_json_payload(result: Any) -> Union[Dict[str, Any], List[Any], str]:
    if isinstance(result, (dict, str)):
        return result
    # FastMCP Client returns CallToolResult with content list of TextContent
    # (older clients return the content list directly)
    content = getattr(result, "content", result)
    if isinstance(content, list) and content:
        for item in content:
            text = getattr(item, "text", None)
            if isinstance(text, str):
                try:
                    return json.loads(text)
                except json.JSONDecodeError:
                    return text
    data = getattr(result, "data", None)
    if data is not None:
        return data
    raise AssertionError("Unable to extract JSON payload from tool result")


@pytest.fixture
def documents(make_doc: Callable[..., Document]) -> List[Document]:
    return [
        make_doc(
            "A",
            title="React Hooks Guide",
            excerpt="Everything about <hooks>",
            content="Hooks let you use state without classes.",
            tags=["React"],
            category="Frontend",
            views=100,
        ),
        make_doc("B", title="CSS Basics", content="A note about hooks.", views=10),
        make_doc("C", title="Hooks draft", published=False),
    ]


@pytest.mark.asyncio
async def test_search_articles_tool(documents: List[Document]) -> None:
    mcp = FastMCP("test")
    state = DummyState(documents)
    register_search_tools(mcp, get_state=lambda: state)

    client = Client(mcp)
    async with client:
        res = await client.call_tool("search_articles", {"query": "hooks", "limit": 10})

    payload = _extract_json_payload(res)
    assert isinstance(payload, dict)
    assert payload["total"] == 2
    assert payload["query"] == "hooks"
    hits = payload["documents"]
    assert [h["id"] for h in hits] == ["A", "B"]
    top = hits[0]
    assert top["title_marked"] == "React <mark>Hooks</mark> Guide"
    assert top["category"] == "Frontend"
    assert top["tags"] == ["React"]
    assert top["snippets"] == ["Hooks let you use state without classes."]
    assert top["snippets_marked"] == ["<mark>Hooks</mark> let you use state without classes."]
    assert top["score"] > hits[1]["score"]


@pytest.mark.asyncio
async def test_search_articles_without_highlight(documents: List[Document]) -> None:
    mcp = FastMCP("test")
    state = DummyState(documents)
    register_search_tools(mcp, get_state=lambda: state)

    client = Client(mcp)
    async with client:
        res = await client.call_tool(
            "search_articles",
            {"query": "hooks", "ordering": "popularity", "scope": "body", "highlight": False},
        )

    payload = _extract_json_payload(res)
    assert isinstance(payload, dict)
    assert [h["id"] for h in payload["documents"]] == ["A", "B"]
    assert "title_marked" not in payload["documents"][0]


@pytest.mark.asyncio
async def test_search_articles_rejects_unknown_scope(documents: List[Document]) -> None:
    mcp = FastMCP("test")
    state = DummyState(documents)
    register_search_tools(mcp, get_state=lambda: state)

    client = Client(mcp)
    async with client:
        with pytest.raises(Exception):
            await client.call_tool("search_articles", {"query": "hooks", "scope": "everything"})


@pytest.mark.asyncio
async def test_suggest_terms_tool(documents: List[Document]) -> None:
    mcp = FastMCP("test")
    state = DummyState(documents)
    register_search_tools(mcp, get_state=lambda: state)

    client = Client(mcp)
    async with client:
        res = await client.call_tool("suggest_terms", {"prefix": "ho", "limit": 5})

    payload = _extract_json_payload(res)
    assert payload == ["hooks"]
