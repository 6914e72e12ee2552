from datetime import datetime, timedelta, timezone
from typing import Any, Callable, List, Optional

import pytest

from postfind.documents import Category, Document, Tag

BASE_TIME = datetime(2025, 9, 1, tzinfo=timezone.utc)


def make_document(
    doc_id: str,
    *,
    title: str = "",
    excerpt: str = "",
    content: str = "",
    tags: Optional[List[str]] = None,
    category: Optional[str] = None,
    days: int = 0,
    views: int = 0,
    likes: int = 0,
    published: bool = True,
    **extra: Any,
) -> Document:
    return Document(
        id=doc_id,
        title=title,
        excerpt=excerpt,
        content=content,
        tags=[Tag(id=f"t-{n.lower()}", name=n) for n in (tags or [])],
        category=Category(id=f"c-{category.lower()}", name=category) if category else None,
        published_at=BASE_TIME + timedelta(days=days),
        view_count=views,
        like_count=likes,
        is_published=published,
        **extra,
    )


@pytest.fixture
def make_doc() -> Callable[..., Document]:
    return make_document
