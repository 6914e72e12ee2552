"""Document records searched by postfind.

Documents are produced by an external ingestion step (front matter plus body
text) and handed to the engine through a `ContentSource`. They are read-only:
the search code never modifies a record.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    # Ingestion emits camelCase keys; Python callers use field names.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


class Tag(_Record):
    """A tag attached to a document."""

    id: str
    name: str
    slug: Optional[str] = None
    color: Optional[str] = None
    article_count: int = 0


class Category(_Record):
    """The single category a document is filed under."""

    id: str
    name: str
    slug: Optional[str] = None
    description: Optional[str] = None
    color: Optional[str] = None
    article_count: int = 0


class Document(_Record):
    """A published (or draft) article with the metadata used for ranking.

    Attributes
    ----------
    title, excerpt, content:
        Text fields scored by the engine. `content` is the body text.
    tags, category:
        Structured metadata; a missing category or empty tag list scores 0.
    published_at:
        Used for recency ordering.
    view_count, like_count:
        Summed for popularity ordering.
    is_published:
        Unpublished documents are never returned by search.
    """

    id: str
    title: str = ""
    excerpt: str = ""
    content: str = ""
    tags: List[Tag] = Field(default_factory=list)
    category: Optional[Category] = None
    published_at: datetime
    updated_at: Optional[datetime] = None
    view_count: int = Field(default=0, ge=0)
    like_count: int = Field(default=0, ge=0)
    is_published: bool = True
    slug: Optional[str] = None
    read_time: Optional[int] = None
    cover_image: Optional[str] = None

    @field_validator("title", "excerpt", "content", mode="before")
    @classmethod
    def _none_as_empty_text(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("tags", mode="before")
    @classmethod
    def _none_as_no_tags(cls, value: object) -> object:
        return [] if value is None else value

    @property
    def popularity(self) -> int:
        return self.view_count + self.like_count
