"""Request and response types shared by the search components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from pydantic import BaseModel, Field, field_validator

from postfind.documents import Document
from postfind.exceptions import SearchError


class Scope(str, Enum):
    """Which document fields a search is allowed to score against."""

    ALL = "all"
    TITLE = "title"
    BODY = "body"
    TAGS = "tags"
    CATEGORY = "category"

    @classmethod
    def parse(cls, value: "str | Scope") -> "Scope":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key == "content":
            return cls.BODY
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(s.value for s in cls)
            raise SearchError(
                f"Unknown search scope '{value}'. Expected one of: {choices}"
            ) from None


class Ordering(str, Enum):
    """Result ordering."""

    RELEVANCE = "relevance"
    RECENCY = "recency"
    POPULARITY = "popularity"

    @classmethod
    def parse(cls, value: "str | Ordering") -> "Ordering":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key == "date":
            return cls.RECENCY
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(o.value for o in cls)
            raise SearchError(
                f"Unknown ordering '{value}'. Expected one of: {choices}"
            ) from None


class SearchQuery(BaseModel):
    """One search request."""

    text: str
    scope: Scope = Scope.ALL
    ordering: Ordering = Ordering.RELEVANCE
    limit: int = Field(default=20, ge=0)
    offset: int = Field(default=0, ge=0)

    @field_validator("scope", mode="before")
    @classmethod
    def _parse_scope(cls, value: object) -> Scope:
        return Scope.parse(value)  # type: ignore[arg-type]

    @field_validator("ordering", mode="before")
    @classmethod
    def _parse_ordering(cls, value: object) -> Ordering:
        return Ordering.parse(value)  # type: ignore[arg-type]

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


@dataclass(slots=True)
class ScoredDocument:
    """A document paired with its aggregate score for the current search."""

    document: Document
    score: float


class DisplayDocument(Document):
    """A returned document with call-scoped snippets and score."""

    context_snippets: List[str] = Field(default_factory=list)
    relevance_score: float = 0.0


class SearchResult(BaseModel):
    """Represents one page of search hits."""

    documents: List[DisplayDocument] = Field(default_factory=list)
    total: int = 0
    query: str = ""
    elapsed_ms: float = 0.0

    @classmethod
    def empty(cls, query: str, elapsed_ms: float = 0.0) -> "SearchResult":
        return cls(documents=[], total=0, query=query, elapsed_ms=elapsed_ms)
