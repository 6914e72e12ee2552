from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseModel):
    """Application-specific configuration values."""

    name: str = "postfind"
    env: str = "development"
    debug: bool = False
    port: int = 8000
    log_level: str = "INFO"
    # Transport settings for FastMCP: "stdio" (default), "http", or "sse"
    transport: Literal["stdio", "http", "sse"] = "stdio"
    host: str = "127.0.0.1"


class FieldWeights(BaseModel):
    """Multipliers applied to per-field scores when every field is searched."""

    title: float = 3.0
    excerpt: float = 2.0
    body: float = 0.5
    tags: float = 2.0
    category: float = 2.0


class ScoringConfig(BaseModel):
    """Relevance heuristic constants.

    The defaults are the empirically chosen values the ranking has always used;
    changing them changes result order.
    """

    phrase: float = 100.0  # whole query found in the field
    phrase_prefix: float = 50.0  # ... and the field starts with it
    token_exact: float = 20.0
    token_substring: float = 10.0
    coverage: float = 20.0
    coverage_ratio: float = 0.5
    min_score: float = 10.0
    weights: FieldWeights = FieldWeights()


class SnippetConfig(BaseModel):
    """Context snippet sizing."""

    max_snippets: int = Field(default=2, ge=0)
    context_length: int = Field(default=120, ge=0)
    preview_length: int = Field(default=150, ge=1)


class SourceConfig(BaseModel):
    """Where the document collection comes from."""

    documents_path: Optional[str] = None  # JSON array of document records
    cache_ttl_seconds: float = 300.0


class Settings(BaseSettings):
    """Top-level settings loaded from environment variables and .env only."""

    model_config = SettingsConfigDict(
        env_prefix="POSTFIND_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    app: AppConfig = AppConfig()
    scoring: ScoringConfig = ScoringConfig()
    snippets: SnippetConfig = SnippetConfig()
    source: SourceConfig = SourceConfig()


def load_settings() -> Settings:
    """Load settings from environment variables and .env only."""
    return Settings()  # type: ignore[call-arg]
