"""Source reading document records from a JSON file.

The file holds a JSON array of document objects as written by the ingestion
step (camelCase keys such as ``publishedAt`` and ``isPublished`` are
accepted). Records are validated one at a time: a record that fails
validation is logged and skipped, the rest are still served. The file is
re-read on every fetch; wrap the source in `CachedSource` to avoid that.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from postfind.documents import Document
from postfind.exceptions import SourceError
from postfind.sources.base import ContentSource

logger = logging.getLogger(__name__)


class JsonFileSource(ContentSource):
    """Loads and validates documents from a JSON file on disk."""

    def __init__(self, path: Union[str, Path], *, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    def _load(self) -> List[Document]:
        try:
            raw = self.path.read_text(encoding=self.encoding)
        except OSError as e:
            raise SourceError(f"Cannot read documents from {self.path}: {e}") from e
        try:
            records = json.loads(raw)
        except json.JSONDecodeError as e:
            raise SourceError(f"Invalid JSON in {self.path}: {e}") from e
        if not isinstance(records, list):
            raise SourceError(f"Expected a JSON array of documents in {self.path}")

        documents: List[Document] = []
        for position, record in enumerate(records):
            try:
                documents.append(Document.model_validate(record))
            except ValidationError as e:
                logger.warning(
                    "Skipping document #%d in %s: %d validation error(s)",
                    position,
                    self.path,
                    e.error_count(),
                )
        return documents

    async def fetch(self) -> List[Document]:
        # File I/O and validation happen off the event loop
        return await asyncio.to_thread(self._load)
