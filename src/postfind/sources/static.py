"""In-memory source serving a fixed document list."""

from __future__ import annotations

from typing import Iterable, List

from postfind.documents import Document
from postfind.sources.base import ContentSource


class StaticSource(ContentSource):
    """Serves the documents it was constructed with, in the same order."""

    def __init__(self, documents: Iterable[Document] = ()) -> None:
        self._documents = list(documents)

    async def fetch(self) -> List[Document]:
        return list(self._documents)
