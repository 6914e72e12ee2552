"""Base source abstraction used by the search engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from postfind.documents import Document


class ContentSource(ABC):
    """Abstract provider of the current document collection.

    Implementations should be safe to construct without side effects and should
    not perform I/O until `fetch()` is awaited.
    """

    @abstractmethod
    async def fetch(self) -> List[Document]:
        """Return the full current document collection.

        Implementations should raise `postfind.exceptions.SourceError` on failure.
        """
        raise NotImplementedError
