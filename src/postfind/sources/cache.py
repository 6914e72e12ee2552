"""Time-based cache in front of another source."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Callable, List, Optional

from postfind.documents import Document
from postfind.sources.base import ContentSource

logger = logging.getLogger(__name__)


class CachedSource(ContentSource):
    """Serves the last fetched collection until it is older than `ttl` seconds.

    On a failed refresh the last good collection is served if there is one;
    otherwise the error propagates to the caller.
    """

    def __init__(
        self,
        inner: ContentSource,
        *,
        ttl: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._inner = inner
        self.ttl = ttl
        self._clock = clock
        self._value: Optional[List[Document]] = None
        self._fetched_at: Optional[float] = None
        self._lock = asyncio.Lock()

    @property
    def is_stale(self) -> bool:
        if self._value is None or self._fetched_at is None:
            return True
        return self._clock() - self._fetched_at >= self.ttl

    def invalidate(self) -> None:
        """Force the next `fetch()` to refresh from the inner source."""
        self._fetched_at = None

    async def fetch(self) -> List[Document]:
        if not self.is_stale:
            return list(self._value or [])
        async with self._lock:
            # Another caller may have refreshed while we waited
            if not self.is_stale:
                return list(self._value or [])
            try:
                value = await self._inner.fetch()
            except Exception:
                if self._value is None:
                    raise
                logger.warning("Document refresh failed; serving cached collection", exc_info=True)
                return list(self._value)
            self._value = list(value)
            self._fetched_at = self._clock()
            return list(self._value)
