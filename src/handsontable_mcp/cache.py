"""In-memory documentation cache with TTL expiry and FIFO eviction.

Eviction order is strictly insertion order: reads never refresh an entry.
A full cache evicts its oldest entry on every put, including a put that
overwrites a key already present. This is deliberately not LRU. Expired
entries are reported as misses but left in place until they are
overwritten or evicted. Nothing survives a process restart.

All operations are synchronous and non-blocking; no locking is needed under
asyncio because no operation awaits.
"""

from __future__ import annotations

import time
from collections.abc import Callable

import structlog

from handsontable_mcp.models.cache import CacheEntry

log = structlog.get_logger()


class DocumentCache:
    """Bounded URL → markdown store implementing CacheProtocol."""

    def __init__(
        self,
        max_size: int = 100,
        ttl_seconds: float = 60 * 60,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_size = max_size
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        # dict preserves insertion order; re-assigning an existing key keeps its slot
        self._entries: dict[str, CacheEntry] = {}

    def get(self, url: str) -> str | None:
        """Return cached content, or ``None`` if absent or expired."""
        entry = self._entries.get(url)
        if entry is None:
            return None
        if self._clock() - entry.stored_at >= self.ttl_seconds:
            return None
        return entry.content

    def put(self, url: str, content: str) -> None:
        """Store content for ``url``, evicting the oldest entry when full."""
        if len(self._entries) >= self.max_size:
            evicted_url = next(iter(self._entries))
            del self._entries[evicted_url]
            log.debug("cache_eviction", evicted_url=evicted_url)

        self._entries[url] = CacheEntry(url=url, content=content, stored_at=self._clock())

    def keys(self) -> list[str]:
        """URLs in insertion (eviction) order, fresh or not."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, url: object) -> bool:
        return url in self._entries
