from __future__ import annotations

import time
from collections.abc import Callable, Hashable
from typing import Any


class ListingCache:
    """
    Short-lived read cache for product listings.

    Entries are keyed by the listing filters and expire after ``ttl_s``.
    Any product write must call ``invalidate()``; the cache is never
    consulted by the ingestion pipeline itself.
    """

    def __init__(self, ttl_s: float = 30.0, clock: Callable[[], float] = time.monotonic):
        self.ttl_s = ttl_s
        self._clock = clock
        self._entries: dict[Hashable, tuple[float, Any]] = {}

    def get(self, key: Hashable) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if self._clock() >= expires_at:
            self._entries.pop(key, None)
            return None
        return value

    def put(self, key: Hashable, value: Any) -> None:
        if self.ttl_s <= 0:
            return
        self._entries[key] = (self._clock() + self.ttl_s, value)

    def invalidate(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
