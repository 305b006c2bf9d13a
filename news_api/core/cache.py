"""
In-process cache for paginated news listings.

Entries expire after a fixed TTL and the least recently used entry is evicted
once ``max_entries`` is reached. Reads never extend an entry's lifetime.
"""

import threading
import time
from collections import OrderedDict
from typing import Any, Callable, Dict, Optional, Tuple

import structlog

logger = structlog.get_logger(__name__)


class TTLCache:
    """Process-local key/value store with TTL expiry and max-entry eviction."""

    def __init__(
        self,
        ttl_seconds: int = 300,
        max_entries: int = 100,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            ttl_seconds: Lifetime of an entry; 0 disables expiry
            max_entries: Number of entries kept before evicting the least recently used
            clock: Monotonic time source, injectable for tests
        """
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._store: "OrderedDict[str, Tuple[float, Any]]" = OrderedDict()
        self._lock = threading.Lock()
        self.stats = {"hits": 0, "misses": 0, "evictions": 0, "resets": 0}

    def _is_expired(self, stored_at: float) -> bool:
        if not self.ttl_seconds:
            return False
        return self._clock() - stored_at >= self.ttl_seconds

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                self.stats["misses"] += 1
                return None

            stored_at, value = entry
            if self._is_expired(stored_at):
                del self._store[key]
                self.stats["misses"] += 1
                return None

            self._store.move_to_end(key)
            self.stats["hits"] += 1
            return value

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            if key in self._store:
                del self._store[key]
            while len(self._store) >= self.max_entries:
                evicted_key, _ = self._store.popitem(last=False)
                self.stats["evictions"] += 1
                logger.debug("cache_entry_evicted", cache_key=evicted_key)
            self._store[key] = (self._clock(), value)

    def reset(self) -> None:
        """Drop every entry in a single step."""
        with self._lock:
            self._store = OrderedDict()
            self.stats["resets"] += 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def get_stats(self) -> Dict[str, int]:
        with self._lock:
            return {**self.stats, "entries": len(self._store)}
