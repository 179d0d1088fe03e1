"""
Time-bounded cache with an injectable clock.

Callers create one instance and pass it to whatever needs it; there is no
module-level cache.
"""

import time
from collections import OrderedDict
from typing import Any, Callable, Hashable, Optional

from tasmee._logging import log_cache_event
from tasmee.exceptions import ConfigurationError


_MISSING = object()


class ExpiringCache:
    """
    Key/value cache whose entries expire after a fixed lifetime.

    Entries older than ``ttl_seconds`` (measured with ``clock``) are treated
    as absent and dropped on access. With ``max_entries`` set, the oldest
    entry is evicted when a new key would exceed the limit.

    Not thread-safe: share an instance only within one thread or guard it.

    Example:
        cache = ExpiringCache(ttl_seconds=3600)
        tokens = cache.get_or_set(text, lambda: tokenize_words(text))
    """

    def __init__(
        self,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
        max_entries: Optional[int] = None,
    ) -> None:
        if ttl_seconds <= 0:
            raise ConfigurationError(
                "Cache lifetime must be positive",
                setting_name="ttl_seconds",
                context={"value": ttl_seconds},
            )
        if max_entries is not None and max_entries < 1:
            raise ConfigurationError(
                "Cache size must be at least 1",
                setting_name="max_entries",
                context={"value": max_entries},
            )
        self._ttl = ttl_seconds
        self._clock = clock
        self._max_entries = max_entries
        self._entries: OrderedDict[Hashable, tuple[float, Any]] = OrderedDict()

    @property
    def ttl_seconds(self) -> float:
        """Lifetime of an entry in seconds."""
        return self._ttl

    def _is_fresh(self, stored_at: float) -> bool:
        return self._clock() - stored_at < self._ttl

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the cached value, or default if absent or expired."""
        item = self._entries.get(key, _MISSING)
        if item is _MISSING:
            return default
        stored_at, value = item
        if not self._is_fresh(stored_at):
            del self._entries[key]
            return default
        return value

    def set(self, key: Hashable, value: Any) -> None:
        """Store a value, restarting its lifetime."""
        if key in self._entries:
            del self._entries[key]
        elif self._max_entries is not None and len(self._entries) >= self._max_entries:
            oldest, _ = self._entries.popitem(last=False)
            log_cache_event("eviction", str(oldest), len(self._entries))
        self._entries[key] = (self._clock(), value)

    def get_or_set(self, key: Hashable, factory: Callable[[], Any]) -> Any:
        """
        Return the cached value, computing and storing it on a miss.

        Args:
            key: Cache key
            factory: Zero-argument callable producing the value

        Returns:
            Cached or freshly computed value
        """
        value = self.get(key, _MISSING)
        if value is not _MISSING:
            log_cache_event("hit", str(key), len(self._entries))
            return value
        value = factory()
        self.set(key, value)
        log_cache_event("miss", str(key), len(self._entries))
        return value

    def invalidate(self, key: Hashable) -> bool:
        """Remove one entry. Returns whether it was present."""
        return self._entries.pop(key, _MISSING) is not _MISSING

    def clear(self) -> None:
        """Remove all entries."""
        self._entries.clear()

    def purge_expired(self) -> int:
        """Drop all expired entries. Returns how many were dropped."""
        expired = [k for k, (stored_at, _) in self._entries.items() if not self._is_fresh(stored_at)]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def __contains__(self, key: Hashable) -> bool:
        return self.get(key, _MISSING) is not _MISSING

    def __len__(self) -> int:
        """Number of fresh entries; expired ones are purged first."""
        self.purge_expired()
        return len(self._entries)
