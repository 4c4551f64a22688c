"""In-memory cache backend implementation."""

import logging
import threading
from collections.abc import Callable, Iterable, Mapping, MutableMapping
from datetime import datetime
from typing import Any

from cachetools import LRUCache  # type: ignore[import-untyped]

from unicache.core.entities.cache_entry import CacheEntry
from unicache.core.entities.ttl import Ttl, TtlLike
from unicache.core.services import multiple
from unicache.core.services.validation import validate_key
from unicache.utils.clock import utcnow

logger = logging.getLogger(__name__)


class InMemoryCacheBackend:
    """Process-local cache backend with per-entry expiry.

    Entries are gone once the process ends, which makes this backend a
    good test double and a fast local cache for long-running processes.

    Expiry is lazy: an expired entry stays in memory until the next
    ``get`` or ``has`` on its key notices and removes it. Reads can
    therefore mutate the store.

    Not thread-safe. Hosts that share one instance between threads must
    guard it with a lock, or use ThreadSafeInMemoryCacheBackend.
    """

    def __init__(
        self,
        maxsize: int | None = None,
        default_ttl: TtlLike = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        """Initialize the in-memory cache backend.

        Args:
            maxsize: Maximum number of entries. When set, the least recently
                used entry is evicted once the limit is reached. None keeps
                every entry.
            default_ttl: TTL applied when ``set`` is called without one.
                None means entries never expire.
            clock: Returns the current time as an aware UTC datetime.
        """
        self._maxsize = maxsize
        self._default_ttl = Ttl.coerce(default_ttl)
        self._clock = clock
        self._store: MutableMapping[str, CacheEntry]
        if maxsize is None:
            self._store = {}
        else:
            self._store = LRUCache(maxsize=maxsize)

    def get(self, key: str, default: Any = None) -> Any:
        entry = self._live_entry(validate_key(key))
        if entry is None:
            return default
        return entry.value

    def set(self, key: str, value: Any, ttl: TtlLike = None) -> bool:
        validate_key(key)
        effective_ttl = Ttl.coerce(ttl).or_default(self._default_ttl)
        self._store[key] = CacheEntry(
            value=value,
            expires_at=effective_ttl.expires_at(self._clock()),
        )
        return True

    def delete(self, key: str) -> bool:
        self._store.pop(validate_key(key), None)
        return True

    def clear(self) -> bool:
        self._store.clear()
        return True

    def has(self, key: str) -> bool:
        return self._live_entry(validate_key(key)) is not None

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        return multiple.get_multiple(self.get, keys, default)

    def set_multiple(
        self,
        values: Mapping[str, Any] | Iterable[tuple[str, Any]],
        ttl: TtlLike = None,
    ) -> bool:
        return multiple.set_multiple(self.set, values, ttl)

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        return multiple.delete_multiple(self.delete, keys)

    def _live_entry(self, key: str) -> CacheEntry | None:
        """Return the entry for key, evicting it if it has expired."""
        entry = self._store.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            logger.debug("Evicting expired cache entry %r", key)
            del self._store[key]
            return None
        return entry

    def __len__(self) -> int:
        """Return the number of stored entries, including expired ones not yet evicted."""
        return len(self._store)

    @property
    def maxsize(self) -> int | None:
        """Return the maximum size of the cache, or None when unbounded."""
        return self._maxsize


class ThreadSafeInMemoryCacheBackend(InMemoryCacheBackend):
    """InMemoryCacheBackend with every operation guarded by one lock.

    Multiple-key operations hold the lock for the whole batch, so other
    threads never observe a batch half applied.
    """

    def __init__(
        self,
        maxsize: int | None = None,
        default_ttl: TtlLike = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        super().__init__(maxsize=maxsize, default_ttl=default_ttl, clock=clock)
        # Reentrant: batch operations call the single-key ones
        self._lock = threading.RLock()

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return super().get(key, default)

    def set(self, key: str, value: Any, ttl: TtlLike = None) -> bool:
        with self._lock:
            return super().set(key, value, ttl)

    def delete(self, key: str) -> bool:
        with self._lock:
            return super().delete(key)

    def clear(self) -> bool:
        with self._lock:
            return super().clear()

    def has(self, key: str) -> bool:
        with self._lock:
            return super().has(key)

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        with self._lock:
            return super().get_multiple(keys, default)

    def set_multiple(
        self,
        values: Mapping[str, Any] | Iterable[tuple[str, Any]],
        ttl: TtlLike = None,
    ) -> bool:
        with self._lock:
            return super().set_multiple(values, ttl)

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        with self._lock:
            return super().delete_multiple(keys)

    def __len__(self) -> int:
        with self._lock:
            return super().__len__()
