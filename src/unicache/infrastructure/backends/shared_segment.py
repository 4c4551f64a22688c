"""Shared memory segment cache backend implementation."""

import logging
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from typing import Any

from unicache.core.entities.ttl import Ttl, TtlLike
from unicache.core.interfaces.segment_client import IBatchSegmentClient, ISegmentClient
from unicache.core.services import multiple
from unicache.core.services.validation import iter_items, validate_key, validate_keys
from unicache.utils.clock import utcnow

logger = logging.getLogger(__name__)


class SharedSegmentCacheBackend:
    """Cache backend over a host-local shared memory segment.

    Every process on the host that attaches the same segment sees the
    same entries. The segment provides per-key atomicity and expiry; this
    class adds no locking of its own.

    Batch store and delete use the client's native calls when it has them
    (see IBatchSegmentClient) and fall back to one call per key otherwise.
    """

    def __init__(
        self,
        client: ISegmentClient,
        default_ttl: TtlLike = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        """Initialize the shared segment backend.

        Args:
            client: An attached segment client. It is borrowed: this
                backend never attaches or detaches it.
            default_ttl: TTL applied when none is given. None leaves expiry
                to the segment.
            clock: Returns the current time, used to encode long TTLs as
                absolute timestamps.
        """
        self._client = client
        self._default_ttl = Ttl.coerce(default_ttl)
        self._clock = clock

    def get(self, key: str, default: Any = None) -> Any:
        success, value = self._client.fetch(validate_key(key))
        if not success:
            return default
        return value

    def set(self, key: str, value: Any, ttl: TtlLike = None) -> bool:
        validate_key(key)
        return self._client.store(key, value, self._expiry(ttl))

    def delete(self, key: str) -> bool:
        validate_key(key)
        # The segment reports a missing key as a failed delete
        return self._client.delete(key) or not self._client.exists(key)

    def clear(self) -> bool:
        return self._client.clear()

    def has(self, key: str) -> bool:
        return self._client.exists(validate_key(key))

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        return multiple.get_multiple(self.get, keys, default)

    def set_multiple(
        self,
        values: Mapping[str, Any] | Iterable[tuple[str, Any]],
        ttl: TtlLike = None,
    ) -> bool:
        if not isinstance(self._client, IBatchSegmentClient):
            return multiple.set_multiple(self.set, values, ttl)

        items = iter_items(values)
        for key, _ in items:
            validate_key(key)
        failed = self._client.store_many(dict(items), self._expiry(ttl))
        if failed:
            logger.debug("Shared segment failed to store %d of %d keys", len(failed), len(items))
        return not failed

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        if not isinstance(self._client, IBatchSegmentClient):
            return multiple.delete_multiple(self.delete, keys)

        key_list = validate_keys(keys)
        for key in key_list:
            validate_key(key)
        failed = [key for key in self._client.delete_many(key_list) if self._client.exists(key)]
        if failed:
            logger.debug("Shared segment failed to delete %d of %d keys", len(failed), len(key_list))
        return not failed

    def _expiry(self, ttl: TtlLike) -> int:
        """Encode a TTL the way the segment expects it."""
        return Ttl.coerce(ttl).or_default(self._default_ttl).native_expiry(self._clock())
