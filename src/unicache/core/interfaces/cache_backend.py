"""Cache backend interface."""

from collections.abc import Iterable, Mapping
from typing import Any, Protocol

from unicache.core.entities.ttl import TtlLike


class ICacheBackend(Protocol):
    """Contract for cache storage backends.

    Application code depends only on this protocol, so backends can be
    swapped freely (in-memory for tests, a distributed cache in production).
    Every method is synchronous and blocking.

    Key errors are raised as InvalidKeyError before any storage access.
    Storage failures are reported as a False return (or the default for
    reads), never as exceptions, so ``get`` cannot tell a miss from an
    unreachable backend.
    """

    def get(self, key: str, default: Any = None) -> Any:
        """Retrieve cached value by key.

        Args:
            key: The cache key to retrieve.
            default: Value returned on a miss.

        Returns:
            The cached value, or ``default`` if not found or expired.

        Raises:
            InvalidKeyError: If the key is not a string.
        """
        ...

    def set(self, key: str, value: Any, ttl: TtlLike = None) -> bool:
        """Store value with optional TTL, overwriting any existing value.

        Args:
            key: The cache key.
            value: The value to store.
            ttl: Optional time-to-live in seconds or as a timedelta.

        Returns:
            True if the storage layer accepted the value.

        Raises:
            InvalidKeyError: If the key is not a string.
        """
        ...

    def delete(self, key: str) -> bool:
        """Delete cached value.

        Deleting a key that does not exist is a success.

        Args:
            key: The cache key to delete.

        Returns:
            False only if the storage layer reported an error.
        """
        ...

    def clear(self) -> bool:
        """Remove every entry, whatever its TTL."""
        ...

    def has(self, key: str) -> bool:
        """Check if a live entry exists for key.

        Not atomic with a following ``get``: another actor may remove the
        entry in between.

        Args:
            key: The cache key to check.

        Returns:
            True if the key exists and has not expired.
        """
        ...

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        """Retrieve several values.

        Args:
            keys: Any iterable of keys.
            default: Value used for every key that misses.

        Returns:
            A mapping holding every requested key exactly once.
        """
        ...

    def set_multiple(
        self,
        values: Mapping[str, Any] | Iterable[tuple[str, Any]],
        ttl: TtlLike = None,
    ) -> bool:
        """Store several values with the same TTL.

        Not atomic: on failure, entries already stored are kept.

        Args:
            values: A mapping or an iterable of ``(key, value)`` pairs.
            ttl: Optional time-to-live applied to every value.

        Returns:
            True only if every value was stored.
        """
        ...

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        """Delete several keys.

        Args:
            keys: Any iterable of keys.

        Returns:
            True only if every delete succeeded.
        """
        ...
