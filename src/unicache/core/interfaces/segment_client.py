"""Shared memory segment client interface."""

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable


class ISegmentClient(Protocol):
    """Contract for a host-local shared memory key/value segment.

    The segment is attached by the host application and shared by every
    process on the host. Each call is expected to be atomic per key.

    TTLs use the dual integer encoding: ``0`` never expires, small values
    are relative seconds, large values are absolute Unix timestamps.
    """

    def fetch(self, key: str) -> tuple[bool, Any]:
        """Fetch a value.

        Returns:
            ``(True, value)`` on a hit, ``(False, None)`` otherwise.
        """
        ...

    def store(self, key: str, value: Any, ttl: int = 0) -> bool:
        """Store a value, returning whether the segment accepted it."""
        ...

    def delete(self, key: str) -> bool:
        """Delete a value, returning False if it was not present."""
        ...

    def exists(self, key: str) -> bool:
        """Check whether a live value is stored."""
        ...

    def clear(self) -> bool:
        """Drop every value in the segment."""
        ...


@runtime_checkable
class IBatchSegmentClient(ISegmentClient, Protocol):
    """A segment client with native batch store and delete."""

    def store_many(self, values: Mapping[str, Any], ttl: int = 0) -> list[str]:
        """Store several values.

        Returns:
            The keys that could not be stored; empty on full success.
        """
        ...

    def delete_many(self, keys: Iterable[str]) -> list[str]:
        """Delete several keys.

        Returns:
            The keys that could not be deleted; empty on full success.
        """
        ...
