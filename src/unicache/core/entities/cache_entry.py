"""Cache entry entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    """Immutable value stored by the in-memory backend.

    Pairs the cached value with its absolute expiry instant. An entry whose
    ``expires_at`` is None never expires.
    """

    value: Any
    expires_at: datetime | None = None

    def is_expired(self, now: datetime) -> bool:
        """Check if entry has expired.

        Args:
            now: The current instant (timezone-aware UTC).

        Returns:
            True if the expiry instant lies in the past, False otherwise.
        """
        if self.expires_at is None:
            return False
        return self.expires_at < now
