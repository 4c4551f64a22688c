"""Cache backend implementations.

The distributed backend needs the ``redis`` extra and is imported from
``unicache.infrastructure.backends.distributed`` directly.
"""

from unicache.infrastructure.backends.memory import (
    InMemoryCacheBackend,
    ThreadSafeInMemoryCacheBackend,
)
from unicache.infrastructure.backends.shared_segment import SharedSegmentCacheBackend

__all__ = [
    "InMemoryCacheBackend",
    "ThreadSafeInMemoryCacheBackend",
    "SharedSegmentCacheBackend",
]
