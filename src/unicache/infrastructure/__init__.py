"""Infrastructure layer implementations for unicache."""

from unicache.infrastructure.backends import (
    InMemoryCacheBackend,
    SharedSegmentCacheBackend,
    ThreadSafeInMemoryCacheBackend,
)
from unicache.infrastructure.serializers import (
    JsonSerializer,
    PickleSerializer,
    SerializationError,
)

__all__ = [
    "InMemoryCacheBackend",
    "ThreadSafeInMemoryCacheBackend",
    "SharedSegmentCacheBackend",
    "JsonSerializer",
    "PickleSerializer",
    "SerializationError",
]
