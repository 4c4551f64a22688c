"""unicache - one cache contract, interchangeable storage backends.

Application code depends on the ICacheBackend contract and picks a
backend at wiring time: a process-local in-memory map, a host-local
shared memory segment, or a Redis daemon.

Example:
    from datetime import timedelta

    from unicache import InMemoryCacheBackend

    cache = InMemoryCacheBackend()
    cache.set("greeting", "hello", ttl=timedelta(minutes=5))
    cache.get("greeting")                      # "hello"
    cache.get("missing", default="fallback")   # "fallback"

    cache.set_multiple({"a": 1, "b": 2}, ttl=60)
    cache.get_multiple(["a", "b", "c"])        # {"a": 1, "b": 2, "c": None}

With a Redis daemon:
    import redis
    from unicache.infrastructure.backends.distributed import DistributedCacheBackend

    cache = DistributedCacheBackend(redis.Redis(host="localhost"))
"""

from unicache.core.entities import RELATIVE_TTL_THRESHOLD, CacheConfig, CacheEntry, Ttl
from unicache.core.exceptions import (
    CacheError,
    ConfigurationError,
    InvalidArgumentError,
    InvalidKeyError,
)
from unicache.core.interfaces import (
    IBatchSegmentClient,
    ICacheBackend,
    ISegmentClient,
    ISerializer,
)
from unicache.decorators import cached, invalidates
from unicache.factory import create_backend
from unicache.infrastructure import (
    InMemoryCacheBackend,
    JsonSerializer,
    PickleSerializer,
    SerializationError,
    SharedSegmentCacheBackend,
    ThreadSafeInMemoryCacheBackend,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "CacheConfig",
    "CacheEntry",
    "Ttl",
    "RELATIVE_TTL_THRESHOLD",
    # Errors
    "CacheError",
    "ConfigurationError",
    "InvalidArgumentError",
    "InvalidKeyError",
    "SerializationError",
    # Core interfaces
    "ICacheBackend",
    "ISerializer",
    "ISegmentClient",
    "IBatchSegmentClient",
    # Backends
    "InMemoryCacheBackend",
    "ThreadSafeInMemoryCacheBackend",
    "SharedSegmentCacheBackend",
    # Serializers
    "JsonSerializer",
    "PickleSerializer",
    # Wiring
    "create_backend",
    # Decorators
    "cached",
    "invalidates",
]
