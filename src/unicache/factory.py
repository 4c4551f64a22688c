"""Cache backend factory.

Builds the backend named by a CacheConfig. The shared segment and
distributed backends wrap a client handle the host application has
already attached or connected; the factory never opens one itself.

Example:
    import redis
    from unicache import CacheConfig, create_backend

    cache = create_backend(
        CacheConfig(backend="distributed", default_ttl=300),
        client=redis.Redis.from_url("redis://localhost:6379"),
    )
"""

import logging
from typing import Any

from unicache.core.entities.cache_config import (
    BACKEND_DISTRIBUTED,
    BACKEND_MEMORY,
    BACKEND_SHARED_SEGMENT,
    CacheConfig,
)
from unicache.core.exceptions import ConfigurationError
from unicache.core.interfaces.cache_backend import ICacheBackend
from unicache.core.interfaces.serializer import ISerializer
from unicache.infrastructure.backends.memory import (
    InMemoryCacheBackend,
    ThreadSafeInMemoryCacheBackend,
)
from unicache.infrastructure.backends.shared_segment import SharedSegmentCacheBackend

logger = logging.getLogger(__name__)


def create_backend(
    config: CacheConfig | None = None,
    client: Any = None,
    serializer: ISerializer | None = None,
) -> ICacheBackend:
    """Create a cache backend from configuration.

    Args:
        config: Cache configuration. Defaults to an unbounded in-memory cache.
        client: The segment client or Redis client to wrap. Required by the
            ``shared_segment`` and ``distributed`` backends, rejected by
            ``memory``.
        serializer: Value serializer for the distributed backend.

    Returns:
        The configured backend.

    Raises:
        ConfigurationError: If the client does not fit the backend, or the
            distributed backend is selected without redis installed.
    """
    config = config or CacheConfig()
    logger.debug("Creating %s cache backend", config.backend)

    if config.backend == BACKEND_MEMORY:
        if client is not None:
            raise ConfigurationError("The memory backend does not take a client")
        backend_class = ThreadSafeInMemoryCacheBackend if config.thread_safe else InMemoryCacheBackend
        return backend_class(maxsize=config.maxsize, default_ttl=config.ttl)

    if client is None:
        raise ConfigurationError(f"The {config.backend} backend needs a connected client")

    if config.backend == BACKEND_SHARED_SEGMENT:
        return SharedSegmentCacheBackend(client, default_ttl=config.ttl)

    if config.backend == BACKEND_DISTRIBUTED:
        # Lazy import to avoid a hard dependency on redis
        try:
            from unicache.infrastructure.backends.distributed import DistributedCacheBackend
        except ImportError as e:
            raise ConfigurationError(
                "The distributed backend needs redis. Install with: pip install 'unicache[redis]'"
            ) from e
        return DistributedCacheBackend(client, serializer=serializer, default_ttl=config.ttl)

    raise ConfigurationError(f"Unknown cache backend {config.backend!r}")
