"""Core domain layer for unicache."""

from unicache.core.entities import CacheConfig, CacheEntry, Ttl
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

__all__ = [
    # Entities
    "CacheConfig",
    "CacheEntry",
    "Ttl",
    # Exceptions
    "CacheError",
    "ConfigurationError",
    "InvalidArgumentError",
    "InvalidKeyError",
    # Interfaces
    "ICacheBackend",
    "ISerializer",
    "ISegmentClient",
    "IBatchSegmentClient",
]
