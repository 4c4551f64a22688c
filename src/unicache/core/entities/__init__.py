"""Domain entities for unicache."""

from unicache.core.entities.cache_config import CacheConfig
from unicache.core.entities.cache_entry import CacheEntry
from unicache.core.entities.ttl import RELATIVE_TTL_THRESHOLD, Ttl, TtlKind, TtlLike

__all__ = [
    "CacheEntry",
    "CacheConfig",
    "Ttl",
    "TtlKind",
    "TtlLike",
    "RELATIVE_TTL_THRESHOLD",
]
