"""Core interfaces (Protocol classes) for unicache."""

from unicache.core.interfaces.cache_backend import ICacheBackend
from unicache.core.interfaces.segment_client import IBatchSegmentClient, ISegmentClient
from unicache.core.interfaces.serializer import ISerializer

__all__ = [
    "ICacheBackend",
    "ISerializer",
    "ISegmentClient",
    "IBatchSegmentClient",
]
