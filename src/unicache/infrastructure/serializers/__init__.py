"""Value serializers."""

from unicache.infrastructure.serializers.json import JsonSerializer, SerializationError
from unicache.infrastructure.serializers.pickle import PickleSerializer

__all__ = ["JsonSerializer", "PickleSerializer", "SerializationError"]
