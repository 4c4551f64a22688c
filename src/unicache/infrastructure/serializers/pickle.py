"""Pickle serializer implementation."""

import pickle
from typing import Any

from unicache.infrastructure.serializers.json import SerializationError


class PickleSerializer:
    """Pickle serializer for cache values.

    Round-trips any picklable Python object exactly, including falsy
    payloads such as ``False``, ``0`` and ``None``. Only use it with a
    cache that untrusted parties cannot write to.
    """

    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL) -> None:
        """Initialize the pickle serializer.

        Args:
            protocol: Pickle protocol version to write.
        """
        self._protocol = protocol

    def serialize(self, value: Any) -> bytes:
        try:
            return pickle.dumps(value, protocol=self._protocol)
        except (pickle.PicklingError, TypeError, AttributeError) as e:
            raise SerializationError(f"Failed to serialize value: {e}") from e

    def deserialize(self, data: bytes) -> Any:
        try:
            return pickle.loads(data)
        except (
            pickle.UnpicklingError,
            EOFError,
            ImportError,
            AttributeError,
            TypeError,
            ValueError,
        ) as e:
            raise SerializationError(f"Failed to deserialize data: {e}") from e
