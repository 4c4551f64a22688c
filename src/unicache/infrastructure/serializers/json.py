"""JSON value encoding for the distributed backend."""

import json
from datetime import date, datetime
from typing import Any

from unicache.core.exceptions import CacheError


class SerializationError(CacheError):
    """A value could not be turned into bytes, or bytes back into a value.

    Backends translate it into a failed write or a miss; callers only see
    it when they use a serializer directly.
    """


def _encode_extra(obj: Any) -> Any:
    """Map the few non-JSON types worth caching onto JSON shapes.

    Datetimes and dates are tagged so a reader can tell them from plain
    strings. Sets are written as lists in a stable order.
    """
    if isinstance(obj, datetime):
        return {"__datetime__": obj.isoformat()}
    if isinstance(obj, date):
        return {"__date__": obj.isoformat()}
    if isinstance(obj, (set, frozenset)):
        return sorted(obj, key=repr)
    if hasattr(obj, "__dict__"):
        return vars(obj)
    raise TypeError(f"{type(obj).__name__} values cannot be cached as JSON")


class JsonSerializer:
    """Stores cache values as JSON text.

    Readable by non-Python consumers of the same Redis database, at the
    cost of fidelity: tuples and sets read back as lists, datetimes and
    dates as tagged dictionaries, and objects as their attribute dicts.
    Falsy scalars (``None``, ``False``, ``0``, ``""``) round-trip intact.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the JSON serializer.

        Args:
            encoding: Text encoding of the stored bytes.
        """
        self._encoding = encoding

    def serialize(self, value: Any) -> bytes:
        try:
            return json.dumps(value, default=_encode_extra).encode(self._encoding)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Cannot encode value as JSON: {e}") from e

    def deserialize(self, data: bytes) -> Any:
        try:
            return json.loads(data.decode(self._encoding))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SerializationError(f"Stored bytes are not valid JSON: {e}") from e
