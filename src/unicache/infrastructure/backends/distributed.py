"""Distributed cache backend implementation."""

import logging
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from enum import Enum
from typing import Any

import redis
from redis.exceptions import DataError, RedisError

from unicache.core.entities.ttl import RELATIVE_TTL_THRESHOLD, Ttl, TtlLike
from unicache.core.exceptions import InvalidKeyError
from unicache.core.interfaces.serializer import ISerializer
from unicache.core.services.validation import iter_items, validate_key, validate_keys
from unicache.infrastructure.serializers.json import SerializationError
from unicache.infrastructure.serializers.pickle import PickleSerializer
from unicache.utils.clock import utcnow

logger = logging.getLogger(__name__)


class ResultCode(str, Enum):
    """Outcome of a single read against the daemon."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    BAD_KEY = "bad_key"
    FAILURE = "failure"


class DistributedCacheBackend:
    """Cache backend talking to a Redis daemon.

    Suitable for multi-process and multi-host deployments. The Redis client
    is supplied already connected and is never closed by this backend.

    Reads report a ``(value, ResultCode)`` pair, and a miss is decided
    from the code alone, so stored falsy values such as ``False``, ``0``
    or ``None`` are returned as hits. A key the client rejects raises
    InvalidKeyError; connection and server errors read as a miss and make
    writes return False.
    """

    def __init__(
        self,
        client: redis.Redis,
        serializer: ISerializer | None = None,
        default_ttl: TtlLike = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        """Initialize the distributed cache backend.

        Args:
            client: A connected synchronous Redis client. It must return
                bytes, so do not create it with ``decode_responses=True``.
            serializer: Encodes values to bytes. Defaults to pickle.
            default_ttl: TTL applied when none is given. None means no
                expiry.
            clock: Returns the current time, used to encode long TTLs as
                absolute timestamps.
        """
        self._client = client
        self._serializer = serializer or PickleSerializer()
        self._default_ttl = Ttl.coerce(default_ttl)
        self._clock = clock

    def get(self, key: str, default: Any = None) -> Any:
        value, code = self._fetch(validate_key(key))
        if code is ResultCode.BAD_KEY:
            raise InvalidKeyError(f"key {key!r} was rejected by the client")
        if code is ResultCode.SUCCESS:
            return value
        # NOT_FOUND, or the daemon could not answer
        return default

    def set(self, key: str, value: Any, ttl: TtlLike = None) -> bool:
        validate_key(key)
        expiry = self._expiry_kwargs(ttl)
        try:
            data = self._serializer.serialize(value)
        except SerializationError as e:
            logger.warning("Cannot store key %r: %s", key, e)
            return False

        try:
            return bool(self._client.set(key, data, **expiry))
        except DataError as e:
            raise InvalidKeyError(f"key {key!r} was rejected by the client: {e}") from e
        except RedisError as e:
            logger.warning("Redis SET failed for key %r: %s", key, e)
            return False

    def delete(self, key: str) -> bool:
        validate_key(key)
        try:
            self._client.delete(key)
        except DataError as e:
            raise InvalidKeyError(f"key {key!r} was rejected by the client: {e}") from e
        except RedisError as e:
            logger.warning("Redis DEL failed for key %r: %s", key, e)
            return False
        return True

    def clear(self) -> bool:
        try:
            return bool(self._client.flushdb())
        except RedisError as e:
            logger.warning("Redis FLUSHDB failed: %s", e)
            return False

    def has(self, key: str) -> bool:
        _, code = self._fetch(validate_key(key))
        if code is ResultCode.BAD_KEY:
            raise InvalidKeyError(f"key {key!r} was rejected by the client")
        return code is ResultCode.SUCCESS

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        key_list = validate_keys(keys)
        for key in key_list:
            validate_key(key)
        if not key_list:
            return {}

        try:
            found = self._client.mget(key_list)
        except DataError as e:
            raise InvalidKeyError(f"keys were rejected by the client: {e}") from e
        except RedisError as e:
            logger.warning("Redis MGET failed for %d keys: %s", len(key_list), e)
            return dict.fromkeys(key_list, default)

        result = {}
        for key, data in zip(key_list, found):
            value, code = self._decode(key, data)
            result[key] = value if code is ResultCode.SUCCESS else default
        return result

    def set_multiple(
        self,
        values: Mapping[str, Any] | Iterable[tuple[str, Any]],
        ttl: TtlLike = None,
    ) -> bool:
        items = iter_items(values)
        for key, _ in items:
            validate_key(key)
        expiry = self._expiry_kwargs(ttl)
        if not items:
            return True

        try:
            encoded = [(key, self._serializer.serialize(value)) for key, value in items]
        except SerializationError as e:
            logger.warning("Cannot store %d keys: %s", len(items), e)
            return False

        try:
            with self._client.pipeline(transaction=False) as pipe:
                for key, data in encoded:
                    pipe.set(key, data, **expiry)
                results = pipe.execute()
        except DataError as e:
            raise InvalidKeyError(f"keys were rejected by the client: {e}") from e
        except RedisError as e:
            logger.warning("Redis pipelined SET failed for %d keys: %s", len(encoded), e)
            return False
        return all(results)

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        key_list = validate_keys(keys)
        for key in key_list:
            validate_key(key)
        if not key_list:
            return True

        try:
            self._client.delete(*key_list)
        except DataError as e:
            raise InvalidKeyError(f"keys were rejected by the client: {e}") from e
        except RedisError as e:
            logger.warning("Redis DEL failed for %d keys: %s", len(key_list), e)
            return False
        return True

    def _fetch(self, key: str) -> tuple[Any, ResultCode]:
        """Read a key, returning the value together with its result code."""
        try:
            data = self._client.get(key)
        except DataError as e:
            logger.debug("Redis rejected key %r: %s", key, e)
            return None, ResultCode.BAD_KEY
        except RedisError as e:
            logger.warning("Redis GET failed for key %r: %s", key, e)
            return None, ResultCode.FAILURE
        return self._decode(key, data)

    def _decode(self, key: str, data: bytes | None) -> tuple[Any, ResultCode]:
        if data is None:
            return None, ResultCode.NOT_FOUND
        try:
            return self._serializer.deserialize(data), ResultCode.SUCCESS
        except SerializationError as e:
            logger.warning("Cannot decode cached value for key %r: %s", key, e)
            return None, ResultCode.FAILURE

    def _expiry_kwargs(self, ttl: TtlLike) -> dict[str, int]:
        """Translate a TTL into the expiry options of Redis SET."""
        expiry = Ttl.coerce(ttl).or_default(self._default_ttl).native_expiry(self._clock())
        if expiry == 0:
            return {}
        if expiry <= RELATIVE_TTL_THRESHOLD:
            return {"ex": expiry}
        return {"exat": expiry}
