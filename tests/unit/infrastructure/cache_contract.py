"""Behaviour every cache backend must share.

Backend test classes inherit from CacheContractTests and provide a
``backend`` fixture whose expiry is driven by the ``clock`` fixture.
"""

from collections.abc import Iterator
from datetime import timedelta
from typing import Any

import pytest

from unicache import ICacheBackend, InvalidKeyError
from tests.fakes import FakeClock

VALUES = {
    "key1": "value1",
    "key2": "value2",
    "key3": "value3",
}


def _pairs(values: dict[str, Any]) -> Iterator[tuple[str, Any]]:
    yield from values.items()


def _keys(values: dict[str, Any]) -> Iterator[str]:
    yield from values


class CacheContractTests:
    """Contract tests shared by every backend."""

    def test_set_get(self, backend: ICacheBackend) -> None:
        """Test a stored value is read back."""
        assert backend.set("foo", "bar") is True
        assert backend.get("foo") == "bar"

    def test_set_overwrites(self, backend: ICacheBackend) -> None:
        """Test set replaces an existing value."""
        backend.set("foo", "bar")
        backend.set("foo", "baz")
        assert backend.get("foo") == "baz"

    def test_empty_string_is_a_legal_key(self, backend: ICacheBackend) -> None:
        """Test the empty string can be used as a key."""
        assert backend.set("", "empty") is True
        assert backend.get("") == "empty"
        assert backend.has("") is True

    @pytest.mark.parametrize("value", [False, 0, "", None, [], {"nested": [1, 2]}])
    def test_falsy_and_structured_values(self, backend: ICacheBackend, value: Any) -> None:
        """Test stored falsy values are hits, not misses."""
        backend.set("foo", value)
        assert backend.get("foo", "default") == value
        assert backend.has("foo") is True

    def test_delete(self, backend: ICacheBackend) -> None:
        """Test a deleted key misses."""
        backend.set("foo", "bar")
        assert backend.delete("foo") is True
        assert backend.get("foo") is None

    def test_delete_is_idempotent(self, backend: ICacheBackend) -> None:
        """Test deleting a missing key reports success."""
        assert backend.delete("never-set") is True
        backend.set("foo", "bar")
        assert backend.delete("foo") is True
        assert backend.delete("foo") is True

    def test_get_not_found(self, backend: ICacheBackend) -> None:
        """Test a miss returns None."""
        assert backend.get("notfound") is None

    def test_get_not_found_default(self, backend: ICacheBackend) -> None:
        """Test a miss returns the given default."""
        assert backend.get("notfound", "chickpeas") == "chickpeas"

    @pytest.mark.parametrize("ttl", [1, timedelta(seconds=1)], ids=["int", "timedelta"])
    def test_set_expire(self, backend: ICacheBackend, clock: FakeClock, ttl: Any) -> None:
        """Test an entry misses once its TTL has passed."""
        backend.set("foo", "bar", ttl)
        assert backend.get("foo") == "bar"

        clock.advance(2)

        assert backend.get("foo") is None

    def test_set_with_long_ttl(self, backend: ICacheBackend, clock: FakeClock) -> None:
        """Test a TTL above thirty days behaves as a duration."""
        backend.set("foo", "bar", timedelta(days=45))

        clock.advance(timedelta(days=44).total_seconds())
        assert backend.get("foo") == "bar"

        clock.advance(timedelta(days=2).total_seconds())
        assert backend.get("foo") is None

    @pytest.mark.parametrize("ttl", [10**11, 10**12, 2**63 - 1])
    def test_set_with_huge_ttl(self, backend: ICacheBackend, clock: FakeClock, ttl: int) -> None:
        """Test a TTL reaching past the calendar stores the value instead of failing."""
        assert backend.set("foo", "bar", ttl) is True
        assert backend.get("foo") == "bar"

        clock.advance(timedelta(days=365 * 100).total_seconds())
        assert backend.has("foo") is True

    def test_clear(self, backend: ICacheBackend) -> None:
        """Test clear empties the cache."""
        backend.set("foo", "bar")
        backend.set("baz", "qux", 60)
        assert backend.clear() is True
        assert backend.get("foo") is None
        assert backend.get("baz") is None

    def test_has(self, backend: ICacheBackend) -> None:
        """Test has reports a stored key."""
        backend.set("foo", "bar")
        assert backend.has("foo") is True

    def test_has_not(self, backend: ICacheBackend) -> None:
        """Test has reports a missing key."""
        assert backend.has("not-found") is False

    def test_has_with_ttl(self, backend: ICacheBackend, clock: FakeClock) -> None:
        """Test has reflects liveness, not past existence."""
        backend.set("foo", "bar", 1)
        assert backend.has("foo") is True

        clock.advance(2)

        assert backend.has("foo") is False

    def test_has_after_delete(self, backend: ICacheBackend) -> None:
        """Test has is false after an explicit delete."""
        backend.set("foo", "bar")
        backend.delete("foo")
        assert backend.has("foo") is False

    def test_set_get_multiple(self, backend: ICacheBackend) -> None:
        """Test a multiple set is read back by a multiple get."""
        assert backend.set_multiple(VALUES) is True
        assert backend.get_multiple(list(VALUES)) == VALUES

    def test_set_get_multiple_generators(self, backend: ICacheBackend) -> None:
        """Test generators are accepted for both pairs and keys."""
        assert backend.set_multiple(_pairs(VALUES)) is True
        assert backend.get_multiple(_keys(VALUES)) == VALUES

    def test_get_multiple_default(self, backend: ICacheBackend) -> None:
        """Test every requested key appears in the result."""
        backend.set("key1", "value1")
        result = backend.get_multiple(["key1", "missing"], "not-found")
        assert result == {"key1": "value1", "missing": "not-found"}

    def test_get_multiple_empty(self, backend: ICacheBackend) -> None:
        """Test an empty key list gives an empty mapping."""
        assert backend.get_multiple([]) == {}

    def test_set_multiple_not_expired(self, backend: ICacheBackend, clock: FakeClock) -> None:
        """Test a batch TTL keeps entries alive until it passes."""
        backend.set_multiple(VALUES, timedelta(seconds=5))
        clock.advance(2)
        assert backend.get_multiple(list(VALUES)) == VALUES

    @pytest.mark.parametrize("ttl", [1, timedelta(seconds=1)], ids=["int", "timedelta"])
    def test_set_multiple_expired(self, backend: ICacheBackend, clock: FakeClock, ttl: Any) -> None:
        """Test a batch TTL applies to every entry."""
        backend.set_multiple(VALUES, ttl)

        clock.advance(2)

        result = backend.get_multiple(list(VALUES), "not-found")
        assert result == dict.fromkeys(VALUES, "not-found")

    def test_delete_multiple_default_get(self, backend: ICacheBackend) -> None:
        """Test a multiple delete removes only the given keys."""
        backend.set_multiple(VALUES)

        assert backend.delete_multiple(["key1", "key3"]) is True

        result = backend.get_multiple(list(VALUES), "tea")
        assert result == {"key1": "tea", "key2": "value2", "key3": "tea"}

    def test_delete_multiple_generator_and_missing_keys(self, backend: ICacheBackend) -> None:
        """Test a multiple delete accepts generators and missing keys."""
        backend.set_multiple(VALUES)
        assert backend.delete_multiple(_keys({"key1": None, "absent": None})) is True
        assert backend.get_multiple(["key1", "key2"]) == {"key1": None, "key2": "value2"}

    @pytest.mark.parametrize(
        "call",
        [
            lambda b: b.get(None),
            lambda b: b.get(42, "default"),
            lambda b: b.set(None, "bar"),
            lambda b: b.delete(None),
            lambda b: b.has(None),
            lambda b: b.get_multiple(None),
            lambda b: b.get_multiple("key1"),
            lambda b: b.set_multiple(None),
            lambda b: b.delete_multiple(None),
        ],
        ids=[
            "get",
            "get-int",
            "set",
            "delete",
            "has",
            "get_multiple",
            "get_multiple-str",
            "set_multiple",
            "delete_multiple",
        ],
    )
    def test_invalid_key(self, backend: ICacheBackend, call: Any) -> None:
        """Test malformed keys raise and leave the cache untouched."""
        backend.set("foo", "bar")

        with pytest.raises(InvalidKeyError):
            call(backend)

        assert backend.get("foo") == "bar"
        assert backend.get_multiple(["foo", "None"]) == {"foo": "bar", "None": None}

    def test_invalid_key_inside_batch(self, backend: ICacheBackend) -> None:
        """Test a non-string key inside a batch raises."""
        with pytest.raises(InvalidKeyError):
            backend.get_multiple(["key1", None])
        with pytest.raises(InvalidKeyError):
            backend.delete_multiple(["key1", 7])
