"""Argument validation shared by every backend."""

from collections.abc import Iterable, Mapping
from typing import Any

from unicache.core.exceptions import InvalidKeyError


def validate_key(key: Any) -> str:
    """Check that a cache key is a string.

    The empty string is a legal key.

    Args:
        key: The key supplied by the caller.

    Returns:
        The key, unchanged.

    Raises:
        InvalidKeyError: If the key is not a string.
    """
    if not isinstance(key, str):
        raise InvalidKeyError(f"key must be a string, not {type(key).__name__}")
    return key


def validate_keys(keys: Any) -> list[str]:
    """Check that ``keys`` is an iterable of keys and materialize it.

    Elements are not checked; single-key operations do that. The iterable
    is consumed exactly once, so generators are safe to pass.

    Raises:
        InvalidKeyError: If ``keys`` is not iterable, or is a single string.
    """
    if isinstance(keys, (str, bytes)) or not isinstance(keys, Iterable):
        raise InvalidKeyError(f"keys must be an iterable of keys, not {type(keys).__name__}")
    return list(keys)


def iter_items(values: Any) -> list[tuple[Any, Any]]:
    """Normalize a multiple-set argument to a list of pairs.

    Args:
        values: A mapping, or an iterable of ``(key, value)`` pairs.

    Raises:
        InvalidKeyError: If ``values`` is neither.
    """
    if isinstance(values, Mapping):
        return list(values.items())
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise InvalidKeyError(
            f"values must be a mapping or an iterable of pairs, not {type(values).__name__}"
        )
    pairs = []
    for item in values:
        try:
            key, value = item
        except (TypeError, ValueError) as e:
            raise InvalidKeyError(f"values must yield (key, value) pairs, got {item!r}") from e
        pairs.append((key, value))
    return pairs
