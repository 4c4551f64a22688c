"""Multiple-key operations built from single-key operations.

Backends without native batch commands pass their own ``get``, ``set``
and ``delete`` to these functions. Batch results are a single boolean:
one failure anywhere reports False, and nothing already applied is
rolled back.
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from unicache.core.entities.ttl import TtlLike
from unicache.core.services.validation import iter_items, validate_keys

GetFunc = Callable[[str, Any], Any]
SetFunc = Callable[[str, Any, TtlLike], bool]
DeleteFunc = Callable[[str], bool]


def get_multiple(get: GetFunc, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
    """Fetch every key with ``get``.

    Args:
        get: The backend's single-key get.
        keys: Any iterable of keys.
        default: Value for keys that miss.

    Returns:
        A mapping holding every requested key exactly once.

    Raises:
        InvalidKeyError: If ``keys`` is not iterable, or from ``get`` for a
            malformed element.
    """
    return {key: get(key, default) for key in validate_keys(keys)}


def set_multiple(
    set_: SetFunc,
    values: Mapping[str, Any] | Iterable[tuple[str, Any]],
    ttl: TtlLike = None,
) -> bool:
    """Store every pair with ``set_``, all with the same TTL.

    Keeps going after a failed store.
    """
    result = True
    for key, value in iter_items(values):
        if not set_(key, value, ttl):
            result = False
    return result


def delete_multiple(delete: DeleteFunc, keys: Iterable[str]) -> bool:
    """Delete every key with ``delete``."""
    result = True
    for key in validate_keys(keys):
        if not delete(key):
            result = False
    return result
