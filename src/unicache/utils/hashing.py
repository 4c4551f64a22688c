"""Digest of call arguments, used by the memoization decorators."""

import hashlib
import json
from typing import Any

DIGEST_LENGTH = 16


def hash_value(value: Any) -> str:
    """Digest ``value`` into a short, stable cache key fragment.

    Mappings are ordered by key first, so two calls binding the same
    arguments always land on the same cache entry. Anything JSON cannot
    encode falls back to its ``str``.

    Args:
        value: Usually the bound arguments of a decorated call.

    Returns:
        ``"none"`` for None, otherwise the leading ``DIGEST_LENGTH`` hex
        characters of a SHA-256 digest.
    """
    if value is None:
        return "none"

    canonical = json.dumps(value, sort_keys=True, separators=(",", ":"), default=str)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()[:DIGEST_LENGTH]
