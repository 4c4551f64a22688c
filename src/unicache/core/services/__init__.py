"""Domain services for unicache."""

from unicache.core.services.multiple import delete_multiple, get_multiple, set_multiple
from unicache.core.services.validation import iter_items, validate_key, validate_keys

__all__ = [
    # Validation
    "validate_key",
    "validate_keys",
    "iter_items",
    # Multiple-key operations
    "get_multiple",
    "set_multiple",
    "delete_multiple",
]
