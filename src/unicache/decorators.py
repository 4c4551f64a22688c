"""Memoization decorators over any cache backend.

Example:
    cache = InMemoryCacheBackend()

    @cached(cache, ttl=timedelta(minutes=10), key="user:{user_id}")
    def load_user(user_id: str) -> dict:
        return db.load_user(user_id)

    @invalidates(cache, keys=["user:{user_id}"])
    def rename_user(user_id: str, name: str) -> None:
        db.rename_user(user_id, name)
"""

import functools
import inspect
import logging
import re
from collections.abc import Callable
from typing import Any, TypeVar

from unicache.core.entities.ttl import TtlLike
from unicache.core.interfaces.cache_backend import ICacheBackend
from unicache.utils.hashing import hash_value

F = TypeVar("F", bound=Callable[..., Any])

logger = logging.getLogger(__name__)

# Passed as the default to ``get`` so cached None and falsy results are hits
_MISSING = object()

KeySpec = str | Callable[..., str]


def cached(
    backend: ICacheBackend,
    ttl: TtlLike = None,
    key: KeySpec | None = None,
) -> Callable[[F], F]:
    """Decorator for caching a function's return value.

    Args:
        backend: The cache backend results are stored in.
        ttl: Time-to-live for cached results. None uses the backend default.
        key: Custom cache key or function to generate key.
            If string, supports {arg_name} interpolation.
            If callable, receives (*args, **kwargs) and returns key string.
            If None, the key is built from the function's qualified name
            and a hash of its arguments.

    Returns:
        Decorated function.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            cache_key = _build_cache_key(func, args, kwargs, key)

            value = backend.get(cache_key, _MISSING)
            if value is not _MISSING:
                return value

            result = func(*args, **kwargs)
            if not backend.set(cache_key, result, ttl):
                logger.warning("Could not cache result of %s under %r", func.__qualname__, cache_key)
            return result

        return wrapper  # type: ignore

    return decorator


def invalidates(
    backend: ICacheBackend,
    keys: list[KeySpec],
) -> Callable[[F], F]:
    """Decorator deleting cache entries after the function returns.

    Args:
        backend: The cache backend to delete from.
        keys: Keys to delete. Strings support {arg_name} interpolation;
            callables receive (*args, **kwargs).

    Returns:
        Decorated function.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = func(*args, **kwargs)

            resolved = [_build_cache_key(func, args, kwargs, spec) for spec in keys]
            if not backend.delete_multiple(resolved):
                logger.warning("Could not invalidate %d cache keys after %s", len(resolved), func.__qualname__)

            return result

        return wrapper  # type: ignore

    return decorator


def _build_cache_key(
    func: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    custom_key: KeySpec | None,
) -> str:
    """Build cache key for a function call."""
    if custom_key is not None:
        if callable(custom_key):
            return custom_key(*args, **kwargs)
        return _interpolate_string(custom_key, _bind_arguments(func, args, kwargs))

    arguments = _bind_arguments(func, args, kwargs)
    return f"{func.__module__}:{func.__qualname__}:{hash_value(arguments)}"


def _bind_arguments(
    func: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> dict[str, Any]:
    """Map positional and keyword arguments to parameter names."""
    try:
        bound = inspect.signature(func).bind(*args, **kwargs)
    except (TypeError, ValueError):
        # Let the call itself report the bad arguments
        return {"args": list(args), "kwargs": kwargs}
    bound.apply_defaults()
    return dict(bound.arguments)


def _interpolate_string(template: str, arguments: dict[str, Any]) -> str:
    """Interpolate {arg_name} placeholders in string.

    Placeholders with no matching argument are kept as they are.
    """
    pattern = r"\{(\w+)\}"

    def replacer(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in arguments:
            return str(arguments[name])
        return match.group(0)

    return re.sub(pattern, replacer, template)
