"""Exception hierarchy for unicache."""


class CacheError(Exception):
    """Base exception for all unicache errors."""

    pass


class InvalidArgumentError(CacheError, ValueError):
    """Raised when an argument does not have the required shape."""

    pass


class InvalidKeyError(InvalidArgumentError):
    """Raised when a cache key, or a container of keys, is not legal.

    Always raised before the backend is touched, so an invalid key never
    causes a side effect in storage.
    """

    pass


class ConfigurationError(CacheError):
    """Raised when a backend cannot be built from the given configuration."""

    pass
