"""Cache configuration entity."""

from dataclasses import dataclass, field

from unicache.core.entities.ttl import Ttl, TtlLike
from unicache.core.exceptions import ConfigurationError

BACKEND_MEMORY = "memory"
BACKEND_SHARED_SEGMENT = "shared_segment"
BACKEND_DISTRIBUTED = "distributed"

BACKENDS = (BACKEND_MEMORY, BACKEND_SHARED_SEGMENT, BACKEND_DISTRIBUTED)


@dataclass
class CacheConfig:
    """Cache configuration.

    Selects the backend built by :func:`unicache.factory.create_backend`
    and carries the options that backend understands.

    Backends:
        ``memory`` keeps entries in this process. ``shared_segment`` and
        ``distributed`` wrap a client handle supplied by the caller.
    """

    backend: str = BACKEND_MEMORY
    default_ttl: TtlLike = None

    # In-memory settings
    maxsize: int | None = None  # None = unbounded
    thread_safe: bool = False

    _ttl: Ttl = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate the backend name and resolve the default TTL."""
        if self.backend not in BACKENDS:
            raise ConfigurationError(
                f"Unknown cache backend {self.backend!r}, expected one of {', '.join(BACKENDS)}"
            )
        if self.maxsize is not None and self.maxsize <= 0:
            raise ConfigurationError("maxsize must be a positive integer or None")
        self._ttl = Ttl.coerce(self.default_ttl)

    @property
    def ttl(self) -> Ttl:
        """The resolved default TTL."""
        return self._ttl
