"""Time-to-live value object."""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Union

from unicache.core.exceptions import InvalidArgumentError

# Native clients read expiry values up to 30 days as relative seconds and
# anything larger as an absolute Unix timestamp.
RELATIVE_TTL_THRESHOLD = 60 * 60 * 24 * 30

# Latest absolute expiry ever emitted; TTLs reaching past it are clamped.
MAX_EXPIRY_TIMESTAMP = math.floor(datetime.max.replace(tzinfo=timezone.utc).timestamp())


class TtlKind(str, Enum):
    """The forms a caller may express a TTL in."""

    ABSENT = "absent"
    SECONDS = "seconds"
    INTERVAL = "interval"


@dataclass(frozen=True)
class Ttl:
    """Immutable time-to-live value object.

    A TTL is absent (never expire, or the backend default), a number of
    relative seconds, or a relative interval. The form is decided once by
    :meth:`coerce`; after that every backend asks for the encoding it
    understands instead of inspecting the caller's argument again.
    """

    kind: TtlKind = TtlKind.ABSENT
    delta: timedelta = timedelta(0)

    @classmethod
    def absent(cls) -> "Ttl":
        """Create a TTL meaning "no expiry"."""
        return cls()

    @classmethod
    def seconds(cls, seconds: int) -> "Ttl":
        """Create a TTL of relative seconds.

        Counts beyond what a timedelta can hold are clamped to
        ``timedelta.max`` (or ``timedelta.min`` when negative).
        """
        try:
            delta = timedelta(seconds=seconds)
        except OverflowError:
            delta = timedelta.max if seconds > 0 else timedelta.min
        return cls(kind=TtlKind.SECONDS, delta=delta)

    @classmethod
    def interval(cls, interval: timedelta) -> "Ttl":
        """Create a TTL from a relative interval."""
        return cls(kind=TtlKind.INTERVAL, delta=interval)

    @classmethod
    def coerce(cls, value: "TtlLike") -> "Ttl":
        """Resolve a caller supplied TTL argument.

        Args:
            value: None, an int (or a string of digits) of seconds, a
                timedelta, or an existing Ttl.

        Returns:
            The equivalent Ttl.

        Raises:
            InvalidArgumentError: If the value is of any other type.
        """
        if value is None:
            return cls.absent()
        if isinstance(value, Ttl):
            return value
        # bool is an int subclass but never a meaningful TTL
        if isinstance(value, bool):
            raise InvalidArgumentError("ttl must be an int, a timedelta or None, not bool")
        if isinstance(value, int):
            return cls.seconds(value)
        if isinstance(value, str) and value.isascii() and value.isdigit():
            return cls.seconds(int(value))
        if isinstance(value, timedelta):
            return cls.interval(value)
        raise InvalidArgumentError(
            f"ttl must be an int, a timedelta or None, not {type(value).__name__}"
        )

    @property
    def is_absent(self) -> bool:
        """Whether this TTL means "no expiry"."""
        return self.kind is TtlKind.ABSENT

    @property
    def total_seconds(self) -> float | None:
        """Length of the TTL in seconds, or None when absent."""
        if self.is_absent:
            return None
        return self.delta.total_seconds()

    def or_default(self, default: "Ttl") -> "Ttl":
        """Return ``default`` when this TTL is absent, else this TTL."""
        return default if self.is_absent else self

    def expires_at(self, now: datetime) -> datetime | None:
        """Absolute expiry instant, or None when the entry never expires.

        Args:
            now: The current instant.
        """
        if self.is_absent:
            return None
        try:
            return now + self.delta
        except OverflowError:
            # Past datetime.max the entry outlives any clock
            if self.delta > timedelta(0):
                return None
            return datetime.min.replace(tzinfo=now.tzinfo)

    def native_expiry(self, now: datetime) -> int:
        """Expiry in the dual relative/absolute integer encoding.

        ``0`` means no expiry. Values in ``1..RELATIVE_TTL_THRESHOLD`` are
        relative seconds; everything else is an absolute Unix timestamp, so
        long, zero and negative TTLs are all sent as a point in time.
        Timestamps are rounded up and kept within
        ``1..MAX_EXPIRY_TIMESTAMP``.

        Args:
            now: The current instant (timezone-aware).
        """
        if self.is_absent:
            return 0
        relative = math.ceil(self.delta.total_seconds())
        if 0 < relative <= RELATIVE_TTL_THRESHOLD:
            return relative
        try:
            timestamp = math.ceil((now + self.delta).timestamp())
        except (OverflowError, ValueError):
            timestamp = MAX_EXPIRY_TIMESTAMP if relative > 0 else 1
        # 0 is reserved for "no expiry"
        return min(max(timestamp, 1), MAX_EXPIRY_TIMESTAMP)


TtlLike = Union[Ttl, int, str, timedelta, None]
