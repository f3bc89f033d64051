"""In-process TTL cache with an injectable clock."""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Generic, TypeVar

V = TypeVar("V")

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock: timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


class Cache(Generic[V]):
    """
    Maps keys to values that expire a fixed time after they were stored.

    Expired entries behave as absent. Storing a key replaces the previous
    entry in a single assignment; there is no locking around population.
    """

    def __init__(self, ttl: timedelta, clock: Clock = utc_now):
        self._ttl = ttl
        self._clock = clock
        self._entries: dict[str, tuple[V, datetime]] = {}

    def get(self, key: str) -> V | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, stored_at = entry
        if self._clock() - stored_at >= self._ttl:
            return None
        return value

    def set(self, key: str, value: V) -> None:
        self._entries[key] = (value, self._clock())

    def clear(self) -> None:
        self._entries.clear()
