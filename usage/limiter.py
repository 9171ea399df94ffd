"""Free-tier usage limiting per user, feature and day.

Counts live in an injected ``UsageStore`` keyed by (user, feature, date),
so a persistent store can replace the in-memory one without touching the
limiter, and counts start over when the date changes.
"""
from __future__ import annotations

from datetime import date
from threading import Lock
from typing import Callable, Dict, Optional, Protocol, Tuple

from loguru import logger

from core.exceptions import ConfigurationError

UsageKey = Tuple[str, str, str]

FEATURES = ("species-id", "freshness", "chat")


class UsageStore(Protocol):
    """Persistence for usage counters."""

    def get(self, key: UsageKey) -> int:
        ...

    def increment(self, key: UsageKey) -> int:
        ...


class InMemoryUsageStore:
    """Process-local counters; lost on restart."""

    def __init__(self) -> None:
        self._counts: Dict[UsageKey, int] = {}
        self._lock = Lock()

    def get(self, key: UsageKey) -> int:
        with self._lock:
            return self._counts.get(key, 0)

    def increment(self, key: UsageKey) -> int:
        with self._lock:
            self._counts[key] = self._counts.get(key, 0) + 1
            return self._counts[key]


class UsageLimiter:
    """Allows each user a fixed number of uses per feature per day."""

    def __init__(
        self,
        store: Optional[UsageStore] = None,
        limit: int = 5,
        clock: Callable[[], date] = date.today,
    ) -> None:
        if limit < 0:
            raise ConfigurationError(f"Usage limit must not be negative: {limit}")
        self.store = store if store is not None else InMemoryUsageStore()
        self.limit = limit
        self.clock = clock
        self._lock = Lock()

    def _key(self, user_id: str, feature: str) -> UsageKey:
        return (user_id, feature, self.clock().isoformat())

    def track(self, user_id: str, feature: str) -> bool:
        """Record one use; False without recording when the limit is reached."""
        key = self._key(user_id, feature)
        with self._lock:
            if self.store.get(key) >= self.limit:
                logger.info(f"Free tier limit reached: user={user_id} feature={feature}")
                return False
            count = self.store.increment(key)
        logger.debug(f"Usage recorded: user={user_id} feature={feature} count={count}/{self.limit}")
        return True

    def used(self, user_id: str, feature: str) -> int:
        return self.store.get(self._key(user_id, feature))

    def remaining(self, user_id: str, feature: str) -> int:
        return max(0, self.limit - self.used(user_id, feature))
