"""Thread-safe TTL cache of resolved Slack names, partitioned by entity category.

Each category (users, channels, userGroups) is its own cachetools TTLCache
guarded by its own lock. TTLCache reorders its expiry links on every read, so
reads take the lock too; the critical sections are single dict operations.
Only successful lookups are stored: there is no negative caching.
"""

import math
import threading
import time
from collections.abc import Callable

from cachetools import TTLCache

USERS = "users"
CHANNELS = "channels"
USER_GROUPS = "userGroups"

CATEGORIES = (USERS, CHANNELS, USER_GROUPS)

DEFAULT_TTL = 600.0  # 10 minutes


class EntityCache:
    """Slack ID -> display name, one TTL partition per category."""

    def __init__(
        self,
        ttl: float = DEFAULT_TTL,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl = ttl
        # No size bound: entries leave only by expiring
        self._partitions: dict[str, TTLCache] = {
            category: TTLCache(maxsize=math.inf, ttl=ttl, timer=timer)
            for category in CATEGORIES
        }
        self._locks: dict[str, threading.Lock] = {
            category: threading.Lock() for category in CATEGORIES
        }

    def _partition(self, category: str) -> tuple[TTLCache, threading.Lock]:
        try:
            return self._partitions[category], self._locks[category]
        except KeyError:
            raise ValueError(f"Unknown cache category: {category!r}") from None

    def get(self, category: str, key: str) -> str:
        """Return the cached name, or an empty string if missing or expired."""
        partition, lock = self._partition(category)
        # TTLCache.__getitem__ calls move_to_end on its link table, so reads
        # mutate the partition and take the same exclusive lock as writes
        with lock:
            return partition.get(key, "")

    def set(self, category: str, key: str, value: str) -> None:
        """Store a resolved name; it expires ``ttl`` seconds from now."""
        partition, lock = self._partition(category)
        with lock:
            partition[key] = value

    def clear(self) -> None:
        """Drop every entry in every category."""
        for category in CATEGORIES:
            partition, lock = self._partition(category)
            with lock:
                partition.clear()
