"""In-process fixed-window request counter

Single-instance counterpart of CounterRedisDAO. Counters are local to the
process, so limits are not shared between server instances. Use it for local
development, tests, or deployments running exactly one instance.
"""

import time
import threading

from beartype import beartype

from cryptshortener.dao.base import CounterBaseDAO


class CounterMemoryDAO(CounterBaseDAO):
    """Thread-safe in-memory counters with expiry armed on creation

    Each key maps to a (count, expires_at) pair. An expired entry is treated as
    missing, so the next hit() recreates it with count 1 and a new expiry.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._counters: dict[str, tuple[int, float]] = {}

    @beartype
    def hit(self, key: str, window: int, **kwargs) -> int:
        now = time.time()
        with self._lock:
            count, expires_at = self._counters.get(key, (0, 0.0))
            if expires_at <= now:
                count, expires_at = 0, now + window
            count += 1
            self._counters[key] = (count, expires_at)
        return count
