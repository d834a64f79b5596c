"""Abstract base class for fixed-window request counter DAOs.

Rate limiting needs one primitive from a data store: atomically increment a
per-key counter and, only when that increment creates the counter, arm its
expiry to the window duration.

Responsibilities:
    - Provide an atomic increment-with-expiry-on-create interface.
    - Report data store failures as DataStoreError so callers can fail closed.

Example:
    >>> from cryptshortener.dao.redis import CounterRedisDAO
    >>> dao = CounterRedisDAO(...)
    >>> dao.hit('203.0.113.7', window=60)
    1
    >>> dao.hit('203.0.113.7', window=60)
    2
"""

from abc import ABC, abstractmethod


class CounterBaseDAO(ABC):
    """Interface for fixed-window request counter DAOs

    Methods:
        hit(key: str, window: int, **kwargs) -> int:
            Increment the counter for key and return the post-increment value.
            The counter expires `window` seconds after the increment that created it.
            Raises DataStoreError on connection, timeout or write failure.

    NOTE:
        - The expiry is armed on creation only. Subsequent increments within the
          same window never extend it. This is a fixed window, not a sliding one.
    """

    @abstractmethod
    def hit(self, key: str, window: int, **kwargs) -> int:
        """Increment the request counter for a key.

        Args:
            key (str):
                Client key (e.g. network address).

            window (int):
                Window duration in seconds, armed when the counter is created.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            int:
                Number of hits for key in the current window, including this one.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass
