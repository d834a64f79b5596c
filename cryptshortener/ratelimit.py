"""Per-client fixed-window rate limiting

Classes:
    RateLimiter:
        Admit at most `limit` requests per client key within a `window` second
        fixed window. Denies requests when the counter service fails.

Example:
    >>> from cryptshortener.dao.memory import CounterMemoryDAO
    >>> limiter = RateLimiter(CounterMemoryDAO(), limit=2, window=60)
    >>> limiter.allow('203.0.113.7'), limiter.allow('203.0.113.7'), limiter.allow('203.0.113.7')
    (True, True, False)

NOTE:
    The window is armed by the first request and never slides. A client may get
    up to 2 * limit requests through in a short span straddling two windows.
"""

import logging

from cryptshortener.constants import Defaults
from cryptshortener.dao.base import CounterBaseDAO
from cryptshortener.dao.exceptions import DataStoreError
from cryptshortener.exceptions import BadConfigurationError


logger = logging.getLogger(__name__)

RATE_LIMITED = 'RATE_LIMITED'
COUNTER_SERVICE_FAILURE = 'COUNTER_SERVICE_FAILURE'


class RateLimiter:
    """Admission control backed by a shared atomic counter

    Attributes:
        counters (CounterBaseDAO):
            Counter DAO providing atomic increment-with-expiry-on-create.
        limit (int):
            Maximum admitted requests per key and window.
        window (int):
            Window duration in seconds.
    """

    def __init__(self, counters: CounterBaseDAO, limit: int = Defaults.RATE_LIMIT, window: int = Defaults.RATE_LIMIT_WINDOW):
        if not isinstance(limit, int) or limit <= 0:
            raise BadConfigurationError(f'Rate limit must be a positive integer (given value: {limit!r}).')
        if not isinstance(window, int) or window <= 0:
            raise BadConfigurationError(f'Rate limit window must be a positive integer (given value: {window!r}).')

        self.counters = counters
        self.limit = limit
        self.window = window

    def allow(self, key: str) -> bool:
        """Count a request for key and decide whether to admit it

        Fails closed: if the counter service is unreachable, times out or
        errors, the request is denied.

        Args:
            key (str):
                Client key (network address).

        Returns:
            bool: True if the request is within the limit, False otherwise.
        """
        try:
            hits = self.counters.hit(key, self.window)
        except DataStoreError:
            logger.warning(
                'Rate limit counter service failed. Denying request.',
                exc_info=True,
                extra={'clientKey': key, 'event': COUNTER_SERVICE_FAILURE},
            )
            return False

        if hits > self.limit:
            logger.info(
                'Rate limit exceeded for client.',
                extra={'clientKey': key, 'hits': hits, 'limit': self.limit, 'event': RATE_LIMITED},
            )
            return False
        return True
