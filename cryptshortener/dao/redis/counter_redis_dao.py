"""Data Access Object (DAO) implementation for rate limiting counters in Redis

Redis is the shared counter service: every server instance increments the same
keys, so request counts stay globally consistent across processes without any
client-side locking.

Responsibilities:
    - Atomically increment per-client request counters;
    - Arm the counter's expiry only when the increment creates it;
    - Translate Redis failures into DataStoreError.

Requires Redis 7.0 or later for `EXPIRE ... NX`. Older servers reject the
command with a ResponseError, which surfaces as DataStoreError, so the rate
limiter would deny every request.

Classes:
    CounterRedisDAO:
        DAO for fixed-window request counters in a Redis datastore.

Example:
    >>> from cryptshortener.dao.redis import CounterRedisDAO

    >>> dao = CounterRedisDAO(redis_host='redis', prefix='app:dev')
    >>> dao.hit('203.0.113.7', window=60)
    1
"""

from beartype import beartype

from cryptshortener.dao.base import CounterBaseDAO
from cryptshortener.dao.redis.mixins import RedisClientMixin
from cryptshortener.dao.redis.helpers import handle_redis_connection_error


class CounterRedisDAO(RedisClientMixin, CounterBaseDAO):
    """Redis-based fixed-window request counters

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        hit(key: str, window: int, **kwargs) -> int:
            Increment the counter for key, arming a `window` second expiry when
            the counter is created. Returns the post-increment count.
            Raises DataStoreError on connectivity issues with Redis.

    Example:
        >>> dao = CounterRedisDAO(redis_host='localhost', prefix='shortener:test')
        >>> dao.hit('203.0.113.7', window=60)
        1
        >>> dao.hit('203.0.113.7', window=60)
        2
    """

    @handle_redis_connection_error
    @beartype
    def hit(self, key: str, window: int, **kwargs) -> int:
        """Increment the request counter for a client key

        NOTE: INCR and EXPIRE NX are executed in one MULTI/EXEC transaction.
              EXPIRE NX only sets a TTL on a key without one, i.e. the key INCR
              just created. Later increments inside the window leave the TTL
              alone, which makes this a fixed window:

              (server 1): CounterRedisDAO.hit():
                          -> INCR <app>:ratelimit:<key>             => 1
                          -> EXPIRE <app>:ratelimit:<key> 60 NX     => 1 (armed)
              (server 2): CounterRedisDAO.hit():
                          -> INCR <app>:ratelimit:<key>             => 2
                          -> EXPIRE <app>:ratelimit:<key> 60 NX     => 0 (untouched)

              Without the transaction, a crash between INCR and EXPIRE would
              leave a counter which never expires and blocks the client forever.

        Args:
            key (str):
                Client key (network address).
            window (int):
                Window duration in seconds.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            int:
                Number of hits for key in the current window, including this one.

        Raises:
            DataStoreError:
                If Redis connectivity issues or timeouts occur.
        """
        rate_limit_key = self.keys.rate_limit_key(key)

        with self.redis.pipeline(transaction=True) as pipe:
            pipe.incr(rate_limit_key)
            pipe.expire(rate_limit_key, window, nx=True)
            hits, _ = pipe.execute()

        return int(hits)
