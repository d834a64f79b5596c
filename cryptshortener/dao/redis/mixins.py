"""Redis connection setup shared by Redis-backed DAOs

Every Redis call made through the client is bounded by `redis_timeout`, for
both connecting and reading. A counter service which hangs must surface as a
TimeoutError quickly enough for the rate limiter to deny the request.

Classes:
    RedisClientMixin:
        Builds (or adopts) the Redis client, the key schema, and PINGs Redis.

Example:
    >>> class CounterRedisDAO(RedisClientMixin, CounterBaseDAO):
    ...     ...
    >>> dao = CounterRedisDAO(redis_host='localhost', redis_timeout=0.5, prefix='cryptshortener:dev')
    >>> dao._healthcheck()
    True
"""

from typing import Optional

import redis

from cryptshortener.constants import Defaults
from cryptshortener.dao.redis.redis_key_schema import RedisKeySchema
from cryptshortener.dao.redis.helpers import _redis_address
from cryptshortener.dao.exceptions import DataStoreError


class RedisClientMixin:
    """Redis client and key schema for DAO subclasses

    Attributes:
        redis (redis.Redis):
            Client shared by all DAO methods.
        keys (RedisKeySchema):
            Namespaced key builder, see RedisKeySchema.
    """

    def __init__(
        self,
        redis_host: Optional[str] = Defaults.REDIS_HOST,
        redis_port: Optional[int] = Defaults.REDIS_PORT,
        redis_db: Optional[int] = Defaults.REDIS_DB,
        redis_decode_responses: Optional[bool] = True,
        redis_username: Optional[str] = None,
        redis_password: Optional[str] = None,
        redis_timeout: Optional[float] = Defaults.REDIS_TIMEOUT,
        redis_client: Optional[redis.Redis] = None,
        prefix: Optional[str] = None,
        healthcheck: bool = True,
    ):
        """
        Args:
            redis_host, redis_port, redis_db, redis_username, redis_password:
                Connection parameters. Ignored when `redis_client` is given.
            redis_decode_responses (Optional[bool]):
                Return str instead of bytes. Defaults to True.
            redis_timeout (Optional[float]):
                Socket connect and read timeout in seconds.
            redis_client (Optional[redis.Redis]):
                Ready-made client, e.g. a mock in tests.
            prefix (Optional[str]):
                Key namespace, usually '<app name>:<app env>'.
            healthcheck (bool):
                PING Redis right away and fail fast if it's unreachable.

        Raises:
            DataStoreError:
                If `healthcheck` is set and Redis doesn't answer.
        """
        if redis_client is None:
            redis_client = redis.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                decode_responses=redis_decode_responses,
                username=redis_username,
                password=redis_password,
                socket_timeout=redis_timeout,
                socket_connect_timeout=redis_timeout,
            )

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)

        if healthcheck:
            self._healthcheck()

    def _healthcheck(self, raise_error: bool = True) -> bool:
        """PING Redis

        Returns False instead of raising when `raise_error` is False, which
        lets the server start while the counter service is still down.
        """
        try:
            self.redis.ping()
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            if not raise_error:
                return False
            raise DataStoreError(f"Can't connect to Redis at {_redis_address(self.redis)}. Check the provided configuration parameters.") from e
        return True
