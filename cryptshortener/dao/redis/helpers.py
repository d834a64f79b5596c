import functools
import redis
from typing import TypeVar, Any
from collections.abc import Callable

from cryptshortener.dao.exceptions import DataStoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def _redis_address(client: redis.Redis) -> str:
    info = client.connection_pool.connection_kwargs
    return f"{info.get('host')}:{info.get('port')}/{info.get('db')}"


def handle_redis_connection_error[F](method: F) -> F:
    """Wrap Redis-interacting DAO methods to handle connectivity errors

    Connection errors, timeouts and any other Redis-side failure are all
    reported as DataStoreError, so callers only need to handle one exception.

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations which may raise redis.exceptions.RedisError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on Redis failures.

    Example:
        >>> @handle_redis_connection_error
        ... def get_count(self):
        ...     return self.redis.get('count')
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except redis.exceptions.ConnectionError as e:
            raise DataStoreError(f"Can't connect to Redis at {_redis_address(self.redis)}.") from e
        except redis.exceptions.TimeoutError as e:
            raise DataStoreError(f'Timed out waiting for Redis at {_redis_address(self.redis)}.') from e
        except redis.exceptions.RedisError as e:
            raise DataStoreError(f'Redis at {_redis_address(self.redis)} failed to execute command.') from e

    return wrapper
