from cryptshortener.dao.redis.redis_key_schema import RedisKeySchema
from cryptshortener.dao.redis.mixins import RedisClientMixin
from cryptshortener.dao.redis.counter_redis_dao import CounterRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'CounterRedisDAO',
]
