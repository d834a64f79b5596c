"""Unit tests for RedisClientMixin.

Test coverage includes:
    1. Client construction
       - Connection parameters, including the socket timeouts, reach redis.Redis.
       - An injected client is adopted as is.
    2. Healthcheck
       - PING on initialization unless disabled.
       - Unreachable Redis raises DataStoreError, or returns False on request.
"""

from unittest.mock import patch

import pytest
import redis

from cryptshortener.dao.exceptions import DataStoreError
from cryptshortener.dao.redis.mixins import RedisClientMixin


# -------------------------------
# 1. Client construction
# -------------------------------


class TestClientConstruction:
    def test_builds_client_with_timeouts(self):
        with patch('cryptshortener.dao.redis.mixins.redis.Redis', autospec=True) as redis_cls:
            mixin = RedisClientMixin(
                redis_host='counters.internal',
                redis_port='6380',
                redis_db='2',
                redis_username='limiter',
                redis_password='hunter2',
                redis_timeout=0.25,
                prefix='cryptshortener:dev',
            )

        redis_cls.assert_called_once_with(
            host='counters.internal',
            port=6380,
            db=2,
            decode_responses=True,
            username='limiter',
            password='hunter2',
            socket_timeout=0.25,
            socket_connect_timeout=0.25,
        )
        assert mixin.redis is redis_cls.return_value
        assert mixin.keys.prefix == 'cryptshortener:dev'

    def test_adopts_injected_client(self, redis_client, app_prefix):
        mixin = RedisClientMixin(redis_client=redis_client, prefix=app_prefix)

        assert mixin.redis is redis_client
        assert mixin.keys.rate_limit_key('203.0.113.7') == f'{app_prefix}:ratelimit:203.0.113.7'


# -------------------------------
# 2. Healthcheck
# -------------------------------


class TestHealthcheck:
    @pytest.fixture
    def unhealthy_redis_client(self, redis_client):
        redis_client.ping.side_effect = redis.exceptions.ConnectionError('Connection refused')
        return redis_client

    def test_pings_on_initialization(self, redis_client):
        mixin = RedisClientMixin(redis_client=redis_client)
        redis_client.ping.assert_called_once()

        assert mixin._healthcheck() is True
        assert redis_client.ping.call_count == 2

    def test_skips_ping_when_disabled(self, redis_client):
        RedisClientMixin(redis_client=redis_client, healthcheck=False)
        redis_client.ping.assert_not_called()

    @pytest.mark.parametrize('error', [redis.exceptions.ConnectionError('refused'), redis.exceptions.TimeoutError('timed out')])
    def test_raises_when_unreachable(self, redis_client, error):
        redis_client.ping.side_effect = error

        with pytest.raises(DataStoreError, match="Can't connect to Redis at redis.test:6379/0.") as exc_info:
            RedisClientMixin(redis_client=redis_client)

        assert exc_info.value.__cause__ is error

    def test_returns_false_without_raising(self, unhealthy_redis_client):
        mixin = RedisClientMixin(redis_client=unhealthy_redis_client, healthcheck=False)
        assert mixin._healthcheck(raise_error=False) is False
