from enum import StrEnum


class Defaults:
    """Default configuration values."""

    SHORTCODE_LENGTH = 6
    RATE_LIMIT = 10  # Requests admitted per client per window
    RATE_LIMIT_WINDOW = 60  # Fixed window duration (1 minute in seconds)
    RATE_LIMIT_BACKEND = 'redis'
    REDIS_HOST = 'redis'
    REDIS_PORT = 6379
    REDIS_DB = 0
    REDIS_TIMEOUT = 1.0  # Seconds before a counter service call counts as failed
    SERVER_HOST = '0.0.0.0'  # noqa: S104
    SERVER_PORT = 8080
    BASE_URL = 'http://localhost:8080'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        PROJECT_ROOT = 'PROJECT_ROOT'
        CONFIG_PATH = 'CONFIG_PATH'
        LOG_LEVEL = 'LOG_LEVEL'
        BASE_URL = 'BASE_URL'

    class Crypto(StrEnum):
        # 64 hex characters (AES-256 key)
        SECRET_KEY = 'SECRET_KEY'  # noqa: S105

    class RateLimit(StrEnum):
        LIMIT = 'RATE_LIMIT'
        WINDOW = 'RATE_LIMIT_WINDOW'
        BACKEND = 'RATE_LIMIT_BACKEND'  # 'redis' or 'memory'

    class Redis(StrEnum):
        HOST = 'REDIS_HOST'
        PORT = 'REDIS_PORT'
        DB = 'REDIS_DB'
        USERNAME = 'REDIS_USERNAME'
        PASSWORD = 'REDIS_PASSWORD'  # noqa: S105
        TIMEOUT = 'REDIS_TIMEOUT'

    class Server(StrEnum):
        HOST = 'SERVER_HOST'
        PORT = 'SERVER_PORT'


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
