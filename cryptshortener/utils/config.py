"""Utility functions for application configuration management.

Non-secret configuration is read from a YAML document and then overridden by
environment variables. The document is looked up in this order:

    1. the `path` argument of load_config();
    2. the `CONFIG_PATH` environment variable;
    3. `<project root>/config/<APP_ENV>.yml`, if it exists.

If none is found, the built-in defaults are used. The YAML document follows
this structure (every key is optional):

    base_url: http://localhost:8080
    server:
      host: 0.0.0.0
      port: 8080
    rate_limit:
      backend: redis        # or 'memory' for single-instance deployments
      limit: 10
      window: 60
    redis:
      host: redis
      port: 6379
      db: 0
      username: null
      password: null
      timeout: 1.0

The AES secret key is never read from the YAML document. It must be injected
through the `SECRET_KEY` environment variable as 64 hex characters, and is
read once at startup.

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return Redis key prefix, or None if `APP_NAME` is not set.

    project_root() -> Path
        Return the project root directory, using `PROJECT_ROOT` when available.

    load_config(path: str | Path | None = None) -> dict
        Load the application configuration as a Python dictionary.

    redis_config(config: dict) -> dict
        Translate the 'redis' section into RedisClientMixin keyword arguments.

    secret_key() -> bytes
        Decode and validate the AES secret key from `SECRET_KEY`.

Example:
    >>> from cryptshortener.utils.config import load_config
    >>> config = load_config()
    >>> config['rate_limit']['limit']
    10
"""

import os
import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from cryptshortener.types import AppConfiguration, RedisConfiguration
from cryptshortener.constants import ENV, Defaults
from cryptshortener.exceptions import BadConfigurationError
from cryptshortener.utils.helpers import require_environment


logger = logging.getLogger(__name__)

SECRET_KEY_SIZE = 32  # AES-256

DEFAULT_CONFIG: AppConfiguration = {
    'base_url': Defaults.BASE_URL,
    'server': {
        'host': Defaults.SERVER_HOST,
        'port': Defaults.SERVER_PORT,
    },
    'rate_limit': {
        'backend': Defaults.RATE_LIMIT_BACKEND,
        'limit': Defaults.RATE_LIMIT,
        'window': Defaults.RATE_LIMIT_WINDOW,
    },
    'redis': {
        'host': Defaults.REDIS_HOST,
        'port': Defaults.REDIS_PORT,
        'db': Defaults.REDIS_DB,
        'username': None,
        'password': None,
        'timeout': Defaults.REDIS_TIMEOUT,
    },
}

# (section, key) -> (environment variable, cast)
ENV_OVERRIDES = {
    (None, 'base_url'): (ENV.App.BASE_URL, str),
    ('server', 'host'): (ENV.Server.HOST, str),
    ('server', 'port'): (ENV.Server.PORT, int),
    ('rate_limit', 'backend'): (ENV.RateLimit.BACKEND, str),
    ('rate_limit', 'limit'): (ENV.RateLimit.LIMIT, int),
    ('rate_limit', 'window'): (ENV.RateLimit.WINDOW, int),
    ('redis', 'host'): (ENV.Redis.HOST, str),
    ('redis', 'port'): (ENV.Redis.PORT, int),
    ('redis', 'db'): (ENV.Redis.DB, int),
    ('redis', 'username'): (ENV.Redis.USERNAME, str),
    ('redis', 'password'): (ENV.Redis.PASSWORD, str),
    ('redis', 'timeout'): (ENV.Redis.TIMEOUT, float),
}

RATE_LIMIT_BACKENDS = frozenset({'redis', 'memory'})


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    return os.environ.get(ENV.App.APP_NAME)


def project_root() -> Path:
    return Path(os.environ.get(ENV.App.PROJECT_ROOT, os.getcwd()))


def app_prefix() -> str | None:
    """Return Redis key prefix

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'cryptshortener'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'cryptshortener:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def _config_path(path: str | Path | None) -> Path | None:
    if path is not None:
        return Path(path)
    if os.environ.get(ENV.App.CONFIG_PATH):
        return Path(os.environ[ENV.App.CONFIG_PATH])

    candidate = project_root() / 'config' / f'{app_env()}.yml'
    return candidate if candidate.is_file() else None


def _read_yaml(path: Path) -> dict[str, Any]:
    with path.open('r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise BadConfigurationError(f'Configuration file {path} is not valid YAML.') from e

    if not isinstance(data, dict):
        raise BadConfigurationError(f'Configuration file {path} must contain a mapping (given type: {type(data)}).')
    return data


def _merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def _apply_environment(config: AppConfiguration) -> AppConfiguration:
    for (section, key), (name, cast) in ENV_OVERRIDES.items():
        raw = os.environ.get(name)
        if not raw:
            continue
        try:
            value = cast(raw)
        except ValueError as e:
            raise BadConfigurationError(f'Environment variable {name} has an invalid value {raw!r}.') from e

        target = config if section is None else config.setdefault(section, {})
        target[key] = value
    return config


def _validate(config: AppConfiguration) -> AppConfiguration:
    rate_limit = config['rate_limit']
    if rate_limit['backend'] not in RATE_LIMIT_BACKENDS:
        raise BadConfigurationError(f"Unknown rate limit backend {rate_limit['backend']!r} (expected one of: {sorted(RATE_LIMIT_BACKENDS)}).")
    for key in ('limit', 'window'):
        value = rate_limit[key]
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            raise BadConfigurationError(f'rate_limit.{key} must be a positive integer (given value: {value!r}).')

    base_url = config['base_url']
    if not isinstance(base_url, str) or not base_url.startswith(('http://', 'https://')):
        raise BadConfigurationError(f'base_url must be an http:// or https:// URL (given value: {base_url!r}).')
    return config


def load_config(path: str | Path | None = None) -> AppConfiguration:
    """Load the application configuration

    Args:
        path (str | Path | None):
            Explicit YAML configuration file. Falls back to `CONFIG_PATH` and
            then to `config/<APP_ENV>.yml` under the project root.

    Returns:
        dict: Defaults, overridden by the YAML document, overridden by
              environment variables.

    Raises:
        FileNotFoundError:
            If an explicitly requested configuration file doesn't exist.
        BadConfigurationError:
            If the document or an environment variable holds an invalid value.

    Example:
        >>> load_config('config/local.yml')['redis']['host']
        'localhost'
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    config_path = _config_path(path)
    if config_path is not None:
        logger.debug('Loading configuration file.', extra={'configPath': str(config_path)})
        _merge(config, _read_yaml(config_path))

    return _validate(_apply_environment(config))


def redis_config(config: AppConfiguration) -> RedisConfiguration:
    """Translate the 'redis' config section into RedisClientMixin keyword arguments

    Example:
        >>> redis_config({'redis': {'host': 'redis', 'port': 6379}})
        {'redis_host': 'redis', 'redis_port': 6379}
    """
    return {f'redis_{k}': v for k, v in config.get('redis', {}).items()}


@require_environment(ENV.Crypto.SECRET_KEY)
def secret_key() -> bytes:
    """Decode and validate the AES-256 secret key from `SECRET_KEY`

    Returns:
        bytes: 32 byte secret key.

    Raises:
        MissingEnvironmentVariableError:
            If `SECRET_KEY` is missing or empty.
        BadConfigurationError:
            If `SECRET_KEY` isn't hex or doesn't decode to 32 bytes.
    """
    try:
        key = bytes.fromhex(os.environ[ENV.Crypto.SECRET_KEY].strip())
    except ValueError as e:
        raise BadConfigurationError(f'{ENV.Crypto.SECRET_KEY} must be hex encoded.') from e

    if len(key) != SECRET_KEY_SIZE:
        raise BadConfigurationError(f'{ENV.Crypto.SECRET_KEY} must decode to {SECRET_KEY_SIZE} bytes (given length: {len(key)}).')
    return key
