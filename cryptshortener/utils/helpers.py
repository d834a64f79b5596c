"""Helper utilities for request handlers.

Functions:
    get_short_url(shortcode: str, base_url: str) -> str
        Get string representation of short URL for a given shortcode
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
    guarantee_500_response(func: Callable) -> Callable
        Decorator: Turn unexpected handler exceptions into 500 responses

Example:
    >>> get_short_url('abc123', 'http://localhost:8080/')
    'http://localhost:8080/abc123'
"""

import os
import logging
import functools
from collections.abc import Callable

from flask import Response

from cryptshortener.constants import UNKNOWN_INTERNAL_SERVER_ERROR
from cryptshortener.exceptions import MissingEnvironmentVariableError
from cryptshortener.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def get_short_url(shortcode: str, base_url: str) -> str:
    """Get string representation of shortened URL

    NOTE: the base URL comes from configuration, not from the incoming request.

    Args:
        shortcode (str): shortcode
        base_url (str): public base URL of the service, e.g. 'http://localhost:8080'

    Returns:
        str: short url string representation
    """
    return f'{base_url.rstrip("/")}/{shortcode}'


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('SECRET_KEY')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'SECRET_KEY'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator


def guarantee_500_response(func: Callable) -> Callable:
    """Decorator: respond with 500 when a request handler raises

    When running locally the original exception is re-raised instead, so the
    traceback reaches the developer.

    Args:
        func (Callable):
            Flask view function.

    Returns:
        Callable: wrapped view function.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            if running_locally():
                raise
            error_code = getattr(e, 'error_code', UNKNOWN_INTERNAL_SERVER_ERROR)
            logger.exception(
                'Unhandled exception in request handler. Responding with 500.',
                extra={'event': UNKNOWN_INTERNAL_SERVER_ERROR, 'errorCode': error_code},
            )
            return Response('Internal Server Error', status=500, mimetype='text/plain')

    return wrapper
