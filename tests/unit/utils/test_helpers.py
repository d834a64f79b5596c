"""Unit tests for helper functions in helpers.py.

Test coverage includes:

1. get_short_url() retrieves short URL string representation

2. require_environment() decorator behavior
   - 2.1. Ensures decorated functions execute when all env vars are present.
   - 2.2. Ensures missing or empty env vars raise MissingEnvironmentVariableError.

3. guarantee_500_response() decorator behavior
   - 3.1. Passes through successful handler responses.
   - 3.2. Turns unexpected exceptions into a plain 500 response outside local runs.
   - 3.3. Re-raises unexpected exceptions when running locally.
"""

import pytest

from cryptshortener.constants import ENV
from cryptshortener.exceptions import MissingEnvironmentVariableError
from cryptshortener.utils.helpers import get_short_url, require_environment, guarantee_500_response


# -------------------------------
# 1. get_short_url()
# -------------------------------


@pytest.mark.parametrize(
    'shortcode, base_url, expected',
    [
        ('abc123', 'http://localhost:8080', 'http://localhost:8080/abc123'),
        ('abc123', 'http://localhost:8080/', 'http://localhost:8080/abc123'),
        ('Zz09aB', 'https://sho.rt', 'https://sho.rt/Zz09aB'),
    ],
)
def test_get_short_url(shortcode, base_url, expected):
    assert get_short_url(shortcode, base_url) == expected


# -------------------------------
# 2.1. require_environment() with present variables
# -------------------------------


def test_require_environment_with_present_variables(monkeypatch):
    monkeypatch.setenv('FIRST', 'one')
    monkeypatch.setenv('SECOND', 'two')

    @require_environment('FIRST', 'SECOND')
    def read():
        return 'called'

    assert read() == 'called'


# -------------------------------
# 2.2. require_environment() with missing variables
# -------------------------------


def test_require_environment_with_missing_variables(monkeypatch):
    monkeypatch.setenv('FIRST', '')
    monkeypatch.delenv('SECOND', raising=False)

    @require_environment('FIRST', 'SECOND')
    def read():
        raise AssertionError('must not be called')

    with pytest.raises(MissingEnvironmentVariableError) as exc_info:
        read()

    assert str(exc_info.value) == "Missing required environment variables: 'FIRST', 'SECOND'"


# -------------------------------
# 3. guarantee_500_response()
# -------------------------------


def test_guarantee_500_response_passes_result_through():
    @guarantee_500_response
    def handler():
        return 'ok'

    assert handler() == 'ok'


def test_guarantee_500_response_returns_500(monkeypatch, caplog):
    monkeypatch.setenv(ENV.App.APP_ENV, 'prod')

    @guarantee_500_response
    def handler():
        raise RuntimeError('boom')

    response = handler()

    assert response.status_code == 500
    assert response.mimetype == 'text/plain'
    assert response.get_data(as_text=True) == 'Internal Server Error'
    assert any(record.event == 'UNKNOWN_INTERNAL_SERVER_ERROR' for record in caplog.records)


def test_guarantee_500_response_reraises_locally(monkeypatch):
    monkeypatch.setenv(ENV.App.APP_ENV, 'local')

    @guarantee_500_response
    def handler():
        raise RuntimeError('boom')

    with pytest.raises(RuntimeError, match='boom'):
        handler()
