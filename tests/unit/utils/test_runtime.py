import pytest

from cryptshortener.constants import ENV
from cryptshortener.utils.runtime import running_locally


@pytest.mark.parametrize(
    'app_env, expected',
    [
        ('local', True),
        ('LOCAL', True),
        ('dev', False),
        ('prod', False),
        ('', False),
    ],
)
def test_running_locally(monkeypatch, app_env, expected):
    monkeypatch.setenv(ENV.App.APP_ENV, app_env)
    assert running_locally() is expected


def test_running_locally_without_app_env(monkeypatch):
    monkeypatch.delenv(ENV.App.APP_ENV, raising=False)
    assert running_locally() is False
