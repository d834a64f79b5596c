"""Unit tests for JSON logging in logging.py.

Test coverage includes:

1. JsonFormatter
   - Standard fields and ISO-8601 UTC timestamp.
   - `extra` fields are attached at the top level.
   - Exceptions are rendered into the `exception` field.
   - Values which aren't JSON serializable are stringified.

2. initialize_logging()
   - Installs a JSON formatted stdout handler at LOG_LEVEL.
"""

import sys
import json
import logging

from freezegun import freeze_time

from cryptshortener.constants import ENV
from cryptshortener.utils.logging import JsonFormatter, initialize_logging


def make_record(msg='hello %s', args=('world',), level=logging.INFO, exc_info=None, **extra):
    record = logging.LogRecord('cryptshortener.test', level, __file__, 1, msg, args, exc_info)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


# -------------------------------
# 1. JsonFormatter
# -------------------------------


@freeze_time('2025-12-26 12:00:00')
def test_json_formatter_standard_fields():
    log = json.loads(JsonFormatter().format(make_record()))

    assert log == {
        'timestamp': '2025-12-26T12:00:00.000Z',
        'level': 'INFO',
        'logger': 'cryptshortener.test',
        'message': 'hello world',
    }


def test_json_formatter_includes_extras():
    log = json.loads(JsonFormatter().format(make_record(event='URL_SHORTENED', shortcode='abc123')))

    assert log['event'] == 'URL_SHORTENED'
    assert log['shortcode'] == 'abc123'


def test_json_formatter_includes_exception():
    try:
        raise ValueError('bad payload')
    except ValueError:
        record = make_record(level=logging.ERROR, exc_info=sys.exc_info())

    log = json.loads(JsonFormatter().format(record))

    assert log['level'] == 'ERROR'
    assert 'ValueError: bad payload' in log['exception']


def test_json_formatter_stringifies_unknown_values():
    log = json.loads(JsonFormatter().format(make_record(payload=b'\x00\x01')))
    assert log['payload'] == str(b'\x00\x01')


# -------------------------------
# 2. initialize_logging()
# -------------------------------


def test_initialize_logging(monkeypatch):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    monkeypatch.setenv(ENV.App.LOG_LEVEL, 'debug')

    try:
        initialize_logging()

        assert root.level == logging.DEBUG
        assert any(isinstance(handler.formatter, JsonFormatter) for handler in root.handlers)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
