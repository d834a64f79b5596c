from dataclasses import FrozenInstanceError

import pytest

from cryptshortener.models import ShortURLModel


def test_short_url_model_fields():
    short_url = ShortURLModel(shortcode='abc123', payload='00ff')
    assert short_url.shortcode == 'abc123'
    assert short_url.payload == '00ff'


def test_short_url_model_is_immutable():
    short_url = ShortURLModel(shortcode='abc123', payload='00ff')
    with pytest.raises(FrozenInstanceError):
        short_url.payload = 'ff00'


def test_short_url_model_equality():
    assert ShortURLModel(shortcode='abc123', payload='00ff') == ShortURLModel(shortcode='abc123', payload='00ff')
    assert ShortURLModel(shortcode='abc123', payload='00ff') != ShortURLModel(shortcode='abc123', payload='ff00')
