"""Unit tests for the generate_shortcode function in shortener.py.

Test coverage includes:

1. Basic functionality
   - Ensures the function returns a 6 character string by default.

2. Output format
   - All characters belong to the Base62 alphabet.
   - Across a large sample, every one of the 62 symbols appears.

3. Randomness
   - Consecutive calls produce different shortcodes.

4. Length parameter
   - The 'length' argument is respected; invalid lengths raise errors.

5. Performance sanity
"""

import string
import time

import pytest

from cryptshortener.utils import generate_shortcode
from cryptshortener.utils.shortener import ALPHABET


# -------------------------------
# 1. Basic functionality
# -------------------------------


def test_generate_shortcode_returns_six_characters():
    result = generate_shortcode()
    assert isinstance(result, str)
    assert len(result) == 6


# -------------------------------
# 2. Output format
# -------------------------------


def test_alphabet_is_base62():
    assert len(ALPHABET) == 62
    assert set(ALPHABET) == set(string.ascii_letters + string.digits)


def test_generate_shortcode_is_base62_safe():
    alphabet = set(string.ascii_letters + string.digits)
    for _ in range(1000):
        result = generate_shortcode()
        assert len(result) == 6
        assert all(character in alphabet for character in result)


def test_generate_shortcode_uses_whole_alphabet():
    """Every symbol shows up across a large sample (no alphabet bias bug)."""
    # 2000 * 6 draws: the chance of missing one symbol is ~62 * (61/62)^12000, negligible
    seen = set()
    for _ in range(2000):
        seen.update(generate_shortcode())
    assert seen == set(ALPHABET)


# -------------------------------
# 3. Randomness
# -------------------------------


def test_generate_shortcode_is_not_deterministic():
    results = {generate_shortcode() for _ in range(1000)}
    assert len(results) > 990


# -------------------------------
# 4. Length parameter
# -------------------------------


@pytest.mark.parametrize('length', [1, 7, 10, 32])
def test_generate_shortcode_respects_length(length):
    assert len(generate_shortcode(length=length)) == length


@pytest.mark.parametrize('length', [None, '6', 6.0, True])
def test_invalid_length_type_raises_error(length):
    with pytest.raises(TypeError):
        generate_shortcode(length=length)


@pytest.mark.parametrize('length', [0, -1])
def test_invalid_length_value_raises_error(length):
    with pytest.raises(ValueError):
        generate_shortcode(length=length)


# -------------------------------
# 5. Performance sanity check
# -------------------------------


def test_generate_shortcode_performance():
    start = time.perf_counter()
    for _ in range(4000):
        generate_shortcode()
    assert time.perf_counter() - start < 1.0
