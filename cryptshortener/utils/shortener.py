"""Shortcode generation utility

This module provides a helper function for generating short, random,
non-sequential identifiers for shortened URLs.

Functions:
    generate_shortcode(length=6):
        Generate a random base62 string suitable for use as a URL slug.

Example:
    >>> from cryptshortener.utils import generate_shortcode
    >>> generate_shortcode()
    'q7FemO'
"""

import secrets
import string

from cryptshortener.constants import Defaults


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits


def generate_shortcode(length: int = Defaults.SHORTCODE_LENGTH) -> str:
    """Generate a random, fixed-length base62 shortcode.

    Every character is drawn independently and uniformly from the base62
    alphabet (a-z, A-Z, 0-9) using the operating system's CSPRNG.

    Args:
        length (int, optional):
            Exact length of the resulting shortcode.
            Defaults to 6 (62^6 ~ 56.8 billion possible codes).

    Returns:
        str: A random alphanumeric shortcode.

    Example:
        >>> generate_shortcode()
        'aZ09xQ'
        >>> len(generate_shortcode(length=10))
        10

    NOTE:
        - No uniqueness check is performed against existing shortcodes.
          Uniqueness is probabilistic only; a colliding shortcode overwrites
          the earlier mapping.
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length <= 0:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    return ''.join(secrets.choice(ALPHABET) for _ in range(length))
