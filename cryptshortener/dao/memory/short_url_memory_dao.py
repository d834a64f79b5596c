"""In-process Data Access Object (DAO) holding shortened URL mappings

Responsibilities:
    - Store shortcode -> encrypted URL payload mappings in process memory;
    - Guard every read and write with a single mutual-exclusion lock;
    - Raise appropriate DAO exceptions for missing shortcodes.

Mappings live as long as the DAO instance: there is no persistence, eviction,
size bound or expiry. Construct one instance at startup and share it with every
request handler.

Example:
    >>> from cryptshortener.models import ShortURLModel
    >>> from cryptshortener.dao.memory import ShortURLMemoryDAO

    >>> dao = ShortURLMemoryDAO()
    >>> dao.put(ShortURLModel(shortcode='abc123', payload='9f2e01'))
    <ShortURLMemoryDAO>
    >>> dao.get('abc123').payload
    '9f2e01'
"""

import threading

from beartype import beartype

from cryptshortener.models import ShortURLModel
from cryptshortener.types import EncryptedURL
from cryptshortener.dao.base import ShortURLBaseDAO
from cryptshortener.dao.exceptions import ShortURLNotFoundError


class ShortURLMemoryDAO(ShortURLBaseDAO):
    """Thread-safe in-memory short URL store

    A single coarse lock covers the whole mapping for both reads and writes.
    The lock is held only for the duration of the dict access.

    Methods:
        put(short_url: ShortURLModel, **kwargs) -> ShortURLMemoryDAO:
            Insert or overwrite the payload for a shortcode.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve the payload for a shortcode.
            Raises ShortURLNotFoundError when the shortcode doesn't exist.

        count(**kwargs) -> int:
            Number of stored mappings.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._urls: dict[str, EncryptedURL] = {}

    @beartype
    def put(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLMemoryDAO':
        """Insert or overwrite a short URL mapping

        NOTE: shortcode collisions are not detected. A later put() with the
              same shortcode silently replaces the earlier payload.

        Args:
            short_url (ShortURLModel):
                ShortURLModel instance holding the shortcode and encrypted payload.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLMemoryDAO: self (for method chaining)
        """
        with self._lock:
            self._urls[short_url.shortcode] = short_url.payload
        return self

    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a stored short URL mapping by shortcode

        Args:
            shortcode (str):
                The shortcode identifier for the shortened URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLModel:
                The stored ShortURLModel instance.

        Raises:
            ShortURLNotFoundError:
                If the shortcode has never been stored.
        """
        with self._lock:
            payload = self._urls.get(shortcode)

        if payload is None:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

        return ShortURLModel(shortcode=shortcode, payload=payload)

    def count(self, **kwargs) -> int:
        with self._lock:
            return len(self._urls)

    def __repr__(self) -> str:
        return f'<{type(self).__name__}>'
