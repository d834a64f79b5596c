"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage mechanism.

Responsibilities:
    - Provide an interface for storing and retrieving ShortURLModel objects.
    - Standardize error handling across data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from cryptshortener.models import ShortURLModel
        >>> from cryptshortener.dao.memory import ShortURLMemoryDAO

        >>> dao = ShortURLMemoryDAO()

        >>> short_url = ShortURLModel(shortcode='a1b2c3', payload='9f2e...')
        >>> dao.put(short_url)

        >>> retrieved = dao.get('a1b2c3')
        >>> print(retrieved.payload)
        9f2e...
"""

from abc import ABC, abstractmethod

from cryptshortener.models import ShortURLModel


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        put(short_url: ShortURLModel, **kwargs) -> ShortURLBaseDAO:
            Insert or overwrite a ShortURLModel in the data store.
            Raises DataStoreError on connection or write failure.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve a ShortURLModel from the data store by shortcode.
            Raises ShortURLNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or read failure.

        count(**kwargs) -> int:
            Return the number of stored mappings.

    NOTE:
        - Mappings are never expired or deleted. The DAO does not provide an
          interface to manually delete entries.
        - Shortcode collisions are not detected: put() silently overwrites.
    """

    @abstractmethod
    def put(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLBaseDAO':
        """Insert or overwrite a ShortURLModel in the data store.

        Args:
            short_url (ShortURLModel):
                The ShortURLModel instance to be stored.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLBaseDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a ShortURLModel from the data store by its shortcode.

        Args:
            shortcode (str):
                The shortcode of the ShortURLModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLModel: The stored ShortURLModel instance.

        Raises:
            ShortURLNotFoundError:
                If no ShortURLModel with the given shortcode exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def count(self, **kwargs) -> int:
        """Return the number of stored short URL mappings."""
        pass
