"""Symmetric encryption of original URLs at rest

Original URLs are never stored in plain text. Each URL is encrypted with
AES-256 in CTR mode using a fresh random initialization vector (IV) per call.
The IV is prepended to the ciphertext and the whole payload is hex encoded:

    payload = hex(IV || AES-CTR(key, IV, url))

Because the IV changes on every call, encrypting the same URL twice yields two
different payloads which both decrypt to the same URL.

Classes:
    CryptoEngine:
        Encrypt and decrypt URL strings with a fixed, process-lifetime key.

Example:
    >>> engine = CryptoEngine(bytes(32))
    >>> payload = engine.encrypt('https://example.com')
    >>> engine.decrypt(payload)
    'https://example.com'

NOTE:
    The secret key does not rotate for the lifetime of the process. Rotating
    it would make every stored payload undecodable.
"""

import os
import logging

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from cryptshortener.types import EncryptedURL
from cryptshortener.exceptions import BadConfigurationError, CorruptPayloadError


logger = logging.getLogger(__name__)

KEY_SIZE = 32  # AES-256
BLOCK_SIZE = algorithms.AES.block_size // 8  # 16 bytes, also the IV length


class CryptoEngine:
    """Encrypt URLs with AES-256-CTR and a random IV per call

    Attributes:
        algorithm (algorithms.AES):
            AES primitive bound to the secret key. Constructed once; each
            encrypt/decrypt call builds its own CTR context around it, so an
            engine is safe to share between threads.
    """

    def __init__(self, secret_key: bytes):
        """Build the AES primitive for the given key

        Args:
            secret_key (bytes):
                32 byte AES-256 key.

        Raises:
            BadConfigurationError:
                If the key has the wrong type or length. This is a deployment
                defect and is expected to abort startup.
        """
        if not isinstance(secret_key, bytes):
            raise BadConfigurationError(f'Secret key must be of type bytes (given type: {type(secret_key)}).')
        if len(secret_key) != KEY_SIZE:
            raise BadConfigurationError(f'Secret key must be {KEY_SIZE} bytes long (given length: {len(secret_key)}).')

        try:
            self.algorithm = algorithms.AES(secret_key)
        except ValueError as e:  # pragma: no cover
            raise BadConfigurationError('Failed to create cipher block.') from e

    def encrypt(self, plaintext: str) -> EncryptedURL:
        """Encrypt a URL string into a hex encoded IV || ciphertext payload

        Args:
            plaintext (str):
                Original URL.

        Returns:
            EncryptedURL: hex string, 2 * (16 + len(utf-8 plaintext)) characters long.

        Example:
            >>> engine.encrypt('https://example.com')
            '8f1c...'
        """
        iv = os.urandom(BLOCK_SIZE)
        encryptor = Cipher(self.algorithm, modes.CTR(iv)).encryptor()
        ciphertext = encryptor.update(plaintext.encode('utf-8')) + encryptor.finalize()

        logger.debug('URL encrypted successfully.', extra={'originalLength': len(plaintext)})
        return (iv + ciphertext).hex()

    def decrypt(self, encoded: EncryptedURL) -> str:
        """Recover the original URL from an encrypted payload

        Args:
            encoded (EncryptedURL):
                Payload previously returned by encrypt().

        Returns:
            str: original URL.

        Raises:
            CorruptPayloadError:
                If the payload isn't valid hex, is shorter than one IV, or
                doesn't decrypt to valid UTF-8. Payloads are produced by this
                process only, so any of these means stored data is corrupt.
        """
        try:
            raw = bytes.fromhex(encoded)
        except (ValueError, TypeError) as e:
            raise CorruptPayloadError('Failed to decode hex payload.') from e

        if len(raw) < BLOCK_SIZE:
            raise CorruptPayloadError(f'Payload is shorter than the {BLOCK_SIZE} byte IV (given length: {len(raw)}).')

        iv, ciphertext = raw[:BLOCK_SIZE], raw[BLOCK_SIZE:]
        decryptor = Cipher(self.algorithm, modes.CTR(iv)).decryptor()
        plaintext = decryptor.update(ciphertext) + decryptor.finalize()

        try:
            result = plaintext.decode('utf-8')
        except UnicodeDecodeError as e:
            raise CorruptPayloadError('Decrypted payload is not valid UTF-8.') from e

        logger.debug('URL decrypted successfully.', extra={'decryptedLength': len(result)})
        return result
