from dataclasses import dataclass

from cryptshortener.types import EncryptedURL


# fmt: off
@dataclass(frozen=True)
class ShortURLModel:
    shortcode: str          # Public short identifier of shortened URL
    payload: EncryptedURL   # Encrypted original URL (hex IV || ciphertext)
# fmt: on
