from typing import Any


# Hex encoded IV || ciphertext of an original URL
type EncryptedURL = str

# Type aliases for Python dictionaries
type AppConfiguration = dict[str, Any]
type RedisConfiguration = dict[str, Any]
