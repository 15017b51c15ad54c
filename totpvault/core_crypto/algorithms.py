"""
Hash algorithms supported by the keyed-hash engine.

RFC 6238 allows HMAC-SHA-1, HMAC-SHA-256 and HMAC-SHA-512. The RFC test
keys match the digest size of each algorithm (20, 32 and 64 bytes).
"""

from enum import Enum
from typing import Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes


class HashAlgorithm(Enum):
    """Closed set of HMAC hash primitives."""

    SHA1 = 'SHA1'
    SHA256 = 'SHA256'
    SHA512 = 'SHA512'

    def hash_instance(self) -> hashes.HashAlgorithm:
        """Fresh cryptography hash object for this algorithm."""
        return _HASHES[self]()

    @property
    def digest_size(self) -> int:
        """HMAC output length in bytes."""
        return self.hash_instance().digest_size

    @property
    def key_size(self) -> int:
        """Recommended seed length in bytes (RFC 6238 test key size)."""
        return self.digest_size

    @classmethod
    def from_name(cls, name: Union[str, 'HashAlgorithm']) -> 'HashAlgorithm':
        """
        Resolve an algorithm from its name.

        Accepts 'SHA1', 'sha256', 'SHA-512', 'sha_1' and so on.

        Raises:
            UnsupportedAlgorithm: If the name is not one of the supported hashes
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise UnsupportedAlgorithm(f"Unsupported hash algorithm: {name!r}")
        normalized = name.strip().upper().replace('-', '').replace('_', '')
        try:
            return cls(normalized)
        except ValueError:
            raise UnsupportedAlgorithm(f"Unsupported hash algorithm: {name!r}") from None


_HASHES = {
    HashAlgorithm.SHA1: hashes.SHA1,
    HashAlgorithm.SHA256: hashes.SHA256,
    HashAlgorithm.SHA512: hashes.SHA512,
}
