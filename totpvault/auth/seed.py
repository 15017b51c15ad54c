"""
Secret (Seed) Generator

Produces the shared secret used as the HMAC key. Seeds are carried as
lowercase hex strings (2 characters per byte).

The randomness source is an explicit capability: any callable taking a
byte count and returning that many bytes. It defaults to
secrets.token_bytes (the OS CSPRNG); tests pass a fixed-sequence stub.
"""

import logging
import secrets
from dataclasses import dataclass
from typing import Callable, Optional

from cryptography.exceptions import UnsupportedAlgorithm

from ..config import TOTP_SECRET_BYTES
from ..core_crypto.algorithms import HashAlgorithm
from ..exceptions import EntropyUnavailable

logger = logging.getLogger(__name__)

RandomSource = Callable[[int], bytes]


@dataclass(frozen=True)
class Seed:
    """
    Shared secret, hex-encoded.

    The repr never shows the secret so seeds can't leak into logs or
    tracebacks by accident.
    """
    value: str

    @classmethod
    def from_bytes(cls, raw: bytes) -> 'Seed':
        """Hex-encode raw key bytes."""
        return cls(raw.hex())

    @classmethod
    def from_ascii(cls, text: str) -> 'Seed':
        """Seed from an ASCII key such as the RFC test key '12345678901234567890'."""
        return cls.from_bytes(text.encode('ascii'))

    def to_bytes(self) -> bytes:
        """Decode back to raw bytes (leading zero bytes preserved)."""
        return bytes.fromhex(self.value)

    def __len__(self) -> int:
        """Key length in bytes."""
        return len(self.value) // 2

    def __repr__(self) -> str:
        return f"Seed(<{len(self)} bytes>)"

    __str__ = __repr__


def generate_seed(length_bytes: int = TOTP_SECRET_BYTES, rng: Optional[RandomSource] = None) -> Seed:
    """
    Generate a cryptographically secure random seed.

    Args:
        length_bytes: Number of random bytes to draw, 20 by default
            (20/32/64 for SHA-1/256/512)
        rng: Randomness source, defaults to secrets.token_bytes

    Returns:
        Seed holding the hex-encoded bytes

    Raises:
        ValueError: If length_bytes is not a positive integer
        EntropyUnavailable: If the source cannot supply the bytes
    """
    if isinstance(length_bytes, bool) or not isinstance(length_bytes, int) or length_bytes <= 0:
        raise ValueError(f"Seed length must be a positive integer, got {length_bytes!r}")

    source = rng if rng is not None else secrets.token_bytes
    try:
        raw = source(length_bytes)
    except (OSError, NotImplementedError) as e:
        logger.error("Randomness source failed: %s", e)
        raise EntropyUnavailable(f"Randomness source unavailable: {e}") from e

    # Never accept a short read in place of real entropy
    if not isinstance(raw, (bytes, bytearray)) or len(raw) != length_bytes:
        got = len(raw) if isinstance(raw, (bytes, bytearray)) else type(raw).__name__
        raise EntropyUnavailable(f"Randomness source returned {got} instead of {length_bytes} bytes")

    logger.debug("Generated %d-bit seed", length_bytes * 8)
    return Seed.from_bytes(bytes(raw))


def generate_seed_for(algorithm: HashAlgorithm, rng: Optional[RandomSource] = None) -> Seed:
    """
    Generate a seed of the RFC 6238 key length for the algorithm.

    Raises:
        ValueError: If the algorithm is not SHA1, SHA256 or SHA512
        EntropyUnavailable: If the source cannot supply the bytes
    """
    try:
        algo = HashAlgorithm.from_name(algorithm)
    except UnsupportedAlgorithm as e:
        raise ValueError(str(e)) from e
    return generate_seed(algo.key_size, rng)
