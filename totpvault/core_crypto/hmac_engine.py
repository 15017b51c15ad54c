"""
Keyed-Hash Engine

Computes HMAC-SHA1/256/512 over a moving factor using the seed as key.

The engine never raises for primitive failures: an unsupported algorithm,
malformed key material or an empty key come back as Err(HashFailure) with
the underlying exception attached. Failures are deterministic, so nothing
is retried.
"""

import logging
from dataclasses import dataclass
from typing import Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hmac

from ..exceptions import HashFailure
from ..result import Err, Ok, Result
from .algorithms import HashAlgorithm

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HmacKey:
    """Raw HMAC key bytes decoded from a seed."""
    value: bytes

    def __repr__(self) -> str:
        return f"HmacKey(<{len(self.value)} bytes>)"


@dataclass(frozen=True)
class HmacResult:
    """HMAC output (20, 32 or 64 bytes)."""
    value: bytes


def _seed_hex(seed) -> str:
    # Accepts a Seed or its hex string
    return getattr(seed, 'value', seed)


def hmac_key(seed) -> HmacKey:
    """
    Decode a hex seed into raw key bytes.

    Leading zero bytes are preserved exactly.

    Args:
        seed: Seed or hex string

    Returns:
        HmacKey with the decoded bytes

    Raises:
        ValueError: If the seed is not valid hex
        TypeError: If the seed is not a string
    """
    return HmacKey(bytes.fromhex(_seed_hex(seed)))


def hash_counter(algorithm: Union[HashAlgorithm, str], seed, message) -> Result:
    """
    Compute HMAC(key=seed, msg=message) with the selected algorithm.

    Args:
        algorithm: HashAlgorithm or its name ('SHA1', 'sha-256', ...)
        seed: Seed or hex string used as the key
        message: Counter or raw bytes to authenticate

    Returns:
        Ok(HmacResult) on success, Err(HashFailure) otherwise
    """
    try:
        algo = HashAlgorithm.from_name(algorithm)
        key = hmac_key(seed)
        if not key.value:
            raise ValueError("Empty key")

        data = getattr(message, 'value', message)
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError(f"message must be bytes, got {type(data).__name__}")

        mac = hmac.HMAC(key.value, algo.hash_instance())
        mac.update(bytes(data))
        digest = mac.finalize()
    except UnsupportedAlgorithm as e:
        logger.warning("Keyed hash unavailable: %s", e)
        return Err(HashFailure("Hash algorithm unavailable", e))
    except (TypeError, ValueError) as e:
        logger.warning("HMAC key initialization failed: %s", e)
        return Err(HashFailure("HMAC key initialization failed", e))

    logger.debug("Computed HMAC-%s (%d bytes)", algo.value, len(digest))
    return Ok(HmacResult(digest))
