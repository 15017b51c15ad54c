"""
TotpVault - HOTP/TOTP one-time password generation (RFC 4226 / RFC 6238).

Pipeline: seed generator -> counter derivation -> keyed hash -> OTP codec.

Example:
    >>> from totpvault import Seed, HashAlgorithm, generate_totp
    >>> seed = Seed.from_ascii("12345678901234567890")
    >>> generate_totp(HashAlgorithm.SHA1, 8, seed, 59, 30).unwrap()
    '94287082'
"""

from .auth import (
    Counter,
    Digits,
    Seed,
    TimeStamp,
    TimeStep,
    TOTPGenerator,
    compute_code,
    derive_counter,
    generate_seed,
    generate_seed_for,
    generate_totp,
    hotp,
    now,
    verify_totp,
)
from .core_crypto import HashAlgorithm
from .exceptions import EntropyUnavailable, HashFailure, HashFailureError, TotpVaultError
from .result import Err, Ok, Result

__version__ = "1.0.0"

__all__ = [
    'Counter',
    'Digits',
    'Err',
    'EntropyUnavailable',
    'HashAlgorithm',
    'HashFailure',
    'HashFailureError',
    'Ok',
    'Result',
    'Seed',
    'TimeStamp',
    'TimeStep',
    'TOTPGenerator',
    'TotpVaultError',
    'compute_code',
    'derive_counter',
    'generate_seed',
    'generate_seed_for',
    'generate_totp',
    'hotp',
    'now',
    'verify_totp',
]
