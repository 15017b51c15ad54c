# Authentication Module
"""
One-time password implementations:
- Seed generation - seed.py
- Counter derivation from time - counter.py
- Dynamic truncation and formatting - otp.py
- HOTP/TOTP generation and verification (RFC 4226 / RFC 6238) - totp.py
"""

from .seed import (
    Seed,
    generate_seed,
    generate_seed_for,
)

from .counter import (
    Counter,
    TimeStamp,
    TimeStep,
    counter_from_int,
    derive_counter,
    now,
    remaining_seconds,
)

from .otp import (
    Digits,
    format_code,
    truncate,
    truncate_and_format,
)

from .totp import (
    TOTPGenerator,
    compute_code,
    generate_totp,
    hotp,
    verify_totp,
)

__all__ = [
    # Seed
    'Seed',
    'generate_seed',
    'generate_seed_for',
    # Counter
    'Counter',
    'TimeStamp',
    'TimeStep',
    'counter_from_int',
    'derive_counter',
    'now',
    'remaining_seconds',
    # Codec
    'Digits',
    'format_code',
    'truncate',
    'truncate_and_format',
    # TOTP
    'TOTPGenerator',
    'compute_code',
    'generate_totp',
    'hotp',
    'verify_totp',
]
