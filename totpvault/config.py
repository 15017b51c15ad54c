"""
TotpVault configuration.

Module-level defaults follow the RFC 6238 recommendations. TotpConfig
bundles them and can be loaded from environment variables:

    TOTPVAULT_DIGITS            code length (1-8)
    TOTPVAULT_TIME_STEP         time step in seconds (> 0)
    TOTPVAULT_ALGORITHM         SHA1, SHA256 or SHA512
    TOTPVAULT_DRIFT_TOLERANCE   steps accepted on each side when verifying
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from cryptography.exceptions import UnsupportedAlgorithm

from .auth.otp import Digits
from .core_crypto.algorithms import HashAlgorithm


# TOTP configuration (RFC 6238 defaults)
TOTP_DIGITS = 6           # Number of digits in OTP
TOTP_TIME_STEP = 30       # Time step in seconds
TOTP_SECRET_BYTES = 20    # Default seed length (160 bits for SHA-1)
TOTP_ALGORITHM = 'SHA1'   # Hash algorithm
TOTP_DRIFT_TOLERANCE = 1  # Accept codes from +/- this many time steps

DEMO_SEED_BYTES = 64      # Seed length used by the demo command

ENV_PREFIX = 'TOTPVAULT_'


@dataclass(frozen=True)
class TotpConfig:
    """Validated code generation settings."""
    digits: int = TOTP_DIGITS
    time_step: int = TOTP_TIME_STEP
    algorithm: HashAlgorithm = HashAlgorithm.SHA1
    drift_tolerance: int = TOTP_DRIFT_TOLERANCE

    def __post_init__(self):
        Digits.of(self.digits)
        if self.time_step <= 0:
            raise ValueError(f"time step must be positive, got {self.time_step}")
        if self.drift_tolerance < 0:
            raise ValueError(f"drift tolerance must be non-negative, got {self.drift_tolerance}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'TotpConfig':
        """
        Load configuration from environment variables.

        Unset variables fall back to the module defaults.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            TotpConfig instance

        Raises:
            ValueError: If a variable is malformed or out of range
        """
        if environ is None:
            environ = os.environ

        def _int(name: str, default: int) -> int:
            raw = environ.get(ENV_PREFIX + name)
            if raw is None or raw.strip() == '':
                return default
            try:
                return int(raw)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None

        algorithm_name = environ.get(ENV_PREFIX + 'ALGORITHM') or TOTP_ALGORITHM
        try:
            algorithm = HashAlgorithm.from_name(algorithm_name)
        except UnsupportedAlgorithm as e:
            raise ValueError(f"{ENV_PREFIX}ALGORITHM: {e}") from e

        return cls(
            digits=_int('DIGITS', TOTP_DIGITS),
            time_step=_int('TIME_STEP', TOTP_TIME_STEP),
            algorithm=algorithm,
            drift_tolerance=_int('DRIFT_TOLERANCE', TOTP_DRIFT_TOLERANCE),
        )
