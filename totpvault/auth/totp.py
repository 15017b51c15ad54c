"""
TOTP (Time-based One-Time Password) Implementation

Implements RFC 6238 TOTP on top of RFC 4226 HOTP.

Features:
- Code generation for any counter (HOTP) or timestamp (TOTP)
- HMAC-SHA1, HMAC-SHA256 and HMAC-SHA512
- Configurable time step and digits
- Time drift tolerance when verifying

Hash failures are returned as Err(HashFailure) and short-circuit the
pipeline; precondition violations (bad digits, negative timestamps)
raise ValueError.
"""

import hmac
import logging
import time
from typing import Callable, Optional, Union

from ..config import (
    TOTP_DIGITS,
    TOTP_DRIFT_TOLERANCE,
    TOTP_TIME_STEP,
)
from ..core_crypto.algorithms import HashAlgorithm
from ..core_crypto.hmac_engine import hash_counter
from ..result import Ok, Result
from .counter import Counter, counter_from_int, derive_counter
from .counter import remaining_seconds as _remaining_seconds
from .otp import Digits, truncate_and_format
from .seed import RandomSource, Seed, generate_seed_for

logger = logging.getLogger(__name__)

AlgorithmLike = Union[HashAlgorithm, str]


def _as_counter(counter: Union[Counter, int]) -> Counter:
    if isinstance(counter, Counter):
        return counter
    return counter_from_int(counter)


def compute_code(algorithm: AlgorithmLike, digits: Union[int, Digits],
                 seed: Union[Seed, str], counter: Union[Counter, int]) -> Result:
    """
    Generate the OTP for a counter.

    Args:
        algorithm: Hash algorithm (SHA1, SHA256, SHA512)
        digits: Code length, 1-8
        seed: Shared secret (Seed or hex string)
        counter: Counter or non-negative integer moving factor

    Returns:
        Ok(code) or Err(HashFailure)

    Raises:
        ValueError: If digits is out of range or counter is negative
    """
    size = Digits.of(digits)
    return hash_counter(algorithm, seed, _as_counter(counter)).map(
        lambda hmac_result: truncate_and_format(hmac_result, size)
    )


def generate_totp(algorithm: AlgorithmLike, digits: Union[int, Digits],
                  seed: Union[Seed, str], timestamp: int,
                  time_step: int = TOTP_TIME_STEP) -> Result:
    """
    Generate the TOTP for a timestamp.

    Counter derivation, keyed hash, then truncation. A hash failure is
    returned unchanged.

    Args:
        algorithm: Hash algorithm
        digits: Code length, 1-8
        seed: Shared secret
        timestamp: Unix time in seconds (>= 0)
        time_step: Step duration in seconds (> 0)

    Returns:
        Ok(code) or Err(HashFailure)
    """
    counter = derive_counter(timestamp, time_step)
    result = compute_code(algorithm, digits, seed, counter)
    if result.is_err():
        logger.warning("TOTP generation failed: %s", result.error)
    return result


def hotp(seed: Union[Seed, str], counter: Union[Counter, int],
         digits: Union[int, Digits] = TOTP_DIGITS,
         algorithm: AlgorithmLike = HashAlgorithm.SHA1) -> Result:
    """
    Generate HOTP (HMAC-based OTP) value.

    Implements RFC 4226.

    Args:
        seed: Shared secret
        counter: Event counter
        digits: Number of digits in OTP (default 6)
        algorithm: Hash algorithm (default SHA1)

    Returns:
        Ok(code) or Err(HashFailure)
    """
    return compute_code(algorithm, digits, seed, counter)


def verify_totp(seed: Union[Seed, str], code: str,
                timestamp: Optional[int] = None,
                digits: Union[int, Digits] = TOTP_DIGITS,
                time_step: int = TOTP_TIME_STEP,
                algorithm: AlgorithmLike = HashAlgorithm.SHA1,
                drift_tolerance: int = TOTP_DRIFT_TOLERANCE,
                clock: Callable[[], float] = time.time) -> Result:
    """
    Verify a TOTP code with drift tolerance.

    Checks the code against the current time step and +/- drift_tolerance
    steps to account for clock drift. No record of accepted codes is kept.

    Args:
        seed: Shared secret
        code: OTP code to verify
        timestamp: Unix timestamp (read from clock if None)
        digits: Expected number of digits
        time_step: Time step in seconds
        algorithm: Hash algorithm
        drift_tolerance: Number of time steps to check in each direction
        clock: Clock used when timestamp is None

    Returns:
        Ok(True/False), or Err(HashFailure) if codes can't be computed

    Raises:
        ValueError: On bad digits, tolerance, timestamp or time step,
            whatever the code looks like
    """
    size = Digits.of(digits)
    if drift_tolerance < 0:
        raise ValueError(f"drift tolerance must be non-negative, got {drift_tolerance}")
    if timestamp is None:
        timestamp = int(clock())
    current_step = int(derive_counter(timestamp, time_step))

    # Clean up code (remove spaces, ensure string)
    code = str(code).replace(' ', '').strip()
    if len(code) != size or not (code.isascii() and code.isdigit()):
        return Ok(False)

    for offset in range(-drift_tolerance, drift_tolerance + 1):
        step = current_step + offset
        if step < 0:
            continue
        expected = compute_code(algorithm, size, seed, step)
        if expected.is_err():
            return expected
        # Use constant-time comparison
        if hmac.compare_digest(code, expected.value):
            return Ok(True)

    return Ok(False)


class TOTPGenerator:
    """
    TOTP generator and verifier for a specific secret.

    Example:
        >>> totp_gen = TOTPGenerator()
        >>> code = totp_gen.generate().unwrap()
        >>> totp_gen.verify(code).unwrap()
        True
    """

    def __init__(self, seed: Optional[Union[Seed, str]] = None,
                 digits: Union[int, Digits] = TOTP_DIGITS,
                 time_step: int = TOTP_TIME_STEP,
                 algorithm: AlgorithmLike = HashAlgorithm.SHA1,
                 drift_tolerance: int = TOTP_DRIFT_TOLERANCE,
                 clock: Callable[[], float] = time.time,
                 rng: Optional[RandomSource] = None):
        """
        Initialize TOTP generator.

        Args:
            seed: Shared secret (generated for the algorithm if None)
            digits: Number of digits in OTP
            time_step: Time step in seconds
            algorithm: Hash algorithm
            drift_tolerance: Steps accepted on each side when verifying
            clock: Time source returning Unix seconds
            rng: Randomness source used when generating a seed
        """
        if int(time_step) <= 0:
            raise ValueError(f"Time step must be positive, got {time_step}")
        self._digits = Digits.of(digits)
        self._time_step = int(time_step)
        self._algorithm = algorithm
        self._drift_tolerance = drift_tolerance
        self._clock = clock
        if seed is None:
            seed = generate_seed_for(algorithm, rng)
        self._seed = seed if isinstance(seed, Seed) else Seed(seed)

    @property
    def seed(self) -> Seed:
        """Shared secret."""
        return self._seed

    @property
    def time_step(self) -> int:
        """Time step in seconds."""
        return self._time_step

    @property
    def digits(self) -> int:
        """Number of digits in OTP."""
        return int(self._digits)

    def _timestamp(self, timestamp: Optional[int]) -> int:
        return int(self._clock()) if timestamp is None else int(timestamp)

    def generate(self, timestamp: Optional[int] = None) -> Result:
        """
        Generate TOTP code for current or specified time.

        Args:
            timestamp: Unix timestamp (uses the clock if None)

        Returns:
            Ok(code) or Err(HashFailure)
        """
        return generate_totp(
            self._algorithm,
            self._digits,
            self._seed,
            self._timestamp(timestamp),
            self._time_step,
        )

    def verify(self, code: str, timestamp: Optional[int] = None) -> Result:
        """
        Verify a TOTP code.

        Args:
            code: OTP code to verify
            timestamp: Unix timestamp (uses the clock if None)

        Returns:
            Ok(True/False) or Err(HashFailure)
        """
        return verify_totp(
            self._seed,
            code,
            self._timestamp(timestamp),
            self._digits,
            self._time_step,
            self._algorithm,
            self._drift_tolerance,
        )

    def remaining_seconds(self, timestamp: Optional[int] = None) -> int:
        """Get seconds until next code."""
        return _remaining_seconds(self._timestamp(timestamp), self._time_step)

    def __repr__(self) -> str:
        algorithm = getattr(self._algorithm, 'value', self._algorithm)
        return (f"TOTPGenerator(algorithm='{algorithm}', digits={self.digits}, "
                f"time_step={self._time_step})")
