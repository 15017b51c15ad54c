"""
Error types for TotpVault.

Two kinds of runtime failure exist:
- EntropyUnavailable: the randomness source could not supply bytes
  (raised by the seed generator)
- HashFailure: the keyed-hash primitive could not be initialized or run
  (returned as a value inside an Err, never raised by the engine)

Precondition violations (digits out of range, negative timestamps,
non-positive time steps) raise ValueError instead.
"""

from dataclasses import dataclass
from typing import Optional


class TotpVaultError(Exception):
    """Base class for TotpVault errors."""


class EntropyUnavailable(TotpVaultError):
    """The randomness source could not supply the requested bytes."""


class HashFailureError(TotpVaultError):
    """Exception form of a HashFailure, for callers that prefer raising."""

    def __init__(self, failure: 'HashFailure'):
        super().__init__(failure.message)
        self.failure = failure


@dataclass(frozen=True)
class HashFailure:
    """
    Keyed-hash computation failed.

    Failures are deterministic for fixed inputs, so they are reported
    once and never retried.

    Attributes:
        message: Human readable description
        cause: Underlying exception from the primitive, if any
    """
    message: str
    cause: Optional[BaseException] = None

    def raise_for(self) -> None:
        """Raise this failure as a HashFailureError."""
        raise HashFailureError(self) from self.cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message
