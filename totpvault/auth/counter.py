"""
Counter Derivation

Turns a Unix timestamp into the RFC 4226 moving factor:
    T = floor(timestamp / time_step)
serialized as 8 bytes, most significant byte first. HOTP and TOTP share
the same encoding, so an event counter goes through counter_from_int.
"""

import struct
import time
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable

COUNTER_BYTES = 8
COUNTER_MASK = 0xFFFFFFFFFFFFFFFF  # wrap like native 64-bit arithmetic


class TimeStep(IntEnum):
    """Common time-step durations in seconds."""
    SECONDS_30 = 30
    SECONDS_60 = 60
    SECONDS_90 = 90


@dataclass(frozen=True)
class TimeStamp:
    """Unix time in whole seconds."""
    value: int

    @classmethod
    def now(cls, clock: Callable[[], float] = time.time) -> 'TimeStamp':
        """Read the current time from the given clock."""
        return cls(int(clock()))


@dataclass(frozen=True)
class Counter:
    """8-byte big-endian moving factor."""
    value: bytes

    def __post_init__(self):
        if not isinstance(self.value, bytes) or len(self.value) != COUNTER_BYTES:
            raise ValueError(f"Counter must be exactly {COUNTER_BYTES} bytes")

    def __int__(self) -> int:
        return struct.unpack('>Q', self.value)[0]


def now(clock: Callable[[], float] = time.time) -> int:
    """
    Current Unix time in seconds.

    The clock is injectable so callers and tests control time.
    """
    return TimeStamp.now(clock).value


def counter_from_int(value: int) -> Counter:
    """
    Encode a step or event count as 8 bytes big-endian.

    Values past 64 bits wrap around.

    Raises:
        ValueError: If value is negative
    """
    if value < 0:
        raise ValueError(f"Counter must be non-negative, got {value}")
    return Counter(struct.pack('>Q', value & COUNTER_MASK))


def derive_counter(timestamp_seconds, time_step_seconds: int = TimeStep.SECONDS_30) -> Counter:
    """
    Derive the TOTP counter for a timestamp.

    Args:
        timestamp_seconds: Unix time (int or TimeStamp), must be >= 0
        time_step_seconds: Step duration in seconds, must be > 0

    Returns:
        Counter with floor(timestamp / time_step) in 8 bytes

    Raises:
        ValueError: On a negative timestamp or non-positive step
    """
    timestamp = int(getattr(timestamp_seconds, 'value', timestamp_seconds))
    step = int(time_step_seconds)
    if timestamp < 0:
        raise ValueError(f"Timestamp must be non-negative, got {timestamp}")
    if step <= 0:
        raise ValueError(f"Time step must be positive, got {step}")
    return counter_from_int(timestamp // step)


def remaining_seconds(timestamp_seconds, time_step_seconds: int = TimeStep.SECONDS_30) -> int:
    """Seconds until the counter moves to the next step."""
    timestamp = int(getattr(timestamp_seconds, 'value', timestamp_seconds))
    step = int(time_step_seconds)
    if step <= 0:
        raise ValueError(f"Time step must be positive, got {step}")
    return step - (timestamp % step)
