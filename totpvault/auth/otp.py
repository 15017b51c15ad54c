"""
OTP Codec

RFC 4226 dynamic truncation and decimal formatting. The same steps apply
to SHA-1, SHA-256 and SHA-512 outputs:

    offset = h[-1] & 0x0F
    binary = (h[offset] & 0x7F) << 24 | h[offset+1] << 16 | h[offset+2] << 8 | h[offset+3]
    code   = binary mod 10^digits, zero-padded to `digits` characters

The top bit of the first byte is masked off so the value is always a
non-negative 31-bit integer.
"""

from enum import IntEnum
from typing import Union


class Digits(IntEnum):
    """Supported code lengths."""
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8

    @property
    def power(self) -> int:
        """Modulus applied to the truncated value (10 ** digits)."""
        return 10 ** int(self)

    @classmethod
    def of(cls, digits: Union[int, 'Digits']) -> 'Digits':
        """
        Validate a digit count.

        Raises:
            ValueError: If digits is outside 1..8
        """
        try:
            return cls(digits)
        except ValueError:
            raise ValueError(f"digits must be between 1 and 8, got {digits!r}") from None


def truncate(hash_output: bytes) -> int:
    """
    Dynamic truncation (RFC 4226 section 5.3).

    Args:
        hash_output: HMAC output, 20/32/64 bytes

    Returns:
        31-bit unsigned integer

    Raises:
        ValueError: If the output is too short for the selected window
    """
    data = bytes(getattr(hash_output, 'value', hash_output))
    if not data:
        raise ValueError("Hash output is empty")

    offset = data[-1] & 0x0F
    if offset + 4 > len(data):
        raise ValueError(f"Hash output of {len(data)} bytes is too short for offset {offset}")

    return (
        ((data[offset] & 0x7F) << 24)
        | ((data[offset + 1] & 0xFF) << 16)
        | ((data[offset + 2] & 0xFF) << 8)
        | (data[offset + 3] & 0xFF)
    )


def format_code(binary: int, digits: Union[int, Digits]) -> str:
    """Reduce a truncated value to `digits` decimal characters, zero-padded."""
    size = Digits.of(digits)
    return str(binary % size.power).zfill(int(size))


def truncate_and_format(hash_output: bytes, digits: Union[int, Digits]) -> str:
    """
    Turn an HMAC output into a decimal OTP.

    Args:
        hash_output: HmacResult or raw bytes
        digits: Code length, 1-8

    Returns:
        Code string of exactly `digits` characters
    """
    size = Digits.of(digits)
    return format_code(truncate(hash_output), size)
