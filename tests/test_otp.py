"""
Unit tests for the OTP codec (dynamic truncation and formatting).
"""

import re

import pytest

from totpvault.auth.otp import Digits, format_code, truncate, truncate_and_format
from totpvault.core_crypto.hmac_engine import HmacResult

# RFC 4226 section 5.4 example HMAC-SHA-1 value
RFC_EXAMPLE = bytes.fromhex("1f8698690e02ca16618550ef7f19da8e945b555a")


def digest_with_window(window: bytes, offset: int, size: int = 20) -> bytes:
    """Build a digest whose truncation window sits at `offset`."""
    data = bytearray(size)
    data[offset:offset + 4] = window
    data[-1] = (data[-1] & 0xF0) | offset
    return bytes(data)


class TestTruncate:
    """RFC 4226 dynamic truncation."""

    def test_rfc_example(self):
        """Offset 10 selects 0x50ef7f19."""
        assert truncate(RFC_EXAMPLE) == 0x50EF7F19
        assert truncate_and_format(RFC_EXAMPLE, 6) == "872921"

    def test_top_bit_masked(self):
        """The sign bit of the first byte is always cleared."""
        digest = digest_with_window(b"\xff\xff\xff\xff", 0)
        assert truncate(digest) == 0x7FFFFFFF

    def test_max_offset_sha1(self):
        """Offset 15 reads bytes 15-18 of a 20-byte digest."""
        digest = digest_with_window(b"\x01\x02\x03\x04", 15)
        assert truncate(digest) == 0x01020304

    @pytest.mark.parametrize("size", [20, 32, 64])
    def test_same_rule_for_all_sizes(self, size):
        digest = digest_with_window(b"\x00\x00\x30\x39", 3, size)
        assert truncate(digest) == 12345

    def test_accepts_hmac_result(self):
        assert truncate(HmacResult(RFC_EXAMPLE)) == truncate(RFC_EXAMPLE)

    def test_short_output_rejected(self):
        """Output shorter than offset + 4 violates the contract."""
        with pytest.raises(ValueError):
            truncate(bytes([0, 0, 0, 0x0F]))

    def test_empty_output_rejected(self):
        with pytest.raises(ValueError):
            truncate(b"")


class TestFormat:
    """Decimal formatting."""

    def test_zero_padding(self):
        """Small values are left-padded with zeros."""
        digest = digest_with_window(b"\x00\x00\x00\x07", 0)
        assert truncate_and_format(digest, 6) == "000007"
        assert truncate_and_format(digest, 8) == "00000007"

    def test_modulus(self):
        assert format_code(0x7FFFFFFF, 8) == "47483647"
        assert format_code(0x7FFFFFFF, 1) == "7"

    @pytest.mark.parametrize("digits", range(1, 9))
    def test_format_and_range(self, digits):
        """Code is exactly `digits` decimal characters below 10**digits."""
        code = truncate_and_format(RFC_EXAMPLE, digits)
        assert re.fullmatch(r'[0-9]{%d}' % digits, code)
        assert 0 <= int(code) < 10 ** digits

    def test_shorter_codes_are_suffixes(self):
        eight = truncate_and_format(RFC_EXAMPLE, 8)
        assert truncate_and_format(RFC_EXAMPLE, 6) == eight[-6:]


class TestDigits:
    """Digit-count validation."""

    def test_power(self):
        assert Digits.SIX.power == 1_000_000
        assert Digits.EIGHT.power == 100_000_000
        assert Digits.ONE.power == 10

    def test_of_valid(self):
        assert Digits.of(6) is Digits.SIX
        assert Digits.of(Digits.EIGHT) is Digits.EIGHT

    @pytest.mark.parametrize("digits", [0, 9, 10, -6])
    def test_of_invalid(self, digits):
        with pytest.raises(ValueError):
            Digits.of(digits)

    def test_format_rejects_bad_digits(self):
        with pytest.raises(ValueError):
            truncate_and_format(RFC_EXAMPLE, 9)
