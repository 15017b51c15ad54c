"""
Unit tests for the keyed-hash engine.

Tests:
- HMAC output for the RFC 4226 test key
- Output length per algorithm
- Typed failures instead of exceptions
"""

import pytest
from cryptography.exceptions import UnsupportedAlgorithm

from totpvault.auth.counter import counter_from_int
from totpvault.auth.seed import Seed
from totpvault.core_crypto.algorithms import HashAlgorithm
from totpvault.core_crypto.hmac_engine import HmacResult, hash_counter, hmac_key
from totpvault.exceptions import HashFailure, HashFailureError
from totpvault.result import Err, Ok

RFC_SEED = Seed.from_ascii("12345678901234567890")


class TestHashCounter:
    """Successful HMAC computation."""

    def test_rfc4226_intermediate_hmac(self):
        """HMAC-SHA1 of counter 0 should match RFC 4226 Appendix D."""
        result = hash_counter(HashAlgorithm.SHA1, RFC_SEED, counter_from_int(0))
        assert isinstance(result, Ok)
        assert result.value.value.hex() == "cc93cf18508d94934c64b65d8ba7667fb7cde4b0"

    @pytest.mark.parametrize("algorithm,size", [
        (HashAlgorithm.SHA1, 20),
        (HashAlgorithm.SHA256, 32),
        (HashAlgorithm.SHA512, 64),
    ])
    def test_output_length(self, algorithm, size):
        """Output length depends on the algorithm."""
        result = hash_counter(algorithm, RFC_SEED, counter_from_int(1))
        assert len(result.unwrap().value) == size
        assert algorithm.digest_size == size

    def test_accepts_algorithm_names(self):
        """Names are resolved case- and dash-insensitively."""
        by_enum = hash_counter(HashAlgorithm.SHA256, RFC_SEED, counter_from_int(1))
        by_name = hash_counter("sha-256", RFC_SEED, counter_from_int(1))
        assert by_enum == by_name

    def test_accepts_hex_string_and_raw_bytes(self):
        """Seed may be a hex string and message raw bytes."""
        a = hash_counter(HashAlgorithm.SHA1, RFC_SEED, counter_from_int(5))
        b = hash_counter(HashAlgorithm.SHA1, RFC_SEED.value, counter_from_int(5).value)
        assert a == b

    def test_deterministic(self):
        a = hash_counter(HashAlgorithm.SHA512, RFC_SEED, counter_from_int(9))
        b = hash_counter(HashAlgorithm.SHA512, RFC_SEED, counter_from_int(9))
        assert a == b

    def test_result_type(self):
        result = hash_counter(HashAlgorithm.SHA1, RFC_SEED, counter_from_int(0))
        assert isinstance(result.value, HmacResult)


class TestHashFailures:
    """Failures come back as Err(HashFailure), never as exceptions."""

    def test_unknown_algorithm(self):
        """Unrecognized algorithm identifier is a HashFailure."""
        result = hash_counter("MD4", RFC_SEED, counter_from_int(0))
        assert isinstance(result, Err)
        assert isinstance(result.error, HashFailure)
        assert isinstance(result.error.cause, UnsupportedAlgorithm)

    def test_non_string_algorithm(self):
        result = hash_counter(42, RFC_SEED, counter_from_int(0))
        assert result.is_err()

    def test_empty_key(self):
        """Zero-length key is rejected at key initialization."""
        result = hash_counter(HashAlgorithm.SHA1, Seed(""), counter_from_int(0))
        assert result.is_err()
        assert "key" in result.error.message.lower()

    def test_malformed_hex(self):
        """Seed that isn't hex is invalid key material."""
        result = hash_counter(HashAlgorithm.SHA1, "zz-not-hex", counter_from_int(0))
        assert result.is_err()
        assert isinstance(result.error.cause, ValueError)

    def test_odd_length_hex(self):
        result = hash_counter(HashAlgorithm.SHA1, "abc", counter_from_int(0))
        assert result.is_err()

    def test_non_bytes_message(self):
        result = hash_counter(HashAlgorithm.SHA1, RFC_SEED, 12345)
        assert result.is_err()
        assert isinstance(result.error.cause, TypeError)

    def test_unwrap_raises_hash_failure_error(self):
        """Callers who prefer exceptions can unwrap."""
        result = hash_counter("whirlpool", RFC_SEED, counter_from_int(0))
        with pytest.raises(HashFailureError) as exc_info:
            result.unwrap()
        assert exc_info.value.failure is result.error

    def test_failure_message_includes_cause(self):
        result = hash_counter("MD4", RFC_SEED, counter_from_int(0))
        assert "MD4" in str(result.error)


class TestAlgorithms:
    """Tests for HashAlgorithm."""

    @pytest.mark.parametrize("name,expected", [
        ("SHA1", HashAlgorithm.SHA1),
        ("sha-1", HashAlgorithm.SHA1),
        ("Sha256", HashAlgorithm.SHA256),
        ("sha_512", HashAlgorithm.SHA512),
        (HashAlgorithm.SHA512, HashAlgorithm.SHA512),
    ])
    def test_from_name(self, name, expected):
        assert HashAlgorithm.from_name(name) is expected

    def test_from_name_unknown(self):
        with pytest.raises(UnsupportedAlgorithm):
            HashAlgorithm.from_name("md5")

    def test_key_sizes(self):
        assert [a.key_size for a in HashAlgorithm] == [20, 32, 64]


class TestHmacKey:
    """Hex decoding of seeds into key bytes."""

    def test_preserves_leading_zeros(self):
        assert hmac_key("0000ff").value == b"\x00\x00\xff"

    def test_rfc_key(self):
        assert hmac_key(RFC_SEED).value == b"12345678901234567890"

    def test_repr_hides_key(self):
        assert "3132" not in repr(hmac_key(RFC_SEED))
