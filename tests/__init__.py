# TotpVault Test Suite
"""
Test suite including:
- Unit tests per component (seed, counter, keyed hash, codec)
- RFC 4226 / RFC 6238 known-answer tests
- Security tests (invalid inputs)
- CLI integration tests

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
