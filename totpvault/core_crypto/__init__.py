# Core Cryptography Module
"""
Keyed-hash primitives:
- Supported hash algorithms (SHA-1, SHA-256, SHA-512) - algorithms.py
- HMAC engine returning typed failures - hmac_engine.py
"""

from .algorithms import HashAlgorithm
from .hmac_engine import HmacKey, HmacResult, hash_counter, hmac_key

__all__ = [
    'HashAlgorithm',
    'HmacKey',
    'HmacResult',
    'hash_counter',
    'hmac_key',
]
