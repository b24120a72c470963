"""
Stealth Address Kit Hash Functions

Keccak-256 (the pre-standard SHA-3 padding) as used by Ethereum.
"""

from __future__ import annotations

from typing import Union

from Crypto.Hash import keccak

from stealth_kit.constants import KECCAK_256_DIGEST_BITS


def keccak256(data: Union[bytes, bytearray, memoryview]) -> bytes:
    """
    Keccak-256 hash function.

    Args:
        data: Input data to hash

    Returns:
        bytes: 32-byte digest
    """
    hasher = keccak.new(digest_bits=KECCAK_256_DIGEST_BITS)
    hasher.update(bytes(data))
    return hasher.digest()
