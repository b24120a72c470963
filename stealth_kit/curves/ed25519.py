"""
Ed25519 prime-order subgroup via libsodium.

Uses the no-clamp scalar multiplication primitives of ``nacl.bindings`` so
that scalars behave as plain elements of Z_L. libsodium refuses the identity
as an operand, so it is handled here explicitly.
"""

from __future__ import annotations

import secrets

import nacl.bindings
import nacl.exceptions

from stealth_kit.constants import CURVE_ED25519
from stealth_kit.curves.base import CurveBackend
from stealth_kit.errors import InvalidDataError, InvalidKeysError

# Ed25519 group order (L)
CURVE_ORDER = 2**252 + 27742317777372353535851937790883648493

POINT_SIZE = 32
SCALAR_SIZE = 32

# Neutral element (0, 1)
IDENTITY = b"\x01" + bytes(POINT_SIZE - 1)


def _scalar_bytes(k: int) -> bytes:
    return (k % CURVE_ORDER).to_bytes(SCALAR_SIZE, "little")


class Ed25519Backend(CurveBackend):
    """Ed25519 main subgroup, RFC 8032 point encoding."""

    name = CURVE_ED25519
    order = CURVE_ORDER
    point_size = POINT_SIZE

    def __init__(self) -> None:
        self._g = nacl.bindings.crypto_scalarmult_ed25519_base_noclamp(_scalar_bytes(1))

    def generator(self) -> bytes:
        return self._g

    def identity(self) -> bytes:
        return IDENTITY

    def is_identity(self, p: bytes) -> bool:
        return p == IDENTITY

    def add(self, p: bytes, q: bytes) -> bytes:
        if p == IDENTITY:
            return q
        if q == IDENTITY:
            return p
        try:
            return nacl.bindings.crypto_core_ed25519_add(p, q)
        except nacl.exceptions.CryptoError as e:
            raise InvalidKeysError(f"point addition failed: {e}") from e

    def mul(self, p: bytes, k: int) -> bytes:
        k %= CURVE_ORDER
        if p == IDENTITY or k == 0:
            return IDENTITY
        try:
            return nacl.bindings.crypto_scalarmult_ed25519_noclamp(_scalar_bytes(k), p)
        except nacl.exceptions.CryptoError as e:
            raise InvalidKeysError(f"scalar multiplication failed: {e}") from e

    def mul_base(self, k: int) -> bytes:
        k %= CURVE_ORDER
        if k == 0:
            return IDENTITY
        try:
            return nacl.bindings.crypto_scalarmult_ed25519_base_noclamp(_scalar_bytes(k))
        except nacl.exceptions.CryptoError as e:
            raise InvalidKeysError(f"base point multiplication failed: {e}") from e

    def encode(self, p: bytes) -> bytes:
        return p

    def _decode(self, data: bytes) -> bytes:
        if data == IDENTITY:
            return IDENTITY
        # Rejects non-canonical, off-curve, small-order and torsioned points
        if not nacl.bindings.crypto_core_ed25519_is_valid_point(data):
            raise InvalidDataError("not a point of the Ed25519 prime-order subgroup")
        return data

    def random_int(self) -> int:
        """Uniform in [1, L-1]: 64 random bytes reduced mod L."""
        while True:
            wide = secrets.token_bytes(2 * SCALAR_SIZE)
            r = int.from_bytes(nacl.bindings.crypto_core_ed25519_scalar_reduce(wide), "little")
            if r != 0:
                return r
