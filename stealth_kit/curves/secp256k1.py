"""
secp256k1 via libsecp256k1.

Group operations are delegated to ``coincurve``. The identity is carried as
``None`` and encoded as 33 zero bytes, since libsecp256k1 has no public-key
representation for the point at infinity.
"""

from __future__ import annotations

import secrets
from typing import Optional

from coincurve import PrivateKey as _SK, PublicKey as _PK

from stealth_kit.constants import CURVE_SECP256K1, SEC1_COMPRESSED_PREFIXES
from stealth_kit.curves.base import CurveBackend
from stealth_kit.errors import InvalidDataError, UnexpectedFlagsError

# ── secp256k1 constants ─────────────────────────────────────────────────
ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
FIELD_PRIME = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
SECRET_BYTES = 32
COMPRESSED_BYTES = 33

_IDENTITY_ENCODING = bytes(COMPRESSED_BYTES)


class Secp256k1Backend(CurveBackend):
    """secp256k1 group, SEC1 compressed encoding."""

    name = CURVE_SECP256K1
    order = ORDER
    point_size = COMPRESSED_BYTES

    def __init__(self) -> None:
        self._g = _SK((1).to_bytes(SECRET_BYTES, "big")).public_key

    def generator(self) -> Optional[_PK]:
        return self._g

    def identity(self) -> Optional[_PK]:
        return None

    def is_identity(self, p: Optional[_PK]) -> bool:
        return p is None

    def add(self, p: Optional[_PK], q: Optional[_PK]) -> Optional[_PK]:
        if p is None:
            return q
        if q is None:
            return p
        pf = p.format(compressed=True)
        qf = q.format(compressed=True)
        # P + (-P) = O; libsecp256k1 refuses to combine into infinity
        if pf[1:] == qf[1:] and pf[0] != qf[0]:
            return None
        return _PK.combine_keys([p, q])

    def mul(self, p: Optional[_PK], k: int) -> Optional[_PK]:
        k %= ORDER
        if p is None or k == 0:
            return None
        return p.multiply(k.to_bytes(SECRET_BYTES, "big"))

    def mul_base(self, k: int) -> Optional[_PK]:
        k %= ORDER
        if k == 0:
            return None
        return _SK(k.to_bytes(SECRET_BYTES, "big")).public_key

    def encode(self, p: Optional[_PK]) -> bytes:
        if p is None:
            return _IDENTITY_ENCODING
        return p.format(compressed=True)

    def _decode(self, data: bytes) -> Optional[_PK]:
        if data == _IDENTITY_ENCODING:
            return None
        if data[0] not in SEC1_COMPRESSED_PREFIXES:
            raise UnexpectedFlagsError(data[0])
        if int.from_bytes(data[1:], "big") >= FIELD_PRIME:
            raise InvalidDataError("x coordinate out of range")
        try:
            return _PK(data)
        except ValueError as e:
            raise InvalidDataError(f"not a secp256k1 point ({e})") from e

    def random_int(self) -> int:
        """Uniform in [1, q-1] via rejection sampling."""
        while True:
            c = int.from_bytes(secrets.token_bytes(SECRET_BYTES), "big")
            if 0 < c < ORDER:
                return c
