"""
Short-Weierstrass curves via python-ecdsa.

y^2 = x^3 + a*x + b over F_p, arithmetic in Jacobian coordinates by
``ecdsa.ellipticcurve.PointJacobi``. Points are exchanged in SEC1 compressed
form (prefix 0x02/0x03 followed by the big-endian x coordinate); the identity
is encoded as all-zero bytes.

Curves with a cofactor (BLS12-381 G1) get an explicit subgroup check on
decode.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import ecdsa
from ecdsa import numbertheory
from ecdsa.ellipticcurve import CurveFp, PointJacobi, INFINITY
from ecdsa.util import randrange

from stealth_kit.constants import (
    CURVE_BLS12_381,
    CURVE_BN254,
    CURVE_PALLAS,
    CURVE_SECP256R1,
    CURVE_VESTA,
    SEC1_COMPRESSED_PREFIXES,
    SEC1_EVEN_PREFIX,
)
from stealth_kit.curves.base import CurveBackend
from stealth_kit.errors import InvalidDataError, UnexpectedFlagsError


@dataclass(frozen=True)
class WeierstrassParams:
    """Domain parameters of a short-Weierstrass curve."""
    name: str
    p: int
    a: int
    b: int
    order: int
    gx: int
    gy: int
    cofactor: int = 1


# ==============================================================================
# DOMAIN PARAMETERS
# ==============================================================================

# BN254 (alt_bn128) G1
BN254 = WeierstrassParams(
    name=CURVE_BN254,
    p=21888242871839275222246405745257275088696311157297823662689037894645226208583,
    a=0,
    b=3,
    order=21888242871839275222246405745257275088548364400416034343698204186575808495617,
    gx=1,
    gy=2,
)

# BLS12-381 G1
BLS12_381 = WeierstrassParams(
    name=CURVE_BLS12_381,
    p=0x1A0111EA397FE69A4B1BA7B6434BACD764774B84F38512BF6730D2A0F6B0F6241EABFFFEB153FFFFB9FEFFFFFFFFAAAB,
    a=0,
    b=4,
    order=0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001,
    gx=0x17F1D3A73197D7942695638C4FA9AC0FC3688C4F9774B905A14E3A3F171BAC586C55E83FF97A1AEFFB3AF00ADB22C6BB,
    gy=0x08B3F481E3AAA0F1A09E30ED741D8AE4FCF5E095D5D00AF600DB18CB2C04B3EDD03CC744A2888AE40CAA232946C5E7E1,
    cofactor=0x396C8C005555E1568C00AAAB0000AAAB,
)

_PASTA_P = 0x40000000000000000000000000000000224698FC094CF91B992D30ED00000001
_PASTA_Q = 0x40000000000000000000000000000000224698FC0994A8DD8C46EB2100000001

# Pallas: base field F_p, group order q; generator (-1, 2)
PALLAS = WeierstrassParams(
    name=CURVE_PALLAS, p=_PASTA_P, a=0, b=5, order=_PASTA_Q, gx=_PASTA_P - 1, gy=2,
)

# Vesta: the cycle partner, fields swapped
VESTA = WeierstrassParams(
    name=CURVE_VESTA, p=_PASTA_Q, a=0, b=5, order=_PASTA_P, gx=_PASTA_Q - 1, gy=2,
)


def _is_infinity(p) -> bool:
    return p is INFINITY or p == INFINITY


class WeierstrassBackend(CurveBackend):
    """Prime-order subgroup of a short-Weierstrass curve."""

    def __init__(
        self,
        params: WeierstrassParams,
        curve: Optional[CurveFp] = None,
        generator: Optional[PointJacobi] = None,
    ) -> None:
        self.params = params
        self.name = params.name
        self.order = params.order
        self._curve = curve or CurveFp(params.p, params.a, params.b, params.cofactor)
        self._g = generator or PointJacobi(
            self._curve, params.gx, params.gy, 1, params.order, generator=True
        )
        self._coord_size = (params.p.bit_length() + 7) // 8
        self.point_size = 1 + self._coord_size

    def generator(self) -> Optional[PointJacobi]:
        return self._g

    def identity(self) -> Optional[PointJacobi]:
        return None

    def is_identity(self, p: Optional[PointJacobi]) -> bool:
        return p is None

    def add(self, p: Optional[PointJacobi], q: Optional[PointJacobi]) -> Optional[PointJacobi]:
        if p is None:
            return q
        if q is None:
            return p
        r = p + q
        return None if _is_infinity(r) else r

    def mul(self, p: Optional[PointJacobi], k: int) -> Optional[PointJacobi]:
        k %= self.order
        if p is None or k == 0:
            return None
        r = p * k
        return None if _is_infinity(r) else r

    def encode(self, p: Optional[PointJacobi]) -> bytes:
        if p is None:
            return bytes(self.point_size)
        x, y = p.x(), p.y()
        prefix = SEC1_EVEN_PREFIX | (y & 1)
        return bytes([prefix]) + x.to_bytes(self._coord_size, "big")

    def _decode(self, data: bytes) -> Optional[PointJacobi]:
        if not any(data):
            return None
        prefix = data[0]
        if prefix not in SEC1_COMPRESSED_PREFIXES:
            raise UnexpectedFlagsError(prefix)

        p = self.params.p
        x = int.from_bytes(data[1:], "big")
        if x >= p:
            raise InvalidDataError("x coordinate out of range")

        alpha = (pow(x, 3, p) + self.params.a * x + self.params.b) % p
        try:
            beta = numbertheory.square_root_mod_prime(alpha, p)
        except numbertheory.Error as e:
            raise InvalidDataError(f"x is not on {self.name}") from e
        y = beta if (beta & 1) == (prefix & 1) else p - beta
        if not self._curve.contains_point(x, y):
            raise InvalidDataError(f"point is not on {self.name}")

        point = PointJacobi(self._curve, x, y, 1)
        if self.params.cofactor != 1 and not _is_infinity(point * self.order):
            raise InvalidDataError(f"point is not in the {self.name} prime-order subgroup")
        return point

    def random_int(self) -> int:
        return randrange(self.order)


def secp256r1_backend() -> WeierstrassBackend:
    """NIST P-256 using the curve and generator shipped with python-ecdsa."""
    params = WeierstrassParams(
        name=CURVE_SECP256R1,
        p=ecdsa.NIST256p.curve.p(),
        a=ecdsa.NIST256p.curve.a(),
        b=ecdsa.NIST256p.curve.b(),
        order=ecdsa.NIST256p.order,
        gx=ecdsa.NIST256p.generator.x(),
        gy=ecdsa.NIST256p.generator.y(),
    )
    return WeierstrassBackend(params, ecdsa.NIST256p.curve, ecdsa.NIST256p.generator)
