"""
Stealth Address Kit Curve Backends

Registry of the curves the protocol can run on. Backends are built lazily
and cached; each one is stateless after construction.
"""

from __future__ import annotations

import threading
from typing import Callable, Dict, List

from stealth_kit.constants import (
    CURVE_BLS12_381,
    CURVE_BN254,
    CURVE_ED25519,
    CURVE_PALLAS,
    CURVE_SECP256K1,
    CURVE_SECP256R1,
    CURVE_VESTA,
)
from stealth_kit.curves.base import CurveBackend
from stealth_kit.errors import UnsupportedCurveError


def _secp256k1() -> CurveBackend:
    from stealth_kit.curves.secp256k1 import Secp256k1Backend
    return Secp256k1Backend()


def _secp256r1() -> CurveBackend:
    from stealth_kit.curves.weierstrass import secp256r1_backend
    return secp256r1_backend()


def _weierstrass(params_name: str) -> Callable[[], CurveBackend]:
    def factory() -> CurveBackend:
        from stealth_kit.curves import weierstrass
        return weierstrass.WeierstrassBackend(getattr(weierstrass, params_name))
    return factory


def _ed25519() -> CurveBackend:
    from stealth_kit.curves.ed25519 import Ed25519Backend
    return Ed25519Backend()


_FACTORIES: Dict[str, Callable[[], CurveBackend]] = {
    CURVE_SECP256K1: _secp256k1,
    CURVE_SECP256R1: _secp256r1,
    CURVE_BN254: _weierstrass("BN254"),
    CURVE_BLS12_381: _weierstrass("BLS12_381"),
    CURVE_PALLAS: _weierstrass("PALLAS"),
    CURVE_VESTA: _weierstrass("VESTA"),
    CURVE_ED25519: _ed25519,
}

_backends: Dict[str, CurveBackend] = {}
_lock = threading.Lock()


def available_curves() -> List[str]:
    """Names of all registered curves."""
    return list(_FACTORIES)


def get_backend(name: str) -> CurveBackend:
    """Get the backend for a curve name (case-insensitive)."""
    key = name.lower()
    if key not in _FACTORIES:
        raise UnsupportedCurveError(name, available_curves())
    with _lock:
        backend = _backends.get(key)
        if backend is None:
            backend = _FACTORIES[key]()
            _backends[key] = backend
    return backend


__all__ = [
    "CurveBackend",
    "available_curves",
    "get_backend",
]
