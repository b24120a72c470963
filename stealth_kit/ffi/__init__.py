"""
Stealth Address Kit boundary layer.

Per-curve entry points are reachable as module attributes, for example
``stealth_kit.ffi.secp256k1_random_keypair`` and
``stealth_kit.ffi.drop_secp256k1_random_keypair``, for every curve enabled
in the active configuration.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Optional

from stealth_kit.config import StealthConfig, get_config
from stealth_kit.core.protocol import StealthProtocol
from stealth_kit.curves import get_backend
from stealth_kit.errors import UnsupportedCurveError
from stealth_kit.ffi.bindings import OPERATIONS, CurveBindings
from stealth_kit.ffi.types import CurveTypes, creturn, make_types

logger = logging.getLogger(__name__)

_bindings: Dict[str, CurveBindings] = {}
_lock = threading.Lock()


def get_bindings(curve: str) -> CurveBindings:
    """Bindings for a curve, created once per process."""
    backend = get_backend(curve)
    with _lock:
        bindings = _bindings.get(backend.name)
        if bindings is None:
            bindings = CurveBindings(StealthProtocol(backend))
            _bindings[backend.name] = bindings
            logger.debug(f"Created boundary bindings for {backend.name}")
        return bindings


def load_bindings(config: Optional[StealthConfig] = None) -> Dict[str, CurveBindings]:
    """
    Validate a configuration, apply its logging settings and create bindings
    for every enabled curve.

    Raises:
        ValueError: If the configuration is invalid
    """
    config = config or get_config()
    errors = config.validate()
    if errors:
        raise ValueError(f"Invalid configuration: {'; '.join(errors)}")

    config.log.apply()
    loaded = {curve: get_bindings(curve) for curve in config.enabled_curves}
    logger.info(f"Loaded boundary bindings: {', '.join(loaded)}")
    return loaded


def _split_symbol(name: str):
    base = name[len("drop_"):] if name.startswith("drop_") else name
    for op in OPERATIONS:
        suffix = f"_{op}"
        if base.endswith(suffix) and len(base) > len(suffix):
            return base[:-len(suffix)], op
    return None, None


def __getattr__(name: str):
    curve, op = _split_symbol(name)
    if curve is None or curve not in get_config().enabled_curves:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    try:
        bindings = get_bindings(curve)
    except UnsupportedCurveError:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from None
    return bindings.symbols()[name]


__all__ = [
    "CurveBindings",
    "CurveTypes",
    "OPERATIONS",
    "creturn",
    "get_bindings",
    "load_bindings",
    "make_types",
]
