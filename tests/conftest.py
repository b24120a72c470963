"""
Stealth Address Kit Test Fixtures
"""

import logging

import pytest

from stealth_kit.config import get_config, set_config
from stealth_kit.core import StealthKeys, StealthProtocol
from stealth_kit.curves import available_curves, get_backend
from stealth_kit.ffi import get_bindings

ALL_CURVES = available_curves()

# Curves that use SEC1 compressed points
SEC1_CURVES = [c for c in ALL_CURVES if c != "ed25519"]


@pytest.fixture(params=ALL_CURVES)
def curve(request) -> str:
    """Every registered curve."""
    return request.param


@pytest.fixture
def backend(curve):
    return get_backend(curve)


@pytest.fixture
def protocol(backend) -> StealthProtocol:
    return StealthProtocol(backend)


@pytest.fixture
def secp256k1() -> StealthProtocol:
    """Protocol on secp256k1 for curve-specific tests."""
    return StealthProtocol(get_backend("secp256k1"))


@pytest.fixture
def receiver_keys(protocol) -> StealthKeys:
    """Fresh receiver viewing/spending keys."""
    return StealthKeys.generate(protocol)


@pytest.fixture
def bindings(curve):
    return get_bindings(curve)


@pytest.fixture
def restore_config():
    """Restore the active configuration after a test changes it."""
    saved = get_config()
    yield
    set_config(saved)


@pytest.fixture
def clean_logger():
    """Remove handlers added to the package logger during a test."""
    root = logging.getLogger("stealth_kit")
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
