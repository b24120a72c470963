"""
Stealth Address Kit
Curve-generic one-time stealth addresses with view tags.
"""

from typing import Optional

from stealth_kit.config import StealthConfig, get_config, set_config, setup_logging
from stealth_kit.core import (
    Announcement,
    KeyPair,
    Point,
    Scalar,
    StealthAddress,
    StealthKeys,
    StealthProtocol,
    scan,
)
from stealth_kit.curves import available_curves, get_backend
from stealth_kit.errors import (
    ErrorCode,
    InvalidKeysError,
    SerializationError,
    StealthError,
    UnsupportedCurveError,
)

__version__ = "0.2.0"


def get_protocol(curve: Optional[str] = None) -> StealthProtocol:
    """Protocol for a curve; the configured default curve when omitted."""
    return StealthProtocol(get_backend(curve or get_config().default_curve))


__all__ = [
    "__version__",
    "get_protocol",
    # Configuration
    "StealthConfig",
    "get_config",
    "set_config",
    "setup_logging",
    # Core
    "Scalar",
    "Point",
    "StealthProtocol",
    "KeyPair",
    "StealthAddress",
    "StealthKeys",
    "Announcement",
    "scan",
    # Curves
    "available_curves",
    "get_backend",
    # Errors
    "ErrorCode",
    "StealthError",
    "SerializationError",
    "InvalidKeysError",
    "UnsupportedCurveError",
]
