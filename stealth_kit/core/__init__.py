"""
Stealth Address Kit Protocol Core
"""

from stealth_kit.core.field import Scalar
from stealth_kit.core.group import Point
from stealth_kit.core.hash import keccak256
from stealth_kit.core.protocol import StealthProtocol
from stealth_kit.core.keys import (
    KeyPair,
    StealthAddress,
    StealthKeys,
    Announcement,
    scan,
)

__all__ = [
    # Values
    "Scalar",
    "Point",
    # Hashing
    "keccak256",
    # Protocol
    "StealthProtocol",
    # Key material
    "KeyPair",
    "StealthAddress",
    "StealthKeys",
    "Announcement",
    "scan",
]
