"""
Boundary container types.

Fixed-layout ``ctypes`` structures, one family per curve:

    <curve>_Fr              { uint8_t data[FR_SIZE]; }
    <curve>_Point           { uint8_t data[POINT_SIZE]; }
    <curve>_KeyPair         { <curve>_Fr private_key; <curve>_Point public_key; }
    <curve>_StealthAddress  { <curve>_Point stealth_address; uint64_t view_tag; }
    CReturn_<T>             { T value; int32_t err_code; }
"""

from __future__ import annotations

import ctypes
from dataclasses import dataclass
from functools import lru_cache
from typing import Type

ErrorCodeType = ctypes.c_int32
ViewTagType = ctypes.c_uint64


@lru_cache(maxsize=None)
def creturn(value_type: Type[ctypes.Structure]) -> Type[ctypes.Structure]:
    """Tagged result container for a value type."""
    return type(
        f"CReturn_{value_type.__name__}",
        (ctypes.Structure,),
        {"_fields_": [("value", value_type), ("err_code", ErrorCodeType)]},
    )


def _byte_container(name: str, size: int) -> Type[ctypes.Structure]:
    return type(name, (ctypes.Structure,), {"_fields_": [("data", ctypes.c_uint8 * size)]})


@dataclass(frozen=True)
class CurveTypes:
    """Container types of one curve."""
    curve: str
    fr_size: int
    point_size: int
    Fr: Type[ctypes.Structure]
    Point: Type[ctypes.Structure]
    KeyPair: Type[ctypes.Structure]
    StealthAddress: Type[ctypes.Structure]

    def fr(self, data: bytes) -> ctypes.Structure:
        """Build an Fr container from exactly fr_size bytes."""
        return self.Fr.from_buffer_copy(data)

    def point(self, data: bytes) -> ctypes.Structure:
        """Build a Point container from exactly point_size bytes."""
        return self.Point.from_buffer_copy(data)


@lru_cache(maxsize=None)
def make_types(curve: str, fr_size: int, point_size: int) -> CurveTypes:
    """Create (once) the container family for a curve."""
    fr_type = _byte_container(f"{curve}_Fr", fr_size)
    point_type = _byte_container(f"{curve}_Point", point_size)
    keypair_type = type(
        f"{curve}_KeyPair",
        (ctypes.Structure,),
        {"_fields_": [("private_key", fr_type), ("public_key", point_type)]},
    )
    stealth_type = type(
        f"{curve}_StealthAddress",
        (ctypes.Structure,),
        {"_fields_": [("stealth_address", point_type), ("view_tag", ViewTagType)]},
    )
    return CurveTypes(
        curve=curve,
        fr_size=fr_size,
        point_size=point_size,
        Fr=fr_type,
        Point=point_type,
        KeyPair=keypair_type,
        StealthAddress=stealth_type,
    )


def container_bytes(container: ctypes.Structure) -> bytes:
    """Raw contents of an Fr or Point container."""
    return bytes(container.data)
