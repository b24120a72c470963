"""
Conversions between boundary containers and native protocol values.

Encoding fails with NotEnoughSpaceError when a backend encoding does not fit
its container; decoding validates through the backend and raises the
matching SerializationError subclass.
"""

from __future__ import annotations

import ctypes
from typing import Tuple

from stealth_kit.core.field import Scalar
from stealth_kit.core.group import Point
from stealth_kit.curves.base import CurveBackend
from stealth_kit.errors import NotEnoughSpaceError
from stealth_kit.ffi.types import CurveTypes, container_bytes


def _fit(data: bytes, capacity: int) -> bytes:
    if len(data) > capacity:
        raise NotEnoughSpaceError(len(data), capacity)
    return data.ljust(capacity, b"\x00")


class ContainerCodec:
    """Encode/decode for the containers of one curve."""

    def __init__(self, backend: CurveBackend, types: CurveTypes):
        self.backend = backend
        self.types = types

    # Scalars
    def encode_fr(self, value: Scalar) -> ctypes.Structure:
        return self.types.fr(_fit(value.to_bytes(), self.types.fr_size))

    def decode_fr(self, container: ctypes.Structure) -> Scalar:
        return self.backend.decode_scalar(container_bytes(container))

    # Points
    def encode_point(self, value: Point) -> ctypes.Structure:
        return self.types.point(_fit(value.to_bytes(), self.types.point_size))

    def decode_point(self, container: ctypes.Structure) -> Point:
        return self.backend.decode_point(container_bytes(container))

    # Composites
    def encode_keypair(self, private_key: Scalar, public_key: Point) -> ctypes.Structure:
        return self.types.KeyPair(self.encode_fr(private_key), self.encode_point(public_key))

    def encode_stealth_address(self, address: Point, view_tag: int) -> ctypes.Structure:
        return self.types.StealthAddress(self.encode_point(address), view_tag)

    def decode_stealth_address(self, container: ctypes.Structure) -> Tuple[Point, int]:
        return self.decode_point(container.stealth_address), int(container.view_tag)

    # Zero sentinels
    def zero_fr(self) -> ctypes.Structure:
        return self.encode_fr(self.backend.scalar(0))

    def zero_point(self) -> ctypes.Structure:
        return self.encode_point(self.backend.identity_point())

    def zero_keypair(self) -> ctypes.Structure:
        return self.types.KeyPair(self.zero_fr(), self.zero_point())

    def zero_stealth_address(self) -> ctypes.Structure:
        return self.types.StealthAddress(self.zero_point(), 0)
