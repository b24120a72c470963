"""
Scalar field elements.

A Scalar is an integer modulo the prime group order of one curve. Values are
always stored normalized, so the view tag is taken from the true integer
value and never from an internal representation.
"""

from __future__ import annotations

from stealth_kit.constants import SCALAR_BYTE_ORDER, VIEW_TAG_MASK
from stealth_kit.errors import (
    InvalidDataError,
    InvalidKeysError,
    NotEnoughSpaceError,
    SerializationIOError,
)


class Scalar:
    """Element of Z_q for the group order q of a curve."""

    __slots__ = ("_v", "_order", "_size")

    def __init__(self, value: int, order: int, size: int) -> None:
        self._order = order
        self._size = size
        self._v = value % order

    # constructors -----------------------------------------------------------
    def _new(self, value: int) -> Scalar:
        return Scalar(value, self._order, self._size)

    @classmethod
    def from_bytes(cls, data: bytes, order: int, size: int) -> Scalar:
        """Canonical little-endian decoding; rejects values >= order."""
        if len(data) < size:
            raise SerializationIOError(size, len(data))
        if len(data) > size:
            raise InvalidDataError(f"scalar must be {size} bytes, got {len(data)}")
        v = int.from_bytes(data, SCALAR_BYTE_ORDER)
        if v >= order:
            raise InvalidDataError("scalar out of range")
        return cls(v, order, size)

    @classmethod
    def from_bytes_mod_order(cls, data: bytes, order: int, size: int) -> Scalar:
        """Hash-output safe: reduce arbitrary length little-endian input."""
        return cls(int.from_bytes(data, SCALAR_BYTE_ORDER), order, size)

    # serialisation ----------------------------------------------------------
    def to_bytes(self) -> bytes:
        try:
            return self._v.to_bytes(self._size, SCALAR_BYTE_ORDER)
        except OverflowError:
            raise NotEnoughSpaceError((self._v.bit_length() + 7) // 8, self._size)

    @property
    def value(self) -> int:
        return self._v

    @property
    def order(self) -> int:
        return self._order

    @property
    def view_tag(self) -> int:
        """Low 64 bits of the normalized integer value."""
        return self._v & VIEW_TAG_MASK

    def is_zero(self) -> bool:
        return self._v == 0

    # arithmetic -------------------------------------------------------------
    def _check(self, o: Scalar) -> None:
        if o._order != self._order:
            raise InvalidKeysError("scalars belong to different fields")

    def __add__(self, o: Scalar) -> Scalar:
        if not isinstance(o, Scalar):
            return NotImplemented
        self._check(o)
        return self._new(self._v + o._v)

    def __sub__(self, o: Scalar) -> Scalar:
        if not isinstance(o, Scalar):
            return NotImplemented
        self._check(o)
        return self._new(self._v - o._v)

    def __neg__(self) -> Scalar:
        return self._new(-self._v)

    # comparison / hashing ---------------------------------------------------
    def __eq__(self, o: object) -> bool:
        if isinstance(o, Scalar):
            return self._order == o._order and self._v == o._v
        return False

    def __hash__(self) -> int:
        return hash((self._order, self._v))

    def __int__(self) -> int:
        return self._v

    def __repr__(self) -> str:
        h = hex(self._v)
        return f"Scalar(0x{h[2:10]}…)" if len(h) > 14 else f"Scalar({h})"
