"""
Curve capability contract.

A backend supplies the scalar field (order, width, secure sampling) and the
group (generator, addition, scalar multiplication, canonical compressed
encoding with validation on decode). Everything else is built on top of it
by the protocol core.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from stealth_kit.constants import SCALAR_SIZE
from stealth_kit.core.field import Scalar
from stealth_kit.core.group import Point
from stealth_kit.errors import InvalidDataError, SerializationIOError


class CurveBackend(ABC):
    """Arithmetic capability for one curve."""

    name: str = ""
    order: int = 0
    scalar_size: int = SCALAR_SIZE
    point_size: int = 0

    # ------------------------------------------------------------------
    # Native group operations
    # ------------------------------------------------------------------

    @abstractmethod
    def generator(self) -> Any:
        """Distinguished generator of the prime-order group."""

    @abstractmethod
    def identity(self) -> Any:
        """Neutral element."""

    @abstractmethod
    def is_identity(self, p: Any) -> bool:
        ...

    @abstractmethod
    def add(self, p: Any, q: Any) -> Any:
        ...

    @abstractmethod
    def mul(self, p: Any, k: int) -> Any:
        """k * p for 0 <= k < order."""

    def mul_base(self, k: int) -> Any:
        return self.mul(self.generator(), k)

    @abstractmethod
    def encode(self, p: Any) -> bytes:
        """Canonical compressed encoding, exactly point_size bytes."""

    @abstractmethod
    def _decode(self, data: bytes) -> Any:
        """Decode exactly point_size bytes, validating the point."""

    @abstractmethod
    def random_int(self) -> int:
        """Uniform integer in [1, order) from a secure source."""

    # ------------------------------------------------------------------
    # Typed helpers
    # ------------------------------------------------------------------

    def decode(self, data: bytes) -> Any:
        if len(data) < self.point_size:
            raise SerializationIOError(self.point_size, len(data))
        if len(data) > self.point_size:
            raise InvalidDataError(
                f"{self.name} point must be {self.point_size} bytes, got {len(data)}"
            )
        return self._decode(bytes(data))

    def scalar(self, value: int) -> Scalar:
        return Scalar(value, self.order, self.scalar_size)

    def random_scalar(self) -> Scalar:
        return self.scalar(self.random_int())

    def decode_scalar(self, data: bytes) -> Scalar:
        return Scalar.from_bytes(bytes(data), self.order, self.scalar_size)

    def scalar_from_hash(self, digest: bytes) -> Scalar:
        return Scalar.from_bytes_mod_order(digest, self.order, self.scalar_size)

    def point(self, native: Any) -> Point:
        return Point(self, native)

    def generator_point(self) -> Point:
        return Point(self, self.generator())

    def identity_point(self) -> Point:
        return Point(self, self.identity())

    def decode_point(self, data: bytes) -> Point:
        return Point(self, self.decode(data))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name})"
