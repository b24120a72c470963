"""
Group elements.

A Point wraps the native element of one curve backend. Two points are equal
when their canonical encodings are equal, so projective/Jacobian
representations never leak into comparisons or hashes.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

from stealth_kit.core.field import Scalar
from stealth_kit.errors import InvalidKeysError

if TYPE_CHECKING:
    from stealth_kit.curves.base import CurveBackend


class Point:
    """Element of the prime-order group of a curve."""

    __slots__ = ("_backend", "_p")

    def __init__(self, backend: CurveBackend, native: Any) -> None:
        self._backend = backend
        self._p = native

    @property
    def backend(self) -> CurveBackend:
        return self._backend

    @property
    def native(self) -> Any:
        return self._p

    def is_identity(self) -> bool:
        return self._backend.is_identity(self._p)

    def to_bytes(self) -> bytes:
        """Canonical compressed encoding."""
        return self._backend.encode(self._p)

    def hex(self) -> str:
        return self.to_bytes().hex()

    # group operations -------------------------------------------------------
    def __add__(self, o: Point) -> Point:
        if not isinstance(o, Point):
            return NotImplemented
        if o._backend.name != self._backend.name:
            raise InvalidKeysError(
                f"cannot add {self._backend.name} and {o._backend.name} points"
            )
        return Point(self._backend, self._backend.add(self._p, o._p))

    def __mul__(self, s: Scalar) -> Point:
        if not isinstance(s, Scalar):
            return NotImplemented
        if s.order != self._backend.order:
            raise InvalidKeysError(f"scalar is not in the {self._backend.name} field")
        return Point(self._backend, self._backend.mul(self._p, s.value))

    __rmul__ = __mul__

    # comparison / hashing ---------------------------------------------------
    def __eq__(self, o: object) -> bool:
        if not isinstance(o, Point):
            return False
        return (
            self._backend.name == o._backend.name
            and self.to_bytes() == o.to_bytes()
        )

    def __hash__(self) -> int:
        return hash((self._backend.name, self.to_bytes()))

    def __repr__(self) -> str:
        return f"Point({self._backend.name}, {self.hex()[:16]}...)"
