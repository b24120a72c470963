"""
Stealth Address Protocol

Curve-agnostic implementation of one-time stealth addresses with view tags.

Protocol:
1. Receiver publishes viewing public key V = v*G and spending public key S = s*G
2. Sender picks ephemeral e, publishes E = e*G
3. Sender computes shared scalar h = H(e*V) and stealth address P = h*G + S,
   and publishes the view tag = low 64 bits of h
4. Receiver computes h' = H(v*E); if the tag matches, the stealth private
   key is s + h', and (s + h')*G == P

H is Keccak-256 over the canonical compressed encoding of the shared point,
read as a little-endian integer and reduced modulo the group order.
"""

from __future__ import annotations

from typing import Optional, Tuple, TYPE_CHECKING

from stealth_kit.core.field import Scalar
from stealth_kit.core.group import Point
from stealth_kit.core.hash import keccak256
from stealth_kit.errors import InvalidKeysError

if TYPE_CHECKING:
    from stealth_kit.curves.base import CurveBackend


class StealthProtocol:
    """Stealth address operations on one curve."""

    def __init__(self, backend: CurveBackend):
        self.backend = backend

    @property
    def curve(self) -> str:
        return self.backend.name

    def __repr__(self) -> str:
        return f"StealthProtocol({self.backend.name})"

    # ------------------------------------------------------------------
    # Keys
    # ------------------------------------------------------------------

    def derive_public_key(self, private_key: Scalar) -> Point:
        """Public key = generator * private_key."""
        self._check_scalar(private_key)
        return self.backend.point(self.backend.mul_base(private_key.value))

    def generate_random_fr(self) -> Scalar:
        """Uniform scalar from the backend's secure source."""
        return self.backend.random_scalar()

    def random_keypair(self) -> Tuple[Scalar, Point]:
        private_key = self.generate_random_fr()
        return private_key, self.derive_public_key(private_key)

    # ------------------------------------------------------------------
    # Shared secret
    # ------------------------------------------------------------------

    def hash_to_fr(self, data: bytes) -> Scalar:
        """Keccak-256(data) as a little-endian integer mod the group order."""
        return self.backend.scalar_from_hash(keccak256(data))

    def compute_shared_point(self, private_key: Scalar, public_key: Point) -> Point:
        """ECDH: public_key * private_key."""
        self._check_scalar(private_key)
        self._check_point(public_key)
        return public_key * private_key

    def _shared_scalar(self, private_key: Scalar, public_key: Point) -> Scalar:
        shared = self.compute_shared_point(private_key, public_key)
        return self.hash_to_fr(shared.to_bytes())

    # ------------------------------------------------------------------
    # Stealth addresses
    # ------------------------------------------------------------------

    def generate_stealth_address(
        self,
        viewing_public_key: Point,
        spending_public_key: Point,
        ephemeral_private_key: Scalar,
    ) -> Tuple[Point, int]:
        """
        Derive a one-time address for a receiver.

        Args:
            viewing_public_key: Receiver's viewing public key V
            spending_public_key: Receiver's spending public key S
            ephemeral_private_key: Sender's ephemeral secret e

        Returns:
            (stealth address H(e*V)*G + S, view tag)
        """
        self._check_point(spending_public_key)
        shared_scalar = self._shared_scalar(ephemeral_private_key, viewing_public_key)
        tag_point = self.derive_public_key(shared_scalar)
        return tag_point + spending_public_key, shared_scalar.view_tag

    def generate_stealth_private_key(
        self,
        ephemeral_public_key: Point,
        viewing_key: Scalar,
        spending_key: Scalar,
        expected_view_tag: int,
    ) -> Optional[Scalar]:
        """
        Recover the private key of a stealth address.

        Returns None when the view tag does not match; that is the normal
        result for outputs addressed to someone else.
        """
        self._check_scalar(spending_key)
        shared_scalar = self._shared_scalar(viewing_key, ephemeral_public_key)
        if shared_scalar.view_tag != expected_view_tag:
            return None
        return spending_key + shared_scalar

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _check_scalar(self, s: Scalar) -> None:
        if not isinstance(s, Scalar):
            raise InvalidKeysError(f"expected Scalar, got {type(s).__name__}")
        if s.order != self.backend.order:
            raise InvalidKeysError(f"scalar is not in the {self.curve} field")

    def _check_point(self, p: Point) -> None:
        if not isinstance(p, Point):
            raise InvalidKeysError(f"expected Point, got {type(p).__name__}")
        if p.backend.name != self.curve:
            raise InvalidKeysError(
                f"point belongs to {p.backend.name}, not {self.curve}"
            )
