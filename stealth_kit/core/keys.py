"""
Stealth Address Key Material

- KeyPair:         private scalar with its public point
- StealthAddress:  one-time address with its view tag
- StealthKeys:     receiver's viewing and spending key pairs
- Announcement:    what a sender broadcasts for one payment
- scan:            receiver-side filtering of announcements
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from stealth_kit.core.field import Scalar
from stealth_kit.core.group import Point
from stealth_kit.core.protocol import StealthProtocol
from stealth_kit.errors import (
    InvalidDataError,
    InvalidKeysError,
    SerializationIOError,
)

logger = logging.getLogger("stealth_kit.keys")


@dataclass(frozen=True)
class KeyPair:
    """
    Private/public key pair.

    INVARIANT: public == generator * private
    """
    private: Scalar
    public: Point

    def __post_init__(self):
        if not isinstance(self.private, Scalar):
            raise InvalidKeysError(f"expected Scalar, got {type(self.private).__name__}")
        if not isinstance(self.public, Point):
            raise InvalidKeysError(f"expected Point, got {type(self.public).__name__}")
        backend = self.public.backend
        if self.private.order != backend.order:
            raise InvalidKeysError(f"private key is not in the {backend.name} field")
        if backend.point(backend.mul_base(self.private.value)) != self.public:
            raise InvalidKeysError("public key does not match private key")

    @classmethod
    def generate(cls, protocol: StealthProtocol) -> KeyPair:
        private, public = protocol.random_keypair()
        return cls(private=private, public=public)

    def __repr__(self) -> str:
        return f"KeyPair(public={self.public!r})"


@dataclass(frozen=True)
class StealthAddress:
    """One-time address and the view tag derived from the same shared secret."""
    address: Point
    view_tag: int


@dataclass(frozen=True)
class StealthKeys:
    """
    Receiver key material.

    Two key pairs:
    - Viewing keys (v, V): used to scan for incoming payments
    - Spending keys (s, S): used to spend received outputs

    Meta-address = V || S
    """
    viewing: KeyPair
    spending: KeyPair

    @classmethod
    def generate(cls, protocol: StealthProtocol) -> StealthKeys:
        """Generate new receiver keys."""
        return cls(
            viewing=KeyPair.generate(protocol),
            spending=KeyPair.generate(protocol),
        )

    def meta_address(self) -> bytes:
        """Published receiver address: viewing public || spending public."""
        return self.viewing.public.to_bytes() + self.spending.public.to_bytes()

    @staticmethod
    def public_from_meta_address(
        protocol: StealthProtocol, data: bytes
    ) -> Tuple[Point, Point]:
        """Parse a meta-address into (viewing public, spending public)."""
        size = protocol.backend.point_size
        if len(data) < 2 * size:
            raise SerializationIOError(2 * size, len(data))
        if len(data) > 2 * size:
            raise InvalidDataError(
                f"meta-address must be {2 * size} bytes, got {len(data)}"
            )
        viewing = protocol.backend.decode_point(data[:size])
        spending = protocol.backend.decode_point(data[size:])
        return viewing, spending


@dataclass(frozen=True)
class Announcement:
    """
    Sender broadcast for one payment.

    Contains:
    - ephemeral_public: E = e*G, lets the receiver recompute the secret
    - stealth_address: P = H(e*V)*G + S
    - view_tag: low bits of H(e*V), the cheap scanning filter
    """
    ephemeral_public: Point
    stealth_address: Point
    view_tag: int

    @classmethod
    def create(
        cls,
        protocol: StealthProtocol,
        viewing_public_key: Point,
        spending_public_key: Point,
    ) -> Announcement:
        """Pay to a receiver with a fresh ephemeral key."""
        ephemeral_private, ephemeral_public = protocol.random_keypair()
        address, view_tag = protocol.generate_stealth_address(
            viewing_public_key, spending_public_key, ephemeral_private
        )
        return cls(
            ephemeral_public=ephemeral_public,
            stealth_address=address,
            view_tag=view_tag,
        )


def scan(
    protocol: StealthProtocol,
    keys: StealthKeys,
    announcements: Iterable[Announcement],
) -> List[Tuple[int, Scalar]]:
    """
    Find the announcements addressed to a receiver.

    The view tag rejects almost all foreign announcements; a tag match is
    confirmed by deriving the stealth address from the recovered key.

    Returns:
        List of (announcement index, stealth private key)
    """
    found = []
    for index, ann in enumerate(announcements):
        private_key = protocol.generate_stealth_private_key(
            ann.ephemeral_public,
            keys.viewing.private,
            keys.spending.private,
            ann.view_tag,
        )
        if private_key is None:
            continue
        if protocol.derive_public_key(private_key) != ann.stealth_address:
            logger.debug(f"View tag collision at announcement {index}")
            continue
        found.append((index, private_key))
    return found
