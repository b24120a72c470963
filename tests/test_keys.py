"""
Stealth Address Key Material Tests
"""

import logging

import pytest

from stealth_kit.core import Announcement, KeyPair, StealthKeys, scan
from stealth_kit.curves import get_backend
from stealth_kit.errors import (
    InvalidDataError,
    InvalidKeysError,
    SerializationIOError,
)


class TestKeyPair:
    """Tests for the KeyPair invariant."""

    def test_generate(self, protocol):
        kp = KeyPair.generate(protocol)
        assert protocol.derive_public_key(kp.private) == kp.public

    def test_mismatch_rejected(self, protocol):
        """Test a public key that does not belong to the private key."""
        sk = protocol.generate_random_fr()
        _, other_pk = protocol.random_keypair()
        with pytest.raises(InvalidKeysError):
            KeyPair(private=sk, public=other_pk)

    def test_foreign_field_rejected(self, protocol, curve):
        other = get_backend("ed25519" if curve != "ed25519" else "secp256k1")
        _, pk = protocol.random_keypair()
        with pytest.raises(InvalidKeysError):
            KeyPair(private=other.scalar(1), public=pk)

    def test_wrong_types_rejected(self, protocol):
        """Test non-Scalar and non-Point members are InvalidKeys."""
        sk, pk = protocol.random_keypair()
        with pytest.raises(InvalidKeysError):
            KeyPair(private=sk.value, public=pk)
        with pytest.raises(InvalidKeysError):
            KeyPair(private=sk, public=pk.to_bytes())

    def test_repr_hides_private(self, protocol):
        kp = KeyPair.generate(protocol)
        assert hex(kp.private.value)[2:12] not in repr(kp)


class TestMetaAddress:
    """Tests for the published V || S meta-address."""

    def test_layout(self, protocol, receiver_keys):
        data = receiver_keys.meta_address()
        size = protocol.backend.point_size
        assert len(data) == 2 * size
        assert data[:size] == receiver_keys.viewing.public.to_bytes()

    def test_roundtrip(self, protocol, receiver_keys):
        viewing, spending = StealthKeys.public_from_meta_address(
            protocol, receiver_keys.meta_address()
        )
        assert viewing == receiver_keys.viewing.public
        assert spending == receiver_keys.spending.public

    def test_truncated(self, protocol, receiver_keys):
        with pytest.raises(SerializationIOError):
            StealthKeys.public_from_meta_address(protocol, receiver_keys.meta_address()[:-1])

    def test_oversize(self, protocol, receiver_keys):
        with pytest.raises(InvalidDataError):
            StealthKeys.public_from_meta_address(protocol, receiver_keys.meta_address() + b"\x00")


class TestScan:
    """Tests for receiver-side announcement scanning."""

    def test_finds_own_payment(self, protocol, receiver_keys):
        ann = Announcement.create(
            protocol, receiver_keys.viewing.public, receiver_keys.spending.public
        )
        found = scan(protocol, receiver_keys, [ann])
        assert len(found) == 1
        index, key = found[0]
        assert index == 0
        assert protocol.derive_public_key(key) == ann.stealth_address

    def test_mixed_announcements(self, secp256k1):
        """Test only the receiver's announcements are returned, by index."""
        mine = StealthKeys.generate(secp256k1)
        theirs = StealthKeys.generate(secp256k1)

        def pay(keys):
            return Announcement.create(secp256k1, keys.viewing.public, keys.spending.public)

        announcements = [pay(theirs), pay(mine), pay(theirs), pay(mine)]
        found = scan(secp256k1, mine, announcements)
        assert [index for index, _ in found] == [1, 3]

    def test_nothing_for_others(self, secp256k1):
        mine = StealthKeys.generate(secp256k1)
        theirs = StealthKeys.generate(secp256k1)
        ann = Announcement.create(secp256k1, theirs.viewing.public, theirs.spending.public)
        assert scan(secp256k1, mine, [ann]) == []

    def test_tag_collision_skipped(self, secp256k1, caplog):
        """Test a matching tag with a foreign address is skipped and logged."""
        keys = StealthKeys.generate(secp256k1)
        ann = Announcement.create(secp256k1, keys.viewing.public, keys.spending.public)
        forged = Announcement(
            ephemeral_public=ann.ephemeral_public,
            stealth_address=secp256k1.backend.generator_point(),
            view_tag=ann.view_tag,
        )
        with caplog.at_level(logging.DEBUG, logger="stealth_kit.keys"):
            assert scan(secp256k1, keys, [forged]) == []
        assert "collision" in caplog.text
