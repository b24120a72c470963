"""
Stealth Address Protocol Tests
"""

import pytest

from stealth_kit import StealthConfig, get_protocol, set_config
from stealth_kit.core import StealthProtocol, keccak256
from stealth_kit.curves import get_backend
from stealth_kit.errors import InvalidKeysError

pytestmark = pytest.mark.timeout(120)


class TestKeccak:
    """Tests for the Keccak-256 hash."""

    def test_empty_vector(self):
        """Test original Keccak padding, not SHA3-256."""
        assert keccak256(b"").hex() == (
            "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
        )

    def test_digest_size(self):
        assert len(keccak256(b"stealth")) == 32


class TestKeys:
    """Tests for key derivation."""

    def test_keypair_consistency(self, protocol):
        """Test derive_public_key(sk) == pk for random key pairs."""
        for _ in range(3):
            sk, pk = protocol.random_keypair()
            assert protocol.derive_public_key(sk) == pk

    def test_derive_one_is_generator(self, protocol, backend):
        assert protocol.derive_public_key(backend.scalar(1)) == backend.generator_point()

    def test_random_fr_distinct(self, protocol):
        assert protocol.generate_random_fr() != protocol.generate_random_fr()

    def test_foreign_scalar_rejected(self, protocol, curve):
        """Test scalars of another curve are refused."""
        other = "ed25519" if curve != "ed25519" else "secp256k1"
        with pytest.raises(InvalidKeysError):
            protocol.derive_public_key(get_backend(other).scalar(1))

    def test_wrong_type_rejected(self, protocol):
        with pytest.raises(InvalidKeysError):
            protocol.derive_public_key(1)


class TestSharedSecret:
    """Tests for ECDH and hashing to the scalar field."""

    def test_ecdh_symmetry(self, protocol):
        """Test a*(b*G) == b*(a*G)."""
        a, a_pub = protocol.random_keypair()
        b, b_pub = protocol.random_keypair()
        assert protocol.compute_shared_point(a, b_pub) == protocol.compute_shared_point(b, a_pub)

    def test_hash_determinism(self, protocol):
        """Test equal inputs hash equal and different inputs differ."""
        h1 = protocol.hash_to_fr(b"input_1")
        assert h1 == protocol.hash_to_fr(b"input_1")
        assert h1 != protocol.hash_to_fr(b"input_2")

    def test_hash_spread(self, protocol):
        """Test distinct inputs give distinct scalars and view tags."""
        scalars = [protocol.hash_to_fr(b"input_%d" % i) for i in range(64)]
        assert len(set(scalars)) == 64
        assert len({s.view_tag for s in scalars}) == 64

    def test_hash_reduction(self, protocol, backend):
        """Test the digest is read little-endian and reduced mod the order."""
        expected = int.from_bytes(keccak256(b"input_1"), "little") % backend.order
        assert protocol.hash_to_fr(b"input_1").value == expected

    def test_foreign_point_rejected(self, protocol, curve):
        other = get_backend("ed25519" if curve != "ed25519" else "secp256k1")
        with pytest.raises(InvalidKeysError):
            protocol.compute_shared_point(protocol.generate_random_fr(), other.generator_point())


class TestStealthAddress:
    """End-to-end stealth address tests on every curve."""

    def test_recovery(self, protocol):
        """Test the recovered private key controls the stealth address."""
        s, S = protocol.random_keypair()
        v, V = protocol.random_keypair()
        e, E = protocol.random_keypair()

        address, tag = protocol.generate_stealth_address(V, S, e)
        key = protocol.generate_stealth_private_key(E, v, s, tag)

        assert key is not None
        assert protocol.derive_public_key(key) == address

    def test_view_tag_range(self, protocol):
        _, S = protocol.random_keypair()
        _, V = protocol.random_keypair()
        _, tag = protocol.generate_stealth_address(V, S, protocol.generate_random_fr())
        assert 0 <= tag < 2**64

    def test_tag_mismatch(self, protocol):
        """Test a wrong view tag yields None, not an error."""
        s, S = protocol.random_keypair()
        v, V = protocol.random_keypair()
        e, E = protocol.random_keypair()
        _, tag = protocol.generate_stealth_address(V, S, e)
        assert protocol.generate_stealth_private_key(E, v, s, tag ^ 1) is None

    def test_other_receiver(self, protocol):
        """Test another viewing key does not match the view tag."""
        s, S = protocol.random_keypair()
        _, V = protocol.random_keypair()
        other_v, _ = protocol.random_keypair()
        e, E = protocol.random_keypair()
        _, tag = protocol.generate_stealth_address(V, S, e)
        assert protocol.generate_stealth_private_key(E, other_v, s, tag) is None

    def test_other_ephemeral_key(self, protocol):
        """Test an ephemeral key from another payment does not match the view tag."""
        s, S = protocol.random_keypair()
        v, V = protocol.random_keypair()
        e, _ = protocol.random_keypair()
        _, other_E = protocol.random_keypair()
        _, tag = protocol.generate_stealth_address(V, S, e)
        assert protocol.generate_stealth_private_key(other_E, v, s, tag) is None

    def test_addresses_unlinkable(self, protocol):
        """Test two payments to one receiver use different addresses."""
        _, S = protocol.random_keypair()
        _, V = protocol.random_keypair()
        a1, _ = protocol.generate_stealth_address(V, S, protocol.generate_random_fr())
        a2, _ = protocol.generate_stealth_address(V, S, protocol.generate_random_fr())
        assert a1 != a2
        assert a1 != S


class TestSecp256k1Scenario:
    """Fixed end-to-end scenario on secp256k1."""

    def test_scenario(self, secp256k1):
        spending_key, spending_public = secp256k1.random_keypair()
        viewing_key, viewing_public = secp256k1.random_keypair()
        ephemeral_key, ephemeral_public = secp256k1.random_keypair()

        address, tag = secp256k1.generate_stealth_address(
            viewing_public, spending_public, ephemeral_key
        )

        key = secp256k1.generate_stealth_private_key(
            ephemeral_public, viewing_key, spending_key, tag
        )
        assert key is not None
        assert secp256k1.derive_public_key(key) == address

        assert secp256k1.generate_stealth_private_key(
            ephemeral_public, viewing_key, spending_key, tag ^ 1
        ) is None


class TestGetProtocol:
    """Tests for protocol lookup by curve name."""

    def test_named_curve(self):
        protocol = get_protocol("BN254")
        assert isinstance(protocol, StealthProtocol)
        assert protocol.curve == "bn254"

    def test_default_curve(self, restore_config):
        """Test the configured default curve is used when none is named."""
        set_config(StealthConfig(default_curve="pallas"))
        assert get_protocol().curve == "pallas"
