"""
Stealth Address Kit Scalar Tests
"""

import pytest

from stealth_kit.core.field import Scalar
from stealth_kit.curves.secp256k1 import ORDER
from stealth_kit.curves.ed25519 import CURVE_ORDER
from stealth_kit.errors import (
    InvalidDataError,
    InvalidKeysError,
    NotEnoughSpaceError,
    SerializationIOError,
)


def scalar(v: int) -> Scalar:
    return Scalar(v, ORDER, 32)


class TestScalarEncoding:
    """Tests for fixed-width little-endian scalar encoding."""

    def test_little_endian(self):
        """Test the first byte is the least significant."""
        s = Scalar.from_bytes(b"\x01" + bytes(31), ORDER, 32)
        assert s.value == 1
        assert scalar(0x0102).to_bytes()[:2] == b"\x02\x01"

    def test_roundtrip(self):
        """Test decode(encode(s)) == s."""
        s = scalar(ORDER - 1)
        assert Scalar.from_bytes(s.to_bytes(), ORDER, 32) == s

    def test_rejects_out_of_range(self):
        """Test values >= order are rejected rather than reduced."""
        with pytest.raises(InvalidDataError):
            Scalar.from_bytes(ORDER.to_bytes(32, "little"), ORDER, 32)

    def test_rejects_all_ff(self):
        """Test an all-0xFF buffer is rejected."""
        with pytest.raises(InvalidDataError):
            Scalar.from_bytes(b"\xff" * 32, ORDER, 32)

    def test_truncated(self):
        """Test a short buffer is an I/O error."""
        with pytest.raises(SerializationIOError) as exc:
            Scalar.from_bytes(bytes(31), ORDER, 32)
        assert exc.value.details == {"expected": 32, "got": 31}

    def test_oversize(self):
        """Test a long buffer is invalid data."""
        with pytest.raises(InvalidDataError):
            Scalar.from_bytes(bytes(33), ORDER, 32)

    def test_mod_order(self):
        """Test hash-output decoding reduces instead of rejecting."""
        s = Scalar.from_bytes_mod_order(b"\xff" * 32, ORDER, 32)
        assert s.value == (2**256 - 1) % ORDER

    def test_not_enough_space(self):
        """Test encoding into a too-small width fails."""
        with pytest.raises(NotEnoughSpaceError):
            Scalar(300, ORDER, 1).to_bytes()


class TestScalarValues:
    """Tests for scalar arithmetic and the view tag."""

    def test_normalized(self):
        """Test values are stored reduced."""
        assert scalar(ORDER + 5).value == 5
        assert scalar(-1).value == ORDER - 1

    def test_view_tag_low_bits(self):
        """Test the view tag is the low 64 bits of the integer value."""
        assert scalar((7 << 64) | 0xABCDEF).view_tag == 0xABCDEF
        assert scalar(ORDER - 1).view_tag == (ORDER - 1) & (2**64 - 1)

    def test_view_tag_independent_of_representation(self):
        """Test equal values give equal tags however they were built."""
        a = scalar(ORDER + 42)
        b = Scalar.from_bytes((42).to_bytes(32, "little"), ORDER, 32)
        assert a.view_tag == b.view_tag == 42

    def test_add_sub_neg(self):
        a, b = scalar(ORDER - 2), scalar(5)
        assert (a + b).value == 3
        assert (b - a).value == 7
        assert (a + -a).is_zero()

    def test_mixed_fields(self):
        """Test arithmetic across fields is refused."""
        with pytest.raises(InvalidKeysError):
            scalar(1) + Scalar(1, CURVE_ORDER, 32)

    def test_equality_and_hash(self):
        assert scalar(9) == scalar(9)
        assert scalar(9) != Scalar(9, CURVE_ORDER, 32)
        assert len({scalar(9), scalar(ORDER + 9)}) == 1
        assert scalar(9) != 9
