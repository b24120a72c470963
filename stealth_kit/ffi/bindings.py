"""
Foreign-callable entry points for one curve.

Every entry point returns a pointer to a freshly allocated
``CReturn_<T>`` record. The record is owned by the caller until it is handed
back through the matching ``drop_`` function; a record that is never dropped
stays alive. Entry points never raise: failures are reported through
``err_code`` with a zero-filled ``value``.

The one exception to "always a record" is
``generate_stealth_private_key``: a view tag mismatch is the normal result
for outputs addressed to someone else and yields a NULL pointer (``None``).
"""

from __future__ import annotations

import ctypes
import logging
import threading
from typing import Callable, Dict, Optional

from stealth_kit.core.protocol import StealthProtocol
from stealth_kit.errors import ErrorCode, InvalidKeysError, StealthError, error_code_of
from stealth_kit.ffi.codec import ContainerCodec
from stealth_kit.ffi.types import creturn, make_types

logger = logging.getLogger(__name__)

OPERATIONS = (
    "generate_random_fr",
    "derive_public_key",
    "random_keypair",
    "generate_stealth_address",
    "generate_stealth_private_key",
)


def _deref(ptr, argument: str):
    """Contents of a pointer argument; NULL is an InvalidKeys failure."""
    if not ptr:
        raise InvalidKeysError(f"{argument} is NULL")
    return ptr.contents


class CurveBindings:
    """Boundary layer of one curve: five entry points, five drop functions."""

    def __init__(self, protocol: StealthProtocol):
        self.protocol = protocol
        self.curve = protocol.curve
        backend = protocol.backend
        self.types = make_types(self.curve, backend.scalar_size, backend.point_size)
        self.codec = ContainerCodec(backend, self.types)

        self._owned: Dict[int, ctypes.Structure] = {}
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"CurveBindings({self.curve}, owned={self.owned_count()})"

    # ------------------------------------------------------------------
    # Ownership
    # ------------------------------------------------------------------

    def _allocate(self, value: ctypes.Structure, code: ErrorCode = ErrorCode.NO_ERROR):
        record = creturn(type(value))(value, int(code))
        with self._lock:
            self._owned[ctypes.addressof(record)] = record
        return ctypes.pointer(record)

    def _fail(self, operation: str, zero: Callable[[], ctypes.Structure], exc: Exception):
        code = error_code_of(exc)
        if isinstance(exc, StealthError):
            logger.debug(f"{self.curve}_{operation} failed with {code.name}: {exc}")
        else:
            logger.warning(
                f"{self.curve}_{operation}: unexpected {type(exc).__name__} "
                f"reported as {code.name}",
                exc_info=exc,
            )
        return self._allocate(zero(), code)

    def _release(self, operation: str, ptr) -> None:
        if not ptr:
            return
        address = ctypes.addressof(ptr.contents)
        with self._lock:
            record = self._owned.pop(address, None)
        if record is None:
            logger.warning(
                f"drop_{self.curve}_{operation}: 0x{address:x} is not an owned record "
                f"(already released?)"
            )

    def owned_count(self) -> int:
        """Records handed out and not yet dropped."""
        with self._lock:
            return len(self._owned)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def generate_random_fr(self):
        """CReturn<Fr> with a fresh uniform scalar."""
        try:
            value = self.codec.encode_fr(self.protocol.generate_random_fr())
        except Exception as e:
            return self._fail("generate_random_fr", self.codec.zero_fr, e)
        return self._allocate(value)

    def derive_public_key(self, private_key):
        """CReturn<Point> with generator * private_key."""
        try:
            sk = self.codec.decode_fr(_deref(private_key, "private_key"))
            value = self.codec.encode_point(self.protocol.derive_public_key(sk))
        except Exception as e:
            return self._fail("derive_public_key", self.codec.zero_point, e)
        return self._allocate(value)

    def random_keypair(self):
        """CReturn<KeyPair> with a consistent (private, public) pair."""
        try:
            sk, pk = self.protocol.random_keypair()
            value = self.codec.encode_keypair(sk, pk)
        except Exception as e:
            return self._fail("random_keypair", self.codec.zero_keypair, e)
        return self._allocate(value)

    def generate_stealth_address(self, viewing_public_key, spending_public_key,
                                 ephemeral_private_key):
        """CReturn<StealthAddress> for the given receiver keys and ephemeral secret."""
        try:
            viewing = self.codec.decode_point(_deref(viewing_public_key, "viewing_public_key"))
            spending = self.codec.decode_point(_deref(spending_public_key, "spending_public_key"))
            ephemeral = self.codec.decode_fr(_deref(ephemeral_private_key, "ephemeral_private_key"))
            address, view_tag = self.protocol.generate_stealth_address(
                viewing, spending, ephemeral
            )
            value = self.codec.encode_stealth_address(address, view_tag)
        except Exception as e:
            return self._fail("generate_stealth_address", self.codec.zero_stealth_address, e)
        return self._allocate(value)

    def generate_stealth_private_key(self, ephemeral_public_key, viewing_key,
                                     spending_key, view_tag) -> Optional[object]:
        """
        CReturn<Fr> with the stealth private key.

        Args:
            ephemeral_public_key: POINTER(<curve>_Point)
            viewing_key: POINTER(<curve>_Fr)
            spending_key: POINTER(<curve>_Fr)
            view_tag: POINTER(c_uint64)

        Returns:
            Record pointer, or None when the view tag does not match
        """
        try:
            ephemeral = self.codec.decode_point(_deref(ephemeral_public_key, "ephemeral_public_key"))
            viewing = self.codec.decode_fr(_deref(viewing_key, "viewing_key"))
            spending = self.codec.decode_fr(_deref(spending_key, "spending_key"))
            tag = int(_deref(view_tag, "view_tag").value)
            key = self.protocol.generate_stealth_private_key(ephemeral, viewing, spending, tag)
            if key is None:
                return None
            value = self.codec.encode_fr(key)
        except Exception as e:
            return self._fail("generate_stealth_private_key", self.codec.zero_fr, e)
        return self._allocate(value)

    # ------------------------------------------------------------------
    # Release
    # ------------------------------------------------------------------

    def drop_generate_random_fr(self, ptr) -> None:
        self._release("generate_random_fr", ptr)

    def drop_derive_public_key(self, ptr) -> None:
        self._release("derive_public_key", ptr)

    def drop_random_keypair(self, ptr) -> None:
        self._release("random_keypair", ptr)

    def drop_generate_stealth_address(self, ptr) -> None:
        self._release("generate_stealth_address", ptr)

    def drop_generate_stealth_private_key(self, ptr) -> None:
        self._release("generate_stealth_private_key", ptr)

    # ------------------------------------------------------------------
    # Symbol table
    # ------------------------------------------------------------------

    def symbols(self) -> Dict[str, Callable]:
        """Exported names: <curve>_<op> and drop_<curve>_<op>."""
        table = {}
        for op in OPERATIONS:
            table[f"{self.curve}_{op}"] = getattr(self, op)
            table[f"drop_{self.curve}_{op}"] = getattr(self, f"drop_{op}")
        return table
