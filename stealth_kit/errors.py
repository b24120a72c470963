"""
Stealth Address Kit Error Handling

Error codes are part of the boundary wire contract and must never be
renumbered.
"""

from enum import IntEnum
from typing import Optional, Any


class ErrorCode(IntEnum):
    """Boundary error codes."""

    NO_ERROR = 0
    SERIALIZATION_ERROR_NOT_ENOUGH_SPACE = 1
    SERIALIZATION_ERROR_INVALID_DATA = 2
    SERIALIZATION_ERROR_UNEXPECTED_FLAGS = 3
    SERIALIZATION_ERROR_IO_ERROR = 4
    INVALID_KEYS = 5


class StealthError(Exception):
    """Base exception for all stealth address errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: Optional[Any] = None
    ):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(f"[{code.value}] {message}")

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        result = {
            "code": self.code.value,
            "name": self.code.name,
            "message": self.message,
        }
        if self.details is not None:
            result["details"] = self.details
        return result


# ==============================================================================
# Serialization Errors (1-4)
# ==============================================================================

class SerializationError(StealthError):
    """Base class for canonical encode/decode failures."""


class NotEnoughSpaceError(SerializationError):
    def __init__(self, size: int, capacity: int):
        super().__init__(
            ErrorCode.SERIALIZATION_ERROR_NOT_ENOUGH_SPACE,
            f"Encoding does not fit container: {size} > {capacity} bytes",
            {"size": size, "capacity": capacity}
        )


class InvalidDataError(SerializationError):
    def __init__(self, reason: str):
        super().__init__(
            ErrorCode.SERIALIZATION_ERROR_INVALID_DATA,
            f"Invalid encoding: {reason}"
        )


class UnexpectedFlagsError(SerializationError):
    def __init__(self, flags: int):
        super().__init__(
            ErrorCode.SERIALIZATION_ERROR_UNEXPECTED_FLAGS,
            f"Unexpected encoding flags: 0x{flags:02x}",
            {"flags": flags}
        )


class SerializationIOError(SerializationError):
    def __init__(self, expected: int, got: int):
        super().__init__(
            ErrorCode.SERIALIZATION_ERROR_IO_ERROR,
            f"Unexpected end of input: need {expected} bytes, got {got}",
            {"expected": expected, "got": got}
        )


# ==============================================================================
# Key Errors (5)
# ==============================================================================

class InvalidKeysError(StealthError):
    def __init__(self, reason: str = ""):
        msg = "Invalid keys"
        if reason:
            msg += f": {reason}"
        super().__init__(ErrorCode.INVALID_KEYS, msg)


class UnsupportedCurveError(StealthError, LookupError):
    def __init__(self, name: str, available: Optional[list] = None):
        super().__init__(
            ErrorCode.INVALID_KEYS,
            f"Unsupported curve: {name}",
            {"curve": name, "available": available or []}
        )


def error_code_of(exc: BaseException) -> ErrorCode:
    """Map an exception raised below the boundary to its wire error code."""
    if isinstance(exc, StealthError):
        return exc.code
    return ErrorCode.INVALID_KEYS
