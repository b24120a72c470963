"""
Stealth Address Kit Constants

Single source of truth for hashing, view tag and container parameters.
"""

from typing import Final, Tuple

# ==============================================================================
# HASHING
# ==============================================================================

KECCAK_256_DIGEST_BITS: Final[int] = 256
KECCAK_256_OUTPUT_SIZE: Final[int] = 32         # bytes

# ==============================================================================
# VIEW TAG
# ==============================================================================

VIEW_TAG_BITS: Final[int] = 64
VIEW_TAG_MASK: Final[int] = (1 << VIEW_TAG_BITS) - 1

# ==============================================================================
# ENCODINGS
# ==============================================================================

SEC1_EVEN_PREFIX: Final[int] = 0x02
SEC1_ODD_PREFIX: Final[int] = 0x03
SEC1_COMPRESSED_PREFIXES: Final[Tuple[int, ...]] = (SEC1_EVEN_PREFIX, SEC1_ODD_PREFIX)

SCALAR_BYTE_ORDER: Final[str] = "little"
SCALAR_SIZE: Final[int] = 32

# ==============================================================================
# CURVE NAMES
# ==============================================================================

CURVE_SECP256K1: Final[str] = "secp256k1"
CURVE_SECP256R1: Final[str] = "secp256r1"
CURVE_BN254: Final[str] = "bn254"
CURVE_BLS12_381: Final[str] = "bls12_381"
CURVE_PALLAS: Final[str] = "pallas"
CURVE_VESTA: Final[str] = "vesta"
CURVE_ED25519: Final[str] = "ed25519"

DEFAULT_CURVE: Final[str] = CURVE_SECP256K1

# ==============================================================================
# CONFIGURATION ENVIRONMENT
# ==============================================================================

ENV_DEFAULT_CURVE: Final[str] = "STEALTH_KIT_DEFAULT_CURVE"
ENV_CURVES: Final[str] = "STEALTH_KIT_CURVES"
ENV_LOG_LEVEL: Final[str] = "STEALTH_KIT_LOG_LEVEL"
ENV_LOG_FILE: Final[str] = "STEALTH_KIT_LOG_FILE"
