"""
Multi-chain public keys: secp256k1 and NIST P-256 (ECDSA), Ed25519,
Ed25519-Blake2b and Curve25519. Validation, compressed/extended conversion,
signature verification and ECDSA public key recovery. Pure Python.
"""

from .__about__ import __version__
from .errors import (
    InvalidEncoding,
    InvalidLength,
    MalformedSignature,
    PublicKeyError,
    UnsupportedOperation,
)
from .hashes import keccak256
from .keys import (
    Backend,
    CurveFamily,
    KeyVariant,
    PublicKey,
    recover,
    to_compressed,
    to_extended,
    validate,
    verify,
)

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Keys
    "Backend",
    "CurveFamily",
    "KeyVariant",
    "PublicKey",
    "recover",
    "to_compressed",
    "to_extended",
    "validate",
    "verify",
    # Errors
    "InvalidEncoding",
    "InvalidLength",
    "MalformedSignature",
    "PublicKeyError",
    "UnsupportedOperation",
    # Hashes
    "keccak256",
)
