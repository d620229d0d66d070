"""Elliptic-curve backends: secp256k1, NIST P-256 (ECDSA), Ed25519, Ed25519-Blake2b, Curve25519."""

from . import ecdsa
from .curve25519 import curve25519_public_key, curve25519_sign, curve25519_verify
from .ecdsa import CurveParams
from .ed25519 import (
    ed25519_blake2b_public_key,
    ed25519_blake2b_sign,
    ed25519_blake2b_verify,
    ed25519_public_key,
    ed25519_sign,
    ed25519_verify,
)
from .nist256p1 import NIST256P1
from .secp256k1 import (
    SECP256K1,
    privkey_to_pubkey,
    recover_pubkey,
    sign_recoverable,
)

__all__: tuple[str, ...] = (
    "NIST256P1",
    "SECP256K1",
    "CurveParams",
    "curve25519_public_key",
    "curve25519_sign",
    "curve25519_verify",
    "ecdsa",
    "ed25519_blake2b_public_key",
    "ed25519_blake2b_sign",
    "ed25519_blake2b_verify",
    "ed25519_public_key",
    "ed25519_sign",
    "ed25519_verify",
    "privkey_to_pubkey",
    "recover_pubkey",
    "sign_recoverable",
)
