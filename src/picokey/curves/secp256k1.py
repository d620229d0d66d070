"""
secp256k1 (Bitcoin/Ethereum curve): domain parameters, key derivation,
recoverable ECDSA sign, public key recovery.
"""

from __future__ import annotations

from . import ecdsa
from .ecdsa import CurveParams

SECP256K1 = CurveParams(
    name="secp256k1",
    p=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
    a=0,
    b=7,
    n=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
    gx=0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    gy=0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
)


def privkey_to_pubkey(privkey: bytes, compressed: bool = False) -> bytes:
    """
    Derive the public key from a 32-byte private key.

    Args:
        privkey: 32-byte secp256k1 private key.
        compressed: Return 33 bytes (0x02/0x03 || x) instead of 65 (0x04 || x || y).

    Returns:
        Encoded public key.
    """
    return ecdsa.privkey_to_pubkey(SECP256K1, privkey, compressed)


def sign_recoverable(privkey: bytes, msg_hash: bytes) -> bytes:
    """
    ECDSA sign with recovery id.

    Args:
        privkey: 32-byte private key.
        msg_hash: 32-byte message hash to sign.

    Returns:
        65-byte signature r || s || v with v in {0, 1, 2, 3}.
    """
    return ecdsa.sign_recoverable(SECP256K1, privkey, msg_hash)


def recover_pubkey(msg_hash: bytes, r: int, s: int, recid: int) -> bytes:
    """
    Recover uncompressed public key (65 bytes) from ECDSA signature (msg_hash, r, s, recid).

    Args:
        msg_hash: 32-byte message hash that was signed.
        r, s: Signature components (scalars).
        recid: Recovery id (0-3) indicating which public key.

    Returns:
        65-byte uncompressed public key.
    """
    return ecdsa.recover_pubkey(SECP256K1, msg_hash, r, s, recid)


__all__: tuple[str, ...] = (
    "SECP256K1",
    "privkey_to_pubkey",
    "recover_pubkey",
    "sign_recoverable",
)
