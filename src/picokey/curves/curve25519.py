"""
Curve25519 public keys (Montgomery u-coordinate) with Ed25519 signatures.

A Curve25519 key is the birational image u = (1 + y) / (1 - y) of an Ed25519
key. The u-coordinate drops the sign of x, so signers store it in the top bit
of the last signature byte (always zero in a canonical S). Verification maps u
back to y, restores the sign bit from the signature and runs Ed25519.
"""

from __future__ import annotations

from typing import Optional

from .ed25519 import _P, ed25519_public_key, ed25519_sign, ed25519_verify

_MASK_255 = (1 << 255) - 1


def edwards_to_montgomery(public_key: bytes) -> bytes:
    """32-byte Ed25519 public key -> 32-byte Curve25519 u-coordinate."""
    if len(public_key) != 32:
        raise ValueError("Ed25519 public key must be 32 bytes")
    y = int.from_bytes(public_key, "little") & _MASK_255
    if (1 - y) % _P == 0:
        raise ValueError("identity point has no Montgomery form")
    u = (1 + y) * pow(1 - y, _P - 2, _P) % _P
    return u.to_bytes(32, "little")


def montgomery_to_edwards(public_key: bytes, sign: int) -> Optional[bytes]:
    """Curve25519 u-coordinate + x sign bit -> Ed25519 public key; None if unmappable."""
    if len(public_key) != 32:
        return None
    u = (int.from_bytes(public_key, "little") & _MASK_255) % _P
    if (u + 1) % _P == 0:
        return None
    y = (u - 1) * pow(u + 1, _P - 2, _P) % _P
    return (y | ((sign & 1) << 255)).to_bytes(32, "little")


def curve25519_public_key(seed: bytes) -> bytes:
    """Curve25519 public key (32 bytes) from the 32-byte Ed25519 seed."""
    return edwards_to_montgomery(ed25519_public_key(seed))


def curve25519_sign(message: bytes, seed: bytes) -> bytes:
    """
    Ed25519 signature with the Edwards sign bit folded into byte 63.

    Args:
        message: Arbitrary bytes to sign.
        seed: 32-byte secret seed.

    Returns:
        64-byte signature verifiable against curve25519_public_key(seed).
    """
    signature = bytearray(ed25519_sign(message, seed))
    sign_bit = ed25519_public_key(seed)[31] & 0x80
    signature[63] = (signature[63] & 0x7F) | sign_bit
    return bytes(signature)


def curve25519_verify(message: bytes, signature: bytes, public_key: bytes) -> bool:
    if len(signature) != 64:
        return False
    ed_public_key = montgomery_to_edwards(public_key, signature[63] >> 7)
    if ed_public_key is None:
        return False
    stripped = signature[:63] + bytes([signature[63] & 0x7F])
    return ed25519_verify(message, stripped, ed_public_key)


__all__: tuple[str, ...] = (
    "curve25519_public_key",
    "curve25519_sign",
    "curve25519_verify",
    "edwards_to_montgomery",
    "montgomery_to_edwards",
)
