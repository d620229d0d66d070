"""ECDSA signature layout: r || s (64 bytes) or r || s || v (65 bytes)."""

from __future__ import annotations

from typing import NamedTuple, Optional

from ..curves.ecdsa import CurveParams
from ..errors import MalformedSignature


class EcdsaSignature(NamedTuple):
    r: int
    s: int
    v: Optional[int]


def normalize_recovery_id(v: int) -> int:
    """Map Ethereum-style v (27..30) onto the raw recovery id (0..3)."""
    if v >= 27:
        v -= 27
    if not 0 <= v <= 3:
        raise MalformedSignature(f"recovery id must be in 0..3, got {v}")
    return v


def decode_ecdsa_signature(signature: bytes, curve: CurveParams) -> EcdsaSignature:
    """
    Split a raw ECDSA signature into scalars.

    Args:
        signature: r || s, optionally followed by one recovery byte.
        curve: Curve whose order bounds r and s.

    Returns:
        EcdsaSignature with v None for 64-byte input, else the normalized recovery id.

    Raises:
        MalformedSignature: Wrong length, r or s outside [1, n-1], or bad recovery id.
    """
    size = curve.byte_size
    if len(signature) not in (2 * size, 2 * size + 1):
        raise MalformedSignature(
            f"signature must be {2 * size} or {2 * size + 1} bytes, got {len(signature)}"
        )
    r = int.from_bytes(signature[:size], "big")
    s = int.from_bytes(signature[size : 2 * size], "big")
    if not (0 < r < curve.n and 0 < s < curve.n):
        raise MalformedSignature("r and s must be in [1, n-1]")
    v = None
    if len(signature) == 2 * size + 1:
        v = normalize_recovery_id(signature[2 * size])
    return EcdsaSignature(r, s, v)


__all__: tuple[str, ...] = (
    "EcdsaSignature",
    "decode_ecdsa_signature",
    "normalize_recovery_id",
)
