"""
Structural and curve-membership validation of raw public key bytes.

ECDSA keys are checked cryptographically: the prefix must match the encoding
and the point must lie on the curve. EdDSA keys (Ed25519, Ed25519-Blake2b,
Curve25519) are only length-checked; an invalid point of the right length is
accepted here and fails later at verification.
"""

from __future__ import annotations

from ..curves import ecdsa
from ..errors import InvalidEncoding, InvalidLength, PublicKeyError
from .variants import Backend, KeyVariant


def check(data: bytes, variant: KeyVariant) -> None:
    """
    Raise if data is not a valid public key of the given variant.

    Args:
        data: Raw key bytes.
        variant: Declared key variant.

    Raises:
        InvalidLength: len(data) differs from the variant's expected length.
        InvalidEncoding: Wrong prefix byte, or the point is not on the curve.
    """
    family = variant.family
    if len(data) != family.length:
        raise InvalidLength(
            f"{variant.value} key must be {family.length} bytes, got {len(data)}"
        )
    if family.backend is Backend.EDDSA:
        return
    curve = family.params
    if family.compressed:
        if data[0] not in (0x02, 0x03):
            raise InvalidEncoding(
                f"compressed {curve.name} key must start with 0x02 or 0x03, got {data[0]:#04x}"
            )
        if ecdsa.decode_point(curve, data) is None:
            raise InvalidEncoding(f"x is not the coordinate of a {curve.name} point")
        return
    if data[0] != 0x04:
        raise InvalidEncoding(
            f"extended {curve.name} key must start with 0x04, got {data[0]:#04x}"
        )
    if ecdsa.decode_point(curve, data) is None:
        raise InvalidEncoding(f"(x, y) is not on {curve.name}")


def validate(data: bytes, variant: KeyVariant) -> bool:
    """True iff data is a valid public key of the given variant."""
    try:
        check(data, variant)
    except PublicKeyError:
        return False
    return True


__all__: tuple[str, ...] = ("check", "validate")
