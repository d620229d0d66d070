"""
Conversion between compressed (0x02/0x03 || x) and extended (0x04 || x || y)
encodings of ECDSA public keys. Both directions are lossless.
"""

from __future__ import annotations

from ..curves import ecdsa
from ..curves.ecdsa import Point
from ..errors import UnsupportedOperation
from .variants import Backend, KeyVariant


def _decode(data: bytes, variant: KeyVariant) -> Point:
    family = variant.family
    if family.backend is not Backend.ECDSA:
        raise UnsupportedOperation(
            f"{variant.value} keys have no compressed/extended forms"
        )
    point = ecdsa.decode_point(family.params, data)
    if point is None or len(data) != family.length:
        raise UnsupportedOperation(
            f"bytes do not encode a {family.curve} point as {variant.value}"
        )
    return point


def decompress(data: bytes, variant: KeyVariant) -> tuple[bytes, KeyVariant]:
    """
    Extended encoding of an ECDSA key.

    Args:
        data: Key bytes in either SEC1 encoding.
        variant: Variant the bytes are tagged with.

    Returns:
        (0x04 || x || y, extended variant of the same curve).

    Raises:
        UnsupportedOperation: EdDSA variant, or data is not a valid point.
    """
    point = _decode(data, variant)
    extended = variant.extended_form
    return ecdsa.encode_point(extended.family.params, point, compressed=False), extended


def compress(data: bytes, variant: KeyVariant) -> tuple[bytes, KeyVariant]:
    """
    Compressed encoding of an ECDSA key: (0x02 if y even else 0x03) || x.

    Raises:
        UnsupportedOperation: EdDSA variant, or data is not a valid point.
    """
    point = _decode(data, variant)
    compressed = variant.compressed_form
    return ecdsa.encode_point(compressed.family.params, point, compressed=True), compressed


__all__: tuple[str, ...] = ("compress", "decompress")
