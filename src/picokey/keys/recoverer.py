"""ECDSA public key recovery from a recoverable signature and its digest."""

from __future__ import annotations

import logging
from typing import Optional

from ..curves import ecdsa
from ..errors import PublicKeyError
from .signature import decode_ecdsa_signature
from .variants import Backend, KeyVariant

logger = logging.getLogger(__name__)


def recover(
    signature: bytes,
    digest: bytes,
    variant: KeyVariant = KeyVariant.SECP256K1_EXTENDED,
) -> Optional[tuple[bytes, KeyVariant]]:
    """
    Recover the signer's extended public key.

    Args:
        signature: 65-byte r || s || v; v in 0..3 or 27..30.
        digest: 32-byte hash that was signed.
        variant: Any variant of the ECDSA curve to recover on.

    Returns:
        (0x04 || x || y, extended variant), or None if nothing can be recovered
        (including for EdDSA variants, which have no recovery).
    """
    family = variant.family
    if family.backend is not Backend.ECDSA:
        logger.debug("recover: not defined for %s keys", variant.value)
        return None
    curve = family.params
    if len(signature) != 2 * curve.byte_size + 1:
        logger.debug("recover: signature is %d bytes, need 65", len(signature))
        return None
    if len(digest) != 32:
        logger.debug("recover: digest is %d bytes, need 32", len(digest))
        return None
    try:
        sig = decode_ecdsa_signature(signature, curve)
        point = ecdsa.recover(
            curve, ecdsa.digest_to_int(curve, digest), sig.r, sig.s, sig.v
        )
    except PublicKeyError as exc:
        logger.debug("recover: malformed signature: %s", exc)
        return None
    except ValueError as exc:
        logger.debug("recover: no %s point: %s", curve.name, exc)
        return None
    extended = variant.extended_form
    return ecdsa.encode_point(curve, point, compressed=False), extended


__all__: tuple[str, ...] = ("recover",)
