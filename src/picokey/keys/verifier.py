"""
Signature verification dispatched on the key variant.

Verification is a total predicate: malformed keys, signatures and digests all
yield False, never an exception.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

from ..curves import ecdsa
from ..curves.curve25519 import curve25519_verify
from ..curves.ed25519 import ed25519_blake2b_verify, ed25519_verify
from ..errors import PublicKeyError
from .signature import decode_ecdsa_signature
from .variants import Backend, CurveFamily, KeyVariant

# (message, signature, public_key) -> bool
_EDDSA_VERIFIERS: Mapping[str, Callable[[bytes, bytes, bytes], bool]] = MappingProxyType(
    {
        "ed25519": ed25519_verify,
        "ed25519-blake2b": ed25519_blake2b_verify,
        "curve25519": curve25519_verify,
    }
)

assert all(
    v.family.curve in _EDDSA_VERIFIERS for v in KeyVariant if v.backend is Backend.EDDSA
)


def _verify_ecdsa(
    family: CurveFamily, data: bytes, signature: bytes, digest: bytes
) -> bool:
    curve = family.params
    if len(digest) != 32:
        return False
    point = ecdsa.decode_point(curve, data)
    if point is None:
        return False
    # The recovery byte plays no part in verification.
    size = curve.byte_size
    if len(signature) == 2 * size + 1:
        signature = signature[: 2 * size]
    try:
        sig = decode_ecdsa_signature(signature, curve)
    except PublicKeyError:
        return False
    return ecdsa.verify(curve, point, sig.r, sig.s, ecdsa.digest_to_int(curve, digest))


def verify(data: bytes, variant: KeyVariant, signature: bytes, digest: bytes) -> bool:
    """
    Verify signature over digest with the public key bytes.

    Args:
        data: Public key bytes, tagged with variant.
        variant: Selects ECDSA (secp256k1, nist256p1) or EdDSA verification.
        signature: 64/65-byte ECDSA r || s [|| v], or 64-byte EdDSA signature.
        digest: 32-byte hash for ECDSA; for EdDSA the signed message itself.

    Returns:
        True iff the signature is valid.
    """
    data = bytes(data)
    signature = bytes(signature)
    digest = bytes(digest)
    family = variant.family
    if len(data) != family.length:
        return False
    if family.backend is Backend.ECDSA:
        return _verify_ecdsa(family, data, signature, digest)
    return _EDDSA_VERIFIERS[family.curve](digest, signature, data)


__all__: tuple[str, ...] = ("verify",)
