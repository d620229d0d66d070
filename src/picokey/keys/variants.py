"""
Key variants and their curve family descriptors.

Every variant statically determines its byte length, whether it is the
compressed SEC1 form, and which signature backend handles it.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from ..curves.ecdsa import CurveParams
from ..curves.nist256p1 import NIST256P1
from ..curves.secp256k1 import SECP256K1


class Backend(enum.Enum):
    ECDSA = "ecdsa"
    EDDSA = "eddsa"


@dataclass(frozen=True)
class CurveFamily:
    """Immutable description of one key variant."""

    curve: str
    length: int
    compressed: bool
    backend: Backend
    params: Optional[CurveParams] = None


class KeyVariant(enum.Enum):
    SECP256K1_COMPRESSED = "secp256k1"
    SECP256K1_EXTENDED = "secp256k1Extended"
    NIST256P1_COMPRESSED = "nist256p1"
    NIST256P1_EXTENDED = "nist256p1Extended"
    ED25519 = "ed25519"
    ED25519_BLAKE2B = "ed25519Blake2b"
    CURVE25519 = "curve25519"

    @property
    def family(self) -> CurveFamily:
        return FAMILIES[self]

    @property
    def expected_length(self) -> int:
        return FAMILIES[self].length

    @property
    def is_compressed(self) -> bool:
        return FAMILIES[self].compressed

    @property
    def backend(self) -> Backend:
        return FAMILIES[self].backend

    @property
    def compressed_form(self) -> Optional[KeyVariant]:
        """Compressed variant of the same ECDSA curve; None for EdDSA."""
        return _COMPRESSED_FORM.get(self)

    @property
    def extended_form(self) -> Optional[KeyVariant]:
        """Extended variant of the same ECDSA curve; None for EdDSA."""
        return _EXTENDED_FORM.get(self)


FAMILIES: Mapping[KeyVariant, CurveFamily] = MappingProxyType(
    {
        KeyVariant.SECP256K1_COMPRESSED: CurveFamily(
            "secp256k1", 33, True, Backend.ECDSA, SECP256K1
        ),
        KeyVariant.SECP256K1_EXTENDED: CurveFamily(
            "secp256k1", 65, False, Backend.ECDSA, SECP256K1
        ),
        KeyVariant.NIST256P1_COMPRESSED: CurveFamily(
            "nist256p1", 33, True, Backend.ECDSA, NIST256P1
        ),
        KeyVariant.NIST256P1_EXTENDED: CurveFamily(
            "nist256p1", 65, False, Backend.ECDSA, NIST256P1
        ),
        KeyVariant.ED25519: CurveFamily("ed25519", 32, False, Backend.EDDSA),
        KeyVariant.ED25519_BLAKE2B: CurveFamily(
            "ed25519-blake2b", 32, False, Backend.EDDSA
        ),
        KeyVariant.CURVE25519: CurveFamily("curve25519", 32, False, Backend.EDDSA),
    }
)

assert set(FAMILIES) == set(KeyVariant)

_PAIRS = (
    (KeyVariant.SECP256K1_COMPRESSED, KeyVariant.SECP256K1_EXTENDED),
    (KeyVariant.NIST256P1_COMPRESSED, KeyVariant.NIST256P1_EXTENDED),
)
_COMPRESSED_FORM: Mapping[KeyVariant, KeyVariant] = MappingProxyType(
    {v: compressed for compressed, extended in _PAIRS for v in (compressed, extended)}
)
_EXTENDED_FORM: Mapping[KeyVariant, KeyVariant] = MappingProxyType(
    {v: extended for compressed, extended in _PAIRS for v in (compressed, extended)}
)


__all__: tuple[str, ...] = (
    "FAMILIES",
    "Backend",
    "CurveFamily",
    "KeyVariant",
)
