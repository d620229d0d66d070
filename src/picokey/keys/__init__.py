"""Multi-curve public keys: variants, validation, compression, verification, recovery."""

from .public_key import (
    PublicKey,
    recover,
    to_compressed,
    to_extended,
    validate,
    verify,
)
from .variants import Backend, CurveFamily, KeyVariant

__all__: tuple[str, ...] = (
    "Backend",
    "CurveFamily",
    "KeyVariant",
    "PublicKey",
    "recover",
    "to_compressed",
    "to_extended",
    "validate",
    "verify",
)
