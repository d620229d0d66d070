"""Public key error taxonomy. All errors are ValueErrors so callers of the curve backend keep working."""

from __future__ import annotations


class PublicKeyError(ValueError):
    """Base class for every public key failure."""


class InvalidLength(PublicKeyError):
    """Buffer size does not match the declared key variant."""


class InvalidEncoding(PublicKeyError):
    """Bad prefix byte, or the encoded point is not on the curve."""


class MalformedSignature(PublicKeyError):
    """Signature has the wrong length or an out-of-range scalar."""


class UnsupportedOperation(PublicKeyError):
    """Operation is not defined for the key's variant (e.g. compressing an EdDSA key)."""


__all__: tuple[str, ...] = (
    "InvalidEncoding",
    "InvalidLength",
    "MalformedSignature",
    "PublicKeyError",
    "UnsupportedOperation",
)
