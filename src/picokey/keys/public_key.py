"""
PublicKey: an immutable byte buffer tagged with its KeyVariant.

Keys are only ever created validated. The constructor raises the typed error;
the from_* factories and recover() return None instead. Derived keys
(compressed, extended, recovered) are new values.
"""

from __future__ import annotations

import binascii
import logging
from dataclasses import dataclass
from typing import Optional, Union

from ..errors import PublicKeyError
from . import compressor, recoverer, validator, verifier
from .variants import Backend, KeyVariant

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class PublicKey:
    """
    A validated public key.

    Args:
        data: Raw key bytes; copied, never retained.
        variant: Key variant the bytes must satisfy.

    Raises:
        InvalidLength: Wrong size for variant.
        InvalidEncoding: Bad prefix, or ECDSA point not on the curve.
    """

    data: bytes
    variant: KeyVariant

    def __post_init__(self) -> None:
        data = bytes(self.data)
        validator.check(data, self.variant)
        object.__setattr__(self, "data", data)

    @classmethod
    def from_bytes(cls, data: BytesLike, variant: KeyVariant) -> Optional[PublicKey]:
        """Validated key, or None if data is not a valid key of variant."""
        try:
            return cls(bytes(data), variant)
        except PublicKeyError as exc:
            logger.debug("rejected %s public key: %s", variant.value, exc)
            return None

    @classmethod
    def from_hex(cls, text: str, variant: KeyVariant) -> Optional[PublicKey]:
        """Like from_bytes, from a hex string (optional 0x prefix)."""
        if text[:2] in ("0x", "0X"):
            text = text[2:]
        try:
            data = bytes.fromhex(text)
        except ValueError as exc:
            logger.debug("rejected %s public key: bad hex: %s", variant.value, exc)
            return None
        return cls.from_bytes(data, variant)

    @classmethod
    def recover(
        cls,
        signature: bytes,
        digest: bytes,
        variant: KeyVariant = KeyVariant.SECP256K1_EXTENDED,
    ) -> Optional[PublicKey]:
        """Extended key recovered from a 65-byte r || s || v signature, or None."""
        result = recoverer.recover(signature, digest, variant)
        if result is None:
            return None
        data, extended = result
        return cls(data, extended)

    @staticmethod
    def is_valid(data: bytes, variant: KeyVariant) -> bool:
        return validator.validate(data, variant)

    @property
    def is_compressed(self) -> bool:
        return self.variant.is_compressed

    @property
    def backend(self) -> Backend:
        return self.variant.backend

    def compressed(self) -> PublicKey:
        """
        Compressed form of an ECDSA key (equal key if already compressed).

        Raises:
            UnsupportedOperation: EdDSA key, or bytes that are not a point.
        """
        data, variant = compressor.compress(self.data, self.variant)
        return PublicKey(data, variant)

    def extended(self) -> PublicKey:
        """
        Extended (uncompressed) form of an ECDSA key (equal key if already extended).

        Raises:
            UnsupportedOperation: EdDSA key, or bytes that are not a point.
        """
        data, variant = compressor.decompress(self.data, self.variant)
        return PublicKey(data, variant)

    def verify(self, signature: bytes, digest: bytes) -> bool:
        """True iff signature is valid for digest under this key. Never raises."""
        return verifier.verify(self.data, self.variant, signature, digest)

    def hex(self) -> str:
        return binascii.hexlify(self.data).decode("ascii")

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def __str__(self) -> str:
        return self.hex()

    def __repr__(self) -> str:
        return f"PublicKey({self.variant.value}, {self.hex()})"


def validate(data: bytes, variant: KeyVariant) -> bool:
    """True iff data is a valid public key of variant."""
    return validator.validate(data, variant)


def to_extended(key: PublicKey) -> PublicKey:
    return key.extended()


def to_compressed(key: PublicKey) -> PublicKey:
    return key.compressed()


def verify(key: PublicKey, signature: bytes, digest: bytes) -> bool:
    return key.verify(signature, digest)


def recover(
    signature: bytes,
    digest: bytes,
    variant: KeyVariant = KeyVariant.SECP256K1_EXTENDED,
) -> Optional[PublicKey]:
    """
    Recover the signer's key from a recoverable ECDSA signature.

    Args:
        signature: 65-byte r || s || v.
        digest: 32-byte hash that was signed.
        variant: ECDSA curve to recover on (secp256k1 by default).

    Returns:
        Extended PublicKey that verifies (signature, digest), or None.
    """
    return PublicKey.recover(signature, digest, variant)


__all__: tuple[str, ...] = (
    "PublicKey",
    "recover",
    "to_compressed",
    "to_extended",
    "validate",
    "verify",
)
