"""Compressed <-> extended conversion for ECDSA keys."""

from __future__ import annotations

import pytest

from picokey import (
    KeyVariant,
    PublicKey,
    UnsupportedOperation,
    to_compressed,
    to_extended,
)
from picokey.curves import nist256p1, secp256k1

PRIV = bytes.fromhex(
    "afeefca74d9a325cf1d6b6911d61a65c32afa8e02bd5e78e2e4ac2910bab45f5"
)
PRIVS = [bytes(31) + bytes([k]) for k in (1, 2, 3, 7)] + [PRIV]


@pytest.mark.parametrize("priv", PRIVS)
@pytest.mark.parametrize(
    "module, variant",
    [
        (secp256k1, KeyVariant.SECP256K1_COMPRESSED),
        (nist256p1, KeyVariant.NIST256P1_COMPRESSED),
    ],
)
def test_round_trip(priv: bytes, module, variant: KeyVariant) -> None:
    key = PublicKey(module.privkey_to_pubkey(priv, compressed=True), variant)
    extended = to_extended(key)
    assert extended.data == module.privkey_to_pubkey(priv)
    assert extended.variant is variant.extended_form
    assert to_compressed(extended) == key


def test_compressed_prefix_tracks_y_parity() -> None:
    extended = PublicKey(secp256k1.privkey_to_pubkey(PRIV), KeyVariant.SECP256K1_EXTENDED)
    compressed = extended.compressed()
    y_odd = extended.data[-1] & 1
    assert compressed.data[0] == 0x02 + y_odd
    assert compressed.data[1:] == extended.data[1:33]


def test_nist256p1_generator_compresses_odd() -> None:
    extended = PublicKey(
        nist256p1.privkey_to_pubkey(bytes(31) + b"\x01"), KeyVariant.NIST256P1_EXTENDED
    )
    compressed = extended.compressed()
    assert compressed.variant is KeyVariant.NIST256P1_COMPRESSED
    assert compressed.data[0] == 0x03


def test_same_form_is_identity() -> None:
    key = PublicKey(secp256k1.privkey_to_pubkey(PRIV, compressed=True), KeyVariant.SECP256K1_COMPRESSED)
    assert key.compressed() == key
    extended = key.extended()
    assert extended.extended() == extended


@pytest.mark.parametrize(
    "variant", [KeyVariant.ED25519, KeyVariant.ED25519_BLAKE2B, KeyVariant.CURVE25519]
)
def test_eddsa_unsupported(variant: KeyVariant) -> None:
    key = PublicKey(bytes(32), variant)
    with pytest.raises(UnsupportedOperation):
        to_extended(key)
    with pytest.raises(UnsupportedOperation):
        to_compressed(key)


def test_unvalidated_bytes_unsupported() -> None:
    # A key forced past validation must not produce garbage.
    key = object.__new__(PublicKey)
    object.__setattr__(key, "data", b"\x02" + b"\xff" * 32)
    object.__setattr__(key, "variant", KeyVariant.SECP256K1_COMPRESSED)
    with pytest.raises(UnsupportedOperation):
        key.extended()
    with pytest.raises(UnsupportedOperation):
        key.compressed()
