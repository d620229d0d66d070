"""ECDSA public key recovery and the recover-then-verify post-condition."""

from __future__ import annotations

import pytest

from picokey import KeyVariant, keccak256, recover
from picokey.curves import (
    NIST256P1,
    SECP256K1,
    ecdsa,
    nist256p1,
    secp256k1,
)

PRIVS = [
    bytes.fromhex("afeefca74d9a325cf1d6b6911d61a65c32afa8e02bd5e78e2e4ac2910bab45f5"),
    bytes(31) + b"\x01",
    bytes(31) + b"\x2a",
]
DIGESTS = [keccak256(b"Hello"), keccak256(b"message to sign"), bytes(31) + b"\x01"]

RECOVER_DIGEST = bytes.fromhex(
    "de4e9524586d6fce45667f9ff12f661e79870c4105fa0fb58af976619bb11432"
)
RECOVER_SIG = bytes.fromhex(
    "0000000000000000000000000000000000000000000000000000000000000002"
    "0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"
    "00"
)


def test_known_vector() -> None:
    key = recover(RECOVER_SIG, RECOVER_DIGEST)
    assert key is not None
    assert key.hex() == (
        "043fc5bf5fec35b6ffe6fd246226d312742a8c296bfa57dd22da509a2e348529b7"
        "ddb9faf8afe1ecda3c05e7b2bda47ee1f5a87e952742b22afca560b29d972fcf"
    )


@pytest.mark.parametrize("priv", PRIVS)
@pytest.mark.parametrize("digest", DIGESTS)
@pytest.mark.parametrize(
    "module, variant",
    [
        (secp256k1, KeyVariant.SECP256K1_EXTENDED),
        (nist256p1, KeyVariant.NIST256P1_EXTENDED),
    ],
)
def test_recovers_signer(priv: bytes, digest: bytes, module, variant: KeyVariant) -> None:
    signature = module.sign_recoverable(priv, digest)
    key = recover(signature, digest, variant)
    assert key is not None
    assert key.variant is variant
    assert key.data == module.privkey_to_pubkey(priv)
    assert key.verify(signature, digest)


def test_compressed_variant_yields_extended() -> None:
    digest = DIGESTS[0]
    signature = secp256k1.sign_recoverable(PRIVS[0], digest)
    key = recover(signature, digest, KeyVariant.SECP256K1_COMPRESSED)
    assert key is not None
    assert key.variant is KeyVariant.SECP256K1_EXTENDED


def test_ethereum_style_v() -> None:
    digest = DIGESTS[0]
    signature = secp256k1.sign_recoverable(PRIVS[0], digest)
    eth_signature = signature[:64] + bytes([signature[64] + 27])
    assert recover(eth_signature, digest) == recover(signature, digest)


def test_other_parity_recovers_other_key() -> None:
    digest = DIGESTS[0]
    signature = secp256k1.sign_recoverable(PRIVS[0], digest)
    flipped = signature[:64] + bytes([signature[64] ^ 1])
    key = recover(flipped, digest)
    assert key is not None
    assert key.data != secp256k1.privkey_to_pubkey(PRIVS[0])
    # Still a consistent (signature, digest, key) triple.
    assert key.verify(flipped, digest)


@pytest.mark.parametrize("length", [0, 4, 64, 66])
def test_wrong_signature_length(length: int) -> None:
    assert recover(b"\x01" * length, RECOVER_DIGEST) is None


def test_deadbeef() -> None:
    deadbeef = bytes.fromhex("deadbeef")
    assert recover(deadbeef, deadbeef) is None


@pytest.mark.parametrize("digest", [b"", RECOVER_DIGEST[:31], RECOVER_DIGEST + b"\x00"])
def test_wrong_digest_length(digest: bytes) -> None:
    assert recover(RECOVER_SIG, digest) is None


@pytest.mark.parametrize(
    "r, s",
    [
        (0, 1),
        (1, 0),
        (SECP256K1.n, 1),
        (1, SECP256K1.n),
        (2**256 - 1, 1),
    ],
)
def test_out_of_range_scalars(r: int, s: int) -> None:
    signature = r.to_bytes(32, "big") + s.to_bytes(32, "big") + b"\x00"
    assert recover(signature, RECOVER_DIGEST) is None


@pytest.mark.parametrize("v", [4, 26, 31, 255])
def test_bad_recovery_id(v: int) -> None:
    assert recover(RECOVER_SIG[:64] + bytes([v]), RECOVER_DIGEST) is None


def test_high_recovery_id_needs_small_r() -> None:
    # recid 2/3 use x = r + n, which exceeds p unless r < p - n.
    r = SECP256K1.p - SECP256K1.n
    signature = r.to_bytes(32, "big") + RECOVER_SIG[32:64] + b"\x02"
    assert recover(signature, RECOVER_DIGEST) is None


def _small_r_with_lifted_r_plus_n() -> int:
    """Smallest r whose x = r + n is the x-coordinate of a secp256k1 point."""
    r = 1
    while ecdsa.lift_x(SECP256K1, r + SECP256K1.n, 0) is None:
        r += 1
    return r


@pytest.mark.parametrize("v", [2, 3])
def test_high_recovery_id_uses_r_plus_n(v: int) -> None:
    r = _small_r_with_lifted_r_plus_n()
    signature = r.to_bytes(32, "big") + (5).to_bytes(32, "big") + bytes([v])
    key = recover(signature, RECOVER_DIGEST)
    assert key is not None
    assert key.verify(signature, RECOVER_DIGEST)
    # The low recovery id with the same parity lifts x = r instead.
    low = recover(signature[:64] + bytes([v - 2]), RECOVER_DIGEST)
    assert low is None or low != key


def test_nist256p1_s_equal_to_order() -> None:
    signature = (1).to_bytes(32, "big") + NIST256P1.n.to_bytes(32, "big") + b"\x00"
    assert recover(signature, RECOVER_DIGEST, KeyVariant.NIST256P1_EXTENDED) is None


@pytest.mark.parametrize(
    "variant", [KeyVariant.ED25519, KeyVariant.ED25519_BLAKE2B, KeyVariant.CURVE25519]
)
def test_eddsa_variant_recovers_nothing(variant: KeyVariant) -> None:
    assert recover(RECOVER_SIG, RECOVER_DIGEST, variant) is None
