"""Stability tests for curve implementations.

Lock in exact outputs for fixed inputs so that any change in curve code
(optimizations, refactors) is detected. Run with PYTHONPATH=src or after
`pip install -e .`.
"""

from __future__ import annotations

from picokey.curves import (
    NIST256P1,
    SECP256K1,
    ecdsa,
    ed25519_public_key,
    ed25519_sign,
    ed25519_verify,
)
from picokey.curves import nist256p1, secp256k1

ONE = bytes(31) + bytes([1])

SECP_PUB_EXPECTED = bytes.fromhex(
    "0479be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
)
SECP_COMPRESSED_EXPECTED = bytes.fromhex(
    "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
)
NIST_PUB_EXPECTED = bytes.fromhex(
    "046b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296"
    "4fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33576b315ececbb6406837bf51f5"
)
NIST_COMPRESSED_EXPECTED = bytes.fromhex(
    "036b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296"
)

# Public key of the wallet test private key.
WALLET_PRIV = bytes.fromhex(
    "afeefca74d9a325cf1d6b6911d61a65c32afa8e02bd5e78e2e4ac2910bab45f5"
)
WALLET_PUB_COMPRESSED = bytes.fromhex(
    "0399c6f51ad6f98c9c583f8e92bb7758ab2ca9a04110c0a1126ec43e5453d196c1"
)

# --- Ed25519: RFC 8032 test vector 1 ---
ED25519_SECRET = bytes.fromhex(
    "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"
)
ED25519_PUBLIC_EXPECTED = bytes.fromhex(
    "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"
)
ED25519_MSG = b""
ED25519_SIG_EXPECTED = bytes.fromhex(
    "e5564300c360ac729086e2cc806e828a84877f1eb8e5d974d873e06522490155"
    "5fb8821590a33bacc61e39701cf9b46bd25bf5f0595bbe24655141438e7a100b"
)


def test_secp256k1_privkey_to_pubkey_stable() -> None:
    """Private key 1 maps to the generator."""
    assert secp256k1.privkey_to_pubkey(ONE) == SECP_PUB_EXPECTED
    assert secp256k1.privkey_to_pubkey(ONE, compressed=True) == SECP_COMPRESSED_EXPECTED


def test_secp256k1_wallet_key_stable() -> None:
    assert secp256k1.privkey_to_pubkey(WALLET_PRIV, compressed=True) == WALLET_PUB_COMPRESSED


def test_nist256p1_privkey_to_pubkey_stable() -> None:
    assert nist256p1.privkey_to_pubkey(ONE) == NIST_PUB_EXPECTED
    assert nist256p1.privkey_to_pubkey(ONE, compressed=True) == NIST_COMPRESSED_EXPECTED


def test_curve_sizes() -> None:
    assert SECP256K1.byte_size == 32
    assert NIST256P1.byte_size == 32
    assert SECP256K1.p % 4 == 3
    assert NIST256P1.p % 4 == 3


def test_lift_x_matches_generator() -> None:
    for curve in (SECP256K1, NIST256P1):
        assert ecdsa.lift_x(curve, curve.gx, curve.gy & 1) == curve.gy
        assert ecdsa.lift_x(curve, curve.gx, (curve.gy & 1) ^ 1) == curve.p - curve.gy


def test_ed25519_public_key_stable() -> None:
    """Ed25519 public key for RFC 8032 test secret must not change."""
    assert ed25519_public_key(ED25519_SECRET) == ED25519_PUBLIC_EXPECTED


def test_ed25519_sign_stable() -> None:
    """Ed25519 signature for RFC 8032 test vector must not change."""
    assert ed25519_sign(ED25519_MSG, ED25519_SECRET) == ED25519_SIG_EXPECTED


def test_ed25519_verify_stable() -> None:
    """Ed25519 verify must accept the RFC 8032 (message, sig, pub) triple."""
    assert (
        ed25519_verify(ED25519_MSG, ED25519_SIG_EXPECTED, ED25519_PUBLIC_EXPECTED)
        is True
    )
