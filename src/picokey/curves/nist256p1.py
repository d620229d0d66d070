"""NIST P-256 (secp256r1, prime256v1): domain parameters and ECDSA helpers."""

from __future__ import annotations

from . import ecdsa
from .ecdsa import CurveParams

_P = 0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF

NIST256P1 = CurveParams(
    name="nist256p1",
    p=_P,
    a=_P - 3,
    b=0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B,
    n=0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
    gx=0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296,
    gy=0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5,
)


def privkey_to_pubkey(privkey: bytes, compressed: bool = False) -> bytes:
    """Public key (33 or 65 bytes) for a 32-byte P-256 private key."""
    return ecdsa.privkey_to_pubkey(NIST256P1, privkey, compressed)


def sign_recoverable(privkey: bytes, msg_hash: bytes) -> bytes:
    """65-byte r || s || v signature over a 32-byte hash."""
    return ecdsa.sign_recoverable(NIST256P1, privkey, msg_hash)


def recover_pubkey(msg_hash: bytes, r: int, s: int, recid: int) -> bytes:
    return ecdsa.recover_pubkey(NIST256P1, msg_hash, r, s, recid)


__all__: tuple[str, ...] = (
    "NIST256P1",
    "privkey_to_pubkey",
    "recover_pubkey",
    "sign_recoverable",
)
