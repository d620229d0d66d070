"""
Benchmark public key operations per variant: validate, compress/extend,
verify, recover.

Run from repo root after `pip install -e .`:

  python benchmarks/keys.py
"""

from __future__ import annotations

import time

from picokey import (
    KeyVariant,
    PublicKey,
    keccak256,
    recover,
    to_compressed,
    to_extended,
    validate,
)
from picokey.curves import (
    curve25519_public_key,
    curve25519_sign,
    ed25519_blake2b_public_key,
    ed25519_blake2b_sign,
    ed25519_public_key,
    ed25519_sign,
    nist256p1,
    secp256k1,
)

PRIV = bytes.fromhex(
    "afeefca74d9a325cf1d6b6911d61a65c32afa8e02bd5e78e2e4ac2910bab45f5"
)
MSG_HASH = keccak256(b"message to sign")


def _time_it(fn, *args, n: int = 50, **kwargs) -> float:
    # Warmup
    for _ in range(3):
        fn(*args, **kwargs)
    start = time.perf_counter()
    for _ in range(n):
        fn(*args, **kwargs)
    return (time.perf_counter() - start) / n


def _row(name: str, seconds: float) -> None:
    print(f"  {name:<20} {seconds * 1e3:8.2f} ms")


def _bench_ecdsa(module, compressed: KeyVariant, n: int) -> None:
    print(compressed.family.curve)
    key = PublicKey(module.privkey_to_pubkey(PRIV, compressed=True), compressed)
    extended = to_extended(key)
    signature = module.sign_recoverable(PRIV, MSG_HASH)
    _row("validate compressed", _time_it(validate, key.data, compressed, n=n))
    _row("validate extended", _time_it(validate, extended.data, extended.variant, n=n))
    _row("to_extended", _time_it(to_extended, key, n=n))
    _row("to_compressed", _time_it(to_compressed, extended, n=n))
    _row("verify", _time_it(key.verify, signature, MSG_HASH, n=n))
    _row("recover", _time_it(recover, signature, MSG_HASH, extended.variant, n=n))
    print()


def _bench_eddsa(public_key, sign, variant: KeyVariant, n: int) -> None:
    print(variant.family.curve)
    key = PublicKey(public_key(PRIV), variant)
    signature = sign(MSG_HASH, PRIV)
    _row("validate", _time_it(validate, key.data, variant, n=n))
    _row("verify", _time_it(key.verify, signature, MSG_HASH, n=n))
    print()


def main() -> None:
    n = 20
    print(f"Benchmark: picokey public keys ({n} iterations)")
    print()
    _bench_ecdsa(secp256k1, KeyVariant.SECP256K1_COMPRESSED, n)
    _bench_ecdsa(nist256p1, KeyVariant.NIST256P1_COMPRESSED, n)
    _bench_eddsa(ed25519_public_key, ed25519_sign, KeyVariant.ED25519, n)
    _bench_eddsa(
        ed25519_blake2b_public_key, ed25519_blake2b_sign, KeyVariant.ED25519_BLAKE2B, n
    )
    _bench_eddsa(curve25519_public_key, curve25519_sign, KeyVariant.CURVE25519, n)


if __name__ == "__main__":
    main()
