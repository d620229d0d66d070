#!/usr/bin/env python3
"""Example: EdDSA keys (Ed25519 for Solana, Ed25519-Blake2b for Nano)."""

from picokey import KeyVariant, PublicKey
from picokey.curves import (
    ed25519_blake2b_public_key,
    ed25519_blake2b_sign,
    ed25519_public_key,
    ed25519_sign,
)

seed = bytes(31) + bytes([1])
message = b"Hello, Solana"

key = PublicKey(ed25519_public_key(seed), KeyVariant.ED25519)
print("Ed25519 public key:", key.hex()[:32] + "...")
print("Verify:", key.verify(ed25519_sign(message, seed), message))

nano = PublicKey(ed25519_blake2b_public_key(seed), KeyVariant.ED25519_BLAKE2B)
print("Ed25519-Blake2b public key:", nano.hex()[:32] + "...")
print("Verify:", nano.verify(ed25519_blake2b_sign(message, seed), message))
