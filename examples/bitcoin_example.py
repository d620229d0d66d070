#!/usr/bin/env python3
"""Example: compressed/extended secp256k1 public keys (Bitcoin-style)."""

from picokey import KeyVariant, PublicKey, to_compressed, to_extended

key = PublicKey.from_hex(
    "0399c6f51ad6f98c9c583f8e92bb7758ab2ca9a04110c0a1126ec43e5453d196c1",
    KeyVariant.SECP256K1_COMPRESSED,
)
extended = to_extended(key)
print("Compressed (33 bytes):", key)
print("Extended (65 bytes):", extended.hex()[:32] + "...")
print("Round trip:", to_compressed(extended) == key)
print("Invalid key:", PublicKey.from_hex("deadbeef", KeyVariant.SECP256K1_COMPRESSED))
