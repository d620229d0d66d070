#!/usr/bin/env python3
"""Example: Ethereum-style recovery (keccak256, secp256k1, recover + verify)."""

from picokey import KeyVariant, PublicKey, keccak256, recover
from picokey.curves import secp256k1

privkey = bytes(31) + bytes([1])
digest = keccak256(b"Hello, Ethereum")
signature = secp256k1.sign_recoverable(privkey, digest)
print("Signature (r || s || v):", signature.hex()[:32] + "...")

recovered = recover(signature, digest)
print("Recovered:", recovered)
print("Verify:", recovered.verify(signature, digest))

known = PublicKey(secp256k1.privkey_to_pubkey(privkey), KeyVariant.SECP256K1_EXTENDED)
print("Matches signer:", recovered == known)
