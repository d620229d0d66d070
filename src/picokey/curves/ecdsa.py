"""
Short Weierstrass curves (y^2 = x^3 + ax + b mod p): point arithmetic, SEC1
point encoding, ECDSA verify, sign and public key recovery.

Curves are described by immutable CurveParams; every function takes the curve
explicitly so one implementation serves secp256k1 and NIST P-256.
Square roots use the p = 3 (mod 4) shortcut, which holds for both curves.
"""

from __future__ import annotations

import hashlib
from typing import NamedTuple, Optional

Point = tuple[int, int]

# Identity. (0, 0) is never on a supported curve since b != 0.
INFINITY: Point = (0, 0)


class CurveParams(NamedTuple):
    """Domain parameters of a prime-order short Weierstrass curve."""

    name: str
    p: int
    a: int
    b: int
    n: int
    gx: int
    gy: int

    @property
    def byte_size(self) -> int:
        return (self.p.bit_length() + 7) // 8

    @property
    def generator(self) -> Point:
        return (self.gx, self.gy)


def _mod_inv(a: int, n: int) -> int:
    """Modular inverse via extended gcd."""
    if a < 0:
        a = (a % n + n) % n
    t, r = 0, n
    new_t, new_r = 1, a
    while new_r:
        q = r // new_r
        t, new_t = new_t, t - q * new_t
        r, new_r = new_r, r - q * new_r
    if r != 1:
        raise ValueError("no inverse")
    return t % n


def point_add(curve: CurveParams, P: Point, Q: Point) -> Point:
    """Add two points in affine coords; INFINITY is the identity."""
    if P == INFINITY:
        return Q
    if Q == INFINITY:
        return P
    p = curve.p
    px, py = P
    qx, qy = Q
    if px == qx:
        if (py + qy) % p == 0:
            return INFINITY
        lam = (3 * px * px + curve.a) * _mod_inv(2 * py, p) % p
    else:
        lam = (qy - py) * _mod_inv(qx - px, p) % p
    rx = (lam * lam - px - qx) % p
    ry = (lam * (px - rx) - py) % p
    return (rx, ry)


def point_mul(curve: CurveParams, d: int, P: Point) -> Point:
    """Scalar multiplication d * P (double-and-add)."""
    d = d % curve.n
    R = INFINITY
    while d:
        if d & 1:
            R = point_add(curve, R, P)
        P = point_add(curve, P, P)
        d >>= 1
    return R


def is_on_curve(curve: CurveParams, P: Point) -> bool:
    """True iff P has coordinates in [0, p) and satisfies the curve equation."""
    x, y = P
    p = curve.p
    if not (0 <= x < p and 0 <= y < p):
        return False
    return (y * y - (x * x * x + curve.a * x + curve.b)) % p == 0


def lift_x(curve: CurveParams, x: int, odd: int) -> Optional[int]:
    """Return the y with parity `odd` such that (x, y) is on the curve, or None."""
    p = curve.p
    if not 0 <= x < p:
        return None
    rhs = (x * x * x + curve.a * x + curve.b) % p
    y = pow(rhs, (p + 1) // 4, p)
    if (y * y) % p != rhs:
        return None
    if (y & 1) != (odd & 1):
        if y == 0:
            return None
        y = p - y
    return y


def encode_point(curve: CurveParams, P: Point, compressed: bool) -> bytes:
    """SEC1 encoding: 0x02/0x03 || x when compressed, else 0x04 || x || y."""
    size = curve.byte_size
    x, y = P
    if compressed:
        return bytes([0x02 | (y & 1)]) + x.to_bytes(size, "big")
    return bytes([0x04]) + x.to_bytes(size, "big") + y.to_bytes(size, "big")


def decode_point(curve: CurveParams, data: bytes) -> Optional[Point]:
    """
    Decode a SEC1 compressed or uncompressed point.

    Args:
        curve: Curve the point should lie on.
        data: 33-byte (0x02/0x03 prefix) or 65-byte (0x04 prefix) encoding.

    Returns:
        (x, y) on the curve, or None if the encoding or point is invalid.
    """
    size = curve.byte_size
    if len(data) == size + 1 and data[0] in (0x02, 0x03):
        x = int.from_bytes(data[1:], "big")
        y = lift_x(curve, x, data[0] & 1)
        if y is None:
            return None
        return (x, y)
    if len(data) == 2 * size + 1 and data[0] == 0x04:
        P = (
            int.from_bytes(data[1 : 1 + size], "big"),
            int.from_bytes(data[1 + size :], "big"),
        )
        return P if is_on_curve(curve, P) else None
    return None


def digest_to_int(curve: CurveParams, digest: bytes) -> int:
    """Leftmost bits of the digest as an integer, truncated to the order's bit length."""
    e = int.from_bytes(digest, "big")
    excess = len(digest) * 8 - curve.n.bit_length()
    if excess > 0:
        e >>= excess
    return e


def verify(curve: CurveParams, Q: Point, r: int, s: int, z: int) -> bool:
    """
    Standard ECDSA verification of (r, s) over message scalar z.

    Returns:
        True iff the signature is valid for public point Q.
    """
    n = curve.n
    if not (0 < r < n and 0 < s < n):
        return False
    w = _mod_inv(s, n)
    u1 = (z * w) % n
    u2 = (r * w) % n
    X = point_add(
        curve, point_mul(curve, u1, curve.generator), point_mul(curve, u2, Q)
    )
    if X == INFINITY:
        return False
    return X[0] % n == r


def recover(curve: CurveParams, z: int, r: int, s: int, recid: int) -> Point:
    """Recover Q from (r, s, recid). recid 0,1: x=r; recid 2,3: x=r+n; recid&1 selects y parity."""
    n = curve.n
    if not (0 < r < n and 0 < s < n):
        raise ValueError("r and s must be in [1, n-1]")
    if not 0 <= recid <= 3:
        raise ValueError("recid must be in 0..3")
    x = r + n if recid & 2 else r
    if x >= curve.p:
        raise ValueError("recid 2/3 but r+n >= p")
    y = lift_x(curve, x, recid & 1)
    if y is None:
        raise ValueError("r is not the x-coordinate of a curve point")
    r_inv = _mod_inv(r, n)
    u1 = (-z * r_inv) % n
    u2 = (s * r_inv) % n
    g_mul = point_mul(curve, u1, curve.generator)
    r_mul = point_mul(curve, u2, (x, y))
    Q = point_add(curve, g_mul, r_mul)
    if Q == INFINITY:
        raise ValueError("recovered point at infinity")
    return Q


def sign(curve: CurveParams, d: int, z: int) -> tuple[int, int, int]:
    """
    ECDSA sign with recovery id; returns (r, s, recid) with low s.

    The nonce is derived deterministically from SHA-256 over key, message
    and a retry counter. This is not RFC 6979.
    """
    n = curve.n
    if not 0 < d < n:
        raise ValueError("invalid privkey")
    size = curve.byte_size
    seed = d.to_bytes(size, "big") + (z % n).to_bytes(size, "big")
    for attempt in range(256):
        k = int.from_bytes(hashlib.sha256(seed + bytes([attempt])).digest(), "big") % n
        if k == 0:
            continue
        kx, ky = point_mul(curve, k, curve.generator)
        r = kx % n
        if r == 0:
            continue
        s = (_mod_inv(k, n) * (z + r * d)) % n
        if s == 0:
            continue
        recid = (ky & 1) | (2 if kx >= n else 0)
        if s > n // 2:
            # Negating s negates R, which flips the y parity.
            s = n - s
            recid ^= 1
        return (r, s, recid)
    raise ValueError("could not produce a signature")


def privkey_to_pubkey(
    curve: CurveParams, privkey: bytes, compressed: bool = False
) -> bytes:
    """
    Derive the SEC1 public key from a big-endian private key.

    Args:
        curve: Curve parameters.
        privkey: Private key, curve.byte_size bytes.
        compressed: Emit the 33-byte compressed form instead of 65 bytes.

    Returns:
        Encoded public key.
    """
    if len(privkey) != curve.byte_size:
        raise ValueError(f"privkey must be {curve.byte_size} bytes")
    d = int.from_bytes(privkey, "big")
    if d == 0 or d >= curve.n:
        raise ValueError("invalid privkey")
    return encode_point(curve, point_mul(curve, d, curve.generator), compressed)


def sign_recoverable(curve: CurveParams, privkey: bytes, msg_hash: bytes) -> bytes:
    """
    Sign a 32-byte hash; returns the 65-byte r || s || recid signature.

    Args:
        curve: Curve parameters.
        privkey: Private key, curve.byte_size bytes.
        msg_hash: 32-byte message hash to sign.

    Returns:
        65 bytes, recid in {0, 1, 2, 3}.
    """
    size = curve.byte_size
    if len(privkey) != size or len(msg_hash) != 32:
        raise ValueError(f"privkey must be {size} bytes and msg_hash 32 bytes")
    d = int.from_bytes(privkey, "big")
    r, s, recid = sign(curve, d, digest_to_int(curve, msg_hash))
    return r.to_bytes(size, "big") + s.to_bytes(size, "big") + bytes([recid])


def recover_pubkey(
    curve: CurveParams, msg_hash: bytes, r: int, s: int, recid: int
) -> bytes:
    """
    Recover the uncompressed public key (65 bytes) from (msg_hash, r, s, recid).

    Args:
        curve: Curve parameters.
        msg_hash: 32-byte message hash that was signed.
        r, s: Signature components (scalars).
        recid: Recovery id (0-3) indicating which public key.

    Returns:
        65-byte uncompressed public key.
    """
    if len(msg_hash) != 32:
        raise ValueError("msg_hash must be 32 bytes")
    Q = recover(curve, digest_to_int(curve, msg_hash), r, s, recid)
    return encode_point(curve, Q, compressed=False)


__all__: tuple[str, ...] = (
    "INFINITY",
    "CurveParams",
    "Point",
    "decode_point",
    "digest_to_int",
    "encode_point",
    "is_on_curve",
    "lift_x",
    "point_add",
    "point_mul",
    "privkey_to_pubkey",
    "recover",
    "recover_pubkey",
    "sign",
    "sign_recoverable",
    "verify",
)
