"""
Methods to create and verify a signature created using ECDSA
"""
from typing import Tuple

from pegtx.core.exceptions import ECDSAError, ECCPrivateKeyError
from pegtx.core.formats import ECC
from pegtx.cryptography.ecc import SECP256K1, Point
from pegtx.cryptography.hash_functions import hmac_sha256

__all__ = ["ecdsa", "verify_ecdsa", "deterministic_nonce"]

curve = SECP256K1


def _message_int(message: bytes) -> int:
    """Keep the n leftmost bits of the message"""
    z = int.from_bytes(message, 'big')
    excess = len(message) * 8 - curve.order.bit_length()
    if excess > 0:
        z >>= excess
    return z


def deterministic_nonce(private_key: int, message: bytes) -> int:
    """
    Returns the RFC6979 nonce k for the given private key and 32-byte message hash, using HMAC-SHA256.
    """
    n = curve.order
    z = _message_int(message) % n
    secret_bytes = private_key.to_bytes(ECC.PRIVATE_KEY_BYTES, "big")
    z_bytes = z.to_bytes(ECC.PRIVATE_KEY_BYTES, "big")

    k = b'\x00' * 32
    v = b'\x01' * 32
    k = hmac_sha256(k, v + b'\x00' + secret_bytes + z_bytes)
    v = hmac_sha256(k, v)
    k = hmac_sha256(k, v + b'\x01' + secret_bytes + z_bytes)
    v = hmac_sha256(k, v)

    while True:
        v = hmac_sha256(k, v)
        candidate = int.from_bytes(v, 'big')
        if 1 <= candidate < n:
            return candidate
        k = hmac_sha256(k, v + b'\x00')
        v = hmac_sha256(k, v)


def ecdsa(private_key: int, message: bytes) -> Tuple[int, int]:
    """
    Generates an ECDSA signature for a given private_key and message hash.

    Returns:
    --------
    tuple
        The ECDSA signature (r, s), using low s as per BIP-62.

    Algorithm:
    ----------
    1) Compute z as the integer value of the first n bits of message hash.
    2) Select k deterministically per RFC6979.
    3) Calculate curve point (x, y) = k * generator.
    4) Compute r = x (mod n) and s = k^(-1)(z + r * private_key) (mod n).
    5) If r or s is 0, the key/message pair can't be signed.
    6) Return (r, min(s, n - s)).
    """
    n = curve.order
    if not (1 <= private_key < n):
        raise ECCPrivateKeyError("Private key out of bounds for secp256k1")

    z = _message_int(message)
    k = deterministic_nonce(private_key, message)

    x, _ = curve.multiply_generator(k)
    r = x % n
    s = (pow(k, -1, n) * (z + r * private_key)) % n
    if r == 0 or s == 0:
        raise ECDSAError("Degenerate ECDSA signature values")

    if s > n // 2:
        s = n - s

    return r, s


def verify_ecdsa(signature: tuple, message: bytes, public_key: Point | tuple) -> bool:
    """
    We verify that the given signature corresponds to the correct public_key for the given message hash.

    Algorithm
    --------
    Let n denote the group order of the elliptic curve.

    1) Verify that (r,s) are integers in the interval [1,n-1]
    2) Let z be the integer value of the first n bits of the message hash
    3) Let u1 = z * s^(-1) (mod n) and u2 = r * s^(-1) (mod n)
    4) Calculate the curve point (x,y) = (u1 * generator) + (u2 * public_key)
    5) If r = x (mod n), the signature is valid.
    """
    n = curve.order
    r, s = signature
    if isinstance(public_key, tuple):
        public_key = Point(*public_key)

    if not (1 <= r < n):
        raise ECDSAError(f"ECDSA r value {r} out of bounds.")
    if not (1 <= s < n):
        raise ECDSAError(f"ECDSA s value {s} out of bounds.")

    z = _message_int(message)

    s_inv = pow(s, -1, n)
    u1 = (z * s_inv) % n
    u2 = (r * s_inv) % n

    final_pt = curve.add_points(curve.multiply_generator(u1), curve.scalar_multiplication(u2, public_key))
    if not final_pt:
        return False
    return r == final_pt.x % n
