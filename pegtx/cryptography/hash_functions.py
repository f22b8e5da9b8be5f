"""
Shortcuts for the hash functions used in transaction signing and addresses. Each function returns the bytes digest
"""
import hashlib
import hmac

from ripemd.ripemd160 import ripemd160 as _ripemd160

__all__ = ["hash160", "hash256", "hmac_sha256", "ripemd160", "sha256"]


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def ripemd160(data: bytes) -> bytes:
    return _ripemd160(data)


def hmac_sha256(key: bytes, message: bytes) -> bytes:
    return hmac.new(key=key, msg=message, digestmod=hashlib.sha256).digest()


# --- BTC HASH FUNCTIONS --- #

def hash256(data: bytes) -> bytes:
    """SHA256(SHA256(data))"""
    return sha256(sha256(data))


def hash160(data: bytes) -> bytes:
    """RIPEMD160(SHA256(data))"""
    return ripemd160(sha256(data))
