"""
The Signer protocol and the private key signer
"""
from typing import Protocol, runtime_checkable

from pegtx.core import ECC, NETWORK, SigningError, DataEncodingError, ECCPrivateKeyError, ECDSAError
from pegtx.cryptography import SECP256K1, ecdsa, verify_ecdsa, Point
from pegtx.data import decode_base58check, encode_base58check, encode_der_signature, decode_der_signature
from pegtx.script.scriptpubkey import p2pkh_address

__all__ = ["Signer", "PrivateKeySigner"]

DIGEST_BYTES = 32
COMPRESSION_FLAG = b'\x01'


@runtime_checkable
class Signer(Protocol):
    def sign(self, digest: bytes, hash_type: int) -> bytes:
        """Return DER(r, s) || hash_type byte for the 32-byte digest"""
        ...


class PrivateKeySigner:
    """
    Signs digests with a secp256k1 private key
    """
    __slots__ = ("_private_key", "testnet", "compressed", "_public_point")

    def __init__(self, private_key: int | bytes, testnet: bool = False, compressed: bool = True):
        if isinstance(private_key, bytes):
            if len(private_key) != ECC.PRIVATE_KEY_BYTES:
                raise SigningError(f"Private key must be {ECC.PRIVATE_KEY_BYTES} bytes")
            private_key = int.from_bytes(private_key, "big")
        if not (1 <= private_key < SECP256K1.order):
            raise SigningError("Private key out of bounds for secp256k1")

        self._private_key = private_key
        self.testnet = testnet
        self.compressed = compressed
        self._public_point = SECP256K1.multiply_generator(private_key)

    @classmethod
    def from_wif(cls, wif: str):
        try:
            payload = decode_base58check(wif)
        except DataEncodingError as e:
            raise SigningError("Invalid WIF private key") from e

        prefix, key_data = payload[:1], payload[1:]
        if prefix not in (NETWORK.WIF_MAINNET, NETWORK.WIF_TESTNET):
            raise SigningError(f"Unknown WIF version byte {prefix.hex()}")

        compressed = len(key_data) == ECC.PRIVATE_KEY_BYTES + 1 and key_data[-1:] == COMPRESSION_FLAG
        if compressed:
            key_data = key_data[:-1]
        if len(key_data) != ECC.PRIVATE_KEY_BYTES:
            raise SigningError("Invalid WIF private key length")

        return cls(key_data, testnet=prefix == NETWORK.WIF_TESTNET, compressed=compressed)

    def to_wif(self) -> str:
        prefix = NETWORK.WIF_TESTNET if self.testnet else NETWORK.WIF_MAINNET
        suffix = COMPRESSION_FLAG if self.compressed else b''
        return encode_base58check(prefix + self._private_key.to_bytes(ECC.PRIVATE_KEY_BYTES, "big") + suffix)

    @property
    def public_point(self) -> Point:
        return self._public_point

    @property
    def public_key(self) -> bytes:
        x = self._public_point.x.to_bytes(ECC.COORD_BYTES, "big")
        if self.compressed:
            return (b'\x02' if self._public_point.y % 2 == 0 else b'\x03') + x
        return b'\x04' + x + self._public_point.y.to_bytes(ECC.COORD_BYTES, "big")

    @property
    def address(self) -> str:
        """The P2PKH address of this key"""
        return p2pkh_address(self.public_key, self.testnet)

    def sign(self, digest: bytes, hash_type: int) -> bytes:
        if len(digest) != DIGEST_BYTES:
            raise SigningError(f"Digest must be {DIGEST_BYTES} bytes, received {len(digest)}")
        if not (0 <= hash_type <= 0xff):
            raise SigningError(f"Hash type {hash_type} does not fit in one byte")
        try:
            r, s = ecdsa(self._private_key, digest)
        except (ECCPrivateKeyError, ECDSAError) as e:
            raise SigningError(str(e)) from e
        return encode_der_signature(r, s) + hash_type.to_bytes(1, "little")

    def verify(self, signature: bytes, digest: bytes) -> bool:
        """
        Verify a signature as returned by sign(), sighash byte included
        """
        r, s = decode_der_signature(signature[:-1])
        return verify_ecdsa((r, s), digest, self._public_point)

    def __repr__(self):
        return f"PrivateKeySigner(public_key={self.public_key.hex()}, testnet={self.testnet})"
