"""
DER signature encoding
"""
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature, encode_dss_signature

from pegtx.core import DataEncodingError

__all__ = ["encode_der_signature", "decode_der_signature"]


def encode_der_signature(r: int, s: int) -> bytes:
    """
    Encodes ECDSA integers r and s into a DER-encoded signature.
    """
    return encode_dss_signature(r, s)


def decode_der_signature(der_sig: bytes) -> tuple[int, int]:
    """
    Decodes a DER-encoded ECDSA signature back into integers r and s.
    """
    try:
        return decode_dss_signature(der_sig)
    except ValueError as e:
        raise DataEncodingError(f"Invalid DER signature: {der_sig.hex()}") from e
