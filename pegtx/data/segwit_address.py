"""
Methods for bech32 (witness v0) and bech32m (witness v1+) segwit addresses
"""
from bech32 import decode, encode

from pegtx.core import NETWORK, DataEncodingError

__all__ = ["decode_segwit_address", "encode_segwit_address"]


def decode_segwit_address(address: str) -> tuple[int, bytes, bool]:
    """
    Given a segwit address we return (witness version, witness program, testnet)
    """
    hrp = address[:address.rfind("1")].lower() if "1" in address else ""
    if hrp not in (NETWORK.HRP_MAINNET, NETWORK.HRP_TESTNET):
        raise DataEncodingError(f"Unknown bech32 human readable part: {hrp!r}")

    witness_version, program = decode(hrp, address)
    if witness_version is None:
        raise DataEncodingError("Invalid bech32 checksum, witness version or program length")
    return witness_version, bytes(program), hrp == NETWORK.HRP_TESTNET


def encode_segwit_address(program: bytes, witness_version: int = 0, testnet: bool = False) -> str:
    hrp = NETWORK.HRP_TESTNET if testnet else NETWORK.HRP_MAINNET
    address = encode(hrp, witness_version, program)
    if address is None:
        raise DataEncodingError(f"Can't encode {len(program)} byte program as witness v{witness_version}")
    return address
