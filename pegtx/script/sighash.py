"""
SigHash Enum class and the legacy signature hash
"""
from enum import IntEnum

from pegtx.cryptography import hash256
from pegtx.script.script import Script
from pegtx.tx import Transaction

__all__ = ["SigHash", "legacy_sighash"]


class SigHash(IntEnum):
    ALL = 0x01
    NONE = 0x02
    SINGLE = 0x03
    ALL_ANYONECANPAY = 0x81
    NONE_ANYONECANPAY = 0x82
    SINGLE_ANYONECANPAY = 0x83

    def to_byte(self) -> bytes:
        """
        The single byte appended to a signature
        """
        return self.value.to_bytes(1, "little")

    def for_hashing(self) -> bytes:
        """
        The 4-byte little-endian suffix of the sighash preimage
        """
        return self.value.to_bytes(4, "little")


def legacy_sighash(tx: Transaction, input_index: int, script: Script | bytes, sighash_num: int = SigHash.ALL) -> bytes:
    """
    Computes legacy message_hash for signing:
        1. Remove all existing script_sigs
        2. Put the given script in the script_sig for the input.
        3. Append the sighash type as 4 little-endian bytes at the end of the serialized tx data
        4. HASH256 the result

    Only SIGHASH_ALL is supported.
    """
    sighash = SigHash(sighash_num)
    if sighash != SigHash.ALL:
        raise ValueError(f"Unsupported sighash type for legacy signing: {sighash.name}")
    if not 0 <= input_index < len(tx.inputs):
        raise IndexError(f"Input index {input_index} out of range for tx with {len(tx.inputs)} inputs")

    script_bytes = script.to_bytes() if isinstance(script, Script) else script

    tx_copy = tx.clone()
    for i in tx_copy.inputs:
        i.scriptsig = b''
    tx_copy.inputs[input_index].scriptsig = script_bytes

    return hash256(tx_copy.to_bytes() + sighash.for_hashing())
