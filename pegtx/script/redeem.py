"""
The deposit redeem script

Deposits are locked to P2SH(redeem_script) where
    redeem_script = <32-byte commitment> OP_DROP <pubkey> OP_CHECKSIG
and the commitment binds the deposit to a destination address and nonce on the other chain.
"""
from pegtx.core import SCRIPT, ScriptError
from pegtx.cryptography import sha256
from pegtx.script.script import Script, pushdata

__all__ = ["deposit_commitment", "deposit_redeem_script"]

OP_DROP = b'\x75'
OP_CHECKSIG = b'\xac'


def deposit_commitment(destination_address: bytes, nonce: int) -> bytes:
    """
    SHA256(destination_address || nonce as 8 big-endian bytes)
    """
    if nonce < 0:
        raise ValueError("Deposit nonce must be non-negative")
    return sha256(destination_address + nonce.to_bytes(8, "big"))


def deposit_redeem_script(pubkey: bytes, commitment: bytes) -> Script:
    if len(commitment) != SCRIPT.COMMITMENT_BYTES:
        raise ScriptError(f"Commitment must be {SCRIPT.COMMITMENT_BYTES} bytes")
    if len(pubkey) not in (33, 65):
        raise ScriptError(f"Pubkey not in correct format. Length: {len(pubkey)}, expected 33 or 65 bytes")
    return Script(pushdata(commitment) + OP_DROP + pushdata(pubkey) + OP_CHECKSIG)
