"""
Address to locking script conversion, and the addresses of the scripts we build
"""
from pegtx.core import NETWORK, SCRIPT, AddressEncodingError, DataEncodingError
from pegtx.cryptography import hash160
from pegtx.data import decode_base58check, encode_base58check, decode_segwit_address
from pegtx.script.script import Script, pushdata
from pegtx.tx import TxOutput

__all__ = ["encode_locking_script", "p2pkh_script", "p2sh_script", "segwit_script", "p2pkh_address", "p2sh_address",
           "op_return_script", "op_return_output"]

# -- Common OP-Codes
OP_0 = b'\x00'
OP_PUSHBYTES_20 = b'\x14'
OP_RETURN = b'\x6a'
OP_DUP = b'\x76'
OP_EQUAL = b'\x87'
OP_EQUALVERIFY = b'\x88'
OP_HASH160 = b'\xa9'
OP_CHECKSIG = b'\xac'

HASH160_BYTES = 20

_P2PKH_PREFIXES = (NETWORK.P2PKH_MAINNET, NETWORK.P2PKH_TESTNET)
_P2SH_PREFIXES = (NETWORK.P2SH_MAINNET, NETWORK.P2SH_TESTNET)


def p2pkh_script(pubkeyhash: bytes) -> Script:
    """
    P2PKH | OP_DUP + OP_HASH160 + OP_PUSHBYTES_20 + pubkeyhash + OP_EQUALVERIFY + OP_CHECKSIG
    """
    return Script(OP_DUP + OP_HASH160 + OP_PUSHBYTES_20 + pubkeyhash + OP_EQUALVERIFY + OP_CHECKSIG)


def p2sh_script(script_hash: bytes) -> Script:
    """
    P2SH | OP_HASH160 + OP_PUSHBYTES_20 + script_hash + OP_EQUAL
    """
    return Script(OP_HASH160 + OP_PUSHBYTES_20 + script_hash + OP_EQUAL)


def segwit_script(witness_version: int, program: bytes) -> Script:
    """
    P2WPKH | OP_0 + OP_PUSHBYTES_20 + pubkeyhash
    P2WSH  | OP_0 + OP_PUSHBYTES_32 + script_hash
    P2TR   | OP_1 + OP_PUSHBYTES_32 + xonly_pubkey
    """
    version_op = OP_0 if witness_version == 0 else bytes([0x50 + witness_version])
    return Script(version_op + pushdata(program))


def encode_locking_script(address: str) -> Script:
    """
    Returns the locking script paying to a base58check P2PKH or P2SH address, or a bech32/bech32m segwit address,
    mainnet or testnet. Raises AddressEncodingError naming the address otherwise.
    """
    if not isinstance(address, str) or not address:
        raise AddressEncodingError(str(address), "empty or non-string address")

    if address.lower().startswith((NETWORK.HRP_MAINNET + "1", NETWORK.HRP_TESTNET + "1")):
        try:
            witness_version, program, _ = decode_segwit_address(address)
        except DataEncodingError as e:
            raise AddressEncodingError(address, str(e)) from e
        return segwit_script(witness_version, program)

    try:
        payload = decode_base58check(address)
    except DataEncodingError as e:
        raise AddressEncodingError(address, str(e)) from e

    if len(payload) != HASH160_BYTES + 1:
        raise AddressEncodingError(address, f"payload is {len(payload)} bytes, expected {HASH160_BYTES + 1}")

    prefix, hash_bytes = payload[:1], payload[1:]
    if prefix in _P2PKH_PREFIXES:
        return p2pkh_script(hash_bytes)
    if prefix in _P2SH_PREFIXES:
        return p2sh_script(hash_bytes)
    raise AddressEncodingError(address, f"unknown version byte {prefix.hex()}")


def p2pkh_address(pubkey: bytes, testnet: bool = False) -> str:
    prefix = NETWORK.P2PKH_TESTNET if testnet else NETWORK.P2PKH_MAINNET
    return encode_base58check(prefix + hash160(pubkey))


def p2sh_address(redeem_script: Script | bytes, testnet: bool = False) -> str:
    """
    The deposit address locking funds to HASH160(redeem_script)
    """
    prefix = NETWORK.P2SH_TESTNET if testnet else NETWORK.P2SH_MAINNET
    return encode_base58check(prefix + hash160(bytes(redeem_script)))


def op_return_script(data: bytes) -> Script:
    """
    OP_RETURN | OP_RETURN + push(data)
    """
    if len(data) > SCRIPT.MAX_STANDARD_OP_RETURN:
        raise ValueError(f"OP_RETURN data exceeds {SCRIPT.MAX_STANDARD_OP_RETURN} bytes")
    return Script(OP_RETURN + pushdata(data))


def op_return_output(data: bytes) -> TxOutput:
    """
    A zero value data-carrier output
    """
    return TxOutput(0, op_return_script(data).to_bytes())
