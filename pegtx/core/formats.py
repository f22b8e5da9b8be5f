"""
The Bitcoin standard formats, and the fixed policy values used by the transaction builder
"""
from typing import Final

__all__ = ["DATA", "ECC", "TX", "FEE", "SCRIPT", "NETWORK", "OPCODES"]


class DATA:
    """
    Constants used in data manipulation
    """
    MAX_COMPACTSIZE: Final[int] = 0xffffffffffffffff


class ECC:
    COORD_BYTES: Final[int] = 32
    PRIVATE_KEY_BYTES: Final[int] = 32


class TX:
    """
    Transaction byte sizes and fixed header values
    """
    TXID: Final[int] = 32
    VOUT: Final[int] = 4
    SEQUENCE: Final[int] = 4
    AMOUNT: Final[int] = 8
    VERSION: Final[int] = 4
    LOCKTIME: Final[int] = 4
    LEGACY_VERSION: Final[int] = 1
    DEFAULT_LOCKTIME: Final[int] = 0
    DEFAULT_SEQUENCE: Final[int] = 0xffffffff
    MAX_VOUT: Final[int] = 0xffffffff


class FEE:
    """
    Legacy (non-segwit) size model used for fee estimation.

    Every input is assumed to carry the P2SH redemption script-sig the builder produces:
        push(DER signature + sighash byte) push(redeem script)
    -----------------------------------------------------------------
    |   Field                   |   Byte Size                       |
    -----------------------------------------------------------------
    |   tx overhead             |   4 version + 4 locktime +        |
    |                           |   1 input count + 1 output count  |
    |   input base              |   32 txid + 4 vout + 4 sequence + |
    |                           |   1 scriptsig length              |
    |   p2sh scriptsig          |   1 + 73 signature push +         |
    |                           |   1 + 69 redeem script push       |
    |   output                  |   8 amount + 1 length + 25 script |
    -----------------------------------------------------------------
    """
    TX_OVERHEAD: Final[int] = 10
    INPUT_BASE: Final[int] = 41
    P2SH_SCRIPTSIG: Final[int] = 144
    OUTPUT_BYTES: Final[int] = 34


class SCRIPT:
    """
    Constants in use in the Script
    """
    MAX_DIRECT_PUSH: Final[int] = 0x4b
    MAX_STANDARD_OP_RETURN: Final[int] = 80
    COMMITMENT_BYTES: Final[int] = 32


class NETWORK:
    """
    Base58Check version bytes and bech32 human readable parts
    """
    P2PKH_MAINNET: Final[bytes] = b'\x00'
    P2PKH_TESTNET: Final[bytes] = b'\x6f'
    P2SH_MAINNET: Final[bytes] = b'\x05'
    P2SH_TESTNET: Final[bytes] = b'\xc4'
    WIF_MAINNET: Final[bytes] = b'\x80'
    WIF_TESTNET: Final[bytes] = b'\xef'

    # -- HRP codes for bech32
    HRP_MAINNET: Final[str] = 'bc'
    HRP_TESTNET: Final[str] = 'tb'


# --- OPCODES DICT FOR ASM --- #

OPCODES = {
    0x00: "OP_0",
    0x4c: "OP_PUSHDATA1",
    0x4d: "OP_PUSHDATA2",
    0x4e: "OP_PUSHDATA4",
    0x4f: "OP_1NEGATE",
    0x51: "OP_1",
    0x52: "OP_2",
    0x53: "OP_3",
    0x54: "OP_4",
    0x55: "OP_5",
    0x56: "OP_6",
    0x57: "OP_7",
    0x58: "OP_8",
    0x59: "OP_9",
    0x5a: "OP_10",
    0x5b: "OP_11",
    0x5c: "OP_12",
    0x5d: "OP_13",
    0x5e: "OP_14",
    0x5f: "OP_15",
    0x60: "OP_16",

    # control
    0x61: "OP_NOP",
    0x63: "OP_IF",
    0x64: "OP_NOTIF",
    0x67: "OP_ELSE",
    0x68: "OP_ENDIF",
    0x69: "OP_VERIFY",
    0x6a: "OP_RETURN",

    # stack ops
    0x6d: "OP_2DROP",
    0x75: "OP_DROP",
    0x76: "OP_DUP",
    0x7c: "OP_SWAP",

    # bit logic
    0x87: "OP_EQUAL",
    0x88: "OP_EQUALVERIFY",

    # crypto
    0xa6: "OP_RIPEMD160",
    0xa8: "OP_SHA256",
    0xa9: "OP_HASH160",
    0xaa: "OP_HASH256",
    0xab: "OP_CODESEPARATOR",
    0xac: "OP_CHECKSIG",
    0xad: "OP_CHECKSIGVERIFY",
    0xae: "OP_CHECKMULTISIG",
    0xaf: "OP_CHECKMULTISIGVERIFY",

    # expansion
    0xb1: "OP_CHECKLOCKTIMEVERIFY",
    0xb2: "OP_CHECKSEQUENCEVERIFY",
}
