"""
Methods for testing encoding and decoding: base58, addresses and locking scripts
"""
from secrets import token_bytes

import pytest

from pegtx.core import AddressEncodingError, DataEncodingError, NETWORK
from pegtx.data import encode_base58, decode_base58, encode_base58check, decode_base58check, \
    decode_segwit_address, encode_segwit_address
from pegtx.script import encode_locking_script, p2pkh_address, p2sh_address, p2sh_script, op_return_output, Script
from pegtx.cryptography import hash160
from tests.utility import getrand_p2pkh_address, getrand_p2sh_address

# --- Known values: private key 1
GENERATOR_COMPRESSED = bytes.fromhex("0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798")
GENERATOR_HASH160 = bytes.fromhex("751e76e8199196d454941c45d1b3a323f1433bd6")
GENERATOR_ADDRESS = "1BgGZ9tcN4rm9KBzDn7KprQz87SZ26SAMH"


def test_base58_leading_zeros():
    data = b'\x00\x00' + token_bytes(20)
    encoded = encode_base58(data)
    assert encoded.startswith("11"), "Leading zero bytes must encode as '1'"
    assert decode_base58(encoded) == data, "Base58 failed to recover original bytes"


def test_base58check_checksum():
    data = token_bytes(21)
    encoded = encode_base58check(data)
    assert decode_base58check(encoded) == data

    # Swap the last character for a different valid one
    tampered = encoded[:-1] + ("2" if encoded[-1] != "2" else "3")
    with pytest.raises(DataEncodingError):
        decode_base58check(tampered)


def test_invalid_base58_character():
    with pytest.raises(DataEncodingError):
        decode_base58("0OIl")


def test_known_p2pkh_address():
    assert hash160(GENERATOR_COMPRESSED) == GENERATOR_HASH160, "Failed to recreate known hash160"
    assert p2pkh_address(GENERATOR_COMPRESSED) == GENERATOR_ADDRESS, "Failed to recreate known P2PKH address"

    script = encode_locking_script(GENERATOR_ADDRESS)
    assert script.to_bytes() == bytes.fromhex("76a914") + GENERATOR_HASH160 + bytes.fromhex("88ac")
    assert script.asm == ["OP_DUP", "OP_HASH160", "OP_PUSHBYTES_20", GENERATOR_HASH160.hex(), "OP_EQUALVERIFY",
                          "OP_CHECKSIG"]


@pytest.mark.parametrize("testnet", [False, True])
def test_random_addresses(testnet):
    p2pkh = getrand_p2pkh_address(testnet)
    p2sh = getrand_p2sh_address(testnet)

    p2pkh_bytes = encode_locking_script(p2pkh).to_bytes()
    p2sh_bytes = encode_locking_script(p2sh).to_bytes()

    assert len(p2pkh_bytes) == 25 and p2pkh_bytes[:3] == bytes.fromhex("76a914")
    assert len(p2sh_bytes) == 23 and p2sh_bytes[:2] == bytes.fromhex("a914") and p2sh_bytes[-1:] == b'\x87'
    assert p2sh_bytes[2:22] == decode_base58check(p2sh)[1:]


def test_p2sh_address_round_trip(redeem_script):
    address = p2sh_address(redeem_script)
    assert address.startswith("3"), "Mainnet P2SH address should start with '3'"
    assert encode_locking_script(address) == p2sh_script(hash160(redeem_script.to_bytes()))

    testnet_address = p2sh_address(redeem_script, testnet=True)
    assert testnet_address[0] == "2", "Testnet P2SH address should start with '2'"


@pytest.mark.parametrize("address", [
    "",
    "not an address",
    "bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t5",
    "bc1gmk9yu",
    "tb1qrp33g0q5c5txsp9arysrx4k6zdkfs4nce4xj0gdcccefvpysxf3q0sL5k7",
    "BC1QR508D6QEJXTDG4Y5R3ZARVARY0C5XW7KV8F3T4",
    encode_base58check(b'\x30' + token_bytes(20)),
    encode_base58check(NETWORK.P2PKH_MAINNET + token_bytes(19)),
    GENERATOR_ADDRESS[:-1] + "J",
])
def test_bad_addresses(address):
    with pytest.raises(AddressEncodingError) as exc_info:
        encode_locking_script(address)
    assert exc_info.value.address == address, "AddressEncodingError should carry the offending address"


def test_op_return_output():
    data = b"pegtx"
    output = op_return_output(data)
    assert output.amount == 0
    assert Script(output.scriptpubkey).asm == ["OP_RETURN", "OP_PUSHBYTES_5", data.hex()]

    with pytest.raises(ValueError):
        op_return_output(token_bytes(81))


@pytest.mark.parametrize("address, scriptpubkey_hex", [
    ("bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4", "0014751e76e8199196d454941c45d1b3a323f1433bd6"),
    ("BC1QW508D6QEJXTDG4Y5R3ZARVARY0C5XW7KV8F3T4", "0014751e76e8199196d454941c45d1b3a323f1433bd6"),
    ("tb1qrp33g0q5c5txsp9arysrx4k6zdkfs4nce4xj0gdcccefvpysxf3q0sl5k7",
     "00201863143c14c5166804bd19203356da136c985678cd4d27a1b8c6329604903262"),
    ("bc1p0xlxvlhemja6c4dqv22uapctqupfhlxm9h8z3k2e72q4k9hcz7vqzk5jj0",
     "512079be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"),
])
def test_segwit_locking_scripts(address, scriptpubkey_hex):
    assert encode_locking_script(address).to_hex() == scriptpubkey_hex, "Failed to recreate known segwit script"


def test_segwit_address_round_trip():
    witness_version, program, testnet = decode_segwit_address("bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4")
    assert (witness_version, program, testnet) == (0, GENERATOR_HASH160, False)
    assert encode_segwit_address(GENERATOR_HASH160) == "bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4"

    script_hash = token_bytes(32)
    address = encode_segwit_address(script_hash, testnet=True)
    assert address.startswith("tb1q")
    assert decode_segwit_address(address) == (0, script_hash, True)

    with pytest.raises(DataEncodingError):
        encode_segwit_address(token_bytes(21))
