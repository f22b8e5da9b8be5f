"""
We test signature DER encoding and the private key signer
"""
from secrets import token_bytes, randbelow

import pytest

from pegtx.core import SigningError, DataEncodingError
from pegtx.cryptography import SECP256K1, verify_ecdsa
from pegtx.data import encode_der_signature, decode_der_signature
from pegtx.signing import PrivateKeySigner, Signer
from tests.utility import StubSigner

# --- Known values: private key 1
WIF_COMPRESSED = "KwDiBf89QgGbjEhKnhXJuH7LrciVrZi3qYjgd9M7rFU73sVHnoWn"
WIF_UNCOMPRESSED = "5HpHagT65TZzG1PH3CSu63k8DbpvD8s5ip4nEB3kEsreAnchuDf"
GENERATOR_ADDRESS = "1BgGZ9tcN4rm9KBzDn7KprQz87SZ26SAMH"


def test_der_encoding():
    r = randbelow(SECP256K1.order - 1) + 1
    s = randbelow(SECP256K1.order - 1) + 1

    encoded_sig = encode_der_signature(r, s)

    assert encoded_sig[0] == 0x30, "DER signature must start with a SEQUENCE tag"
    assert decode_der_signature(encoded_sig) == (r, s), "Failed to decode DER signature"


def test_bad_der_signature():
    with pytest.raises(DataEncodingError):
        decode_der_signature(token_bytes(70))


def test_known_wif():
    signer = PrivateKeySigner.from_wif(WIF_COMPRESSED)
    assert signer.compressed and not signer.testnet
    assert signer.public_point == SECP256K1.generator, "WIF for private key 1 should give the generator"
    assert signer.address == GENERATOR_ADDRESS
    assert signer.to_wif() == WIF_COMPRESSED

    uncompressed = PrivateKeySigner.from_wif(WIF_UNCOMPRESSED)
    assert not uncompressed.compressed
    assert len(uncompressed.public_key) == 65 and uncompressed.public_key[0] == 0x04
    assert uncompressed.to_wif() == WIF_UNCOMPRESSED


def test_testnet_wif_round_trip():
    testnet_signer = PrivateKeySigner(randbelow(SECP256K1.order - 1) + 1, testnet=True)
    recovered = PrivateKeySigner.from_wif(testnet_signer.to_wif())
    assert recovered.testnet and recovered.public_key == testnet_signer.public_key


def test_sign_appends_hash_type(key_signer):
    digest = token_bytes(32)
    signature = key_signer.sign(digest, 1)

    assert signature[-1] == 0x01, "Signature must end with the sighash byte"
    r, s = decode_der_signature(signature[:-1])
    assert verify_ecdsa((r, s), digest, key_signer.public_point), "Signature does not verify"
    assert key_signer.verify(signature, digest)
    assert key_signer.sign(digest, 1) == signature, "Signing should be deterministic"


def test_signers_satisfy_protocol(key_signer):
    assert isinstance(key_signer, Signer)
    assert isinstance(StubSigner(), Signer)


@pytest.mark.parametrize("private_key", [0, SECP256K1.order, token_bytes(31)])
def test_bad_private_keys(private_key):
    with pytest.raises(SigningError):
        PrivateKeySigner(private_key)


def test_bad_wif():
    with pytest.raises(SigningError):
        PrivateKeySigner.from_wif(WIF_COMPRESSED[:-1] + "x")


def test_bad_digest(key_signer):
    with pytest.raises(SigningError):
        key_signer.sign(token_bytes(31), 1)
    with pytest.raises(SigningError):
        key_signer.sign(token_bytes(32), 0x100)
