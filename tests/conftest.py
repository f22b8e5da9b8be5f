"""
Fixtures used in the tests
"""
import pytest

from pegtx.script import deposit_redeem_script, deposit_commitment
from pegtx.signing import PrivateKeySigner
from tests.utility import StubSigner, FailingSigner, TEST_PRIVATE_KEY, TEST_DESTINATION, TEST_NONCE



@pytest.fixture()
def stub_signer():
    return StubSigner()


@pytest.fixture()
def failing_signer():
    return FailingSigner()


@pytest.fixture(scope="session")
def key_signer():
    return PrivateKeySigner(TEST_PRIVATE_KEY)


@pytest.fixture(scope="session")
def redeem_script(key_signer):
    commitment = deposit_commitment(TEST_DESTINATION, TEST_NONCE)
    return deposit_redeem_script(key_signer.public_key, commitment)
