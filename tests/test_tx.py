"""
We test the various parts of a legacy transaction
"""
import json
from secrets import token_bytes

import pytest

from pegtx.core import TX, ReadError
from pegtx.tx import TxInput, TxOutput, WitnessField, Transaction
from tests.utility import getrand_txinput, getrand_txoutput, getrand_tx


def test_txinput():
    """
    We test the serialization and class method of TxInput
    """
    random_txinput = getrand_txinput()
    recovered_txinput = TxInput.from_bytes(random_txinput.to_bytes())

    assert recovered_txinput == random_txinput, "Failed to reconstruct TxInput using to_bytes -> from_bytes method"


def test_txinput_layout():
    txid = token_bytes(TX.TXID)
    txin = TxInput(txid, 1, b'\xab\xcd', 0xfffffffe)
    expected = txid + b'\x01\x00\x00\x00' + b'\x02\xab\xcd' + b'\xfe\xff\xff\xff'
    assert txin.to_bytes() == expected, "TxInput serialization layout mismatch"
    assert txin.outpoint == txid + b'\x01\x00\x00\x00'


def test_with_scriptsig_copies():
    original = TxInput(token_bytes(TX.TXID), 0, b'', witness=WitnessField([b'\x01\x02']))
    signed = original.with_scriptsig(b'\x51')

    assert original.scriptsig == b'', "with_scriptsig mutated the original input"
    assert signed.scriptsig == b'\x51'
    assert signed.outpoint == original.outpoint and signed.sequence == original.sequence
    assert signed.witness.items == [b'\x01\x02'], "Witness field not carried over"
    assert signed.witness is not original.witness


def test_txoutput():
    random_txoutput = getrand_txoutput()
    recovered_txoutput = TxOutput.from_bytes(random_txoutput.to_bytes())

    assert recovered_txoutput == random_txoutput, "Failed to reconstruct TxOutput using to_bytes -> from_bytes method"


def test_transaction():
    random_tx = getrand_tx()
    recovered_tx = Transaction.from_bytes(random_tx.to_bytes())

    assert recovered_tx == random_tx, "Failed to reconstruct Transaction using to_bytes -> from_bytes method"
    assert recovered_tx.txid == random_tx.txid


def test_witness_not_serialized():
    txin = TxInput(token_bytes(TX.TXID), 0, b'', witness=WitnessField([token_bytes(32)]))
    tx_with_witness = Transaction([txin], [getrand_txoutput()])
    tx_without = Transaction([TxInput(txin.txid, 0, b'')], tx_with_witness.outputs)
    assert tx_with_witness.to_bytes() == tx_without.to_bytes(), "Witness data leaked into legacy serialization"


def test_clone_is_independent():
    random_tx = getrand_tx()
    copied = random_tx.clone()
    copied.inputs[0].scriptsig = b''
    copied.outputs[0].amount = 0

    assert random_tx.inputs[0].scriptsig != b'', "Clone shares inputs with the original"
    assert copied != random_tx


def test_empty_input_list_rejected():
    with pytest.raises(ReadError):
        Transaction.from_bytes(bytes.fromhex("0100000000010000000000000000"))


def test_tx_json():
    random_tx = getrand_tx()
    tx_dict = json.loads(random_tx.to_json())

    assert tx_dict["txid"] == random_tx.txid[::-1].hex(), "Display txid must be byte-reversed"
    assert tx_dict["bytes"] == len(random_tx.to_bytes())
    assert len(tx_dict["inputs"]) == len(random_tx.inputs)
    assert tx_dict["inputs"][0]["txid"] == random_tx.inputs[0].txid[::-1].hex()
