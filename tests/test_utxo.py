"""
Tests for UtxoAndValue, RecipientOutput and UTXO list parsing
"""
import json
from secrets import token_bytes

import pytest

from pegtx.core import TX, MalformedUtxoError, AmountError
from pegtx.tx import UtxoAndValue, RecipientOutput, utxos_from_json, get_total_value_of_utxos
from tests.utility import getrand_utxo

DISPLAY_TXID = "29722452aa38204350f944db8a6a82eda46c85cba742e900c8a122ea9c4269da"


def test_to_txinput():
    utxo = getrand_utxo()
    txin = utxo.to_txinput()

    assert txin.txid == utxo.txid and txin.vout == utxo.vout
    assert txin.scriptsig == b'', "Unsigned input should carry an empty scriptsig"
    assert txin.sequence == TX.DEFAULT_SEQUENCE
    assert txin.outpoint == utxo.outpoint


def test_display_txid_is_reversed():
    utxo = UtxoAndValue.from_display_txid(DISPLAY_TXID, 0, 1000)
    assert utxo.txid == bytes.fromhex(DISPLAY_TXID)[::-1]


@pytest.mark.parametrize("txid, vout, value", [
    (token_bytes(31), 0, 1000),
    (token_bytes(TX.TXID), -1, 1000),
    (token_bytes(TX.TXID), 0x100000000, 1000),
    (token_bytes(TX.TXID), 0, 0),
    (token_bytes(TX.TXID), 0, -5),
    (token_bytes(TX.TXID), 0, True),
])
def test_malformed_utxo(txid, vout, value):
    with pytest.raises(MalformedUtxoError):
        UtxoAndValue(txid, vout, value).to_txinput()


def test_bad_display_txid():
    with pytest.raises(MalformedUtxoError):
        UtxoAndValue.from_display_txid("not-hex", 0, 1000)


def test_recipient_amounts():
    assert RecipientOutput("addr", 1).amount == 1
    for bad_amount in [0, -1, 1.5, True]:
        with pytest.raises(AmountError):
            RecipientOutput("addr", bad_amount)


def test_utxos_from_json():
    utxo_list = [
        {"txid": DISPLAY_TXID, "vout": 1, "value": 5000, "status": {"confirmed": True, "block_height": 100}},
        {"txid": "00" * 32, "vout": 0, "value": 7000, "status": {"confirmed": False}},
    ]
    utxos = utxos_from_json(json.dumps(utxo_list))

    assert [u.value for u in utxos] == [5000, 7000], "UTXO order or values not preserved"
    assert utxos[0].txid == bytes.fromhex(DISPLAY_TXID)[::-1]
    assert get_total_value_of_utxos(utxos) == 12000

    confirmed = utxos_from_json(json.dumps(utxo_list), confirmed_only=True)
    assert len(confirmed) == 1 and confirmed[0].vout == 1


@pytest.mark.parametrize("json_string", [
    "not json",
    json.dumps({"txid": DISPLAY_TXID}),
    json.dumps([{"txid": DISPLAY_TXID, "vout": 0}]),
    json.dumps([{"txid": DISPLAY_TXID, "vout": 0, "value": 0}]),
    json.dumps([{"txid": DISPLAY_TXID, "vout": 0, "value": True}]),
])
def test_utxos_from_bad_json(json_string):
    with pytest.raises(MalformedUtxoError):
        utxos_from_json(json_string)


def test_utxos_from_json_null_status():
    utxo_list = [
        {"txid": DISPLAY_TXID, "vout": 0, "value": 5000, "status": None},
        {"txid": "00" * 32, "vout": 2, "value": 7000, "status": {"confirmed": True}},
    ]
    assert len(utxos_from_json(json.dumps(utxo_list))) == 2

    confirmed = utxos_from_json(json.dumps(utxo_list), confirmed_only=True)
    assert [u.vout for u in confirmed] == [2], "A null status should count as unconfirmed"
