"""
pegtx: signed spends of UTXOs held under a shared P2SH redeem script

Natural call sequence:
    signer = PrivateKeySigner.from_wif(wif)
    redeem_script = deposit_redeem_script(signer.public_key, commitment)
    tx = build_signed_transaction(sats_per_byte, recipients, change_address, signer, utxos, redeem_script)
    raw_hex = tx.to_hex()
"""
from pegtx.builder import *
from pegtx.core.exceptions import *
