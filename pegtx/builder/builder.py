"""
build_signed_transaction: the pure function from (fee rate, recipients, change address, signer, UTXOs,
extra output, redeem script) to a fully signed legacy transaction
"""
from typing import Sequence

from pegtx.builder.outputs import assemble_outputs
from pegtx.builder.signing import unsigned_transaction, sign_inputs
from pegtx.core import TX, ScriptError, MalformedUtxoError
from pegtx.core.logging import get_logger
from pegtx.script import Script
from pegtx.signing import Signer
from pegtx.tx import Transaction, TxInput, TxOutput, UtxoAndValue, RecipientOutput

logger = get_logger(__name__)

__all__ = ["finalize_transaction", "build_signed_transaction"]


def finalize_transaction(outputs: Sequence[TxOutput], signed_inputs: Sequence[TxInput],
                         locktime: int = TX.DEFAULT_LOCKTIME) -> Transaction:
    return Transaction(
        inputs=list(signed_inputs),
        outputs=list(outputs),
        locktime=locktime,
        version=TX.LEGACY_VERSION
    )


def build_signed_transaction(sats_per_byte: int,
                             recipients: Sequence[RecipientOutput | tuple[str, int]],
                             change_address: str,
                             signer: Signer,
                             utxos: Sequence[UtxoAndValue],
                             redeem_script: Script | bytes,
                             extra_output: TxOutput = None,
                             max_workers: int | None = None,
                             locktime: int = TX.DEFAULT_LOCKTIME) -> Transaction:
    """
    Spends every given UTXO, all locked to P2SH(redeem_script), paying the recipients in order, then the extra
    output if given, then change if any remains after the fee.

    Raises:
        MalformedUtxoError: a UTXO can't become an input
        AddressEncodingError: a recipient or the change address can't become a locking script
        InsufficientFundsError: recipients + fee exceed the UTXO total
        SigningError: the signer failed on any input

    No transaction is returned unless every step succeeds.
    """
    if isinstance(redeem_script, bytes):
        redeem_script = Script(redeem_script)
    if len(redeem_script) == 0:
        raise ScriptError("Redeem script must not be empty")
    if not utxos:
        raise MalformedUtxoError("No UTXOs supplied to spend")

    logger.debug(f"Redeem script serialized: {redeem_script.to_hex()}")

    utxos = list(utxos)
    for utxo in utxos:
        utxo.validate()

    plan = assemble_outputs(list(recipients), change_address, utxos, sats_per_byte, extra_output)
    unsigned_tx = unsigned_transaction(plan.outputs, utxos, locktime)
    signed_inputs = sign_inputs(unsigned_tx, signer, redeem_script, max_workers)
    tx = finalize_transaction(plan.outputs, signed_inputs, locktime)

    logger.info(f"Signed tx {tx.txid[::-1].hex()}: {len(tx.inputs)} input(s), {len(tx.outputs)} output(s)")
    return tx
