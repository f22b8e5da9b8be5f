"""
The digest-and-sign step: one signature and one P2SH scriptsig per input, all against the shared redeem script
"""
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from pegtx.core import SigningError, TX
from pegtx.core.logging import get_logger
from pegtx.script import Script, SigHash, legacy_sighash, p2sh_scriptsig
from pegtx.signing import Signer
from pegtx.tx import Transaction, TxInput, TxOutput, UtxoAndValue

logger = get_logger(__name__)

__all__ = ["unsigned_transaction", "sign_input", "sign_inputs"]


def unsigned_transaction(outputs: Sequence[TxOutput], utxos: Sequence[UtxoAndValue],
                         locktime: int = TX.DEFAULT_LOCKTIME) -> Transaction:
    """
    All final outputs and all inputs in supplied order, every scriptsig empty
    """
    return Transaction(
        inputs=[utxo.to_txinput() for utxo in utxos],
        outputs=list(outputs),
        locktime=locktime,
        version=TX.LEGACY_VERSION
    )


def sign_input(unsigned_tx: Transaction, input_index: int, signer: Signer, redeem_script: Script) -> TxInput:
    """
    Returns a copy of input `input_index` carrying push(signature) push(redeem_script).

    The redeem script, not the input's previous locking script, is the script code for the sighash.
    """
    sighash = legacy_sighash(unsigned_tx, input_index, redeem_script, SigHash.ALL)
    logger.debug(f"Input {input_index} sighash: {sighash.hex()}")

    try:
        signature = signer.sign(sighash, SigHash.ALL)
    except SigningError:
        raise
    except Exception as e:
        raise SigningError(f"Failed to sign input {input_index}: {e}") from e

    scriptsig = p2sh_scriptsig(signature, redeem_script)
    return unsigned_tx.inputs[input_index].with_scriptsig(scriptsig.to_bytes())


def sign_inputs(unsigned_tx: Transaction, signer: Signer, redeem_script: Script,
                max_workers: int | None = None) -> list[TxInput]:
    """
    Signs every input of the unsigned tx. Each index depends only on the shared outputs and redeem script, so
    with max_workers > 1 the indices are signed in a thread pool. Results come back in input order either way.
    """
    indices = range(len(unsigned_tx.inputs))

    def _sign(i: int) -> TxInput:
        return sign_input(unsigned_tx, i, signer, redeem_script)

    if max_workers is None or max_workers <= 1 or len(indices) <= 1:
        return [_sign(i) for i in indices]

    with ThreadPoolExecutor(max_workers=min(max_workers, len(indices))) as executor:
        return list(executor.map(_sign, indices))
