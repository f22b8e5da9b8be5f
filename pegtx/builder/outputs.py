"""
Output assembly: recipient outputs, the optional extra output, fee and change
"""
from dataclasses import dataclass

from pegtx.builder.fee import calculate_fee
from pegtx.core import InsufficientFundsError
from pegtx.core.logging import get_logger
from pegtx.script.scriptpubkey import encode_locking_script
from pegtx.tx import TxOutput, UtxoAndValue, RecipientOutput, get_total_value_of_utxos

logger = get_logger(__name__)

__all__ = ["OutputPlan", "assemble_outputs", "create_new_tx_output"]


@dataclass(frozen=True)
class OutputPlan:
    """
    The final ordered outputs of a spend, with the accounting that produced them
    """
    outputs: tuple[TxOutput, ...]
    utxo_total: int
    total_to_spend: int
    fee: int
    change: int

    @property
    def has_change(self) -> bool:
        return self.change > 0


def create_new_tx_output(amount: int, address: str) -> TxOutput:
    return TxOutput(amount, encode_locking_script(address).to_bytes())


def assemble_outputs(recipients: list[RecipientOutput | tuple[str, int]], change_address: str,
                     utxos: list[UtxoAndValue], sats_per_byte: int, extra_output: TxOutput = None) -> OutputPlan:
    """
    Builds the ordered outputs:
        recipients (in order) || extra output (if given) || change (only if > 0)

    Recipient addresses are resolved before the funds check. The change address is only resolved when there is
    change to pay. The fee counts every input and every non-change output.
    Raises InsufficientFundsError if total_to_spend + fee > utxo_total.
    """
    recipients = [r if isinstance(r, RecipientOutput) else RecipientOutput(*r) for r in recipients]

    outputs = [create_new_tx_output(r.amount, r.address) for r in recipients]
    if extra_output is not None:
        outputs.append(extra_output)

    total_to_spend = sum(r.amount for r in recipients)
    utxo_total = get_total_value_of_utxos(utxos)
    fee = calculate_fee(len(utxos), len(outputs), sats_per_byte)

    logger.info(f"UTXO(s) total:  {utxo_total}")
    logger.info(f"Outgoing total: {total_to_spend}")
    logger.info(f"Tx fee:         {fee}")

    if total_to_spend + fee > utxo_total:
        raise InsufficientFundsError(utxo_total, total_to_spend, fee)

    change = utxo_total - total_to_spend - fee
    logger.info(f"Change amount:  {change}")
    if change > 0:
        outputs.append(create_new_tx_output(change, change_address))

    return OutputPlan(tuple(outputs), utxo_total, total_to_spend, fee, change)
