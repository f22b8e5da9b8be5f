"""
Fee estimation under the legacy size model
"""
from pegtx.core import FEE, FeeError

__all__ = ["estimate_tx_size", "calculate_fee"]


def _check_count(value, name: str):
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise FeeError(f"{name} must be a non-negative integer: {value!r}")


def estimate_tx_size(num_inputs: int, num_outputs: int) -> int:
    """
    Estimated byte size of a legacy tx whose inputs all carry the P2SH redemption scriptsig
    """
    _check_count(num_inputs, "Input count")
    _check_count(num_outputs, "Output count")
    return FEE.TX_OVERHEAD + num_inputs * (FEE.INPUT_BASE + FEE.P2SH_SCRIPTSIG) + num_outputs * FEE.OUTPUT_BYTES


def calculate_fee(num_inputs: int, num_outputs: int, sats_per_byte: int) -> int:
    # Whole satoshis per byte only
    _check_count(sats_per_byte, "Fee rate")
    return estimate_tx_size(num_inputs, num_outputs) * sats_per_byte
