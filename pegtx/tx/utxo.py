"""
UtxoAndValue and RecipientOutput: the caller supplied inputs and payments of a spend

UTXO lists arrive in the Esplora JSON shape:
    [{"txid": "<display hex>", "vout": 0, "value": 100000, "status": {"confirmed": true, ...}}, ...]
"""
import json
from dataclasses import dataclass, field

from pegtx.core import TX, MalformedUtxoError, AmountError
from pegtx.core.logging import get_logger
from pegtx.tx.tx import TxInput, WitnessField

logger = get_logger(__name__)

__all__ = ["UtxoAndValue", "RecipientOutput", "utxos_from_json", "get_total_value_of_utxos"]


@dataclass(frozen=True)
class UtxoAndValue:
    """
    An unspent output reference (txid in natural byte order, vout, sequence, witness items) and its value in
    satoshis.
    """
    txid: bytes
    vout: int
    value: int
    sequence: int = TX.DEFAULT_SEQUENCE
    witness: tuple[bytes, ...] = field(default_factory=tuple)

    @classmethod
    def from_display_txid(cls, txid_hex: str, vout: int, value: int, sequence: int = TX.DEFAULT_SEQUENCE):
        """
        Build from a txid as shown by explorers (reversed byte order hex)
        """
        try:
            txid = bytes.fromhex(txid_hex)[::-1]
        except (ValueError, TypeError) as e:
            raise MalformedUtxoError(f"Invalid txid hex: {txid_hex!r}") from e
        return cls(txid, vout, value, sequence)

    @property
    def outpoint(self) -> bytes:
        return self.txid + self.vout.to_bytes(TX.VOUT, "little")

    def validate(self):
        if not isinstance(self.txid, bytes) or len(self.txid) != TX.TXID:
            raise MalformedUtxoError(f"UTXO txid must be {TX.TXID} bytes")
        if not isinstance(self.vout, int) or not (0 <= self.vout <= TX.MAX_VOUT):
            raise MalformedUtxoError(f"UTXO vout out of range: {self.vout!r}")
        if not isinstance(self.sequence, int) or not (0 <= self.sequence <= 0xffffffff):
            raise MalformedUtxoError(f"UTXO sequence out of range: {self.sequence!r}")
        if not isinstance(self.value, int) or isinstance(self.value, bool) or self.value <= 0:
            raise MalformedUtxoError(f"UTXO value must be a positive number of satoshis: {self.value!r}")

    def to_txinput(self) -> TxInput:
        """
        Convert into an unsigned input with empty scriptsig
        """
        self.validate()
        return TxInput(self.txid, self.vout, b'', self.sequence, WitnessField(list(self.witness)))

    def __str__(self):
        return f"UTXO({self.txid[::-1].hex()[:8]}...:{self.vout}, {self.value} sats)"


@dataclass(frozen=True)
class RecipientOutput:
    """
    A payment of `amount` satoshis to `address`
    """
    address: str
    amount: int

    def __post_init__(self):
        if not isinstance(self.amount, int) or isinstance(self.amount, bool) or self.amount <= 0:
            raise AmountError(f"Recipient amount must be a positive number of satoshis: {self.amount!r}")


def get_total_value_of_utxos(utxos: list[UtxoAndValue]) -> int:
    return sum(u.value for u in utxos)


def utxos_from_json(json_string: str, confirmed_only: bool = False) -> list[UtxoAndValue]:
    """
    Parse an Esplora style UTXO list, preserving its order
    """
    try:
        entries = json.loads(json_string)
    except json.JSONDecodeError as e:
        raise MalformedUtxoError(f"Could not parse UTXO list: {e}") from e

    if not isinstance(entries, list):
        raise MalformedUtxoError("UTXO list JSON must be an array")

    utxos = []
    for entry in entries:
        try:
            txid_hex, vout, value = entry["txid"], entry["vout"], entry["value"]
        except (KeyError, TypeError) as e:
            raise MalformedUtxoError(f"UTXO entry missing field: {entry!r}") from e

        if confirmed_only and not (entry.get("status") or {}).get("confirmed", False):
            logger.debug(f"Skipping unconfirmed UTXO {txid_hex}:{vout}")
            continue

        utxo = UtxoAndValue.from_display_txid(txid_hex, vout, value)
        utxo.validate()
        utxos.append(utxo)

    logger.info(f"{len(utxos)} UTXO(s) in list")
    return utxos
