"""
The classes for legacy (non-segwit) transactions
"""
from pegtx.core import Serializable, SERIALIZED, get_stream, read_little_int, read_stream, TX, ReadError
from pegtx.cryptography import hash256
from pegtx.data import read_compact_size, write_compact_size

__all__ = ["TxInput", "TxOutput", "WitnessField", "Transaction"]


class WitnessField(Serializable):
    """
    WitnessField
    -------------------------------------------------------------
    |   Field           |   Byte Size   |   Format              |
    -------------------------------------------------------------
    |   Stack Items     |   var         |   CompactSize         |
    =============================================================
    |   Size            |   var         |   CompactSize         |
    |   Item            |   var         |   bytes               |
    =============================================================
    |   the Size | Item format repeats for all witness items    |
    -------------------------------------------------------------

    Witness data travels with its input but is never part of the legacy serialization.
    """
    __slots__ = ("items",)

    def __init__(self, items: list | bytes = None):
        if items is None:
            items = []
        self.items = list(items) if isinstance(items, list) else [items]

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        stack_items = read_compact_size(stream)
        witness_items = []
        for _ in range(stack_items):
            item_len = read_compact_size(stream)
            witness_items.append(read_stream(stream, item_len, "WitnessField data"))
        return cls(witness_items)

    def to_bytes(self) -> bytes:
        parts = [write_compact_size(len(self.items))]
        for item in self.items:
            parts.append(write_compact_size(len(item)))
            parts.append(item)
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "stack_items": len(self.items),
            "items": [item.hex() for item in self.items]
        }


class TxInput(Serializable):
    """
    =============================================================================
    |   name            |   data type   |   format              |   byte size   |
    =============================================================================
    |   txid            |   bytes       |   natural byte order  |   32          |
    |   vout            |   int         |   little-endian       |   4           |
    |   scriptsig_size  |               |   compactSize         |   var         |
    |   scriptsig       |   bytes       |   script bytes        |   var         |
    |   sequence        |   int         |   little-endian       |   4           |
    =============================================================================
    """
    __slots__ = ("txid", "vout", "scriptsig", "sequence", "witness")

    def __init__(self, txid: bytes, vout: int | bytes, scriptsig: bytes = b'',
                 sequence: int | bytes = TX.DEFAULT_SEQUENCE, witness: WitnessField = None):
        self.txid = txid
        self.vout = vout if isinstance(vout, int) else int.from_bytes(vout, "little")
        self.scriptsig = scriptsig
        self.sequence = sequence if isinstance(sequence, int) else int.from_bytes(sequence, "little")
        self.witness = witness if witness is not None else WitnessField()

    @property
    def outpoint(self) -> bytes:
        return self.txid + self.vout.to_bytes(TX.VOUT, "little")

    def with_scriptsig(self, scriptsig: bytes) -> "TxInput":
        """
        Return a copy of this input carrying the given scriptsig. The original is left untouched.
        """
        return TxInput(self.txid, self.vout, scriptsig, self.sequence, WitnessField(self.witness.items))

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        txid = read_stream(stream, TX.TXID, "txid")
        vout = read_little_int(stream, TX.VOUT, "vout")
        scriptsig_size = read_compact_size(stream)
        scriptsig = read_stream(stream, scriptsig_size, "scriptsig")
        sequence = read_little_int(stream, TX.SEQUENCE, "sequence")

        return cls(txid, vout, scriptsig, sequence)

    def to_bytes(self) -> bytes:
        """
        txid || vout || scriptsig_size || scriptsig || sequence
        """
        parts = [
            self.txid,
            self.vout.to_bytes(TX.VOUT, "little"),
            write_compact_size(len(self.scriptsig)),
            self.scriptsig,
            self.sequence.to_bytes(TX.SEQUENCE, "little")
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "txid": self.txid[::-1].hex(),  # Display order
            "vout": self.vout,
            "scriptsig": self.scriptsig.hex(),
            "sequence": self.sequence
        }


class TxOutput(Serializable):
    """
    -----------------------------------------------------------------
    |   Field               |   Byte Size   |   Format              |
    -----------------------------------------------------------------
    |   Amount              |   8           |   little-endian       |
    |   scriptpubkey_size   |   var         |   CompactSize         |
    |   scriptpubkey        |   var         |   Script              |
    -----------------------------------------------------------------
    """
    __slots__ = ("amount", "scriptpubkey")

    def __init__(self, amount: int | bytes, scriptpubkey: bytes):
        self.amount: int = amount if isinstance(amount, int) else int.from_bytes(amount, "little")
        self.scriptpubkey = scriptpubkey

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        amount = read_little_int(stream, TX.AMOUNT, "amount")
        scriptpubkey_size = read_compact_size(stream)
        scriptpubkey = read_stream(stream, scriptpubkey_size, "scriptpubkey")

        return cls(amount, scriptpubkey)

    def to_bytes(self) -> bytes:
        """
        amount || scriptpubkey_size || scriptpubkey
        """
        return self.amount.to_bytes(TX.AMOUNT, "little") + write_compact_size(len(self.scriptpubkey)) + \
            self.scriptpubkey

    def to_dict(self) -> dict:
        return {
            "amount": self.amount,
            "scriptpubkey": self.scriptpubkey.hex()
        }


class Transaction(Serializable):
    """
    Legacy Transaction
    -------------------------------------------------------------
    |   Field           |   Byte Size   |   Format              |
    -------------------------------------------------------------
    |   Version         |   4           |   little-endian       |
    |   input_count     |   var         |   CompactSize         |
    |   inputs          |   var         |   TxInput             |
    |   output_count    |   var         |   CompactSize         |
    |   outputs         |   var         |   TxOutput            |
    |   locktime        |   4           |   little-endian       |
    -------------------------------------------------------------
    """
    __slots__ = ("version", "inputs", "outputs", "locktime")

    def __init__(self, inputs: list[TxInput] = None, outputs: list[TxOutput] = None,
                 locktime: int = TX.DEFAULT_LOCKTIME, version: int = TX.LEGACY_VERSION):
        self.inputs = inputs or []
        self.outputs = outputs or []
        self.version = version
        self.locktime = locktime

    @property
    def txid(self) -> bytes:
        """HASH256 of the serialized tx, natural byte order"""
        return hash256(self.to_bytes())

    @property
    def total_output(self) -> int:
        return sum(o.amount for o in self.outputs)

    def clone(self) -> "Transaction":
        """
        A deep copy, witness fields included
        """
        return Transaction(
            inputs=[i.with_scriptsig(i.scriptsig) for i in self.inputs],
            outputs=[TxOutput(o.amount, o.scriptpubkey) for o in self.outputs],
            locktime=self.locktime,
            version=self.version
        )

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        version = read_little_int(stream, TX.VERSION, "version")

        num_inputs = read_compact_size(stream)
        if num_inputs == 0:
            raise ReadError("Segwit marker found or empty input list: only legacy transactions are supported")
        inputs = [TxInput.from_bytes(stream) for _ in range(num_inputs)]

        num_outputs = read_compact_size(stream)
        outputs = [TxOutput.from_bytes(stream) for _ in range(num_outputs)]

        locktime = read_little_int(stream, TX.LOCKTIME, "locktime")

        return cls(inputs, outputs, locktime, version)

    def to_bytes(self) -> bytes:
        parts = [
            self.version.to_bytes(TX.VERSION, "little"),
            write_compact_size(len(self.inputs)),
            *[i.to_bytes() for i in self.inputs],
            write_compact_size(len(self.outputs)),
            *[o.to_bytes() for o in self.outputs],
            self.locktime.to_bytes(TX.LOCKTIME, "little")
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "txid": self.txid[::-1].hex(),  # Reverse byte order for display
            "bytes": self.length,
            "version": self.version,
            "inputs": [i.to_dict() for i in self.inputs],
            "outputs": [o.to_dict() for o in self.outputs],
            "locktime": self.locktime
        }
