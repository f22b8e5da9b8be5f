"""
The Script class: an immutable byte script with data push helpers
"""
from pegtx.core import SERIALIZED, get_stream, ScriptError, SCRIPT
from pegtx.script.parser import to_asm

__all__ = ["Script", "pushdata"]


def pushdata(item: bytes) -> bytes:
    """
    For a given item, return the corresponding OP_CODES + Data for a datapush
    """
    length = len(item)
    if length <= SCRIPT.MAX_DIRECT_PUSH:
        return length.to_bytes(1, "little") + item
    elif length <= 0xff:
        return b'\x4c' + length.to_bytes(1, "little") + item
    elif length <= 0xffff:
        return b'\x4d' + length.to_bytes(2, "little") + item
    else:
        return b'\x4e' + length.to_bytes(4, "little") + item


class Script:
    """
    Raw script bytes. Scripts compare equal on their bytes.
    """
    __slots__ = ("_script",)

    def __init__(self, script: bytes = b''):
        if not isinstance(script, bytes):
            raise ScriptError(f"Script must be bytes, received {type(script)}")
        self._script = script

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        """Consumes the remainder of the stream"""
        return cls(get_stream(byte_stream).read())

    @classmethod
    def from_hex(cls, hex_string: str):
        return cls(bytes.fromhex(hex_string))

    @classmethod
    def from_pushes(cls, *items: bytes):
        return cls(b''.join(pushdata(item) for item in items))

    @property
    def script(self) -> bytes:
        return self._script

    @property
    def asm(self) -> list:
        return to_asm(self._script)

    def to_bytes(self) -> bytes:
        return self._script

    def to_hex(self) -> str:
        return self._script.hex()

    def to_dict(self) -> dict:
        return {
            "hex": self._script.hex(),
            "asm": " ".join(self.asm)
        }

    def __bytes__(self):
        return self._script

    def __len__(self):
        return len(self._script)

    def __eq__(self, other):
        if isinstance(other, Script):
            return self._script == other._script
        if isinstance(other, bytes):
            return self._script == other
        return NotImplemented

    def __hash__(self):
        return hash(self._script)

    def __repr__(self):
        return f"Script({self._script.hex()})"
