"""
Serializable: the wire-format base class for transaction parts
"""
import json
from abc import ABC, abstractmethod

from pegtx.core.byte_stream import SERIALIZED

__all__ = ["Serializable"]


class Serializable(ABC):
    """
    Subclasses define the byte layout (from_bytes/to_bytes) and a display dict. Hex, JSON, length and equality
    all follow from the bytes.
    """

    @classmethod
    @abstractmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        ...

    @classmethod
    def from_hex(cls, hex_string: str):
        return cls.from_bytes(bytes.fromhex(hex_string))

    @abstractmethod
    def to_bytes(self) -> bytes:
        ...

    @abstractmethod
    def to_dict(self) -> dict:
        ...

    @property
    def length(self) -> int:
        return len(self.to_bytes())

    def to_hex(self) -> str:
        return self.to_bytes().hex()

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def __eq__(self, other) -> bool:
        # Same bytes on the wire means the same object
        if not isinstance(other, Serializable):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_hex()})"
