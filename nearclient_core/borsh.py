"""
nearclient_core.borsh
---------------------
Minimal Borsh-style binary codec used for keys and signatures on the wire.

Serialization is plain concatenation of each field in declared order. There
are no headers and no length prefixes: every payload in this package has a
fixed length known to its type.

Serializable types implement:

- ``serialize(self, writer: BinaryWriter) -> None``
- ``deserialize(cls, reader: BinaryReader)`` as a classmethod
"""

from __future__ import annotations
from typing import Any, Type, TypeVar
from .errors import TrailingDataError, UnexpectedEofError

T = TypeVar("T")


class BinaryWriter:
    def __init__(self):
        self._buf = bytearray()

    def write_u8(self, value: int) -> None:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"u8 out of range: {value}")
        self._buf.append(value)

    def write_fixed(self, data: bytes) -> None:
        self._buf.extend(data)

    def write(self, obj: Any) -> None:
        obj.serialize(self)

    def to_bytes(self) -> bytes:
        return bytes(self._buf)

    def __len__(self) -> int:
        return len(self._buf)


class BinaryReader:
    """Forward-only cursor over a byte sequence."""

    def __init__(self, data: bytes):
        self._data = bytes(data)
        self._offset = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def read_u8(self) -> int:
        return self.read_fixed(1)[0]

    def read_fixed(self, n: int) -> bytes:
        if self.remaining < n:
            raise UnexpectedEofError(
                f"expected {n} bytes at offset {self._offset}, only {self.remaining} left"
            )
        chunk = self._data[self._offset:self._offset + n]
        self._offset += n
        return chunk

    def read(self, cls: Type[T]) -> T:
        return cls.deserialize(self)


class FixedLengthBytes:
    """
    Immutable byte array whose length is part of its type.

    Subclasses set ``fixed_length``. Constructing one from a sequence of any
    other length raises ValueError; parsers check lengths first.
    """
    fixed_length: int = 0

    __slots__ = ("_bytes",)

    def __init__(self, data: bytes):
        data = bytes(data)
        if len(data) != self.fixed_length:
            raise ValueError(
                f"{type(self).__name__} requires {self.fixed_length} bytes, got {len(data)}"
            )
        object.__setattr__(self, "_bytes", data)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def bytes(self) -> bytes:
        return self._bytes

    def __bytes__(self) -> bytes:
        return self._bytes

    def __len__(self) -> int:
        return self.fixed_length

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._bytes == other._bytes

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._bytes < other._bytes

    def __hash__(self):
        return hash((type(self).__name__, self._bytes))

    def __repr__(self):
        return f"{type(self).__name__}({self._bytes.hex()})"

    def serialize(self, writer: BinaryWriter) -> None:
        writer.write_fixed(self._bytes)

    @classmethod
    def deserialize(cls, reader: BinaryReader):
        return cls(reader.read_fixed(cls.fixed_length))


def serialize(obj: Any) -> bytes:
    writer = BinaryWriter()
    writer.write(obj)
    return writer.to_bytes()


def deserialize(cls: Type[T], data: bytes) -> T:
    """Decode ``cls`` from ``data``; the buffer must be consumed exactly."""
    reader = BinaryReader(data)
    obj = reader.read(cls)
    if reader.remaining:
        raise TrailingDataError(f"unexpected {reader.remaining} bytes after {cls.__name__}")
    return obj
