"""
nearclient_core.keys
--------------------
Key types, public keys and signature values.

Text form:   ``[<curve>:]<base58 payload>``  (curve always emitted on output)
Binary form: ``<key type tag: u8><payload: 32 bytes>``  (33 bytes total)
"""

from __future__ import annotations
import functools
from dataclasses import dataclass
from enum import Enum
from .borsh import BinaryReader, BinaryWriter, FixedLengthBytes
from .errors import (
    InvalidKeyFormatError, InvalidKeyLengthError, UnknownDataError, UnknownKeyTypeError,
)
from .logger import get_logger
from .utils import base_decode, base_encode, split_key_string

log = get_logger("nearclient.keys")


class KeyType(Enum):
    """All supported key types. The value is the textual curve name."""
    ED25519 = "ed25519"

    def __str__(self) -> str:
        return self.value

    @property
    def tag(self) -> int:
        return _TAG_BY_KEY_TYPE[self]

    @classmethod
    def from_name(cls, name: str) -> "KeyType":
        try:
            return _KEY_TYPE_BY_NAME[name]
        except KeyError:
            raise UnknownKeyTypeError(f"unknown key type: {name!r}") from None

    def serialize(self, writer: BinaryWriter) -> None:
        writer.write_u8(self.tag)

    @classmethod
    def deserialize(cls, reader: BinaryReader) -> "KeyType":
        value = reader.read_u8()
        try:
            return _KEY_TYPE_BY_TAG[value]
        except KeyError:
            raise UnknownDataError(f"unknown key type tag: {value}") from None


# Tags are part of the wire format and must never be renumbered.
_TAG_BY_KEY_TYPE = {
    KeyType.ED25519: 0,
}
_KEY_TYPE_BY_TAG = {tag: kt for kt, tag in _TAG_BY_KEY_TYPE.items()}
_KEY_TYPE_BY_NAME = {kt.value: kt for kt in KeyType}

DEFAULT_KEY_TYPE = KeyType.ED25519


class PublicKeyPayload(FixedLengthBytes):
    fixed_length = 32


class SignaturePayload(FixedLengthBytes):
    fixed_length = 64


@functools.total_ordering
@dataclass(frozen=True)
class PublicKey:
    """PublicKey representation that has type and bytes of the key."""
    key_type: KeyType
    data: PublicKeyPayload

    @classmethod
    def from_bytes(cls, raw: bytes, key_type: KeyType = DEFAULT_KEY_TYPE) -> "PublicKey":
        if len(raw) != PublicKeyPayload.fixed_length:
            raise InvalidKeyLengthError(
                f"{key_type} public key must be {PublicKeyPayload.fixed_length} bytes, got {len(raw)}"
            )
        return cls(key_type, PublicKeyPayload(raw))

    @classmethod
    def from_string(cls, encoded: str) -> "PublicKey":
        parts = split_key_string(encoded)
        if len(parts) == 1:
            key_type, payload = DEFAULT_KEY_TYPE, parts[0]
        elif len(parts) == 2:
            key_type, payload = KeyType.from_name(parts[0]), parts[1]
        else:
            log.debug(f"rejected public key with {len(parts)} segments")
            raise InvalidKeyFormatError("Invalid encoded key format, must be <curve>:<encoded key>")
        return cls.from_bytes(base_decode(payload), key_type)

    def to_string(self) -> str:
        return f"{self.key_type}:{base_encode(self.data.bytes)}"

    def __str__(self) -> str:
        return self.to_string()

    def __lt__(self, other):
        if not isinstance(other, PublicKey):
            return NotImplemented
        return (self.key_type.tag, self.data.bytes) < (other.key_type.tag, other.data.bytes)

    @property
    def bytes(self) -> bytes:
        return self.data.bytes

    def serialize(self, writer: BinaryWriter) -> None:
        writer.write(self.key_type)
        writer.write(self.data)

    @classmethod
    def deserialize(cls, reader: BinaryReader) -> "PublicKey":
        key_type = reader.read(KeyType)
        data = reader.read(PublicKeyPayload)
        return cls(key_type, data)


@dataclass(frozen=True)
class Signature:
    """
    Detached signature bytes plus the public key that verifies them.

    Holds its own copy of the PublicKey, so it outlives the KeyPair that
    produced it. Binary form is the public key followed by the 64 signature
    bytes.
    """
    signature: bytes
    public_key: PublicKey

    def to_string(self) -> str:
        return f"{self.public_key.key_type}:{base_encode(self.signature)}"

    def __str__(self) -> str:
        return self.to_string()

    def serialize(self, writer: BinaryWriter) -> None:
        writer.write(self.public_key)
        writer.write(SignaturePayload(self.signature))

    @classmethod
    def deserialize(cls, reader: BinaryReader) -> "Signature":
        public_key = reader.read(PublicKey)
        payload = reader.read(SignaturePayload)
        return cls(payload.bytes, public_key)
