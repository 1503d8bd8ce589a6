"""
nearclient Core Package
=======================
Cryptographic identity primitives shared by nearclient components.

Provides:
- Key types, public keys and signature values with text and binary forms
- Ed25519 key pairs: generation, parsing, signing and verification
- Base58 and Borsh-style codecs used on the wire
"""
from .errors import (
    NearCryptoError, DecodeError, InvalidCharacterError, BorshDecodingError,
    UnexpectedEofError, UnknownDataError, TrailingDataError, KeyFormatError,
    InvalidKeyFormatError, UnknownKeyTypeError, UnknownCurveError,
    InvalidKeyLengthError, InvalidSecretKeyError,
)
from .utils import base_encode, base_decode
from .borsh import BinaryReader, BinaryWriter, FixedLengthBytes, serialize, deserialize
from .keys import KeyType, DEFAULT_KEY_TYPE, PublicKey, PublicKeyPayload, Signature, SignaturePayload
from .crypto import KeyPair, KeyPairEd25519, key_pair_from_random, key_pair_from_string

__all__ = [
    "NearCryptoError", "DecodeError", "InvalidCharacterError", "BorshDecodingError",
    "UnexpectedEofError", "UnknownDataError", "TrailingDataError", "KeyFormatError",
    "InvalidKeyFormatError", "UnknownKeyTypeError", "UnknownCurveError",
    "InvalidKeyLengthError", "InvalidSecretKeyError",
    "base_encode", "base_decode",
    "BinaryReader", "BinaryWriter", "FixedLengthBytes", "serialize", "deserialize",
    "KeyType", "DEFAULT_KEY_TYPE", "PublicKey", "PublicKeyPayload", "Signature", "SignaturePayload",
    "KeyPair", "KeyPairEd25519", "key_pair_from_random", "key_pair_from_string",
]
