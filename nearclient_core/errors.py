# nearclient_core/errors.py
from __future__ import annotations


class NearCryptoError(Exception):
    pass


# ---------------------------
# Codec failures
# ---------------------------
class DecodeError(NearCryptoError, ValueError):
    pass


class InvalidCharacterError(DecodeError):
    pass


class BorshDecodingError(DecodeError):
    pass


class UnexpectedEofError(BorshDecodingError):
    pass


class UnknownDataError(BorshDecodingError):
    pass


class TrailingDataError(BorshDecodingError):
    pass


# ---------------------------
# Textual key failures
# ---------------------------
class KeyFormatError(NearCryptoError, ValueError):
    pass


class InvalidKeyFormatError(KeyFormatError):
    pass


class UnknownKeyTypeError(KeyFormatError):
    pass


class UnknownCurveError(UnknownKeyTypeError):
    pass


class InvalidKeyLengthError(KeyFormatError):
    pass


class InvalidSecretKeyError(KeyFormatError):
    pass
