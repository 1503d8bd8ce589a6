from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Dict, Tuple, Type
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ed25519
from .errors import (
    InvalidKeyFormatError, InvalidKeyLengthError, InvalidSecretKeyError, UnknownCurveError,
    UnknownKeyTypeError,
)
from .keys import DEFAULT_KEY_TYPE, KeyType, PublicKey, Signature
from .logger import get_logger
from .utils import base_decode, base_encode, split_key_string

log = get_logger("nearclient.crypto")

ED25519_SEED_LENGTH = 32
ED25519_PUBLIC_KEY_LENGTH = 32
ED25519_SECRET_KEY_LENGTH = ED25519_SEED_LENGTH + ED25519_PUBLIC_KEY_LENGTH
ED25519_SIGNATURE_LENGTH = 64

# --------- Ed25519 primitive (sign/verify) ----------
# Secret keys use the NaCl layout: seed(32) || public key(32).

def ed25519_generate() -> Tuple[bytes, bytes]:
    sk = ed25519.Ed25519PrivateKey.generate()
    pk = sk.public_key().public_bytes_raw()
    return sk.private_bytes_raw() + pk, pk

def ed25519_keypair_from_seed(seed: bytes) -> Tuple[bytes, bytes]:
    if len(seed) != ED25519_SEED_LENGTH:
        raise InvalidKeyLengthError(f"ed25519 seed must be {ED25519_SEED_LENGTH} bytes, got {len(seed)}")
    pk = ed25519.Ed25519PrivateKey.from_private_bytes(seed).public_key().public_bytes_raw()
    return bytes(seed) + pk, pk

def ed25519_keypair_from_secret(secret: bytes) -> Tuple[bytes, bytes]:
    """Re-derive (secret, public) from a 64-byte secret; the public half is never trusted."""
    if len(secret) != ED25519_SECRET_KEY_LENGTH:
        raise InvalidKeyLengthError(
            f"ed25519 secret key must be {ED25519_SECRET_KEY_LENGTH} bytes, got {len(secret)}"
        )
    full, pk = ed25519_keypair_from_seed(secret[:ED25519_SEED_LENGTH])
    if pk != secret[ED25519_SEED_LENGTH:]:
        raise InvalidSecretKeyError("ed25519 secret key does not match its embedded public key")
    return full, pk

def ed25519_sign(secret: bytes, data: bytes) -> bytes:
    sk = ed25519.Ed25519PrivateKey.from_private_bytes(secret[:ED25519_SEED_LENGTH])
    return sk.sign(bytes(data))

def ed25519_verify(pub_raw: bytes, sig: bytes, data: bytes) -> bool:
    if len(sig) != ED25519_SIGNATURE_LENGTH:
        return False
    try:
        ed25519.Ed25519PublicKey.from_public_bytes(pub_raw).verify(bytes(sig), bytes(data))
        return True
    except InvalidSignature:
        return False


# --------- KeyPair capability ----------
class KeyPair(ABC):
    """
    Signing capability bound to one public key.

    Exactly one subclass exists per KeyType; construction goes through
    from_random() / from_string(), which dispatch on the curve. Instances
    are immutable and safe to share between threads.
    """

    @abstractmethod
    def sign(self, message: bytes) -> Signature:
        ...

    @abstractmethod
    def verify(self, message: bytes, signature: bytes) -> bool:
        ...

    @abstractmethod
    def to_string(self) -> str:
        ...

    @abstractmethod
    def get_public_key(self) -> PublicKey:
        ...

    @property
    def public_key(self) -> PublicKey:
        return self.get_public_key()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(public_key='{self.get_public_key()}')"

    @staticmethod
    def from_random(curve: KeyType = DEFAULT_KEY_TYPE) -> "KeyPair":
        return key_pair_from_random(curve)

    @staticmethod
    def from_string(encoded: str) -> "KeyPair":
        return key_pair_from_string(encoded)


class KeyPairEd25519(KeyPair):
    """
    Key pair for the Ed25519 curve: generating, encoding, signing and
    verifying.

    ``secret_key`` is the base58 encoding of seed || public key, the same
    string NaCl-based wallets store. The public key is always derived from
    the seed at construction time.
    """
    key_type = KeyType.ED25519

    __slots__ = ("_secret_key", "_secret", "_public_key")

    def __init__(self, secret_key: str):
        secret, pk = ed25519_keypair_from_secret(base_decode(secret_key))
        object.__setattr__(self, "_secret_key", secret_key)
        object.__setattr__(self, "_secret", secret)
        object.__setattr__(self, "_public_key", PublicKey.from_bytes(pk, self.key_type))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def from_random(cls, curve: KeyType = KeyType.ED25519) -> "KeyPairEd25519":
        if curve is not cls.key_type:
            raise UnknownCurveError(f"{cls.__name__} cannot generate {curve} keys")
        secret, _ = ed25519_generate()
        kp = cls(base_encode(secret))
        log.debug(f"generated key pair {kp.get_public_key()}")
        return kp

    @classmethod
    def from_seed(cls, seed: bytes) -> "KeyPairEd25519":
        secret, _ = ed25519_keypair_from_seed(seed)
        return cls(base_encode(secret))

    @property
    def secret_key(self) -> str:
        return self._secret_key

    def sign(self, message: bytes) -> Signature:
        return Signature(ed25519_sign(self._secret, message), self._public_key)

    def verify(self, message: bytes, signature: bytes) -> bool:
        ok = ed25519_verify(self._public_key.bytes, signature, message)
        if not ok:
            log.debug(f"signature mismatch for {self._public_key}")
        return ok

    def to_string(self) -> str:
        return f"{self.key_type}:{self._secret_key}"

    def get_public_key(self) -> PublicKey:
        return self._public_key


# Adding a curve: one KeyType member, one entry here.
_KEY_PAIR_CLASSES: Dict[KeyType, Type[KeyPair]] = {
    KeyType.ED25519: KeyPairEd25519,
}


def key_pair_from_random(curve: KeyType = DEFAULT_KEY_TYPE) -> KeyPair:
    return _KEY_PAIR_CLASSES[curve].from_random(curve)


def key_pair_from_string(encoded: str) -> KeyPair:
    """Parse ``[<curve>:]<secret key>``; the curve defaults to ed25519."""
    parts = split_key_string(encoded)
    if len(parts) == 1:
        return _KEY_PAIR_CLASSES[DEFAULT_KEY_TYPE](parts[0])
    if len(parts) == 2:
        try:
            curve = KeyType.from_name(parts[0])
        except UnknownKeyTypeError:
            log.debug(f"rejected secret key with unknown curve {parts[0]!r}")
            raise UnknownCurveError(f"Unknown curve: {parts[0]}") from None
        return _KEY_PAIR_CLASSES[curve](parts[1])
    raise InvalidKeyFormatError("Invalid encoded key format, must be <curve>:<encoded key>")
