"""
nearclient_core.utils
---------------------
Base58 text encoding for keys, secrets and signatures.

Uses the Bitcoin alphabet (no 0, O, I or l). Every leading zero byte maps to
a leading "1", so the encoding is reversible for any byte string, including
all-zero payloads.
"""

from __future__ import annotations
from typing import Dict, List
from .errors import InvalidCharacterError

B58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_B58_INDEX: Dict[str, int] = {ch: i for i, ch in enumerate(B58_ALPHABET)}


def base_encode(data: bytes) -> str:
    data = bytes(data)
    stripped = data.lstrip(b"\x00")
    zeros = len(data) - len(stripped)

    num = int.from_bytes(stripped, "big")
    out = []
    while num > 0:
        num, rem = divmod(num, 58)
        out.append(B58_ALPHABET[rem])

    return "1" * zeros + "".join(reversed(out))


def base_decode(text: str) -> bytes:
    """Decode a base58 string; raises InvalidCharacterError on foreign characters."""
    num = 0
    for pos, ch in enumerate(text):
        digit = _B58_INDEX.get(ch)
        if digit is None:
            raise InvalidCharacterError(f"invalid base58 character {ch!r} at position {pos}")
        num = num * 58 + digit

    zeros = len(text) - len(text.lstrip("1"))
    body = num.to_bytes((num.bit_length() + 7) // 8, "big") if num else b""
    return b"\x00" * zeros + body



def split_key_string(encoded: str) -> List[str]:
    """Split ``[<curve>:]<payload>`` on ':' dropping empty segments."""
    return [part for part in encoded.split(":") if part]
