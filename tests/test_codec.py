import pytest
from nearclient_core.utils import base_encode, base_decode
from nearclient_core.borsh import (
    BinaryReader, BinaryWriter, FixedLengthBytes, serialize, deserialize,
)
from nearclient_core.errors import (
    DecodeError, InvalidCharacterError, TrailingDataError, UnexpectedEofError,
)


class _Payload4(FixedLengthBytes):
    fixed_length = 4


def test_base_encode_known_vectors():
    assert base_encode(b"") == ""
    assert base_encode(b"a") == "2g"
    assert base_encode(b"hello world") == "StV1DL6CwTryKyV"
    assert base_encode(b"\x00\x00\x01") == "112"
    assert base_encode(bytes(32)) == "1" * 32


def test_base_decode_known_vectors():
    assert base_decode("") == b""
    assert base_decode("2g") == b"a"
    assert base_decode("StV1DL6CwTryKyV") == b"hello world"
    assert base_decode("112") == b"\x00\x00\x01"


def test_base_roundtrip_preserves_leading_zeros():
    data = b"\x00\x00\xff\x10\x00"
    assert base_decode(base_encode(data)) == data


@pytest.mark.parametrize("bad", ["0abc", "abcO", "Il", "ab c", "abc\n", "ab+c"])
def test_base_decode_rejects_foreign_characters(bad):
    with pytest.raises(InvalidCharacterError):
        base_decode(bad)


def test_invalid_character_is_decode_error():
    with pytest.raises(DecodeError):
        base_decode("0")
    with pytest.raises(ValueError):
        base_decode("0")


def test_writer_concatenates_in_order():
    w = BinaryWriter()
    w.write_u8(7)
    w.write_fixed(b"\x01\x02")
    w.write(_Payload4(b"abcd"))
    assert w.to_bytes() == b"\x07\x01\x02abcd"
    assert len(w) == 7


def test_writer_rejects_out_of_range_u8():
    with pytest.raises(ValueError):
        BinaryWriter().write_u8(256)


def test_reader_advances_and_reports_remaining():
    r = BinaryReader(b"\x05xyz")
    assert r.read_u8() == 5
    assert r.remaining == 3
    assert r.read_fixed(2) == b"xy"
    assert r.remaining == 1


def test_reader_eof():
    r = BinaryReader(b"\x01\x02")
    with pytest.raises(UnexpectedEofError):
        r.read_fixed(3)
    with pytest.raises(UnexpectedEofError):
        BinaryReader(b"").read_u8()


def test_fixed_length_bytes_rejects_wrong_length():
    with pytest.raises(ValueError):
        _Payload4(b"abc")
    with pytest.raises(ValueError):
        _Payload4(b"abcde")


def test_fixed_length_bytes_is_immutable():
    p = _Payload4(b"abcd")
    with pytest.raises(AttributeError):
        p._bytes = b"wxyz"


def test_fixed_length_bytes_roundtrip():
    p = _Payload4(b"\x00\x01\x02\x03")
    raw = serialize(p)
    assert raw == b"\x00\x01\x02\x03"
    assert deserialize(_Payload4, raw) == p


def test_deserialize_rejects_trailing_bytes():
    with pytest.raises(TrailingDataError):
        deserialize(_Payload4, b"abcde")


def test_deserialize_truncated():
    with pytest.raises(UnexpectedEofError):
        deserialize(_Payload4, b"abc")
