import io

import pytest

from lierokit import binio


def test_uint8_round_trip():
    buf = io.BytesIO()
    for v in (0, 1, 127, 255, 256 + 7):
        binio.write_uint8(buf, v)
    buf.seek(0)
    assert [binio.read_uint8(buf) for _ in range(5)] == [0, 1, 127, 255, 7]


def test_sint8_negative():
    assert binio.read_sint8(io.BytesIO(b"\xff")) == -1
    assert binio.read_sint8(io.BytesIO(b"\x7f")) == 127


def test_uint16_little_endian():
    assert binio.read_uint16(io.BytesIO(b"\x34\x12")) == 0x1234


def test_uint16_round_trip():
    buf = io.BytesIO()
    for v in (0, 0x84, 600, 0xFFFF):
        binio.write_uint16(buf, v)
    assert len(buf.getvalue()) == 8
    buf.seek(0)
    assert [binio.read_uint16(buf) for _ in range(4)] == [0, 0x84, 600, 0xFFFF]


def test_sint16_sign():
    assert binio.read_sint16(io.BytesIO(b"\xff\xff")) == -1
    assert binio.read_sint16(io.BytesIO(b"\xff\x7f")) == 0x7FFF


def test_uint32_and_sint32():
    data = b"\x00\x00\x00\x80"
    assert binio.read_uint32(io.BytesIO(data)) == 2**31
    assert binio.read_sint32(io.BytesIO(data)) == -(2**31)


def test_short_read_raises():
    with pytest.raises(EOFError):
        binio.read_uint32(io.BytesIO(b"\x01\x02"))


def test_write_pascal_string_lierostring():
    buf = io.BytesIO()
    binio.write_pascal_string(buf, "LIERO", 9)
    assert buf.getvalue() == b"\x05LIERO\x00\x00\x00"


def test_write_pascal_string_truncates():
    buf = io.BytesIO()
    binio.write_pascal_string(buf, "abcdefghijk", 9)
    data = buf.getvalue()
    assert len(data) == 9
    buf.seek(0)
    assert binio.read_pascal_field(buf, 9) == "abcdefgh"


def test_pascal_field_round_trip():
    buf = io.BytesIO()
    binio.write_pascal_string(buf, "Player", 21)
    binio.write_pascal_string(buf, "", 21)
    assert len(buf.getvalue()) == 42
    buf.seek(0)
    assert binio.read_pascal_field(buf, 21) == "Player"
    assert binio.read_pascal_field(buf, 21) == ""


def test_read_pascal_string_and_at():
    data = b"xx\x03abc\x02de"
    f = io.BytesIO(data)
    assert binio.read_pascal_string_at(f, 2) == "abc"
    assert binio.read_pascal_string(f) == "de"


def test_read_pascal_string_truncated_raises():
    with pytest.raises(EOFError):
        binio.read_pascal_string(io.BytesIO(b"\x05ab"))