import struct

import pytest

from lierokit import fixedmath as fm


def test_itof_one():
    assert fm.itof(1) == 1 << 16


@pytest.mark.parametrize("v", [-500, -1, 0, 1, 7, 504, 32767])
def test_round_trip(v):
    assert fm.ftoi(fm.itof(v)) == v


def test_ftoi_floors_negative():
    assert fm.ftoi(-1) == -1
    assert fm.ftoi(fm.itof(3) + 0xFFFF) == 3


def test_itof_wraps_32_bits():
    assert fm.itof(0x8000) == -(2**31)


def test_vector_length():
    assert fm.vector_length(3, 4) == 5
    assert fm.vector_length(0, 0) == 0
    assert fm.vector_length(-3, -4) == 5


def test_distance_symmetric():
    assert fm.distance_to(10, 20, 13, 24) == fm.distance_to(13, 24, 10, 20) == 5


def test_load_tables(tmp_path):
    data = b"".join(struct.pack("<ii", i * 100, -i) for i in range(128))
    p = tmp_path / "sintab.dat"
    p.write_bytes(data)
    tables = fm.load_tables(str(p))
    assert len(tables.sin) == len(tables.cos) == 128
    assert tables.cos[5] == 500
    assert tables.sin[5] == -5


def test_load_tables_short_file(tmp_path):
    p = tmp_path / "sintab.dat"
    p.write_bytes(b"\x00" * 100)
    with pytest.raises(EOFError):
        fm.load_tables(str(p))