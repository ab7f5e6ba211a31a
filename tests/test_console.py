import io
import sys

import pytest

from lierokit.console import Console


@pytest.fixture
def out():
    return io.StringIO()


def test_default_attributes(out):
    assert Console(out).get_attributes() == 0x07


def test_write_and_write_line(out):
    con = Console(out)
    con.write("Loading")
    con.write_line("OK")
    assert out.getvalue() == "LoadingOK\n"


def test_set_attributes_round_trip(out):
    con = Console(out)
    con.set_attributes(0x2F)
    assert con.get_attributes() == 0x2F


def test_warning_text_and_restore(out):
    con = Console(out)
    con.set_attributes(0x1E)
    seen = []

    class Spy(io.StringIO):
        def write(self, s):
            seen.append(con.get_attributes())
            return super().write(s)

    con.stream = Spy()
    con.write_warning("Attempt to play non-existent sound")
    assert con.stream.getvalue() == "WARNING: Attempt to play non-existent sound\n"
    assert seen and all(a == 0x4F for a in seen)
    assert con.get_attributes() == 0x1E


def test_local_attributes_restores_on_error(out):
    con = Console(out)
    with pytest.raises(RuntimeError):
        with con.local_attributes(0x4F):
            assert con.get_attributes() == 0x4F
            raise RuntimeError("boom")
    assert con.get_attributes() == 0x07


def test_text_bar_plain(out):
    con = Console(out)
    con.write_text_bar("Title", 0x1F)
    assert out.getvalue() == "Title\n"
    assert con.get_attributes() == 0x1F


def test_text_bar_strips_colour_prefix(out):
    con = Console(out)
    con.write_text_bar("\x00\x0f\x01Title", 0x70)
    assert out.getvalue() == "Title\n"
    assert con.get_attributes() == 0x70


def test_clear_on_non_terminal_writes_nothing(out):
    con = Console(out)
    con.write("x")
    con.clear()
    assert out.getvalue() == "x"


def test_clear_on_terminal(out):
    class Tty(io.StringIO):
        def isatty(self):
            return True

    stream = Tty()
    Console(stream).clear()
    assert stream.getvalue().startswith("\x1b[2J")


def test_wait_for_any_key_reads_terminal(monkeypatch, out):
    class FakeStdin:
        def __init__(self):
            self.reads = 0

        def isatty(self):
            return True

        def readline(self):
            self.reads += 1
            return "\n"

    fake = FakeStdin()
    monkeypatch.setattr(sys, "stdin", fake)
    con = Console(out)
    result = con.wait_for_any_key()
    assert result is None
    assert fake.reads == 1
    assert con.get_attributes() == 0x07