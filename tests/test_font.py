import pytest

from lierokit.blit import Surface
from lierokit.font import FONT_FILE_SIZE, Font, Glyph


def _font_bytes():
    data = bytearray(FONT_FILE_SIZE)
    for i in range(250):
        base = i * 64 + 1
        # top-left pixel of each row set, plus record index marker in row 0 col 1 for odd glyphs
        for y in range(8):
            data[base + y * 8] = 1
            data[base + y * 8 + 7] = 0xEE  # padding column, must be dropped
        if i % 2:
            data[base + 1] = 1
        data[base + 63] = i % 8 + 1
    return bytes(data)


def test_file_size_matches_format():
    assert FONT_FILE_SIZE == 250 * 8 * 8 + 1
    font = Font.from_bytes(bytes(FONT_FILE_SIZE))
    assert len(font.glyphs) == 250
    assert all(g.width == 0 for g in font.glyphs)


def test_from_bytes_parses_glyphs():
    font = Font.from_bytes(_font_bytes())
    assert len(font.glyphs) == 250
    g = font.glyphs[3]
    assert g.width == 3 % 8 + 1
    assert len(g.data) == 56
    assert 0xEE not in g.data
    assert g.data[1] == 1
    assert font.glyphs[2].data[1] == 0


def test_from_bytes_rejects_short_data():
    with pytest.raises(ValueError):
        Font.from_bytes(bytes(100))


def test_load_from_file(tmp_path):
    path = tmp_path / "font.dat"
    path.write_bytes(_font_bytes())
    font = Font.load(str(path))
    assert [g.width for g in font.glyphs[:8]] == [1, 2, 3, 4, 5, 6, 7, 8]


def test_default_font_is_blank():
    font = Font()
    assert len(font.glyphs) == 250
    assert font.get_width("ABC") == 0


def test_get_width_sums_glyph_widths():
    glyphs = [Glyph(width=i) for i in range(250)]
    font = Font(glyphs)
    # byte 'A' uses glyph index ord('A') - 2
    assert font.get_width("A") == ord("A") - 2
    assert font.get_width(b"\x01\xfc") == 0
    assert font.get_width("AB") == font.get_width("A") + font.get_width("B")


def test_draw_char_draws_mask():
    data = bytearray(56)
    data[0] = 1
    data[55] = 1
    glyphs = [Glyph() for _ in range(250)]
    glyphs[10] = Glyph(bytes(data), 5)
    font = Font(glyphs)
    s = Surface(32, 32)
    font.draw_char(s, 10, 4, 4, 9)
    assert s.get_pixel(4, 4) == 9
    assert s.get_pixel(4 + 6, 4 + 7) == 9
    assert sum(1 for p in s.pixels if p) == 2


def test_draw_char_ignores_invalid():
    glyphs = [Glyph(bytes([1] * 56), 5) for _ in range(250)]
    font = Font(glyphs)
    s = Surface(32, 32)
    font.draw_char(s, 1, 4, 4, 9)
    font.draw_char(s, 10, 32 - 7, 4, 9)
    font.draw_char(s, 10, -1, 4, 9)
    assert bytes(s.pixels) == bytes(32 * 32)


def test_draw_text_advances_and_wraps():
    solid = Glyph(bytes([1] * 56), 8)
    font = Font([solid] * 250)
    s = Surface(40, 40)
    font.draw_text(s, "ab\nc", 0, 0, 7)
    assert s.get_pixel(0, 0) == 7
    assert s.get_pixel(8, 0) == 7
    assert s.get_pixel(7, 0) == 0
    assert s.get_pixel(0, 8) == 7
    assert s.get_pixel(8, 8) == 0
    assert sum(1 for p in s.pixels if p) == 3 * 56


def test_draw_text_skips_bad_y():
    font = Font([Glyph(bytes([1] * 56), 8)] * 250)
    s = Surface(40, 16)
    font.draw_text(s, "a", 0, 8, 7)
    font.draw_text(s, "a", 0, -1, 7)
    assert bytes(s.pixels) == bytes(40 * 16)


def test_draw_text_matches_draw_char():
    font = Font.from_bytes(_font_bytes())
    a = Surface(32, 32)
    b = Surface(32, 32)
    font.draw_text(a, "e", 3, 3, 5)
    font.draw_char(b, ord("e") - 2, 3, 3, 5)
    assert a.pixels == b.pixels